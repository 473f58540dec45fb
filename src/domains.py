"""Registry of the bounded contexts served by this process."""

DOMAIN_NAMES = ("ordering", "notifications", "backoffice")


def get_domain(name, init=True):
    """Import a domain by name, initializing it unless ``init`` is False."""
    if name == "ordering":
        from ordering.domain import ordering as domain
    elif name == "notifications":
        from notifications.domain import notifications as domain
    elif name == "backoffice":
        from backoffice.domain import backoffice as domain
    else:
        raise ValueError(f"Unknown domain: {name}")

    if init:
        domain.init()
    return domain
