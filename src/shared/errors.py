"""Error taxonomy shared by all bounded contexts.

Rule violations subclass Protean's ValidationError so they carry field-keyed
messages and map to HTTP 400 through Protean's FastAPI exception handlers.
Infrastructure failures are plain exceptions and are never shown verbatim to
end users.
"""

from contextlib import contextmanager

import structlog
from protean.exceptions import ObjectNotFoundError, ValidationError

logger = structlog.get_logger(__name__)


class OrdersClosedError(ValidationError):
    """New orders are switched off by the store's order-intake setting."""


class InvalidTransitionError(ValidationError):
    """A status change is not allowed from the current status."""


class PersistenceError(Exception):
    """The backing store rejected a read or a write."""


class NotificationDispatchError(Exception):
    """An email could not be handed to the delivery channel."""


@contextmanager
def persistence_errors(operation: str):
    """Re-raise unexpected store failures as PersistenceError.

    Domain errors (validation, not-found) pass through untouched.
    """
    try:
        yield
    except (ValidationError, ObjectNotFoundError):
        raise
    except Exception as exc:
        logger.error("persistence_failed", operation=operation, error=str(exc))
        raise PersistenceError(f"Could not complete '{operation}'. Please try again.") from exc
