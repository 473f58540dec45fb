"""Domain events for the ContactMessage aggregate."""

from protean.fields import DateTime, Identifier, String

from backoffice.domain import backoffice


@backoffice.event(part_of="ContactMessage")
class ContactMessageReceived:
    """A visitor sent a message through the contact form."""

    __version__ = 1

    message_id = Identifier(required=True)
    name = String(required=True)
    email = String(required=True)
    received_at = DateTime(required=True)


@backoffice.event(part_of="ContactMessage")
class MessageStatusChanged:
    __version__ = 1

    message_id = Identifier(required=True)
    previous_status = String(required=True)
    new_status = String(required=True)
    changed_at = DateTime(required=True)
