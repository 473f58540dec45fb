"""ContactMessage aggregate — a message sent through the contact form.

State Machine:
    UNREAD → RESPONDED → RESOLVED
    UNREAD → RESOLVED
"""

from datetime import UTC, datetime
from enum import Enum

from protean.fields import DateTime, String, Text

from backoffice.domain import backoffice
from backoffice.message.events import ContactMessageReceived, MessageStatusChanged
from shared.errors import InvalidTransitionError


class MessageStatus(Enum):
    UNREAD = "unread"
    RESPONDED = "responded"
    RESOLVED = "resolved"


_VALID_TRANSITIONS = {
    MessageStatus.UNREAD: {MessageStatus.RESPONDED, MessageStatus.RESOLVED},
    MessageStatus.RESPONDED: {MessageStatus.RESOLVED},
    MessageStatus.RESOLVED: set(),  # Terminal
}


@backoffice.aggregate
class ContactMessage:
    name = String(required=True, max_length=100)
    email = String(required=True, max_length=254)
    phone = String(max_length=30)
    message = Text(required=True)
    status = String(choices=MessageStatus, default=MessageStatus.UNREAD.value)
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def submit(cls, name, email, message, phone=None):
        now = datetime.now(UTC)
        contact = cls(
            name=name,
            email=email,
            phone=phone,
            message=message,
            status=MessageStatus.UNREAD.value,
            created_at=now,
            updated_at=now,
        )
        contact.raise_(
            ContactMessageReceived(
                message_id=str(contact.id),
                name=name,
                email=email,
                received_at=now,
            )
        )
        return contact

    def change_status(self, new_status):
        try:
            target = MessageStatus(new_status)
        except ValueError:
            raise InvalidTransitionError({"status": [f"Unknown message status '{new_status}'"]}) from None

        current = MessageStatus(self.status)
        if target not in _VALID_TRANSITIONS[current]:
            raise InvalidTransitionError({"status": [f"Cannot move message from {current.value} to {target.value}"]})

        now = datetime.now(UTC)
        self.status = target.value
        self.updated_at = now
        self.raise_(
            MessageStatusChanged(
                message_id=str(self.id),
                previous_status=current.value,
                new_status=target.value,
                changed_at=now,
            )
        )
