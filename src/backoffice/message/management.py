"""Contact messages — commands and handler."""

from protean import handle
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from backoffice.domain import backoffice, logger
from backoffice.message.message import ContactMessage


@backoffice.command(part_of="ContactMessage")
class SubmitContactMessage:
    name = String(required=True, max_length=100)
    email = String(required=True, max_length=254)
    phone = String(max_length=30)
    message = Text(required=True)


@backoffice.command(part_of="ContactMessage")
class UpdateMessageStatus:
    message_id = Identifier(required=True)
    status = String(required=True, max_length=20)


@backoffice.command(part_of="ContactMessage")
class DeleteContactMessage:
    message_id = Identifier(required=True)


@backoffice.command_handler(part_of=ContactMessage)
class ContactMessageHandler:
    @handle(SubmitContactMessage)
    def submit(self, command):
        contact = ContactMessage.submit(
            name=command.name,
            email=command.email,
            message=command.message,
            phone=command.phone,
        )
        current_domain.repository_for(ContactMessage).add(contact)
        logger.info("contact_message_received", message_id=str(contact.id))
        return str(contact.id)

    @handle(UpdateMessageStatus)
    def update_status(self, command):
        repo = current_domain.repository_for(ContactMessage)
        contact = repo.get(command.message_id)
        contact.change_status(command.status)
        repo.add(contact)

    @handle(DeleteContactMessage)
    def delete(self, command):
        repo = current_domain.repository_for(ContactMessage)
        repo._dao.delete(repo.get(command.message_id))
