"""Store settings — commands and handler."""

from protean import handle
from protean.fields import Boolean, String
from protean.utils.globals import current_domain

from ordering.domain import logger, ordering
from ordering.settings.store_settings import CONTACT_FIELDS, StoreSettings


@ordering.command(part_of="StoreSettings")
class SetOrderIntake:
    receive_orders = Boolean(required=True)


@ordering.command(part_of="StoreSettings")
class UpdateSiteContact:
    phone = String(max_length=30)
    email = String(max_length=254)
    address = String(max_length=255)
    delivery_hours = String(max_length=100)
    business_hours_monday_friday = String(max_length=100)
    business_hours_saturday = String(max_length=100)
    business_hours_sunday = String(max_length=100)
    logo_url = String(max_length=500)


@ordering.command_handler(part_of=StoreSettings)
class StoreSettingsHandler:
    @handle(SetOrderIntake)
    def set_order_intake(self, command):
        repo = current_domain.repository_for(StoreSettings)
        settings = repo.current()
        settings.set_order_intake(command.receive_orders)
        repo.add(settings)
        logger.info("order_intake_changed", receive_orders=settings.receive_orders)
        return settings.receive_orders

    @handle(UpdateSiteContact)
    def update_site_contact(self, command):
        repo = current_domain.repository_for(StoreSettings)
        settings = repo.current()
        settings.update_contact_info(**{field: getattr(command, field) for field in CONTACT_FIELDS})
        repo.add(settings)
        logger.info("site_contact_updated")
        return settings.contact_info()
