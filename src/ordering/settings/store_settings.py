"""Store-wide settings: the order-intake kill switch and public contact details.

There is a single StoreSettings record with a fixed identity. The PlaceOrder
handler reads it and passes ``receive_orders`` into the cart builder, so the
builder itself never looks anything up. The contact block feeds the public
site header, footer and contact page.
"""

import json
from datetime import UTC, datetime

from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Boolean, DateTime, Identifier, String, Text

from ordering.domain import ordering

STORE_SETTINGS_ID = "store"

# Shown whenever a contact field has not been configured
DEFAULT_CONTACT_INFO = {
    "phone": "",
    "email": "",
    "address": "",
    "delivery_hours": "3:30 PM - 5:30 PM",
    "business_hours_monday_friday": "8:00 AM - 6:00 PM",
    "business_hours_saturday": "9:00 AM - 4:00 PM",
    "business_hours_sunday": "Emergency Only",
    "logo_url": "",
}

CONTACT_FIELDS = tuple(DEFAULT_CONTACT_INFO)


@ordering.event(part_of="StoreSettings")
class OrderIntakeChanged:
    __version__ = 1

    receive_orders = Boolean(required=True)
    changed_at = DateTime(required=True)


@ordering.event(part_of="StoreSettings")
class SiteContactUpdated:
    __version__ = 1

    changes = Text(required=True)  # JSON: {field: new value}
    updated_at = DateTime(required=True)


@ordering.aggregate
class StoreSettings:
    settings_id = Identifier(identifier=True, default=STORE_SETTINGS_ID)
    receive_orders = Boolean(default=True)

    # Public site contact block
    phone = String(max_length=30)
    email = String(max_length=254)
    address = String(max_length=255)
    delivery_hours = String(max_length=100)
    business_hours_monday_friday = String(max_length=100)
    business_hours_saturday = String(max_length=100)
    business_hours_sunday = String(max_length=100)
    logo_url = String(max_length=500)

    updated_at = DateTime()

    def set_order_intake(self, receive_orders: bool) -> None:
        if bool(receive_orders) == self.receive_orders:
            return

        now = datetime.now(UTC)
        self.receive_orders = bool(receive_orders)
        self.updated_at = now
        self.raise_(OrderIntakeChanged(receive_orders=self.receive_orders, changed_at=now))

    def contact_info(self) -> dict[str, str]:
        """Configured contact details, each blank field replaced by its default."""
        return {field: getattr(self, field) or default for field, default in DEFAULT_CONTACT_INFO.items()}

    def update_contact_info(self, **changes) -> None:
        """Apply the given contact fields. ``None`` leaves a field alone and a
        blank string clears it back to the default."""
        unknown = set(changes) - set(CONTACT_FIELDS)
        if unknown:
            raise ValidationError({field: ["Not a contact setting"] for field in sorted(unknown)})

        applied = {}
        for field, value in changes.items():
            if value is None:
                continue
            value = value.strip()
            if value != (getattr(self, field) or ""):
                setattr(self, field, value or None)
                applied[field] = value

        if not applied:
            return

        now = datetime.now(UTC)
        self.updated_at = now
        self.raise_(SiteContactUpdated(changes=json.dumps(applied), updated_at=now))


@ordering.repository(part_of=StoreSettings)
class StoreSettingsRepository:
    def current(self) -> StoreSettings:
        """The settings record, created with defaults on first access."""
        try:
            return self.get(STORE_SETTINGS_ID)
        except ObjectNotFoundError:
            settings = StoreSettings(settings_id=STORE_SETTINGS_ID, updated_at=datetime.now(UTC))
            self.add(settings)
            return settings
