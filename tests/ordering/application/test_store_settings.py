"""Application tests for store settings: order intake and site contact details."""

from ordering.settings.management import SetOrderIntake, UpdateSiteContact
from ordering.settings.store_settings import DEFAULT_CONTACT_INFO, STORE_SETTINGS_ID, StoreSettings
from protean.utils.globals import current_domain


class TestStoreSettings:
    def test_defaults_to_open(self):
        settings = current_domain.repository_for(StoreSettings).current()
        assert settings.settings_id == STORE_SETTINGS_ID
        assert settings.receive_orders is True

    def test_current_is_a_single_record(self):
        repo = current_domain.repository_for(StoreSettings)
        repo.current()
        repo.current()
        assert len(repo._dao.query.all().items) == 1

    def test_close_and_reopen(self):
        assert current_domain.process(SetOrderIntake(receive_orders=False), asynchronous=False) is False
        assert current_domain.repository_for(StoreSettings).current().receive_orders is False

        assert current_domain.process(SetOrderIntake(receive_orders=True), asynchronous=False) is True
        assert current_domain.repository_for(StoreSettings).current().receive_orders is True

    def test_unchanged_value_raises_no_event(self):
        settings = current_domain.repository_for(StoreSettings).current()
        settings.set_order_intake(True)
        assert settings._events == []


class TestSiteContact:
    def test_defaults_until_configured(self):
        contact = current_domain.repository_for(StoreSettings).current().contact_info()
        assert contact == DEFAULT_CONTACT_INFO

    def test_update_keeps_other_fields(self):
        contact = current_domain.process(
            UpdateSiteContact(phone="1-499-4611", email="info@bluespring.test"),
            asynchronous=False,
        )

        assert contact["phone"] == "1-499-4611"
        assert contact["email"] == "info@bluespring.test"
        assert contact["delivery_hours"] == DEFAULT_CONTACT_INFO["delivery_hours"]

        current_domain.process(UpdateSiteContact(address="Flemming Street, Road Town"), asynchronous=False)
        stored = current_domain.repository_for(StoreSettings).current().contact_info()
        assert stored["phone"] == "1-499-4611"
        assert stored["address"] == "Flemming Street, Road Town"

    def test_contact_update_leaves_order_intake_alone(self):
        current_domain.process(SetOrderIntake(receive_orders=False), asynchronous=False)
        current_domain.process(UpdateSiteContact(logo_url="/static/logo.png"), asynchronous=False)
        assert current_domain.repository_for(StoreSettings).current().receive_orders is False
