import pytest
from notifications.channel import EMAIL, get_channel, register_channel, reset_channels
from notifications.channel.email_port import EmailPort
from notifications.channel.fake_email import FakeEmailAdapter


class TestFakeEmailAdapter:
    def test_send_records_message(self):
        adapter = FakeEmailAdapter()
        result = adapter.send(to="ana@example.com", subject="Hi", body="Hello")

        assert result["status"] == "sent"
        assert result["message_id"].startswith("email-")
        assert adapter.sent_to("ana@example.com")[0]["subject"] == "Hi"

    def test_configured_failure(self):
        adapter = FakeEmailAdapter()
        adapter.configure(should_succeed=False, failure_reason="Mailbox full")

        result = adapter.send(to="ana@example.com", subject="Hi", body="Hello")

        assert result == {"message_id": None, "status": "failed", "error": "Mailbox full"}
        assert adapter.sent_emails == []

    def test_reset(self):
        adapter = FakeEmailAdapter()
        adapter.send(to="ana@example.com", subject="Hi", body="Hello")
        adapter.configure(should_succeed=False)
        adapter.reset()

        assert adapter.sent_emails == []
        assert adapter.should_succeed is True


class TestChannelRegistry:
    def test_default_is_fake_singleton(self):
        adapter = get_channel()
        assert isinstance(adapter, FakeEmailAdapter)
        assert get_channel(EMAIL) is adapter

    def test_unknown_channel(self):
        with pytest.raises(ValueError):
            get_channel("sms")

    def test_register_custom_adapter(self):
        class RecordingAdapter(EmailPort):
            def send(self, to, subject, body):
                return {"message_id": "x", "status": "sent"}

        adapter = RecordingAdapter()
        register_channel(adapter)
        assert get_channel() is adapter

        reset_channels()
        assert isinstance(get_channel(), FakeEmailAdapter)
