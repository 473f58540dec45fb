"""Channel adapter registry — the email channel used by the dispatcher.

Provides singleton access to the email adapter. The in-memory fake adapter
is the default; a provider adapter implementing EmailPort can be registered
in production with ``register_channel``.
"""

EMAIL = "email"

_channel_instances: dict[str, object] = {}


def get_channel(channel_type: str = EMAIL):
    """Return the configured adapter for ``channel_type`` (singleton per type)."""
    if channel_type not in _channel_instances:
        if channel_type == EMAIL:
            from notifications.channel.fake_email import FakeEmailAdapter

            _channel_instances[channel_type] = FakeEmailAdapter()
        else:
            raise ValueError(f"Unknown channel type: {channel_type}")

    return _channel_instances[channel_type]


def register_channel(adapter, channel_type: str = EMAIL):
    """Install ``adapter`` as the singleton for ``channel_type``."""
    _channel_instances[channel_type] = adapter


def reset_channels():
    """Reset all channel singletons (useful for testing)."""
    _channel_instances.clear()
