"""Unit tests for telemetry export selection."""

from hive.config import ObservabilitySettings
from hive.util.observability import should_send


class TestShouldSend:
    def test_console_only_by_default(self):
        assert should_send(ObservabilitySettings()) is False

    def test_token_enables_export(self):
        assert should_send(ObservabilitySettings(logfire_token="pylf_123")) is True

    def test_explicit_setting_overrides_token(self):
        settings = ObservabilitySettings(logfire_token="pylf_123", send_to_logfire=False)

        assert should_send(settings) is False
