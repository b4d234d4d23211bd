"""Tests for log redaction."""

from welcomebot.utils.logging import _filter_sensitive


class TestFilterSensitive:
    def test_sensitive_keys_redacted(self):
        event = _filter_sensitive(None, "info", {"event": "x", "signature": "abc123", "token": "t"})
        assert event["signature"] == "***REDACTED***"
        assert event["token"] == "***REDACTED***"

    def test_sensitive_values_redacted(self):
        event = _filter_sensitive(None, "info", {"event": "x", "detail": "Authorization: Bearer abc.def"})
        assert "abc.def" not in event["detail"]

    def test_plain_values_kept(self):
        event = _filter_sensitive(None, "info", {"event": "welcome_sent", "entity_id": 42, "type": "chat_member"})
        assert event == {"event": "welcome_sent", "entity_id": 42, "type": "chat_member"}

    def test_hex_digest_under_plain_key_redacted(self):
        digest = "ab12" * 16
        event = _filter_sensitive(None, "info", {"event": "x", "detail": f"expected {digest} got nothing"})
        assert digest not in event["detail"]
        assert event["detail"] == "expected ***REDACTED*** got nothing"

    def test_short_hex_kept(self):
        event = _filter_sensitive(None, "info", {"event": "x", "request_id": "deadbeef"})
        assert event["request_id"] == "deadbeef"
