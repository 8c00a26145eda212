"""Tests for PII redaction in log messages."""

from gdpr_sanitizer.utils.logger import PIIRedactor, get_logger


class TestPIIRedactor:
    """Test PIIRedactor."""

    def test_redact_email(self):
        """Test email addresses are redacted."""
        message = PIIRedactor.redact("user email to keep not found: john.smith@mail.test")

        assert "john.smith@mail.test" not in message
        assert "[REDACTED_EMAIL]" in message

    def test_redact_ip_address(self):
        """Test IPv4 addresses are redacted."""
        message = PIIRedactor.redact("comment from 203.0.113.7")

        assert "203.0.113.7" not in message
        assert "[REDACTED_IP_ADDRESS]" in message

    def test_redact_url(self):
        """Test URLs are redacted as a whole."""
        message = PIIRedactor.redact("author site https://john.mail.test/about was replaced")

        assert "john.mail.test" not in message
        assert message == "author site [REDACTED_URL] was replaced"

    def test_redact_multiple(self):
        """Test several kinds of PII in one message."""
        message = PIIRedactor.redact("admin@corp.test logged in from 10.1.2.3")

        assert "[REDACTED_EMAIL]" in message
        assert "[REDACTED_IP_ADDRESS]" in message

    def test_plain_message_untouched(self):
        """Test messages without PII pass through."""
        message = "Rewrote user 42"

        assert PIIRedactor.redact(message) == message


class TestGetLogger:
    """Test get_logger."""

    def test_bound_name(self):
        """Test the logger carries the module name."""
        log = get_logger("gdpr_sanitizer.tests")

        assert log is not None
        log.debug("bound logger works")
