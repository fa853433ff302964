"""Tests for structured logging."""

import json
from io import StringIO

import pytest
import structlog

from switchboard.observability.logging import (
    PIIRedactor,
    bind_conversation,
    get_logger,
    setup_logging,
)


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_setup_json_format(self) -> None:
        """Should configure JSON format for production."""
        setup_logging(level="INFO", format="json", redact_pii=False)
        logger = get_logger("test")
        # Should not raise
        logger.info("test_message")

    def test_setup_console_format(self) -> None:
        """Should configure console format for development."""
        setup_logging(level="DEBUG", format="console", redact_pii=False)
        logger = get_logger("test")
        # Should not raise
        logger.debug("test_message")

    def test_setup_with_pii_redaction(self) -> None:
        """Should configure PII redaction when enabled."""
        setup_logging(level="INFO", format="json", redact_pii=True)
        logger = get_logger("test")
        # Should not raise
        logger.info("test_message", phone_number="11987654321")


class TestContextBinding:
    """Tests for conversation context binding."""

    def test_bound_conversation_appears_in_logs(self) -> None:
        """Should include bound identifiers in log output."""
        output = StringIO()
        structlog.configure(
            processors=[
                structlog.contextvars.merge_contextvars,
                structlog.processors.JSONRenderer(),
            ],
            wrapper_class=structlog.make_filtering_bound_logger(0),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(output),
            cache_logger_on_first_use=False,
        )

        bind_conversation(session_id="session-1", tenant_id="tenant-1", user_id="user-1")
        try:
            structlog.get_logger("test").info("intent_recognized")
        finally:
            structlog.contextvars.clear_contextvars()

        parsed = json.loads(output.getvalue().strip())
        assert parsed["session_id"] == "session-1"
        assert parsed["tenant_id"] == "tenant-1"
        assert parsed["user_id"] == "user-1"

    def test_rebinding_drops_previous_conversation(self) -> None:
        """Should not carry identifiers from an earlier conversation."""
        bind_conversation(session_id="session-1", tenant_id="tenant-1", user_id="user-1")
        structlog.contextvars.bind_contextvars(intent_type="emergency")
        try:
            bind_conversation(session_id="session-2", tenant_id="tenant-2")
            bound = structlog.contextvars.get_contextvars()
        finally:
            structlog.contextvars.clear_contextvars()

        assert bound == {"session_id": "session-2", "tenant_id": "tenant-2", "user_id": None}


class TestPIIRedactor:
    """Tests for PII redaction."""

    @pytest.fixture
    def redactor(self) -> PIIRedactor:
        """Create a PIIRedactor instance."""
        return PIIRedactor()

    def test_redacts_sensitive_keys(self, redactor: PIIRedactor) -> None:
        """Should redact values for sensitive keys."""
        event_dict = {"api_key": "key123", "cpf": "12345678900", "intent_type": "booking_request"}
        result = redactor(None, None, event_dict)  # type: ignore
        assert result["api_key"] == "[REDACTED]"
        assert result["cpf"] == "[REDACTED]"
        assert result["intent_type"] == "booking_request"

    def test_redacts_email_pattern_in_string_value(self, redactor: PIIRedactor) -> None:
        """Should redact email patterns found in string values."""
        event_dict = {"message": "meu email e cliente@exemplo.com.br"}
        result = redactor(None, None, event_dict)  # type: ignore
        assert "cliente@exemplo.com.br" not in result["message"]
        assert "[EMAIL]" in result["message"]

    def test_redacts_brazilian_phone_in_string_value(self, redactor: PIIRedactor) -> None:
        """Should redact Brazilian phone numbers found in string values."""
        event_dict = {"message": "me liga no (11) 98765-4321 por favor"}
        result = redactor(None, None, event_dict)  # type: ignore
        assert "98765-4321" not in result["message"]
        assert "[PHONE]" in result["message"]

    def test_redacts_cpf_in_string_value(self, redactor: PIIRedactor) -> None:
        """Should redact formatted CPFs found in string values."""
        event_dict = {"message": "CPF 123.456.789-09"}
        result = redactor(None, None, event_dict)  # type: ignore
        assert result["message"] == "CPF [CPF]"

    def test_handles_nested_dicts(self, redactor: PIIRedactor) -> None:
        """Should handle nested dictionaries."""
        event_dict = {"entity": {"person_name": "Maria", "type": "person_name"}}
        result = redactor(None, None, event_dict)  # type: ignore
        assert result["entity"]["person_name"] == "[REDACTED]"
        assert result["entity"]["type"] == "person_name"

    def test_handles_lists(self, redactor: PIIRedactor) -> None:
        """Should scrub strings inside lists."""
        event_dict = {"values": ["amanha", "contato@exemplo.com"]}
        result = redactor(None, None, event_dict)  # type: ignore
        assert result["values"] == ["amanha", "[EMAIL]"]

    def test_preserves_non_pii_data(self, redactor: PIIRedactor) -> None:
        """Should preserve non-PII data."""
        event_dict = {
            "event": "intent_recognized",
            "elapsed_ms": 15.2,
            "intent_type": "emergency",
            "engine_consensus": 2,
        }
        result = redactor(None, None, event_dict)  # type: ignore
        assert result == event_dict
