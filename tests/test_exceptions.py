"""Tests for the exception hierarchy and error helpers."""

import logging
from unittest.mock import Mock

import pytest
from pydantic import BaseModel, ValidationError

from quicklookup.exceptions import (
    ConfigFileInvalidError,
    ConfigValidationError,
    ErrorContext,
    HostConnectionError,
    HostError,
    HostPayloadError,
    QuickLookupError,
    format_error_for_display,
    handle_errors,
    wrap_pydantic_error,
)


class PortModel(BaseModel):
    port: int


class TestExceptionHierarchy:
    """Test messages carried by the custom exceptions."""

    def test_host_errors_are_quick_lookup_errors(self):
        assert issubclass(HostConnectionError, HostError)
        assert issubclass(HostPayloadError, HostError)
        assert issubclass(HostError, QuickLookupError)

    def test_connection_error_messages(self):
        error = HostConnectionError("127.0.0.1", 7878, "Connection refused")
        assert "127.0.0.1:7878" in error.user_message
        assert "Connection refused" in error.technical_message
        assert "simulate-host" in error.recovery_hint

    def test_payload_error_keeps_payload(self):
        error = HostPayloadError("update-keyboard", {"level": 2}, "layer missing")
        assert error.channel == "update-keyboard"
        assert error.payload == {"level": 2}
        assert "layer missing" in error.technical_message

    def test_invalid_file_points_at_reset(self):
        error = ConfigFileInvalidError("/tmp/config.json", "trailing comma at line 3")
        assert "/tmp/config.json" in error.user_message
        assert "trailing comma" in error.technical_message
        assert "quick-lookup config reset" in error.recovery_hint

    def test_with_hint_appends_field_advice(self):
        error = ConfigValidationError("start_layer", -1, "must be >= 0", source="config.json")
        assert error.with_hint().splitlines() == [
            "Invalid value for 'start_layer': must be >= 0",
            "Check 'start_layer' in config.json",
            "Run 'quick-lookup layers' to see the known layer numbers",
        ]

    def test_with_hint_without_hint(self):
        assert QuickLookupError("plain").with_hint() == "plain"


class TestWrapPydanticError:
    """Test conversion of pydantic errors."""

    def test_invalid_json(self):
        with pytest.raises(ValidationError) as exc_info:
            PortModel.model_validate_json("{ nope }")

        error = wrap_pydantic_error(exc_info.value, "config.json")
        assert isinstance(error, ConfigFileInvalidError)
        assert error.file_path == "config.json"
        assert "Invalid JSON" not in error.parse_error

    def test_single_field_error(self):
        with pytest.raises(ValidationError) as exc_info:
            PortModel.model_validate({"port": "abc"})

        error = wrap_pydantic_error(exc_info.value, "config.json")
        assert isinstance(error, ConfigValidationError)
        assert error.field == "port"
        assert error.value == "abc"
        assert error.source == "config.json"

    def test_wrong_top_level_type(self):
        with pytest.raises(ValidationError) as exc_info:
            PortModel.model_validate_json("[1, 2]")

        error = wrap_pydantic_error(exc_info.value, "config.json")
        assert isinstance(error, ConfigValidationError)
        assert error.field == "config"


class TestFormatErrorForDisplay:
    def test_custom_error(self):
        message, hint = format_error_for_display(HostConnectionError("localhost", 1))
        assert "localhost:1" in message
        assert hint is not None

    def test_unexpected_error(self):
        message, hint = format_error_for_display(KeyError("layer"))
        assert message.startswith("KeyError")
        assert hint is None


class TestErrorContext:
    """Test the error-handling context manager."""

    def test_re_raises_by_default(self):
        with pytest.raises(ValueError):
            with ErrorContext("parse layer"):
                raise ValueError("bad")

    def test_absorbs_when_asked(self, caplog):
        with caplog.at_level(logging.WARNING):
            with ErrorContext("register listener", re_raise=False) as ctx:
                raise HostConnectionError("127.0.0.1", 7878)

        assert isinstance(ctx.error, HostConnectionError)
        assert "Failed to register listener" in caplog.text

    def test_never_absorbs_base_exceptions(self):
        with pytest.raises(KeyboardInterrupt):
            with ErrorContext("wait", re_raise=False):
                raise KeyboardInterrupt

    def test_no_error(self):
        with ErrorContext("noop") as ctx:
            pass
        assert ctx.error is None


class TestHandleErrors:
    """Test the error-handling decorator."""

    def test_fallback_and_notification(self):
        notify = Mock()

        @handle_errors(operation_name="save", user_notification=notify, re_raise=False, fallback_value=False)
        def save():
            raise ConfigValidationError("host_port", 0, "too small")

        assert save() is False
        notify.assert_called_once()
        assert "host_port" in notify.call_args.args[0]

    def test_unexpected_error_re_raised(self):
        @handle_errors(operation_name="save")
        def save():
            raise OSError("disk full")

        with pytest.raises(OSError):
            save()

    def test_return_value_passed_through(self):
        @handle_errors(operation_name="add", re_raise=False)
        def add(a, b):
            return a + b

        assert add(2, 3) == 5
