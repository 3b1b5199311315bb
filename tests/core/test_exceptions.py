"""Unit tests for domain exceptions."""

import pytest

from src.core.exceptions import (
    AccessDeniedError,
    BookkeepingError,
    CsvNotFoundError,
    CsvParseError,
    DeliveryError,
    FileTooLargeError,
    MissingIdentityError,
    OriginNotAllowedError,
    StorageError,
    StorageReadError,
    StorageWriteError,
    UploadForbiddenError,
    UpstreamError,
    UpstreamForwardError,
    UpstreamNotConfiguredError,
    ValidationError,
)


class TestBookkeepingError:
    """Tests for base BookkeepingError exception."""

    def test_basic_initialization(self):
        error = BookkeepingError("Something went wrong")
        assert str(error) == "Something went wrong"
        assert error.message == "Something went wrong"
        assert error.code == "BookkeepingError"
        assert error.details == {}

    def test_with_custom_code(self):
        error = BookkeepingError("Error message", code="CUSTOM_ERROR")
        assert error.code == "CUSTOM_ERROR"

    def test_to_dict(self):
        error = BookkeepingError("Oops", code="X", details={"a": 1})
        assert error.to_dict() == {"error": "X", "message": "Oops", "details": {"a": 1}}


class TestStorageErrors:
    """Tests for storage exceptions."""

    def test_read_error(self):
        error = StorageReadError("data/reminders.json", "Expecting value")
        assert isinstance(error, StorageError)
        assert error.code == "STORAGE_READ_ERROR"
        assert error.details["path"] == "data/reminders.json"

    def test_write_error(self):
        error = StorageWriteError("data/reminders.json", "No space left")
        assert error.code == "STORAGE_WRITE_ERROR"
        assert "No space left" in error.message

    def test_csv_errors_are_storage_errors(self):
        assert isinstance(CsvNotFoundError("x.csv"), StorageError)
        parse = CsvParseError("too many fields", line=3)
        assert isinstance(parse, StorageError)
        assert parse.details["line"] == 3


class TestValidationErrors:
    """Tests for validation exceptions."""

    def test_missing_identity(self):
        error = MissingIdentityError()
        assert isinstance(error, ValidationError)
        assert error.code == "MISSING_IDENTITY"
        assert error.details["message"] == "companyNo or companyName required"
        assert error.message == "companyNo or companyName required"
        assert str(error) == "companyNo or companyName required"

    def test_file_too_large(self):
        error = FileTooLargeError("master.csv", 200, 100)
        assert isinstance(error, ValidationError)
        assert error.code == "FILE_TOO_LARGE"
        assert error.details["size"] == 200
        assert error.details["max_size"] == 100

    def test_value_truncated(self):
        error = ValidationError("reference", "too long", value="x" * 500)
        assert len(error.details["value"]) == 100


class TestIntegrationErrors:
    """Tests for mail, upstream and access exceptions."""

    def test_delivery_error(self):
        error = DeliveryError("jane@example.com", "Connection refused")
        assert error.code == "DELIVERY_FAILED"
        assert error.details["recipient"] == "jane@example.com"

    @pytest.mark.parametrize(
        "error,code",
        [
            (UpstreamForwardError("https://x", "timeout"), "UPSTREAM_FORWARD_FAILED"),
            (UpstreamNotConfiguredError(), "UPSTREAM_NOT_CONFIGURED"),
        ],
    )
    def test_upstream_errors(self, error, code):
        assert isinstance(error, UpstreamError)
        assert error.code == code

    def test_access_errors(self):
        origin = OriginNotAllowedError("https://evil.example")
        assert isinstance(origin, AccessDeniedError)
        assert origin.details["origin"] == "https://evil.example"
        assert isinstance(UploadForbiddenError(), AccessDeniedError)

    def test_all_inherit_from_base(self):
        for error in (
            StorageReadError("p", "r"),
            DeliveryError("a", "b"),
            UpstreamNotConfiguredError(),
            UploadForbiddenError(),
        ):
            assert isinstance(error, BookkeepingError)
