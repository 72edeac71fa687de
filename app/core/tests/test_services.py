"""
Tests for the core service layer primitives.

Tests cover:
- ServiceResult success/failure construction and truthiness
- ServiceResult.to_response() error formatting
- BaseService.validate_required() and get_logger()
"""

import uuid

from core.services import BaseService, ServiceResult


class ExampleService(BaseService):
    pass


class TestServiceResult:
    """Tests for ServiceResult."""

    def test_success(self):
        result = ServiceResult.success({"sent": 1})

        assert result
        assert result.data == {"sent": 1}
        assert result.error is None
        assert result.to_response() == {"data": {"sent": 1}}

    def test_failure_response(self):
        result = ServiceResult.failure("No push token for user", error_code="NO_PUSH_TOKEN")

        assert not result
        assert result.data is None
        assert result.to_response() == {
            "error": "No push token for user",
            "error_code": "NO_PUSH_TOKEN",
        }

    def test_failure_with_field_errors(self):
        result = ServiceResult.failure(
            "Required fields missing",
            errors={"user_id": ["This field is required."]},
        )

        assert result.to_response() == {
            "error": "Required fields missing",
            "errors": {"user_id": ["This field is required."]},
        }


class TestBaseService:
    """Tests for BaseService helpers."""

    def test_validate_required_passes(self):
        assert ExampleService.validate_required(user_id=uuid.uuid4(), type="like") is None

    def test_validate_required_flags_none_and_blank(self):
        result = ExampleService.validate_required(
            conversation_id=None,
            sender_id="   ",
            content="hi",
        )

        assert not result
        assert result.error_code == "VALIDATION_ERROR"
        assert set(result.errors) == {"conversation_id", "sender_id"}

    def test_logger_is_named_after_service(self):
        logger = ExampleService.get_logger()

        assert logger.name == f"{__name__}.ExampleService"
