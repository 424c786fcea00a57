"""Unit tests for domain error taxonomy."""

import pytest

from pulse.domain.error import (
    BusinessRuleViolationError,
    ConflictError,
    DomainError,
    ErrorCode,
    ErrorKind,
    NotFoundError,
    ValidationError,
)


class TestFromCode:
    """Tests for DomainError.from_code."""

    @pytest.mark.parametrize(
        ("code", "error_class"),
        [
            (ErrorCode.POLL_NOT_FOUND, NotFoundError),
            (ErrorCode.INVITE_NOT_FOUND, NotFoundError),
            (ErrorCode.ALREADY_VOTED, ConflictError),
            (ErrorCode.INVITE_ALREADY_USED, ConflictError),
            (ErrorCode.INVALID_ID, ValidationError),
            (ErrorCode.INVALID_TEMPLATE_RULES, ValidationError),
            (ErrorCode.CATEGORY_NOT_ALLOWED, BusinessRuleViolationError),
            (ErrorCode.NOT_FOUND_OR_FORBIDDEN, BusinessRuleViolationError),
        ],
    )
    def test_builds_subclass_for_kind(self, code, error_class):
        error = DomainError.from_code(code)

        assert isinstance(error, error_class)
        assert error.code == code
        assert error.kind == code.kind

    def test_message_defaults_to_code(self):
        assert DomainError.from_code(ErrorCode.NOT_EDITABLE).message == "NOT_EDITABLE"

    def test_every_code_has_a_kind(self):
        for code in ErrorCode:
            assert isinstance(code.kind, ErrorKind)
