"""Domain layer errors.

Every failure the core surfaces carries an ``ErrorCode`` from a closed enum.
Codes are grouped into four kinds that the interface layer maps onto
transport statuses.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Taxonomy of domain failures."""

    NOT_FOUND = "not_found"
    PRECONDITION_FAILED = "precondition_failed"
    CONFLICT = "conflict"
    VALIDATION = "validation"


class ErrorCode(str, Enum):
    """Error codes surfaced to the boundary."""

    # Categories
    CATEGORY_NOT_FOUND = "CATEGORY_NOT_FOUND"
    CATEGORY_NOT_CHILD = "CATEGORY_NOT_CHILD"
    CATEGORY_NOT_ACTIVE = "CATEGORY_NOT_ACTIVE"
    CATEGORY_NOT_ALLOWED = "CATEGORY_NOT_ALLOWED"
    CATEGORY_HAS_CHILDREN = "CATEGORY_HAS_CHILDREN"
    INVALID_PARENT = "INVALID_PARENT"

    # Poll configs
    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    CONFIG_NOT_ACTIVE = "CONFIG_NOT_ACTIVE"
    INVALID_TEMPLATE_RULES = "INVALID_TEMPLATE_RULES"

    # Admin polls
    NOT_FOUND = "NOT_FOUND"
    NOT_EDITABLE = "NOT_EDITABLE"
    INVALID_STATUS = "INVALID_STATUS"

    # User polls
    POLL_NOT_FOUND = "POLL_NOT_FOUND"
    POLL_NOT_LIVE = "POLL_NOT_LIVE"
    POLL_NOT_INVITE_ONLY = "POLL_NOT_INVITE_ONLY"
    NOT_FOUND_OR_FORBIDDEN = "NOT_FOUND_OR_FORBIDDEN"
    INVALID_START_AT = "INVALID_START_AT"
    INVALID_END_AT = "INVALID_END_AT"
    END_AT_IN_PAST = "END_AT_IN_PAST"
    END_AT_BEFORE_START = "END_AT_BEFORE_START"
    POLL_ALREADY_CLOSED = "POLL_ALREADY_CLOSED"
    GROUP_NOT_FOUND = "GROUP_NOT_FOUND"

    # Invite ledger
    INVITE_NOT_FOUND = "INVITE_NOT_FOUND"
    INVITE_ALREADY_USED = "INVITE_ALREADY_USED"
    POLL_NOT_ACTIVE = "POLL_NOT_ACTIVE"

    # Voting
    POLL_NOT_PUBLISHED = "POLL_NOT_PUBLISHED"
    POLL_NOT_STARTED = "POLL_NOT_STARTED"
    POLL_ENDED = "POLL_ENDED"
    INVALID_INVITE = "INVALID_INVITE"
    INVITE_REQUIRED = "INVITE_REQUIRED"
    AUTH_OR_INVITE_REQUIRED = "AUTH_OR_INVITE_REQUIRED"
    ALREADY_VOTED = "ALREADY_VOTED"
    INVALID_RESPONSE = "INVALID_RESPONSE"

    # Profiles and PSI
    PROFILE_NOT_FOUND = "PROFILE_NOT_FOUND"
    CLAIM_NOT_FOUND = "CLAIM_NOT_FOUND"
    ALREADY_CLAIMED = "ALREADY_CLAIMED"
    REQUEST_NOT_FOUND = "REQUEST_NOT_FOUND"
    PROFILE_ALREADY_EXISTS = "PROFILE_ALREADY_EXISTS"
    INVALID_PROFILE_CATEGORY = "INVALID_PROFILE_CATEGORY"
    USER_NOT_FOUND = "USER_NOT_FOUND"

    # Boundary parsing
    INVALID_ID = "INVALID_ID"

    @property
    def kind(self) -> ErrorKind:
        """Taxonomy kind of this code."""
        return _KINDS[self]


_NOT_FOUND = {
    ErrorCode.CATEGORY_NOT_FOUND,
    ErrorCode.CONFIG_NOT_FOUND,
    ErrorCode.NOT_FOUND,
    ErrorCode.POLL_NOT_FOUND,
    ErrorCode.GROUP_NOT_FOUND,
    ErrorCode.INVITE_NOT_FOUND,
    ErrorCode.PROFILE_NOT_FOUND,
    ErrorCode.CLAIM_NOT_FOUND,
    ErrorCode.REQUEST_NOT_FOUND,
    ErrorCode.USER_NOT_FOUND,
}

_CONFLICT = {
    ErrorCode.ALREADY_VOTED,
    ErrorCode.ALREADY_CLAIMED,
    ErrorCode.PROFILE_ALREADY_EXISTS,
    ErrorCode.INVITE_ALREADY_USED,
    ErrorCode.CATEGORY_HAS_CHILDREN,
}

_VALIDATION = {
    ErrorCode.INVALID_ID,
    ErrorCode.INVALID_RESPONSE,
    ErrorCode.INVALID_START_AT,
    ErrorCode.INVALID_END_AT,
    ErrorCode.END_AT_IN_PAST,
    ErrorCode.END_AT_BEFORE_START,
    ErrorCode.INVALID_TEMPLATE_RULES,
    ErrorCode.INVALID_PARENT,
}


def _kind_for(code: ErrorCode) -> ErrorKind:
    if code in _NOT_FOUND:
        return ErrorKind.NOT_FOUND
    if code in _CONFLICT:
        return ErrorKind.CONFLICT
    if code in _VALIDATION:
        return ErrorKind.VALIDATION
    return ErrorKind.PRECONDITION_FAILED


_KINDS: dict[ErrorCode, ErrorKind] = {code: _kind_for(code) for code in ErrorCode}


class DomainError(Exception):
    """Base domain error."""

    kind: ErrorKind = ErrorKind.PRECONDITION_FAILED

    def __init__(self, code: ErrorCode, message: str | None = None):
        self.code = code
        self.message = message or code.value
        super().__init__(self.message)

    @staticmethod
    def from_code(code: ErrorCode, message: str | None = None) -> "DomainError":
        """Build the error subclass matching the code's kind.

        Args:
            code: Error code
            message: Optional human-readable detail

        Returns:
            Error instance ready to raise
        """
        return _ERROR_CLASSES[code.kind](code, message)


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    kind = ErrorKind.NOT_FOUND


class BusinessRuleViolationError(DomainError):
    """Raised when an entity exists but is in the wrong state or ownership."""

    kind = ErrorKind.PRECONDITION_FAILED


class ConflictError(DomainError):
    """Raised on uniqueness violations (already voted, already claimed)."""

    kind = ErrorKind.CONFLICT


class ValidationError(DomainError):
    """Domain validation error for malformed caller input."""

    kind = ErrorKind.VALIDATION


_ERROR_CLASSES: dict[ErrorKind, type[DomainError]] = {
    ErrorKind.NOT_FOUND: NotFoundError,
    ErrorKind.PRECONDITION_FAILED: BusinessRuleViolationError,
    ErrorKind.CONFLICT: ConflictError,
    ErrorKind.VALIDATION: ValidationError,
}
