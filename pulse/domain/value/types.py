"""Domain value objects for Pulse.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import math
import re
from enum import Enum
from typing import Generic, Literal, TypeVar

from pydantic import ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from pulse.domain.value.common import RootValueObject, ValueObject


class CategoryDomain(str, Enum):
    """Partition tag separating otherwise identical category trees."""

    POLL = "POLL"
    PROFILE = "PROFILE"


class CategoryStatus(str, Enum):
    """Status of a category."""

    ACTIVE = "ACTIVE"
    DISABLED = "DISABLED"


class YesNo(str, Enum):
    """Binary permission flag."""

    YES = "YES"
    NO = "NO"


class AdminCurated(str, Enum):
    """How strongly admins curate a category's content."""

    NO = "NO"
    PARTIAL = "PARTIAL"
    FULL = "FULL"


class PollConfigStatus(str, Enum):
    """Status of a poll template."""

    DRAFT = "DRAFT"
    ACTIVE = "ACTIVE"
    DISABLED = "DISABLED"


class PollUiTemplate(str, Enum):
    """Voting UI template a poll config renders with."""

    STANDARD_LIST = "STANDARD_LIST"
    YES_NO = "YES_NO"
    RATING = "RATING"
    SWIPE = "SWIPE"
    POINT_ALLOC = "POINT_ALLOC"
    MEDIA_COMPARE = "MEDIA_COMPARE"


class PollVisibility(str, Enum):
    """Who can see a poll."""

    PUBLIC = "PUBLIC"
    INTERNAL = "INTERNAL"
    PRIVATE = "PRIVATE"


class PollStatus(str, Enum):
    """Admin poll lifecycle, one-directional."""

    DRAFT = "DRAFT"
    PUBLISHED = "PUBLISHED"
    CLOSED = "CLOSED"


class UserPollStatus(str, Enum):
    """User poll lifecycle."""

    DRAFT = "DRAFT"
    LIVE = "LIVE"
    SCHEDULED = "SCHEDULED"
    CLOSED = "CLOSED"


class UserPollType(str, Enum):
    """Answer type of a user poll."""

    SINGLE_CHOICE = "SINGLE_CHOICE"
    MULTIPLE_CHOICE = "MULTIPLE_CHOICE"
    RATING = "RATING"
    YES_NO = "YES_NO"


class StartMode(str, Enum):
    """How a user poll starts."""

    INSTANT = "INSTANT"
    SCHEDULED = "SCHEDULED"


class InviteStatus(str, Enum):
    """Status of a user poll invite. ACCEPTED and REJECTED are terminal."""

    PENDING = "PENDING"
    ACCEPTED = "ACCEPTED"
    REJECTED = "REJECTED"


class ProfileStatus(str, Enum):
    """Status of a public profile."""

    ACTIVE = "ACTIVE"
    DISABLED = "DISABLED"


class ReviewStatus(str, Enum):
    """Status of a profile claim or request. APPROVED and REJECTED are terminal."""

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class UserRole(str, Enum):
    """Role carried by an authenticated identity."""

    USER = "USER"
    ADMIN = "ADMIN"
    SUPER_ADMIN = "SUPER_ADMIN"


# ============================================================================
# Inheritance overrides
# ============================================================================

T = TypeVar("T")


class Inherit(ValueObject):
    """Absence of an override: the value comes from the parent's default."""

    kind: Literal["inherit"] = "inherit"

    def resolve(self, default: T) -> T:
        return default

    def to_nullable(self) -> None:
        return None


class Override(ValueObject, Generic[T]):
    """Explicit value set on a child category, always wins over the parent."""

    kind: Literal["override"] = "override"
    value: T

    def resolve(self, default: T) -> T:
        return self.value

    def to_nullable(self) -> T:
        return self.value


def inheritable(value: T | None) -> "Override[T] | Inherit":
    """Convert a nullable storage value into an override.

    ``None`` is the only inheritance signal.
    """
    if value is None:
        return Inherit()
    return Override(value=value)


# ============================================================================
# Poll config JSON documents
# ============================================================================


class CamelValueObject(ValueObject):
    """Value object serialised with camelCase keys."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class PollTheme(CamelValueObject):
    """Colour theme of a poll template."""

    primary_color: str = Field(min_length=1)
    accent_color: str = Field(min_length=1)


class ContentRules(CamelValueObject):
    """Bounds on how many options a response may select."""

    min_options: int | None = Field(default=None, ge=2, le=20)
    max_options: int | None = Field(default=None, ge=2, le=20)


class VotingBehaviorRules(CamelValueObject):
    """Voting behaviour toggles."""

    allow_multiple_votes: bool | None = None
    allow_abstain: bool | None = None


class ResultsRules(CamelValueObject):
    """Result visibility toggles."""

    show_results: bool | None = None
    show_while_open: bool | None = None


class PollRules(CamelValueObject):
    """Nested content/voting/results rules of a poll template."""

    content_rules: ContentRules | None = None
    voting_behavior: VotingBehaviorRules | None = None
    results_rules: ResultsRules | None = None


class PollPermissions(CamelValueObject):
    """Visibility and participation permissions of a poll template."""

    visibility: PollVisibility | None = None
    invite_only: bool | None = None
    admin_curated: bool | None = None


# ============================================================================
# Identifiers and scalars
# ============================================================================


class Slug(RootValueObject[str]):
    """URL-safe slug for poll configs.

    Must be lowercase, alphanumeric with hyphens, 1-120 characters.
    """

    @field_validator("root")
    @classmethod
    def validate_slug_format(cls, v: str) -> str:
        """Validate slug format."""
        if not re.match(r"^[a-z0-9]+(?:-[a-z0-9]+)*$", v):
            raise ValueError(
                "Slug must be lowercase alphanumeric with hyphens, "
                "no leading/trailing hyphens or consecutive hyphens"
            )
        if len(v) > 120:
            raise ValueError("Slug must be 1-120 characters")
        return v


class InviteToken(RootValueObject[str]):
    """URL-safe invite token."""

    @field_validator("root")
    @classmethod
    def validate_token_format(cls, v: str) -> str:
        """Validate token is not empty."""
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Token must be 1-255 characters")
        return v


def normalize_mobile(mobile: str) -> str:
    """Strip all whitespace from a mobile number; used as the invite join key."""
    return re.sub(r"\s+", "", mobile)


def user_identity(user_id: object) -> str:
    """Synthetic invitee identity for a registered user."""
    return f"user:{user_id}"


# ============================================================================
# PSI
# ============================================================================


def clamp_rating(value: float) -> float:
    """Clamp a rating to 0..100, treating NaN as the neutral midpoint."""
    if math.isnan(value):
        return 50.0
    return min(100.0, max(0.0, value))


class PsiRatings(ValueObject):
    """The four 0-100 PSI factors."""

    trust_integrity: float
    performance_delivery: float
    responsiveness: float
    leadership_ability: float

    def clamped(self) -> "PsiRatings":
        """Return a copy with every factor clamped to 0..100."""
        return PsiRatings(
            trust_integrity=clamp_rating(self.trust_integrity),
            performance_delivery=clamp_rating(self.performance_delivery),
            responsiveness=clamp_rating(self.responsiveness),
            leadership_ability=clamp_rating(self.leadership_ability),
        )

    def mean(self) -> float:
        return (
            self.trust_integrity
            + self.performance_delivery
            + self.responsiveness
            + self.leadership_ability
        ) / 4

    @classmethod
    def neutral(cls) -> "PsiRatings":
        return cls(
            trust_integrity=50.0,
            performance_delivery=50.0,
            responsiveness=50.0,
            leadership_ability=50.0,
        )
