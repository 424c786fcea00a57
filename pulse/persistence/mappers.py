"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from enum import Enum
from typing import Any, Dict, Iterable, Optional
from uuid import UUID

from pulse.domain.model import (
    Category,
    InviteGroup,
    Poll,
    PollConfig,
    PollInvite,
    Profile,
    ProfileClaim,
    ProfileRequest,
    PsiVote,
    User,
    UserPoll,
    UserPollInvite,
    UserPollOption,
    Vote,
)
from pulse.domain.value import (
    AdminCurated,
    CategoryDomain,
    CategoryId,
    CategoryStatus,
    Inherit,
    InviteGroupId,
    InviteStatus,
    InviteToken,
    Override,
    PollConfigId,
    PollConfigStatus,
    PollId,
    PollInviteId,
    PollPermissions,
    PollRules,
    PollStatus,
    PollTheme,
    PollUiTemplate,
    ProfileClaimId,
    ProfileId,
    ProfileRequestId,
    ProfileStatus,
    PsiRatings,
    PsiVoteId,
    ReviewStatus,
    Slug,
    UserId,
    UserPollId,
    UserPollInviteId,
    UserPollOptionId,
    UserPollStatus,
    UserPollType,
    UserRole,
    VoteId,
    YesNo,
    inheritable,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _optional_uuid(value: Any) -> Optional[UUID]:
    return None if value is None else _uuid(value)


def _nullable(field: Override | Inherit) -> Optional[str]:
    value = field.to_nullable()
    return value.value if isinstance(value, Enum) else value


def _camel_json(value: Any) -> Dict[str, Any]:
    return value.model_dump(mode="json", by_alias=True, exclude_none=True)


# ============================================================================
# Users
# ============================================================================


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model."""
    return User(
        id=UserId(_uuid(row["id"])),
        mobile=row.get("mobile"),
        role=UserRole(row["role"]),
        is_verified=row["is_verified"],
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return {
        "id": user.id,
        "mobile": user.mobile,
        "role": user.role.value,
        "is_verified": user.is_verified,
        "created_at": user.created_at,
    }


# ============================================================================
# Categories
# ============================================================================


def row_to_category(row: Dict[str, Any]) -> Category:
    """Convert database row to Category domain model.

    NULL override columns become ``Inherit()``.

    Args:
        row: Database row as dict

    Returns:
        Category domain model
    """
    claimable = row.get("claimable")
    request_allowed = row.get("request_allowed")
    admin_curated = row.get("admin_curated")
    return Category(
        id=CategoryId(_uuid(row["id"])),
        name=row["name"],
        domain=CategoryDomain(row["domain"]),
        is_parent=row["is_parent"],
        parent_id=(
            CategoryId(_uuid(row["parent_id"])) if row.get("parent_id") else None
        ),
        status=CategoryStatus(row["status"]),
        claimable=inheritable(YesNo(claimable) if claimable else None),
        request_allowed=inheritable(
            YesNo(request_allowed) if request_allowed else None
        ),
        admin_curated=inheritable(
            AdminCurated(admin_curated) if admin_curated else None
        ),
        claimable_default=YesNo(row["claimable_default"]),
        request_allowed_default=YesNo(row["request_allowed_default"]),
        admin_curated_default=AdminCurated(row["admin_curated_default"]),
        display_order=row["display_order"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def category_to_dict(category: Category) -> Dict[str, Any]:
    """Convert Category domain model to database dict.

    ``Inherit()`` overrides are stored as NULL.

    Args:
        category: Category domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": category.id,
        "name": category.name,
        "domain": category.domain.value,
        "is_parent": category.is_parent,
        "parent_id": category.parent_id,
        "status": category.status.value,
        "claimable": _nullable(category.claimable),
        "request_allowed": _nullable(category.request_allowed),
        "admin_curated": _nullable(category.admin_curated),
        "claimable_default": category.claimable_default.value,
        "request_allowed_default": category.request_allowed_default.value,
        "admin_curated_default": category.admin_curated_default.value,
        "display_order": category.display_order,
        "created_at": category.created_at,
        "updated_at": category.updated_at,
    }


# ============================================================================
# Poll configs and admin polls
# ============================================================================


def row_to_poll_config(row: Dict[str, Any]) -> PollConfig:
    """Convert database row to PollConfig domain model."""
    return PollConfig(
        id=PollConfigId(_uuid(row["id"])),
        name=row["name"],
        slug=Slug(row["slug"]),
        category_id=CategoryId(_uuid(row["category_id"])),
        status=PollConfigStatus(row["status"]),
        version=row["version"],
        ui_template=PollUiTemplate(row["ui_template"]),
        theme=PollTheme.model_validate(row["theme"]),
        rules=PollRules.model_validate(row.get("rules") or {}),
        permissions=PollPermissions.model_validate(row.get("permissions") or {}),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def poll_config_to_dict(config: PollConfig) -> Dict[str, Any]:
    """Convert PollConfig domain model to database dict.

    JSON documents are stored with camelCase keys.
    """
    return {
        "id": config.id,
        "name": config.name,
        "slug": config.slug.root,
        "category_id": config.category_id,
        "status": config.status.value,
        "version": config.version,
        "ui_template": config.ui_template.value,
        "theme": _camel_json(config.theme),
        "rules": _camel_json(config.rules),
        "permissions": _camel_json(config.permissions),
        "created_at": config.created_at,
        "updated_at": config.updated_at,
    }


def row_to_poll(row: Dict[str, Any]) -> Poll:
    """Convert database row to Poll domain model."""
    return Poll(
        id=PollId(_uuid(row["id"])),
        title=row["title"],
        description=row.get("description"),
        category_id=CategoryId(_uuid(row["category_id"])),
        poll_config_id=PollConfigId(_uuid(row["poll_config_id"])),
        status=PollStatus(row["status"]),
        start_at=row.get("start_at"),
        end_at=row.get("end_at"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def poll_to_dict(poll: Poll) -> Dict[str, Any]:
    """Convert Poll domain model to database dict."""
    return {
        "id": poll.id,
        "title": poll.title,
        "description": poll.description,
        "category_id": poll.category_id,
        "poll_config_id": poll.poll_config_id,
        "status": poll.status.value,
        "start_at": poll.start_at,
        "end_at": poll.end_at,
        "created_at": poll.created_at,
        "updated_at": poll.updated_at,
    }


def row_to_poll_invite(row: Dict[str, Any]) -> PollInvite:
    """Convert database row to PollInvite domain model."""
    return PollInvite(
        id=PollInviteId(_uuid(row["id"])),
        poll_id=PollId(_uuid(row["poll_id"])),
        token=InviteToken(row["token"]),
        created_at=row["created_at"],
    )


def poll_invite_to_dict(invite: PollInvite) -> Dict[str, Any]:
    """Convert PollInvite domain model to database dict."""
    return {
        "id": invite.id,
        "poll_id": invite.poll_id,
        "token": invite.token.root,
        "created_at": invite.created_at,
    }


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model."""
    user_id = _optional_uuid(row.get("user_id"))
    invite_id = _optional_uuid(row.get("invite_id"))
    return Vote(
        id=VoteId(_uuid(row["id"])),
        poll_id=PollId(_uuid(row["poll_id"])),
        poll_config_id=PollConfigId(_uuid(row["poll_config_id"])),
        user_id=UserId(user_id) if user_id else None,
        invite_id=PollInviteId(invite_id) if invite_id else None,
        response=row["response"],
        created_at=row["created_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict."""
    return vote.model_dump()


# ============================================================================
# User polls and invites
# ============================================================================


def row_to_user_poll(
    row: Dict[str, Any], option_rows: Iterable[Dict[str, Any]] = ()
) -> UserPoll:
    """Convert a user poll row and its option rows to a UserPoll.

    Args:
        row: User poll row as dict
        option_rows: Option rows of this poll, in any order

    Returns:
        UserPoll with options sorted by display order
    """
    options = sorted(
        (
            UserPollOption(
                id=UserPollOptionId(_uuid(option["id"])),
                label=option["label"],
                display_order=option["display_order"],
            )
            for option in option_rows
        ),
        key=lambda option: option.display_order,
    )
    return UserPoll(
        id=UserPollId(_uuid(row["id"])),
        creator_id=UserId(_uuid(row["creator_id"])),
        category_id=CategoryId(_uuid(row["category_id"])),
        title=row["title"],
        description=row.get("description"),
        source_info=row.get("source_info"),
        type=UserPollType(row["type"]),
        status=UserPollStatus(row["status"]),
        is_invite_only=row["is_invite_only"],
        start_at=row.get("start_at"),
        end_at=row.get("end_at"),
        options=options,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_poll_to_dict(poll: UserPoll) -> Dict[str, Any]:
    """Convert UserPoll to a database dict, excluding its options."""
    return {
        "id": poll.id,
        "creator_id": poll.creator_id,
        "category_id": poll.category_id,
        "title": poll.title,
        "description": poll.description,
        "source_info": poll.source_info,
        "type": poll.type.value,
        "status": poll.status.value,
        "is_invite_only": poll.is_invite_only,
        "start_at": poll.start_at,
        "end_at": poll.end_at,
        "created_at": poll.created_at,
        "updated_at": poll.updated_at,
    }


def user_poll_options_to_dicts(poll: UserPoll) -> list[Dict[str, Any]]:
    """Convert the options of a UserPoll to database dicts."""
    return [
        {
            "id": option.id,
            "poll_id": poll.id,
            "label": option.label,
            "display_order": option.display_order,
        }
        for option in poll.options
    ]


def row_to_user_poll_invite(row: Dict[str, Any]) -> UserPollInvite:
    """Convert database row to UserPollInvite domain model."""
    user_id = _optional_uuid(row.get("user_id"))
    return UserPollInvite(
        id=UserPollInviteId(_uuid(row["id"])),
        poll_id=UserPollId(_uuid(row["poll_id"])),
        mobile=row["mobile"],
        token=InviteToken(row["token"]),
        status=InviteStatus(row["status"]),
        user_id=UserId(user_id) if user_id else None,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_poll_invite_to_dict(invite: UserPollInvite) -> Dict[str, Any]:
    """Convert UserPollInvite domain model to database dict."""
    return {
        "id": invite.id,
        "poll_id": invite.poll_id,
        "mobile": invite.mobile,
        "token": invite.token.root,
        "status": invite.status.value,
        "user_id": invite.user_id,
        "created_at": invite.created_at,
        "updated_at": invite.updated_at,
    }


def row_to_invite_group(row: Dict[str, Any]) -> InviteGroup:
    """Convert database row to InviteGroup domain model."""
    return InviteGroup(
        id=InviteGroupId(_uuid(row["id"])),
        owner_id=UserId(_uuid(row["owner_id"])),
        name=row["name"],
        members=list(row.get("members") or []),
        created_at=row["created_at"],
    )


def invite_group_to_dict(group: InviteGroup) -> Dict[str, Any]:
    """Convert InviteGroup domain model to database dict."""
    return group.model_dump()


# ============================================================================
# Profiles and PSI
# ============================================================================


def row_to_profile(row: Dict[str, Any]) -> Profile:
    """Convert database row to Profile domain model."""
    claimed_by = _optional_uuid(row.get("claimed_by_user_id"))
    return Profile(
        id=ProfileId(_uuid(row["id"])),
        name=row["name"],
        category_id=CategoryId(_uuid(row["category_id"])),
        status=ProfileStatus(row["status"]),
        is_claimed=row["is_claimed"],
        claimed_by_user_id=UserId(claimed_by) if claimed_by else None,
        created_at=row["created_at"],
    )


def profile_to_dict(profile: Profile) -> Dict[str, Any]:
    """Convert Profile domain model to database dict."""
    return {
        "id": profile.id,
        "name": profile.name,
        "category_id": profile.category_id,
        "status": profile.status.value,
        "is_claimed": profile.is_claimed,
        "claimed_by_user_id": profile.claimed_by_user_id,
        "created_at": profile.created_at,
    }


def _review_fields(row: Dict[str, Any]) -> Dict[str, Any]:
    reviewer = _optional_uuid(row.get("reviewed_by_admin_id"))
    return {
        "status": ReviewStatus(row["status"]),
        "submitted_data": row.get("submitted_data") or {},
        "reviewed_at": row.get("reviewed_at"),
        "reviewed_by_admin_id": UserId(reviewer) if reviewer else None,
        "review_reason": row.get("review_reason"),
        "created_at": row["created_at"],
    }


def row_to_profile_claim(row: Dict[str, Any]) -> ProfileClaim:
    """Convert database row to ProfileClaim domain model."""
    return ProfileClaim(
        id=ProfileClaimId(_uuid(row["id"])),
        profile_id=ProfileId(_uuid(row["profile_id"])),
        user_id=UserId(_uuid(row["user_id"])),
        **_review_fields(row),
    )


def profile_claim_to_dict(claim: ProfileClaim) -> Dict[str, Any]:
    """Convert ProfileClaim domain model to database dict."""
    data = claim.model_dump()
    data["status"] = claim.status.value
    return data


def row_to_profile_request(row: Dict[str, Any]) -> ProfileRequest:
    """Convert database row to ProfileRequest domain model."""
    approved = _optional_uuid(row.get("approved_profile_id"))
    return ProfileRequest(
        id=ProfileRequestId(_uuid(row["id"])),
        category_id=CategoryId(_uuid(row["category_id"])),
        requested_name=row["requested_name"],
        user_id=UserId(_uuid(row["user_id"])),
        approved_profile_id=ProfileId(approved) if approved else None,
        **_review_fields(row),
    )


def profile_request_to_dict(request: ProfileRequest) -> Dict[str, Any]:
    """Convert ProfileRequest domain model to database dict."""
    data = request.model_dump()
    data["status"] = request.status.value
    return data


def row_to_psi_vote(row: Dict[str, Any]) -> PsiVote:
    """Convert database row to PsiVote domain model."""
    return PsiVote(
        id=PsiVoteId(_uuid(row["id"])),
        profile_id=ProfileId(_uuid(row["profile_id"])),
        user_id=UserId(_uuid(row["user_id"])),
        weight=row["weight"],
        ratings=PsiRatings(
            trust_integrity=row["trust_integrity"],
            performance_delivery=row["performance_delivery"],
            responsiveness=row["responsiveness"],
            leadership_ability=row["leadership_ability"],
        ),
        created_at=row["created_at"],
    )


def psi_vote_to_dict(vote: PsiVote) -> Dict[str, Any]:
    """Convert PsiVote domain model to database dict, flattening the ratings."""
    return {
        "id": vote.id,
        "profile_id": vote.profile_id,
        "user_id": vote.user_id,
        "weight": vote.weight,
        **vote.ratings.model_dump(),
        "created_at": vote.created_at,
    }
