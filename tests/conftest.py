"""Test configuration and shared builders.

Builders write straight to the repositories so each test arranges exactly
the state it needs without going through the services under test.
"""

from datetime import datetime
from uuid import uuid4

from dishka import AsyncContainer

from pulse.domain.model import (
    Category,
    Poll,
    PollConfig,
    Profile,
    User,
)
from pulse.domain.repository import (
    CategoryRepository,
    PollConfigRepository,
    PollRepository,
    ProfileRepository,
    UserRepository,
)
from pulse.domain.value import (
    AdminCurated,
    CategoryDomain,
    CategoryId,
    CategoryStatus,
    PollConfigId,
    PollConfigStatus,
    PollId,
    PollPermissions,
    PollRules,
    PollStatus,
    PollTheme,
    PollUiTemplate,
    ProfileId,
    Slug,
    UserId,
    UserRole,
    YesNo,
    inheritable,
)


def default_theme() -> PollTheme:
    """Theme used by every test config."""
    return PollTheme(primary_color="#112233", accent_color="#445566")


async def make_user(
    env: AsyncContainer,
    *,
    verified: bool = False,
    role: UserRole = UserRole.USER,
    mobile: str | None = None,
) -> User:
    """Save a user."""
    repo = await env.get(UserRepository)
    return await repo.save(
        User(id=UserId(uuid4()), mobile=mobile, role=role, is_verified=verified)
    )


async def make_parent_category(
    env: AsyncContainer,
    *,
    domain: CategoryDomain = CategoryDomain.POLL,
    claimable: YesNo = YesNo.YES,
    request_allowed: YesNo = YesNo.YES,
    admin_curated: AdminCurated = AdminCurated.NO,
    status: CategoryStatus = CategoryStatus.ACTIVE,
    name: str = "Politics",
) -> Category:
    """Save a parent category with the given defaults."""
    repo = await env.get(CategoryRepository)
    return await repo.save(
        Category(
            id=CategoryId(uuid4()),
            name=name,
            domain=domain,
            is_parent=True,
            status=status,
            claimable_default=claimable,
            request_allowed_default=request_allowed,
            admin_curated_default=admin_curated,
        )
    )


async def make_child_category(
    env: AsyncContainer,
    parent: Category,
    *,
    claimable: YesNo | None = None,
    request_allowed: YesNo | None = None,
    admin_curated: AdminCurated | None = None,
    status: CategoryStatus = CategoryStatus.ACTIVE,
    name: str = "Elections",
) -> Category:
    """Save a child of ``parent``. ``None`` overrides inherit."""
    repo = await env.get(CategoryRepository)
    return await repo.save(
        Category(
            id=CategoryId(uuid4()),
            name=name,
            domain=parent.domain,
            is_parent=False,
            parent_id=parent.id,
            status=status,
            claimable=inheritable(claimable),
            request_allowed=inheritable(request_allowed),
            admin_curated=inheritable(admin_curated),
        )
    )


async def make_poll_category(env: AsyncContainer, **parent_defaults) -> Category:
    """Save a POLL parent and an inheriting child; return the child."""
    parent = await make_parent_category(env, **parent_defaults)
    return await make_child_category(env, parent)


async def make_config(
    env: AsyncContainer,
    category_id: CategoryId,
    *,
    status: PollConfigStatus = PollConfigStatus.ACTIVE,
    ui_template: PollUiTemplate = PollUiTemplate.STANDARD_LIST,
    rules: PollRules | None = None,
    permissions: PollPermissions | None = None,
    name: str = "Standard",
) -> PollConfig:
    """Save a poll config, ACTIVE by default."""
    repo = await env.get(PollConfigRepository)
    return await repo.save(
        PollConfig(
            id=PollConfigId(uuid4()),
            name=name,
            slug=Slug(f"config-{uuid4().hex[:8]}"),
            category_id=category_id,
            status=status,
            ui_template=ui_template,
            theme=default_theme(),
            rules=rules or PollRules(),
            permissions=permissions or PollPermissions(),
        )
    )


async def make_poll(
    env: AsyncContainer,
    *,
    status: PollStatus = PollStatus.PUBLISHED,
    start_at: datetime | None = None,
    end_at: datetime | None = None,
    ui_template: PollUiTemplate = PollUiTemplate.STANDARD_LIST,
    rules: PollRules | None = None,
    permissions: PollPermissions | None = None,
) -> Poll:
    """Save an admin poll on a fresh allowed category and ACTIVE config."""
    category = await make_poll_category(env)
    config = await make_config(
        env,
        category.id,
        ui_template=ui_template,
        rules=rules,
        permissions=permissions,
    )
    repo = await env.get(PollRepository)
    return await repo.save(
        Poll(
            id=PollId(uuid4()),
            title="Best city",
            category_id=category.id,
            poll_config_id=config.id,
            status=status,
            start_at=start_at,
            end_at=end_at,
        )
    )


async def make_profile(
    env: AsyncContainer,
    category_id: CategoryId | None = None,
    *,
    name: str = "Jane Doe",
) -> Profile:
    """Save an ACTIVE profile, on a fresh claimable PROFILE category if none given."""
    if category_id is None:
        parent = await make_parent_category(env, domain=CategoryDomain.PROFILE)
        category_id = (await make_child_category(env, parent)).id
    repo = await env.get(ProfileRepository)
    return await repo.save(
        Profile(id=ProfileId(uuid4()), name=name, category_id=category_id)
    )
