"""Category routes.

Writes and impact previews require the admin role.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, status

from pulse.application.usecase.category import (
    CategoryResponse,
    CreateCategoryRequest,
    CreateCategoryUseCase,
    DeleteCategoryRequest,
    DeleteCategoryResponse,
    DeleteCategoryUseCase,
    GetCategoryRequest,
    GetCategoryResponse,
    GetCategoryUseCase,
    PreviewImpactRequest,
    PreviewImpactResponse,
    PreviewImpactUseCase,
    UpdateCategoryRequest,
    UpdateCategoryUseCase,
)
from pulse.domain.service import CategoryChanges, JWTService, ParentDefaults
from pulse.interface.api.auth import require_admin

router = APIRouter(prefix="/categories", tags=["categories"], route_class=DishkaRoute)


@router.post(
    "", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED
)
async def create_category(
    request: CreateCategoryRequest,
    create_category_use_case: FromDishka[CreateCategoryUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> CategoryResponse:
    """Create a parent or child category."""
    require_admin(jwt_service, auth_token, authorization)
    return await create_category_use_case.execute(request)


@router.get("/{category_id}", response_model=GetCategoryResponse)
async def get_category(
    category_id: str,
    get_category_use_case: FromDishka[GetCategoryUseCase],
) -> GetCategoryResponse:
    """Get a category with its effective values."""
    return await get_category_use_case.execute(
        GetCategoryRequest(category_id=category_id)
    )


@router.patch("/{category_id}", response_model=CategoryResponse)
async def update_category(
    category_id: str,
    changes: CategoryChanges,
    update_category_use_case: FromDishka[UpdateCategoryUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> CategoryResponse:
    """Partially update a category.

    An override sent as ``null`` reverts to inheriting from the parent.
    """
    require_admin(jwt_service, auth_token, authorization)
    return await update_category_use_case.execute(
        UpdateCategoryRequest(category_id=category_id, changes=changes)
    )


@router.delete("/{category_id}", response_model=DeleteCategoryResponse)
async def delete_category(
    category_id: str,
    delete_category_use_case: FromDishka[DeleteCategoryUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> DeleteCategoryResponse:
    """Delete a category without children."""
    require_admin(jwt_service, auth_token, authorization)
    return await delete_category_use_case.execute(
        DeleteCategoryRequest(category_id=category_id)
    )


@router.post("/{category_id}/impact-preview", response_model=PreviewImpactResponse)
async def preview_impact(
    category_id: str,
    defaults: ParentDefaults,
    preview_impact_use_case: FromDishka[PreviewImpactUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> PreviewImpactResponse:
    """Preview which children new parent defaults would reach."""
    require_admin(jwt_service, auth_token, authorization)
    return await preview_impact_use_case.execute(
        PreviewImpactRequest(parent_id=category_id, defaults=defaults)
    )
