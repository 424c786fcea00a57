"""Category use cases."""

from .common import CategoryResponse, EffectiveCategoryResponse
from .create_category import CreateCategoryRequest, CreateCategoryUseCase
from .delete_category import (
    DeleteCategoryRequest,
    DeleteCategoryResponse,
    DeleteCategoryUseCase,
)
from .get_category import GetCategoryRequest, GetCategoryResponse, GetCategoryUseCase
from .preview_impact import (
    PreviewImpactRequest,
    PreviewImpactResponse,
    PreviewImpactUseCase,
)
from .update_category import UpdateCategoryRequest, UpdateCategoryUseCase

__all__ = [
    "CategoryResponse",
    "CreateCategoryRequest",
    "CreateCategoryUseCase",
    "DeleteCategoryRequest",
    "DeleteCategoryResponse",
    "DeleteCategoryUseCase",
    "EffectiveCategoryResponse",
    "GetCategoryRequest",
    "GetCategoryResponse",
    "GetCategoryUseCase",
    "PreviewImpactRequest",
    "PreviewImpactResponse",
    "PreviewImpactUseCase",
    "UpdateCategoryRequest",
    "UpdateCategoryUseCase",
]
