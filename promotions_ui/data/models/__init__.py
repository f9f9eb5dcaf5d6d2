from .data_filters import PromotionFilters

from .promotion import Promotion, PromotionForm
from .api_result import (
    ApiSuccess,
    ApiFailure,
    PromotionResult,
    PromotionListResult,
    DeleteResult,
)

__all__ = [
    # Filter classes
    "PromotionFilters",
    # Records and form state
    "Promotion",
    "PromotionForm",
    # Result types
    "ApiSuccess",
    "ApiFailure",
    "PromotionResult",
    "PromotionListResult",
    "DeleteResult",
]
