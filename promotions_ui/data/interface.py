from __future__ import annotations

from typing import Protocol

from .models import (
    # Filter classes
    PromotionFilters,
    # Records
    Promotion,
    # Result types
    DeleteResult,
    PromotionListResult,
    PromotionResult,
)


# ---- Promotions API protocol ----

class PromotionsApi(Protocol):
    """
    Backend-agnostic contract for the promotion form.

    Implementations never raise for request failures: every non-success
    outcome comes back as an ``ApiFailure`` carrying a user-facing message.
    No result caching; each call is a fresh request.
    """

    def create(self, promotion: Promotion) -> PromotionResult:
        """POST the promotion (without id) to the collection."""
        ...

    def update(self, promotion_id: str, promotion: Promotion) -> PromotionResult:
        """PUT the promotion (without id) to the record addressed by id."""
        ...

    def retrieve(self, promotion_id: str) -> PromotionResult:
        """GET a single promotion by id."""
        ...

    def delete(self, promotion_id: str) -> DeleteResult:
        """DELETE a single promotion by id; the response body is ignored."""
        ...

    def search(self, filters: PromotionFilters) -> PromotionListResult:
        """GET the collection narrowed by the filter query string."""
        ...
