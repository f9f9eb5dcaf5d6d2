from __future__ import annotations

from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .data_filters import PromotionFilters


class Promotion(BaseModel):
    """A promotion record as exchanged with the REST resource."""
    model_config = ConfigDict(extra="ignore")

    id: Optional[Union[int, str]] = Field(default=None, description="Server-assigned identifier")
    name: Optional[str] = Field(default="", description="Promotion name")
    category: Optional[str] = Field(default="", description="Promotion category")
    available: Optional[bool] = Field(default=False, description="Whether the promotion is available")
    gender: Optional[str] = Field(default="", description="Target gender")
    birthday: Optional[str] = Field(default="", description="Birthday, no format enforced")

    def to_payload(self) -> Dict[str, Any]:
        """JSON body for create/update; the id is never sent."""
        return self.model_dump(exclude={"id"})


class PromotionForm(BaseModel):
    """String-valued form state, one field per input element."""
    model_config = ConfigDict(frozen=True)

    id: str = ""
    name: str = ""
    category: str = ""
    available: str = ""  # "true" / "false" / ""
    gender: str = ""
    birthday: str = ""

    @property
    def is_available(self) -> bool:
        # Only the exact string "true" counts
        return self.available == "true"

    def to_promotion(self) -> Promotion:
        return Promotion(
            name=self.name,
            category=self.category,
            available=self.is_available,
            gender=self.gender,
            birthday=self.birthday,
        )

    def to_filters(self) -> PromotionFilters:
        return PromotionFilters(
            name=self.name,
            category=self.category,
            available=self.is_available,
        )

    @classmethod
    def from_promotion(cls, promotion: Promotion) -> "PromotionForm":
        return cls(
            id="" if promotion.id is None else str(promotion.id),
            name=promotion.name or "",
            category=promotion.category or "",
            available="true" if promotion.available else "false",
            gender=promotion.gender or "",
            birthday=promotion.birthday or "",
        )

    def cleared(self) -> "PromotionForm":
        return PromotionForm()

    def cleared_keep_id(self) -> "PromotionForm":
        """Empty every editable field, leaving the id in place."""
        return PromotionForm(id=self.id)
