from __future__ import annotations

from typing import Generic, List, Optional, TypeVar, Union

from pydantic import BaseModel, Field

from .promotion import Promotion

T = TypeVar("T")


class ApiSuccess(BaseModel, Generic[T]):
    """Successful response with its parsed value."""
    value: T
    status_code: int = Field(default=200, description="HTTP status returned by the server")

    @property
    def ok(self) -> bool:
        return True


class ApiFailure(BaseModel):
    """Any non-success outcome: transport error or non-2xx status."""
    message: str = Field(description="User-facing failure text")
    status_code: Optional[int] = Field(default=None, description="HTTP status, None for transport errors")

    @property
    def ok(self) -> bool:
        return False


PromotionResult = Union[ApiSuccess[Promotion], ApiFailure]
PromotionListResult = Union[ApiSuccess[List[Promotion]], ApiFailure]
DeleteResult = Union[ApiSuccess[None], ApiFailure]
