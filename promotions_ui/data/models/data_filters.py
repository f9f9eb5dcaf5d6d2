from __future__ import annotations

from urllib.parse import quote

from pydantic import BaseModel, Field


class PromotionFilters(BaseModel):
    """Filters for the promotion search."""
    name: str = Field(default="", description="Exact name filter; empty means no filter")
    category: str = Field(default="", description="Exact category filter; empty means no filter")
    available: bool = Field(default=False, description="Only available promotions; false means no filter")

    def to_query_string(self) -> str:
        """Build ``key=value`` pairs joined by ``&``.

        Empty fields are omitted, and ``available`` is only sent when true, so
        ``available=false`` never appears as a filter.
        """
        pairs = []
        if self.name:
            pairs.append(f"name={quote(self.name, safe='')}")
        if self.category:
            pairs.append(f"category={quote(self.category, safe='')}")
        if self.available:
            pairs.append("available=true")
        return "&".join(pairs)
