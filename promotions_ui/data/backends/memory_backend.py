from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import pandas as pd

from ..interface import PromotionsApi
from ..models import (
    ApiFailure,
    ApiSuccess,
    DeleteResult,
    Promotion,
    PromotionFilters,
    PromotionListResult,
    PromotionResult,
)
from promotions_ui.logging import get_logger

COLUMNS = ["id", "name", "category", "available", "gender", "birthday"]


class InMemoryPromotionsApi(PromotionsApi):
    """
    In-process stand-in for the promotions REST server.
    - Rows live in a single DataFrame; ids are assigned sequentially on create.
    - Failures mirror the server's: 404 with a ``message`` for unknown ids.
    - Optionally seeded from a CSV with the promotion columns.
    """

    def __init__(self, seed_csv: str | Path | None = None) -> None:
        self.logger = get_logger(__name__)
        self._frame = self._load_seed(Path(seed_csv)) if seed_csv else self._empty_frame()
        self._next_id = int(self._frame["id"].max()) + 1 if not self._frame.empty else 1

    # ---------- loading helpers ----------

    @staticmethod
    def _empty_frame() -> pd.DataFrame:
        return pd.DataFrame(
            {
                "id": pd.Series(dtype="int64"),
                "name": pd.Series(dtype="object"),
                "category": pd.Series(dtype="object"),
                "available": pd.Series(dtype="bool"),
                "gender": pd.Series(dtype="object"),
                "birthday": pd.Series(dtype="object"),
            }
        )

    @staticmethod
    def _load_seed(path: Path) -> pd.DataFrame:
        if not path.exists():
            raise FileNotFoundError(
                f"Seed CSV not found: {path}\n"
                f"Either unset SEED_CSV or point it at a CSV with columns: {', '.join(COLUMNS)}"
            )
        frame = pd.read_csv(
            path,
            dtype={"name": str, "category": str, "gender": str, "birthday": str},
            keep_default_na=False,
        )
        missing = [c for c in COLUMNS if c not in frame.columns]
        if missing:
            raise ValueError(f"Seed CSV {path} is missing columns: {', '.join(missing)}")
        frame = frame[COLUMNS].copy()
        frame["id"] = frame["id"].astype("int64")
        frame["available"] = frame["available"].astype(str).str.lower() == "true"
        return frame

    # ---------- row helpers ----------

    @staticmethod
    def _parse_id(promotion_id: str) -> Optional[int]:
        try:
            return int(str(promotion_id).strip())
        except ValueError:
            return None

    def _locate(self, promotion_id: str) -> Optional[int]:
        """Return the DataFrame index of the row, or None when absent."""
        pid = self._parse_id(promotion_id)
        if pid is None:
            return None
        matches = self._frame.index[self._frame["id"] == pid]
        return matches[0] if len(matches) else None

    @staticmethod
    def _not_found(promotion_id: str) -> ApiFailure:
        return ApiFailure(
            message=f"Promotion with id '{promotion_id}' was not found.",
            status_code=404,
        )

    @staticmethod
    def _to_promotion(row: pd.Series) -> Promotion:
        return Promotion(
            id=int(row["id"]),
            name=str(row["name"]),
            category=str(row["category"]),
            available=bool(row["available"]),
            gender=str(row["gender"]),
            birthday=str(row["birthday"]),
        )

    # ---------- interface implementation ----------

    def create(self, promotion: Promotion) -> PromotionResult:
        row = {"id": self._next_id, **promotion.to_payload()}
        self._next_id += 1
        new_row = pd.DataFrame([row], columns=COLUMNS)
        self._frame = new_row if self._frame.empty else pd.concat([self._frame, new_row], ignore_index=True)
        self.logger.debug(f"created promotion {row['id']}")
        return ApiSuccess[Promotion](value=Promotion(**row), status_code=201)

    def update(self, promotion_id: str, promotion: Promotion) -> PromotionResult:
        idx = self._locate(promotion_id)
        if idx is None:
            return self._not_found(promotion_id)
        for key, value in promotion.to_payload().items():
            self._frame.at[idx, key] = value
        return ApiSuccess[Promotion](value=self._to_promotion(self._frame.loc[idx]))

    def retrieve(self, promotion_id: str) -> PromotionResult:
        idx = self._locate(promotion_id)
        if idx is None:
            return self._not_found(promotion_id)
        return ApiSuccess[Promotion](value=self._to_promotion(self._frame.loc[idx]))

    def delete(self, promotion_id: str) -> DeleteResult:
        # Deleting an absent record still succeeds
        idx = self._locate(promotion_id)
        if idx is not None:
            self._frame = self._frame.drop(index=idx).reset_index(drop=True)
        return ApiSuccess[None](value=None, status_code=204)

    def search(self, filters: PromotionFilters) -> PromotionListResult:
        df = self._frame
        mask = pd.Series(True, index=df.index)
        if filters.name:
            mask &= (df["name"] == filters.name)
        if filters.category:
            mask &= (df["category"] == filters.category)
        if filters.available:
            mask &= df["available"].astype(bool)

        promotions: List[Promotion] = [self._to_promotion(row) for _, row in df.loc[mask].iterrows()]
        return ApiSuccess[List[Promotion]](value=promotions)
