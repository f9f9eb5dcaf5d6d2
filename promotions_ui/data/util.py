from __future__ import annotations

from typing import Literal, Optional

from .backends.http_backend import HttpPromotionsApi
from .backends.memory_backend import InMemoryPromotionsApi
from .interface import PromotionsApi
from promotions_ui.config import get_config


def get_promotions_api(kind: Optional[Literal["http", "memory"]] = None) -> PromotionsApi:
    config = get_config()
    kind = kind or config.api_backend
    if kind == "http":
        return HttpPromotionsApi(collection_url=config.collection_url)
    if kind == "memory":
        # Local stand-in for the REST server, optionally seeded from CSV
        return InMemoryPromotionsApi(seed_csv=config.seed_csv)
    raise ValueError(f"Unknown promotions api kind: {kind}")
