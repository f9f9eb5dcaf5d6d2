from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

import requests
from pydantic import TypeAdapter
from requests.exceptions import RequestException

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
from promotions_ui.config import get_config
from promotions_ui.logging import get_logger

JSON_HEADERS = {"Content-Type": "application/json", "Accept": "application/json"}

_promotion_list = TypeAdapter(List[Promotion])


class HttpPromotionsApi(PromotionsApi):
    """
    REST implementation against ``/promotions`` and ``/promotions/{id}``.
    - Every request declares a JSON content type; only create/update carry a body.
    - Identifiers are interpolated as given, so an empty id is sent as-is
      and left to the server to reject.
    """

    def __init__(
        self,
        collection_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ) -> None:
        config = get_config()
        self.collection_url = (collection_url or config.collection_url).rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout if timeout is not None else config.request_timeout
        self.logger = get_logger(__name__)

    # ---------- request helpers ----------

    def _record_url(self, promotion_id: str) -> str:
        return f"{self.collection_url}/{promotion_id}"

    def _send(self, method: str, url: str, payload: Optional[Dict[str, Any]] = None):
        """Issue one request; returns the response or an ApiFailure for transport errors."""
        data = json.dumps(payload) if payload is not None else None
        self.logger.debug(f"{method} {url}")
        try:
            return self.session.request(
                method, url, data=data, headers=JSON_HEADERS, timeout=self.timeout
            )
        except RequestException as e:
            self.logger.warning(f"{method} {url} failed: {e}")
            return ApiFailure(message=str(e))

    def _failure(self, method: str, url: str, response: requests.Response) -> ApiFailure:
        message = self._error_message(response)
        self.logger.warning(f"{method} {url} -> {response.status_code}: {message}")
        return ApiFailure(message=message, status_code=response.status_code)

    @staticmethod
    def _error_message(response: requests.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get("message") is not None:
            return str(body["message"])
        return f"{response.status_code} {response.reason or ''}".strip()

    @staticmethod
    def _is_success(response: requests.Response) -> bool:
        return 200 <= response.status_code < 300

    def _promotion_call(
        self, method: str, url: str, payload: Optional[Dict[str, Any]] = None
    ) -> PromotionResult:
        response = self._send(method, url, payload)
        if isinstance(response, ApiFailure):
            return response
        if not self._is_success(response):
            return self._failure(method, url, response)
        try:
            promotion = Promotion.model_validate(response.json())
        except ValueError as e:
            self.logger.warning(f"{method} {url} returned an unreadable promotion: {e}")
            return ApiFailure(message="Invalid response from server", status_code=response.status_code)
        return ApiSuccess[Promotion](value=promotion, status_code=response.status_code)

    # ---------- interface implementation ----------

    def create(self, promotion: Promotion) -> PromotionResult:
        return self._promotion_call("POST", self.collection_url, promotion.to_payload())

    def update(self, promotion_id: str, promotion: Promotion) -> PromotionResult:
        return self._promotion_call("PUT", self._record_url(promotion_id), promotion.to_payload())

    def retrieve(self, promotion_id: str) -> PromotionResult:
        return self._promotion_call("GET", self._record_url(promotion_id))

    def delete(self, promotion_id: str) -> DeleteResult:
        url = self._record_url(promotion_id)
        response = self._send("DELETE", url)
        if isinstance(response, ApiFailure):
            return response
        if not self._is_success(response):
            return self._failure("DELETE", url, response)
        # Body is ignored on success, whatever it contains
        return ApiSuccess[None](value=None, status_code=response.status_code)

    def search(self, filters: PromotionFilters) -> PromotionListResult:
        query = filters.to_query_string()
        url = f"{self.collection_url}?{query}" if query else self.collection_url
        response = self._send("GET", url)
        if isinstance(response, ApiFailure):
            return response
        if not self._is_success(response):
            return self._failure("GET", url, response)
        try:
            promotions = _promotion_list.validate_python(response.json())
        except ValueError as e:
            self.logger.warning(f"GET {url} returned an unreadable result list: {e}")
            return ApiFailure(message="Invalid response from server", status_code=response.status_code)
        return ApiSuccess[List[Promotion]](value=promotions, status_code=response.status_code)
