"""Form-Resource Binder.

Each user action is a transition from one ``FormState`` to the next. The
network call goes through a ``PromotionsApi`` and comes back as an
``ApiSuccess``/``ApiFailure``; presentation happens elsewhere, through the
``on_change`` hook and whatever renders the returned state.
"""
from __future__ import annotations

import itertools
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from promotions_ui.config import AppConfig, get_config
from promotions_ui.data.interface import PromotionsApi
from promotions_ui.data.models import ApiFailure, Promotion, PromotionForm
from promotions_ui.logging import get_logger
from promotions_ui.render import render_results_table

ACTIONS = ("create", "update", "retrieve", "delete", "search", "clear")


class FormState(BaseModel):
    """Everything the page shows: the single-record form, the flash message and the results."""
    model_config = ConfigDict(frozen=True)

    form: PromotionForm = Field(default_factory=PromotionForm)
    flash_message: str = ""
    results: Optional[List[Promotion]] = Field(default=None, description="None until a search succeeds")
    results_html: str = ""

    def with_form(self, form: PromotionForm) -> "FormState":
        return self.model_copy(update={"form": form})

    def with_message(self, message: str) -> "FormState":
        return self.model_copy(update={"flash_message": message})


StateListener = Callable[[FormState], None]


class PromotionBinder:
    """Binds the promotion form to the promotions REST resource."""

    def __init__(
        self,
        api: PromotionsApi,
        config: Optional[AppConfig] = None,
        on_change: Optional[StateListener] = None,
        max_workers: int = 4,
    ) -> None:
        self.api = api
        self.config = config or get_config()
        self.on_change = on_change
        self.logger = get_logger(__name__)
        self._tokens = itertools.count(1)
        self._latest_token = 0
        self._lock = threading.RLock()
        self._executor: Optional[ThreadPoolExecutor] = None
        self._max_workers = max_workers

    # ---------- helpers ----------

    def _emit(self, state: FormState) -> None:
        if self.on_change is not None:
            self.on_change(state)

    def _start(self, state: FormState) -> FormState:
        """Clear the flash message before a request goes out."""
        started = state.with_message("")
        self._emit(started)
        return started

    # ---------- network actions ----------

    def create(self, state: FormState) -> FormState:
        state = self._start(state)
        result = self.api.create(state.form.to_promotion())
        if isinstance(result, ApiFailure):
            return state.with_message(result.message)
        return state.with_form(PromotionForm.from_promotion(result.value)).with_message(
            self.config.success_message
        )

    def update(self, state: FormState) -> FormState:
        state = self._start(state)
        result = self.api.update(state.form.id, state.form.to_promotion())
        if isinstance(result, ApiFailure):
            # Form stays as the user left it
            return state.with_message(result.message)
        return state.with_form(PromotionForm.from_promotion(result.value)).with_message(
            self.config.success_message
        )

    def retrieve(self, state: FormState) -> FormState:
        state = self._start(state)
        result = self.api.retrieve(state.form.id)
        if isinstance(result, ApiFailure):
            return state.with_form(state.form.cleared_keep_id()).with_message(result.message)
        return state.with_form(PromotionForm.from_promotion(result.value)).with_message(
            self.config.success_message
        )

    def delete(self, state: FormState) -> FormState:
        state = self._start(state)
        result = self.api.delete(state.form.id)
        if isinstance(result, ApiFailure):
            if self.config.surface_delete_errors:
                return state.with_message(result.message)
            return state.with_message(self.config.delete_error_message)
        return state.with_form(state.form.cleared_keep_id()).with_message(
            self.config.delete_success_message
        )

    def search(self, state: FormState) -> FormState:
        state = self._start(state)
        result = self.api.search(state.form.to_filters())
        if isinstance(result, ApiFailure):
            # Previous results stay on screen
            return state.with_message(result.message)
        promotions = list(result.value)
        state = state.model_copy(
            update={"results": promotions, "results_html": render_results_table(promotions)}
        )
        if promotions:
            state = state.with_form(PromotionForm.from_promotion(promotions[0]))
        return state.with_message(self.config.success_message)

    # ---------- local actions ----------

    def clear(self, state: FormState) -> FormState:
        return state.with_form(PromotionForm()).with_message("")

    # ---------- dispatch ----------

    def dispatch(self, action: str, state: FormState) -> FormState:
        if action not in ACTIONS:
            raise ValueError(f"Unknown action: {action}")
        return getattr(self, action)(state)

    def submit(self, action: str, state: FormState) -> "Future[Optional[FormState]]":
        """Run an action in the background.

        The future resolves to the new state, or to None when a newer
        submission superseded this one before its response arrived.
        """
        if action not in ACTIONS:
            raise ValueError(f"Unknown action: {action}")
        with self._lock:
            token = next(self._tokens)
            self._latest_token = token
            if self._executor is None:
                self._executor = ThreadPoolExecutor(
                    max_workers=self._max_workers, thread_name_prefix="promotions"
                )
            executor = self._executor
        return executor.submit(self._run, token, action, state)

    def _run(self, token: int, action: str, state: FormState) -> Optional[FormState]:
        new_state = getattr(self, action)(state)
        with self._lock:
            if token != self._latest_token:
                self.logger.info(f"discarding stale {action} response (request {token})")
                return None
            # Token check and emit are atomic
            self._emit(new_state)
        return new_state

    def shutdown(self, wait: bool = True) -> None:
        with self._lock:
            executor, self._executor = self._executor, None
        if executor is not None:
            executor.shutdown(wait=wait)
