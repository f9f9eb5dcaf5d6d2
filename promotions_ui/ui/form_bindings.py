from __future__ import annotations

from typing import Any, MutableMapping

from promotions_ui.binder import FormState
from promotions_ui.data.models import PromotionForm

# Form field name -> element id on the page
FIELD_KEYS = {
    "id": "promotion_id",
    "name": "promotion_name",
    "category": "promotion_category",
    "available": "promotion_available",
    "gender": "promotion_gender",
    "birthday": "promotion_birthday",
}
FLASH_KEY = "flash_message"
RESULTS_KEY = "search_results"
STATE_KEY = "promotion_form_state"

AVAILABLE_OPTIONS = ["", "true", "false"]

BUTTONS = {
    "create": "create-btn",
    "update": "update-btn",
    "retrieve": "retrieve-btn",
    "delete": "delete-btn",
    "clear": "clear-btn",
    "search": "search-btn",
}


def read_state(session: MutableMapping[str, Any]) -> FormState:
    """Build a FormState from the widget values currently in the session."""
    previous = session.get(STATE_KEY) or FormState()
    form = PromotionForm(**{field: str(session.get(key) or "") for field, key in FIELD_KEYS.items()})
    return previous.with_form(form).with_message(session.get(FLASH_KEY, previous.flash_message) or "")


def write_state(session: MutableMapping[str, Any], state: FormState) -> None:
    """Push a FormState into the session so the next render shows it."""
    for field, key in FIELD_KEYS.items():
        session[key] = getattr(state.form, field)
    session[FLASH_KEY] = state.flash_message
    session[RESULTS_KEY] = state.results_html
    session[STATE_KEY] = state
