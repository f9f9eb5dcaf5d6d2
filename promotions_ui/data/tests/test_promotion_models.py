import pytest
from promotions_ui.data.models import Promotion, PromotionFilters, PromotionForm


@pytest.mark.parametrize("raw, expected", [
    ("true", True),
    ("false", False),
    ("", False),
    ("TRUE", False),
    ("True", False),
    (" true", False),
])
def test_availability_coercion(raw, expected):
    """Only the exact string "true" becomes a true payload flag."""
    form = PromotionForm(name="n", available=raw)
    assert form.to_promotion().to_payload()["available"] is expected


def test_payload_never_carries_id():
    form = PromotionForm(id="12", name="flash sale", category="electronics",
                         available="true", gender="unisex", birthday="2024-01-01")
    payload = form.to_promotion().to_payload()
    assert "id" not in payload
    assert payload == {
        "name": "flash sale",
        "category": "electronics",
        "available": True,
        "gender": "unisex",
        "birthday": "2024-01-01",
    }


def test_form_from_promotion():
    form = PromotionForm.from_promotion(Promotion(id=7, name="a", available=False))
    assert form.id == "7"
    assert form.available == "false"

    no_id = PromotionForm.from_promotion(Promotion(name="a", available=True))
    assert no_id.id == ""
    assert no_id.available == "true"


def test_cleared_keep_id():
    form = PromotionForm(id="3", name="a", category="b", available="true", gender="g", birthday="d")
    assert form.cleared_keep_id() == PromotionForm(id="3")
    assert form.cleared() == PromotionForm()


def test_query_string_skips_empty_category():
    filters = PromotionFilters(name="a", category="", available=True)
    assert filters.to_query_string() == "name=a&available=true"


def test_query_string_never_sends_available_false():
    assert PromotionFilters(category="toys", available=False).to_query_string() == "category=toys"
    assert PromotionFilters().to_query_string() == ""


def test_query_string_from_form():
    form = PromotionForm(name="flash sale", category="electronics", available="false")
    assert form.to_filters().to_query_string() == "name=flash%20sale&category=electronics"


def test_promotion_ignores_unknown_fields():
    promotion = Promotion.model_validate({"id": 1, "name": "x", "created_at": "now"})
    assert promotion.id == 1
    assert promotion.birthday == ""


def test_form_from_promotion_with_null_fields():
    promotion = Promotion(id=1, name="a", category=None, available=None, gender=None, birthday=None)
    form = PromotionForm.from_promotion(promotion)
    assert form == PromotionForm(id="1", name="a", available="false")
