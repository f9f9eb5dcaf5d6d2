from promotions_ui.binder import FormState
from promotions_ui.data.models import Promotion, PromotionForm
from promotions_ui.ui.form_bindings import FLASH_KEY, RESULTS_KEY, STATE_KEY, read_state, write_state


def test_read_state_from_element_ids():
    session = {
        "promotion_id": "7",
        "promotion_name": "flash sale",
        "promotion_category": "electronics",
        "promotion_available": "true",
        "promotion_gender": "unisex",
        "promotion_birthday": "2024-01-01",
        "flash_message": "Success",
    }
    state = read_state(session)
    assert state.form == PromotionForm(id="7", name="flash sale", category="electronics",
                                       available="true", gender="unisex", birthday="2024-01-01")
    assert state.flash_message == "Success"


def test_read_state_of_empty_session():
    assert read_state({}) == FormState()


def test_write_then_read_keeps_results():
    session = {}
    state = FormState(
        form=PromotionForm(id="1", name="a", available="false"),
        flash_message="Success",
        results=[Promotion(id=1, name="a")],
        results_html="<table></table>",
    )
    write_state(session, state)

    assert session["promotion_id"] == "1"
    assert session["promotion_available"] == "false"
    assert session[FLASH_KEY] == "Success"
    assert session[RESULTS_KEY] == "<table></table>"
    assert session[STATE_KEY] is state
    assert read_state(session) == state
