import streamlit as st

from promotions_ui.binder import PromotionBinder
from promotions_ui.config import get_config
from promotions_ui.data.util import get_promotions_api
from promotions_ui.render import results_frame
from promotions_ui.ui.form_bindings import (
    AVAILABLE_OPTIONS,
    BUTTONS,
    FIELD_KEYS,
    FLASH_KEY,
    RESULTS_KEY,
    STATE_KEY,
    read_state,
    write_state,
)

config = get_config()
st.set_page_config(page_title=config.page_title, layout="wide")

# -----------------------------------------------------------------------------
# Backend selection (HTTP by default, in-memory for local dev)
# -----------------------------------------------------------------------------
@st.cache_resource
def _binder() -> PromotionBinder:
    return PromotionBinder(get_promotions_api(config.api_backend), config=config)

binder = _binder()

if STATE_KEY not in st.session_state:
    write_state(st.session_state, read_state(st.session_state))


def _on_click(action: str) -> None:
    # Runs before widgets are drawn, so the new values show on this rerun
    state = binder.dispatch(action, read_state(st.session_state))
    write_state(st.session_state, state)


# -----------------------------------------------------------------------------
# Form
# -----------------------------------------------------------------------------
st.title(config.page_title)

flash = st.session_state.get(FLASH_KEY, "")
if flash:
    st.info(flash)

left, right = st.columns(2)
left.text_input("ID", key=FIELD_KEYS["id"])
left.text_input("Name", key=FIELD_KEYS["name"])
left.text_input("Category", key=FIELD_KEYS["category"])
right.selectbox("Available", AVAILABLE_OPTIONS, key=FIELD_KEYS["available"])
right.text_input("Gender", key=FIELD_KEYS["gender"])
right.text_input("Birthday", key=FIELD_KEYS["birthday"])

cols = st.columns(len(BUTTONS))
for col, (action, key) in zip(cols, BUTTONS.items()):
    col.button(action.capitalize(), key=key, on_click=_on_click, args=(action,))

# -----------------------------------------------------------------------------
# Search results
# -----------------------------------------------------------------------------
st.markdown("### Search Results")
state = st.session_state[STATE_KEY]
results_html = st.session_state.get(RESULTS_KEY, "")
if results_html:
    st.container(key=RESULTS_KEY).markdown(results_html, unsafe_allow_html=True)
if state.results:
    with st.expander("Results as dataframe"):
        st.dataframe(results_frame(state.results), use_container_width=True, hide_index=True)

with st.expander("Service endpoint"):
    st.write(f"Promotions are read from **{config.api_backend}** backend at `{config.collection_url}`.")
