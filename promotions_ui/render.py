from __future__ import annotations

from html import escape
from typing import Any, List, Sequence

import pandas as pd

from promotions_ui.data.models import Promotion

RESULT_COLUMNS = ["id", "name", "category", "available", "gender", "birthday"]
RESULT_HEADERS = ["ID", "Name", "Category", "Available", "Gender", "Birthday"]


def _cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return escape(str(value))


def render_results_table(promotions: Sequence[Promotion]) -> str:
    """Render search results as a striped HTML table.

    Rows keep response order and carry positional ids ``row_0``, ``row_1``, ...
    An empty sequence renders the header row only.
    """
    parts: List[str] = ['<table class="table table-striped" cellpadding="10">', "<thead><tr>"]
    parts.extend(f'<th class="col-md-2">{header}</th>' for header in RESULT_HEADERS)
    parts.append("</tr></thead><tbody>")
    for i, promotion in enumerate(promotions):
        cells = "".join(f"<td>{_cell(getattr(promotion, col))}</td>" for col in RESULT_COLUMNS)
        parts.append(f'<tr id="row_{i}">{cells}</tr>')
    parts.append("</tbody></table>")
    return "".join(parts)


def results_frame(promotions: Sequence[Promotion]) -> pd.DataFrame:
    """Search results as a DataFrame with the table's columns, for st.dataframe."""
    rows = [promotion.model_dump() for promotion in promotions]
    return pd.DataFrame(rows, columns=RESULT_COLUMNS)
