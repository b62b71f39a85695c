# budget_advisor/ui/form.py
from __future__ import annotations

import streamlit as st

from ..config import CURRENCY_SYMBOL
from ..inputs import INPUT_FIELDS
from ..state import AdvisorViewState, FieldEdited
from ..view import format_amount
from .state import dispatch, request_analysis

# (group, heading, marker)
_GROUPS = (
    ("income", "Primary Income", "🟢"),
    ("needs", "Essential Needs", "🔵"),
    ("wants", "Discretionary Wants", "🟠"),
)

_ICONS = {
    "income": "✨",
    "rent": "🏠",
    "food": "🍽️",
    "travel": "✈️",
    "loans": "💳",
    "shopping": "🛒",
    "entertainment": "🎬",
    "luxury": "💎",
}


def _widget_key(name: str) -> str:
    return f"budget_input_{name}"


def _seed_widget(name: str, current: float) -> None:
    # the widget itself has no default, so clearing it yields None (coerced to 0)
    key = _widget_key(name)
    if key not in st.session_state:
        st.session_state[key] = None if current == 0 else float(current)


def _group_total(state: AdvisorViewState, group: str) -> float | None:
    if group == "needs":
        return state.inputs.total_needs()
    if group == "wants":
        return state.inputs.total_wants()
    return None


def render_input_form(state: AdvisorViewState) -> AdvisorViewState:
    """
    Financial entries panel + analyze button.
    Returns the state after applying this run's field values.
    """
    st.markdown("### 🪙 Financial Entries")

    for group, heading, dot in _GROUPS:
        st.caption(f"{dot} {heading.upper()}")
        for name, label, g in INPUT_FIELDS:
            if g != group:
                continue
            _seed_widget(name, getattr(state.inputs, name))
            raw = st.number_input(
                f"{_ICONS.get(name, '')} {label} ({CURRENCY_SYMBOL})",
                min_value=0.0,
                value=None,
                step=100.0,
                placeholder="0",
                key=_widget_key(name),
                disabled=state.loading,
            )
            state = dispatch(FieldEdited(name, raw))

        subtotal = _group_total(state, group)
        if subtotal is not None:
            st.caption(f"{heading} subtotal: **{format_amount(subtotal)}**")

    st.caption(f"Total spending entered: **{format_amount(state.inputs.total_expenses())}**")

    st.button(
        "📈 Generate Advisor Insights",
        key="budget_analyze",
        type="primary",
        width="stretch",
        disabled=not state.can_analyze,
        on_click=request_analysis,
    )
    return state
