# budget_advisor/ui/state.py
from __future__ import annotations

from typing import Callable

import streamlit as st

from ..inputs import BudgetInputs
from ..state import Action, AdvisorViewState, AnalysisRequested, reduce, run_analysis
from ..types import BudgetAdvice

STATE_KEY = "advisor_state"


# =========================
# Session State
# =========================
def init_advisor_state() -> None:
    """One AdvisorViewState per browser session, created with default inputs."""
    if STATE_KEY not in st.session_state:
        st.session_state[STATE_KEY] = AdvisorViewState()


def get_state() -> AdvisorViewState:
    init_advisor_state()
    return st.session_state[STATE_KEY]


def dispatch(action: Action) -> AdvisorViewState:
    state = reduce(get_state(), action)
    st.session_state[STATE_KEY] = state
    return state


def request_analysis() -> None:
    # button on_click: runs before the rerun that renders the disabled button
    dispatch(AnalysisRequested())


def complete_pending_analysis(fetch: Callable[[BudgetInputs], BudgetAdvice]) -> AdvisorViewState:
    state = run_analysis(get_state(), fetch)
    st.session_state[STATE_KEY] = state
    return state
