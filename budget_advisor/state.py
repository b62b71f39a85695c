# budget_advisor/state.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Optional, Union

from .errors import GENERIC_ERROR_MESSAGE
from .inputs import BudgetInputs
from .types import BudgetAdvice

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AdvisorViewState:
    inputs: BudgetInputs = field(default_factory=BudgetInputs)
    advice: Optional[BudgetAdvice] = None
    loading: bool = False
    error: Optional[str] = None

    @property
    def can_analyze(self) -> bool:
        return not self.loading

    @property
    def status(self) -> str:
        if self.loading:
            return "loading"
        if self.error:
            return "error"
        if self.advice is not None:
            return "result"
        return "empty"


# =========================
# Actions
# =========================
@dataclass(frozen=True)
class FieldEdited:
    name: str
    raw: Any


@dataclass(frozen=True)
class AnalysisRequested:
    pass


@dataclass(frozen=True)
class AnalysisSucceeded:
    advice: BudgetAdvice


@dataclass(frozen=True)
class AnalysisFailed:
    message: str = GENERIC_ERROR_MESSAGE


Action = Union[FieldEdited, AnalysisRequested, AnalysisSucceeded, AnalysisFailed]


def reduce(state: AdvisorViewState, action: Action) -> AdvisorViewState:
    if isinstance(action, FieldEdited):
        inputs = state.inputs.with_value(action.name, action.raw)
        if inputs == state.inputs:
            return state
        return replace(state, inputs=inputs)

    if isinstance(action, AnalysisRequested):
        # one request at a time
        if state.loading:
            return state
        return replace(state, loading=True, error=None)

    if isinstance(action, AnalysisSucceeded):
        return replace(state, advice=action.advice, loading=False, error=None)

    if isinstance(action, AnalysisFailed):
        # drop the previous advice so an old result is never shown as current
        return replace(state, advice=None, loading=False, error=action.message)

    raise TypeError(f"unknown action: {action!r}")


def run_analysis(
    state: AdvisorViewState,
    fetch: Callable[[BudgetInputs], BudgetAdvice],
) -> AdvisorViewState:
    """
    Complete a pending analysis: one ``fetch`` call, then success or failure.
    A state that is not pending is returned as is and nothing is fetched.
    """
    if not state.loading:
        return state

    try:
        advice = fetch(state.inputs)
    except Exception:
        logger.exception("Budget analysis failed")
        return reduce(state, AnalysisFailed())
    return reduce(state, AnalysisSucceeded(advice))
