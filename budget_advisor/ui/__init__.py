# budget_advisor/ui/__init__.py
from __future__ import annotations

# session state
from .state import init_advisor_state, get_state, dispatch, complete_pending_analysis

# input panel
from .form import render_input_form

# result views
from .renderers import (
    render_empty_view,
    render_loading_view,
    render_error_view,
    render_summary_cards,
    render_alerts,
    render_suggestions,
    render_projection,
    render_consistency_note,
    render_export_button,
    render_results,
)

from .helpers import inject_css

__all__ = [
    "init_advisor_state",
    "get_state",
    "dispatch",
    "complete_pending_analysis",
    "render_input_form",
    "render_empty_view",
    "render_loading_view",
    "render_error_view",
    "render_summary_cards",
    "render_alerts",
    "render_suggestions",
    "render_projection",
    "render_consistency_note",
    "render_export_button",
    "render_results",
    "inject_css",
]
