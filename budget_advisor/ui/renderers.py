# budget_advisor/ui/renderers.py
from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Tuple

import streamlit as st

from ..export import HEALTHY_BUDGET_LINE, build_md_bytes, build_md_filename
from ..inputs import BudgetInputs
from ..state import AdvisorViewState
from ..types import BudgetAdvice
from ..view import (
    category_split,
    comparison_series,
    consistency_issues,
    format_amount,
    prediction_items,
    savings_bar_width,
    savings_rate,
    spending_bar_width,
)
from .helpers import esc, progress_bar_html, section_title


# =========================
# Empty / loading / error
# =========================
def render_empty_view() -> None:
    st.markdown(
        """
        <div class="ba-card" style="min-height:420px; display:flex; flex-direction:column;
             align-items:center; justify-content:center; text-align:center; border-style:dashed;">
          <div style="font-size:56px;">🛡️</div>
          <div style="font-size:24px; font-weight:900; color:#1F2937; margin-top:12px;">
            Financial Intelligence Awaits
          </div>
          <div style="color:#6B7280; max-width:380px; margin-top:12px; line-height:1.6;">
            Submit your budget details and our AI will categorize your spending,
            flag concerns, and predict your financial future.
          </div>
        </div>
        """,
        unsafe_allow_html=True,
    )


def render_loading_view() -> None:
    st.markdown(
        """
        <div style="height:320px; display:flex; flex-direction:column; align-items:center; justify-content:center;">
          <div style="font-size:18px; font-weight:700; color:#1F2937;">Analyzing your data...</div>
          <div style="font-size:14px; color:#9CA3AF;">Classifying needs, wants and identifying patterns.</div>
        </div>
        """,
        unsafe_allow_html=True,
    )


def render_error_view(message: Optional[str]) -> None:
    st.error(message or "", icon="⚠️")


# =========================
# Result blocks
# =========================
def render_summary_cards(advice: BudgetAdvice) -> None:
    s = advice.summary
    c1, c2, c3 = st.columns(3)

    savings_cls = "ba-pos" if s.savings >= 0 else "ba-neg"
    with c1:
        st.markdown(
            f"""
            <div class="ba-card">
              <div class="ba-label">Savings</div>
              <div class="ba-value {savings_cls}">{format_amount(s.savings)}</div>
              {progress_bar_html(savings_bar_width(advice), "#10B981")}
            </div>
            """,
            unsafe_allow_html=True,
        )
    with c2:
        st.markdown(
            f"""
            <div class="ba-card">
              <div class="ba-label">Total Spending</div>
              <div class="ba-value">{format_amount(s.total_expenses)}</div>
              {progress_bar_html(spending_bar_width(advice), "#6366F1")}
            </div>
            """,
            unsafe_allow_html=True,
        )
    with c3:
        st.markdown(
            f"""
            <div class="ba-card">
              <div class="ba-label">Savings Rate</div>
              <div class="ba-value ba-accent">{savings_rate(advice)}%</div>
              <div class="ba-note">of total monthly income</div>
            </div>
            """,
            unsafe_allow_html=True,
        )


def render_alerts(advice: BudgetAdvice) -> None:
    section_title("Risk Assessment", "⚠️")
    if not advice.alerts:
        st.markdown(f'<div class="ba-item ba-ok">🛡️ {HEALTHY_BUDGET_LINE}</div>', unsafe_allow_html=True)
        return
    body = "".join(f'<div class="ba-item ba-alert">➜ {esc(a)}</div>' for a in advice.alerts)
    st.markdown(body, unsafe_allow_html=True)


def render_suggestions(advice: BudgetAdvice) -> None:
    section_title("Strategic Advice", "💡")
    body = "".join(f'<div class="ba-item ba-suggest">✨ {esc(s)}</div>' for s in advice.suggestions)
    if body:
        st.markdown(body, unsafe_allow_html=True)


def render_projection(advice: BudgetAdvice) -> None:
    section_title("Projected Itemization", "🛡️")
    items = prediction_items(advice)
    cols = st.columns(len(items))
    for col, (label, value, tone) in zip(cols, items):
        tone_cls = "" if tone == "neutral" else f" {tone}"
        with col:
            st.markdown(
                f"""
                <div class="ba-tile{tone_cls}">
                  <div class="ba-tile-label">{label}</div>
                  <div class="ba-tile-value">{format_amount(value)}</div>
                </div>
                """,
                unsafe_allow_html=True,
            )


def render_consistency_note(advice: BudgetAdvice) -> None:
    issues = consistency_issues(advice)
    if not issues:
        return
    with st.expander("ℹ️ The AI's figures don't add up exactly", expanded=False):
        st.caption("Shown as returned by the model. Differences found:")
        for line in issues:
            st.markdown(f"- {line}")


def render_export_button(inputs: BudgetInputs, advice: BudgetAdvice) -> None:
    st.download_button(
        label="📄 Download report (Markdown)",
        data=build_md_bytes(inputs=inputs, advice=advice),
        file_name=build_md_filename(),
        mime="text/markdown",
        key="budget_export_md",
    )


# =========================
# View selection
# =========================
PieBuilder = Callable[[List[Tuple[str, float]]], Any]
BarsBuilder = Callable[[List[Dict[str, Any]]], Any]


def render_results(
    state: AdvisorViewState,
    *,
    draw_pie: Optional[PieBuilder] = None,
    draw_bars: Optional[BarsBuilder] = None,
) -> str:
    """
    Right-hand panel for the current status; returns the status it rendered.
    Chart builders take the view series and return a plotly figure; the
    chart row is left out when they are not given.
    """
    status = state.status
    if status == "loading":
        render_loading_view()
    elif status == "error":
        render_error_view(state.error)
    elif status == "result":
        _render_result(state.inputs, state.advice, draw_pie, draw_bars)
    else:
        render_empty_view()
    return status


def _render_result(
    inputs: BudgetInputs,
    advice: BudgetAdvice,
    draw_pie: Optional[PieBuilder],
    draw_bars: Optional[BarsBuilder],
) -> None:
    render_summary_cards(advice)

    if draw_pie is not None and draw_bars is not None:
        c1, c2 = st.columns(2)
        with c1:
            st.markdown("#### 🥧 Allocation")
            st.plotly_chart(draw_pie(category_split(advice)), width="stretch")
        with c2:
            st.markdown("#### 📈 Prediction (Next Mo.)")
            st.plotly_chart(draw_bars(comparison_series(advice)), width="stretch")

    c3, c4 = st.columns(2)
    with c3:
        render_alerts(advice)
    with c4:
        render_suggestions(advice)

    st.markdown("<br>", unsafe_allow_html=True)
    render_projection(advice)
    render_consistency_note(advice)

    st.markdown("<br>", unsafe_allow_html=True)
    render_export_button(inputs, advice)
