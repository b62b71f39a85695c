# budget_advisor/export.py
"""
Budget advice → Markdown download.

Section order follows the result page:
  1. header (generation time)
  2. entered figures
  3. summary cards
  4. allocation (needs / wants / savings)
  5. alerts, suggestions
  6. next-month projection

Usage:
    from budget_advisor.export import build_md_bytes, build_md_filename

    md_bytes = build_md_bytes(inputs=state.inputs, advice=state.advice)
"""
from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from .inputs import INPUT_FIELDS, BudgetInputs
from .types import BudgetAdvice
from .view import category_split, format_amount, prediction_items, savings_rate

HEALTHY_BUDGET_LINE = "Budget health is excellent. No critical risks found."


# ──────────────────────────────────────────────────────────────
# Blocks
# ──────────────────────────────────────────────────────────────

def _hr() -> str:
    return "\n---\n"


def _inputs_block(inputs: BudgetInputs) -> List[str]:
    out = ["## Monthly figures", "", "| Item | Amount |", "|---|---:|"]
    for name, label, _ in INPUT_FIELDS:
        out.append(f"| {label} | {format_amount(getattr(inputs, name))} |")
    return out


def _summary_block(advice: BudgetAdvice) -> List[str]:
    s = advice.summary
    return [
        "## Summary",
        "",
        f"- Income: {format_amount(s.income)}",
        f"- Total spending: {format_amount(s.total_expenses)}",
        f"- Savings: {format_amount(s.savings)}",
        f"- Savings rate: {savings_rate(advice)}%",
    ]


def _allocation_block(advice: BudgetAdvice) -> List[str]:
    out = ["## Allocation", ""]
    out += [f"- {label}: {format_amount(value)}" for label, value in category_split(advice)]
    return out


def _list_block(title: str, items, empty_line: Optional[str]) -> List[str]:
    out = [f"## {title}", ""]
    if items:
        out += [f"- {x}" for x in items]
    elif empty_line:
        out.append(f"- {empty_line}")
    else:
        out.append("- (none)")
    return out


def _prediction_block(advice: BudgetAdvice) -> List[str]:
    p = advice.next_month_prediction
    out = ["## Next month projection", "", "| Item | Projected |", "|---|---:|"]
    out += [f"| {label} | {format_amount(value)} |" for label, value, _ in prediction_items(advice)]
    out.append(f"| Estimated total | {format_amount(p.estimated_total)} |")
    return out


# ──────────────────────────────────────────────────────────────
# Public
# ──────────────────────────────────────────────────────────────

def build_md_text(
    *,
    inputs: BudgetInputs,
    advice: BudgetAdvice,
    generated_at: Optional[datetime] = None,
) -> str:
    ts = (generated_at or datetime.now()).strftime("%Y-%m-%d %H:%M")
    lines: List[str] = ["# AI Budget Advisor report", "", f"_Generated {ts}_", ""]
    lines += _inputs_block(inputs)
    lines.append(_hr())
    lines += _summary_block(advice)
    lines.append("")
    lines += _allocation_block(advice)
    lines.append(_hr())
    lines += _list_block("Risk assessment", advice.alerts, HEALTHY_BUDGET_LINE)
    lines.append("")
    lines += _list_block("Strategic advice", advice.suggestions, None)
    lines.append(_hr())
    lines += _prediction_block(advice)
    return "\n".join(lines) + "\n"


def build_md_bytes(
    *,
    inputs: BudgetInputs,
    advice: BudgetAdvice,
    generated_at: Optional[datetime] = None,
) -> bytes:
    return build_md_text(inputs=inputs, advice=advice, generated_at=generated_at).encode("utf-8")


def build_md_filename(now: Optional[datetime] = None) -> str:
    return f"budget_advice_{(now or datetime.now()).strftime('%Y%m%d_%H%M')}.md"
