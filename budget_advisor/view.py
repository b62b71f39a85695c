# budget_advisor/view.py
"""
Display projections of a ``BudgetAdvice``.

Everything here is a pure function of the advice: no I/O, no mutation.
The numbers come from the model and are shown as received, except where a
value is clamped for a chart or guarded against a zero income.
"""
from __future__ import annotations

import math
from typing import Any, Dict, List, Tuple

from .config import CURRENCY_SYMBOL
from .types import BudgetAdvice


# =========================
# Formatting
# =========================
def format_amount(value: Any) -> str:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
        return "—"
    v = float(value)
    sign = "-" if v < 0 else ""
    v = abs(v)
    body = f"{int(v):,}" if v.is_integer() else f"{v:,.2f}".rstrip("0").rstrip(".")
    return f"{sign}{CURRENCY_SYMBOL}{body}"


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def _clamp(x: float, lo: float = 0.0, hi: float = 100.0) -> float:
    return max(lo, min(hi, x))


# =========================
# Chart series
# =========================
def category_split(advice: BudgetAdvice) -> List[Tuple[str, float]]:
    """Needs / Wants / Savings for the allocation pie; a negative or non-finite slice shows as 0."""
    c = advice.categories
    return [
        ("Needs", _slice(c.needs)),
        ("Wants", _slice(c.wants)),
        ("Savings", _slice(c.savings)),
    ]


def _slice(value: float) -> float:
    if isinstance(value, float) and not math.isfinite(value):
        return 0
    return value if value > 0 else 0


def comparison_series(advice: BudgetAdvice) -> List[Dict[str, Any]]:
    """Current month vs. next-month projection, one row per bar group."""
    s = advice.summary
    p = advice.next_month_prediction
    return [
        {"name": "Expenses", "current": s.total_expenses, "predicted": p.estimated_total},
        {"name": "Savings", "current": s.savings, "predicted": p.estimated_savings},
    ]


# =========================
# Summary ratios
# =========================
def savings_rate(advice: BudgetAdvice) -> int:
    """Savings as a whole percentage of income in [0, 100]; 0 when income <= 0."""
    income = advice.summary.income
    if income <= 0:
        return 0
    pct = advice.summary.savings / income * 100
    if not math.isfinite(pct):
        return 0
    return int(_clamp(_round_half_up(pct)))


def savings_bar_width(advice: BudgetAdvice) -> float:
    income = advice.summary.income
    if income <= 0:
        return 0.0
    return _clamp(advice.summary.savings / income * 100)


def spending_bar_width(advice: BudgetAdvice) -> float:
    income = advice.summary.income
    expenses = advice.summary.total_expenses
    if income <= 0:
        return 100.0 if expenses > 0 else 0.0
    return _clamp(expenses / income * 100)


# =========================
# Projected itemization
# =========================
_PREDICTION_ITEMS = (
    ("Rent", "rent", "neutral"),
    ("Food", "food", "neutral"),
    ("Travel", "travel", "neutral"),
    ("Loans", "loans", "neutral"),
    ("Wants", "wants", "wants"),
    ("Next Sav.", "estimated_savings", "savings"),
)


def prediction_items(advice: BudgetAdvice) -> List[Tuple[str, float, str]]:
    """(label, value, tone) for each projected itemization tile."""
    p = advice.next_month_prediction
    return [(label, getattr(p, attr), tone) for label, attr, tone in _PREDICTION_ITEMS]


# =========================
# Advisory arithmetic check
# =========================
def consistency_issues(advice: BudgetAdvice, tolerance: float = 1.0) -> List[str]:
    """
    Places where the model's own numbers disagree by more than ``tolerance``.
    Informational only; rendering never depends on it.
    """
    s = advice.summary
    c = advice.categories
    p = advice.next_month_prediction
    issues: List[str] = []

    def check(label: str, left: float, right: float) -> None:
        if abs(left - right) > tolerance:
            issues.append(f"{label}: {format_amount(left)} vs {format_amount(right)}")

    check("Needs + wants + savings vs income", c.needs + c.wants + c.savings, s.income)
    check("Income - total expenses vs savings", s.income - s.total_expenses, s.savings)
    check(
        "Projected categories vs projected total",
        p.rent + p.food + p.travel + p.loans + p.wants,
        p.estimated_total,
    )
    check("Income - projected total vs projected savings", s.income - p.estimated_total, p.estimated_savings)
    return issues
