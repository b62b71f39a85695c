# budget_advisor/inputs.py
from __future__ import annotations

import math
from dataclasses import asdict, dataclass, replace
from typing import Any, Dict, Tuple


# =========================
# Form fields
# =========================
# (name, label, group) in display order
INPUT_FIELDS: Tuple[Tuple[str, str, str], ...] = (
    ("income", "Monthly Income", "income"),
    ("rent", "Rent", "needs"),
    ("food", "Food", "needs"),
    ("travel", "Travel", "needs"),
    ("loans", "Loans", "needs"),
    ("shopping", "Shopping", "wants"),
    ("entertainment", "Entertainment", "wants"),
    ("luxury", "Luxury", "wants"),
)

NEEDS_FIELDS: Tuple[str, ...] = tuple(n for n, _, g in INPUT_FIELDS if g == "needs")
WANTS_FIELDS: Tuple[str, ...] = tuple(n for n, _, g in INPUT_FIELDS if g == "wants")

FIELD_LABELS: Dict[str, str] = {n: label for n, label, _ in INPUT_FIELDS}


def coerce_amount(raw: Any) -> float:
    """
    Form value -> amount.
    Blank, unparsable, non-finite or negative input counts as 0.
    """
    if raw is None or isinstance(raw, bool):
        return 0.0
    if isinstance(raw, str):
        raw = raw.strip().replace(",", "")
        if not raw:
            return 0.0
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(value) or value < 0:
        return 0.0
    return value


@dataclass(frozen=True)
class BudgetInputs:
    income: float = 25000.0
    rent: float = 8000.0
    food: float = 5000.0
    travel: float = 2000.0
    loans: float = 1000.0
    shopping: float = 3000.0
    entertainment: float = 1500.0
    luxury: float = 500.0

    def with_value(self, name: str, raw: Any) -> "BudgetInputs":
        if name not in FIELD_LABELS:
            raise KeyError(f"unknown budget field: {name!r}")
        return replace(self, **{name: coerce_amount(raw)})

    def total_needs(self) -> float:
        return sum(getattr(self, n) for n in NEEDS_FIELDS)

    def total_wants(self) -> float:
        return sum(getattr(self, n) for n in WANTS_FIELDS)

    def total_expenses(self) -> float:
        return self.total_needs() + self.total_wants()

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)

