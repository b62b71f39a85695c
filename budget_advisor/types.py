# budget_advisor/types.py
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Tuple, Union

from .errors import AdvisorResponseError

Number = Union[int, float]

SUMMARY_FIELDS: Tuple[str, ...] = ("income", "total_expenses", "savings")
CATEGORY_FIELDS: Tuple[str, ...] = ("needs", "wants", "savings")
PREDICTION_FIELDS: Tuple[str, ...] = (
    "rent",
    "food",
    "travel",
    "loans",
    "wants",
    "estimated_total",
    "estimated_savings",
)
ADVICE_FIELDS: Tuple[str, ...] = (
    "summary",
    "categories",
    "alerts",
    "suggestions",
    "next_month_prediction",
)


# =========================
# Shape checks
# =========================
def _require_object(value: Any, path: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise AdvisorResponseError(f"{path}: expected an object, got {type(value).__name__}")
    return value


def _require_number(obj: Dict[str, Any], key: str, path: str) -> Number:
    if key not in obj:
        raise AdvisorResponseError(f"{path}.{key}: missing")
    v = obj[key]
    # bool is an int subclass; the schema never produces it for a number
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        raise AdvisorResponseError(f"{path}.{key}: expected a number, got {type(v).__name__}")
    if isinstance(v, float) and not math.isfinite(v):
        raise AdvisorResponseError(f"{path}.{key}: not a finite number")
    return v


def _require_strings(obj: Dict[str, Any], key: str) -> Tuple[str, ...]:
    if key not in obj:
        raise AdvisorResponseError(f"{key}: missing")
    items = obj[key]
    if not isinstance(items, list):
        raise AdvisorResponseError(f"{key}: expected a list, got {type(items).__name__}")
    for i, item in enumerate(items):
        if not isinstance(item, str):
            raise AdvisorResponseError(f"{key}[{i}]: expected a string, got {type(item).__name__}")
    return tuple(items)


# =========================
# Advice structure
# =========================
@dataclass(frozen=True)
class AdviceSummary:
    income: Number
    total_expenses: Number
    savings: Number

    @classmethod
    def from_dict(cls, data: Any, path: str = "summary") -> "AdviceSummary":
        obj = _require_object(data, path)
        return cls(**{k: _require_number(obj, k, path) for k in SUMMARY_FIELDS})

    def to_dict(self) -> Dict[str, Number]:
        return {k: getattr(self, k) for k in SUMMARY_FIELDS}


@dataclass(frozen=True)
class CategorySplit:
    needs: Number
    wants: Number
    savings: Number

    @classmethod
    def from_dict(cls, data: Any, path: str = "categories") -> "CategorySplit":
        obj = _require_object(data, path)
        return cls(**{k: _require_number(obj, k, path) for k in CATEGORY_FIELDS})

    def to_dict(self) -> Dict[str, Number]:
        return {k: getattr(self, k) for k in CATEGORY_FIELDS}


@dataclass(frozen=True)
class NextMonthPrediction:
    rent: Number
    food: Number
    travel: Number
    loans: Number
    wants: Number
    estimated_total: Number
    estimated_savings: Number

    @classmethod
    def from_dict(cls, data: Any, path: str = "next_month_prediction") -> "NextMonthPrediction":
        obj = _require_object(data, path)
        return cls(**{k: _require_number(obj, k, path) for k in PREDICTION_FIELDS})

    def to_dict(self) -> Dict[str, Number]:
        return {k: getattr(self, k) for k in PREDICTION_FIELDS}


@dataclass(frozen=True)
class BudgetAdvice:
    """
    The model's budget report, shape-checked only.
    Numbers are kept exactly as received; their arithmetic is not verified
    here (see ``view.consistency_issues`` for the advisory check).
    """
    summary: AdviceSummary
    categories: CategorySplit
    alerts: Tuple[str, ...]
    suggestions: Tuple[str, ...]
    next_month_prediction: NextMonthPrediction

    @classmethod
    def from_dict(cls, data: Any) -> "BudgetAdvice":
        obj = _require_object(data, "advice")
        missing = [k for k in ADVICE_FIELDS if k not in obj]
        if missing:
            raise AdvisorResponseError(f"advice: missing {', '.join(missing)}")
        return cls(
            summary=AdviceSummary.from_dict(obj["summary"]),
            categories=CategorySplit.from_dict(obj["categories"]),
            alerts=_require_strings(obj, "alerts"),
            suggestions=_require_strings(obj, "suggestions"),
            next_month_prediction=NextMonthPrediction.from_dict(obj["next_month_prediction"]),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "summary": self.summary.to_dict(),
            "categories": self.categories.to_dict(),
            "alerts": list(self.alerts),
            "suggestions": list(self.suggestions),
            "next_month_prediction": self.next_month_prediction.to_dict(),
        }


def parse_advice(data: Any) -> BudgetAdvice:
    return BudgetAdvice.from_dict(data)
