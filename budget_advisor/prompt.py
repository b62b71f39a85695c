# budget_advisor/prompt.py
from __future__ import annotations

from typing import Any, Dict, List

from .config import CURRENCY_SYMBOL
from .inputs import BudgetInputs
from .types import CATEGORY_FIELDS, PREDICTION_FIELDS, SUMMARY_FIELDS


# =========================
# Prompt
# =========================
PROMPT_TEMPLATE = """
Analyze this user's monthly financial data and provide a detailed budget report.

Data:
- Monthly Income: {cur}{income}
- Rent: {cur}{rent}
- Food: {cur}{food}
- Travel: {cur}{travel}
- Loans: {cur}{loans}
- Shopping: {cur}{shopping}
- Entertainment: {cur}{entertainment}
- Luxury: {cur}{luxury}

Classification Rules:
- Needs: rent, food, travel, loans
- Wants: shopping, entertainment, luxury
- Savings: income - (needs + wants)

Alert Rules:
- Warn if food > 30% of income
- Warn if wants > 20% of income
- Warn if savings < 10% of income
- Praise if savings >= {cur}2000

Prediction Rule:
- Estimate next month expenses with a 5% increase per category.

Be accurate and numerically consistent. Use simple language.
""".strip()


def _fmt(v: float) -> str:
    # 25000.0 -> "25000", 2500.5 -> "2500.5"
    v = float(v)
    return str(int(v)) if v.is_integer() else repr(v)


def build_prompt(inputs: BudgetInputs) -> str:
    values = {k: _fmt(v) for k, v in inputs.to_dict().items()}
    return PROMPT_TEMPLATE.format(cur=CURRENCY_SYMBOL, **values)


# =========================
# Structured output schema (Gemini responseSchema)
# =========================
def _number_object(names) -> Dict[str, Any]:
    return {
        "type": "OBJECT",
        "properties": {n: {"type": "NUMBER"} for n in names},
        "required": list(names),
    }


RESPONSE_SCHEMA: Dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "summary": _number_object(SUMMARY_FIELDS),
        "categories": _number_object(CATEGORY_FIELDS),
        "alerts": {"type": "ARRAY", "items": {"type": "STRING"}},
        "suggestions": {"type": "ARRAY", "items": {"type": "STRING"}},
        "next_month_prediction": _number_object(PREDICTION_FIELDS),
    },
    "required": ["summary", "categories", "alerts", "suggestions", "next_month_prediction"],
}


def build_messages(inputs: BudgetInputs) -> List[Dict[str, str]]:
    return [{"role": "user", "content": build_prompt(inputs)}]
