# budget_advisor/advisor.py
from __future__ import annotations

from typing import Optional

from .inputs import BudgetInputs
from .llm import call_llm_json
from .prompt import RESPONSE_SCHEMA, build_messages
from .types import BudgetAdvice, parse_advice


def get_budget_advice(
    inputs: BudgetInputs,
    *,
    model: Optional[str] = None,
    api_key: Optional[str] = None,
) -> BudgetAdvice:
    """
    Ask the model for a budget report on ``inputs``.

    The budgeting rules are only described in the prompt; nothing here
    evaluates them. Issues exactly one request and raises ``AdvisorError``
    subclasses on any failure, including an empty or incomplete reply.
    """
    messages = build_messages(inputs)
    result = call_llm_json(
        messages,
        response_schema=RESPONSE_SCHEMA,
        model=model,
        api_key=api_key,
    )
    return parse_advice(result)
