from .inputs import BudgetInputs, coerce_amount
from .types import BudgetAdvice, parse_advice
from .prompt import RESPONSE_SCHEMA, build_messages, build_prompt
from .llm import call_llm_json
from .advisor import get_budget_advice
from .errors import (
    AdvisorAuthError,
    AdvisorError,
    AdvisorRequestError,
    AdvisorResponseError,
    GENERIC_ERROR_MESSAGE,
)

__all__ = [
    "BudgetInputs",
    "coerce_amount",
    "BudgetAdvice",
    "parse_advice",
    "RESPONSE_SCHEMA",
    "build_messages",
    "build_prompt",
    "call_llm_json",
    "get_budget_advice",
    "AdvisorAuthError",
    "AdvisorError",
    "AdvisorRequestError",
    "AdvisorResponseError",
    "GENERIC_ERROR_MESSAGE",
]
