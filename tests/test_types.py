import copy
import itertools
import json

import pytest

from budget_advisor.errors import AdvisorResponseError
from budget_advisor.prompt import RESPONSE_SCHEMA
from budget_advisor.types import BudgetAdvice, parse_advice


def _example_from_schema(schema, counter):
    t = schema["type"]
    if t == "OBJECT":
        return {k: _example_from_schema(v, counter) for k, v in schema["properties"].items()}
    if t == "ARRAY":
        return [_example_from_schema(schema["items"], counter) for _ in range(2)]
    if t == "NUMBER":
        n = next(counter)
        # alternate ints, floats and negatives so any coercion would show
        return [n * 1000, n * 1000 + 0.25, -n * 10][n % 3]
    if t == "STRING":
        return f"text {next(counter)}"
    raise AssertionError(f"unexpected schema type {t}")


def test_scenario_parses(scenario_advice_dict):
    advice = parse_advice(scenario_advice_dict)
    assert isinstance(advice, BudgetAdvice)
    assert advice.summary.savings == 4000
    assert advice.categories.needs == 16000
    assert advice.alerts == ()
    assert advice.suggestions == ("Reduce shopping",)
    assert advice.next_month_prediction.estimated_total == 22050


def test_schema_round_trip_is_lossless():
    sample = _example_from_schema(RESPONSE_SCHEMA, itertools.count(1))
    advice = parse_advice(copy.deepcopy(sample))
    out = advice.to_dict()

    assert out == sample
    for section in ("summary", "categories", "next_month_prediction"):
        for key, value in sample[section].items():
            assert type(out[section][key]) is type(value)


def test_parse_does_not_mutate_input(scenario_advice_dict):
    before = copy.deepcopy(scenario_advice_dict)
    parse_advice(scenario_advice_dict)
    assert scenario_advice_dict == before


def test_extra_keys_are_ignored(scenario_advice_dict):
    scenario_advice_dict["commentary"] = "extra"
    scenario_advice_dict["summary"]["currency"] = "INR"
    advice = parse_advice(scenario_advice_dict)
    assert "commentary" not in advice.to_dict()
    assert "currency" not in advice.to_dict()["summary"]


def test_empty_object_is_rejected():
    with pytest.raises(AdvisorResponseError, match="missing"):
        parse_advice({})


@pytest.mark.parametrize("bad", [None, [], "advice", 42])
def test_non_object_is_rejected(bad):
    with pytest.raises(AdvisorResponseError):
        parse_advice(bad)


def test_missing_nested_number(scenario_advice_dict):
    del scenario_advice_dict["next_month_prediction"]["estimated_savings"]
    with pytest.raises(AdvisorResponseError, match="next_month_prediction.estimated_savings"):
        parse_advice(scenario_advice_dict)


@pytest.mark.parametrize("value", ["4000", True, None, [4000]])
def test_wrongly_typed_number(scenario_advice_dict, value):
    scenario_advice_dict["summary"]["savings"] = value
    with pytest.raises(AdvisorResponseError, match="summary.savings"):
        parse_advice(scenario_advice_dict)


def test_alerts_must_be_strings(scenario_advice_dict):
    scenario_advice_dict["alerts"] = ["ok", 3]
    with pytest.raises(AdvisorResponseError, match=r"alerts\[1\]"):
        parse_advice(scenario_advice_dict)


def test_suggestions_must_be_list(scenario_advice_dict):
    scenario_advice_dict["suggestions"] = "Reduce shopping"
    with pytest.raises(AdvisorResponseError, match="suggestions"):
        parse_advice(scenario_advice_dict)


def test_inconsistent_arithmetic_is_accepted(scenario_advice_dict):
    scenario_advice_dict["categories"]["savings"] = 999999
    advice = parse_advice(scenario_advice_dict)
    assert advice.categories.savings == 999999


@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_number_is_rejected(scenario_advice_dict, value):
    scenario_advice_dict["categories"]["needs"] = value
    with pytest.raises(AdvisorResponseError, match="categories.needs"):
        parse_advice(scenario_advice_dict)


def test_non_finite_number_from_json_text_is_rejected(scenario_advice_dict):
    # json.loads accepts these literals
    text = json.dumps(scenario_advice_dict).replace('"wants": 5000', '"wants": NaN', 1)
    with pytest.raises(AdvisorResponseError, match="categories.wants"):
        parse_advice(json.loads(text))
