from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

from budget_advisor.errors import GENERIC_ERROR_MESSAGE, AdvisorRequestError
from budget_advisor.types import parse_advice

APP_PATH = Path(__file__).parent.parent / "app" / "streamlit_app.py"


@pytest.fixture
def app():
    at = AppTest.from_file(str(APP_PATH), default_timeout=30)
    return at.run()


def _captions(at):
    return [c.value for c in at.caption]


def _state(at):
    return at.session_state["advisor_state"]


def test_first_run_shows_defaults_and_empty_view(app):
    assert not app.exception
    assert app.number_input(key="budget_input_income").value == 25000.0
    assert app.number_input(key="budget_input_food").value == 5000.0
    assert _state(app).status == "empty"


def test_clearing_a_field_reads_as_zero(app):
    app.number_input(key="budget_input_food").set_value(None).run()
    assert app.number_input(key="budget_input_food").value is None
    assert _state(app).inputs.food == 0.0
    # the cleared field stays cleared on the next run
    app.run()
    assert _state(app).inputs.food == 0.0


def test_group_subtotals_follow_edits(app):
    captions = _captions(app)
    assert "Essential Needs subtotal: **₹16,000**" in captions
    assert "Discretionary Wants subtotal: **₹5,000**" in captions
    assert "Total spending entered: **₹21,000**" in captions

    app.number_input(key="budget_input_rent").set_value(10000.0).run()
    captions = _captions(app)
    assert "Essential Needs subtotal: **₹18,000**" in captions
    assert "Total spending entered: **₹23,000**" in captions


def test_analyze_renders_result(monkeypatch, app, scenario_advice_dict):
    calls = []

    def fake_advice(inputs):
        calls.append(inputs)
        return parse_advice(scenario_advice_dict)

    monkeypatch.setattr("budget_advisor.advisor.get_budget_advice", fake_advice)
    app.button(key="budget_analyze").click().run()

    assert not app.exception
    assert len(calls) == 1
    assert calls[0].income == 25000.0
    assert _state(app).status == "result"
    assert not app.button(key="budget_analyze").disabled


def test_analyze_failure_shows_generic_error(monkeypatch, app):
    def failing_advice(inputs):
        raise AdvisorRequestError("Gemini API call failed (HTTP 500)", status_code=500)

    monkeypatch.setattr("budget_advisor.advisor.get_budget_advice", failing_advice)
    app.button(key="budget_analyze").click().run()

    assert not app.exception
    assert _state(app).status == "error"
    assert [e.value for e in app.error] == [GENERIC_ERROR_MESSAGE]
