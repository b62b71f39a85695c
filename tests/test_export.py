from datetime import datetime

from budget_advisor.export import HEALTHY_BUDGET_LINE, build_md_bytes, build_md_filename, build_md_text
from budget_advisor.types import parse_advice

WHEN = datetime(2026, 3, 1, 9, 30)


def test_markdown_report_sections(scenario_inputs, scenario_advice_dict):
    advice = parse_advice(scenario_advice_dict)
    text = build_md_text(inputs=scenario_inputs, advice=advice, generated_at=WHEN)

    assert text.startswith("# AI Budget Advisor report")
    assert "_Generated 2026-03-01 09:30_" in text
    assert "| Monthly Income | ₹25,000 |" in text
    assert "| Luxury | ₹500 |" in text
    assert "- Savings rate: 16%" in text
    assert "- Needs: ₹16,000" in text
    assert f"- {HEALTHY_BUDGET_LINE}" in text
    assert "- Reduce shopping" in text
    assert "| Next Sav. | ₹2,950 |" in text
    assert "| Estimated total | ₹22,050 |" in text


def test_markdown_lists_alerts(scenario_inputs, scenario_advice_dict):
    scenario_advice_dict["alerts"] = ["Food is above 30% of income"]
    advice = parse_advice(scenario_advice_dict)
    text = build_md_text(inputs=scenario_inputs, advice=advice, generated_at=WHEN)
    assert "- Food is above 30% of income" in text
    assert HEALTHY_BUDGET_LINE not in text


def test_markdown_bytes_are_utf8(scenario_inputs, scenario_advice_dict):
    advice = parse_advice(scenario_advice_dict)
    data = build_md_bytes(inputs=scenario_inputs, advice=advice, generated_at=WHEN)
    assert isinstance(data, bytes)
    assert "₹".encode("utf-8") in data


def test_filename():
    assert build_md_filename(WHEN) == "budget_advice_20260301_0930.md"
