import sys
from pathlib import Path

import pytest

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from budget_advisor.inputs import BudgetInputs


@pytest.fixture
def scenario_inputs():
    return BudgetInputs(
        income=25000,
        rent=8000,
        food=5000,
        travel=2000,
        loans=1000,
        shopping=3000,
        entertainment=1500,
        luxury=500,
    )


@pytest.fixture
def scenario_advice_dict():
    return {
        "summary": {"income": 25000, "total_expenses": 21000, "savings": 4000},
        "categories": {"needs": 16000, "wants": 5000, "savings": 4000},
        "alerts": [],
        "suggestions": ["Reduce shopping"],
        "next_month_prediction": {
            "rent": 8400,
            "food": 5250,
            "travel": 2100,
            "loans": 1050,
            "wants": 5250,
            "estimated_total": 22050,
            "estimated_savings": 2950,
        },
    }


class FakeResponse:
    """Stand-in for requests.Response with just what the client reads."""

    def __init__(self, status_code=200, payload=None, text=None, json_error=False):
        self.status_code = status_code
        self._payload = payload
        self._json_error = json_error
        self.text = text if text is not None else ""

    def json(self):
        if self._json_error:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._payload


def gemini_payload(text):
    return {"candidates": [{"content": {"role": "model", "parts": [{"text": text}]}}]}


@pytest.fixture
def fake_post(monkeypatch):
    """Patch requests.post; returns the list of captured calls and a setter for the reply."""
    import requests

    calls = []
    reply = {"response": FakeResponse(payload=gemini_payload("{}"))}

    def _post(url, json=None, headers=None, timeout=None, **kwargs):
        calls.append({"url": url, "json": json, "headers": headers or {}, "timeout": timeout})
        r = reply["response"]
        if isinstance(r, Exception):
            raise r
        return r

    monkeypatch.setattr(requests, "post", _post)

    def set_reply(response):
        reply["response"] = response

    return calls, set_reply
