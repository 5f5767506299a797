"""
Prompt builder tests
"""
import json

from analytics_relay.agent.prompt_builder import (
    ANALYSIS_FOCUS,
    CHAT_REFUSAL,
    DEFAULT_FOCUS,
    build_analysis_prompt,
    build_chat_prompt,
    first_value,
)
from analytics_relay.models.schemas import ReportType


def test_analysis_prompt_embeds_only_first_key():
    payload = {
        "customers": [{"id": 7, "email": "a@example.com"}],
        "secret_extra": {"should_not": "appear"},
    }

    prompt = build_analysis_prompt(payload, "customers")

    assert json.dumps(payload["customers"], indent=2) in prompt
    assert "secret_extra" not in prompt
    assert "should_not" not in prompt


def test_analysis_prompt_uses_insertion_order():
    payload = {"zeta": [1], "alpha": [2]}
    prompt = build_analysis_prompt(payload, "orders")
    assert prompt.endswith(json.dumps([1], indent=2))


def test_analysis_prompt_focus_clause():
    prompt = build_analysis_prompt({"price_rules": []}, "discounts")
    assert ANALYSIS_FOCUS[ReportType.DISCOUNTS] in prompt


def test_analysis_prompt_unknown_type_uses_default_focus():
    prompt = build_analysis_prompt({"things": []}, "mystery")
    assert DEFAULT_FOCUS in prompt


def test_analysis_prompt_empty_payload():
    assert build_analysis_prompt({}, "orders").endswith("null")


def test_analysis_prompt_is_deterministic():
    payload = {"orders": [{"id": 1}]}
    assert build_analysis_prompt(payload, "orders") == build_analysis_prompt(payload, "orders")


def test_chat_prompt_embeds_full_report_and_question():
    report_data = {
        "orders": [{"id": 1, "total_price": "10.00"}],
        "meta": {"page": 1},
    }
    question = 'Which order was the "largest"?'

    prompt = build_chat_prompt(question, report_data, "orders")

    assert question in prompt
    assert json.dumps(report_data, indent=2) in prompt
    assert CHAT_REFUSAL in prompt
    assert "Data type: Orders" in prompt


def test_chat_prompt_unknown_type_label():
    prompt = build_chat_prompt("How many?", {"x": 1}, "widgets")
    assert "Data type: widgets" in prompt


def test_first_value():
    assert first_value({"a": 1, "b": 2}) == 1
    assert first_value({}) is None
