"""Unit tests for reply text extraction."""
import pytest

from chat_proxy.errors import ExtractionError
from chat_proxy.services.provider.normalizer import (
    extract_legacy_choices,
    extract_output_items,
    extract_output_text,
    normalize_response,
)


def test_output_text_field():
    assert normalize_response({"output_text": "hello"}) == "hello"


def test_legacy_output_items():
    data = {"output": [{"type": "output_text", "text": [{"content": "hi"}]}]}
    assert normalize_response(data) == "hi"


def test_output_items_are_concatenated_in_order():
    data = {
        "output": [
            {"type": "reasoning", "summary": []},
            {"type": "output_text", "text": [{"content": "Hel"}, {"content": "lo"}]},
            {"type": "output_text", "text": [{"content": "!"}]},
        ]
    }
    assert normalize_response(data) == "Hello!"


def test_responses_api_message_items():
    data = {
        "output": [
            {"type": "reasoning", "id": "rs_1"},
            {
                "type": "message",
                "role": "assistant",
                "content": [
                    {"type": "output_text", "text": "Hi ", "annotations": []},
                    {"type": "refusal", "refusal": "ignored"},
                    {"type": "output_text", "text": "there", "annotations": []},
                ],
            },
        ]
    }
    assert normalize_response(data) == "Hi there"


def test_legacy_choices_when_no_output_fields():
    data = {"choices": [{"message": {"role": "assistant", "content": "legacy"}}]}
    assert normalize_response(data) == "legacy"


def test_priority_prefers_output_text():
    data = {
        "output_text": "direct",
        "output": [{"type": "output_text", "text": [{"content": "nested"}]}],
        "choices": [{"message": {"content": "legacy"}}],
    }
    assert normalize_response(data) == "direct"


def test_empty_output_text_falls_through_to_next_strategy():
    data = {"output_text": "", "choices": [{"message": {"content": "legacy"}}]}
    assert normalize_response(data) == "legacy"


@pytest.mark.parametrize(
    "data",
    [
        {},
        {"id": "resp_1", "status": "completed"},
        {"output": []},
        {"choices": []},
        {"choices": [{"message": {"content": None}}]},
        [],
        None,
    ],
)
def test_unrecognized_shapes_raise_extraction_error(data):
    with pytest.raises(ExtractionError) as exc_info:
        normalize_response(data, model="gpt-5")
    assert exc_info.value.status_code == 502
    assert exc_info.value.message == "No text returned from gpt-5"


def test_strategies_return_none_for_foreign_shapes():
    data = {"choices": [{"message": {"content": "legacy"}}]}
    assert extract_output_text(data) is None
    assert extract_output_items(data) is None
    assert extract_legacy_choices({"output_text": "x"}) is None


def test_custom_strategy_chain():
    assert normalize_response({"answer": "42"}, strategies=[lambda d: d.get("answer")]) == "42"
