"""Unit tests for inbound request validation per chat mode."""
import pytest

from conftest import make_settings

from chat_proxy.api.models.chat import (
    MessageChatRequest,
    MessagesChatRequest,
    PromptChatRequest,
)
from chat_proxy.config.settings import ChatMode
from chat_proxy.controllers.chat_controller import ChatController
from chat_proxy.errors import ClientInputError


def _controller(**overrides) -> ChatController:
    return ChatController(make_settings(**overrides), provider=None)


def _rejected(controller: ChatController, body) -> str:
    with pytest.raises(ClientInputError) as exc_info:
        controller.validate_request(body)
    assert exc_info.value.status_code == 400
    return exc_info.value.message


# ---------------------------------------------------------------------------
# message mode
# ---------------------------------------------------------------------------


def test_message_mode_accepts_message():
    controller = _controller(chat_mode=ChatMode.MESSAGE)

    result = controller.validate_request({"message": "Hi"})

    assert result == MessageChatRequest(message="Hi")


@pytest.mark.parametrize("body", [None, {}, {"message": ""}, {"messages": []}])
def test_message_mode_requires_message(body):
    controller = _controller(chat_mode=ChatMode.MESSAGE)
    assert _rejected(controller, body) == "Missing 'message'"


def test_message_mode_rejects_blank_and_non_string():
    controller = _controller(chat_mode=ChatMode.MESSAGE)
    assert "message" in _rejected(controller, {"message": "   "})
    assert "message" in _rejected(controller, {"message": 42})


# ---------------------------------------------------------------------------
# messages mode
# ---------------------------------------------------------------------------


def test_messages_mode_accepts_role_content_pairs():
    controller = _controller()

    result = controller.validate_request(
        {"messages": [{"role": "user", "content": "Hi"}], "extra": "ignored"}
    )

    assert isinstance(result, MessagesChatRequest)
    assert result.messages[0].role == "user"
    assert result.messages[0].content == "Hi"


@pytest.mark.parametrize("body", [None, {}, {"messages": "Hi"}, {"message": "Hi"}])
def test_messages_mode_requires_messages_array(body):
    assert _rejected(_controller(), body) == "Missing 'messages'"


def test_messages_mode_rejects_empty_list_by_default():
    assert _rejected(_controller(), {"messages": []}) == "'messages' cannot be empty"


def test_messages_mode_allows_empty_list_when_enabled():
    controller = _controller(allow_empty_messages=True)

    result = controller.validate_request({"messages": []})

    assert result == MessagesChatRequest(messages=[])


def test_messages_mode_reports_malformed_item():
    message = _rejected(_controller(), {"messages": [{"role": "robot", "content": "x"}]})
    assert message.startswith("Invalid 'messages.0.role'")


# ---------------------------------------------------------------------------
# prompt mode
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "body",
    [
        {"id": "pmpt_1", "version": "2"},
        {"prompt": {"id": "pmpt_1", "version": "2"}},
        {"prompt": {"id": "pmpt_1", "version": 2}},
    ],
)
def test_prompt_mode_accepts_flat_and_nested_shapes(body):
    controller = _controller(chat_mode=ChatMode.PROMPT)

    result = controller.validate_request(body)

    assert result == PromptChatRequest(id="pmpt_1", version="2")


@pytest.mark.parametrize(
    "body",
    [{}, {"id": "pmpt_1"}, {"version": "1"}, {"prompt": {"id": "pmpt_1"}}],
)
def test_prompt_mode_requires_id_and_version(body):
    controller = _controller(chat_mode=ChatMode.PROMPT)
    assert _rejected(controller, body) == "Missing prompt 'id' and 'version'"


# ---------------------------------------------------------------------------
# body shape
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("body", [[], ["Hi"], "Hi", 3])
def test_non_object_body_is_rejected(body):
    assert _rejected(_controller(), body) == "Request body must be a JSON object"
