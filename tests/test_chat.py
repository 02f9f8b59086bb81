import json

import pytest

from gptclient.chat import (
    ChatCompletionChoice,
    ChatCompletionMessage,
    ChatCompletionRequest,
    ChatCompletionResponse,
    ChatMessageRole,
    FinishReason,
    FunctionCall,
    FunctionDefinition,
    finish_reason_json,
)

SCHEMA = (
    b'{"properties":{"count":{"type":"integer","description":"total number of words in sentence"},'
    b'"words":{"items":{"type":"string"},"type":"array","description":"list of words in sentence"}},'
    b'"type":"object","required":["count","words"]}'
)


def _dump(choice):
    return json.dumps(choice.to_dict(), separators=(",", ":"))


@pytest.mark.parametrize("reason", [FinishReason.NULL, ""])
def test_finish_reason_null_is_not_quoted(reason):
    choice = ChatCompletionChoice(finish_reason=reason)
    assert '"finish_reason":null' in _dump(choice)


@pytest.mark.parametrize(
    "reason",
    [FinishReason.STOP, FinishReason.LENGTH, FinishReason.FUNCTION_CALL, FinishReason.CONTENT_FILTER],
)
def test_other_finish_reasons_are_quoted(reason):
    choice = ChatCompletionChoice(finish_reason=reason)
    assert f'"finish_reason":"{reason.value}"' in _dump(choice)


def test_finish_reason_json_unknown_value_passes_through():
    assert finish_reason_json("max_tokens") == "max_tokens"


def test_message_to_dict_omits_empty_fields():
    message = ChatCompletionMessage(role=ChatMessageRole.USER, content="Hello!")
    assert message.to_dict() == {"role": "user", "content": "Hello!"}


def test_message_round_trip_with_function_call():
    message = ChatCompletionMessage(
        role=ChatMessageRole.FUNCTION,
        name="test",
        function_call=FunctionCall(name="test", arguments='{"count":2}'),
    )
    assert ChatCompletionMessage.from_dict(message.to_dict()) == message


def test_request_to_dict_omits_zero_values():
    request = ChatCompletionRequest(
        model="gpt-3.5-turbo",
        max_tokens=5,
        messages=[ChatCompletionMessage(role=ChatMessageRole.USER, content="Hello!")],
    )
    assert request.to_dict() == {
        "model": "gpt-3.5-turbo",
        "messages": [{"role": "user", "content": "Hello!"}],
        "max_tokens": 5,
    }


def test_request_functions_with_raw_schema():
    request = ChatCompletionRequest(
        model="gpt-3.5-turbo-0613",
        functions=[FunctionDefinition(name="test", parameters=SCHEMA)],
    )
    body = request.to_dict()
    assert body["functions"] == [{"name": "test", "parameters": json.loads(SCHEMA)}]


def test_request_functions_with_object_schema():
    params = {"count": 2, "words": ["hello", "world"]}
    request = ChatCompletionRequest(
        model="gpt-3.5-turbo-0613",
        functions=[FunctionDefinition(name="test", description="d", parameters=params)],
        function_call="auto",
    )
    body = request.to_dict()
    assert body["functions"][0] == {"name": "test", "description": "d", "parameters": params}
    assert body["function_call"] == "auto"


def test_request_stream_flag_is_sent():
    body = ChatCompletionRequest(model="gpt-3.5-turbo", stream=True).to_dict()
    assert body["stream"] is True


def test_response_from_dict():
    data = {
        "id": "1",
        "object": "test-object",
        "created": 1598069254,
        "model": "gpt-3.5-turbo",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": "aaaaa"},
                "finish_reason": "stop",
            }
        ],
        "usage": {"prompt_tokens": 1, "completion_tokens": 5, "total_tokens": 6},
    }
    response = ChatCompletionResponse.from_dict(data)
    assert response.id == "1"
    assert response.created == 1598069254
    assert response.choices[0].message.content == "aaaaa"
    assert response.choices[0].finish_reason == "stop"
    assert response.usage.total_tokens == 6


def test_choice_null_finish_reason_reads_as_empty():
    choice = ChatCompletionChoice.from_dict(
        {"index": 1, "message": {"role": "assistant", "content": None}, "finish_reason": None}
    )
    assert choice.finish_reason == ""
    assert choice.message.content == ""
    assert choice.index == 1