import pytest

from gptclient.errors import (
    APIError,
    ChatCompletionInvalidModelError,
    CompletionPromptTypeNotSupportedError,
    OpenAIError,
    RequestError,
)


@pytest.mark.parametrize(
    ("response", "expected"),
    [
        ('{"message":"foo","type":"invalid_request_error","param":null,"code":null}', "foo"),
        ('{"message":["foo"],"type":"invalid_request_error","param":null,"code":null}', "foo"),
        (
            '{"message":["foo", "bar", "baz"],"type":"invalid_request_error","param":null,"code":null}',
            "foo, bar, baz",
        ),
        ('{"message":[],"type":"invalid_request_error","param":null,"code":null}', ""),
        ('{"message":null,"type":"invalid_request_error","param":null,"code":null}', ""),
    ],
)
def test_message_parses(response, expected):
    err = APIError.from_json(response)
    assert err.message == expected


@pytest.mark.parametrize(
    "response",
    [
        '{"message":{},"type":"invalid_request_error","param":null,"code":null}',
        '{"message":1,"type":"invalid_request_error","param":null,"code":null}',
        '{"message":0.1,"type":"invalid_request_error","param":null,"code":null}',
        '{"message":true,"type":"invalid_request_error","param":null,"code":null}',
        '{"type":"invalid_request_error","param":null,"code":null}',
        '{"code":418,"message":"I\'m a teapot","param":true,"type":"teapot_error"}',
        '{"code":418,"message":"I\'m a teapot","param":"prompt","type":true}',
        '--- {"code":418,"message":"I\'m a teapot","param":"prompt","type":"teapot_error"}',
    ],
)
def test_invalid_responses_raise(response):
    with pytest.raises(ValueError):
        APIError.from_json(response)


@pytest.mark.parametrize(
    ("response", "expected"),
    [
        ('{"code":418,"message":"I\'m a teapot","param":"prompt","type":"teapot_error"}', 418),
        ('{"code":"teapot","message":"I\'m a teapot","param":"prompt","type":"teapot_error"}', "teapot"),
        ('{"message":"I\'m a teapot","param":"prompt","type":"teapot_error"}', None),
    ],
)
def test_code_parses(response, expected):
    err = APIError.from_json(response)
    assert err.code == expected
    assert type(err.code) is type(expected)


def test_param_and_type_are_kept():
    err = APIError.from_json('{"code":418,"message":"I\'m a teapot","param":"prompt","type":"teapot_error"}')
    assert err.param == "prompt"
    assert err.type == "teapot_error"


def test_null_param_is_none():
    err = APIError.from_json('{"message":"foo","type":"invalid_request_error","param":null,"code":null}')
    assert err.param is None
    assert err.type == "invalid_request_error"


def test_api_error_text_with_status_code():
    err = APIError(message="That model...", http_status_code=503)
    assert str(err) == "error, status code: 503, message: That model..."


def test_api_error_text_without_status_code():
    err = APIError(message="foo")
    assert str(err) == "foo"


def test_api_error_is_openai_error():
    parsed = APIError.from_json('{"message":"foo","type":"invalid_request_error","param":null,"code":null}')
    assert isinstance(parsed, OpenAIError)
    assert parsed.message == "foo"
    assert str(parsed) == "foo"


def test_request_error():
    cause = RuntimeError("i am a teapot")
    err = RequestError(418, cause)
    assert err.http_status_code == 418
    assert err.cause is cause
    assert err.__cause__ is cause
    assert str(err) == "error, status code: 418, message: i am a teapot"


def test_fixed_message_errors():
    assert str(ChatCompletionInvalidModelError()) == (
        "this model is not supported with this method, please use CreateCompletion client method instead"
    )
    assert str(CompletionPromptTypeNotSupportedError()) == (
        "the type of CompletionRequest.Prompt only supports string and []string"
    )