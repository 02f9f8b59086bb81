# gptclient

A small Python client for OpenAI-compatible HTTP APIs, including Azure
OpenAI deployments. It covers:

- chat completions (`Client.create_chat_completion`)
- text completions (`Client.create_completion`)
- edits (`Client.edits`)
- embeddings (`Client.create_embeddings`)
- engines (`Client.list_engines`, `Client.get_engine`)
- files (`Client.create_file`, `Client.list_files`, `Client.get_file`,
  `Client.get_file_content`, `Client.delete_file`)
- audio transcription and translation (`Client.create_transcription`,
  `Client.create_translation`)

Requests and responses are dataclasses; failures are raised as exceptions.
HTTP is done with `httpx`.

## Installation

```
pip install gptclient
```

To run the test suite, install the `test` extra and run `pytest`.

## Quick start

```python
from gptclient.chat import ChatCompletionMessage, ChatCompletionRequest
from gptclient.client import new_client

with new_client("placeholder") as client:
    response = client.create_chat_completion(
        ChatCompletionRequest(
            model="gpt-3.5-turbo",
            messages=[ChatCompletionMessage(role="user", content="Hello!")],
        )
    )
    print(response.choices[0].message.content)
```

`Client` is a context manager; `Client.close()` closes the HTTP client if
the `Client` created it. Pass your own `httpx.Client` through
`ClientConfig.http_client` to manage it yourself.

## Configuration

`gptclient.config.default_config(auth_token)` builds the configuration for
the standard API, sending `Authorization: Bearer <auth_token>`.
`default_azure_config(api_key, base_url)` builds one for an Azure endpoint,
sending the key in an `api-key` header with API version `2023-05-15`.

With Azure, the model name is mapped to a deployment name by dropping `.`
and `:` characters, so `gpt-3.5-turbo` is sent to the `gpt-35-turbo`
deployment. Set `ClientConfig.azure_model_mapper` to a function of your own
to change this; `ClientConfig.azure_deployment_by_model(model)` returns the
name the client will use, and `Client.full_url(suffix, model)` the full URL.

```python
from gptclient.client import Client
from gptclient.config import default_azure_config

config = default_azure_config("placeholder", "https://example.com/")
client = Client(config)
```

`new_org_client(auth_token, org)` creates a client that also sends an
`OpenAI-Organization` header.

## Requests

- Chat and completion requests are checked before anything is sent: a model
  that the endpoint does not serve, `stream=True`, or a completion prompt
  that is neither a string nor a list of strings raises an error.
- `EmbeddingRequest`, `EmbeddingRequestStrings` and `EmbeddingRequestTokens`
  are all accepted by `create_embeddings`; models are `EmbeddingModel`
  members, and `EmbeddingModel.parse(name)` returns `UNKNOWN` for a name it
  does not know.
- `AudioRequest` sends the file at `file_path`, or, when `reader` is set,
  the reader's contents under the name in `file_path`. With a non-JSON
  `format` (text, srt, vtt) the body is returned in `AudioResponse.text`.
- `get_file_content` returns the file's bytes.

## Errors

All errors derive from `gptclient.errors.OpenAIError`.

- `APIError` — the server answered with an error object; it carries
  `message`, `code`, `param`, `type` and `http_status_code`.
- `RequestError` — the request failed and its body held no usable error
  object; it carries `http_status_code` and `cause`.
- `ChatCompletionInvalidModelError`, `CompletionUnsupportedModelError` —
  the model is not served by that endpoint (for example a chat model sent
  to the completions endpoint).
- `ChatCompletionStreamNotSupportedError`,
  `CompletionStreamNotSupportedError` — streaming was requested.
- `CompletionPromptTypeNotSupportedError` — a bad completion prompt.

```python
from gptclient.errors import APIError

try:
    client.list_engines()
except APIError as exc:
    print(exc.http_status_code, exc.message)
```

`gptclient.client.error_from_response(status_code, body)` turns a failed
response into the matching exception.

## Command line

The `gptclient` command reads the API key from the `OPENAI_API_KEY`
environment variable:

```
gptclient chat                # converse, one message per line of standard input
gptclient complete "Lorem ipsum"
gptclient transcribe speech.mp3
gptclient --help
```

`chat` uses `gpt-3.5-turbo`, `complete` uses `ada` with at most 5 tokens
(the prompt defaults to `Lorem ipsum`), and `transcribe` uses `whisper-1`.

## What it does not do

- No streaming: responses are only returned whole.
- No images, model listing, fine-tunes or moderations endpoints.