"""Command line: chat, complete a prompt, or transcribe an audio file."""

from __future__ import annotations

import argparse
import os
import sys
from typing import Iterable, TextIO

from .audio import WHISPER_1, AudioRequest
from .chat import ChatCompletionMessage, ChatCompletionRequest, ChatMessageRole
from .client import Client, new_client
from .completion import GPT3_ADA, GPT3_DOT5_TURBO, CompletionRequest
from .errors import OpenAIError


def _chat(client: Client, lines: Iterable[str], out: TextIO) -> int:
    request = ChatCompletionRequest(
        model=GPT3_DOT5_TURBO,
        messages=[
            ChatCompletionMessage(
                role=ChatMessageRole.SYSTEM.value, content="you are a helpful chatbot"
            )
        ],
    )
    print("Conversation", file=out)
    print("---------------------", file=out)
    print("> ", end="", file=out, flush=True)
    for line in lines:
        request.messages.append(ChatCompletionMessage(role=ChatMessageRole.USER.value, content=line))
        try:
            response = client.create_chat_completion(request)
        except OpenAIError as exc:
            print(f"ChatCompletion error: {exc}", file=out)
            continue
        reply = response.choices[0].message
        print(f"{reply.content}\n", file=out)
        request.messages.append(reply)
        print("> ", end="", file=out, flush=True)
    return 0


def _complete(client: Client, prompt: str, out: TextIO) -> int:
    try:
        response = client.create_completion(
            CompletionRequest(model=GPT3_ADA, max_tokens=5, prompt=prompt)
        )
    except OpenAIError as exc:
        print(f"Completion error: {exc}", file=out)
        return 1
    print(response.choices[0].text, file=out)
    return 0


def _transcribe(client: Client, path: str, out: TextIO) -> int:
    try:
        response = client.create_transcription(AudioRequest(model=WHISPER_1, file_path=path))
    except (OpenAIError, OSError) as exc:
        print(f"Transcription error: {exc}", file=out)
        return 1
    print(response.text, file=out)
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gptclient", description="Talk to the completion API.")
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("chat", help="hold a conversation read from standard input")
    complete = commands.add_parser("complete", help="complete a prompt")
    complete.add_argument("prompt", nargs="?", default="Lorem ipsum")
    transcribe = commands.add_parser("transcribe", help="convert an audio file to text")
    transcribe.add_argument("filename", nargs="?")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command line; the API key comes from OPENAI_API_KEY."""
    args = _build_parser().parse_args(argv)
    out = sys.stdout
    if args.command == "transcribe":
        if not args.filename:
            print("please provide a filename to convert to text", file=out)
            return 1
        if not os.path.exists(args.filename):
            print(f"file {args.filename} does not exist", file=out)
            return 1
    with new_client(os.environ.get("OPENAI_API_KEY", "")) as client:
        if args.command == "chat":
            return _chat(client, (line.rstrip("\r\n") for line in sys.stdin), out)
        if args.command == "complete":
            return _complete(client, args.prompt, out)
        return _transcribe(client, args.filename, out)


if __name__ == "__main__":
    sys.exit(main())