"""Building multipart/form-data request bodies."""

from __future__ import annotations

import io
import os
import secrets
from typing import IO, Any


def _escape_quotes(text: str) -> str:
    return text.replace("\\", "\\\\").replace('"', '\\"')


class FormBuilder:
    """Accumulates the fields and files of a multipart/form-data body."""

    def __init__(self) -> None:
        self._boundary = secrets.token_hex(30)
        self._buffer = io.BytesIO()
        self._closed = False

    def _start_part(self, headers: list[str]) -> None:
        if self._closed:
            raise ValueError("form is already closed")
        lines = [f"--{self._boundary}", *headers, "", ""]
        self._buffer.write("\r\n".join(lines).encode("utf-8"))

    def _write_part(self, headers: list[str], payload: bytes) -> None:
        self._start_part(headers)
        self._buffer.write(payload)
        self._buffer.write(b"\r\n")

    def write_field(self, name: str, value: str) -> None:
        """Add a plain text field."""
        disposition = f'Content-Disposition: form-data; name="{_escape_quotes(name)}"'
        self._write_part([disposition], str(value).encode("utf-8"))

    def create_form_file(self, field_name: str, file: IO[Any]) -> None:
        """Add the contents of an open file, named after its base name."""
        filename = os.path.basename(str(getattr(file, "name", "")))
        self.create_form_file_reader(field_name, file, filename)

    def create_form_file_reader(self, field_name: str, reader: IO[Any], filename: str) -> None:
        """Add everything ``reader`` yields as a file called ``filename``."""
        data = reader.read()
        if isinstance(data, str):
            data = data.encode("utf-8")
        disposition = (
            f'Content-Disposition: form-data; name="{_escape_quotes(field_name)}"; '
            f'filename="{_escape_quotes(os.path.basename(filename))}"'
        )
        self._write_part([disposition, "Content-Type: application/octet-stream"], bytes(data))

    def close(self) -> None:
        """Write the closing boundary; later writes raise ValueError."""
        if self._closed:
            return
        self._buffer.write(f"--{self._boundary}--\r\n".encode("utf-8"))
        self._closed = True

    def content_type(self) -> str:
        """The Content-Type header value for this body."""
        return f"multipart/form-data; boundary={self._boundary}"

    def getvalue(self) -> bytes:
        """The body written so far."""
        return self._buffer.getvalue()