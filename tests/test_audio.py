import io
from email.parser import BytesParser

import pytest

from gptclient.audio import (
    WHISPER_1,
    AudioRequest,
    AudioResponse,
    AudioResponseFormat,
    AudioSegment,
    audio_multipart_form,
    create_file_field,
)
from gptclient.forms import FormBuilder


class MockFailure(Exception):
    pass


class RecordingBuilder:
    """Stands in for a form builder; fails on demand and records calls."""

    def __init__(self, fail_file=None, fail_reader=None, fail_field=None):
        self.fail_file = fail_file
        self.fail_reader = fail_reader
        self.fail_field = fail_field
        self.calls = []

    def create_form_file(self, field_name, file):
        self.calls.append(("file", field_name))
        if self.fail_file is not None:
            raise self.fail_file

    def create_form_file_reader(self, field_name, reader, filename):
        self.calls.append(("reader", field_name, filename))
        if self.fail_reader is not None:
            raise self.fail_reader

    def write_field(self, name, value):
        self.calls.append(("field", name, value))
        if self.fail_field is not None and name == self.fail_field[0]:
            raise self.fail_field[1]

    def close(self):
        self.calls.append(("close",))


@pytest.fixture
def fake_mp3(tmp_path):
    path = tmp_path / "fake.mp3"
    path.write_bytes(b"")
    return str(path)


def _full_request(path):
    return AudioRequest(
        file_path=path,
        prompt="test",
        temperature=0.5,
        language="en",
        format=AudioResponseFormat.SRT,
    )


def test_form_fails_when_file_fails(fake_mp3):
    error = MockFailure("mock form builder fail")
    with pytest.raises(MockFailure) as info:
        audio_multipart_form(_full_request(fake_mp3), RecordingBuilder(fail_file=error))
    assert info.value is error


@pytest.mark.parametrize("field", ["model", "prompt", "temperature", "language", "response_format"])
def test_form_fails_when_field_fails(fake_mp3, field):
    error = MockFailure(f"mock form builder fail on field {field}")
    with pytest.raises(MockFailure) as info:
        audio_multipart_form(_full_request(fake_mp3), RecordingBuilder(fail_field=(field, error)))
    assert info.value is error


def test_create_file_field_failing_file(fake_mp3):
    error = MockFailure("mock form builder fail")
    with pytest.raises(MockFailure) as info:
        create_file_field(AudioRequest(file_path=fake_mp3), RecordingBuilder(fail_file=error))
    assert info.value is error


def test_create_file_field_failing_reader():
    error = MockFailure("mock form builder fail")
    request = AudioRequest(file_path="test.wav", reader=io.BytesIO(b"wav test contents"))
    builder = RecordingBuilder(fail_reader=error)
    with pytest.raises(MockFailure) as info:
        create_file_field(request, builder)
    assert info.value is error
    assert builder.calls == [("reader", "file", "test.wav")]


def test_create_file_field_failing_open():
    with pytest.raises(FileNotFoundError):
        create_file_field(AudioRequest(file_path="non_existing_file.wav"), RecordingBuilder())


def test_form_writes_fields_in_order(fake_mp3):
    request = _full_request(fake_mp3)
    request.model = WHISPER_1
    builder = RecordingBuilder()
    audio_multipart_form(request, builder)
    assert builder.calls == [
        ("file", "file"),
        ("field", "model", "whisper-1"),
        ("field", "prompt", "test"),
        ("field", "response_format", "srt"),
        ("field", "temperature", "0.50"),
        ("field", "language", "en"),
        ("close",),
    ]


def test_form_skips_unset_fields():
    builder = RecordingBuilder()
    request = AudioRequest(model=WHISPER_1, file_path="a.wav", reader=io.BytesIO(b"x"))
    audio_multipart_form(request, builder)
    assert builder.calls == [
        ("reader", "file", "a.wav"),
        ("field", "model", "whisper-1"),
        ("close",),
    ]


def test_form_with_real_builder():
    builder = FormBuilder()
    request = AudioRequest(
        model=WHISPER_1, file_path="test.wav", reader=io.BytesIO(b"wav test contents"), language="en"
    )
    audio_multipart_form(request, builder)
    raw = b"Content-Type: " + builder.content_type().encode() + b"\r\n\r\n" + builder.getvalue()
    parts = BytesParser().parsebytes(raw).get_payload()
    names = [p.get_param("name", header="content-disposition") for p in parts]
    assert names == ["file", "model", "language"]
    assert parts[0].get_filename() == "test.wav"
    assert parts[0].get_payload(decode=True) == b"wav test contents"


@pytest.mark.parametrize(
    ("fmt", "expected"),
    [
        ("", True),
        (AudioResponseFormat.JSON, True),
        (AudioResponseFormat.VERBOSE_JSON, True),
        (AudioResponseFormat.TEXT, False),
        (AudioResponseFormat.SRT, False),
        (AudioResponseFormat.VTT, False),
    ],
)
def test_has_json_response(fmt, expected):
    assert AudioRequest(format=fmt).has_json_response() is expected


def test_response_from_dict():
    data = {
        "task": "transcribe",
        "language": "english",
        "duration": 1.5,
        "segments": [{"id": 0, "start": 0.0, "end": 1.5, "text": "hi", "tokens": [1, 2]}],
        "text": "hi",
    }
    response = AudioResponse.from_dict(data)
    assert response.task == "transcribe"
    assert response.duration == 1.5
    assert response.segments == [AudioSegment(id=0, start=0.0, end=1.5, text="hi", tokens=[1, 2])]
    assert response.text == "hi"


def test_response_from_empty_dict():
    assert AudioResponse.from_dict({}) == AudioResponse()