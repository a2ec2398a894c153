# tests/drive/test_drive_payload.py
from __future__ import annotations

import io
import types
from pathlib import Path
from typing import Any

import pytest
from googleapiclient.http import MediaIoBaseUpload

from drivebox.drive.payload import (
    build_media,
    is_stream,
    payload_mimetype,
    resolve_binary_source,
    to_upload_stream,
)
from tests._helpers.drive_fakes import PipeReader, UnseekableRaw

PAYLOAD = b"0123456789"


def test_stream_passes_through_unchanged() -> None:
    stream = io.BytesIO(PAYLOAD)
    assert to_upload_stream(stream) is stream


def test_open_file_is_stream(tmp_path: Path) -> None:
    p = tmp_path / "blob.bin"
    p.write_bytes(PAYLOAD)
    with p.open("rb") as fh:
        assert is_stream(fh)
        assert to_upload_stream(fh) is fh


def test_closed_stream_is_not_a_source() -> None:
    stream = io.BytesIO(PAYLOAD)
    stream.close()
    assert resolve_binary_source(stream) is None


@pytest.mark.parametrize(
    "payload",
    [
        PAYLOAD,
        bytearray(PAYLOAD),
        memoryview(PAYLOAD),
        {"buffer": PAYLOAD},
        {"data": PAYLOAD},
        {"buffer": b"", "data": PAYLOAD},
        types.SimpleNamespace(buffer=PAYLOAD, originalname="a.png"),
        types.SimpleNamespace(data=PAYLOAD),
    ],
)
def test_buffer_sources_wrapped_in_finite_stream(payload: Any) -> None:
    stream = to_upload_stream(payload)
    assert stream is not None
    assert stream.read() == PAYLOAD
    assert stream.read() == b""  # fine stream immediata


def test_buffer_field_wins_over_data() -> None:
    assert resolve_binary_source({"buffer": b"B", "data": b"D"}) == b"B"


@pytest.mark.parametrize(
    "payload",
    [None, {}, b"", {"buffer": b""}, {"data": None}, {"data": "text"}, "plain string", 12, types.SimpleNamespace()],
)
def test_no_binary_source(payload: Any) -> None:
    assert resolve_binary_source(payload) is None
    assert to_upload_stream(payload) is None
    assert build_media(payload) is None


def test_mimetype_from_hybrid_object() -> None:
    assert payload_mimetype({"buffer": PAYLOAD, "mimetype": "image/png"}) == "image/png"
    assert payload_mimetype(types.SimpleNamespace(data=PAYLOAD, mimeType="text/plain")) == "text/plain"
    assert payload_mimetype(PAYLOAD) == "application/octet-stream"
    assert payload_mimetype({"buffer": PAYLOAD}) == "application/octet-stream"


def test_build_media_is_non_resumable_with_full_content() -> None:
    media = build_media({"buffer": PAYLOAD, "mimetype": "image/png"})
    assert isinstance(media, MediaIoBaseUpload)
    assert media.resumable() is False
    assert media.mimetype() == "image/png"
    assert media.size() == len(PAYLOAD)
    assert media.getbytes(0, media.size()) == PAYLOAD


# ------------------------------------------------------------
# Stream non seekable / duck-typed / parzialmente letti
# ------------------------------------------------------------
def test_duck_typed_reader_is_stream_and_buffered() -> None:
    reader = PipeReader(PAYLOAD)
    assert is_stream(reader)
    assert resolve_binary_source(reader) is reader

    stream = to_upload_stream(reader)
    assert isinstance(stream, io.BytesIO)
    assert stream.read() == PAYLOAD


def test_unseekable_buffered_reader_is_buffered() -> None:
    fh = io.BufferedReader(UnseekableRaw(PAYLOAD))
    assert fh.seekable() is False

    media = build_media(fh)
    assert media is not None
    assert media.getbytes(0, media.size()) == PAYLOAD


def test_partly_read_stream_uploads_from_current_position() -> None:
    stream = io.BytesIO(b"HEADERpayload")
    stream.read(6)

    media = build_media(stream)
    assert media is not None
    assert media.getbytes(0, media.size()) == b"payload"


def test_fully_read_stream_has_nothing_to_upload() -> None:
    stream = io.BytesIO(PAYLOAD)
    stream.read()
    assert to_upload_stream(stream) is None
    assert build_media(stream) is None


def test_text_reader_is_rejected() -> None:
    with pytest.raises(TypeError):
        to_upload_stream(PipeReader("testo, non bytes"))


def test_stream_in_hybrid_field_is_buffered() -> None:
    stream = to_upload_stream({"data": PipeReader(PAYLOAD), "mimetype": "image/png"})
    assert stream is not None
    assert stream.read() == PAYLOAD
