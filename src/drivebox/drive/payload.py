# SPDX-License-Identifier: GPL-3.0-or-later
# src/drivebox/drive/payload.py
"""Normalizzazione dell'input di upload in uno stream binario leggibile.

Input accettati:
- stream già aperto (file object, `io.BytesIO`, qualsiasi oggetto con `read()`)
  → passato così com'è se seekable e in posizione 0, altrimenti il resto
  (dalla posizione corrente) viene bufferizzato in memoria;
- buffer binario (`bytes`, `bytearray`, `memoryview`);
- oggetto "ibrido" (dict o oggetto con attributi) che porta il contenuto nel
  campo `buffer` o `data`, più attributi extra (es. `mimetype`).

Il rilevamento della sorgente non legge mai lo stream: serve al guard di
`upload_file` per decidere se contattare Drive.
"""

from __future__ import annotations

import io
from collections.abc import Mapping
from typing import Any, BinaryIO, Optional, Union

from googleapiclient.http import MediaIoBaseUpload

from ..constants import OCTET_STREAM_MIME

_BINARY_TYPES = (bytes, bytearray, memoryview)
_SOURCE_FIELDS = ("buffer", "data")
_MIME_FIELDS = ("mimetype", "mimeType", "content_type")

BinarySource = Union[bytes, BinaryIO]


def _field(payload: Any, name: str) -> Any:
    if isinstance(payload, Mapping):
        return payload.get(name)
    return getattr(payload, name, None)


def is_stream(obj: Any) -> bool:
    """True se `obj` è uno stream leggibile (non consumato qui)."""
    if isinstance(obj, io.IOBase):
        try:
            return obj.readable()
        except ValueError:  # stream chiuso
            return False
    return callable(getattr(obj, "read", None)) and not isinstance(obj, (Mapping, *_BINARY_TYPES))


def _as_bytes(value: Any) -> Optional[bytes]:
    if isinstance(value, _BINARY_TYPES) and len(value):
        return bytes(value)
    return None


def resolve_binary_source(payload: Any) -> Optional[BinarySource]:
    """Prima sorgente binaria non vuota del payload, oppure None."""
    if payload is None:
        return None
    if is_stream(payload):
        return payload
    direct = _as_bytes(payload)
    if direct is not None:
        return direct
    for name in _SOURCE_FIELDS:
        value = _field(payload, name)
        if is_stream(value):
            return value
        found = _as_bytes(value)
        if found is not None:
            return found
    return None


def payload_mimetype(payload: Any, default: str = OCTET_STREAM_MIME) -> str:
    if payload is None or isinstance(payload, _BINARY_TYPES):
        return default
    for name in _MIME_FIELDS:
        value = _field(payload, name)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return default


def _is_rewound_seekable(stream: Any) -> bool:
    return isinstance(stream, io.IOBase) and stream.seekable() and stream.tell() == 0


def _drain(stream: Any) -> Optional[bytes]:
    """Legge il resto dello stream dalla posizione corrente."""
    chunk = stream.read()
    if isinstance(chunk, str):
        raise TypeError("Lo stream di upload deve produrre bytes, non testo.")
    return _as_bytes(chunk)


def to_upload_stream(payload: Any) -> Optional[BinaryIO]:
    """Stream seekable in posizione 0 pass-through; altrimenti contenuto bufferizzato in un `BytesIO`.

    Stream non seekable (pipe, socket, reader duck-typed) o già parzialmente letti
    vengono letti dalla posizione corrente: `MediaIoBaseUpload` richiede
    `seek`/`tell` e caricherebbe dall'offset 0. None se non resta contenuto.
    """
    source = resolve_binary_source(payload)
    if source is None:
        return None
    if isinstance(source, bytes):
        return io.BytesIO(source)
    if _is_rewound_seekable(source):
        return source
    rest = _drain(source)
    return io.BytesIO(rest) if rest is not None else None


def build_media(payload: Any, mimetype: Optional[str] = None) -> Optional[MediaIoBaseUpload]:
    """Media body non-resumable per `files.create` (None se il payload è vuoto)."""
    stream = to_upload_stream(payload)
    if stream is None:
        return None
    return MediaIoBaseUpload(stream, mimetype=mimetype or payload_mimetype(payload), resumable=False)


__all__ = [
    "is_stream",
    "resolve_binary_source",
    "payload_mimetype",
    "to_upload_stream",
    "build_media",
]
