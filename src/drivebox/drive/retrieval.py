# SPDX-License-Identifier: GPL-3.0-or-later
# src/drivebox/drive/retrieval.py
"""Recupero di metadati o contenuto di un file Drive per ID.

- Metadati: `files.get(fileId, fields=...)` → dict.
- Contenuto (`alt="media"`): `files.get_media(fileId)` → bytes, `BytesIO`
  (`response_type="stream"`) o JSON decodificato (`response_type="json"`).

Qualsiasi errore collassa a None: per il chiamante un file non recuperabile
equivale a "non trovato".
"""

from __future__ import annotations

import io
import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from ..exceptions import ConfigError, DriveDownloadError
from ..logging_utils import get_structured_logger, mask_partial
from .client import execute_request
from .fields import FieldFilter, join_fields

logger = get_structured_logger("drivebox.drive.retrieval")

MEDIA_ALT = "media"
RESPONSE_TYPES = ("json", "arraybuffer", "blob", "stream")


@dataclass(frozen=True)
class RetrievalOptions:
    """Opzioni di `get`: proiezione campi, modalità contenuto, rappresentazione."""

    fields: FieldFilter = None
    alt: Optional[str] = None
    response_type: Optional[str] = None

    def __post_init__(self) -> None:
        if self.alt is not None and self.alt != MEDIA_ALT:
            raise ConfigError(f"Valore 'alt' non supportato: {self.alt!r}")
        if self.response_type is not None and self.response_type not in RESPONSE_TYPES:
            raise ConfigError(f"responseType non supportato: {self.response_type!r}")

    @property
    def is_media(self) -> bool:
        return self.alt == MEDIA_ALT

    @classmethod
    def from_mapping(cls, options: Optional[Mapping[str, Any]]) -> "RetrievalOptions":
        if not options:
            return cls()
        response_type = options.get("response_type", options.get("responseType"))
        return cls(fields=options.get("fields"), alt=options.get("alt"), response_type=response_type)


OptionsLike = Union[RetrievalOptions, Mapping[str, Any], None]


def _coerce_options(options: OptionsLike) -> RetrievalOptions:
    if isinstance(options, RetrievalOptions):
        return options
    if options is None or isinstance(options, Mapping):
        return RetrievalOptions.from_mapping(options)
    raise ConfigError(f"Opzioni di recupero non supportate: {type(options).__name__}")


def build_get_filter(file_id: str, options: OptionsLike = None) -> Dict[str, Any]:
    """Filtro base `{fileId}` arricchito con le opzioni riconosciute."""
    file_id = (file_id or "").strip()
    if not file_id:
        raise ConfigError("Google Drive: file_id mancante o vuoto.", file_id=file_id)
    opts = _coerce_options(options)

    flt: Dict[str, Any] = {"fileId": file_id, "supportsAllDrives": True}
    try:
        fields = join_fields(opts.fields)
    except TypeError as e:
        raise ConfigError(f"Filtro campi non valido: {e}") from e
    if fields and not opts.is_media:
        flt["fields"] = fields
    if opts.alt:
        flt["alt"] = opts.alt
    return flt


def _decode_media(content: Any, response_type: Optional[str]) -> Any:
    data = content if isinstance(content, bytes) else str(content or "").encode("utf-8")
    if response_type == "stream":
        return io.BytesIO(data)
    if response_type == "json":
        return json.loads(data.decode("utf-8"))
    return data


def _fetch(
    service: Any,
    file_id: str,
    options: OptionsLike,
    *,
    credentials: Any,
    timeout: Optional[float],
    num_retries: int,
) -> Any:
    opts = _coerce_options(options)
    flt = build_get_filter(file_id, opts)
    files = service.files()
    if opts.is_media:
        request = files.get_media(fileId=flt["fileId"], supportsAllDrives=True)
    else:
        request = files.get(**flt)
    try:
        response = execute_request(request, credentials=credentials, timeout=timeout, num_retries=num_retries)
    except Exception as e:  # noqa: BLE001
        raise DriveDownloadError(f"Recupero da Drive fallito: {e}", file_id=file_id) from e

    if opts.is_media:
        return _decode_media(response, opts.response_type)
    return response


def get_file(
    service: Any,
    file_id: str,
    options: OptionsLike = None,
    *,
    credentials: Any = None,
    timeout: Optional[float] = None,
    num_retries: int = 0,
) -> Any:
    """Metadati (dict) o contenuto del file; None su qualsiasi errore."""
    try:
        return _fetch(
            service,
            file_id,
            options,
            credentials=credentials,
            timeout=timeout,
            num_retries=num_retries,
        )
    except Exception as e:  # noqa: BLE001
        logger.warning(
            "drive.get.failed",
            extra={
                "file_id": mask_partial(str(file_id or "")),
                "exc_type": type(e).__name__,
                "error_message": str(e)[:300],
            },
        )
        return None


__all__ = ["RetrievalOptions", "build_get_filter", "get_file"]
