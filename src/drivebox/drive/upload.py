# SPDX-License-Identifier: GPL-3.0-or-later
# src/drivebox/drive/upload.py
from __future__ import annotations

import time
import uuid
from typing import Any, Dict, Optional, cast

from ..constants import CONTENT_LINK_FIELD, RESULT_FIELDS
from ..exceptions import ConfigError, DriveUploadError
from ..logging_utils import get_structured_logger, mask_partial
from .client import execute_request
from .fields import FieldFilter, project_fields
from .links import ContentLinkResolver
from .payload import build_media, resolve_binary_source

logger = get_structured_logger("drivebox.drive.upload")


def make_object_name() -> str:
    """Nome univoco basato sul timestamp in millisecondi (più suffisso casuale corto)."""
    return f"{int(time.time() * 1000)}-{uuid.uuid4().hex[:6]}"


def _ensure_parent(parent_id: Optional[str]) -> str:
    parent_id = (parent_id or "").strip()
    if not parent_id:
        raise ConfigError("Google Drive: parent_id mancante o vuoto.", parent_id=parent_id)
    return parent_id


def _pick_result(data: Dict[str, Any]) -> Dict[str, Any]:
    return {key: data[key] for key in RESULT_FIELDS if key in data}


def upload_file(
    service: Any,
    payload: Any,
    field_filter: FieldFilter = None,
    *,
    parent_id: str,
    link_resolver: ContentLinkResolver,
    credentials: Any = None,
    timeout: Optional[float] = None,
    num_retries: int = 0,
) -> Optional[Dict[str, Any]]:
    """Carica `payload` nella cartella `parent_id` e ritorna i metadati normalizzati.

    Ritorna None (senza contattare Drive) se il payload non ha contenuto binario,
    e None anche quando il link al contenuto non è risolvibile.

    Raises:
        ConfigError: `parent_id` vuoto o filtro campi non valido.
        DriveUploadError: la chiamata `files.create` è fallita.
    """
    parent_id = _ensure_parent(parent_id)
    try:
        fields = project_fields(field_filter)
    except TypeError as e:
        raise ConfigError(f"Filtro campi non valido: {e}") from e

    if resolve_binary_source(payload) is None:
        logger.info("drive.upload.empty_payload", extra={"payload_type": type(payload).__name__})
        return None

    try:
        media = build_media(payload)
    except (OSError, ValueError, TypeError) as e:
        logger.error(
            "drive.upload.payload_read_error",
            extra={"payload_type": type(payload).__name__, "error_message": str(e)[:300]},
        )
        raise DriveUploadError(f"Lettura del payload di upload fallita: {e}", parent_id=parent_id) from e
    if media is None:
        # stream già consumato fino alla fine
        logger.info("drive.upload.empty_payload", extra={"payload_type": type(payload).__name__})
        return None

    body = {"name": make_object_name(), "parents": [parent_id]}
    request = service.files().create(body=body, media_body=media, fields=fields, supportsAllDrives=True)
    try:
        resp = cast(
            Dict[str, Any],
            execute_request(request, credentials=credentials, timeout=timeout, num_retries=num_retries),
        )
    except Exception as e:  # noqa: BLE001
        logger.error(
            "drive.upload.create_error",
            extra={"parent": mask_partial(parent_id), "fields": fields, "error_message": str(e)[:300]},
        )
        raise DriveUploadError(f"Upload su Drive fallito: {e}", parent_id=parent_id) from e

    file_id = resp.get("id") if isinstance(resp, dict) else None
    if not file_id:
        logger.warning("drive.upload.missing_id", extra={"parent": mask_partial(parent_id), "fields": fields})
        return None

    link = link_resolver.resolve(file_id, timeout=timeout)
    if link is None:
        logger.warning("drive.upload.link_unresolved", extra={"file_id": mask_partial(file_id)})
        return None

    result = _pick_result(resp)
    result[CONTENT_LINK_FIELD] = link
    logger.info(
        "drive.upload.done",
        extra={"file_id": mask_partial(file_id), "parent": mask_partial(parent_id), "fields": fields},
    )
    return result


__all__ = ["upload_file", "make_object_name"]
