# SPDX-License-Identifier: GPL-3.0-or-later
# src/drivebox/drive_utils.py
"""
Facade pubblica per le utility Google Drive di drivebox.

Questo file non contiene logica: effettua solo import statici e re-export dei
moduli interni `drivebox.drive.*`. Il resto del codice (e i test) importa da qui.

Funzioni/Classi riesportate
---------------------------
- `GoogleDrive(credential, *, settings=None)` → facade con `upload`/`create`/`get`.
- `upload_file(service, payload, field_filter, *, parent_id, link_resolver, ...)`.
- `get_file(service, file_id, options, ...)` / `build_get_filter` / `RetrievalOptions`.
- `ContentLinkResolver` → probe del link diretto al contenuto.
- `project_fields` / `join_fields` → proiezione `fields`.
- `load_service_account_info` / `build_credentials` / `get_drive_service`.
"""

from __future__ import annotations

from .drive.client import get_drive_service
from .drive.credentials import build_credentials, load_service_account_info
from .drive.facade import GoogleDrive
from .drive.fields import join_fields, project_fields
from .drive.links import ContentLinkResolver
from .drive.payload import resolve_binary_source, to_upload_stream
from .drive.retrieval import RetrievalOptions, build_get_filter, get_file
from .drive.upload import upload_file

__all__: list[str] = [
    "GoogleDrive",
    "get_drive_service",
    "load_service_account_info",
    "build_credentials",
    "project_fields",
    "join_fields",
    "resolve_binary_source",
    "to_upload_stream",
    "ContentLinkResolver",
    "upload_file",
    "get_file",
    "build_get_filter",
    "RetrievalOptions",
]
