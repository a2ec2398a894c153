# SPDX-License-Identifier: GPL-3.0-or-later
# src/drivebox/drive/client.py
"""
Client Google Drive (v3) e primitive di esecuzione delle richieste.

Superficie pubblica:
- get_drive_service(credentials)
    Costruisce un client Drive v3 autenticato con le credenziali già validate.
- execute_request(request, *, credentials=None, timeout=None, num_retries=0)
    Esegue una `HttpRequest` con un trasporto dedicato alla singola chiamata:
    timeout propagato a httplib2 e nessuna connessione condivisa tra thread.

Note d’uso:
- Retry/backoff di trasporto delegati al client (`num_retries` di googleapiclient).
- Nessun `print()`; tutta la diagnostica passa dal logging strutturato del repo.
"""

from __future__ import annotations

from typing import Any, Optional

import httplib2
from google_auth_httplib2 import AuthorizedHttp
from googleapiclient.discovery import build

from ..exceptions import ConfigError
from ..logging_utils import get_structured_logger

logger = get_structured_logger("drivebox.drive.client")


def get_drive_service(credentials: Any) -> Any:
    """Costruisce e restituisce un client Google Drive v3."""
    try:
        service = build("drive", "v3", credentials=credentials, cache_discovery=False)
    except Exception as e:  # noqa: BLE001
        raise ConfigError(f"Creazione client Google Drive fallita: {e}") from e

    logger.debug("drive.client.built", extra={"api": "drive", "version": "v3"})
    return service


def _authorized_http(credentials: Any, timeout: Optional[float]) -> Optional[AuthorizedHttp]:
    if credentials is None:
        return None
    return AuthorizedHttp(credentials, http=httplib2.Http(timeout=timeout))


def execute_request(
    request: Any,
    *,
    credentials: Any = None,
    timeout: Optional[float] = None,
    num_retries: int = 0,
) -> Any:
    """Esegue `request.execute(...)` con un trasporto per-chiamata (se ho le credenziali)."""
    http = _authorized_http(credentials, timeout)
    if http is None:
        return request.execute(num_retries=num_retries)
    return request.execute(http=http, num_retries=num_retries)


__all__ = ["get_drive_service", "execute_request"]
