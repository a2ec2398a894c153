# SPDX-License-Identifier: GPL-3.0-or-later
# src/drivebox/drive/credentials.py
"""
Validazione della credenziale service account per il facade Drive.

Superficie pubblica:
- load_service_account_info(credential)
    Accetta un dict (segreto inline) oppure un path (str/PathLike) a un file JSON.
    Ritorna il dict validato; qualsiasi input assente, vuoto o di tipo non
    supportato solleva `InvalidCredential`.
- build_credentials(info, scopes)
    Costruisce le `Credentials` google-auth dal segreto già validato.

Note:
- Nessuna lettura da ENV: la risoluzione/rotazione della credenziale spetta al chiamante.
- Il contenuto del segreto non finisce mai nei log (solo `client_email` mascherata).
"""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Dict, Iterable

from google.oauth2.service_account import Credentials

from ..exceptions import InvalidCredential
from ..logging_utils import get_structured_logger, mask_partial

logger = get_structured_logger("drivebox.drive.credentials")

_INVALID_MSG = (
    "Service key Google mancante o non valida. Fornire un path leggibile a un file JSON "
    "oppure un dict con le credenziali del service account."
)


def _read_info_file(path: Path) -> Dict[str, Any]:
    if not path.is_file():
        raise InvalidCredential(f"{_INVALID_MSG} (file non trovato: {path.name})")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise InvalidCredential(f"{_INVALID_MSG} (file non leggibile: {path.name})") from e
    if not isinstance(data, dict):
        raise InvalidCredential(f"{_INVALID_MSG} (atteso un oggetto JSON: {path.name})")
    return data


def load_service_account_info(credential: Any) -> Dict[str, Any]:
    """Risolve e valida il segreto del service account.

    Raises:
        InvalidCredential: credenziale assente, vuota, non risolubile o di tipo non supportato.
    """
    if isinstance(credential, (str, os.PathLike)):
        raw = os.fspath(credential).strip()
        if not raw:
            raise InvalidCredential(_INVALID_MSG)
        info = _read_info_file(Path(raw).expanduser())
    elif isinstance(credential, Mapping):
        info = dict(credential)
    else:
        raise InvalidCredential(f"{_INVALID_MSG} (tipo non supportato: {type(credential).__name__})")

    if not info:
        raise InvalidCredential(_INVALID_MSG)
    return info


def build_credentials(info: Dict[str, Any], scopes: Iterable[str]) -> Credentials:
    """Costruisce credenziali service account con gli scope minimi richiesti."""
    scope_list = list(scopes)
    try:
        creds = Credentials.from_service_account_info(info, scopes=scope_list)
    except (ValueError, KeyError, TypeError) as e:
        raise InvalidCredential(f"Caricamento credenziali service account fallito: {e}") from e

    logger.debug(
        "drive.credentials.loaded",
        extra={"client_email": mask_partial(str(info.get("client_email") or ""), keep=6), "scopes": scope_list},
    )
    return creds


__all__ = ["load_service_account_info", "build_credentials"]
