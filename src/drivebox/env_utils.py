# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

"""Env utilities senza side-effects a import-time.

Espone:
- ``ensure_dotenv_loaded()``: carica .env on-demand (idempotente).
- ``get_env_var(name, default=None, required=False)``: lettura sicura.
- ``get_bool`` / ``get_int`` / ``get_float``: parsing tipizzato da ENV.
"""

import os
from collections.abc import Mapping
from typing import Optional

from dotenv import load_dotenv

from drivebox.logging_utils import get_structured_logger

__all__ = [
    "ensure_dotenv_loaded",
    "get_env_var",
    "get_bool",
    "get_int",
    "get_float",
]

_LOGGER = get_structured_logger("drivebox.env_utils")
_ENV_LOADED = False


def ensure_dotenv_loaded() -> bool:
    """Carica il file .env una sola volta su richiesta esplicita.

    Ritorna True se il caricamento è stato eseguito in questa chiamata,
    False se già caricato in precedenza.
    """
    global _ENV_LOADED
    if _ENV_LOADED:
        return False
    loaded = load_dotenv()  # carica da CWD; non forza override
    _ENV_LOADED = True
    _LOGGER.debug("env.loaded", extra={"loaded": bool(loaded)})
    return True


def get_env_var(name: str, default: Optional[str] = None, *, required: bool | None = False) -> Optional[str]:
    """Ritorna il valore di una variabile d'ambiente.

    - Trimma spazi; se vuota, tratta come non impostata.
    - Se ``required`` e non presente, solleva ``KeyError``.
    """
    ensure_dotenv_loaded()
    val = os.environ.get(name)
    if val is None:
        if required:
            raise KeyError(f"ENV missing: {name}")
        return default
    sval = val.strip()
    if sval == "":
        if required:
            raise KeyError(f"ENV empty: {name}")
        return default
    return sval


def get_bool(name: str, default: bool = False, *, env: Mapping[str, str] | None = None) -> bool:
    """Parsa un booleano da ENV (o mapping fornito) usando valori comuni truthy/falsy.

    Truthy: 1,true,yes,on (case-insensitive). Falsy: 0,false,no,off.
    Se non impostata o non riconosciuta, ritorna ``default``.
    """
    source: Mapping[str, str]
    if env is not None:
        source = env
    else:
        ensure_dotenv_loaded()
        source = os.environ
    val = source.get(name)
    if val is None:
        return bool(default)
    s = str(val).strip().lower()
    if s in {"1", "true", "yes", "on"}:
        return True
    if s in {"0", "false", "no", "off"}:
        return False
    return bool(default)


def get_int(name: str, default: int = 0) -> int:
    """Parsa un intero da ENV; ritorna `default` se mancante o non valido."""
    val = get_env_var(name)
    if val is None:
        return int(default)
    try:
        return int(val)
    except ValueError:
        return int(default)


def get_float(name: str, default: float = 0.0) -> float:
    """Parsa un float da ENV; ritorna `default` se mancante o non valido."""
    val = get_env_var(name)
    if val is None:
        return float(default)
    try:
        return float(val)
    except ValueError:
        return float(default)
