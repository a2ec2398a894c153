# SPDX-License-Identifier: GPL-3.0-or-later
"""Configurazione tipizzata del facade Drive (default + override da ENV)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Tuple

from .constants import CONTENT_URL_TEMPLATE, DEFAULT_PARENT_FOLDER_ID, DEFAULT_TIMEOUT_S, DRIVE_SCOPES
from .env_utils import get_bool, get_env_var, get_float, get_int
from .exceptions import ConfigError


@dataclass(frozen=True)
class DriveSettings:
    """Parametri del facade; immutabili per tutta la vita del client."""

    parent_id: str = DEFAULT_PARENT_FOLDER_ID
    scopes: Tuple[str, ...] = field(default=DRIVE_SCOPES)
    content_url_template: str = CONTENT_URL_TEMPLATE
    timeout_s: Optional[float] = DEFAULT_TIMEOUT_S
    num_retries: int = 0
    redact_logs: bool = True

    def __post_init__(self) -> None:
        if not (self.parent_id or "").strip():
            raise ConfigError("Google Drive: parent_id mancante o vuoto.")
        if "{file_id}" not in (self.content_url_template or ""):
            raise ConfigError("content_url_template deve contenere il segnaposto '{file_id}'.")
        if self.timeout_s is not None and self.timeout_s <= 0:
            raise ConfigError(f"timeout_s deve essere positivo: {self.timeout_s}")
        if self.num_retries < 0:
            raise ConfigError(f"num_retries non può essere negativo: {self.num_retries}")
        if not self.scopes:
            raise ConfigError("Almeno uno scope Drive è richiesto.")

    @classmethod
    def from_env(cls, **overrides: Any) -> "DriveSettings":
        """Costruisce le impostazioni leggendo le variabili `DRIVEBOX_*`.

        Gli `overrides` espliciti vincono sui valori d'ambiente.
        """
        values: dict[str, Any] = {
            "parent_id": get_env_var("DRIVEBOX_PARENT_FOLDER_ID", default=DEFAULT_PARENT_FOLDER_ID),
            "content_url_template": get_env_var("DRIVEBOX_CONTENT_URL_TEMPLATE", default=CONTENT_URL_TEMPLATE),
            "timeout_s": get_float("DRIVEBOX_TIMEOUT_S", default=DEFAULT_TIMEOUT_S),
            "num_retries": get_int("DRIVEBOX_NUM_RETRIES", default=0),
            "redact_logs": get_bool("DRIVEBOX_REDACT_LOGS", default=True),
        }
        values.update(overrides)
        return cls(**values)


__all__ = ["DriveSettings"]
