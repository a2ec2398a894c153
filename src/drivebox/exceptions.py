# SPDX-License-Identifier: GPL-3.0-or-later
# src/drivebox/exceptions.py
from __future__ import annotations

from typing import Any, Optional

"""
Eccezioni SSoT per drivebox.

Ruoli principali:
- `DriveboxError`: base per tutte le eccezioni di dominio (no I/O, no exit).
- `ConfigError` / `InvalidCredential`: errori di costruzione del facade (fatali).
- `DriveUploadError`: la chiamata remota `files.create` è fallita (propagata al chiamante).
- `DriveDownloadError`: la chiamata remota `files.get` è fallita (il facade la collassa a `None`).
- `EXIT_CODES` + `exit_code_for`: tabella centralizzata per eventuali orchestratori.

Linee guida:
- Nessuna eccezione fa I/O o termina il processo.
- I messaggi includono contesto “safe” in __str__ (ID mascherati).
"""

# ---------------------------------------------------------------------------
# Base
# ---------------------------------------------------------------------------


class DriveboxError(Exception):
    """Eccezione generica per errori bloccanti del facade Drive.

    Accetta un messaggio e un payload contestuale opzionale (file_id, parent_id)
    utile per logging strutturato e diagnosi.
    """

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        file_id: Optional[str] = None,
        parent_id: Optional[str] = None,
        **_: Any,
    ) -> None:
        super().__init__(message or "")
        self.file_id: Optional[str] = file_id
        self.parent_id: Optional[str] = parent_id

    @staticmethod
    def _mask_id(val: str, keep: int = 6) -> str:
        """Maschera l'ID Drive lasciando solo le ultime `keep` cifre."""
        try:
            s = str(val)
            if len(s) <= keep:
                return s
            return f"…{s[-keep:]}"
        except Exception:
            return "…"

    def __str__(self) -> str:
        base_msg = super().__str__() or self.__class__.__name__
        context_parts: list[str] = []
        if self.file_id:
            context_parts.append(f"file_id={self._mask_id(self.file_id)}")
        if self.parent_id:
            context_parts.append(f"parent_id={self._mask_id(self.parent_id)}")
        context_info = f" [{' | '.join(context_parts)}]" if context_parts else ""
        return f"{base_msg}{context_info}"


# ---------------------------------------------------------------------------
# Errori tipizzati
# ---------------------------------------------------------------------------


class ConfigError(DriveboxError):
    """Errore di caricamento o validazione della configurazione."""

    pass


class InvalidCredential(ConfigError):
    """Credenziale service account assente, vuota o non risolubile."""

    pass


class DriveUploadError(DriveboxError):
    """Errore nel caricamento su Google Drive (chiamata remota rifiutata)."""

    pass


class DriveDownloadError(DriveboxError):
    """Errore nel recupero di metadati/contenuto da Google Drive."""

    pass


# ---------------------------------------------------------------------------
# Exit codes centralizzati (nessun side-effect)
# ---------------------------------------------------------------------------

EXIT_CODES = {
    "DriveboxError": 1,
    "ConfigError": 2,
    "InvalidCredential": 2,
    "DriveDownloadError": 21,
    "DriveUploadError": 22,
}


def exit_code_for(exc: BaseException) -> int:
    """Restituisce il codice di uscita per un’eccezione (fallback a DriveboxError=1)."""
    return EXIT_CODES.get(type(exc).__name__, EXIT_CODES["DriveboxError"])


__all__ = [
    "DriveboxError",
    "ConfigError",
    "InvalidCredential",
    "DriveUploadError",
    "DriveDownloadError",
    "EXIT_CODES",
    "exit_code_for",
]
