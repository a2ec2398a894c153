# SPDX-License-Identifier: GPL-3.0-or-later
# src/drivebox/drive/facade.py
"""Facade `GoogleDrive`: credenziale validata una volta, poi `upload`/`get` indipendenti.

Esempio:
    drive = GoogleDrive("/secrets/service-account.json")
    meta = drive.upload({"buffer": b"...", "mimetype": "image/png"}, "name,size")
    if meta is not None:
        content = drive.get(meta["id"], {"alt": "media"})
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from ..logging_utils import get_structured_logger, mask_partial
from ..settings import DriveSettings
from .client import get_drive_service
from .credentials import build_credentials, load_service_account_info
from .fields import FieldFilter
from .links import ContentLinkResolver
from .retrieval import OptionsLike, get_file
from .upload import upload_file


class GoogleDrive:
    """Client Drive con parent fisso da configurazione.

    Lo stato (credenziali, service, resolver) è in sola lettura dopo la
    costruzione: chiamate concorrenti a `upload`/`get` non condividono altro.
    """

    def __init__(self, credential: Any, *, settings: Optional[DriveSettings] = None) -> None:
        self._settings = settings or DriveSettings.from_env()
        self._logger = get_structured_logger("drivebox.drive.facade", context=self._settings)
        info = load_service_account_info(credential)
        self._credentials = build_credentials(info, self._settings.scopes)
        self._service = get_drive_service(self._credentials)
        self._link_resolver = ContentLinkResolver(
            self._settings.content_url_template,
            timeout=self._settings.timeout_s,
        )
        self._logger.info("drive.facade.ready", extra={"parent": mask_partial(self._settings.parent_id)})

    @property
    def parent_id(self) -> str:
        return self._settings.parent_id

    @property
    def settings(self) -> DriveSettings:
        return self._settings

    def _timeout(self, timeout: Optional[float]) -> Optional[float]:
        return timeout if timeout is not None else self._settings.timeout_s

    def upload(
        self,
        payload: Any,
        field_filter: FieldFilter = None,
        *,
        timeout: Optional[float] = None,
    ) -> Optional[Dict[str, Any]]:
        """Carica il payload; None se vuoto o se il link al contenuto non è risolvibile.

        Raises:
            DriveUploadError: la creazione remota è fallita.
        """
        return upload_file(
            self._service,
            payload,
            field_filter,
            parent_id=self._settings.parent_id,
            link_resolver=self._link_resolver,
            credentials=self._credentials,
            timeout=self._timeout(timeout),
            num_retries=self._settings.num_retries,
        )

    # nome storico del metodo di upload
    create = upload

    def get(self, file_id: str, options: OptionsLike = None, *, timeout: Optional[float] = None) -> Any:
        """Metadati o contenuto del file; None su qualsiasi errore."""
        return get_file(
            self._service,
            file_id,
            options,
            credentials=self._credentials,
            timeout=self._timeout(timeout),
            num_retries=self._settings.num_retries,
        )


__all__ = ["GoogleDrive"]
