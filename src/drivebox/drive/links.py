# SPDX-License-Identifier: GPL-3.0-or-later
# src/drivebox/drive/links.py
"""Risoluzione del link diretto al contenuto di un file Drive.

Il probe è una `HEAD` senza follow dei redirect sull'URL pubblico `uc?id=<id>`:
- 3xx → header `Location` (URL di download diretto);
- qualsiasi altro status → l'URL canonico stesso;
- errori di trasporto → None (mai eccezioni verso il chiamante).
"""

from __future__ import annotations

from typing import Optional

import requests

from ..constants import CONTENT_URL_TEMPLATE, DEFAULT_TIMEOUT_S
from ..logging_utils import get_structured_logger, mask_partial

logger = get_structured_logger("drivebox.drive.links")


class ContentLinkResolver:
    """Probe HTTP del link pubblico di un file appena creato."""

    def __init__(
        self,
        url_template: str = CONTENT_URL_TEMPLATE,
        *,
        timeout: Optional[float] = DEFAULT_TIMEOUT_S,
    ) -> None:
        self.url_template = url_template
        self.timeout = timeout

    def canonical_url(self, file_id: str) -> str:
        return self.url_template.format(file_id=file_id)

    def resolve(self, file_id: str, *, timeout: Optional[float] = None) -> Optional[str]:
        if not file_id:
            return None
        url = self.canonical_url(file_id)
        try:
            response = requests.head(
                url,
                allow_redirects=False,
                timeout=timeout if timeout is not None else self.timeout,
            )
        except requests.RequestException as exc:
            logger.warning(
                "drive.link.probe_failed",
                extra={"file_id": mask_partial(file_id), "error_message": str(exc)[:300]},
            )
            return None

        if 300 <= response.status_code <= 399:
            location = response.headers.get("location")
            if not location:
                logger.warning(
                    "drive.link.redirect_without_location",
                    extra={"file_id": mask_partial(file_id), "status": response.status_code},
                )
                return None
            return location

        logger.debug(
            "drive.link.no_redirect",
            extra={"file_id": mask_partial(file_id), "status": response.status_code},
        )
        return url


__all__ = ["ContentLinkResolver"]
