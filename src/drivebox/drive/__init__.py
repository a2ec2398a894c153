# SPDX-License-Identifier: GPL-3.0-or-later
"""Package interno 'drive' (credenziali/client/payload/upload/retrieval).

Nota:
- L'API pubblica resta esposta da `drivebox.drive_utils` (facade/shim) e dalla
  classe `drivebox.drive.facade.GoogleDrive`.
- Non importa sottopacchetti qui per evitare cicli a import-time.

Struttura:
- drive/credentials.py → validazione service key + google-auth Credentials
- drive/client.py      → bootstrap client Drive v3 + esecuzione con timeout per-chiamata
- drive/payload.py     → stream/buffer/oggetto ibrido → media body
- drive/fields.py      → proiezione `fields` con `id` garantito
- drive/links.py       → probe HEAD del link diretto al contenuto
- drive/upload.py      → files.create + link + risultato normalizzato
- drive/retrieval.py   → files.get / files.get_media con fallback a None
- drive/facade.py      → classe `GoogleDrive`
"""

from typing import List

__all__: List[str] = []
