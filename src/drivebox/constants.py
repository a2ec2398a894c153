# SPDX-License-Identifier: GPL-3.0-or-later
# src/drivebox/constants.py
"""Single Source of Truth (SSoT) per costanti Google Drive usate dal facade.

Note uso:
- I chiamanti devono **importare da qui** invece di hardcodare stringhe.
- `DEFAULT_PARENT_FOLDER_ID` è solo un default: la cartella di destinazione si
  configura via `DriveSettings.parent_id` (ENV `DRIVEBOX_PARENT_FOLDER_ID`).
"""

# 📦 Cartella di destinazione di default per gli upload
DEFAULT_PARENT_FOLDER_ID = "1-sQEbClcbj6xmywa5XygM3wWfGCWWF69"

# 🔐 Scope minimi: file creati dall'app + risorse dell'app
DRIVE_SCOPES = (
    "https://www.googleapis.com/auth/drive.file",
    "https://www.googleapis.com/auth/drive.resource",
)

# 🔗 URL pubblico del contenuto (probe HEAD senza redirect)
CONTENT_URL_TEMPLATE = "https://drive.google.com/uc?id={file_id}"

# 📄 Proiezione "tutti i campi"
ALL_FIELDS = "*"

# 📄 Chiavi restituite dall'upload (più `webContentLink`, calcolato localmente)
RESULT_FIELDS = (
    "id",
    "name",
    "mimeType",
    "parents",
    "webViewLink",
    "thumbnailLink",
    "createdTime",
    "size",
    "shared",
)
CONTENT_LINK_FIELD = "webContentLink"

# 📄 MIME Types generici
OCTET_STREAM_MIME = "application/octet-stream"

# ⏱️ Timeout di default (secondi) per le chiamate di rete
DEFAULT_TIMEOUT_S = 30.0
