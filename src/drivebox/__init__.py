# SPDX-License-Identifier: GPL-3.0-or-later
"""drivebox: facade di upload/recupero file su Google Drive."""

__version__ = "0.1.0"
