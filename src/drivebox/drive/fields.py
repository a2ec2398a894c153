# SPDX-License-Identifier: GPL-3.0-or-later
# src/drivebox/drive/fields.py
"""Costruzione della proiezione `fields` per le richieste Drive.

L'upload ha sempre bisogno dell'`id` dell'oggetto creato (serve per risolvere il
link al contenuto), quindi `project_fields` lo garantisce in testa quando il
chiamante non lo include.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Union

from ..constants import ALL_FIELDS

FieldFilter = Union[str, Iterable[str], None]


def _tokens(field_filter: FieldFilter) -> List[str]:
    if isinstance(field_filter, str):
        raw = field_filter.split(",")
    elif isinstance(field_filter, (list, tuple)):
        raw = []
        for item in field_filter:
            if not isinstance(item, str):
                raise TypeError(f"Nome campo non valido: {item!r}")
            raw.extend(item.split(","))
    else:
        raise TypeError(f"Filtro campi non supportato: {type(field_filter).__name__}")
    return [t.strip() for t in raw if t.strip()]


def join_fields(field_filter: FieldFilter) -> Optional[str]:
    """Join semplice (senza iniezione di `id`); None se il filtro è vuoto."""
    if field_filter is None:
        return None
    tokens = _tokens(field_filter)
    return ",".join(tokens) if tokens else None


def project_fields(field_filter: FieldFilter = None) -> str:
    """Proiezione per `files.create`: `*` se assente, altrimenti `id` garantito una sola volta."""
    if field_filter is None:
        return ALL_FIELDS
    tokens = _tokens(field_filter)
    if not tokens:
        return ALL_FIELDS
    if ALL_FIELDS in tokens:
        return ALL_FIELDS
    if "id" in tokens:
        # collassa eventuali `id` duplicati mantenendo la prima posizione
        first = tokens.index("id")
        tokens = [t for i, t in enumerate(tokens) if t != "id" or i == first]
        return ",".join(tokens)
    return ",".join(["id", *tokens])


__all__ = ["project_fields", "join_fields"]
