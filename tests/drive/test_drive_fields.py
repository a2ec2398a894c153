# tests/drive/test_drive_fields.py
from __future__ import annotations

from typing import Any

import pytest

from drivebox.drive.fields import join_fields, project_fields


@pytest.mark.parametrize(
    "field_filter, expected",
    [
        (None, "*"),
        ("", "*"),
        ([], "*"),
        ("name", "id,name"),
        ("name,size", "id,name,size"),
        ("id", "id"),
        ("name,id,size", "name,id,size"),
        (["name", "size"], "id,name,size"),
        (["size", "id", "name"], "size,id,name"),
        (("mimeType",), "id,mimeType"),
        (" name , size ", "id,name,size"),
        ("*", "*"),
    ],
)
def test_project_fields(field_filter: Any, expected: str) -> None:
    assert project_fields(field_filter) == expected


@pytest.mark.parametrize(
    "field_filter",
    ["name", "name,size", "id,name", ["name", "id"], ["id", "name", "id"], "name,id,size,id", "videoId"],
)
def test_project_fields_has_exactly_one_id_and_keeps_order(field_filter: Any) -> None:
    tokens = project_fields(field_filter).split(",")
    assert tokens.count("id") == 1

    caller = field_filter.split(",") if isinstance(field_filter, str) else list(field_filter)
    caller_non_id = [t.strip() for t in caller if t.strip() != "id"]
    assert [t for t in tokens if t != "id"] == caller_non_id


def test_project_fields_substring_is_not_id() -> None:
    # `videoId` contiene "id" ma non è il campo id
    assert project_fields("videoId") == "id,videoId"


@pytest.mark.parametrize("bad", [42, {"name": 1}, ["name", 3]])
def test_project_fields_rejects_unsupported_types(bad: Any) -> None:
    with pytest.raises(TypeError):
        project_fields(bad)


def test_join_fields_does_not_inject_id() -> None:
    assert join_fields(None) is None
    assert join_fields("") is None
    assert join_fields("name") == "name"
    assert join_fields(["name", "size"]) == "name,size"
