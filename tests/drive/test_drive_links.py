# tests/drive/test_drive_links.py
from __future__ import annotations

from typing import Any

import pytest
import requests

import drivebox.drive.links as LK
from drivebox.drive.links import ContentLinkResolver
from tests._helpers.drive_fakes import FakeResponse

CANONICAL = "https://drive.google.com/uc?id=abc123"


def _patch_head(monkeypatch: pytest.MonkeyPatch, result: Any, seen: list[dict[str, Any]]) -> None:
    def _head(url: str, **kwargs: Any) -> Any:
        seen.append({"url": url, **kwargs})
        if isinstance(result, Exception):
            raise result
        return result

    monkeypatch.setattr(LK.requests, "head", _head)


@pytest.mark.parametrize("status", [301, 302, 303, 307, 308, 300, 399])
def test_redirect_returns_location(monkeypatch: pytest.MonkeyPatch, status: int) -> None:
    seen: list[dict[str, Any]] = []
    target = "https://drive.usercontent.google.com/download?id=abc123"
    _patch_head(monkeypatch, FakeResponse(status, {"Location": target}), seen)

    assert ContentLinkResolver().resolve("abc123") == target
    assert seen[0]["url"] == CANONICAL
    assert seen[0]["allow_redirects"] is False


@pytest.mark.parametrize("status", [200, 204, 403, 404, 500, 503])
def test_non_redirect_returns_canonical_url(monkeypatch: pytest.MonkeyPatch, status: int) -> None:
    seen: list[dict[str, Any]] = []
    _patch_head(monkeypatch, FakeResponse(status), seen)

    assert ContentLinkResolver().resolve("abc123") == CANONICAL


@pytest.mark.parametrize(
    "exc",
    [requests.ConnectionError("dns failure"), requests.Timeout("timed out"), requests.RequestException("boom")],
)
def test_transport_error_returns_none(monkeypatch: pytest.MonkeyPatch, exc: Exception) -> None:
    _patch_head(monkeypatch, exc, [])
    assert ContentLinkResolver().resolve("abc123") is None


def test_redirect_without_location_returns_none(monkeypatch: pytest.MonkeyPatch) -> None:
    _patch_head(monkeypatch, FakeResponse(302), [])
    assert ContentLinkResolver().resolve("abc123") is None


def test_empty_id_skips_probe(monkeypatch: pytest.MonkeyPatch) -> None:
    seen: list[dict[str, Any]] = []
    _patch_head(monkeypatch, FakeResponse(200), seen)
    assert ContentLinkResolver().resolve("") is None
    assert seen == []


def test_timeout_is_threaded_to_probe(monkeypatch: pytest.MonkeyPatch) -> None:
    seen: list[dict[str, Any]] = []
    _patch_head(monkeypatch, FakeResponse(200), seen)
    resolver = ContentLinkResolver(timeout=12.0)

    resolver.resolve("abc123")
    resolver.resolve("abc123", timeout=2.5)

    assert [s["timeout"] for s in seen] == [12.0, 2.5]


def test_custom_template(monkeypatch: pytest.MonkeyPatch) -> None:
    seen: list[dict[str, Any]] = []
    _patch_head(monkeypatch, FakeResponse(200), seen)
    resolver = ContentLinkResolver("https://example.test/content/{file_id}")

    assert resolver.resolve("xyz") == "https://example.test/content/xyz"
