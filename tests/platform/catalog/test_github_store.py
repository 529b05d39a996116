"""
Summary: Tests for the GitHub-backed catalog store using a fake HTTP client.
Why: Listing and fetch failures must map onto the catalog error taxonomy.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

import pytest

from sizeof.features.catalog import (
    CatalogStorePort,
    CatalogUnavailableError,
    FormatError,
    NotFoundError,
)
from sizeof.platform.catalog import GitHubCatalogStore
from sizeof.platform.http import HTTPResult

TREE_URL = "https://api.github.com/repos/edoelas/sizeof-catalog/git/trees/main"
RAW_BASE = "https://raw.githubusercontent.com/edoelas/sizeof-catalog/main"

CONFIG = "name: Hex nut\ncolumns: [{key: m, unit: mm}]\ndata: [{m: 2.4}]\n"
DIAGRAM = "<svg><text>{{m}}</text></svg>"


class _FakeHTTPClient:
    def __init__(self, responses: Mapping[str, HTTPResult]) -> None:
        self.responses: dict[str, HTTPResult] = dict(responses)
        self.calls: list[tuple[str, dict[str, str] | None]] = []

    def get(self, url: str, params: Mapping[str, str] | None = None) -> HTTPResult:
        self.calls.append((url, dict(params) if params else None))
        return self.responses.get(url, HTTPResult(status=404))


def _json(payload: Any) -> HTTPResult:
    return HTTPResult(status=200, text=json.dumps(payload))


def _store(responses: Mapping[str, HTTPResult]) -> tuple[GitHubCatalogStore, _FakeHTTPClient]:
    client = _FakeHTTPClient(responses)
    return GitHubCatalogStore("edoelas", "sizeof-catalog", "main", http_client=client), client


def test_implements_store_port() -> None:
    store, _client = _store({})

    assert isinstance(store, CatalogStorePort)


def test_lists_config_blobs_in_tree_order() -> None:
    tree = {
        "tree": [
            {"path": "screws", "type": "tree"},
            {"path": "screws/socket_head/config.yaml", "type": "blob"},
            {"path": "screws/socket_head/diagram.svg", "type": "blob"},
            {"path": "nuts/hex/config.yaml", "type": "blob"},
            {"path": "README.md", "type": "blob"},
            {"path": "config.yaml", "type": "blob"},
            {"path": "docs/config.yaml", "type": "tree"},
            {"path": "nuts/hex/config.yaml", "type": "blob"},
        ],
        "truncated": False,
    }
    store, client = _store({TREE_URL: _json(tree)})

    assert store.list_component_paths() == ("screws/socket_head", "nuts/hex")
    assert client.calls == [(TREE_URL, {"recursive": "1"})]


def test_truncated_listing_logs_warning(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.WARNING, logger="sizeof")
    store, _client = _store(
        {TREE_URL: _json({"tree": [{"path": "a/config.yaml", "type": "blob"}], "truncated": True})}
    )

    assert store.list_component_paths() == ("a",)
    assert any("truncated" in record.getMessage() for record in caplog.records)


@pytest.mark.parametrize(
    "response",
    [
        HTTPResult(status=500),
        HTTPResult(status=0),
        HTTPResult(status=403),
        HTTPResult(status=200, text="not json"),
        HTTPResult(status=200, text=json.dumps({"message": "no tree"})),
    ],
)
def test_listing_failures_are_unavailable(response: HTTPResult) -> None:
    store, _client = _store({TREE_URL: response})

    with pytest.raises(CatalogUnavailableError):
        _ = store.list_component_paths()


def test_loads_component_from_raw_urls() -> None:
    store, client = _store(
        {
            f"{RAW_BASE}/nuts/hex/config.yaml": HTTPResult(status=200, text=CONFIG),
            f"{RAW_BASE}/nuts/hex/diagram.svg": HTTPResult(status=200, text=DIAGRAM),
        }
    )

    component = store.load_component("nuts/hex")

    assert component.path == "nuts/hex"
    assert component.config.name == "Hex nut"
    assert component.diagram == DIAGRAM
    assert [url for url, _params in client.calls] == [
        f"{RAW_BASE}/nuts/hex/config.yaml",
        f"{RAW_BASE}/nuts/hex/diagram.svg",
    ]


@pytest.mark.parametrize(
    ("missing", "resource"),
    [("config.yaml", "config.yaml"), ("diagram.svg", "diagram.svg")],
)
def test_missing_files_raise_not_found(missing: str, resource: str) -> None:
    responses = {
        f"{RAW_BASE}/nuts/hex/config.yaml": HTTPResult(status=200, text=CONFIG),
        f"{RAW_BASE}/nuts/hex/diagram.svg": HTTPResult(status=200, text=DIAGRAM),
    }
    responses[f"{RAW_BASE}/nuts/hex/{missing}"] = HTTPResult(status=404)
    store, _client = _store(responses)

    with pytest.raises(NotFoundError) as excinfo:
        _ = store.load_component("nuts/hex")

    assert excinfo.value.resource == resource


def test_server_error_is_unavailable() -> None:
    store, _client = _store(
        {
            f"{RAW_BASE}/nuts/hex/config.yaml": HTTPResult(status=503),
            f"{RAW_BASE}/nuts/hex/diagram.svg": HTTPResult(status=200, text=DIAGRAM),
        }
    )

    with pytest.raises(CatalogUnavailableError):
        _ = store.load_component("nuts/hex")


def test_html_error_page_is_format_error() -> None:
    store, _client = _store(
        {
            f"{RAW_BASE}/nuts/hex/config.yaml": HTTPResult(
                status=200, text="<!DOCTYPE html><html><body>Oops</body></html>"
            ),
            f"{RAW_BASE}/nuts/hex/diagram.svg": HTTPResult(status=200, text=DIAGRAM),
        }
    )

    with pytest.raises(FormatError):
        _ = store.load_component("nuts/hex")
