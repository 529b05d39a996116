"""Shared pytest fixtures for catalog, store and CLI tests."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from sizeof.features.catalog import CatalogNode, build_catalog_tree

SCREW_CONFIG = """\
meta:
  id: socket_head
  version: "1.0"
name: Socket head cap screw
standard: ISO 4762
columns:
  - key: size
    label: Size
    type: string
  - key: pitch
    label: Pitch
    type: number
    unit: mm
  - key: H
    label: Head height
    type: number
    unit: mm
data:
  - size: M3
    pitch: 0.5
    H: 3
  - size: M4
    pitch: 0.7
    H: 4
"""

SCREW_DIAGRAM = (
    '<svg xmlns="http://www.w3.org/2000/svg">'
    "<text>{{ size }} pitch {{pitch}}</text>"
    '<rect width="{{H_raw}}" height="{{ H_raw }}"/>'
    '<text id="val_size">?</text>'
    "</svg>"
)

NUT_CONFIG = """\
name: Hex nut
standard: ISO 4032
columns:
  - key: size
    label: Size
  - key: m
    label: Height
    unit: mm
data:
  - size: M3
    m: 2.4
"""

NUT_DIAGRAM = '<svg><text>{{size}}</text><text>{{m}}</text></svg>'


@pytest.fixture
def sample_tree() -> list[CatalogNode]:
    """Tree built from the three-component screws/nuts catalog."""

    return build_catalog_tree(["screws/socket_head", "screws/hex_head", "nuts/hex"])


def write_component(root: Path, path: str, config: str, diagram: str | None) -> Path:
    """Create ``<root>/<path>/config.yaml`` and, optionally, ``diagram.svg``."""

    directory = root / path
    directory.mkdir(parents=True, exist_ok=True)
    _ = (directory / "config.yaml").write_text(config, encoding="utf-8")
    if diagram is not None:
        _ = (directory / "diagram.svg").write_text(diagram, encoding="utf-8")
    return directory


@pytest.fixture
def catalog_dir(tmp_path: Path) -> Path:
    """Local catalog checkout with two screws and one nut."""

    root = tmp_path / "catalog"
    _ = write_component(root, "screws/socket_head", SCREW_CONFIG, SCREW_DIAGRAM)
    _ = write_component(root, "screws/hex_head", SCREW_CONFIG, SCREW_DIAGRAM)
    _ = write_component(root, "nuts/hex", NUT_CONFIG, NUT_DIAGRAM)
    return root


@pytest.fixture
def repo_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point repository-root detection at ``tmp_path`` and reset the config singleton."""

    _ = (tmp_path / "pyproject.toml").write_text("[project]\nname='tmp'\n")

    import sizeof.config.paths as paths
    from sizeof.config.config import Config

    def _fake_detect_repo_root(_start: Path | None = None) -> Path:
        return tmp_path

    monkeypatch.setattr(paths, "_detect_repo_root", _fake_detect_repo_root, raising=True)
    monkeypatch.delenv(paths.ENV_CONFIG_FILE, raising=False)
    monkeypatch.delenv(paths.ENV_CATALOG_DIR, raising=False)

    Config.reset()
    yield tmp_path
    Config.reset()


@pytest.fixture
def make_component() -> Callable[[Path, str, str, str | None], Path]:
    """Return the ``write_component`` helper for tests building their own catalogs."""

    return write_component
