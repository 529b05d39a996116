"""Where: src/sizeof/platform/catalog/filesystem_store.py
What: Catalog store reading component directories from a local checkout.
Why: Allow offline use and deterministic tests without the network.
"""

from __future__ import annotations

from pathlib import Path
from typing import final

from sizeof.config.settings import CONFIG_FILE_NAME, DIAGRAM_FILE_NAME
from sizeof.features.catalog import (
    CatalogUnavailableError,
    ComponentData,
    FormatError,
    NotFoundError,
    normalize_component_path,
    parse_component_config,
)
from sizeof.platform.logging import logger


@final
class FilesystemCatalogStore:
    """Serve ``<path>/config.yaml`` and ``<path>/diagram.svg`` below ``root``."""

    root: Path

    def __init__(self, root: Path) -> None:
        self.root = Path(root).expanduser().resolve()

    def list_component_paths(self) -> tuple[str, ...]:
        """Return component paths (directories holding a config file), sorted."""

        if not self.root.is_dir():
            raise CatalogUnavailableError(f"catalog directory not found: {self.root}")

        paths: list[str] = []
        for config_file in sorted(self.root.rglob(CONFIG_FILE_NAME)):
            if not config_file.is_file():
                continue
            relative = config_file.parent.relative_to(self.root)
            component_path = normalize_component_path(relative.as_posix())
            if not component_path or component_path == ".":
                logger.debug("Ignoring configuration at catalog root: %s", config_file)
                continue
            paths.append(component_path)

        return tuple(dict.fromkeys(paths))

    def load_component(self, path: str) -> ComponentData:
        """Read and validate one component."""

        component_path = normalize_component_path(path)
        directory = self._resolve(component_path)

        config_file = directory / CONFIG_FILE_NAME
        diagram_file = directory / DIAGRAM_FILE_NAME
        if not config_file.is_file():
            raise NotFoundError(component_path, CONFIG_FILE_NAME)
        if not diagram_file.is_file():
            raise NotFoundError(component_path, DIAGRAM_FILE_NAME)

        config = parse_component_config(_read_text(config_file, component_path), component_path)
        diagram = _read_text(diagram_file, component_path)
        return ComponentData(path=component_path, config=config, diagram=diagram)

    def _resolve(self, component_path: str) -> Path:
        if not component_path:
            raise NotFoundError(component_path, CONFIG_FILE_NAME)
        directory = (self.root / component_path).resolve()
        if not directory.is_relative_to(self.root):
            raise NotFoundError(component_path, CONFIG_FILE_NAME)
        return directory


def _read_text(file: Path, component_path: str) -> str:
    try:
        return file.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise FormatError(component_path, f"{file.name} is not valid UTF-8: {exc}") from exc


__all__ = ["FilesystemCatalogStore"]
