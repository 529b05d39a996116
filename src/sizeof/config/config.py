"""Configuration management for sizeof."""

import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from sizeof.config.paths import default_config_path
from sizeof.platform.logging import logger


CATALOG_SOURCES: tuple[str, ...] = ("github", "local")
THEMES: tuple[str, ...] = ("light", "dark")


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


class ConfigError(ValueError):
    """Raised when the configuration file holds invalid values."""


@dataclass
class Config:
    """Application configuration."""

    # Where the catalog listing and component files come from
    source: str = "github"

    # Local catalog checkout (used when source = "local")
    catalog_dir: Path | None = _path_field()

    # GitHub repository hosting the catalog
    github_owner: str = "edoelas"
    github_repo: str = "sizeof-catalog"
    github_branch: str = "main"

    # Log file path
    log_file: Path | None = _path_field()

    # Display
    theme: str = "light"

    # Search memoisation and network tuning
    search_cache_size: int = 128
    http_timeout_seconds: float = 15.0

    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths and validate enumerated values."""

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value).expanduser() if value.strip() else None)

        if self.source not in CATALOG_SOURCES:
            raise ConfigError(
                f"source must be one of {', '.join(CATALOG_SOURCES)}; got {self.source!r}"
            )
        if self.theme not in THEMES:
            raise ConfigError(f"theme must be one of {', '.join(THEMES)}; got {self.theme!r}")

    @classmethod
    def load(cls, config_file: Path | None = None) -> "Config":
        """Load configuration from file.

        Args:
            config_file: Explicit file to read. Defaults to the portable
                location resolved by ``default_config_path``.

        Returns:
            Config: Loaded configuration object. Defaults are used when the
            file does not exist.
        """
        target = config_file or default_config_path()

        if cls._instance is not None and cls._loaded_from == target:
            return cls._instance

        if not target.exists():
            logger.debug("No configuration at %s; using defaults", target)
            instance = cls()
        else:
            try:
                with open(target, "rb") as f:
                    config_dict = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                logger.error("Failed to load configuration: %s", e)
                raise

            known = {f.name for f in fields(cls)}
            for key in sorted(set(config_dict) - known):
                logger.warning("Ignoring unknown configuration key '%s' in %s", key, target)
                del config_dict[key]

            instance = cls(**config_dict)
            logger.info("Configuration loaded from %s", target)

        cls._instance = instance
        cls._loaded_from = target
        return instance

    @classmethod
    def reset(cls) -> None:
        """Forget the cached instance so the next ``load`` re-reads the file."""

        cls._instance = None
        cls._loaded_from = None


__all__ = ["CATALOG_SOURCES", "THEMES", "Config", "ConfigError"]
