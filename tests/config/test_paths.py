"""Tests for portable path resolution."""

from pathlib import Path

from sizeof.config.paths import (
    ENV_CATALOG_DIR,
    default_catalog_dir,
    default_config_path,
    default_log_file,
    resolve_overridable_path,
)


def test_defaults_live_under_repo_root(repo_root: Path) -> None:
    assert default_config_path() == (repo_root / "config" / "config.toml").resolve()
    assert default_catalog_dir() == (repo_root / "catalog").resolve()
    assert default_log_file() == (repo_root / "logs" / "sizeof.log").resolve()


def test_env_mapping_overrides_catalog_dir(repo_root: Path, tmp_path: Path) -> None:
    _ = repo_root
    custom = tmp_path / "checkout"

    assert default_catalog_dir({ENV_CATALOG_DIR: str(custom)}) == custom.resolve()
    assert default_catalog_dir({ENV_CATALOG_DIR: "   "}) == (tmp_path / "catalog").resolve()


def test_explicit_path_wins(tmp_path: Path) -> None:
    resolved = resolve_overridable_path(
        explicit_path=tmp_path / "x.toml",
        env={"VAR": "/elsewhere"},
        env_var="VAR",
        default_factory=lambda: tmp_path / "default.toml",
    )

    assert resolved == (tmp_path / "x.toml").resolve()
