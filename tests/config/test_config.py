"""Test configuration management."""

import logging
import tomllib
from pathlib import Path

import pytest

from sizeof.config.config import Config, ConfigError
from sizeof.config.paths import default_config_path


def _write_config(repo_root: Path, body: str) -> Path:
    target = repo_root / "config" / "config.toml"
    target.parent.mkdir(parents=True, exist_ok=True)
    _ = target.write_text(body, encoding="utf-8")
    return target


def test_defaults_when_file_is_missing(repo_root: Path) -> None:
    config = Config.load()

    assert config.source == "github"
    assert config.github_owner == "edoelas"
    assert config.github_repo == "sizeof-catalog"
    assert config.github_branch == "main"
    assert config.catalog_dir is None
    assert config.theme == "light"
    assert not default_config_path().exists()
    assert not (repo_root / "config").exists()


def test_loads_values_from_toml(repo_root: Path) -> None:
    _ = _write_config(
        repo_root,
        'source = "local"\n'
        'catalog_dir = "/srv/catalog"\n'
        'theme = "dark"\n'
        "search_cache_size = 16\n",
    )

    config = Config.load()

    assert config.source == "local"
    assert config.catalog_dir == Path("/srv/catalog")
    assert config.theme == "dark"
    assert config.search_cache_size == 16


def test_singleton_until_reset(repo_root: Path) -> None:
    first = Config.load()
    assert Config.load() is first

    _ = _write_config(repo_root, 'theme = "dark"\n')
    assert Config.load().theme == "light"

    Config.reset()
    assert Config.load().theme == "dark"


def test_explicit_file_and_env_override(
    repo_root: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    explicit = tmp_path / "explicit.toml"
    _ = explicit.write_text('github_branch = "dev"\n', encoding="utf-8")
    assert Config.load(explicit).github_branch == "dev"

    from_env = tmp_path / "env.toml"
    _ = from_env.write_text('github_repo = "fork"\n', encoding="utf-8")
    monkeypatch.setenv("SIZEOF_CONFIG", str(from_env))
    assert default_config_path() == from_env.resolve()
    assert Config.load().github_repo == "fork"


def test_unknown_keys_are_ignored_with_warning(
    repo_root: Path, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level(logging.WARNING, logger="sizeof")
    _ = _write_config(repo_root, 'theme = "dark"\nbase_path = "/music"\n')

    config = Config.load()

    assert config.theme == "dark"
    assert any("base_path" in record.getMessage() for record in caplog.records)


def test_invalid_toml_raises(repo_root: Path) -> None:
    _ = _write_config(repo_root, "theme = \n")

    with pytest.raises(tomllib.TOMLDecodeError):
        _ = Config.load()


@pytest.mark.parametrize("body", ['source = "ftp"\n', 'theme = "solarized"\n'])
def test_invalid_values_raise_config_error(repo_root: Path, body: str) -> None:
    _ = _write_config(repo_root, body)

    with pytest.raises(ConfigError):
        _ = Config.load()


def test_blank_path_values_become_none() -> None:
    assert Config(catalog_dir="  ").catalog_dir is None  # type: ignore[arg-type]
    assert Config(log_file="~/sizeof.log").log_file == Path("~/sizeof.log").expanduser()  # type: ignore[arg-type]
