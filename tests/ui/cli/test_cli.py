"""Tests for the CLI entry point and exit codes."""

from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from sizeof.application.services import CatalogService
from sizeof.platform.catalog import FilesystemCatalogStore
from sizeof.ui.cli.cli import CommandProcessor, main


@pytest.fixture(autouse=True)
def _console_only_logging(repo_root: Path, mocker: MockerFixture) -> None:
    _ = repo_root
    _ = mocker.patch("sizeof.ui.cli.args.parser.setup_logger")


def _local(catalog_dir: Path) -> list[str]:
    return ["--source", "local", "--catalog-dir", str(catalog_dir)]


def test_tree_prints_catalog(catalog_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    CommandProcessor.process_command(["tree", *_local(catalog_dir)])

    out = capsys.readouterr().out
    assert "Screws" in out
    assert "Socket Head" in out
    assert "nuts/hex" in out


def test_search_prunes_tree(catalog_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    CommandProcessor.process_command(["search", "hex", *_local(catalog_dir)])

    out = capsys.readouterr().out
    assert "Hex Head" in out
    assert "Socket Head" not in out


def test_search_flat_lists_scores(catalog_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    CommandProcessor.process_command(["search", "hex", "--flat", *_local(catalog_dir)])

    out = capsys.readouterr().out
    assert "screws/hex_head" in out
    assert "Score" in out


def test_show_prints_table(catalog_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    CommandProcessor.process_command(["show", "nuts/hex", *_local(catalog_dir)])

    out = capsys.readouterr().out
    assert "Hex nut" in out
    assert "ISO 4032" in out
    assert "Height (mm)" in out
    assert "2.4" in out


def test_render_writes_output_file(catalog_dir: Path, tmp_path: Path) -> None:
    target = tmp_path / "out" / "hex.svg"

    CommandProcessor.process_command(
        ["render", "nuts/hex", "-o", str(target), *_local(catalog_dir)]
    )

    assert target.read_text(encoding="utf-8") == "<svg><text>M3</text><text>2.4 mm</text></svg>"


def test_render_to_stdout(catalog_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    CommandProcessor.process_command(["render", "nuts/hex", "--row", "none", *_local(catalog_dir)])

    assert capsys.readouterr().out == "<svg><text>{{size}}</text><text>{{m}}</text></svg>"


def test_render_row_out_of_range_exits_2(catalog_dir: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command(["render", "nuts/hex", "--row", "4", *_local(catalog_dir)])

    assert excinfo.value.code == 2


def test_missing_component_exits_1(catalog_dir: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command(["show", "washers/flat", *_local(catalog_dir)])

    assert excinfo.value.code == 1


def test_compare_reports_unavailable_components(
    catalog_dir: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command(
            ["compare", "nuts/hex", "washers/flat", *_local(catalog_dir)]
        )

    assert excinfo.value.code == 1
    out = capsys.readouterr().out
    assert "Hex nut" in out
    assert "unavailable" in out


def test_service_factory_is_injectable(
    catalog_dir: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    calls: list[str] = []

    def _factory(args: object, config: object) -> CatalogService:
        calls.append(type(args).__name__)
        return CatalogService(FilesystemCatalogStore(catalog_dir))

    CommandProcessor.process_command(["tree"], service_factory=_factory)

    assert calls == ["TreeArgs"]
    assert "Hex Head" in capsys.readouterr().out


def test_keyboard_interrupt_exits_130(mocker: MockerFixture) -> None:
    _ = mocker.patch(
        "sizeof.ui.cli.cli.ArgumentParser.process_args", side_effect=KeyboardInterrupt
    )

    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command(["tree"])

    assert excinfo.value.code == 130


def test_invalid_configuration_exits_1(repo_root: Path) -> None:
    config_dir = repo_root / "config"
    config_dir.mkdir()
    _ = (config_dir / "config.toml").write_text('theme = "neon"\n', encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command(["tree"])

    assert excinfo.value.code == 1


def test_main_returns_zero(mocker: MockerFixture) -> None:
    process = mocker.patch.object(CommandProcessor, "process_command")

    assert main() == 0
    process.assert_called_once_with()
