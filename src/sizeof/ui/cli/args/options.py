"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, final


@dataclass(slots=True)
class CommonArgs:
    """Options shared by every subcommand."""

    source: Literal["github", "local"] | None
    catalog_dir: Path | None
    config_file: Path | None
    theme: Literal["light", "dark"] | None
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class TreeArgs(CommonArgs):
    """Command line arguments for the ``tree`` subcommand."""

    command: Literal["tree"] = "tree"


@final
@dataclass(slots=True)
class SearchArgs(CommonArgs):
    """Command line arguments for the ``search`` subcommand."""

    query: str = ""
    flat: bool = False
    command: Literal["search"] = "search"


@final
@dataclass(slots=True)
class ShowArgs(CommonArgs):
    """Command line arguments for the ``show`` subcommand."""

    component_path: str = ""
    command: Literal["show"] = "show"


@final
@dataclass(slots=True)
class RenderArgs(CommonArgs):
    """Command line arguments for the ``render`` subcommand.

    ``row`` is ``None`` when rendering without a selected row.
    """

    component_path: str = ""
    row: int | None = 0
    output: Path | None = None
    command: Literal["render"] = "render"


@final
@dataclass(slots=True)
class CompareArgs(CommonArgs):
    """Command line arguments for the ``compare`` subcommand."""

    component_paths: tuple[str, ...] = ()
    command: Literal["compare"] = "compare"


CLIArgs = TreeArgs | SearchArgs | ShowArgs | RenderArgs | CompareArgs

__all__ = [
    "CLIArgs",
    "CommonArgs",
    "CompareArgs",
    "RenderArgs",
    "SearchArgs",
    "ShowArgs",
    "TreeArgs",
]
