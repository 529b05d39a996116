"""Command line argument handling package."""

from sizeof.ui.cli.args.parser import ArgumentParser
from sizeof.ui.cli.args.options import (
    CLIArgs,
    CommonArgs,
    CompareArgs,
    RenderArgs,
    SearchArgs,
    ShowArgs,
    TreeArgs,
)

__all__ = [
    "ArgumentParser",
    "CLIArgs",
    "CommonArgs",
    "CompareArgs",
    "RenderArgs",
    "SearchArgs",
    "ShowArgs",
    "TreeArgs",
]
