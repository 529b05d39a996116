"""Command line argument parser."""

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any, final

from sizeof.config.config import CATALOG_SOURCES, THEMES, Config
from sizeof.platform.logging import DEFAULT_LOG_FILE, setup_logger
from sizeof.ui.cli.args.options import (
    CLIArgs,
    CompareArgs,
    RenderArgs,
    SearchArgs,
    ShowArgs,
    TreeArgs,
)


def parse_row(value: str) -> int | None:
    """Parse ``--row``: a non-negative index, or ``none`` for no selection."""

    if value.strip().lower() == "none":
        return None
    try:
        index = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid row index: {value!r}") from None
    if index < 0:
        raise argparse.ArgumentTypeError(f"row index must not be negative: {index}")
    return index


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="sizeof",
            description="sizeof - Browse mechanical component sizes and render their drawings.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        common = ArgumentParser._common_parser()
        subparsers = parser.add_subparsers(dest="command", required=True)

        _ = subparsers.add_parser(
            "tree",
            parents=[common],
            help="Print the catalog tree",
        )

        search_parser = subparsers.add_parser(
            "search",
            parents=[common],
            help="Print the catalog tree filtered by a fuzzy query",
        )
        _ = search_parser.add_argument(
            "query",
            type=str,
            help="Text matched against component names and paths",
            metavar="QUERY",
        )
        _ = search_parser.add_argument(
            "--flat",
            action="store_true",
            help="List matching components with their scores instead of a tree",
        )

        show_parser = subparsers.add_parser(
            "show",
            parents=[common],
            help="Print a component's details and size table",
        )
        _ = show_parser.add_argument(
            "component_path",
            type=str,
            help="Component path, for example screws/socket_head",
            metavar="PATH",
        )

        render_parser = subparsers.add_parser(
            "render",
            parents=[common],
            help="Render a component's diagram for one table row",
        )
        _ = render_parser.add_argument(
            "component_path",
            type=str,
            help="Component path, for example screws/socket_head",
            metavar="PATH",
        )
        _ = render_parser.add_argument(
            "--row",
            type=parse_row,
            default=0,
            metavar="N",
            help="Row index to render (default: 0); 'none' keeps the template text",
        )
        _ = render_parser.add_argument(
            "--output",
            "-o",
            type=str,
            metavar="FILE",
            help="Write the rendered diagram to FILE instead of stdout",
        )

        compare_parser = subparsers.add_parser(
            "compare",
            parents=[common],
            help="Show several components' tables side by side",
        )
        _ = compare_parser.add_argument(
            "component_paths",
            type=str,
            nargs="+",
            help="Component paths to compare",
            metavar="PATH",
        )

        return parser

    @staticmethod
    def _common_parser() -> argparse.ArgumentParser:
        common = argparse.ArgumentParser(add_help=False)
        _ = common.add_argument(
            "--source",
            choices=CATALOG_SOURCES,
            help="Catalog source (defaults to the configured source)",
        )
        _ = common.add_argument(
            "--catalog-dir",
            type=str,
            metavar="DIR",
            help="Local catalog checkout used with --source local",
        )
        _ = common.add_argument(
            "--config",
            type=str,
            dest="config_file",
            metavar="FILE",
            help="Configuration file (defaults to config/config.toml)",
        )
        _ = common.add_argument(
            "--theme",
            choices=THEMES,
            help="Colour theme for console output",
        )
        _ = common.add_argument(
            "--verbose",
            action="store_true",
            help="Show debug information",
        )
        _ = common.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )
        return common

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: On usage errors (status 2).
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        config_file = Path(parsed_args.config_file).expanduser() if parsed_args.config_file else None
        configuration = Config.load(config_file)
        log_file_path = configuration.log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        common: dict[str, Any] = {
            "source": parsed_args.source,
            "catalog_dir": Path(parsed_args.catalog_dir).expanduser() if parsed_args.catalog_dir else None,
            "config_file": config_file,
            "theme": parsed_args.theme,
            "verbose": parsed_args.verbose,
            "quiet": parsed_args.quiet,
        }

        command: str = parsed_args.command
        if command == "search":
            return SearchArgs(**common, query=parsed_args.query, flat=parsed_args.flat)
        if command == "show":
            return ShowArgs(**common, component_path=parsed_args.component_path)
        if command == "render":
            return RenderArgs(
                **common,
                component_path=parsed_args.component_path,
                row=parsed_args.row,
                output=Path(parsed_args.output).expanduser() if parsed_args.output else None,
            )
        if command == "compare":
            return CompareArgs(**common, component_paths=tuple(parsed_args.component_paths))
        return TreeArgs(**common)
