"""Command line interface for sizeof."""

import sys
import tomllib
from typing import Any, final

from sizeof.config.config import ConfigError
from sizeof.features.catalog import CatalogError
from sizeof.platform.logging import logger
from sizeof.ui.cli.args import ArgumentParser
from sizeof.ui.cli.args.options import (
    CLIArgs,
    CompareArgs,
    RenderArgs,
    SearchArgs,
    ShowArgs,
    TreeArgs,
)
from sizeof.ui.cli.commands import (
    CommandExecutor,
    CompareCommand,
    RenderCommand,
    SearchCommand,
    ShowCommand,
    TreeCommand,
)
from sizeof.ui.cli.commands.executor import ServiceFactory


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(
        args_list: list[str] | None = None,
        *,
        service_factory: ServiceFactory | None = None,
    ) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
            service_factory: Optional catalog service factory (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)
            command = CommandProcessor.build_command(args, service_factory=service_factory)
            status = command.execute()
            if status:
                sys.exit(status)
            return

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except CatalogError as e:
            logger.error("Component unavailable: %s", e)
            sys.exit(1)
        except (ConfigError, tomllib.TOMLDecodeError) as e:
            logger.error("Invalid configuration: %s", e)
            sys.exit(1)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)

    @staticmethod
    def build_command(
        args: CLIArgs,
        *,
        service_factory: ServiceFactory | None = None,
    ) -> CommandExecutor[Any]:
        """Pick the executor matching the parsed subcommand."""

        if isinstance(args, SearchArgs):
            return SearchCommand(args, service_factory=service_factory)
        if isinstance(args, ShowArgs):
            return ShowCommand(args, service_factory=service_factory)
        if isinstance(args, RenderArgs):
            return RenderCommand(args, service_factory=service_factory)
        if isinstance(args, CompareArgs):
            return CompareCommand(args, service_factory=service_factory)
        assert isinstance(args, TreeArgs)
        return TreeCommand(args, service_factory=service_factory)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through
        ``sys.exit(...)`` inside command processing.
    """
    CommandProcessor.process_command()
    return 0
