"""Command execution package for CLI."""

from sizeof.ui.cli.commands.compare import CompareCommand
from sizeof.ui.cli.commands.executor import CommandExecutor, default_service_factory
from sizeof.ui.cli.commands.render import RenderCommand
from sizeof.ui.cli.commands.search import SearchCommand
from sizeof.ui.cli.commands.show import ShowCommand
from sizeof.ui.cli.commands.tree import TreeCommand

__all__ = [
    "CommandExecutor",
    "CompareCommand",
    "RenderCommand",
    "SearchCommand",
    "ShowCommand",
    "TreeCommand",
    "default_service_factory",
]
