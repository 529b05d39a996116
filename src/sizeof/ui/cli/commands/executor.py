"""src/sizeof/ui/cli/commands/executor.py
What: Provide shared wiring for CLI command executors.
Why: Build the catalog service and displays once per invocation.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Generic, TypeVar

from rich.console import Console

from sizeof.application.services import CatalogService
from sizeof.config.config import Config
from sizeof.config.display import DisplaySettings
from sizeof.ui.cli.args.options import CommonArgs
from sizeof.ui.cli.display import CatalogTreeDisplay, ComponentDisplay

ArgsT = TypeVar("ArgsT", bound=CommonArgs)
ServiceFactory = Callable[[CommonArgs, Config], CatalogService]


def default_service_factory(args: CommonArgs, config: Config) -> CatalogService:
    """Create the service for the source selected on the command line or in config."""

    return CatalogService.from_config(config, source=args.source, catalog_dir=args.catalog_dir)


class CommandExecutor(ABC, Generic[ArgsT]):
    """Base class for command execution."""

    args: ArgsT
    config: Config
    settings: DisplaySettings
    service: CatalogService
    console: Console
    tree_display: CatalogTreeDisplay
    component_display: ComponentDisplay

    def __init__(
        self,
        args: ArgsT,
        *,
        service_factory: ServiceFactory | None = None,
        console: Console | None = None,
    ) -> None:
        """Initialize command executor.

        Args:
            args: Command line arguments.
            service_factory: Builds the catalog service (tests inject fakes).
            console: Rich console for command output.
        """
        self.args = args
        self.config = Config.load(args.config_file)
        self.settings = DisplaySettings.from_config(self.config)
        if args.theme:
            self.settings.set_theme(args.theme)

        self.service = (service_factory or default_service_factory)(args, self.config)
        self.console = console or Console()
        self.tree_display = CatalogTreeDisplay(self.settings, self.console)
        self.component_display = ComponentDisplay(self.settings, self.console)

    @abstractmethod
    def execute(self) -> int:
        """Execute the command.

        Returns:
            int: Process exit code.
        """
        pass
