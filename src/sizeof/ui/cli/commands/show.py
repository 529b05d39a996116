"""src/sizeof/ui/cli/commands/show.py
What: Print one component's heading and size table.
Why: Expose the tabular data without rendering the diagram.
"""

from typing_extensions import override

from sizeof.ui.cli.args.options import ShowArgs
from sizeof.ui.cli.commands.executor import CommandExecutor


class ShowCommand(CommandExecutor[ShowArgs]):
    """Command for displaying a component record."""

    @override
    def execute(self) -> int:
        component = self.service.load_component(self.args.component_path)
        self.component_display.show(component)
        return 0
