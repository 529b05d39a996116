"""src/sizeof/ui/cli/commands/tree.py
What: Print the whole catalog tree.
Why: Give users an overview of every component path the source provides.
"""

from typing_extensions import override

from sizeof.ui.cli.args.options import TreeArgs
from sizeof.ui.cli.commands.executor import CommandExecutor


class TreeCommand(CommandExecutor[TreeArgs]):
    """Command for printing the catalog tree."""

    @override
    def execute(self) -> int:
        tree = self.service.load_tree()
        if not self.args.quiet:
            self.tree_display.show_tree(tree)
        return 0
