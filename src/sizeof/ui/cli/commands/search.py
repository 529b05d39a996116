"""src/sizeof/ui/cli/commands/search.py
What: Print the catalog filtered by a fuzzy query.
Why: Mirror the sidebar search, either as a pruned tree or a flat hit list.
"""

from typing_extensions import override

from sizeof.ui.cli.args.options import SearchArgs
from sizeof.ui.cli.commands.executor import CommandExecutor


class SearchCommand(CommandExecutor[SearchArgs]):
    """Command for fuzzy catalog search."""

    @override
    def execute(self) -> int:
        query = self.args.query
        if self.args.flat:
            self.tree_display.show_hits(self.service.search_hits(query), query)
            return 0

        self.tree_display.show_tree(self.service.search(query), title=f"Search: {query}")
        return 0
