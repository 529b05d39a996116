"""src/sizeof/ui/cli/commands/compare.py
What: Show several components' size tables side by side.
Why: Compare mode lets users line up related parts, such as screws and their nuts.
"""

from typing_extensions import override

from sizeof.features.catalog import CatalogError, ComponentData
from sizeof.ui.cli.args.options import CompareArgs
from sizeof.ui.cli.commands.executor import CommandExecutor


class CompareCommand(CommandExecutor[CompareArgs]):
    """Command for comparing components.

    Components that fail to load are shown as unavailable; the exit code
    is 1 when any of them failed.
    """

    @override
    def execute(self) -> int:
        loaded: list[ComponentData] = []
        unavailable: list[tuple[str, str]] = []

        for path in dict.fromkeys(self.args.component_paths):
            try:
                loaded.append(self.service.load_component(path))
            except CatalogError as exc:
                unavailable.append((path, str(exc)))

        self.component_display.show_side_by_side(loaded, unavailable)
        return 1 if unavailable else 0
