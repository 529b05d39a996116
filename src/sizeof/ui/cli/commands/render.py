"""src/sizeof/ui/cli/commands/render.py
What: Render a component's diagram for one row and emit the document.
Why: Produce dimensioned drawings usable outside the catalog viewer.
"""

from typing_extensions import override

from sizeof.platform.logging import logger
from sizeof.ui.cli.args.options import RenderArgs
from sizeof.ui.cli.commands.executor import CommandExecutor


class RenderCommand(CommandExecutor[RenderArgs]):
    """Command for rendering a diagram to stdout or a file."""

    @override
    def execute(self) -> int:
        try:
            rendered = self.service.render(self.args.component_path, self.args.row)
        except IndexError:
            logger.error(
                "Row %s is out of range for %s",
                self.args.row,
                self.args.component_path,
            )
            return 2

        output = self.args.output
        if output is None:
            self.console.out(rendered.document, highlight=False, end="")
            return 0

        output.parent.mkdir(parents=True, exist_ok=True)
        _ = output.write_text(rendered.document, encoding="utf-8")
        logger.info("Wrote %s", output)
        return 0
