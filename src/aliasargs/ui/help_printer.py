# ui/help_printer.py
"""Help and version output"""

from typing import Optional

from rich.console import Console
from rich.padding import Padding
from rich.table import Table

from aliasargs.cli.subcommand import Subcommand


class HelpPrinter:
    """Prints help messages through a rich console"""

    HINT = (
        "Get help with a subcommand by passing it as an argument "
        "to the 'help' subcommand."
    )

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(highlight=False)

    def _write(self, text: str) -> None:
        # Registered text is printed verbatim, brackets included
        self.console.print(text, markup=False, highlight=False, soft_wrap=True, end="")

    def print_cli_help(self, documentation: str, subcommands: list[Subcommand]) -> None:
        """Print the application documentation and the list of subcommands"""
        self._write(f"{documentation}\n\n")
        self._write("SUBCOMMANDS\n")

        table = Table.grid(padding=(0, 4))
        table.add_column(no_wrap=True)
        table.add_column()
        for subcommand in subcommands:
            table.add_row(subcommand.name, subcommand.documentation)
        table.add_row("help", "this help message")
        table.add_row("version", "print the version")
        self.console.print(Padding(table, (0, 0, 0, 2)))

        self._write(f"\n{self.HINT}\n")

    def print_subcommand_help(self, subcommand: Subcommand) -> None:
        self._write(subcommand.help_text())

    def print_version(self, version: str) -> None:
        self._write(f"{version}\n")
