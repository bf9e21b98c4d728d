# RSM Console Output
# Rich-based console output for user-friendly display

from typing import Optional

from rich.console import Console as RichConsole
from rich.markup import escape

from rsm.operations import BatchResult, DefaultResult, Outcome, SyncResult


class Console:
    """
    Console output manager using Rich.

    Normal output and informational messages go to stdout, errors to stderr.
    """

    def __init__(self, *, colored: Optional[bool] = None):
        """
        Initialize console.

        Args:
            colored: Force colored output on (True) or off (False).
                     None detects the terminal.
        """
        no_color = colored is False
        self._console = RichConsole(force_terminal=colored, no_color=no_color, soft_wrap=True)
        self._err_console = RichConsole(stderr=True, force_terminal=colored, no_color=no_color, soft_wrap=True)

    def print(self, *args, **kwargs) -> None:
        """Print to console."""
        self._console.print(*args, **kwargs)

    def print_error(self, message: str) -> None:
        """Print error message."""
        self._err_console.print(f"[red]Error:[/red] {escape(message)}")

    def print_warning(self, message: str) -> None:
        """Print warning message."""
        self._console.print(f"[yellow]Warning:[/yellow] {escape(message)}")

    def print_success(self, message: str) -> None:
        """Print success message."""
        self._console.print(f"[green]{escape(message)}[/green]")

    def print_info(self, message: str) -> None:
        """Print info message."""
        self._console.print(f"[blue]{escape(message)}[/blue]")

    def print_schema_names(self, names: list[str]) -> None:
        """Print one schema identifier per line."""
        for name in names:
            self._console.print(name, markup=False, highlight=False)

    def print_batch_result(self, result: BatchResult) -> None:
        """Print one line per input of an add or remove batch, in input order."""
        for name, outcome in result.outcomes:
            if outcome == Outcome.ADDED:
                self.print_success(f"Added schema '{name}'")
            elif outcome == Outcome.SKIPPED:
                self.print_info(f"Schema '{name}' already exists, skipping")
            elif outcome == Outcome.REMOVED:
                self.print_success(f"Removed schema '{name}'")
            elif outcome == Outcome.MISSING:
                self.print_info(f"Schema '{name}' does not exist")

    def print_default_result(self, result: DefaultResult) -> None:
        if result.found:
            self.print_success(f"Default schema set to '{result.schema}'")
        else:
            self.print_info(f"Schema '{result.schema}' does not exist")

    def print_sync_result(self, result: SyncResult) -> None:
        """Print the number of installed schemas written to the list."""
        if result.count == 0:
            self.print_warning("No installed schemas found")
        self.print_success(f"Synchronized {result.count} schema(s)")


def create_console(*, colored: Optional[bool] = None) -> Console:
    """
    Create a console instance.

    Args:
        colored: Enable colored output; None detects the terminal.

    Returns:
        Console instance.
    """
    return Console(colored=colored)
