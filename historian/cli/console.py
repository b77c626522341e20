"""Console output for the CLI.

Wraps rich so every command prints records and failures the same way.
"""

from typing import Any

from rich.console import Console as RichConsole
from rich.table import Table

from historian.domain.content.model.outcome import DecodeResult, FailureKind

FAILURE_MESSAGES = {
    FailureKind.TRANSPORT_FAILURE: "Could not reach the server.",
    FailureKind.EMPTY_RESULT: "Nothing available here yet.",
    FailureKind.MALFORMED_ELEMENT: "The server sent data we could not read.",
}


class Console:
    """CLI output manager wrapping rich."""

    def __init__(self) -> None:
        self._console = RichConsole(stderr=False)
        self._err_console = RichConsole(stderr=True)

    # -------------------------------------------------------------------------
    # Status messages
    # -------------------------------------------------------------------------

    def success(self, message: str) -> None:
        self._console.print(f"[green]✓[/green] {message}")

    def error(self, message: str, *, hint: str | None = None) -> None:
        """Print an error message to stderr."""
        self._err_console.print(f"[red]✗[/red] {message}")
        if hint:
            self._err_console.print(f"  [dim]{hint}[/dim]")

    def print(self, *args: Any, **kwargs: Any) -> None:
        self._console.print(*args, **kwargs)

    # -------------------------------------------------------------------------
    # Structured output
    # -------------------------------------------------------------------------

    def table(
        self,
        rows: list[dict[str, Any]],
        columns: list[tuple[str, str]],  # (key, header)
        *,
        title: str | None = None,
        numbered: bool = False,
    ) -> None:
        """Print a table.

        Args:
            rows: List of dicts containing row data.
            columns: List of (key, header) tuples defining columns.
            title: Optional table title.
            numbered: Add a # column with row numbers.
        """
        table = Table(title=title, show_header=True, header_style="bold")

        if numbered:
            table.add_column("#", style="dim", width=3)

        for _, header in columns:
            table.add_column(header)

        for i, row in enumerate(rows, 1):
            values = [str(row.get(key, "")) for key, _ in columns]
            if numbered:
                table.add_row(str(i), *values)
            else:
                table.add_row(*values)

        self._console.print(table)

    def failure(self, result: DecodeResult) -> None:
        """Print the user-facing message for a failed decode.

        Successful results print nothing.
        """
        if result.failure is None:
            return
        self.error(FAILURE_MESSAGES[result.failure], hint=result.error)


# Module-level default instance for convenience
_default: Console | None = None


def get_console() -> Console:
    """Get the default console instance."""
    global _default
    if _default is None:
        _default = Console()
    return _default
