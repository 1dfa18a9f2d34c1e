"""Console reporter: SelectionResult → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from typeselect.domain.model.selection_result import SelectionResult
    from typeselect.domain.model.type_descriptor import TypeDescriptor


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    All fields have defaults. Immutable (frozen dataclass).

    Attributes:
        show_filter: Show the conjunct list of the filter.
        max_types: Max selected types to list. None = unlimited.
        width: Console width in columns.
    """

    show_filter: bool = True
    max_types: int | None = None
    width: int = 120

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.max_types is not None and self.max_types < 0:
            raise ValueError(f"max_types must be >= 0, got {self.max_types}")
        if self.width < 40:
            raise ValueError(f"width must be >= 40, got {self.width}")


class ConsoleReporter:
    """Console reporter: outputs rich formatted text.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, result: SelectionResult) -> str:
        """Format selection result as rich formatted string.

        Args:
            result: Selection to format.

        Returns:
            Formatted string with colors and tables.
        """
        output = StringIO()
        console = Console(file=output, force_terminal=True, width=self._config.width)

        self._render_header(console, result)
        if self._config.show_filter:
            self._render_filter(console, result)
        self._render_selected(console, result.selected)

        return output.getvalue()

    def _render_header(self, console: Console, result: SelectionResult) -> None:
        """Render header with counts."""
        console.print()
        console.rule("[bold]TYPE SELECTION[/bold]")
        console.print()
        console.print(
            f"[bold]Candidates:[/bold] {result.candidate_count}  "
            f"[green]Selected:[/green] {result.selected_count}  "
            f"[dim]Rejected:[/dim] {result.rejected_count}"
        )
        console.print()

    def _render_filter(self, console: Console, result: SelectionResult) -> None:
        """Render conjuncts in evaluation order."""
        console.print("[bold]FILTER[/bold]")
        labels = result.composite_filter.describe()
        if not labels:
            console.print("  [dim](identity: selects every candidate)[/dim]")
        for index, label in enumerate(labels, start=1):
            prefix = "    " if index == 1 else "AND "
            console.print(f"  {prefix}{escape(label)}")
        console.print()

    def _render_selected(self, console: Console, selected: tuple[TypeDescriptor, ...]) -> None:
        """Render table of selected types."""
        if not selected:
            console.print("[yellow]No types selected.[/yellow]")
            return

        shown = selected
        if self._config.max_types is not None:
            shown = selected[: self._config.max_types]

        table = Table(show_header=True, header_style="bold")
        table.add_column("Type")
        table.add_column("Namespace")
        table.add_column("Generic", justify="center")

        for descriptor in shown:
            table.add_row(
                escape(descriptor.qualified_name),
                escape(descriptor.namespace),
                "yes" if descriptor.is_generic_type_definition else "",
            )

        console.print(table)

        hidden = len(selected) - len(shown)
        if hidden:
            console.print(f"[dim]... and {hidden} more[/dim]")
