from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from rich.box import ROUNDED
from rich.console import Console, Group, RenderableType
from rich.markup import escape
from rich.panel import Panel
from rich.rule import Rule
from rich.style import Style
from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from complexity_cli.core.constants import ANALYZE_LENS_TITLE
from complexity_cli.core.formatting import (
    format_lens,
    format_line_range,
    format_relative_time,
    format_timestamp,
)
from complexity_cli.engine import ComplexityVerdict, FunctionCandidate
from complexity_cli.history.store import AnalysisRecord

# ==============================================================================
# Constants & Global Console
# ==============================================================================

console = Console()

SUCCESS_STYLE = Style(color="green", bold=True)
WARNING_STYLE = Style(color="yellow", bold=True)
INFO_STYLE = Style(color="blue", bold=True)
BOLD_STYLE = Style(bold=True)
DIM_STYLE = Style(dim=True)
CYAN_STYLE = Style(color="cyan")
YELLOW_STYLE = Style(color="yellow")
MAGENTA_STYLE = Style(color="magenta")

# ==============================================================================
# Private Helper Functions
# ==============================================================================


def _create_panel(
    content: RenderableType,
    title: Optional[str] = None,
    border_style: Union[str, Style] = "blue",
    padding: tuple = (1, 2),
    box: Any = ROUNDED,
    **kwargs: Any
) -> Panel:
    """Helper function to create a Rich Panel."""
    return Panel(
        content,
        title=title,
        border_style=border_style,
        padding=padding,
        box=box,
        **kwargs
    )


def _create_table(
    title: Optional[str] = None,
    box: Any = ROUNDED,
    show_header: bool = True,
    header_style: Union[str, Style] = "bold blue",
    **kwargs: Any
) -> Table:
    """Helper function to create a Rich Table."""
    return Table(
        title=title,
        box=box,
        show_header=show_header,
        header_style=header_style,
        **kwargs
    )


def _print_status_message(icon: str, msg: str, style: Union[str, Style]):
    console.print(Text.assemble((icon, style), "  ", (msg, style)))


# ==============================================================================
# Simple Status Messages
# ==============================================================================


def print_info(msg: str):
    """Print an informational message (neutral information)."""
    _print_status_message("ℹ", msg, INFO_STYLE)


def print_warning(msg: str):
    """Print a warning message (caution but not error)."""
    _print_status_message("⚠", msg, WARNING_STYLE)


def print_success(msg: str):
    """Print a success message (operation completed successfully)."""
    _print_status_message("✓", msg, SUCCESS_STYLE)


# ==============================================================================
# Function Candidates
# ==============================================================================


def print_candidates(
    path: str,
    candidates: Sequence[FunctionCandidate],
    records: Dict[Tuple[str, int], AnalysisRecord],
):
    """Display the functions found in a document with any stored verdicts."""
    if not candidates:
        print_warning(f"No functions found in {path}")
        return

    table = _create_table(title=f"[bold]Functions: {escape(path)}[/bold]")
    table.add_column("Name", style=CYAN_STYLE, overflow="fold")
    table.add_column("Lines", style=INFO_STYLE)
    table.add_column("Time", style=YELLOW_STYLE)
    table.add_column("Space", style=MAGENTA_STYLE)

    for candidate in candidates:
        stored = records.get((candidate.name, candidate.start_line))
        table.add_row(
            candidate.name,
            format_line_range(candidate.start_line, candidate.end_line),
            stored.verdict.time_complexity if stored else "-",
            stored.verdict.space_complexity if stored else "-",
        )

    console.print(table)


def print_lens_view(
    lines: Sequence[str],
    candidates: Sequence[FunctionCandidate],
    records: Dict[Tuple[str, int], AnalysisRecord],
    timestamp_format: str,
):
    """
    Display each declaration line with its anchor and, when the store holds
    one, the result decoration.
    """
    width = len(str(len(lines)))

    for candidate in candidates:
        line = lines[candidate.start_line]
        console.print(
            Text.assemble(
                (f"{candidate.start_line:>{width}} │ ", DIM_STYLE),
                line.rstrip(),
            )
        )

        lens = Text.assemble((" " * width + "   ", DIM_STYLE), (ANALYZE_LENS_TITLE, INFO_STYLE))
        record = records.get((candidate.name, candidate.start_line))
        if record:
            decoration = format_lens(
                record.verdict.time_complexity,
                record.verdict.space_complexity,
                format_timestamp(record.timestamp, timestamp_format),
            )
            lens.append("  ")
            lens.append(decoration, style=SUCCESS_STYLE)
        console.print(lens)


# ==============================================================================
# Complexity Analysis Output
# ==============================================================================


def print_complexity_header(path: str):
    """Print complexity analysis header."""
    console.print()
    console.print(_create_panel(f"[bold]COMPLEXITY ANALYSIS: {escape(path)}[/bold]"))


def print_verdict(
    candidate: FunctionCandidate,
    verdict: ComplexityVerdict,
    explanation: Optional[str] = None,
):
    """Display complexity analysis for a function."""
    tree = Tree(
        f"[bold blue]Function: {escape(candidate.name)}[/bold blue] "
        f"[dim](lines {format_line_range(candidate.start_line, candidate.end_line)})[/dim]"
    )
    tree.add(f"[cyan]Time Complexity: {verdict.time_complexity}[/cyan]")
    tree.add(f"[cyan]Space Complexity: {verdict.space_complexity}[/cyan]")

    content: RenderableType = tree
    if explanation:
        content = Group(tree, Text(""), Text(explanation, style=DIM_STYLE))

    console.print(_create_panel(content, padding=(1, 2)))


def print_analysis_complete(name: str, verdict: ComplexityVerdict):
    print_success(
        f"Complexity analysis complete for {name}: "
        f"{verdict.time_complexity} time, {verdict.space_complexity} space"
    )


def print_complexity_footer():
    """Print complexity analysis footer."""
    console.print(Rule(style=INFO_STYLE))


# ==============================================================================
# Stored Results
# ==============================================================================


def print_records(records: List[AnalysisRecord], timestamp_format: str):
    """Display stored analysis records in a table."""
    if not records:
        print_info("No stored analysis results")
        return

    table = _create_table(title="[bold]Stored Analysis Results[/bold]")
    table.add_column("Document", style=DIM_STYLE, overflow="fold")
    table.add_column("Function", style=CYAN_STYLE, overflow="fold")
    table.add_column("Line", style=INFO_STYLE)
    table.add_column("Time", style=YELLOW_STYLE)
    table.add_column("Space", style=MAGENTA_STYLE)
    table.add_column("Captured", style=SUCCESS_STYLE)
    table.add_column("Age", style=DIM_STYLE)

    for record in records:
        table.add_row(
            record.key.document,
            record.key.function,
            str(record.key.start_line),
            record.verdict.time_complexity,
            record.verdict.space_complexity,
            format_timestamp(record.timestamp, timestamp_format),
            format_relative_time(record.timestamp),
        )
    console.print(table)
