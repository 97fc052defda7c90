"""Output formatters for grading results."""

import json

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..config import GRADE_STYLES, SCORE_BAND_STYLES
from ..grading import GradingResult, grade_scale, score_band


def format_table(result: GradingResult, console: Console) -> None:
    """Format and print a grading result as a rich panel and table."""
    grade = result.letter_grade.value
    category = result.category.value
    grade_style = GRADE_STYLES.get(category, "white")

    header = Text()
    header.append(f"Score: {result.numeric_score}%", style=_score_style(result.numeric_score))
    header.append("  |  Grade: ")
    header.append(grade, style=grade_style)

    console.print(Panel(header, title="[bold]Grading Result[/bold]", border_style="cyan"))
    console.print()

    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Key", style="dim")
    table.add_column("Value")

    table.add_row("Correct Answers", str(result.correct_answers))
    table.add_row("Total Questions", str(result.total_questions))
    table.add_row("Numeric Score", f"{result.numeric_score}%")
    table.add_row("Letter Grade", f"[{grade_style}]{grade}[/{grade_style}]")
    table.add_row("Category", category)

    console.print(table)
    console.print()


def format_json(data: dict, console: Console) -> None:
    """Format and print data as JSON."""
    console.print_json(json.dumps(data, indent=2, default=str))


def format_scale(console: Console) -> None:
    """Print the grading legend."""
    table = Table(show_header=True, header_style="bold", title="Grading Scale")
    table.add_column("Grade", width=6)
    table.add_column("Range", justify="right", width=10)
    table.add_column("Category", style="dim")

    for row in grade_scale():
        style = GRADE_STYLES.get(row["category"], "white")
        table.add_row(
            f"[{style}]{row['grade']}[/{style}]",
            f"{row['min_score']}-{row['max_score']}%",
            row["category"],
        )

    console.print(table)


def format_summary(summary: dict, console: Console, group_averages: dict[str, int] | None = None) -> None:
    """Print statistics for a bulk grading run."""
    stats = Table(show_header=False, box=None, padding=(0, 2))
    stats.add_column("Key", style="dim")
    stats.add_column("Value")

    stats.add_row("Submissions", str(summary["total"]))
    stats.add_row("Average", _score_display(summary["average"]))
    stats.add_row("Highest", _score_display(summary["highest"]))
    stats.add_row("Lowest", _score_display(summary["lowest"]))

    console.print(Panel(stats, title="[bold]Summary[/bold]", border_style="dim"))

    if group_averages:
        groups = Table(show_header=True, header_style="bold")
        groups.add_column("Group", style="cyan")
        groups.add_column("Average", justify="right")
        for group, average in group_averages.items():
            groups.add_row(group or "[dim](none)[/dim]", _score_display(average))
        console.print(groups)


def _score_style(score: int) -> str:
    return SCORE_BAND_STYLES.get(score_band(score), "white")


def _score_display(score: int) -> str:
    """Colour a raw score by its band."""
    style = _score_style(score)
    return f"[{style}]{score}[/{style}]"
