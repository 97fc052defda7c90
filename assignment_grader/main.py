"""CLI entry point for Assignment Grader."""

import csv
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from .config import (
    CORRECT_COLUMN,
    DEFAULT_LOG_LEVEL,
    GRADE_STYLES,
    REQUIRED_COLUMNS,
    SUMMARY_PREVIEW_ROWS,
    TOTAL_COLUMN,
)
from .grading import (
    average_by_group,
    grade_to_category,
    perform_grading,
    score_band,
    score_to_grade,
    summarize_scores,
)
from .output import (
    export_single_to_csv,
    export_to_csv,
    format_json,
    format_scale,
    format_summary,
    format_table,
)

app = typer.Typer(
    name="assignment-grader",
    help="Grade multiple-choice submissions as percentage scores and letter grades.",
    add_completion=False,
)
console = Console()
log = logging.getLogger(__name__)

OUTPUT_FORMATS = ["table", "json"]

# Let negative numbers through as arguments instead of option flags
NUMERIC_ARGS = {"ignore_unknown_options": True}


@app.callback()
def main(
    log_level: str = typer.Option(
        DEFAULT_LOG_LEVEL,
        "--log-level",
        help="Logging level: DEBUG, INFO, WARNING or ERROR",
    ),
) -> None:
    """Configure logging for all commands."""
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        console.print(f"[red]Invalid log level: {log_level}[/red]")
        raise typer.Exit(1)

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def validate_counts(correct_answers: int, total_questions: int) -> str | None:
    """Check answer counts strictly. Returns an error message or None if valid."""
    if total_questions <= 0:
        return f"Total questions must be positive, got {total_questions}"
    if correct_answers < 0:
        return f"Correct answers cannot be negative, got {correct_answers}"
    if correct_answers > total_questions:
        return f"Correct answers ({correct_answers}) exceed total questions ({total_questions})"
    return None


def _check_format(output_format: str) -> None:
    if output_format not in OUTPUT_FORMATS:
        console.print(f"[red]Invalid format: {output_format}[/red]")
        console.print(f"Available formats: {', '.join(OUTPUT_FORMATS)}")
        raise typer.Exit(1)


@app.command(context_settings=NUMERIC_ARGS)
def grade(
    correct_answers: int = typer.Argument(..., help="Number of correct answers"),
    total_questions: int = typer.Argument(..., help="Total number of questions"),
    output_format: str = typer.Option(
        "table",
        "--format",
        "-f",
        help="Output format: table or json",
    ),
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output file path (CSV format)",
    ),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Reject counts where correct answers exceed total questions",
    ),
) -> None:
    """Grade a single submission from its answer counts."""
    _check_format(output_format)

    if strict:
        error = validate_counts(correct_answers, total_questions)
        if error:
            console.print(f"[red]{error}[/red]")
            raise typer.Exit(1)

    result = perform_grading(correct_answers, total_questions)

    if output:
        source = {CORRECT_COLUMN: correct_answers, TOTAL_COLUMN: total_questions}
        export_single_to_csv(source, result, output)
        console.print(f"[green]Result saved to {output}[/green]")
    elif output_format == "json":
        format_json(result.to_dict(), console)
    else:
        format_table(result, console)


@app.command(context_settings=NUMERIC_ARGS)
def letter(
    score: int = typer.Argument(..., help="Percentage score to convert"),
    output_format: str = typer.Option(
        "table",
        "--format",
        "-f",
        help="Output format: table or json",
    ),
) -> None:
    """Convert a percentage score to a letter grade."""
    _check_format(output_format)

    letter_grade = score_to_grade(score)
    category = grade_to_category(letter_grade)

    if output_format == "json":
        format_json(
            {
                "score": score,
                "letter_grade": letter_grade.value,
                "category": category.value,
                "score_band": score_band(score),
            },
            console,
        )
    else:
        style = GRADE_STYLES.get(category.value, "white")
        console.print(f"{score}% -> Grade [{style}]{letter_grade.value}[/{style}] ({category.value})")


@app.command()
def scale() -> None:
    """Show the grading scale."""
    format_scale(console)


@app.command("grade-bulk")
def grade_bulk(
    input_file: str = typer.Argument(
        ..., help=f"CSV file with '{CORRECT_COLUMN}' and '{TOTAL_COLUMN}' columns"
    ),
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output CSV file path",
    ),
    group_by: Optional[str] = typer.Option(
        None,
        "--group-by",
        "-g",
        help="Column to average scores by (e.g. course)",
    ),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Skip rows where correct answers exceed total questions",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show each skipped or graded row",
    ),
) -> None:
    """Grade multiple submissions from a CSV file."""
    input_path = Path(input_file)
    if not input_path.exists():
        console.print(f"[red]File not found: {input_file}[/red]")
        raise typer.Exit(1)

    try:
        rows = _read_submissions_from_csv(input_path)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    if not rows:
        console.print("[red]No submissions found in file[/red]")
        raise typer.Exit(1)

    if group_by:
        group_by = group_by.strip().lower()
    if group_by and group_by not in rows[0]:
        console.print(f"[red]Unknown group column: {group_by}[/red]")
        raise typer.Exit(1)

    console.print(f"[cyan]Found {len(rows)} submissions to grade[/cyan]")

    graded = []
    for line_number, row in enumerate(rows, start=2):
        counts = _parse_counts(row)
        if counts is None:
            if verbose:
                console.print(f"[yellow]Skipping line {line_number}: invalid answer counts[/yellow]")
            continue

        if strict:
            error = validate_counts(*counts)
            if error:
                if verbose:
                    console.print(f"[yellow]Skipping line {line_number}: {error}[/yellow]")
                continue

        result = perform_grading(*counts)
        graded.append((row, result))
        if verbose:
            console.print(
                f"  [dim]line {line_number}[/dim]: {result.numeric_score}% (Grade {result.letter_grade.value})"
            )

    if not graded:
        console.print("[red]No valid submissions after validation[/red]")
        raise typer.Exit(1)

    console.print(f"\n[green]Graded {len(graded)} submissions[/green]")
    skipped = len(rows) - len(graded)
    if skipped:
        console.print(f"[yellow]Skipped: {skipped}[/yellow]")

    summary = summarize_scores(result.numeric_score for _, result in graded)
    group_averages = None
    if group_by:
        group_averages = average_by_group(
            ({group_by: row.get(group_by), "numeric_score": result.numeric_score} for row, result in graded),
            group_by,
        )
    format_summary(summary, console, group_averages)

    if output:
        export_to_csv(graded, output)
        console.print(f"[green]Results saved to {output}[/green]")
    else:
        console.print("\n[bold]Results:[/bold]")
        for row, result in graded[:SUMMARY_PREVIEW_ROWS]:
            label = _row_label(row)
            console.print(
                f"  {label}: {result.correct_answers}/{result.total_questions} "
                f"-> {result.numeric_score}% (Grade {result.letter_grade.value})"
            )

        if len(graded) > SUMMARY_PREVIEW_ROWS:
            console.print(f"  ... and {len(graded) - SUMMARY_PREVIEW_ROWS} more")
        console.print("\n[dim]Use --output to save full results to CSV[/dim]")


def _read_submissions_from_csv(path: Path) -> list[dict]:
    """Read submission rows from a CSV file with a header row."""
    with path.open("r", encoding="utf-8-sig", newline="") as f:
        reader = csv.DictReader(f)
        fieldnames = [fn.strip().lower() for fn in (reader.fieldnames or [])]

        missing = [column for column in REQUIRED_COLUMNS if column not in fieldnames]
        if missing:
            raise ValueError(f"Missing required columns: {', '.join(missing)}")

        rows = []
        for row in reader:
            # Extra unnamed fields land under a None key
            cleaned = {key.strip().lower(): (value or "").strip() for key, value in row.items() if key is not None}
            if any(cleaned.values()):
                rows.append(cleaned)

    log.debug("Read %d submission rows from %s", len(rows), path)
    return rows


def _parse_counts(row: dict) -> tuple[int, int] | None:
    """Parse answer counts from a CSV row. Returns None if not integers."""
    try:
        return int(row[CORRECT_COLUMN]), int(row[TOTAL_COLUMN])
    except (KeyError, ValueError):
        log.info("Invalid answer counts in row: %s", row)
        return None


def _row_label(row: dict) -> str:
    """Pick a readable label for a row from its non-count columns."""
    for key, value in row.items():
        if key not in REQUIRED_COLUMNS and value:
            return value
    return "?"


@app.command()
def version() -> None:
    """Show version information."""
    from . import __version__
    console.print(f"assignment-grader version {__version__}")


if __name__ == "__main__":
    app()
