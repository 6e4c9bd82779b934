"""perfcompare CLI - compare performance measurements in CI."""

from __future__ import annotations

import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from perfcompare import __version__
from perfcompare.config import load_config
from perfcompare.diff import compare_measurements
from perfcompare.exceptions import (
    MeasurementInputError,
    PerfCompareError,
    ReportOutputError,
)
from perfcompare.measurements import MeasurementParser
from perfcompare.measurements.parser import print_skipped_line
from perfcompare.reporters import get_reporter

console = Console()
error_console = Console(stderr=True)

MEASUREMENT_HELP = """
Measurements are given one per line, with the name of the measurement on the
left side of a colon and the measurement on the right side of the colon. For
example:

\b
    Instructions executed for test case A: 123456789
    Instructions executed for test case B: 2345678
    Code Size: 34567
"""


def _read_measurements(value: str, from_file: bool) -> str:
    """Return measurement text, reading it from a file (or stdin for '-')."""
    if not from_file:
        return value
    if value == "-":
        return click.get_text_stream("stdin").read()
    try:
        return Path(value).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise MeasurementInputError(f"Cannot read measurements from {value}: {e}") from e


@click.group()
@click.version_option(version=__version__, prog_name="perfcompare")
def main() -> None:
    """perfcompare - flag performance changes between two runs."""
    pass


@main.command(epilog=MEASUREMENT_HELP)
@click.argument("baseline")
@click.argument("with_changes")
@click.argument("sensitivity", type=float)
@click.option(
    "--from-files",
    is_flag=True,
    help="Read BASELINE and WITH_CHANGES from files ('-' for stdin)",
)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["text", "json", "markdown"]),
    default=None,
    help="Output format (default: text)",
)
@click.option("--output", "-o", type=click.Path(), help="Write report to file")
@click.option(
    "--config", "-c", "config_path", type=click.Path(), help="Configuration file"
)
@click.option("--quiet", "-q", is_flag=True, help="Suppress skipped-line diagnostics")
def compare(
    baseline: str,
    with_changes: str,
    sensitivity: float,
    from_files: bool,
    output_format: str | None,
    output: str | None,
    config_path: str | None,
    quiet: bool,
) -> None:
    """Compare measurements WITH_CHANGES against BASELINE.

    SENSITIVITY is the percentage after which a change is considered
    meaningful. Eg. specify 0.5 to report a significant performance change if
    any of the measurements changed by more than 0.5% (either improved or
    regressed). Exit code is 1 if a significant change was found.
    """
    try:
        config = load_config(config_path)
        output_format = output_format or config.format
        output = output or config.output
        quiet = quiet or config.quiet

        baseline_output = _read_measurements(baseline, from_files)
        current_output = _read_measurements(with_changes, from_files)

        result = compare_measurements(
            baseline_output,
            current_output,
            sensitivity,
            on_skip=None if quiet else print_skipped_line,
        )

        reporter = get_reporter(output_format, title=config.title)
        report = reporter.emit(result)

        if output:
            try:
                Path(output).write_text(report, encoding="utf-8")
            except OSError as e:
                raise ReportOutputError(f"Cannot write report to {output}: {e}") from e
            if not quiet:
                error_console.print(f"Report written to: {escape(output)}")
        else:
            print(report, end="" if report.endswith("\n") else "\n")

        if result.has_significant_change:
            if not quiet:
                error_console.print(
                    f"[red]✗ {len(result.regressions)} regressed, "
                    f"{len(result.improvements)} improved beyond "
                    f"{sensitivity}%[/red]"
                )
            sys.exit(1)
        else:
            if not quiet:
                error_console.print("[green]✓ No significant performance change[/green]")
            sys.exit(0)

    except PerfCompareError as e:
        error_console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        sys.exit(2)


@main.command(epilog=MEASUREMENT_HELP)
@click.argument("measurements")
@click.option("--from-file", is_flag=True, help="Read MEASUREMENTS from a file ('-' for stdin)")
def parse(measurements: str, from_file: bool) -> None:
    """Show the measurements that would be compared.

    Lines that cannot be parsed are reported on stderr.
    """
    try:
        text = _read_measurements(measurements, from_file)
    except PerfCompareError as e:
        error_console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        sys.exit(2)

    parser = MeasurementParser()
    parsed = parser.parse(text)

    table = Table(show_header=True, header_style="bold")
    table.add_column("Measurement", style="cyan")
    table.add_column("Value", justify="right")
    for name, value in sorted(parsed.items()):
        table.add_row(Text(name), str(value))

    console.print(table)
    console.print(
        f"{len(parsed)} measurements parsed, {len(parser.skipped)} lines skipped",
        highlight=False,
    )


if __name__ == "__main__":
    main()
