"""Main scan command."""

from pathlib import Path
from typing import Optional

import click
import typer
from rich.markup import escape

from ..config import load_config
from ..core import DeadCodeAnalyzer
from ..exceptions import DeadrefError
from ..formatters import JsonFormatter, get_formatter
from ..logging_config import setup_logging
from . import app
from ._common import console, exit_code_for, write_report


@app.command()
def scan(
    path: Path = typer.Argument(
        Path("."),
        help="Project root to scan (default: current directory)",
        file_okay=False,
        dir_okay=True,
    ),
    config: Optional[Path] = typer.Option(
        None,
        "-c",
        "--config",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    output_format: str = typer.Option(
        "rich",
        "-f",
        "--format",
        help="Terminal output: rich | json | quiet",
        click_type=click.Choice(["rich", "json", "quiet"], case_sensitive=False),
    ),
    output: Optional[str] = typer.Option(
        None,
        "-o",
        "--output",
        help="Report file (default: deadref.report.json in the project root)",
    ),
    no_report: bool = typer.Option(
        False,
        "--no-report",
        help="Do not write the JSON report file",
    ),
    delete: bool = typer.Option(
        False,
        "--delete",
        help="Move unused files into the backup folder",
    ),
    fail_on_unused: bool = typer.Option(
        False,
        "--fail-on-unused",
        help="Exit 1 if any unused file is found",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log every resolution decision",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only log errors",
    ),
    log_file: Optional[str] = typer.Option(
        None,
        "--log-file",
        help="Also append log records to this file",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
    ),
):
    """
    Find project files that no import, dynamic import, JSX asset or
    stylesheet reference points at.

    [bold cyan]Examples:[/bold cyan]

      deadref

      deadref ./my-app --format json --no-report

      deadref ./my-app --delete
    """
    from .. import __version__

    if version:
        console.print(f"[bold cyan]deadref[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit(0)

    try:
        overrides = {"verbose": verbose, "quiet": quiet, "report_file": output}
        if delete:
            overrides["delete_unused"] = True
        settings = load_config(path, config_file=config, **overrides)
        setup_logging(settings.verbosity, log_file)

        report = DeadCodeAnalyzer(path, settings).analyze()

        if not no_report:
            target = write_report(path, settings.report_file, JsonFormatter().format(report))
            if output_format == "rich":
                console.print(f"Report written to [blue]{escape(str(target))}[/blue]")

        get_formatter(output_format.lower()).render(report)
    except DeadrefError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    raise typer.Exit(exit_code_for(report, fail_on_unused))
