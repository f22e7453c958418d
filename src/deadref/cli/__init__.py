"""CLI entry point: registers the scan command."""

import typer

app = typer.Typer(
    name="deadref",
    help="deadref - find files nothing imports in a TypeScript/React frontend",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import commands to register them
from .scan import scan as _scan  # noqa: F401, E402


def main() -> None:
    """Console-script entry point."""
    app()
