"""Main CLI entry point."""

import typer
from dotenv import load_dotenv
from rich.console import Console

from .report import milestones, report

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(
    name="gh-milestones",
    help="GitHub milestone and component progress reports",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()


app.command(name="report", context_settings={"help_option_names": ["-h", "--help"]})(
    report
)
app.command(
    name="milestones", context_settings={"help_option_names": ["-h", "--help"]}
)(milestones)


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def version() -> None:
    """Show version information."""
    from gh_milestones import __version__

    console.print(f"gh-milestones v{__version__}")


if __name__ == "__main__":
    app()
