from typing import Optional

import typer

from stackforge import __version__
from stackforge.cli.build import build_app
from stackforge.cli.extract import extract_app
from stackforge.config import RootConfig
from stackforge.logger import setup_logger


def version_callback(version: bool) -> None:
    if version:
        typer.echo(f"Stackforge CLI Version: {__version__}")
        raise typer.Exit()


cli = typer.Typer(context_settings={"help_option_names": ["-h", "--help"]})


@cli.callback()
def root(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose output"
    ),
    dry_run: bool = typer.Option(
        False,
        "--dryrun",
        help="Show the commands that would be run without running them.",
    ),
    project_dir: str = typer.Option(
        ".", "--project-dir", help="The directory of the project."
    ),
    home: Optional[str] = typer.Option(
        None,
        "--home",
        help="The stackforge home directory. Defaults to $STACKFORGE_HOME or "
        "~/.stackforge.",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    setup_logger(verbose)
    ctx.obj = RootConfig(
        project_dir=project_dir, home=home, verbose=verbose, dry_run=dry_run
    )


cli.add_typer(build_app, name="build", help="Build Docker images.")

cli.add_typer(extract_app, name="extract", help="Extract the build context.")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
