from __future__ import annotations

from typing import Optional

import typer

from stackforge.cli.utils import exit_on_error, get_root_config
from stackforge.extract import extract as extract_project

extract_app = typer.Typer()


@extract_app.callback(invoke_without_command=True)
def extract(
    ctx: typer.Context,
    target_dir: Optional[str] = typer.Option(
        None,
        "--target-dir",
        help="Directory to extract the project to. It must not exist. "
        "Defaults to the extract directory under the stackforge home.",
    ),
) -> None:
    """
    Extract the stack and the project sources into a single build context.
    """
    with exit_on_error():
        extract_project(get_root_config(ctx), target_dir)
