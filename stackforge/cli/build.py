from __future__ import annotations

import typer

from stackforge.build import build as build_image
from stackforge.cli.utils import exit_on_error, get_root_config
from stackforge.config import BuildRequest

build_app = typer.Typer()


@build_app.callback(invoke_without_command=True)
def build(
    ctx: typer.Context,
    tag: str = typer.Option(
        "",
        "--tag",
        "-t",
        help="Docker image name and optionally a tag in the 'name:tag' format. "
        "If omitted, the project name is used.",
    ),
    docker_options: str = typer.Option(
        "",
        "--docker-options",
        help='Specify the docker build options to use. Value must be in "". '
        "The tag and the Dockerfile can't be overridden.",
    ),
) -> None:
    """
    Build a Docker image of the project in the current directory.

    The project is extracted first. The image is then built with `docker build`
    from the extracted build context, using the Dockerfile of the project's stack.
    """
    root_config = get_root_config(ctx)
    request = BuildRequest(
        tag=tag,
        docker_options=docker_options,
        verbose=root_config.verbose,
        dry_run=root_config.dry_run,
    )
    with exit_on_error():
        build_image(request, root_config)
