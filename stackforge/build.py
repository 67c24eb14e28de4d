from __future__ import annotations

import os
import re
from typing import List

from stackforge.config import BuildRequest, RootConfig
from stackforge.constants import DOCKERFILE
from stackforge.container.docker import docker_build
from stackforge.errors import UpstreamError, ValidationError
from stackforge.extract import extract
from stackforge.logger import docker_logger, logger
from stackforge.project import get_extract_dir, get_project_name

# The tag and the Dockerfile are always set by the build itself
DISALLOWED_OPTION_PATTERN = re.compile(
    r"(-t|--tag|-f|--file)(=.*)?", re.DOTALL
)


def check_docker_build_options(options: List[str]) -> None:
    """
    Rejects docker build options that would override the tag or Dockerfile.

    Args:
        options (List[str]): The option tokens supplied by the user.

    Raises:
        ValidationError: Naming the first disallowed token.
    """
    for value in options:
        if DISALLOWED_OPTION_PATTERN.fullmatch(value):
            raise ValidationError(f"{value} is not allowed in --docker-options")


def split_docker_options(raw: str) -> List[str]:
    """
    Splits the --docker-options string into tokens.

    A single leading and a single trailing space are removed before splitting
    on single spaces. Repeated spaces therefore produce empty tokens, which are
    passed on as they are.
    """
    if not raw:
        return []
    if raw.startswith(" "):
        raw = raw[1:]
    if raw.endswith(" "):
        raw = raw[:-1]
    return raw.split(" ")


def resolve_image_tag(tag: str, project_name: str) -> str:
    return tag or project_name


def assemble_build_args(
    image_tag: str, docker_options: str, dockerfile: str, context_dir: str
) -> List[str]:
    """
    Assembles the arguments of `docker build`.

    The result always starts with the tag pair and ends with the Dockerfile
    pair followed by the build context directory. Validated user options go in
    between.

    Raises:
        ValidationError: If a user option is not allowed.
    """
    cmd_args = ["-t", image_tag]

    if docker_options:
        options = split_docker_options(docker_options)
        check_docker_build_options(options)
        cmd_args.extend(options)

    cmd_args.extend(["-f", dockerfile, context_dir])
    return cmd_args


def build(request: BuildRequest, root_config: RootConfig) -> str:
    """
    Builds a Docker image of the project.

    The project is extracted first, then `docker build` is run on the
    extracted build context with the stack's Dockerfile.

    Args:
        request (BuildRequest): The build flags.
        root_config (RootConfig): The global settings.

    Returns:
        str: The name of the built image.

    Raises:
        ExtractError: If the extraction fails.
        UpstreamError: If the project name can't be determined.
        ValidationError: If a docker option is not allowed.
        ExecutionError: If docker build fails.
    """
    extract(root_config)

    try:
        project_name = get_project_name(root_config)
    except (OSError, ValueError) as e:
        raise UpstreamError(f"Could not determine project name: {e}") from e

    extract_dir = get_extract_dir(root_config, project_name)
    dockerfile = os.path.join(extract_dir, DOCKERFILE)
    build_image = resolve_image_tag(request.tag, project_name)

    cmd_args = assemble_build_args(
        build_image, request.docker_options, dockerfile, extract_dir
    )
    logger.debug(f"final cmd args {cmd_args}")

    docker_build(cmd_args, docker_logger, request.verbose, request.dry_run)

    if not request.dry_run:
        logger.info(f"Built docker image {build_image}")
    return build_image
