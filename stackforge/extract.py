from __future__ import annotations

import os
import shutil
from typing import Callable, List, Optional, Set

from stackforge.config import RootConfig
from stackforge.constants import DOCKERFILE, PROJECT_CONFIG_FILE, USER_APP_DIR
from stackforge.errors import ExtractError
from stackforge.logger import logger
from stackforge.project import (
    get_extract_dir,
    get_project_dir,
    get_project_name,
    get_stack_dir,
    load_project_config,
)
from stackforge.utils import read_ignore_file

ALWAYS_IGNORED = [".git", PROJECT_CONFIG_FILE]


def ignore_dest(
    dest: str, patterns: List[str]
) -> Callable[[str, List[str]], Set[str]]:
    """
    Returns a copytree ignore callable that skips the given patterns and the
    destination itself, which may live inside the tree being copied.
    """
    by_pattern = shutil.ignore_patterns(*patterns)
    real_dest = os.path.realpath(dest)

    def ignore(src: str, names: List[str]) -> Set[str]:
        ignored = set(by_pattern(src, names))
        for name in names:
            if os.path.realpath(os.path.join(src, name)) == real_dest:
                ignored.add(name)
        return ignored

    return ignore


def extract(root_config: RootConfig, target_dir: Optional[str] = None) -> str:
    """
    Materializes the build context of a project.

    The stack directory is copied to the destination and the project sources
    are copied into its user-app subdirectory, so the stack's Dockerfile can
    refer to them. By default the destination is <home>/extract/<projectName>
    and any previous extraction there is replaced. An explicit target_dir must
    not exist yet.

    Args:
        root_config (RootConfig): The global settings.
        target_dir (Optional[str]): Where to extract to instead of the default.

    Returns:
        str: The directory holding the build context.

    Raises:
        ExtractError: If the project or its stack cannot be extracted.
    """
    project_dir = get_project_dir(root_config)
    try:
        project_config = load_project_config(project_dir)
        project_name = get_project_name(root_config)
    except (OSError, ValueError) as e:
        raise ExtractError(f"Could not load project {project_dir}: {e}") from e

    stack_dir = get_stack_dir(root_config, project_config)
    if not os.path.isdir(stack_dir):
        raise ExtractError(f"Stack directory {stack_dir} does not exist.")
    if not os.path.isfile(os.path.join(stack_dir, DOCKERFILE)):
        raise ExtractError(f"Stack directory {stack_dir} has no {DOCKERFILE}.")

    if target_dir:
        dest = os.path.abspath(os.path.expanduser(target_dir))
        if os.path.exists(dest):
            raise ExtractError(f"Target directory {dest} already exists.")
    else:
        dest = get_extract_dir(root_config, project_name)

    if root_config.dry_run:
        logger.info(f"Dry Run - Skipping extraction of {project_dir} to {dest}")
        return dest

    logger.debug(f"Extracting stack {stack_dir} and project {project_dir} to {dest}")

    ignored = ALWAYS_IGNORED + read_ignore_file(
        os.path.join(project_dir, ".dockerignore")
    )
    try:
        if not target_dir and os.path.exists(dest):
            shutil.rmtree(dest)
        shutil.copytree(stack_dir, dest, ignore=ignore_dest(dest, []))
        shutil.copytree(
            project_dir,
            os.path.join(dest, USER_APP_DIR),
            ignore=ignore_dest(dest, ignored),
        )
    except OSError as e:
        raise ExtractError(f"Extraction to {dest} failed: {e}") from e

    logger.info(f"Project extracted to {dest}")
    return dest
