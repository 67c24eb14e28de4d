from __future__ import annotations

import os

from stackforge.config import ProjectConfig, RootConfig, parse_yaml
from stackforge.constants import EXTRACT_DIR, PROJECT_CONFIG_FILE
from stackforge.utils import get_project_data_dir, to_image_name


def load_project_config(project_dir: str) -> ProjectConfig:
    """
    Loads the project config file from the root of the project directory.

    Args:
        project_dir (str): The project directory.

    Returns:
        ProjectConfig: The parsed project config.

    Raises:
        FileNotFoundError: If the project config file does not exist.
        ValueError: If the project config file is invalid.
    """
    config_file = os.path.join(project_dir, PROJECT_CONFIG_FILE)
    if not os.path.exists(config_file):
        raise FileNotFoundError(
            f"Project config file {config_file} does not exist. "
            "Is this a stackforge project?"
        )

    with open(config_file, "r") as file:
        return parse_yaml(file.read())


def get_project_dir(root_config: RootConfig) -> str:
    return os.path.abspath(os.path.expanduser(root_config.project_dir))


def get_stack_dir(root_config: RootConfig, project_config: ProjectConfig) -> str:
    stack_dir = os.path.expanduser(project_config.stack)
    return os.path.abspath(os.path.join(get_project_dir(root_config), stack_dir))


def get_project_name(root_config: RootConfig) -> str:
    """
    Resolves the name of the project.

    The projectName field of the project config wins. Otherwise the base name
    of the project directory is used. Either way the result is converted to a
    valid image name.
    """
    project_config = load_project_config(get_project_dir(root_config))
    name = project_config.projectName or os.path.basename(
        get_project_dir(root_config)
    )
    return to_image_name(name)


def get_home(root_config: RootConfig) -> str:
    if root_config.home:
        return os.path.abspath(os.path.expanduser(root_config.home))
    return get_project_data_dir()


def get_extract_dir(root_config: RootConfig, project_name: str) -> str:
    return os.path.join(get_home(root_config), EXTRACT_DIR, project_name)
