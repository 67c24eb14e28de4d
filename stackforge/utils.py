from __future__ import annotations

import os
import re
from pathlib import Path
from typing import List

from stackforge.constants import HOME_ENV_VAR, PROJECT_NAME

# Docker limits a repository name component to 128 characters
MAX_IMAGE_NAME_LEN = 128


def camel_to_kebab(name: str) -> str:
    """
    Converts a camel case string to kebab case.

    Args:
        name (str): The camel case string to be converted.

    Returns:
        str: The kebab case string.

    Example:
        >>> camel_to_kebab("camelCaseString")
        'camel-case-string'
    """
    name = re.sub("(.)([A-Z][a-z]+)", r"\1-\2", name)
    return re.sub("([a-z0-9])([A-Z])", r"\1-\2", name).lower()


def to_image_name(old: str) -> str:
    """
    Convert a string into a valid Docker image name.

    The string is lower-cased, characters other than lowercase letters, digits,
    '_', '.' and '-' are replaced with '-', leading non-alphanumeric characters
    and trailing separators are trimmed, and the result is truncated to 128
    characters.

    Args:
        old (str): The original string to be converted.

    Returns:
        str: The converted string that is a valid image name.

    Raises:
        ValueError: If the resulting name is empty.
    """
    new_name = old.lower()

    # replace disallowed chars with '-'
    new_name = re.sub(r"[^a-z0-9_.-]", "-", new_name)

    # trim leading non-alphanumeric
    new_name = re.sub(r"^[^a-z0-9]+", "", new_name)

    # truncate to length
    new_name = new_name[:MAX_IMAGE_NAME_LEN]

    # trim trailing separators
    new_name = re.sub(r"[_.-]+$", "", new_name)

    if len(new_name) == 0:
        raise ValueError(f"Name: {old} can't be converted to a valid image name")

    return new_name


def get_project_data_dir() -> str:
    """
    Get the stackforge data directory.

    If the environment variable HOME_ENV_VAR is set, it returns its value.
    Otherwise, it returns the home directory appended with the kebab-case project name.

    Returns:
        str: The absolute path of the data directory.
    """
    return os.environ.get(
        HOME_ENV_VAR, str(Path.home() / f".{camel_to_kebab(PROJECT_NAME)}")
    )


def read_ignore_file(path: str) -> List[str]:
    """
    Reads glob patterns from an ignore file such as .dockerignore.

    Blank lines and lines starting with '#' are skipped. A missing file yields
    no patterns.
    """
    if not os.path.exists(path):
        return []

    patterns = []
    with open(path, "r") as file:
        for line in file:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            patterns.append(line.rstrip("/"))
    return patterns
