from __future__ import annotations

import os
import re
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

CONFIG_VERSION = "1.0"


class StackforgeBaseModel(BaseModel):
    model_config = ConfigDict(extra="forbid")


class ProjectConfig(StackforgeBaseModel):
    """
    Represents the project config file found at the root of a project.
    """

    version: str = Field(..., description="The version of the config format.")
    stack: str = Field(
        ...,
        description="Path to the stack directory. The stack directory holds the "
        "Dockerfile and any files the image recipe needs. Relative paths are "
        "resolved against the project directory.",
    )
    projectName: Optional[str] = Field(
        None,
        description="The name of the project. Defaults to the name of the "
        "project directory.",
    )

    @field_validator("stack")
    def validate_stack(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("stack must not be empty")
        return v

    @field_validator("projectName")
    def validate_project_name(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            raise ValueError("projectName must not be empty")
        return v


class RootConfig(StackforgeBaseModel):
    """
    Settings shared by every command, built once from the global CLI flags.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    project_dir: str = Field(default_factory=os.getcwd)
    home: Optional[str] = None
    verbose: bool = False
    dry_run: bool = False


class BuildRequest(StackforgeBaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    tag: str = ""
    docker_options: str = ""
    verbose: bool = False
    dry_run: bool = False


def parse_yaml(yaml_str: str) -> ProjectConfig:
    """
    Parse a YAML string and return a ProjectConfig object.

    Args:
        yaml_str (str): The YAML string to parse.

    Returns:
        ProjectConfig: The parsed ProjectConfig object.

    Raises:
        ValueError: If the content is not valid YAML or not a mapping, the version is missing or
        unsupported, or a field is invalid.
    """
    yaml = YAML()
    try:
        data = yaml.load(yaml_str)
    except YAMLError as e:
        raise ValueError(f"Invalid configuration: {e}") from e
    if not isinstance(data, dict):
        raise ValueError("Invalid configuration: expected a mapping.")

    version = data.get("version", None)
    if version is None:
        raise ValueError("Invalid configuration: The 'version' field is missing.")

    version = str(version)
    if not re.match(r"^\d+\.\d+$", version):
        raise ValueError('version must be in the format "x.x"')

    # Make sure the major version matches
    major_version, minor_version = map(int, version.split("."))
    tool_major_version, tool_minor_version = map(int, CONFIG_VERSION.split("."))

    if major_version < tool_major_version:
        raise ValueError(
            f"Invalid configuration: This tool supports versions starting from {tool_major_version}.0."
        )
    elif major_version > tool_major_version:
        raise ValueError(
            "Invalid configuration: Your current tool is too old. Please upgrade your tool to handle this configuration."
        )
    elif minor_version > tool_minor_version:  # No forward compatibility
        raise ValueError(
            f"Invalid configuration: This tool supports versions up to {tool_major_version}.{tool_minor_version}."
            " Please upgrade your tool to handle this configuration."
        )

    data["version"] = version
    return ProjectConfig(**data)
