from __future__ import annotations

import pytest
from pydantic import ValidationError as PydanticValidationError

from stackforge.config import (
    CONFIG_VERSION,
    BuildRequest,
    ProjectConfig,
    RootConfig,
    parse_yaml,
)


def test_parse_yaml() -> None:
    config = parse_yaml(
        """
        version: "1.0"
        stack: ../stacks/python
        projectName: my-app
        """
    )
    assert config == ProjectConfig(
        version=CONFIG_VERSION, stack="../stacks/python", projectName="my-app"
    )


def test_parse_yaml_unquoted_version() -> None:
    config = parse_yaml("version: 1.0\nstack: stack\n")
    assert config.version == "1.0"


def test_parse_yaml_missing_version() -> None:
    with pytest.raises(ValueError, match="The 'version' field is missing"):
        parse_yaml("stack: stack\n")


def test_parse_yaml_invalid_version() -> None:
    with pytest.raises(ValueError, match='version must be in the format "x.x"'):
        parse_yaml('version: "1"\nstack: stack\n')

    with pytest.raises(ValueError, match="Your current tool is too old"):
        parse_yaml('version: "2.0"\nstack: stack\n')

    with pytest.raises(ValueError, match="This tool supports versions up to"):
        parse_yaml('version: "1.9"\nstack: stack\n')


def test_parse_yaml_not_a_mapping() -> None:
    with pytest.raises(ValueError, match="expected a mapping"):
        parse_yaml("- a\n- b\n")

    with pytest.raises(ValueError, match="expected a mapping"):
        parse_yaml("")


def test_parse_yaml_malformed_yaml() -> None:
    with pytest.raises(ValueError, match="Invalid configuration"):
        parse_yaml("version: [1.0\nstack: x\n")


def test_parse_yaml_invalid_fields() -> None:
    with pytest.raises(ValueError):
        parse_yaml('version: "1.0"\nstack: stack\nunknown: true\n')

    with pytest.raises(ValueError, match="stack must not be empty"):
        parse_yaml('version: "1.0"\nstack: " "\n')

    with pytest.raises(ValueError, match="projectName must not be empty"):
        parse_yaml('version: "1.0"\nstack: stack\nprojectName: ""\n')

    with pytest.raises(ValueError):
        parse_yaml('version: "1.0"\n')


def test_root_config_is_frozen() -> None:
    root_config = RootConfig(project_dir="/p", dry_run=True)
    with pytest.raises(PydanticValidationError):
        root_config.dry_run = False  # type: ignore


def test_build_request_defaults() -> None:
    request = BuildRequest()
    assert request.tag == ""
    assert request.docker_options == ""
    assert not request.verbose
    assert not request.dry_run

    with pytest.raises(PydanticValidationError):
        request.tag = "other"  # type: ignore
