import os
from pathlib import Path
from unittest.mock import patch

import pytest

from stackforge.config import RootConfig
from stackforge.constants import HOME_ENV_VAR, PROJECT_CONFIG_FILE
from stackforge.project import (
    get_extract_dir,
    get_home,
    get_project_name,
    get_stack_dir,
    load_project_config,
)


def write_config(project_dir: Path, content: str) -> None:
    project_dir.mkdir(parents=True, exist_ok=True)
    (project_dir / PROJECT_CONFIG_FILE).write_text(content)


def test_load_project_config(tmp_path: Path) -> None:
    write_config(tmp_path, 'version: "1.0"\nstack: ../stack\n')

    config = load_project_config(str(tmp_path))
    assert config.stack == "../stack"
    assert config.projectName is None


def test_load_project_config_missing(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match="Is this a stackforge project"):
        load_project_config(str(tmp_path))


def test_get_project_name_from_directory(tmp_path: Path) -> None:
    project_dir = tmp_path / "MyService"
    write_config(project_dir, 'version: "1.0"\nstack: ../stack\n')

    assert get_project_name(RootConfig(project_dir=str(project_dir))) == "myservice"


def test_get_project_name_from_config(tmp_path: Path) -> None:
    write_config(
        tmp_path, 'version: "1.0"\nstack: ../stack\nprojectName: My App\n'
    )

    assert get_project_name(RootConfig(project_dir=str(tmp_path))) == "my-app"


def test_get_project_name_invalid_config(tmp_path: Path) -> None:
    write_config(tmp_path, 'version: "2.0"\nstack: ../stack\n')

    with pytest.raises(ValueError):
        get_project_name(RootConfig(project_dir=str(tmp_path)))


def test_get_stack_dir(tmp_path: Path) -> None:
    project_dir = tmp_path / "app"
    write_config(project_dir, 'version: "1.0"\nstack: ../stack\n')
    root_config = RootConfig(project_dir=str(project_dir))

    stack_dir = get_stack_dir(root_config, load_project_config(str(project_dir)))
    assert stack_dir == str(tmp_path / "stack")


def test_get_home() -> None:
    assert get_home(RootConfig(home="/custom/home")) == "/custom/home"

    with patch.dict(os.environ, {HOME_ENV_VAR: "/env/home"}):
        assert get_home(RootConfig()) == "/env/home"


def test_get_extract_dir() -> None:
    assert get_extract_dir(RootConfig(home="/h"), "myapp") == os.path.join(
        "/h", "extract", "myapp"
    )
