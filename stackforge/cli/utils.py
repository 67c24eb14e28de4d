from __future__ import annotations

from contextlib import contextmanager
from typing import Generator

import typer

from stackforge.config import RootConfig
from stackforge.errors import StackforgeError
from stackforge.logger import logger


def get_root_config(ctx: typer.Context) -> RootConfig:
    """
    Returns the settings built from the global flags by the root callback.
    """
    if isinstance(ctx.obj, RootConfig):
        return ctx.obj
    return RootConfig()


@contextmanager
def exit_on_error() -> Generator[None, None, None]:
    """
    Logs a StackforgeError raised inside the block and exits with code 1.
    """
    try:
        yield
    except StackforgeError as e:
        logger.error(str(e))
        raise typer.Exit(1)
