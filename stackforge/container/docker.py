import logging
import os
import shlex
import subprocess
from typing import List

from stackforge.constants import DOCKER_ENV_VAR
from stackforge.errors import ExecutionError
from stackforge.logger import logger


def get_docker_bin() -> str:
    return os.environ.get(DOCKER_ENV_VAR, "docker")


def docker_build(
    args: List[str], log: logging.Logger, verbose: bool, dry_run: bool
) -> None:
    """
    Runs `docker build` with the given arguments and waits for it to finish.

    Output of the build is streamed line by line to the log sink. In dry run
    mode the command is only logged.

    Args:
        args (List[str]): The arguments following `docker build`.
        log (logging.Logger): The sink for the output of the build tool.
        verbose (bool): Log the full command on the info channel.
        dry_run (bool): Log the command instead of running it.

    Raises:
        ExecutionError: If the build tool can't be launched or exits with a
        non-zero code.
    """
    cmd = [get_docker_bin(), "build", *args]
    cmd_str = shlex.join(cmd)

    if dry_run:
        logger.info(f"Dry Run - Skipping command: {cmd_str}")
        return

    if verbose:
        logger.info(f"Running command: {cmd_str}")
    else:
        logger.debug(f"Running command: {cmd_str}")

    try:
        process = subprocess.Popen(
            cmd,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            encoding="utf-8",
            errors="replace",
        )
    except OSError as e:
        raise ExecutionError(f"Could not run {cmd[0]}: {e}", cmd=cmd) from e

    assert process.stdout is not None
    try:
        for line in process.stdout:
            log.info(line.rstrip("\n"))
    finally:
        returncode = process.wait()

    if returncode != 0:
        raise ExecutionError(
            f"{cmd_str} failed with exit code {returncode}",
            cmd=cmd,
            returncode=returncode,
        )
