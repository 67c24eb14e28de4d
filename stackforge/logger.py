import logging

# Create a logger
logger = logging.getLogger(__name__)

# Output of the container build tool
docker_logger = logger.getChild("docker")


def _reset_handlers(log: logging.Logger) -> None:
    for handler in list(log.handlers):
        log.removeHandler(handler)


# "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
def setup_logger(verbose: bool = False, format: str = "%(message)s") -> None:
    # Set the logging level based on the verbose flag
    level = logging.DEBUG if verbose else logging.INFO
    logger.setLevel(level)

    _reset_handlers(logger)
    _reset_handlers(docker_logger)

    # Create a console handler
    ch = logging.StreamHandler()
    ch.setLevel(level)
    ch.setFormatter(logging.Formatter(format))
    logger.addHandler(ch)

    # Tool output gets its own prefix and must not be printed twice
    docker_ch = logging.StreamHandler()
    docker_ch.setLevel(level)
    docker_ch.setFormatter(logging.Formatter(f"[Docker] {format}"))
    docker_logger.addHandler(docker_ch)
    docker_logger.propagate = False


setup_logger()
