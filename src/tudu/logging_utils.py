import logging
import sys


def _logger(log_level: int) -> logging.Logger:
    # stderr keeps log lines out of the rendered lists on stdout
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(filename)s - %(lineno)d - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    return logging.getLogger("tudu")


def level_from_name(name: str) -> int:
    """Map a level name such as `debug` or `INFO` to its logging constant"""
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {name}")
    return level


def set_level(log_level: int, *, logger: logging.Logger) -> None:
    """Set level of the logger"""
    logger.setLevel(log_level)

    # Child loggers inherit from `tudu`, but the root handler filters too.
    logging.getLogger().setLevel(log_level)


logger = _logger(log_level=logging.WARNING)
