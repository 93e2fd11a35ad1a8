"""
Logging setup for scripts built on zora_premint
"""

import logging
import os
import sys

LOG_FORMAT = "%(asctime)s - %(levelname)-8s %(name)s %(filename)s:%(lineno)d %(message)s"
LOG_LEVEL_ENV = "PREMINT_LOG_LEVEL"

# Transport libraries log every request at DEBUG
NOISY_LOGGERS = ("httpx", "httpcore", "web3", "urllib3")


def _resolve_level(level: int | str | None) -> int:
    if level is None:
        level = os.getenv(LOG_LEVEL_ENV, "INFO")
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        return resolved
    return level


def setup_logging(level: int | str | None = None, quiet_transports: bool = True) -> None:
    """
    Install a single stdout handler on the root logger.

    Args:
        level: Level name or number; defaults to $PREMINT_LOG_LEVEL, then INFO
        quiet_transports: Keep HTTP and RPC client loggers at WARNING
    """
    resolved = _resolve_level(level)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    root_logger = logging.getLogger()
    for existing in root_logger.handlers[:]:
        root_logger.removeHandler(existing)
    root_logger.addHandler(handler)
    root_logger.setLevel(resolved)

    if quiet_transports:
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(max(resolved, logging.WARNING))
