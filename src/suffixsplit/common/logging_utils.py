import logging
import os
from logging import Logger

from suffixsplit.common.defaults import DEFAULT_LOG_LEVEL


def configure_logging(level: str = "") -> None:
    lvl = (level or os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL)).upper()
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(lvl)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s - %(message)s"))
    root.addHandler(handler)


def get_logger(name: str) -> Logger:
    return logging.getLogger(name)
