"""Application configuration"""

import logging
from dotenv import load_dotenv

from .loader import load_raw_config
from .core import Core
from .tags import Tags

load_dotenv()

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_RAW_CONFIG = load_raw_config()

core = Core(_RAW_CONFIG)
tags = Tags(_RAW_CONFIG)

logging.basicConfig(format=LOG_FORMAT, datefmt=DATE_FORMAT, level=core.LOG_LEVEL)
if core.LOG_LEVEL != "DEBUG":
    logging.getLogger("discord").setLevel(logging.WARNING)


def reload(path=None) -> None:
    """Re-read config from ``path`` and refresh the shared sections in place."""

    raw = load_raw_config(path)
    core.__init__(raw)
    tags.__init__(raw)
    logging.getLogger().setLevel(core.LOG_LEVEL)


__all__ = ["core", "tags", "reload"]
