# storefront/utils/logging.py
import logging
import sys

from storefront.utils.settings import LOG_LEVEL

_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"

_root = logging.getLogger("storefront")


def _configure() -> None:
    if _root.handlers:
        return
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATEFMT))
    _root.addHandler(handler)
    _root.setLevel(getattr(logging, LOG_LEVEL.upper(), logging.INFO))


def get_logger(name: str) -> logging.Logger:
    _configure()
    return logging.getLogger(name)
