import logging
from typing import Union


def setup_default_logging(level: Union[int, str] = "WARNING") -> None:
    """Apply a minimal logging configuration once.

    Does nothing when the root logger already has handlers, so an application
    that configured logging itself keeps its setup.
    """
    if isinstance(level, str):
        lvl = getattr(logging, level.upper(), logging.WARNING)
    else:
        lvl = int(level)

    root = logging.getLogger()
    if root.handlers:
        return
    logging.basicConfig(
        level=lvl,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


__all__ = ["setup_default_logging"]
