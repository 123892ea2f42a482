from __future__ import annotations

import logging
from typing import Union


def configure_scientist_logging(*, level: Union[int, str] = logging.INFO) -> None:
    """
    Attach a console handler to the "scientist" logger.

    Notes:
        - Opt-in; library modules only create loggers and never configure them.
        - Does nothing when the root logger or the "scientist" logger already has handlers.
    """
    root = logging.getLogger()
    scientist_logger = logging.getLogger("scientist")

    if root.handlers or scientist_logger.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    scientist_logger.addHandler(handler)
    scientist_logger.setLevel(level)
    scientist_logger.propagate = False


__all__ = ["configure_scientist_logging"]
