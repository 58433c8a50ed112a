from __future__ import annotations

import logging
from typing import Optional

from fdclosure import constants

LOGGER = logging.getLogger("fdclosure")
LOGGER.addHandler(logging.NullHandler())


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Gắn StreamHandler cho LOGGER; chỉ gọi từ CLI hoặc backend, không gọi từ thư viện.

    Gọi nhiều lần không nhân đôi handler.
    """

    if not any(isinstance(handler, logging.StreamHandler) for handler in LOGGER.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
        LOGGER.addHandler(handler)
    LOGGER.setLevel(level or constants.LOG_LEVEL)
    return LOGGER
