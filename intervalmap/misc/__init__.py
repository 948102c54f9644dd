from __future__ import annotations

from .loggers import Loggers, CuteFormatter


__all__ = (
    "CuteFormatter",
    "Loggers",
)
