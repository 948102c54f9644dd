from __future__ import annotations
from .formatting import map_snippet, data_slice, value_slice


__all__ = (
    "data_slice",
    "map_snippet",
    "value_slice",
)
