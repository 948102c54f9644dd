from __future__ import annotations


class IntervalMapError(Exception):
    pass


class IntervalMapValueError(IntervalMapError, ValueError):
    pass


class IntervalMapSliceError(IntervalMapValueError):
    pass


class IntervalMapCLIError(IntervalMapError):
    pass
