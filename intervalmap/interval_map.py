from __future__ import annotations
import logging
from typing import Generic, TypeVar
from collections.abc import Iterator
from operator import itemgetter

from sortedcontainers import SortedKeyList

from .errors import IntervalMapSliceError


l = logging.getLogger(name=__name__)

K = TypeVar("K")
V = TypeVar("V")


class IntervalMap(Generic[K, V]):
    """
    A total mapping from an ordered key domain to values, stored as runs of constant value.

    Every key maps to some value. Keys below the first breakpoint map to `base`; a breakpoint (k, v) maps every key in
    [k, next breakpoint key) to v. The breakpoints are always canonical: consecutive breakpoints hold different values,
    and the first breakpoint never holds `base`.

    Keys are only ever compared with `<`, and values only with `==`. Breakpoints are (key, value) pairs in a
    SortedKeyList ordered by key, so keys are neither hashed nor compared for equality.
    """

    __slots__ = ("_base", "_breakpoints")

    def __init__(self, base: V):
        """
        :param base:    The value initially associated with every key.
        """
        self._base: V = base
        self._breakpoints: SortedKeyList = SortedKeyList(key=itemgetter(0))  # SortedKeyList[tuple[K, V]]

    #
    # Overridden methods
    #

    def __getitem__(self, key: K) -> V:
        return self.lookup(key)

    def __setitem__(self, key: slice, value: V) -> None:
        if not isinstance(key, slice):
            raise IntervalMapSliceError(f"Values can only be assigned to key ranges, got {key!r}")
        if key.step is not None:
            raise IntervalMapSliceError("Key ranges do not support a step")
        if key.start is None or key.stop is None:
            raise IntervalMapSliceError("Key ranges must be bounded on both sides")
        self.assign(key.start, key.stop, value)

    def __len__(self) -> int:
        return len(self._breakpoints)

    def __bool__(self) -> bool:
        # the map is total, it is never empty
        return True

    def __iter__(self) -> Iterator[tuple[K, V]]:
        return self.items()

    def __repr__(self):
        bps = ", ".join(f"({k!r}, {v!r})" for k, v in self.items())
        return f"<IntervalMap base={self._base!r} [{bps}]>"

    def __copy__(self) -> IntervalMap[K, V]:
        return self.copy()

    #
    # Properties
    #

    @property
    def base(self) -> V:
        """
        The value of every key below the first breakpoint.
        """
        return self._base

    #
    # Public methods
    #

    def assign(self, key_begin: K, key_end: K, value: V) -> None:
        """
        Associate `value` with every key in [key_begin, key_end), leaving all other keys untouched.

        If not key_begin < key_end, the range is empty and nothing happens.

        :param key_begin:   First key of the range (inclusive).
        :param key_end:     End of the range (exclusive).
        :param value:       The value to assign.
        """
        if not key_begin < key_end:
            l.debug("Ignoring assignment to the empty range [%r, %r).", key_begin, key_end)
            return

        bps = self._breakpoints
        begin_idx = bps.bisect_key_left(key_begin)
        left_value = bps[begin_idx - 1][1] if begin_idx > 0 else self._base

        # walk over the breakpoints covered by [key_begin, key_end). last_value ends up as the value of the keys right
        # below key_end.
        last_value = left_value
        removed = 0
        end_is_breakpoint = False
        for key, val in bps.islice(begin_idx):
            if not key < key_end:
                end_is_breakpoint = not key_end < key
                break
            last_value = val
            removed += 1

        # positional removal compares no keys
        for _ in range(removed):
            del bps[begin_idx]

        # the value of the keys from key_end on
        right_value = bps[begin_idx][1] if end_is_breakpoint else last_value

        if right_value == value:
            if end_is_breakpoint:
                # the existing breakpoint at key_end now continues the assigned run
                del bps[begin_idx]
        elif not end_is_breakpoint:
            bps.add((key_end, last_value))

        if not value == left_value:
            bps.add((key_begin, value))

    def lookup(self, key: K) -> V:
        """
        Get the value associated with `key`.

        :param key: The key to look up.
        :return:    The value of the run that contains `key`.
        """
        idx = self._breakpoints.bisect_key_right(key)
        if idx == 0:
            return self._base
        return self._breakpoints[idx - 1][1]

    def dump(self) -> list[tuple[K, V]]:
        """
        Get all breakpoints in increasing key order.

        :return: A list of (key, value) tuples.
        """
        return list(self.items())

    def items(self) -> Iterator[tuple[K, V]]:
        return iter(self._breakpoints)

    def runs(self, min_key: K | None = None, max_key: K | None = None) -> Iterator[tuple[K | None, K | None, V]]:
        """
        Iterate over the runs intersecting [min_key, max_key], yielding (start, end, value) tuples. The run covering
        the keys below every breakpoint has a start of None, and the last run has an end of None.

        :param min_key: Minimum key (inclusive) to begin iterating from. If None, iterate from the first run.
        :param max_key: Maximum key (inclusive) to iterate to. If None, iterate to the last run.
        """
        if min_key is not None and max_key is not None and max_key < min_key:
            return

        bps = self._breakpoints
        start_idx = 0 if min_key is None else bps.bisect_key_right(min_key)
        stop_idx = len(bps) if max_key is None else bps.bisect_key_right(max_key)

        if start_idx == 0:
            start, value = None, self._base
        else:
            start, value = bps[start_idx - 1]
        for key, val in bps.islice(start_idx, stop_idx):
            yield start, key, value
            start, value = key, val
        end = bps[stop_idx][0] if stop_idx < len(bps) else None
        yield start, end, value

    def copy(self) -> IntervalMap[K, V]:
        """
        Make a copy of the IntervalMap. The copy does not share storage with this instance.

        :return: A copy of the IntervalMap instance.
        """
        n = IntervalMap(self._base)
        n._breakpoints = self._breakpoints.copy()
        return n
