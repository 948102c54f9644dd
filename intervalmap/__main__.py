from __future__ import annotations

import argparse
import logging
import re

import intervalmap
from intervalmap import IntervalMap
from intervalmap.errors import IntervalMapCLIError
from intervalmap.utils.formatting import map_snippet, value_slice, data_slice


log = logging.getLogger(__name__)


ASSIGNMENT_RE = re.compile(r"^(?P<begin>-?\d+):(?P<end>-?\d+):(?P<value>.+)$")
WINDOW_RE = re.compile(r"^(?P<begin>-?\d+):(?P<end>-?\d+)$")


def parse_assignment(s: str) -> tuple[int, int, str]:
    """
    Parse an assignment of the form "begin:end:value", e.g. "2:5:B".
    """
    m = ASSIGNMENT_RE.match(s)
    if m is None:
        raise IntervalMapCLIError(f'Malformed assignment "{s}", expected begin:end:value')
    return int(m.group("begin")), int(m.group("end")), m.group("value")


def parse_window(s: str) -> range:
    m = WINDOW_RE.match(s)
    if m is None:
        raise IntervalMapCLIError(f'Malformed window "{s}", expected begin:end')
    return range(int(m.group("begin")), int(m.group("end")))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="intervalmap",
        description="Apply range assignments to an integer-keyed interval map and show the result.",
    )
    parser.add_argument("assignments", help="Assignments of the form begin:end:value, applied in order.", nargs="*")
    parser.add_argument("--base", help="The value initially associated with every key.", default="A")
    parser.add_argument(
        "--window",
        help="Range of keys begin:end to render one value per key for. No key rendering if omitted.",
        default=None,
    )
    parser.add_argument(
        "--data",
        help="Render the window as one key -> value line per key.",
        action="store_true",
        default=False,
    )
    parser.add_argument("-v", "--verbose", help="Log at DEBUG level.", action="store_true", default=False)

    args = parser.parse_args(argv)

    if args.verbose:
        intervalmap.loggers.setall(logging.DEBUG)

    try:
        assignments = [parse_assignment(a) for a in args.assignments]
        window = parse_window(args.window) if args.window is not None else None
    except IntervalMapCLIError as e:
        parser.error(str(e))

    imap: IntervalMap[int, str] = IntervalMap(args.base)
    for begin, end, value in assignments:
        log.debug("Assigning %r to [%d, %d).", value, begin, end)
        imap.assign(begin, end, value)

    print(map_snippet(imap))
    if window is not None:
        if args.data:
            print(data_slice(imap, window), end="")
        else:
            print(value_slice(imap, window))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
