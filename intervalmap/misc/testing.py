from __future__ import annotations
import sys


TEST_RUNNER_MODULES = ("pytest", "_pytest", "unittest")


def detect_test_env() -> bool:
    """
    Walk up the call stack while the package is being imported and check whether a test runner is driving it.
    """
    i = 0
    while True:
        i += 1
        try:
            frame_module = sys._getframe(i).f_globals.get("__name__")
        except ValueError:
            return False

        if frame_module in ("__main__", "__console__"):
            return False
        if frame_module is not None and any(
            frame_module == x or frame_module.startswith(x + ".") for x in TEST_RUNNER_MODULES
        ):
            return True


is_testing = detect_test_env()
