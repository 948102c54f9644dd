# pylint: disable=missing-class-docstring
from __future__ import annotations
import os
import re

from setuptools import find_packages, setup


def get_version():
    with open(os.path.join(os.path.dirname(__file__), "intervalmap", "__init__.py"), encoding="utf-8") as f:
        m = re.search(r'^__version__ = "([^"]+)"', f.read(), re.MULTILINE)
    if m is None:
        raise RuntimeError("Unable to find the version of intervalmap")
    return m.group(1)


setup(
    name="intervalmap",
    version=get_version(),
    description="A total key-to-value mapping stored as canonical runs of constant value",
    python_requires=">=3.10",
    packages=find_packages(include=["intervalmap", "intervalmap.*"]),
    install_requires=[
        "sortedcontainers",
        "colorama; platform_system=='Windows'",
    ],
    extras_require={
        "testing": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "intervalmap = intervalmap.__main__:main",
        ],
    },
    zip_safe=False,
)
