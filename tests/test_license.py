"""
Tests for the license notices shipped with the package
"""

import os

from .context import wideint

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
NOTICE = "Copyright (c) 2020 Eduardo Bart"


def test_license_file():
    """Test the MIT license text is shipped"""
    with open(os.path.join(ROOT, "LICENSE"), "r", encoding="utf-8") as fh:
        text = fh.read()
    assert "The MIT License" in text
    assert NOTICE in text


def test_module_headers():
    """Test every module carries the copyright notice"""
    package_dir = os.path.dirname(wideint.__file__)
    for name in sorted(os.listdir(package_dir)):
        if not name.endswith(".py") or name == "__init__.py":
            continue
        with open(os.path.join(package_dir, name), "r", encoding="utf-8") as fh:
            header = fh.read().split("\n")[:3]
        assert header[1] == NOTICE, name
        assert "MIT" in header[2], name
