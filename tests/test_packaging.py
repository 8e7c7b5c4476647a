"""Tests for the version string setup.py reads from keystrokes/__version__.py."""

from __future__ import annotations

import re
from pathlib import Path

import keystrokes

ROOT = Path(__file__).resolve().parent.parent


def test_setup_reads_version_without_exec():
    setup_src = (ROOT / "setup.py").read_text(encoding="utf-8")
    assert "exec(" not in setup_src


def test_version_file_matches_setup_pattern():
    text = (ROOT / "keystrokes" / "__version__.py").read_text(encoding="utf-8")
    match = re.search(r"^__version__ = ['\"]([^'\"]+)['\"]", text, re.MULTILINE)
    assert match is not None
    assert match.group(1) == keystrokes.__version__
