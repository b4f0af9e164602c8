"""Every source file carries the project's LGPL header."""

import pathlib

import pytest


ROOT = pathlib.Path(__file__).resolve().parent.parent
SOURCES = sorted(ROOT.glob("*.py")) + sorted(ROOT.glob("params/*.py"))


@pytest.mark.parametrize("path", SOURCES, ids=lambda p: p.name)
def test_license_header(path):
    head = "".join(path.read_text(encoding="utf-8").splitlines(True)[:20])
    assert "# sinmod-sandbox: Interactive simulator" in head
    assert "# Copyright (C) 2026  sinmod-sandbox contributors" in head
    assert "GNU Lesser General Public License" in head
