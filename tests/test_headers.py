from pathlib import Path

import pytest

PACKAGE = Path(__file__).resolve().parent.parent / "wxcipher"

SOURCES = sorted(p for p in PACKAGE.rglob("*.py") if p.name != "__main__.py")


@pytest.mark.parametrize("path", SOURCES, ids=lambda p: str(p.relative_to(PACKAGE)))
def test_module_carries_license_header(path):
    head = path.read_text(encoding="utf-8").splitlines()[:4]
    assert "# SPDX-License-Identifier: MIT" in head
