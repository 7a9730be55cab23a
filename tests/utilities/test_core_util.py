from __future__ import annotations

import pytest

from reception_hierarchy.utilities.core_util import is_null_or_whitespace, open_for_write


@pytest.mark.parametrize(
    "value, expected",
    [(None, True), ("", True), ("  \t", True), ("x", False), (" 0 ", False)],
)
def test_is_null_or_whitespace(value, expected):
    assert is_null_or_whitespace(value) is expected


def test_open_for_write_creates_parent_folders(tmp_path):
    dest = tmp_path / "a" / "b" / "out.txt"

    with open_for_write(dest) as fp:
        fp.write("Доходы")

    assert dest.read_text(encoding="utf-8") == "Доходы"
