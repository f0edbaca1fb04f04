"""Tests for numbered line rendering."""

from __future__ import annotations

from pathlib import Path

import pytest

from codequiz.errors import RoundReadError
from codequiz.features.rendering import ContextWindow, compute_window, format_line, render_window


def test_render_numbers_rows_from_offset(make_tree) -> None:
    root = make_tree({"f.txt": "one\ntwo\nthree\nfour\nfive\n"})

    rows = render_window(root / "f.txt", compute_window(3, 1, 5))

    assert [row.plain for row in rows] == ["2: two", "3: three", "4: four"]


def test_highlighted_rows_carry_style(make_tree) -> None:
    root = make_tree({"f.txt": "one\ntwo\n"})

    rows = render_window(root / "f.txt", compute_window(1, 5, 2, style="red"))

    assert [row.plain for row in rows] == ["1: one", "2: two"]
    assert all(row.style == "red" for row in rows)


def test_plain_rows_have_no_style(make_tree) -> None:
    root = make_tree({"f.txt": "one\n"})

    (row,) = render_window(root / "f.txt", compute_window(1, 0, 1))

    assert row.style == ""
    assert row.spans == []


def test_custom_offset_changes_displayed_numbers(make_tree) -> None:
    root = make_tree({"f.txt": "a\nb\nc\n"})

    rows = render_window(root / "f.txt", ContextWindow(start=2, end=3, offset=10))

    assert [row.plain for row in rows] == ["10: b", "11: c"]


def test_content_with_markup_is_verbatim(make_tree) -> None:
    root = make_tree({"f.txt": "x = [bold]y[/bold]\r\n"})

    (row,) = render_window(root / "f.txt", compute_window(1, 0, 1))

    assert row.plain == "1: x = [bold]y[/bold]"


def test_missing_file_raises_round_error(tmp_path: Path) -> None:
    with pytest.raises(RoundReadError):
        _ = render_window(tmp_path / "gone.txt", compute_window(1, 0, 1))


def test_format_line() -> None:
    assert format_line(7, "code").plain == "7: code"
