"""Tests for fixed-size pagination."""

from __future__ import annotations

import pytest

from mdview.config import load_config
from mdview.export.paginate import Page, PageGeometry, paginate, paginate_text


def test_default_geometry() -> None:
    geo = PageGeometry()
    assert (geo.width, geo.height, geo.margin, geo.line_height) == (595, 842, 50, 20)
    assert geo.max_lines_per_page == 37
    assert geo.line_offset(0) == 70
    assert geo.line_offset(2) == 110


def test_geometry_from_config() -> None:
    assert PageGeometry.from_settings(load_config(env={}).page) == PageGeometry()


def test_geometry_without_room_rejected() -> None:
    with pytest.raises(ValueError):
        PageGeometry(height=100, margin=50)
    with pytest.raises(ValueError):
        PageGeometry(line_height=0)


def test_unknown_font_rejected() -> None:
    with pytest.raises(ValueError, match="NoSuchFont"):
        PageGeometry(font_name="NoSuchFont")
    assert PageGeometry(font_name="Courier").font_name == "Courier"


def test_empty_input_still_has_a_page() -> None:
    doc = paginate([])
    assert doc.page_count == 1
    assert doc.pages[0] == Page(1, ())
    assert doc.pages[0].footer == "Page 1"


@pytest.mark.parametrize("count", [1, 36, 37, 38, 74, 75, 500])
def test_pagination_properties(count: int) -> None:
    lines = [f"line {i}" for i in range(count)]
    geo = PageGeometry()
    doc = paginate(lines, geo)
    assert doc.line_count == count
    assert all(len(p.lines) <= geo.max_lines_per_page for p in doc.pages)
    assert [p.number for p in doc.pages] == list(range(1, doc.page_count + 1))
    assert [line for p in doc.pages for line in p.lines] == lines
    assert all(p.lines for p in doc.pages)


def test_five_hundred_lines_at_thirty_nine_per_page() -> None:
    geo = PageGeometry(height=880)
    assert geo.max_lines_per_page == 39
    doc = paginate_text("\n".join(f"line {i}" for i in range(500)), "plain", geo)
    assert doc.page_count == 13
    assert len(doc.pages[-1].lines) == 500 - 12 * 39
    assert doc.pages[-1].footer == "Page 13"


def test_a4_defaults_page_count() -> None:
    doc = paginate_text("\n".join("x" for _ in range(500)), "plain")
    assert doc.page_count == 14
    assert len(doc.pages[-1].lines) == 500 - 13 * 37
