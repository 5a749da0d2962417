"""Tests for SVG rendering."""

import xml.etree.ElementTree as ET

from xbar.layout import connections
from xbar.render.constants import CELL_HEIGHT, MARGIN_Y
from xbar.render.svg import canvas_size, column_x, render_svg, row_y
from xbar.model import Position
from xbar.themes import CLASSIC_THEME, DARK_THEME, THEMES


def _elements(svg, name):
    root = ET.fromstring(svg)
    return [el for el in root.iter() if el.tag.split("}")[-1] == name]


def test_render_produces_valid_svg():
    svg = render_svg(5, CLASSIC_THEME)
    root = ET.fromstring(svg)
    assert root.tag.endswith("svg")


def test_canvas_size_five_terminals():
    # 2 columns plus the rail, 20 rows plus 3 spacer rows
    assert canvas_size(5) == (3 * 20 + 80 + 30, 23 * 20 + 80)


def test_canvas_size_trivial():
    assert canvas_size(0) == (20 + 80 + 30, 80)
    assert canvas_size(1) == (20 + 80 + 30, 80)


def test_one_wire_per_connection():
    svg = render_svg(6, CLASSIC_THEME, separators=False)
    assert len(_elements(svg, "path")) == len(connections(6))
    assert len(_elements(svg, "text")) == 2 * len(connections(6))


def test_separators_between_blocks():
    plain = render_svg(6, CLASSIC_THEME, separators=False)
    with_sep = render_svg(6, CLASSIC_THEME)
    # 5 blocks -> 4 separators
    assert len(_elements(with_sep, "path")) == len(_elements(plain, "path")) + 4
    assert CLASSIC_THEME.separator_color in with_sep


def test_labels_are_terminal_numbers():
    svg = render_svg(4, CLASSIC_THEME, separators=False)
    labels = {el.text for el in _elements(svg, "text")}
    assert labels == {"0", "1", "2", "3"}


def test_render_empty_crossbar():
    for n in (0, 1):
        svg = render_svg(n, CLASSIC_THEME)
        assert _elements(svg, "path") == []
        assert len(_elements(svg, "rect")) == 1


def test_row_y_skips_spacer():
    last_of_first = row_y(Position.at(0, 4, 5), 5)
    first_of_second = row_y(Position.at(1, 0, 5), 5)
    assert last_of_first == MARGIN_Y + 4 * CELL_HEIGHT
    assert first_of_second - last_of_first == 2 * CELL_HEIGHT


def test_column_x_increases():
    assert column_x(1) > column_x(0)


def test_dark_theme():
    svg = render_svg(4, DARK_THEME)
    assert DARK_THEME.background_color in svg
    assert DARK_THEME.wire_color in svg
    # No explicit separator color: falls back to the border color
    assert DARK_THEME.separator_color == ""


def test_themes_registry():
    assert THEMES["classic"] is CLASSIC_THEME
    assert THEMES["dark"] is DARK_THEME
