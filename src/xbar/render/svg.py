"""SVG generation for crossbar wiring plans using drawsvg."""

from __future__ import annotations

import logging

import drawsvg as draw

from xbar.layout import blocks, columns, connections, rows
from xbar.model import Connection, Position
from xbar.render.constants import (
    BLOCK_SPACER_ROWS,
    CELL_HEIGHT,
    CELL_WIDTH,
    LABEL_BASELINE_RATIO,
    LEFT_TEXT_PAD,
    MARGIN_X,
    MARGIN_Y,
    SEPARATOR_DASH,
    SEPARATOR_STROKE_WIDTH,
)
from xbar.render.style import Theme

log = logging.getLogger(__name__)


def canvas_size(count: int) -> tuple[int, int]:
    """Return the (width, height) of the drawing for ``count`` terminals.

    One spacer row separates consecutive blocks.
    """
    width = (columns(count) + 1) * CELL_WIDTH + 2 * MARGIN_X + LEFT_TEXT_PAD
    n_blocks = blocks(count)
    grid_rows = max(0, rows(count) + BLOCK_SPACER_ROWS * (n_blocks - 1))
    height = grid_rows * CELL_HEIGHT + 2 * MARGIN_Y
    return width, height


def row_y(position: Position, count: int) -> int:
    """Y coordinate of a row, accounting for the spacers between blocks."""
    slot = position.block_index * (count + BLOCK_SPACER_ROWS) + position.row_index
    return MARGIN_Y + CELL_HEIGHT * slot


def column_x(column: int) -> int:
    """X coordinate of a wiring column."""
    return MARGIN_X + LEFT_TEXT_PAD + (1 + column) * CELL_WIDTH


def render_svg(
    count: int,
    theme: Theme,
    separators: bool = True,
) -> str:
    """Render the wiring plan of a ``count``-terminal crossbar to an SVG string."""
    width, height = canvas_size(count)
    d = draw.Drawing(width, height)

    # Background and border
    d.append(draw.Rectangle(
        0, 0, width, height,
        fill=theme.background_color,
        stroke=theme.border_color,
        stroke_width=theme.border_width,
    ))

    if separators:
        _render_separators(d, count, width, theme)

    plan = connections(count)
    log.debug("Rendering %d connections on a %dx%d canvas", len(plan), width, height)
    for conn in plan:
        _render_connection(d, conn, count, theme)

    return d.as_svg()


def _render_separators(
    d: draw.Drawing,
    count: int,
    width: int,
    theme: Theme,
) -> None:
    """Dashed lines through the spacer rows between blocks."""
    color = theme.separator_color or theme.border_color
    for block in range(1, blocks(count)):
        y = row_y(Position.at(block, 0, count), count) - CELL_HEIGHT * BLOCK_SPACER_ROWS
        d.append(draw.Line(
            MARGIN_X, y,
            width - MARGIN_X, y,
            stroke=color,
            stroke_width=SEPARATOR_STROKE_WIDTH,
            stroke_dasharray=SEPARATOR_DASH,
        ))


def _render_connection(
    d: draw.Drawing,
    conn: Connection,
    count: int,
    theme: Theme,
) -> None:
    """Draw one wire as a bracket out to its column and back."""
    rail_x = MARGIN_X + LEFT_TEXT_PAD
    col_x = column_x(conn.column)
    top = row_y(conn.start, count)
    bottom = row_y(conn.end, count)

    path = draw.Path(
        fill="none",
        stroke=theme.wire_color,
        stroke_width=theme.wire_width,
    )
    path.M(rail_x, top).L(col_x, top).L(col_x, bottom).L(rail_x, bottom)
    d.append(path)

    for pos, y in ((conn.start, top), (conn.end, bottom)):
        d.append(draw.Text(
            str(pos.row_index),
            theme.label_font_size,
            MARGIN_X, y + CELL_HEIGHT * LABEL_BASELINE_RATIO,
            fill=theme.label_color,
            font_family=theme.label_font_family,
        ))
