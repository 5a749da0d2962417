"""Render constants used across render modules.

Centralizes the crossbar drawing geometry. Theme-dependent values remain
in style.py.
"""

# ---------------------------------------------------------------------------
# Grid cells
# ---------------------------------------------------------------------------
CELL_WIDTH: int = 20
"""Horizontal distance between two wiring columns."""

CELL_HEIGHT: int = 20
"""Vertical distance between two rows."""

# ---------------------------------------------------------------------------
# Canvas
# ---------------------------------------------------------------------------
MARGIN_X: int = 40
"""Left and right margin around the drawing."""

MARGIN_Y: int = 40
"""Top and bottom margin around the drawing."""

LEFT_TEXT_PAD: int = 30
"""Room left of the terminal rail for the row labels."""

BLOCK_SPACER_ROWS: int = 1
"""Empty rows inserted between two consecutive blocks."""

# ---------------------------------------------------------------------------
# Labels
# ---------------------------------------------------------------------------
LABEL_BASELINE_RATIO: float = 0.25
"""Label baseline offset below its row, as a fraction of CELL_HEIGHT."""

# ---------------------------------------------------------------------------
# Separators
# ---------------------------------------------------------------------------
SEPARATOR_DASH: str = "4,4"
"""Dash pattern of the block separator lines."""

SEPARATOR_STROKE_WIDTH: float = 1.0
"""Stroke width of the block separator lines."""
