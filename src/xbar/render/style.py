"""Theme and style constants for crossbar rendering."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Theme:
    """Visual theme for a crossbar drawing."""

    name: str
    background_color: str
    border_color: str
    border_width: float
    wire_color: str
    wire_width: float
    label_color: str
    label_font_family: str
    label_font_size: float
    separator_color: str = ""  # empty = inherit border_color
