"""SVG rendering of crossbar wiring plans."""

from xbar.render.style import Theme
from xbar.render.svg import canvas_size, render_svg

__all__ = ["Theme", "canvas_size", "render_svg"]
