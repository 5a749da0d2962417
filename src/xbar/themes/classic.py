"""Classic theme: black wires on white paper."""

from xbar.render.style import Theme

CLASSIC_THEME = Theme(
    name="classic",
    background_color="#ffffff",
    border_color="#444444",
    border_width=2.0,
    wire_color="black",
    wire_width=2.0,
    label_color="#000000",
    label_font_family="sans-serif",
    label_font_size=20.0,
    separator_color="#cccccc",
)
