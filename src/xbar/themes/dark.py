"""Dark grey theme."""

from xbar.render.style import Theme

DARK_THEME = Theme(
    name="dark",
    background_color="#2b2b2b",
    border_color="#555555",
    border_width=2.0,
    wire_color="#e0e0e0",
    wire_width=2.0,
    label_color="#aaaaaa",
    label_font_family="'Helvetica Neue', Helvetica, Arial, sans-serif",
    label_font_size=18.0,
)
