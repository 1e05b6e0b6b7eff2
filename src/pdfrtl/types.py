"""Type aliases used across the pdfrtl package."""

from typing import Literal

# Horizontal alignment of a laid out line
Alignment = Literal["left", "center", "right"]

# Font style and weight names understood by renderers
FontStyle = Literal["normal", "italic"]
FontWeight = Literal["normal", "bold"]
