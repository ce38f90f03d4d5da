from __future__ import annotations

from typing import Final, Literal, Tuple

JUSTIFY = Literal["LEFT", "CENTER", "RIGHT"]
TEXT_ATTRIBUTE = Literal[
    "text", "font_name", "font_size", "line_height_multiplier", "color", "bold", "italic", "justify",
]

# Bucket partitioning of long label lists (font families).
FLAT_THRESHOLD: Final[int] = 20
MAX_BUCKET: Final[int] = 12
MIN_TAIL: Final[int] = 4
ALPHABET_FIRST: Final[str] = "A"
ALPHABET_LAST: Final[str] = "Z"

STAMP_ICON_NAMES: Final[Tuple[str, ...]] = (
    "bell", "camera", "flower", "star", "check", "crossout",
    "tux", "bomb", "keyboard", "lightbulb", "tv",
)
ERASER_GLYPH_ID: Final[str] = "eraser"
ICON_DIR_ENV: Final[str] = "MINIDRAW_ICON_DIR"

# (label, justify value); order is menu order, first entry is the default.
JUSTIFY_CHOICES: Final[Tuple[Tuple[str, JUSTIFY], ...]] = (
    ("Left", "LEFT"),
    ("Right", "RIGHT"),
    ("Center", "CENTER"),
)
DEFAULT_JUSTIFY: Final[JUSTIFY] = "LEFT"

BASIC_FONT_FAMILIES: Final[Tuple[str, ...]] = ("Serif", "SansSerif", "Monospace")
DEFAULT_FONT_NAME: Final[str] = "Serif"
DEFAULT_FONT_SIZE: Final[int] = 36
DEFAULT_LINE_HEIGHT: Final[float] = 1.0
DEFAULT_TEXT_COLOR: Final[str] = "#000000"
DEFAULT_TEXT: Final[str] = "Hello World!"
FONT_PREVIEW_POINT_SIZE: Final[int] = 12
