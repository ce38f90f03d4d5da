from __future__ import annotations
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, Optional, Protocol

from .constants import (
    DEFAULT_FONT_NAME,
    DEFAULT_FONT_SIZE,
    DEFAULT_JUSTIFY,
    DEFAULT_LINE_HEIGHT,
    DEFAULT_TEXT,
    DEFAULT_TEXT_COLOR,
    JUSTIFY,
)


class DrawingContext(Protocol):
    """What command effects may touch on the drawing side.

    The real canvas lives outside this package; anything with these methods
    can own a command registry.
    """

    def set_current_stamp_image(self, image: Any | None) -> None: ...

    def set_cursor_glyph(self, image: Any | None, hotspot_x: int, hotspot_y: int) -> None: ...

    def set_text_attribute(self, name: str, value: Any) -> None: ...

    def text_attribute(self, name: str) -> Any: ...

    def repaint(self) -> None: ...


@dataclass
class TextItem:
    text: str = DEFAULT_TEXT
    font_name: str = DEFAULT_FONT_NAME
    font_size: int = DEFAULT_FONT_SIZE
    line_height_multiplier: float = DEFAULT_LINE_HEIGHT
    color: str = DEFAULT_TEXT_COLOR
    bold: bool = False
    italic: bool = False
    justify: JUSTIFY = DEFAULT_JUSTIFY

    def set_font_size(self, size: int) -> None:
        if size <= 0:
            raise ValueError("font size must be > 0")
        self.font_size = int(size)

    def set_line_height_multiplier(self, multiplier: float) -> None:
        if multiplier <= 0:
            raise ValueError("line height multiplier must be > 0")
        self.line_height_multiplier = float(multiplier)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class StampGlyph:
    name: str
    image: Any  # QImage in the app; opaque here
    width: int
    height: int


@dataclass
class CursorGlyph:
    image: Any = None  # None -> crosshair
    hotspot_x: int = 0
    hotspot_y: int = 0


@dataclass
class DrawingState:
    """Headless DrawingContext: records what the commands asked for."""
    text_item: TextItem = field(default_factory=TextItem)
    stamp_image: Optional[Any] = None
    cursor: CursorGlyph = field(default_factory=CursorGlyph)
    repaint_count: int = 0

    def set_current_stamp_image(self, image: Any | None) -> None:
        self.stamp_image = image

    def set_cursor_glyph(self, image: Any | None, hotspot_x: int, hotspot_y: int) -> None:
        self.cursor = CursorGlyph(image=image, hotspot_x=int(hotspot_x), hotspot_y=int(hotspot_y))

    def set_text_attribute(self, name: str, value: Any) -> None:
        if name == "font_size":
            self.text_item.set_font_size(value)
        elif name == "line_height_multiplier":
            self.text_item.set_line_height_multiplier(value)
        elif hasattr(self.text_item, name):
            setattr(self.text_item, name, value)
        else:
            raise KeyError(f"Unknown text attribute: {name}")

    def text_attribute(self, name: str) -> Any:
        if not hasattr(self.text_item, name):
            raise KeyError(f"Unknown text attribute: {name}")
        return getattr(self.text_item, name)

    def repaint(self) -> None:
        self.repaint_count += 1

    def reset(self) -> None:
        # "New" picture: default text item, no stamp selected.
        self.text_item = TextItem()
        self.stamp_image = None
        self.cursor = CursorGlyph()
        self.repaint()
