from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Dict, Iterable

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QColor, QIcon, QImage, QPainter, QPixmap

from ..core.constants import ERASER_GLYPH_ID, ICON_DIR_ENV, STAMP_ICON_NAMES
from ..core.model import StampGlyph

logger = logging.getLogger(__name__)


def _resource_base_dir() -> Path:
    """Return runtime directory for bundled resources (PyInstaller-safe)."""
    if getattr(sys, "frozen", False):
        meipass = getattr(sys, "_MEIPASS", None)
        if meipass:
            return Path(meipass).resolve()
        return Path(sys.executable).resolve().parent
    return Path(__file__).resolve().parents[1]


def icon_dir() -> Path:
    override = os.environ.get(ICON_DIR_ENV)
    if override:
        return Path(override).expanduser()
    return _resource_base_dir() / "assets" / "icons"


def load_stamp_glyphs(names: Iterable[str] = STAMP_ICON_NAMES, directory: Path | None = None) -> Dict[str, StampGlyph]:
    """Load ``<name>.png`` for each name, skipping the ones that fail."""
    base = directory or icon_dir()
    out: Dict[str, StampGlyph] = {}
    for name in names:
        path = base / f"{name}.png"
        img = QImage(str(path))
        if img.isNull():
            logger.warning("Stamp icon %s could not be loaded from %s", name, path)
            continue
        out[name] = StampGlyph(name=name, image=img, width=img.width(), height=img.height())
    return out


def make_eraser_image(size: int = 32) -> QImage:
    img = QImage(size, size, QImage.Format.Format_ARGB32)
    img.fill(QColor(Qt.GlobalColor.white))
    painter = QPainter(img)
    try:
        painter.setPen(QColor(Qt.GlobalColor.red))
        painter.drawText(5, 20, "DEL")
    finally:
        painter.end()
    return img


class GlyphIcons:
    """glyph_id -> QIcon lookup for QtActionBinder."""

    def __init__(self, glyphs: Dict[str, StampGlyph], eraser: QImage | None = None):
        self._images = {name: g.image for name, g in glyphs.items()}
        self._images[ERASER_GLYPH_ID] = eraser if eraser is not None else make_eraser_image()
        self._cache: Dict[str, QIcon] = {}

    def __call__(self, glyph_id: str) -> QIcon | None:
        if glyph_id in self._cache:
            return self._cache[glyph_id]
        img = self._images.get(glyph_id)
        if img is None:
            return None
        icon = QIcon(QPixmap.fromImage(img))
        self._cache[glyph_id] = icon
        return icon
