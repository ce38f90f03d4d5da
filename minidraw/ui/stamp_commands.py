"""Stamp tool commands. Glyphs come from ``icon_catalogue.load_stamp_glyphs``
and toolbar icons from ``icon_catalogue.GlyphIcons``.
"""
from __future__ import annotations

from typing import Dict

from ..common_ui.commands import Activation, CommandRegistry, plain_command
from ..core.constants import ERASER_GLYPH_ID, STAMP_ICON_NAMES
from ..core.model import DrawingContext, StampGlyph

STAMP_TOOLTIP = "Use Mouse to Stamp this Icon"
ERASER_TOOLTIP = "Use Mouse to Erase Icons"


def _stamp(glyph: StampGlyph):
    def effect(ev: Activation):
        ev.context.set_current_stamp_image(glyph.image)
        ev.context.set_cursor_glyph(glyph.image, glyph.width // 2, glyph.height // 2)
    return effect


def _erase(ev: Activation):
    ev.context.set_current_stamp_image(None)
    # No image: the canvas falls back to its crosshair cursor.
    ev.context.set_cursor_glyph(None, 0, 0)


def build_stamp_registry(context: DrawingContext, glyphs: Dict[str, StampGlyph]) -> CommandRegistry:
    """Stamper commands in icon order; icons that failed to load are left out."""
    registry = CommandRegistry(context, title="Stamper")
    for name in STAMP_ICON_NAMES:
        glyph = glyphs.get(name)
        if glyph is None:
            continue
        registry.add_command(plain_command(name, _stamp(glyph), glyph_id=name, tooltip=STAMP_TOOLTIP))
    registry.set_trailing(plain_command("Eraser", _erase, glyph_id=ERASER_GLYPH_ID, tooltip=ERASER_TOOLTIP))
    return registry


def build_stamp_toolbar(registry: CommandRegistry, binder, horizontal: bool = True, parent=None):
    from ..common_ui.commands.qt_surfaces import render_toolbar

    return render_toolbar(registry, binder, horizontal=horizontal, parent=parent)


def build_stamp_menu(registry: CommandRegistry, binder, parent=None):
    from ..common_ui.commands.qt_surfaces import render_menu

    return render_menu(registry, binder, title="Stamper", parent=parent)
