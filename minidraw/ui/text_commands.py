"""Commands that change the text item of a drawing.

Builds the "Text" menu: text/size/line-height/color editors, Italic and Bold
check boxes, a Justify radio sub-menu and a Font Name sub-menu. Call
``registry.reset_all()`` after the drawing is reset to a fresh text item so
the check marks match it again.

Dialogs go through a ``Prompter``; ``prompts.QtPrompter`` is the Qt one.
"""
from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

from ..common_ui.commands import (
    Activation,
    CommandRegistry,
    IndependentToggleSet,
    MutualExclusionGroup,
    plain_command,
    radio_command,
    toggle_command,
)
from ..core.constants import BASIC_FONT_FAMILIES, DEFAULT_JUSTIFY, JUSTIFY_CHOICES
from ..core.model import DrawingContext
from ..core.validation import TextInputError, is_blank, parse_font_size, parse_line_height

if TYPE_CHECKING:
    from .prompts import Prompter

logger = logging.getLogger(__name__)

LabelSource = Callable[[], Sequence[str]]


def installed_font_families() -> list[str]:
    from PyQt6.QtGui import QFontDatabase

    return sorted(QFontDatabase.families(), key=str.casefold)


def _set_and_repaint(ctx: DrawingContext, name: str, value):
    ctx.set_text_attribute(name, value)
    ctx.repaint()


def build_text_registry(
    context: DrawingContext,
    prompts: Prompter,
    font_names: Sequence[str] | LabelSource = (),
) -> CommandRegistry:
    registry = CommandRegistry(context, title="Text")

    def change_text(ev: Activation):
        new_text = prompts.ask_text("Change Text", "Enter the text to display:", ev.context.text_attribute("text"))
        if not is_blank(new_text):
            _set_and_repaint(ev.context, "text", new_text)

    def numeric_editor(attr: str, prompt: str, parse: Callable[[str], object]):
        def effect(ev: Activation):
            raw = prompts.ask_value(prompt, ev.context.text_attribute(attr))
            if is_blank(raw):
                return
            try:
                value = parse(raw)
            except TextInputError as exc:
                logger.debug("Rejected %s input %r", attr, raw)
                prompts.show_error(str(exc))
                return
            _set_and_repaint(ev.context, attr, value)
        return effect

    def set_color(ev: Activation):
        color = prompts.choose_color("Select Text Color", ev.context.text_attribute("color"))
        if color is not None:
            _set_and_repaint(ev.context, "color", color)

    registry.add_command(plain_command("Change Text...", change_text))
    registry.add_separator()
    registry.add_command(plain_command(
        "Set Size...", numeric_editor("font_size", "What font size do you want to use?", parse_font_size)))
    registry.add_command(plain_command(
        "Set Line Height...", numeric_editor("line_height_multiplier", "What line height do you want?", parse_line_height)))
    registry.add_command(plain_command("Set Color...", set_color))

    registry.add_toggles(IndependentToggleSet([
        toggle_command("Italic", lambda ev: _set_and_repaint(ev.context, "italic", ev.selected)),
        toggle_command("Bold", lambda ev: _set_and_repaint(ev.context, "bold", ev.selected)),
    ]))

    def set_justify(ev: Activation):
        _set_and_repaint(ev.context, "justify", ev.command.value)

    justify = [radio_command(label, set_justify, value=value) for label, value in JUSTIFY_CHOICES]
    default_index = next(i for i, (_, value) in enumerate(JUSTIFY_CHOICES) if value == DEFAULT_JUSTIFY)
    registry.add_exclusive(MutualExclusionGroup("justify", justify, default_index=default_index), label="Justify")
    registry.add_separator()

    def set_font(ev: Activation):
        _set_and_repaint(ev.context, "font_name", ev.command.value)

    names = list(font_names() if callable(font_names) else font_names)
    leading = [plain_command(f"{f} Default", set_font, value=f, font_family=f) for f in BASIC_FONT_FAMILIES]
    registry.add_choices("Font Name", names, set_font, leading=leading, preview_font=True)
    return registry


def build_text_menu(registry: CommandRegistry, binder, parent=None):
    from ..common_ui.commands.qt_surfaces import render_menu

    return render_menu(registry, binder, title="Text", parent=parent)
