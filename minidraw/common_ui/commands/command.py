from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Literal

logger = logging.getLogger(__name__)

CommandKind = Literal["plain", "toggle", "radio"]


@dataclass(frozen=True, slots=True)
class Activation:
    context: Any
    command: "Command"
    selected: bool


Effect = Callable[[Activation], None]


@dataclass(eq=False, slots=True)
class Command:
    """One user action, shared by every surface it is rendered on.

    ``selected`` is read-only here; only the owning MutualExclusionGroup or
    IndependentToggleSet changes it.
    """

    label: str
    effect: Effect
    kind: CommandKind = "plain"
    glyph_id: str | None = None
    tooltip: str = ""
    value: Any = None
    enabled: bool = True
    group_id: str | None = None
    font_family: str | None = None
    _selected: bool = field(default=False, init=False, repr=False)

    @property
    def selected(self) -> bool:
        return self._selected

    @property
    def checkable(self) -> bool:
        return self.kind != "plain"

    def _set_selected(self, selected: bool) -> None:
        self._selected = bool(selected)

    def fire(self, context: Any) -> bool:
        if not self.enabled:
            logger.debug("Ignoring disabled command %r", self.label)
            return False
        logger.debug("Command %r fired (selected=%s)", self.label, self._selected)
        self.effect(Activation(context=context, command=self, selected=self._selected))
        return True


def plain_command(label: str, effect: Effect, **kwargs) -> Command:
    return Command(label, effect, kind="plain", **kwargs)


def toggle_command(label: str, effect: Effect, **kwargs) -> Command:
    return Command(label, effect, kind="toggle", **kwargs)


def radio_command(label: str, effect: Effect, **kwargs) -> Command:
    return Command(label, effect, kind="radio", **kwargs)
