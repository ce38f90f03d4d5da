from __future__ import annotations

import logging
from typing import Any, Iterable, List

from .command import Command

logger = logging.getLogger(__name__)


class InvalidSelection(LookupError):
    """A command was routed to a group or set that does not own it."""


def _require_member(members: List[Command], member: Command, owner: str) -> None:
    if not any(m is member for m in members):
        raise InvalidSelection(f"{member.label!r} is not a member of {owner}")


class MutualExclusionGroup:
    """Radio commands of which exactly one is selected at any time."""

    def __init__(self, group_id: str, members: Iterable[Command], default_index: int = 0):
        self.group_id = group_id
        self._members: List[Command] = list(members)
        if not self._members:
            raise InvalidSelection(f"Group {group_id!r} needs at least one member")
        if not 0 <= default_index < len(self._members):
            raise InvalidSelection(f"Default index {default_index} out of range for group {group_id!r}")
        for m in self._members:
            if m.kind != "radio":
                raise InvalidSelection(f"{m.label!r} is not a radio command")
            if m.group_id is not None and m.group_id != group_id:
                raise InvalidSelection(f"{m.label!r} already belongs to group {m.group_id!r}")
        for m in self._members:
            m.group_id = group_id
        self.default_index = default_index
        self._apply(self._members[default_index])

    @property
    def members(self) -> List[Command]:
        return list(self._members)

    @property
    def selected(self) -> Command:
        return next(m for m in self._members if m.selected)

    def _apply(self, chosen: Command) -> None:
        # Deselect first so an effect re-entering the group sees one selection.
        for m in self._members:
            if m is not chosen:
                m._set_selected(False)
        chosen._set_selected(True)

    def select(self, member: Command, context: Any = None) -> bool:
        """User-driven selection. Returns False when nothing changed."""
        _require_member(self._members, member, f"group {self.group_id!r}")
        if member.selected or not member.enabled:
            return False
        self._apply(member)
        member.fire(context)
        return True

    def reset_to_default(self) -> None:
        logger.debug("Resetting group %r to %r", self.group_id, self._members[self.default_index].label)
        self._apply(self._members[self.default_index])


class IndependentToggleSet:
    """Check-box style commands, each on/off on its own."""

    def __init__(self, members: Iterable[Command]):
        self._members: List[Command] = list(members)
        for m in self._members:
            if m.kind != "toggle":
                raise InvalidSelection(f"{m.label!r} is not a toggle command")

    @property
    def members(self) -> List[Command]:
        return list(self._members)

    def toggle(self, member: Command, context: Any = None) -> bool:
        _require_member(self._members, member, "toggle set")
        if not member.enabled:
            return member.selected
        member._set_selected(not member.selected)
        member.fire(context)
        return member.selected

    def reset_to_default(self) -> None:
        logger.debug("Clearing %d toggles", len(self._members))
        for m in self._members:
            m._set_selected(False)
