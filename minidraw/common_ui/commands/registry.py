from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any, Literal

from ...core.constants import FLAT_THRESHOLD
from ...core.partition import PartitionGroup, partition_labels
from .command import Command, Effect, plain_command
from .groups import IndependentToggleSet, InvalidSelection, MutualExclusionGroup
from .surfaces import Surface

logger = logging.getLogger(__name__)

EntryKind = Literal["command", "separator", "section"]


@dataclass(slots=True)
class RegistryEntry:
    kind: EntryKind
    command: Command | None = None
    label: str = ""
    children: list[RegistryEntry] = field(default_factory=list)


class CommandRegistry:
    """Ordered commands for one UI context, rendered onto any number of surfaces."""

    def __init__(self, context: Any, title: str = ""):
        self.context = context
        self.title = title
        self._entries: list[RegistryEntry] = []
        self._trailing: Command | None = None
        self._group: MutualExclusionGroup | None = None
        self._toggles: IndependentToggleSet | None = None
        self._listeners: list[Callable[[], None]] = []

    # ---------------- assembly ----------------
    def add_command(self, cmd: Command) -> Command:
        self._entries.append(RegistryEntry("command", cmd))
        return cmd

    def add_separator(self):
        self._entries.append(RegistryEntry("separator"))

    def add_toggles(self, toggles: IndependentToggleSet) -> IndependentToggleSet:
        if self._toggles is not None:
            raise InvalidSelection("Registry already owns a toggle set")
        self._toggles = toggles
        for m in toggles.members:
            self._entries.append(RegistryEntry("command", m))
        return toggles

    def add_exclusive(self, group: MutualExclusionGroup, label: str | None = None) -> MutualExclusionGroup:
        if self._group is not None:
            raise InvalidSelection("Registry already owns an exclusive group")
        self._group = group
        entries = [RegistryEntry("command", m) for m in group.members]
        if label is None:
            self._entries.extend(entries)
        else:
            self._entries.append(RegistryEntry("section", label=label, children=entries))
        return group

    def add_choices(
        self,
        label: str,
        labels: Sequence[str],
        effect: Effect,
        leading: Iterable[Command] = (),
        preview_font: bool = False,
    ) -> list[Command]:
        """Section with one plain command per label, nested by letter range when long.

        With ``preview_font`` each choice carries its label as ``font_family`` so
        surfaces can draw it in its own face.
        """
        section = RegistryEntry("section", label=label)
        created: list[Command] = []
        for cmd in leading:
            section.children.append(RegistryEntry("command", cmd))
            created.append(cmd)
        if section.children and labels:
            section.children.append(RegistryEntry("separator"))

        def _choice(name: str) -> RegistryEntry:
            cmd = plain_command(name, effect, value=name, font_family=name if preview_font else None)
            created.append(cmd)
            return RegistryEntry("command", cmd)

        nodes = partition_labels(labels, flat_threshold=FLAT_THRESHOLD)
        for node in nodes:
            if isinstance(node, PartitionGroup):
                section.children.append(RegistryEntry(
                    "section",
                    label=node.range_label,
                    children=[_choice(leaf.label) for leaf in node.children],
                ))
            else:
                section.children.append(_choice(node.label))
        logger.debug("Choices %r: %d labels in %d top-level nodes", label, len(labels), len(nodes))
        self._entries.append(section)
        return created

    def set_trailing(self, cmd: Command) -> Command:
        self._trailing = cmd
        return cmd

    # ---------------- traversal ----------------
    def for_each_command(self, surface: Surface) -> Surface:
        self._replay(self._entries, surface)
        if self._trailing is not None:
            surface.add_separator()
            surface.add_command(self._trailing)
        return surface

    def _replay(self, entries: list[RegistryEntry], surface: Surface):
        for entry in entries:
            if entry.kind == "command":
                surface.add_command(entry.command)
            elif entry.kind == "separator":
                surface.add_separator()
            else:
                self._replay(entry.children, surface.add_group(entry.label))

    def commands(self) -> list[Command]:
        out: list[Command] = []

        def _walk(entries: list[RegistryEntry]):
            for entry in entries:
                if entry.kind == "command":
                    out.append(entry.command)
                elif entry.kind == "section":
                    _walk(entry.children)

        _walk(self._entries)
        if self._trailing is not None:
            out.append(self._trailing)
        return out

    @property
    def exclusive_group(self) -> MutualExclusionGroup | None:
        return self._group

    @property
    def toggles(self) -> IndependentToggleSet | None:
        return self._toggles

    # ---------------- state ----------------
    def add_state_listener(self, callback: Callable[[], None]):
        self._listeners.append(callback)

    def _notify(self):
        for callback in list(self._listeners):
            callback()

    def activate(self, cmd: Command):
        """Entry point for user interaction on any surface."""
        if not any(c is cmd for c in self.commands()):
            raise InvalidSelection(f"{cmd.label!r} is not registered in {self.title or 'this registry'}")
        try:
            if cmd.kind == "radio":
                if self._group is None or cmd.group_id != self._group.group_id:
                    raise InvalidSelection(f"{cmd.label!r} has no owning group here")
                self._group.select(cmd, self.context)
            elif cmd.kind == "toggle":
                if self._toggles is None:
                    raise InvalidSelection(f"{cmd.label!r} has no owning toggle set here")
                self._toggles.toggle(cmd, self.context)
            else:
                cmd.fire(self.context)
        finally:
            self._notify()

    def reset_all(self):
        if self._group is not None:
            self._group.reset_to_default()
        if self._toggles is not None:
            self._toggles.reset_to_default()
        self._notify()
