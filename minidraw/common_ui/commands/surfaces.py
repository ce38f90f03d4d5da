from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Tuple, Union

from .command import Command


class Surface(ABC):
    """A presentation target (button strip, menu) a registry is replayed onto."""

    @abstractmethod
    def add_command(self, cmd: Command):
        raise NotImplementedError

    @abstractmethod
    def add_separator(self):
        raise NotImplementedError

    @abstractmethod
    def add_group(self, label: str) -> "Surface":
        raise NotImplementedError


OutlineEntry = Union[Command, str, Tuple[str, list]]


class OutlineSurface(Surface):
    """Records what was rendered as a nested list.

    Commands are stored as-is, separators as ``"-"`` and groups as
    ``(label, entries)`` tuples.
    """

    SEPARATOR = "-"

    def __init__(self):
        self.entries: List[OutlineEntry] = []

    def add_command(self, cmd: Command):
        self.entries.append(cmd)

    def add_separator(self):
        self.entries.append(self.SEPARATOR)

    def add_group(self, label: str) -> "OutlineSurface":
        child = OutlineSurface()
        self.entries.append((label, child.entries))
        return child

    def labels(self) -> list:
        """Same shape as ``entries`` with commands replaced by their labels."""

        def _walk(entries):
            out = []
            for e in entries:
                if isinstance(e, Command):
                    out.append(e.label)
                elif isinstance(e, tuple):
                    out.append((e[0], _walk(e[1])))
                else:
                    out.append(e)
            return out

        return _walk(self.entries)
