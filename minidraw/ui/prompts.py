from __future__ import annotations

from typing import Any, Protocol

from PyQt6.QtGui import QColor
from PyQt6.QtWidgets import QColorDialog, QInputDialog, QMessageBox, QWidget


class Prompter(Protocol):
    """Modal dialogs the text commands need. ``None`` means cancelled."""

    def ask_text(self, title: str, prompt: str, current: str) -> str | None: ...

    def ask_value(self, prompt: str, current: Any) -> str | None: ...

    def choose_color(self, title: str, current: str) -> str | None: ...

    def show_error(self, message: str) -> None: ...


class QtPrompter:
    def __init__(self, parent: QWidget | None = None):
        self.parent = parent

    def ask_text(self, title: str, prompt: str, current: str) -> str | None:
        text, ok = QInputDialog.getText(self.parent, title, prompt, text=current)
        return text if ok else None

    def ask_value(self, prompt: str, current: Any) -> str | None:
        text, ok = QInputDialog.getText(self.parent, "Input", prompt, text=str(current))
        return text if ok else None

    def choose_color(self, title: str, current: str) -> str | None:
        color = QColorDialog.getColor(QColor(current), self.parent, title)
        if not color.isValid():
            return None
        return color.name()

    def show_error(self, message: str) -> None:
        QMessageBox.information(self.parent, "Text", message)
