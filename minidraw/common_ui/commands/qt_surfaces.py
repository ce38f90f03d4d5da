from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Literal

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction, QActionGroup, QFont, QIcon
from PyQt6.QtWidgets import QMenu, QToolBar, QToolButton, QWidget

from ...core.constants import FONT_PREVIEW_POINT_SIZE
from .command import Command
from .registry import CommandRegistry
from .surfaces import Surface

logger = logging.getLogger(__name__)

ButtonSize = Literal["L", "M", "S"]
IconProvider = Callable[[str], "QIcon | None"]


class QtActionBinder:
    """One QAction per Command, shared by every Qt surface of a registry.

    Check marks always mirror the command model: the binder re-syncs after
    each activation or reset. Activation is wired to ``triggered`` only, which
    Qt emits for user interaction but not for ``setChecked``. A failing
    command is logged there and does not escape the Qt event loop.
    """

    def __init__(self, registry: CommandRegistry, parent=None, icon_for: IconProvider | None = None):
        self.registry = registry
        self._parent = parent
        self._icon_for = icon_for
        self._actions: dict[int, tuple[Command, QAction]] = {}
        self._groups: dict[str, QActionGroup] = {}
        registry.add_state_listener(self.sync)

    def action_for(self, cmd: Command) -> QAction:
        bound = self._actions.get(id(cmd))
        if bound is not None:
            return bound[1]

        action = QAction(cmd.label, self._parent)
        if cmd.glyph_id and self._icon_for is not None:
            icon = self._icon_for(cmd.glyph_id)
            if icon is not None:
                action.setIcon(icon)
        if cmd.tooltip:
            action.setToolTip(cmd.tooltip)
        if cmd.font_family:
            action.setFont(QFont(cmd.font_family, FONT_PREVIEW_POINT_SIZE))
        if cmd.checkable:
            action.setCheckable(True)
        if cmd.kind == "radio" and cmd.group_id is not None:
            group = self._groups.get(cmd.group_id)
            if group is None:
                group = QActionGroup(self._parent)
                group.setExclusive(True)
                self._groups[cmd.group_id] = group
            group.addAction(action)

        action.triggered.connect(lambda _checked=False, c=cmd: self._on_triggered(c))
        self._actions[id(cmd)] = (cmd, action)
        self._sync_action(cmd, action)
        return action

    def _on_triggered(self, cmd: Command):
        try:
            self.registry.activate(cmd)
        except Exception:
            logger.exception("Command %r failed", cmd.label)

    def sync(self):
        for cmd, action in self._actions.values():
            self._sync_action(cmd, action)

    @staticmethod
    def _sync_action(cmd: Command, action: QAction):
        action.setEnabled(cmd.enabled)
        if cmd.checkable and action.isChecked() != cmd.selected:
            action.setChecked(cmd.selected)


class QtMenuSurface(Surface):
    def __init__(self, menu: QMenu, binder: QtActionBinder):
        self.menu = menu
        self.binder = binder

    def add_command(self, cmd: Command):
        self.menu.addAction(self.binder.action_for(cmd))

    def add_separator(self):
        self.menu.addSeparator()

    def add_group(self, label: str) -> "QtMenuSurface":
        return QtMenuSurface(self.menu.addMenu(label), self.binder)


class QtToolBarSurface(Surface):
    """Button strip; labels are hidden, icons and tooltips carry the meaning."""

    def __init__(self, toolbar: QToolBar, binder: QtActionBinder):
        self.toolbar = toolbar
        self.binder = binder

    def add_command(self, cmd: Command):
        self.toolbar.addAction(self.binder.action_for(cmd))

    def add_separator(self):
        self.toolbar.addSeparator()

    def add_group(self, label: str) -> QtMenuSurface:
        menu = QMenu(label, self.toolbar)
        button = QToolButton(self.toolbar)
        button.setText(label)
        button.setMenu(menu)
        button.setPopupMode(QToolButton.ToolButtonPopupMode.InstantPopup)
        self.toolbar.addWidget(button)
        return QtMenuSurface(menu, self.binder)


class RibbonPanelSurface(Surface):
    """Button strip on a pyqtribbon panel."""

    UNIFORM_BUTTON_WIDTH = 96

    def __init__(self, panel, binder: QtActionBinder, size: ButtonSize = "S"):
        self.panel = panel
        self.binder = binder
        self.size = size

    def add_command(self, cmd: Command):
        action = self.binder.action_for(cmd)
        button = self._build_button(self.panel, cmd.label, action.icon(), self.size)
        if cmd.checkable:
            button.setCheckable(True)
            button.setChecked(action.isChecked())
        self._bind_clicked(button, action, cmd.label)
        self._bind_action_changed(button, action, cmd.label)

    def add_separator(self):
        self.panel.addVerticalSeparator()

    def add_group(self, label: str) -> QtMenuSurface:
        button = self._build_button(self.panel, label, None, self.size)
        menu = QMenu(label, button)
        button.setMenu(menu)
        button.setPopupMode(QToolButton.ToolButtonPopupMode.InstantPopup)
        return QtMenuSurface(menu, self.binder)

    def _bind_clicked(self, button, action: QAction, default_text: str):
        def on_clicked(*_args):
            action.trigger()
            # A checked radio action ignores the click and emits no change,
            # but the button has already toggled itself.
            self._sync_button_state(button, action, default_text)

        button.clicked.connect(on_clicked)

    def _bind_action_changed(self, button, action: QAction, default_text: str):
        def on_action_changed():
            try:
                self._sync_button_state(button, action, default_text)
            except RuntimeError:
                # Button widget is gone; stop listening.
                try:
                    action.changed.disconnect(on_action_changed)
                except (RuntimeError, TypeError):
                    pass

        action.changed.connect(on_action_changed)
        on_action_changed()

    @staticmethod
    def _build_button(panel, text, icon, size: ButtonSize):
        if size == "L":
            button = panel.addLargeButton(text, icon)
        elif size == "M":
            button = panel.addMediumButton(text, icon)
        else:
            button = panel.addSmallButton(text, icon)

        width = RibbonPanelSurface.UNIFORM_BUTTON_WIDTH
        if hasattr(button, "setMinimumWidth"):
            button.setMinimumWidth(width)
        if hasattr(button, "setMaximumWidth"):
            button.setMaximumWidth(width)
        return button

    @staticmethod
    def _sync_button_state(button, action: QAction, default_text: str):
        button.setEnabled(action.isEnabled())
        button.setToolTip(action.toolTip())
        if action.isCheckable():
            button.setCheckable(True)
            button.setChecked(action.isChecked())
        button.setText(default_text or action.text())


def render_menu(registry: CommandRegistry, binder: QtActionBinder, title: str | None = None,
                parent: QWidget | None = None) -> QMenu:
    menu = QMenu(title if title is not None else registry.title, parent)
    registry.for_each_command(QtMenuSurface(menu, binder))
    return menu


def render_toolbar(registry: CommandRegistry, binder: QtActionBinder, horizontal: bool = True,
                   parent: QWidget | None = None) -> QToolBar:
    toolbar = QToolBar(registry.title, parent)
    toolbar.setOrientation(Qt.Orientation.Horizontal if horizontal else Qt.Orientation.Vertical)
    toolbar.setToolButtonStyle(Qt.ToolButtonStyle.ToolButtonIconOnly)
    registry.for_each_command(QtToolBarSurface(toolbar, binder))
    return toolbar


def render_ribbon_panel(category, registry: CommandRegistry, binder: QtActionBinder,
                        title: str | None = None, size: ButtonSize = "S"):
    panel = category.addPanel(title if title is not None else registry.title)
    registry.for_each_command(RibbonPanelSurface(panel, binder, size=size))
    logger.debug("Rendered %d commands onto ribbon panel %r", len(registry.commands()), title)
    return panel
