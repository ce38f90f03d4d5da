import sys
import types
from pathlib import Path

import pytest


class _FakeImage:
    Format = types.SimpleNamespace(Format_ARGB32="argb32")

    def __init__(self, *args):
        if len(args) == 1:
            self.path = args[0]
            self._null = not Path(args[0]).exists()
            self._size = (16, 12)
        else:
            self.path = None
            self._null = False
            self._size = (args[0], args[1])
        self.fill_color = None

    def isNull(self):
        return self._null

    def width(self):
        return self._size[0]

    def height(self):
        return self._size[1]

    def fill(self, color):
        self.fill_color = color


class _FakePainter:
    instances = []

    def __init__(self, image):
        self.image = image
        self.texts = []
        self.ended = False
        _FakePainter.instances.append(self)

    def setPen(self, pen):
        self.pen = pen

    def drawText(self, x, y, text):
        self.texts.append((x, y, text))

    def end(self):
        self.ended = True


class _FakeIcon:
    def __init__(self, pixmap):
        self.pixmap = pixmap


class _FakePixmap:
    @staticmethod
    def fromImage(img):
        return ("pixmap", img)


class _FakeInputDialog:
    answer = ("", False)
    calls = []

    @classmethod
    def getText(cls, parent, title, prompt, text=""):
        cls.calls.append((title, prompt, text))
        return cls.answer


class _FakeColor:
    def __init__(self, name, valid=True):
        self._name = name
        self._valid = valid

    def isValid(self):
        return self._valid

    def name(self):
        return self._name


class _FakeColorDialog:
    result = None

    @classmethod
    def getColor(cls, initial, parent, title):
        return cls.result


class _FakeMessageBox:
    shown = []

    @classmethod
    def information(cls, parent, title, message):
        cls.shown.append((title, message))


@pytest.fixture(autouse=True)
def _stub_pyqt_modules(monkeypatch):
    qtcore = types.SimpleNamespace(Qt=types.SimpleNamespace(GlobalColor=types.SimpleNamespace(white="white", red="red")))
    qtgui = types.SimpleNamespace(
        QColor=lambda c: c,
        QIcon=_FakeIcon,
        QImage=_FakeImage,
        QPainter=_FakePainter,
        QPixmap=_FakePixmap,
    )
    qtwidgets = types.SimpleNamespace(
        QColorDialog=_FakeColorDialog,
        QInputDialog=_FakeInputDialog,
        QMessageBox=_FakeMessageBox,
        QWidget=type("QWidget", (), {}),
    )
    pyqt6 = types.SimpleNamespace(QtCore=qtcore, QtGui=qtgui, QtWidgets=qtwidgets)

    monkeypatch.setitem(sys.modules, "PyQt6", pyqt6)
    monkeypatch.setitem(sys.modules, "PyQt6.QtCore", qtcore)
    monkeypatch.setitem(sys.modules, "PyQt6.QtGui", qtgui)
    monkeypatch.setitem(sys.modules, "PyQt6.QtWidgets", qtwidgets)
    monkeypatch.delitem(sys.modules, "minidraw.ui.icon_catalogue", raising=False)
    monkeypatch.delitem(sys.modules, "minidraw.ui.prompts", raising=False)


def test_icon_dir_env_override(monkeypatch, tmp_path):
    from minidraw.ui.icon_catalogue import icon_dir

    monkeypatch.setenv("MINIDRAW_ICON_DIR", str(tmp_path))
    assert icon_dir() == tmp_path

    monkeypatch.delenv("MINIDRAW_ICON_DIR")
    assert icon_dir().parts[-2:] == ("assets", "icons")


def test_missing_icons_are_skipped(tmp_path, caplog):
    from minidraw.ui.icon_catalogue import load_stamp_glyphs

    (tmp_path / "bell.png").write_bytes(b"png")
    (tmp_path / "tv.png").write_bytes(b"png")

    with caplog.at_level("WARNING"):
        glyphs = load_stamp_glyphs(["bell", "camera", "tv"], directory=tmp_path)

    assert list(glyphs) == ["bell", "tv"]
    assert (glyphs["bell"].width, glyphs["bell"].height) == (16, 12)
    assert "camera" in caplog.text


def test_glyph_icons_cache_and_eraser():
    from minidraw.core.model import StampGlyph
    from minidraw.ui.icon_catalogue import GlyphIcons

    _FakePainter.instances.clear()
    icons = GlyphIcons({"bell": StampGlyph("bell", "bell-img", 8, 8)})

    bell = icons("bell")
    assert bell is icons("bell")
    assert bell.pixmap == ("pixmap", "bell-img")
    assert icons("eraser") is not None
    assert icons("unknown") is None

    painter, = _FakePainter.instances
    assert painter.texts == [(5, 20, "DEL")]
    assert painter.ended
    assert painter.image.fill_color == "white"


def test_qt_prompter_maps_cancel_to_none():
    from minidraw.ui.prompts import QtPrompter

    prompter = QtPrompter()
    _FakeInputDialog.answer = ("48", True)
    assert prompter.ask_value("What font size do you want to use?", 36) == "48"
    assert _FakeInputDialog.calls[-1] == ("Input", "What font size do you want to use?", "36")

    _FakeInputDialog.answer = ("ignored", False)
    assert prompter.ask_text("Change Text", "Enter the text to display:", "Hi") is None

    _FakeColorDialog.result = _FakeColor("#00ff00")
    assert prompter.choose_color("Select Text Color", "#000000") == "#00ff00"
    _FakeColorDialog.result = _FakeColor("", valid=False)
    assert prompter.choose_color("Select Text Color", "#000000") is None

    prompter.show_error("bad")
    assert _FakeMessageBox.shown[-1] == ("Text", "bad")
