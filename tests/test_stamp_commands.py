from minidraw.common_ui.commands import OutlineSurface
from minidraw.core.model import DrawingState, StampGlyph
from minidraw.ui.stamp_commands import ERASER_TOOLTIP, STAMP_TOOLTIP, build_stamp_registry


def _glyphs(*names, size=(32, 24)):
    return {n: StampGlyph(name=n, image=f"<img {n}>", width=size[0], height=size[1]) for n in names}


def test_icons_keep_catalogue_order_and_eraser_is_separated_last():
    # Deliberately out of order and missing most icons.
    reg = build_stamp_registry(DrawingState(), _glyphs("tv", "bell", "star"))
    outline = reg.for_each_command(OutlineSurface()).labels()

    assert outline == ["bell", "star", "tv", "-", "Eraser"]


def test_stamp_command_sets_image_and_centered_cursor():
    state = DrawingState()
    reg = build_stamp_registry(state, _glyphs("camera", size=(40, 31)))
    camera = reg.commands()[0]

    assert camera.glyph_id == "camera"
    assert camera.tooltip == STAMP_TOOLTIP
    reg.activate(camera)

    assert state.stamp_image == "<img camera>"
    assert state.cursor.image == "<img camera>"
    assert (state.cursor.hotspot_x, state.cursor.hotspot_y) == (20, 15)


def test_eraser_clears_stamp_and_restores_crosshair():
    state = DrawingState()
    reg = build_stamp_registry(state, _glyphs("bomb"))
    bomb, eraser = reg.commands()
    reg.activate(bomb)

    reg.activate(eraser)

    assert eraser.tooltip == ERASER_TOOLTIP
    assert eraser.glyph_id == "eraser"
    assert state.stamp_image is None
    assert state.cursor.image is None


def test_no_icons_leaves_only_eraser():
    reg = build_stamp_registry(DrawingState(), {})
    assert reg.for_each_command(OutlineSurface()).labels() == ["-", "Eraser"]
