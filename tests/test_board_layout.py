from lightsout.config import GameConfig
from lightsout.render.board_view import BoardLayout

def test_nine_by_nine_geometry():
    lay = BoardLayout.for_size(9)
    assert lay.scale == 40
    assert lay.origin == (280, 0)
    assert lay.cell_rect(0, 0) == (280, 0, 40, 40)
    assert lay.cell_rect(1, 2) == (320, 80, 40, 40)
    assert len(list(lay.cells())) == 81

def test_five_by_five_scale():
    assert BoardLayout.for_size(5).scale == 72

def test_pixel_to_board():
    lay = BoardLayout.for_size(9)
    assert lay.to_board(280, 0) == (0, 0)
    assert lay.to_board(319, 39) == (0, 0)
    assert lay.to_board(320, 40) == (1, 1)
    assert lay.to_board(639, 359) == (8, 8)
    # left of the board stays negative instead of rounding to column 0
    assert lay.to_board(279, 10) == (-1, 0)
    assert lay.to_board(0, 0)[0] < 0

def test_leftover_pixels_fall_off_board():
    # 360 // 7 == 51, so the last 3 columns of pixels map to x == 7
    lay = BoardLayout.for_size(7)
    assert lay.to_board(280 + 7 * 51, 0) == (7, 0)

def test_layout_follows_config():
    cfg = GameConfig(framebuffer_size=(400, 200), frame_dimension=200)
    lay = BoardLayout.for_size(4, cfg)
    assert lay.origin == (200, 0)
    assert lay.scale == 50
