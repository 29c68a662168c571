import curses
import random

import pytest

import main
import ui
from config import CELL_HEIGHT, CELL_WIDTH, FACE_COLORS, FACE_HEIGHT, FACE_WIDTH, FALLBACK_PAIR
from cube_state import Cube


class FakeScreen:
    """Records addstr calls instead of drawing"""

    def __init__(self, height=40, width=120):
        self.height = height
        self.width = width
        self.calls = []

    def getmaxyx(self):
        return self.height, self.width

    def addstr(self, y, x, text, attr=0):
        if not (0 <= y < self.height and 0 <= x < self.width):
            raise curses.error("addstr out of window")
        self.calls.append((y, x, text, attr))

    def clear(self):
        self.calls = []

    def refresh(self):
        pass


@pytest.fixture(autouse=True)
def plain_color_pairs(monkeypatch):
    # color_pair needs an initialized terminal; use the pair number as the attribute
    monkeypatch.setattr(ui.curses, "color_pair", lambda n: n)


def test_face_origin_layout():
    assert ui.face_origin(0, 0, 0) == (FACE_HEIGHT, 0)
    assert ui.face_origin(3, 0, 0) == (FACE_HEIGHT, 3 * FACE_WIDTH)
    assert ui.face_origin(4, 0, 0) == (0, FACE_WIDTH)
    assert ui.face_origin(5, 0, 0) == (2 * FACE_HEIGHT, FACE_WIDTH)
    assert ui.face_origin(1, 5, 7) == (5 + FACE_HEIGHT, 7 + FACE_WIDTH)


@pytest.mark.parametrize("face", range(6))
def test_locate_cell_round_trips_face_origin(face):
    top, left = 2, 3
    y, x = ui.face_origin(face, top, left)
    assert ui.locate_cell(y, x, top, left) == (face, 0, 0)
    assert ui.locate_cell(y + FACE_HEIGHT - 1, x + FACE_WIDTH - 1, top, left) == (face, 2, 2)
    assert ui.locate_cell(y + CELL_HEIGHT, x + 2 * CELL_WIDTH, top, left) == (face, 1, 2)


@pytest.mark.parametrize("y, x", [(0, 0), (0, 3 * FACE_WIDTH), (3 * FACE_HEIGHT, 0), (-1, -1)])
def test_locate_cell_misses_outside_net(y, x):
    assert ui.locate_cell(y, x, 0, 0) is None


def test_color_pair_number():
    assert ui.color_pair_number("blue") == 1
    assert ui.color_pair_number("purple") == FALLBACK_PAIR


def test_draw_cube_paints_every_cell():
    screen = FakeScreen()
    cube = Cube()
    cube.set_cell(4, 0, 0, "purple")
    ui.draw_cube(screen, cube, 0, 0)

    assert len(screen.calls) == 6 * 9 * CELL_HEIGHT
    top_left = [c for c in screen.calls if (c[0], c[1]) == ui.face_origin(4, 0, 0)]
    assert top_left[0][3] == FALLBACK_PAIR
    red_cell = [c for c in screen.calls if (c[0], c[1]) == ui.face_origin(0, 0, 0)]
    assert red_cell[0][3] == ui.color_pair_number("red")


def test_draw_cube_clipped_by_small_window():
    screen = FakeScreen(height=5, width=10)
    ui.draw_cube(screen, Cube(), 0, 0)
    assert all(y < 5 and x < 10 for y, x, _, _ in screen.calls)


def test_redraw_screen_shows_status():
    screen = FakeScreen()
    cube = Cube()
    ui.redraw_screen(screen, cube, 1, 2, "green", "hello")
    texts = [c[2] for c in screen.calls]
    assert "[SOLVED]" in texts
    assert "  hello" in texts
    assert any("Moves: 0" in t for t in texts)


def test_handle_key_rotates_and_undoes():
    cube = Cube()
    view_state = {'paint_color': "red", 'message': ""}
    assert main.handle_key(cube, "W", view_state)
    assert list(cube.history) == [(1, True)]
    assert view_state['message'] == "Turned 1"

    assert main.handle_key(cube, "u", view_state)
    assert cube.is_solved()
    assert main.handle_key(cube, "u", view_state)
    assert view_state['message'] == "Nothing to undo"


def test_handle_key_shuffle_and_reset():
    cube = Cube(rng=random.Random(9))
    view_state = {'paint_color': "red", 'message': ""}
    assert main.handle_key(cube, "x", view_state)
    assert cube.move_count == 50
    assert main.handle_key(cube, "c", view_state)
    assert cube.is_solved()
    assert not main.handle_key(cube, "z", view_state)


def test_paint_color_cycles():
    assert main.next_paint_color("red") == FACE_COLORS[1]
    assert main.next_paint_color(FACE_COLORS[-1]) == FACE_COLORS[0]
    assert main.next_paint_color("purple") == FACE_COLORS[0]


def test_handle_click_paints_cell():
    cube = Cube()
    view_state = {'paint_color': "yellow", 'message': ""}
    y, x = ui.face_origin(2, main.CUBE_ROW, main.CUBE_COL)

    assert main.handle_click(cube, y, x, view_state)
    assert cube.faces[2][0][0] == "yellow"

    assert not main.handle_click(cube, y + CELL_HEIGHT, x + CELL_WIDTH, view_state)
    assert cube.faces[2][1][1] == "orange"
    assert view_state['message'] == "Center cells cannot be painted"

    assert not main.handle_click(cube, 0, 0, view_state)
