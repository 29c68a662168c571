#!/usr/bin/env python3
"""
ASCII Rubik's Cube viewer and editor
Main entry point
"""

import curses
import logging
import time

from config import FACE_COLORS, KEY_MAP, LOG_FILE, LOG_LEVEL
from cube_state import Cube
from moves import format_move
from shuffle import shuffle_cube
from ui import init_colors, locate_cell, redraw_screen

logger = logging.getLogger(__name__)

# Top-left of the cube net on screen
CUBE_ROW = 1
CUBE_COL = 2


def setup_logging():
    logging.basicConfig(
        filename=LOG_FILE,
        level=LOG_LEVEL,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def next_paint_color(current: str) -> str:
    """Cycle through the six canonical colors"""
    if current not in FACE_COLORS:
        return FACE_COLORS[0]
    return FACE_COLORS[(FACE_COLORS.index(current) + 1) % len(FACE_COLORS)]


def handle_key(cube: Cube, char: str, view_state: dict) -> bool:
    """
    Apply the action bound to a key.

    Returns False when the key has no binding. Actions that only change what
    is shown (paint color, status message) update view_state.
    """
    char = char.lower()

    if char in KEY_MAP:
        face, clockwise = KEY_MAP[char]
        cube.rotate(face, clockwise)
        view_state['message'] = f"Turned {format_move(face, clockwise)}"
    elif char == 'x':
        moves = shuffle_cube(cube, on_move=view_state.get('on_move'))
        view_state['message'] = f"Shuffled ({len(moves)} moves)"
    elif char == 'c':
        cube.reset()
        view_state['message'] = "Reset"
    elif char == 'u':
        undone = cube.undo()
        view_state['message'] = f"Undid {format_move(*undone)}" if undone else "Nothing to undo"
    elif char == 'p':
        view_state['paint_color'] = next_paint_color(view_state['paint_color'])
        view_state['message'] = ""
    else:
        return False
    return True


def handle_click(cube: Cube, y: int, x: int, view_state: dict) -> bool:
    """Paint the clicked cell. Returns True if a cell changed"""
    cell = locate_cell(y, x, CUBE_ROW, CUBE_COL)
    if cell is None:
        return False

    face, row, col = cell
    changed = cube.set_cell(face, row, col, view_state['paint_color'])
    view_state['message'] = "" if changed else "Center cells cannot be painted"
    return changed


def main(stdscr):
    """Main loop"""
    curses.curs_set(0)
    curses.start_color()
    init_colors()
    curses.mousemask(curses.ALL_MOUSE_EVENTS)
    stdscr.nodelay(True)

    cube = Cube()
    view_state = {'paint_color': FACE_COLORS[0], 'message': ""}

    def redraw():
        redraw_screen(stdscr, cube, CUBE_ROW, CUBE_COL,
                      view_state['paint_color'], view_state['message'])

    def animate_shuffle(face, clockwise):
        redraw()
        time.sleep(0.03)

    view_state['on_move'] = animate_shuffle
    logger.info("Viewer started")
    redraw()

    while True:
        try:
            key = stdscr.getch()
        except curses.error:
            key = -1

        if key == -1:
            time.sleep(0.05)
            continue

        if key == 27:  # ESC
            break

        if key == curses.KEY_MOUSE:
            try:
                _, mx, my, _, bstate = curses.getmouse()
            except curses.error:
                continue
            if bstate & (curses.BUTTON1_CLICKED | curses.BUTTON1_PRESSED):
                handle_click(cube, my, mx, view_state)
                redraw()
            continue

        char = chr(key) if key < 256 else ''
        if char and handle_key(cube, char, view_state):
            redraw()

    logger.info("Viewer closed after %d moves", cube.move_count)


def run():
    setup_logging()
    curses.wrapper(main)


if __name__ == "__main__":
    run()
