"""
UI components - cube net drawing, cell hit-testing, instructions and status bar
"""

import curses
from typing import Optional, Tuple

from config import (
    CELL_HEIGHT, CELL_WIDTH, COLOR_TO_CURSES, FACE_HEIGHT, FACE_SIZE, FACE_WIDTH,
    FALLBACK_PAIR, NUM_FACES, TOP_FACE,
)

# Text color pairs
GREEN_TEXT = 7
RED_TEXT = 8
WHITE_TEXT = 9


def init_colors():
    """Set up pairs 1-6 for the sticker colors, 7-9 for status text and one for unknown colors"""
    curses.init_pair(1, curses.COLOR_WHITE, curses.COLOR_BLUE)
    curses.init_pair(2, curses.COLOR_BLACK, curses.COLOR_WHITE)
    curses.init_pair(4, curses.COLOR_BLACK, curses.COLOR_GREEN)
    curses.init_pair(5, curses.COLOR_BLACK, curses.COLOR_RED)
    curses.init_pair(6, curses.COLOR_BLACK, curses.COLOR_YELLOW)

    # Orange needs a 256-color terminal; yellow stands in otherwise
    if curses.COLORS >= 256:
        curses.init_pair(3, curses.COLOR_BLACK, 208)
    else:
        curses.init_pair(3, curses.COLOR_BLACK, curses.COLOR_YELLOW)

    curses.init_pair(GREEN_TEXT, curses.COLOR_GREEN, curses.COLOR_BLACK)
    curses.init_pair(RED_TEXT, curses.COLOR_RED, curses.COLOR_BLACK)
    curses.init_pair(WHITE_TEXT, curses.COLOR_WHITE, curses.COLOR_BLACK)
    curses.init_pair(FALLBACK_PAIR, curses.COLOR_BLACK, curses.COLOR_MAGENTA)


def color_pair_number(color) -> int:
    return COLOR_TO_CURSES.get(color, FALLBACK_PAIR)


def face_origin(face: int, top: int, left: int) -> Tuple[int, int]:
    """Screen (y, x) of a face's top-left corner in the cube net"""
    if face < TOP_FACE:
        return top + FACE_HEIGHT, left + face * FACE_WIDTH
    if face == TOP_FACE:
        return top, left + FACE_WIDTH
    return top + 2 * FACE_HEIGHT, left + FACE_WIDTH


def locate_cell(y: int, x: int, top: int, left: int) -> Optional[Tuple[int, int, int]]:
    """Map a screen position to (face, row, col), or None if it misses the net"""
    for face in range(NUM_FACES):
        face_y, face_x = face_origin(face, top, left)
        if face_y <= y < face_y + FACE_HEIGHT and face_x <= x < face_x + FACE_WIDTH:
            row = (y - face_y) // CELL_HEIGHT
            col = (x - face_x) // CELL_WIDTH
            return face, row, col
    return None


def draw_face(stdscr, grid, y: int, x: int):
    for i in range(FACE_SIZE):
        for j in range(FACE_SIZE):
            attr = curses.color_pair(color_pair_number(grid[i][j]))
            for k in range(CELL_HEIGHT):
                try:
                    stdscr.addstr(y + i * CELL_HEIGHT + k, x + j * CELL_WIDTH, " " * CELL_WIDTH, attr)
                except curses.error:
                    pass


def draw_cube(stdscr, cube, top: int, left: int):
    """Draw all six faces as an unfolded net"""
    for face in range(NUM_FACES):
        y, x = face_origin(face, top, left)
        draw_face(stdscr, cube.get_face(face), y, x)


def draw_legend(stdscr, cube, top: int, left: int):
    """Face numbers next to their canonical colors, right of the net"""
    col = left + 4 * FACE_WIDTH + 2
    for face in range(NUM_FACES):
        color = cube.face_color(face)
        try:
            stdscr.addstr(top + face, col, f"{face}", curses.A_BOLD)
            stdscr.addstr(top + face, col + 2, "  ", curses.color_pair(color_pair_number(color)))
            stdscr.addstr(top + face, col + 5, str(color), curses.A_DIM)
        except curses.error:
            pass


def draw_status_bar(stdscr, width: int, row: int, cube, paint_color: str, message: str = ""):
    """Draw move count, solved flag, paint color and last message"""
    parts = []

    if cube.is_solved():
        parts.append(("[SOLVED]", curses.color_pair(GREEN_TEXT) | curses.A_BOLD))
    else:
        parts.append(("[SCRAMBLED]", curses.color_pair(WHITE_TEXT)))

    parts.append((f"  Moves: {cube.move_count}", curses.A_DIM))
    parts.append(("  Paint: ", curses.A_DIM))
    parts.append((f" {paint_color} ", curses.color_pair(color_pair_number(paint_color))))

    if message:
        parts.append((f"  {message}", curses.color_pair(RED_TEXT)))

    total_width = sum(len(p[0]) for p in parts)
    col = max(0, width // 2 - total_width // 2)

    try:
        for text, attr in parts:
            stdscr.addstr(row, col, text, attr)
            col += len(text)
    except curses.error:
        pass


def draw_instructions(stdscr, start_row: int):
    """Draw control instructions"""
    _, w = stdscr.getmaxyx()

    try:
        stdscr.addstr(start_row, 0, "-" * (w - 1), curses.A_DIM)
    except curses.error:
        pass

    lines = [
        ("CONTROLS", curses.A_BOLD),
        ("", 0),
        ("Face   0    1    2    3    4    5", 0),
        ("CW     Q    W    E    R    T    Y", 0),
        ("CCW    A    S    D    F    G    H", 0),
        ("", 0),
        ("X=Shuffle  C=Reset  U=Undo  P=Paint color  Click=Paint  Esc=Quit", curses.A_DIM),
    ]

    for i, (line, attr) in enumerate(lines):
        try:
            stdscr.addstr(start_row + 1 + i, 2, line, attr)
        except curses.error:
            pass


def redraw_screen(stdscr, cube, top: int, left: int, paint_color: str, message: str = ""):
    """Redraw the entire screen"""
    h, w = stdscr.getmaxyx()
    stdscr.clear()
    draw_cube(stdscr, cube, top, left)
    draw_legend(stdscr, cube, top, left)
    draw_instructions(stdscr, top + 3 * FACE_HEIGHT + 1)
    draw_status_bar(stdscr, w, h - 1, cube, paint_color, message)
    stdscr.refresh()
