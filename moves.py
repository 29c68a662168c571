"""
Cube movement logic - face rotation and adjacent strip re-wiring
"""

from collections import namedtuple
from typing import List, Tuple

from config import FACE_SIZE, NUM_FACES

Move = Tuple[int, bool]
FACE_DIGITS = "".join(str(f) for f in range(NUM_FACES))


class InvalidMoveError(ValueError):
    """Raised for move notation that cannot be parsed"""


def get_row(grid: List[List[str]], row: int) -> List[str]:
    return list(grid[row])


def get_column(grid: List[List[str]], col: int) -> List[str]:
    return [grid[r][col] for r in range(FACE_SIZE)]


def set_row(grid: List[List[str]], row: int, values: List[str]):
    for i, val in enumerate(values):
        grid[row][i] = val


def set_column(grid: List[List[str]], col: int, values: List[str]):
    for i, val in enumerate(values):
        grid[i][col] = val


def rotate_grid_cw(grid: List[List[str]]) -> List[List[str]]:
    """Cell (i, j) moves to (j, 2 - i)"""
    n = FACE_SIZE - 1
    rotated = [[None] * FACE_SIZE for _ in range(FACE_SIZE)]
    for i in range(FACE_SIZE):
        for j in range(FACE_SIZE):
            rotated[j][n - i] = grid[i][j]
    return rotated


def rotate_grid_ccw(grid: List[List[str]]) -> List[List[str]]:
    """Cell (j, i) moves to (2 - i, j)"""
    n = FACE_SIZE - 1
    rotated = [[None] * FACE_SIZE for _ in range(FACE_SIZE)]
    for i in range(FACE_SIZE):
        for j in range(FACE_SIZE):
            rotated[n - i][j] = grid[j][i]
    return rotated


# One bordering strip of a neighbor face. `reverse` flips the strip so that
# cell i of every strip in a cycle touches the same corner of the turned face.
Strip = namedtuple("Strip", ["face", "axis", "index", "reverse"])


def strip_cells(strip: Strip) -> List[Tuple[int, int, int]]:
    """(face, row, col) coordinates of a strip, in cycle order"""
    if strip.axis == "row":
        cells = [(strip.face, strip.index, i) for i in range(FACE_SIZE)]
    else:
        cells = [(strip.face, i, strip.index) for i in range(FACE_SIZE)]
    if strip.reverse:
        cells.reverse()
    return cells


# Neighbor strips per face in clockwise order: top, right, bottom, left.
# A clockwise turn moves each strip's colors into the next strip.
#
# Side faces touch the top/bottom faces along a different edge depending on
# their ring position, so each one has its own entry. Top and bottom only
# ever touch row 0 (top) or row 2 (bottom) of the four side faces.
ADJACENT_STRIPS = {
    0: (Strip(4, "col", 0, False), Strip(1, "col", 0, False),
        Strip(5, "col", 0, False), Strip(3, "col", 2, True)),
    1: (Strip(4, "row", 2, False), Strip(2, "col", 0, False),
        Strip(5, "row", 0, True), Strip(0, "col", 2, True)),
    2: (Strip(4, "col", 2, False), Strip(3, "col", 0, True),
        Strip(5, "col", 2, False), Strip(1, "col", 2, False)),
    3: (Strip(4, "row", 0, True), Strip(0, "col", 0, False),
        Strip(5, "row", 2, False), Strip(2, "col", 2, True)),
    4: (Strip(3, "row", 0, False), Strip(2, "row", 0, False),
        Strip(1, "row", 0, False), Strip(0, "row", 0, False)),
    5: (Strip(1, "row", 2, False), Strip(2, "row", 2, False),
        Strip(3, "row", 2, False), Strip(0, "row", 2, False)),
}


def rotate_adjacent_to(faces: List[List[List[str]]], face: int, clockwise: bool = True):
    strips = [strip_cells(s) for s in ADJACENT_STRIPS[face]]

    # Copy every strip before writing any of them
    before = [[faces[f][r][c] for f, r, c in cells] for cells in strips]

    for k, cells in enumerate(strips):
        source = before[(k - 1) % 4] if clockwise else before[(k + 1) % 4]
        for (f, r, c), val in zip(cells, source):
            faces[f][r][c] = val


def rotate_face(faces: List[List[List[str]]], face: int, clockwise: bool = True):
    """Turn one face a quarter turn, including the four bordering strips"""
    if clockwise:
        faces[face] = rotate_grid_cw(faces[face])
    else:
        faces[face] = rotate_grid_ccw(faces[face])
    rotate_adjacent_to(faces, face, clockwise)


# Move notation: face digit, optionally followed by ' (counter-clockwise)
# or 2 (half turn)
def parse_move(text: str) -> List[Move]:
    """Parse a single move into its quarter turns"""
    move = text.strip()
    if not move or move[0] not in FACE_DIGITS:
        raise InvalidMoveError(f"Invalid move: {text!r}")

    face = int(move[0])
    suffix = move[1:]
    if suffix == "":
        return [(face, True)]
    if suffix == "'":
        return [(face, False)]
    if suffix == "2":
        return [(face, True), (face, True)]
    raise InvalidMoveError(f"Invalid move: {text!r}")


def parse_sequence(text: str) -> List[Move]:
    """Parse a whitespace separated sequence, e.g. 0 4' 32"""
    turns = []
    for token in text.split():
        turns.extend(parse_move(token))
    return turns


def format_move(face: int, clockwise: bool = True) -> str:
    return str(face) if clockwise else f"{face}'"


def get_inverse_move(move: str) -> str:
    """Get the inverse of a move in notation form"""
    turns = parse_move(move)
    if len(turns) == 2:
        return move.strip()
    face, clockwise = turns[0]
    return format_move(face, not clockwise)
