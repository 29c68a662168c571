"""
Cube state management - the six face grids and the operations that change them
"""

import copy
import logging
import random
import threading
from collections import deque
from typing import Iterable, List, Optional, Union

from config import (
    CENTER, DEFAULT_SHUFFLE_ROTATIONS, FACE_COLORS, FACE_SIZE, HISTORY_LIMIT, NUM_FACES,
)
from moves import Move, format_move, get_column, get_row, parse_move, rotate_face
from shuffle import shuffle_cube

logger = logging.getLogger(__name__)


class InvalidIndexError(ValueError):
    """Raised for a face, row or column index outside the cube"""


def _check_index(name: str, value, limit: int):
    # bool is an int subclass, but True is never a meaningful index
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value < limit:
        logger.warning("Rejected %s index %r", name, value)
        raise InvalidIndexError(f"{name} index must be an integer in 0..{limit - 1}, got {value!r}")


class Cube:
    """
    A 3x3x3 cube as six 3x3 color grids, indexed cube.faces[face][row][col].

    Faces 0-3 form the side ring, face 4 is the top and face 5 the bottom.
    Rotations only ever move colors around; set_cell is the only way to
    introduce a color that was not already on the cube.
    """

    def __init__(self, colors: Optional[List[str]] = None, rng: Optional[random.Random] = None):
        self.colors = list(colors) if colors is not None else list(FACE_COLORS)
        if len(self.colors) != NUM_FACES:
            raise ValueError(f"Expected {NUM_FACES} face colors, got {len(self.colors)}")

        self.rng = rng if rng is not None else random.Random()
        self._lock = threading.RLock()
        self.faces = self._solved_faces()
        self.move_count = 0
        self.history: deque = deque(maxlen=HISTORY_LIMIT)

    def _solved_faces(self) -> List[List[List[str]]]:
        return [
            [[self.colors[f]] * FACE_SIZE for _ in range(FACE_SIZE)]
            for f in range(NUM_FACES)
        ]

    def reset(self):
        """Reset cube to solved state"""
        with self._lock:
            self.faces = self._solved_faces()
            self.move_count = 0
            self.history.clear()
        logger.info("Cube reset to solved state")

    def rotate(self, face: int, clockwise: bool = True):
        """Quarter turn of one face and the four strips bordering it"""
        _check_index("face", face, NUM_FACES)
        with self._lock:
            rotate_face(self.faces, face, clockwise)
            self.move_count += 1
            self.history.append((face, bool(clockwise)))
        logger.debug("Rotated face %d %s", face, "cw" if clockwise else "ccw")

    def undo(self) -> Optional[Move]:
        """Reverse the last rotation. Returns the undone move, or None"""
        with self._lock:
            if not self.history:
                return None
            face, clockwise = self.history.pop()
            rotate_face(self.faces, face, not clockwise)
            self.move_count += 1
        logger.debug("Undid %s", format_move(face, clockwise))
        return face, clockwise

    def apply_moves(self, moves: Iterable[Union[Move, str]]):
        """
        Apply (face, clockwise) pairs or notation strings like "3'" in order.

        Every move is checked before the first one is applied, so a bad move
        leaves the cube untouched.
        """
        turns = []
        for move in moves:
            if isinstance(move, str):
                turns.extend(parse_move(move))
            else:
                face, clockwise = move
                _check_index("face", face, NUM_FACES)
                turns.append((face, clockwise))

        with self._lock:
            for face, clockwise in turns:
                self.rotate(face, clockwise)

    def shuffle(self, count: int = DEFAULT_SHUFFLE_ROTATIONS) -> List[Move]:
        return shuffle_cube(self, count)

    def get_column(self, face: int, col: int) -> List[str]:
        _check_index("face", face, NUM_FACES)
        _check_index("column", col, FACE_SIZE)
        with self._lock:
            return get_column(self.faces[face], col)

    def get_row(self, face: int, row: int) -> List[str]:
        _check_index("face", face, NUM_FACES)
        _check_index("row", row, FACE_SIZE)
        with self._lock:
            return get_row(self.faces[face], row)

    def get_face(self, face: int) -> List[List[str]]:
        """Copy of one face's 3x3 grid"""
        _check_index("face", face, NUM_FACES)
        with self._lock:
            return [list(row) for row in self.faces[face]]

    def face_color(self, face: int) -> str:
        _check_index("face", face, NUM_FACES)
        with self._lock:
            return self.colors[face]

    def set_cell(self, face: int, row: int, col: int, color: str) -> bool:
        """
        Overwrite one cell with any color.

        The center cell never changes; editing it is a no-op and returns False.
        """
        _check_index("face", face, NUM_FACES)
        _check_index("row", row, FACE_SIZE)
        _check_index("column", col, FACE_SIZE)

        if (row, col) == CENTER:
            logger.info("Ignored edit of center cell on face %d", face)
            return False

        with self._lock:
            self.faces[face][row][col] = color
        logger.debug("Set face %d cell (%d, %d) to %s", face, row, col, color)
        return True

    def is_solved(self) -> bool:
        """Check if every face is a single color"""
        with self._lock:
            for grid in self.faces:
                center = grid[CENTER[0]][CENTER[1]]
                if any(cell != center for row in grid for cell in row):
                    return False
        return True

    def snapshot(self) -> List[List[List[str]]]:
        with self._lock:
            return copy.deepcopy(self.faces)

    def __eq__(self, other):
        if not isinstance(other, Cube):
            return NotImplemented
        return self.snapshot() == other.snapshot()

    def __str__(self):
        """Plain-text net: top above face 1, side ring, bottom below face 1"""
        with self._lock:
            faces = copy.deepcopy(self.faces)

        width = max(len(str(c)) for grid in faces for row in grid for c in row)
        blank = " " * ((width + 1) * FACE_SIZE)

        def line(face, row):
            return " ".join(str(c).ljust(width) for c in faces[face][row]) + " "

        lines = []
        for row in range(FACE_SIZE):
            lines.append(blank + line(4, row))
        for row in range(FACE_SIZE):
            lines.append("".join(line(f, row) for f in range(4)))
        for row in range(FACE_SIZE):
            lines.append(blank + line(5, row))
        return "\n".join(l.rstrip() for l in lines)
