"""
Configuration constants for the Rubik's Cube engine and terminal viewer
"""

import logging
import os

# Face layout: 4 side faces forming a ring, plus top and bottom
NUM_FACES = 6
FACE_SIZE = 3
SIDE_FACES = (0, 1, 2, 3)
TOP_FACE = 4
BOTTOM_FACE = 5

# Center cell is the face's fixed color identity
CENTER = (1, 1)

# Canonical color per face index
FACE_COLORS = ["red", "blue", "orange", "green", "white", "yellow"]

DEFAULT_SHUFFLE_ROTATIONS = 50

# Moves kept for undo; older ones are dropped
HISTORY_LIMIT = 1000

# Color name to curses color pair
COLOR_TO_CURSES = {
    "blue": 1,
    "white": 2,
    "orange": 3,
    "green": 4,
    "red": 5,
    "yellow": 6,
}
FALLBACK_PAIR = 10  # Any color outside the six above

# Terminal cell geometry (characters)
CELL_WIDTH = 4
CELL_HEIGHT = 2
FACE_WIDTH = CELL_WIDTH * FACE_SIZE
FACE_HEIGHT = CELL_HEIGHT * FACE_SIZE

# Keyboard bindings: key -> (face, clockwise)
KEY_MAP = {
    'q': (0, True), 'a': (0, False),
    'w': (1, True), 's': (1, False),
    'e': (2, True), 'd': (2, False),
    'r': (3, True), 'f': (3, False),
    't': (4, True), 'g': (4, False),
    'y': (5, True), 'h': (5, False),
}

# Logging (curses owns the terminal, so logs go to a file)
LOG_FILE = os.environ.get("CUBE_LOG_FILE", "cube.log")
LOG_LEVEL = getattr(logging, os.environ.get("CUBE_LOG_LEVEL", "INFO").upper(), logging.INFO)
