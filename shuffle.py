"""
Shuffle functionality for the cube
"""

import logging
import random
from typing import Callable, List, Optional

from config import DEFAULT_SHUFFLE_ROTATIONS, NUM_FACES
from moves import Move, format_move

logger = logging.getLogger(__name__)


def random_move(rng: random.Random) -> Move:
    """Uniformly random face and direction"""
    face = rng.randrange(NUM_FACES)
    clockwise = rng.random() < 0.5
    return face, clockwise


def shuffle_cube(cube, num_rotations: int = DEFAULT_SHUFFLE_ROTATIONS,
                 rng: Optional[random.Random] = None,
                 on_move: Optional[Callable[[int, bool], None]] = None) -> List[Move]:
    """
    Apply num_rotations random quarter turns to the cube.

    Uses the cube's own generator unless rng is given. Consecutive moves that
    cancel each other are kept as drawn. on_move, if given, is called after
    each turn (the terminal viewer redraws there).
    Returns the moves in the order they were applied.
    """
    if num_rotations < 0:
        raise ValueError(f"num_rotations must be >= 0, got {num_rotations}")

    rng = rng if rng is not None else cube.rng
    applied = []

    for _ in range(num_rotations):
        face, clockwise = random_move(rng)
        cube.rotate(face, clockwise)
        applied.append((face, clockwise))
        if on_move is not None:
            on_move(face, clockwise)

    logger.debug("Shuffled with %d moves: %s", len(applied),
                 " ".join(format_move(f, cw) for f, cw in applied))
    return applied
