import logging
import os
from typing import Set

# Keep pygame's import banner off stdout, which carries the maze
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import numpy as np
import pygame

from textmaze.core.grid import Cell

logger = logging.getLogger(__name__)

def load_mask(filepath: str, width: int, height: int) -> Set[Cell]:
    """
    Reads a width*height bitmap (PBM, BMP, PNG...) and returns the
    (row, column) of every black pixel.
    Any failure yields an empty mask and a warning.
    """
    try:
        surface = pygame.image.load(filepath)
    except (pygame.error, OSError) as e:
        logger.warning(f"Cannot load mask image '{filepath}': {e}")
        return set()

    if surface.get_size() != (width, height):
        w, h = surface.get_size()
        logger.warning(
            f"Cannot use mask image '{filepath}' ({w}x{h}); "
            f"expected {width}x{height}, 1-bit image"
        )
        return set()

    # array3d is (width, height, 3) RGB
    pixels = pygame.surfarray.array3d(surface)
    black = ~pixels.any(axis=2)
    xs, ys = np.nonzero(black)
    return {(int(y), int(x)) for x, y in zip(xs, ys)}
