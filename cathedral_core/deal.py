from __future__ import annotations

import random
from typing import List, Optional

from .board import DEFAULT_SIZE, PLAYERS, Cell, Grid, InvalidGrid


def deal_grid(size: int = DEFAULT_SIZE, density: float = 0.3, seed: Optional[int] = None) -> Grid:
    """Creates a board where each cell holds a random player's piece with probability `density`."""
    if size < 1:
        raise InvalidGrid(f"Grid size must be at least 1, got {size}")
    if not 0.0 <= density <= 1.0:
        raise ValueError(f"density must be within [0, 1], got {density}")
    rng = random.Random(seed)
    cells: List[Cell] = []
    for _ in range(size * size):
        if rng.random() < density:
            cells.append(Cell(occupant=rng.choice(PLAYERS)))
        else:
            cells.append(Cell())
    return Grid(size=size, cells=tuple(cells))

