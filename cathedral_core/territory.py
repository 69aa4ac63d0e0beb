from __future__ import annotations

import os
from typing import Dict, List, Optional, Set

from .board import PLAYERS, Cell, Coord, Grid, Player, check_player, validate_grid
from .reachability import reachable_from_edge


def _debug_enabled() -> bool:
    return os.getenv('CATHEDRAL_DEBUG', '0').lower() in ('1', 'true', 'yes', 'on')


def reachability(grid: Grid, player: Player) -> Set[Coord]:
    """Cells the given player can reach from the board edge. Validates the grid first."""
    validate_grid(grid)
    return reachable_from_edge(grid, check_player(player))


def owner_for(reached_by_a: bool, reached_by_b: bool) -> Optional[Player]:
    """
    Ownership of an empty cell from the two reachability answers.
    A cell neither player can reach stays unowned, the same as one both can reach.
    """
    if reached_by_a and not reached_by_b:
        return 'A'
    if reached_by_b and not reached_by_a:
        return 'B'
    return None


def resolve(grid: Grid) -> Grid:
    """
    Recomputes territory for every empty cell and returns the new grid.

    Occupants are copied through untouched and occupied cells always come back
    with no territory, so resolving the same occupancy twice gives the same grid.
    Raises InvalidGrid / InvalidPlayerId before any work on malformed input.
    """
    validate_grid(grid)
    reached: Dict[Player, Set[Coord]] = {p: reachable_from_edge(grid, p) for p in PLAYERS}
    if _debug_enabled():
        for p in PLAYERS:
            print(f"[territory] {p} reaches {len(reached[p])}/{len(grid.cells)} cells")

    cells: List[Cell] = []
    for coord in grid.coords():
        cell = grid.at(*coord)
        if cell.occupant is not None:
            cells.append(Cell(occupant=cell.occupant))
            continue
        owner = owner_for(coord in reached['A'], coord in reached['B'])
        cells.append(Cell(occupant=None, territory=owner))
    return grid.with_cells(cells)


def territory_counts(grid: Grid) -> Dict[str, int]:
    """Counts pieces and owned empty cells per player, plus unowned empty cells."""
    counts: Dict[str, int] = {
        'A_pieces': 0,
        'B_pieces': 0,
        'A_territory': 0,
        'B_territory': 0,
        'unowned': 0,
    }
    for cell in grid.cells:
        if cell.occupant is not None:
            counts[f"{cell.occupant}_pieces"] += 1
        elif cell.territory is not None:
            counts[f"{cell.territory}_territory"] += 1
        else:
            counts['unowned'] += 1
    return counts
