from __future__ import annotations

from collections import deque
from typing import Deque, List, Set

from .board import Coord, Grid, Player, check_player


def can_pass(grid: Grid, coord: Coord, player: Player) -> bool:
    """A cell is passable for a player when it is empty or holds that player's own piece."""
    occupant = grid.at(*coord).occupant
    return occupant is None or occupant == player


def neighbors(grid: Grid, coord: Coord) -> List[Coord]:
    """Gets the in-bounds orthogonal neighbors of a coordinate (no wrap-around)."""
    r, c = coord
    out: List[Coord] = []
    for dr, dc in ((1, 0), (-1, 0), (0, 1), (0, -1)):
        nr, nc = r + dr, c + dc
        if grid.in_bounds(nr, nc):
            out.append((nr, nc))
    return out


def boundary_seeds(grid: Grid, player: Player) -> List[Coord]:
    """Edge cells the player's traversal may start from."""
    return [coord for coord in grid.boundary_coords() if can_pass(grid, coord, player)]


def reachable_from_edge(grid: Grid, player: Player) -> Set[Coord]:
    """
    Finds every cell the player can reach from outside the board.
    Breadth-first from all passable edge cells at once; the opponent's pieces
    act as walls, empty cells and the player's own pieces are open.
    """
    check_player(player)
    seeds = boundary_seeds(grid, player)
    reached: Set[Coord] = set(seeds)
    queue: Deque[Coord] = deque(seeds)

    while queue:
        current = queue.popleft()
        for nxt in neighbors(grid, current):
            if nxt in reached:
                continue
            if can_pass(grid, nxt, player):
                reached.add(nxt)
                queue.append(nxt)
    return reached
