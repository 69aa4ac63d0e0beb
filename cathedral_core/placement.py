from __future__ import annotations

from .board import CellOccupied, Cell, Coord, Grid, InvalidCoordinate, Player, check_player, validate_grid
from .territory import resolve


def place_piece(grid: Grid, coord: Coord, player: Player) -> Grid:
    """Puts the player's piece on an empty cell, clears that cell's territory and re-resolves the board."""
    validate_grid(grid)
    check_player(player)
    r, c = coord
    if not grid.in_bounds(r, c):
        raise InvalidCoordinate(f"({r}, {c}) is outside a {grid.size}x{grid.size} grid")
    if not grid.at(r, c).is_empty:
        raise CellOccupied(f"({r}, {c}) already holds a piece for {grid.at(r, c).occupant}")
    cells = list(grid.cells)
    cells[grid.index(r, c)] = Cell(occupant=player, territory=None)
    return resolve(grid.with_cells(cells))
