from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, List, Optional, Sequence, Tuple

Player = str  # 'A' or 'B'
Coord = Tuple[int, int]

PLAYERS: Tuple[Player, Player] = ('A', 'B')
EMPTY = '.'
DEFAULT_SIZE = 10


class InvalidGrid(ValueError):
    """Grid dimensions are inconsistent (not square, or zero-sized)."""


class InvalidPlayerId(ValueError):
    """A player value outside of 'A' / 'B'."""


class InvalidCoordinate(ValueError):
    """A caller-supplied coordinate lies outside the grid."""


class CellOccupied(ValueError):
    """A piece was placed on a cell that already holds one."""


def check_player(player: object) -> Player:
    """Returns the player unchanged, raising InvalidPlayerId for anything other than 'A' or 'B'."""
    if player not in PLAYERS:
        raise InvalidPlayerId(f"Unknown player id: {player!r}")
    return player  # type: ignore[return-value]


def other_player(player: Player) -> Player:
    return 'B' if check_player(player) == 'A' else 'A'


@dataclass(frozen=True)
class Cell:
    """A single square. `territory` is only meaningful while `occupant` is None."""
    occupant: Optional[Player] = None
    territory: Optional[Player] = None

    @property
    def is_empty(self) -> bool:
        return self.occupant is None


@dataclass(frozen=True)
class Grid:
    """Represents an N x N board of cells."""
    size: int
    cells: Tuple[Cell, ...]  # row-major, length == size * size

    def index(self, r: int, c: int) -> int:
        """Calculates the 1D index for a given row and column."""
        return r * self.size + c

    def in_bounds(self, r: int, c: int) -> bool:
        return 0 <= r < self.size and 0 <= c < self.size

    def at(self, r: int, c: int) -> Cell:
        """Gets the cell at a given row and column. No wrap-around."""
        if not self.in_bounds(r, c):
            raise InvalidCoordinate(f"({r}, {c}) is outside a {self.size}x{self.size} grid")
        return self.cells[self.index(r, c)]

    def is_boundary(self, r: int, c: int) -> bool:
        last = self.size - 1
        return r == 0 or c == 0 or r == last or c == last

    def coords(self) -> Iterable[Coord]:
        """Iterates over all coordinates on the board."""
        for r in range(self.size):
            for c in range(self.size):
                yield (r, c)

    def boundary_coords(self) -> List[Coord]:
        """Every coordinate on the outermost rows and columns, each listed once."""
        return [coord for coord in self.coords() if self.is_boundary(*coord)]

    def with_cells(self, cells: Iterable[Cell]) -> 'Grid':
        return replace(self, cells=tuple(cells))

    def occupants(self) -> List[List[Optional[Player]]]:
        return [[self.at(r, c).occupant for c in range(self.size)] for r in range(self.size)]

    def territories(self) -> List[List[Optional[Player]]]:
        return [[self.at(r, c).territory for c in range(self.size)] for r in range(self.size)]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Optional[str]]]) -> 'Grid':
        """Builds a grid with no territory from rows of occupants ('A', 'B', None or '.')."""
        size = len(rows)
        if size == 0:
            raise InvalidGrid('Grid must have at least one row')
        cells: List[Cell] = []
        for r, row in enumerate(rows):
            if len(row) != size:
                raise InvalidGrid(f"Row {r} has {len(row)} cells, expected {size} for a square grid")
            for value in row:
                occupant = None if value in (None, EMPTY) else check_player(value)
                cells.append(Cell(occupant=occupant))
        return cls(size=size, cells=tuple(cells))

    @classmethod
    def parse(cls, text: str) -> 'Grid':
        """Parses a text board: one row per line, 'A', 'B' or '.' per cell, spaces optional."""
        rows = []
        for line in text.splitlines():
            tokens = line.split() if ' ' in line.strip() else list(line.strip())
            if tokens:
                rows.append(tokens)
        return cls.from_rows(rows)

    def pretty(self) -> str:
        """Generates a human-readable view: pieces upper case, owned empty cells lower case."""
        lines: List[str] = []
        for r in range(self.size):
            row: List[str] = []
            for c in range(self.size):
                cell = self.at(r, c)
                if cell.occupant is not None:
                    row.append(cell.occupant)
                elif cell.territory is not None:
                    row.append(cell.territory.lower())
                else:
                    row.append(EMPTY)
            lines.append(" ".join(row))
        return "\n".join(lines)


def new_grid(size: int = DEFAULT_SIZE) -> Grid:
    """Creates the game-start grid: every cell empty, no territory."""
    if size < 1:
        raise InvalidGrid(f"Grid size must be at least 1, got {size}")
    return Grid(size=size, cells=tuple(Cell() for _ in range(size * size)))


def validate_grid(grid: Grid) -> None:
    """Fails fast on malformed grids so no partial territory map is ever produced."""
    if grid.size < 1:
        raise InvalidGrid(f"Grid size must be at least 1, got {grid.size}")
    if len(grid.cells) != grid.size * grid.size:
        raise InvalidGrid(
            f"Expected {grid.size * grid.size} cells for a {grid.size}x{grid.size} grid, got {len(grid.cells)}"
        )
    for cell in grid.cells:
        if cell.occupant is not None:
            check_player(cell.occupant)
        if cell.territory is not None:
            check_player(cell.territory)


def swap_players(grid: Grid) -> Grid:
    """Mirror image of the board with every 'A' and 'B' exchanged, territory included."""
    flip = {'A': 'B', 'B': 'A', None: None}
    return grid.with_cells(Cell(occupant=flip[c.occupant], territory=flip[c.territory]) for c in grid.cells)
