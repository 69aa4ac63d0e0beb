from __future__ import annotations

# Facade module that re-exports Cathedral core functionality.
# Kept so scripts and tests have a single import point.
# Single-responsibility modules live under cathedral_core/*.

from cathedral_core.board import (  # noqa: F401
    DEFAULT_SIZE,
    EMPTY,
    PLAYERS,
    Cell,
    CellOccupied,
    Coord,
    Grid,
    InvalidCoordinate,
    InvalidGrid,
    InvalidPlayerId,
    Player,
    check_player,
    new_grid,
    other_player,
    swap_players,
    validate_grid,
)
from cathedral_core.reachability import (  # noqa: F401
    boundary_seeds,
    can_pass,
    neighbors,
    reachable_from_edge,
)
from cathedral_core.territory import (  # noqa: F401
    owner_for,
    reachability,
    resolve,
    territory_counts,
)
from cathedral_core.placement import place_piece  # noqa: F401
from cathedral_core.deal import deal_grid  # noqa: F401


def main() -> None:
    # CLI driver delegated to cathedral_core.cli
    from cathedral_core.cli import main as _main
    raise SystemExit(_main())


if __name__ == '__main__':
    main()
