"""
Cathedral core Python package.

This package contains the board data structures and the pure-logic territory
engine for the Cathedral prototype. UI, turn order and persistence live
outside of it and call in with a board snapshot.
Modules:
- board.py: Grid, Cell, Coord, Player and the input errors
- reachability.py: per-player flood fill from the board edge
- territory.py: resolve() and ownership summaries
- placement.py: place_piece()
- deal.py: seeded random boards
"""
