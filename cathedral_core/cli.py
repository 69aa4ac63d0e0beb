from __future__ import annotations

import argparse
import os
import sys
from typing import List, Optional

from .board import PLAYERS, Grid, new_grid
from .deal import deal_grid
from .territory import reachability, resolve, territory_counts


def _default_size() -> int:
    try:
        return int(os.getenv('CATHEDRAL_BOARD_SIZE', '10'))
    except ValueError:
        return 10


def _reach_map(grid: Grid, player: str) -> str:
    reached = reachability(grid, player)
    lines: List[str] = []
    for r in range(grid.size):
        lines.append(" ".join('+' if (r, c) in reached else '#' for c in range(grid.size)))
    return "\n".join(lines)


def _load_grid(args: argparse.Namespace) -> Grid:
    if args.file == '-':
        return Grid.parse(sys.stdin.read())
    if args.file:
        with open(args.file, 'r', encoding='utf-8') as f:
            return Grid.parse(f.read())
    if args.random:
        return deal_grid(size=args.size, density=args.density, seed=args.seed)
    return new_grid(args.size)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description='Cathedral territory resolver')
    parser.add_argument('--file', default=None, help="Text board to resolve ('A', 'B', '.' per cell); '-' reads stdin")
    parser.add_argument('--random', action='store_true', help='Deal a random board instead of reading one')
    parser.add_argument('--size', type=int, default=_default_size(), help='Board size (NxN) for new or random boards')
    parser.add_argument('--density', type=float, default=0.3, help='Share of cells holding a piece on random boards')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for --random')
    parser.add_argument('--reach', action='store_true', help="Also print each player's reachability map")
    args = parser.parse_args(argv)

    try:
        grid = _load_grid(args)
        resolved = resolve(grid)
    except ValueError as e:
        print(f"error: {e}")
        return 2

    print('Resolved board:')
    print(resolved.pretty())
    counts = territory_counts(resolved)
    print()
    for p in PLAYERS:
        print(f"Player {p}: {counts[p + '_pieces']} pieces, {counts[p + '_territory']} enclosed cells")
    print(f"Unowned empty cells: {counts['unowned']}")
    if args.reach:
        for p in PLAYERS:
            print(f"\nReachable by {p} ('+' reached, '#' blocked):")
            print(_reach_map(resolved, p))
    return 0


if __name__ == '__main__':
    sys.exit(main())
