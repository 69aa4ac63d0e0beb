import argparse
import random
import sys
import time
sys.path.append('.')
import game  # type: ignore


def check_one(size: int, density: float, seed: int) -> bool:
    grid = game.deal_grid(size=size, density=density, seed=seed)
    once = game.resolve(grid)
    twice = game.resolve(once)
    mirrored = game.resolve(game.swap_players(grid))
    ok = True
    if once != twice:
        print(f"[seed {seed}] resolve is not idempotent")
        ok = False
    if game.swap_players(once) != mirrored:
        print(f"[seed {seed}] A/B swap does not mirror territory")
        print(once.pretty())
        print('--- swapped resolve ---')
        print(mirrored.pretty())
        ok = False
    return ok


def main():
    parser = argparse.ArgumentParser(description='Cross-check resolve() symmetry on random boards')
    parser.add_argument('--total', type=int, default=200)
    parser.add_argument('--max-size', type=int, default=12)
    args = parser.parse_args()

    random.seed(0)
    mismatches = 0
    t0 = time.time()
    for _ in range(args.total):
        seed = random.randrange(1_000_000)
        size = random.randint(1, args.max_size)
        density = random.choice([0.1, 0.3, 0.5, 0.7])
        if not check_one(size, density, seed):
            mismatches += 1
    took = int((time.time() - t0) * 1000)
    print(f"checked {args.total} boards in {took} ms, mismatches: {mismatches}")
    return 1 if mismatches else 0


if __name__ == '__main__':
    sys.exit(main())
