"""Compare insertion sort against sorting through an AVL tree."""

from __future__ import annotations

import argparse
import random
import time
from dataclasses import dataclass
from typing import Any, Iterable, Iterator

from treekit.avl import AVLTree


@dataclass(frozen=True)
class Timing:
    """Time taken by each sort for one input size."""

    n: int
    insertion_seconds: float
    avl_seconds: float

    @property
    def avl_faster(self) -> bool:
        return self.avl_seconds < self.insertion_seconds


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new list holding ``values`` sorted by insertion sort."""
    result: list[Any] = []
    for value in values:
        result.append(value)
        j = len(result) - 1
        while j > 0 and result[j - 1] > value:
            result[j] = result[j - 1]
            j -= 1
        result[j] = value
    return result


def avl_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by loading an AVL tree that drops duplicates, then reading it in order."""
    return AVLTree(values, allow_duplicates=False).inorder()


def time_sorts(n: int, rng: random.Random) -> Timing:
    """Time both sorts on a shuffled permutation of 1..n."""
    data = list(range(1, n + 1))
    rng.shuffle(data)

    start = time.perf_counter()
    insertion_sort(data)
    insertion_seconds = time.perf_counter() - start

    start = time.perf_counter()
    avl_sort(data)
    avl_seconds = time.perf_counter() - start

    return Timing(n, insertion_seconds, avl_seconds)


def _series(start: int, stop: int, step: int, seed: int | None) -> Iterator[Timing]:
    if step <= 0:
        raise ValueError("step must be positive")
    if start <= 0:
        raise ValueError("start must be positive")
    rng = random.Random(seed)
    for n in range(start, stop + 1, step):
        yield time_sorts(n, rng)


def find_crossover(
    start: int = 10, stop: int = 5000, step: int = 10, seed: int | None = None
) -> int | None:
    """Smallest n in the range where the AVL sort beat insertion sort, or None."""
    for timing in _series(start, stop, step, seed):
        if timing.avl_faster:
            return timing.n
    return None


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--start", type=int, default=10)
    parser.add_argument("--stop", type=int, default=5000)
    parser.add_argument("--step", type=int, default=10)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)
    if args.step <= 0 or args.start <= 0:
        parser.error("start and step must be positive")

    crossover: int | None = None
    for timing in _series(args.start, args.stop, args.step, args.seed):
        line = (
            f"n = {timing.n}, InsertionSort: {timing.insertion_seconds:g}s, "
            f"AVL: {timing.avl_seconds:g}s"
        )
        if timing.avl_faster:
            line += " --> AVL faster "
            if crossover is None:
                crossover = timing.n
        print(line)

    if crossover is not None:
        print(f"\n Smallest n where AVL is faster: {crossover}")
    else:
        print("\n AVL never became faster in this range.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())