"""Selection sort, randomised quicksort, quickselect and array helpers."""

from __future__ import annotations

import random
import sys
from typing import List, MutableSequence, Optional, Sequence


def _resolve(rng: Optional[random.Random]) -> random.Random:
    return rng if rng is not None else random.Random()


def random_int(low: int, high: int, rng: Optional[random.Random] = None) -> int:
    """Return a random integer in ``[low, high]``, rounding a uniform draw."""
    fraction = _resolve(rng).random()
    return int(fraction * (high - low) + low + 0.5)


def create_random_array(n: int, rng: Optional[random.Random] = None) -> List[float]:
    """Return ``n`` uniform random floats in ``[0, 1)``."""
    rng = _resolve(rng)
    return [rng.random() for _ in range(n)]


def create_random_int_array(
    n: int,
    min_value: int = 0,
    max_value: int = 100,
    rng: Optional[random.Random] = None,
) -> List[float]:
    """Return ``n`` whole-valued floats drawn from ``[min_value, max_value]``."""
    rng = _resolve(rng)
    return [float(random_int(min_value, max_value, rng)) for _ in range(n)]


def linspace(maximum: int, n_parts: int) -> List[int]:
    """Return ``n_parts`` evenly spaced integers ending near ``maximum``."""
    part_size = abs(maximum) // abs(n_parts)
    if (maximum < 0) != (n_parts < 0):
        part_size = -part_size
    return [part_size * i for i in range(1, n_parts + 1)]


def selection_sort(values: MutableSequence) -> None:
    """Sort ``values`` in place by repeatedly selecting the smallest item."""
    n = len(values)
    for i in range(n - 1):
        smallest = min(range(i, n), key=values.__getitem__)
        values[i], values[smallest] = values[smallest], values[i]


def split(
    values: MutableSequence, i: int, j: int, rng: Optional[random.Random] = None
) -> int:
    """Partition ``values[i..j]`` around a random pivot and return its final index."""
    p = random_int(i, j, rng)
    while i < j:
        while i < p and values[i] <= values[p]:
            i += 1
        while j > p and values[j] >= values[p]:
            j -= 1
        values[i], values[j] = values[j], values[i]
        if i == p:
            p = j
        elif j == p:
            p = i
    return p


def quick_sort(values: MutableSequence, rng: Optional[random.Random] = None) -> None:
    """Sort ``values`` in place with randomised quicksort."""
    rng = _resolve(rng)
    pending = [(0, len(values) - 1)]
    while pending:
        i, j = pending.pop()
        if i < j:
            k = split(values, i, j, rng)
            pending.append((k + 1, j))
            pending.append((i, k - 1))


def k_smallest(values: Sequence, k: int, rng: Optional[random.Random] = None) -> int:
    """Return, truncated to an int, the item at index ``k`` of the sorted values."""
    if not 0 <= k < len(values):
        raise IndexError(f"k={k} is out of range for {len(values)} values")
    rng = _resolve(rng)
    items = list(values)
    low, high = 0, len(items) - 1
    while True:
        p = split(items, low, high, rng)
        if k == p:
            return int(items[p])
        if k < p:
            high = p - 1
        else:
            low = p + 1


def _format(values: Sequence[float]) -> str:
    return "".join(f"{value:g} " for value in values)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    n = int(args[0]) if args else 10
    values = create_random_int_array(n, 0, 100)
    print(_format(values))
    print(k_smallest(values, 2))
    return 0


if __name__ == "__main__":
    sys.exit(main())