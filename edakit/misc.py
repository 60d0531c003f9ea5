"""Primality test and maximum subsequence sum in three complexities."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class MSSResult:
    """A maximum subsequence: first index, last index and its sum."""

    start: int
    end: int
    total: int


def is_prime(n: int) -> bool:
    """Trial division up to the rounded square root of ``n``."""
    limit = int(math.sqrt(n) + 0.5)
    return all(n % divisor != 0 for divisor in range(2, limit + 1))


def format_array(values: Sequence) -> str:
    """Render values separated by spaces, each followed by one space."""
    return "".join(f"{value} " for value in values)


def mss_cubic(values: Sequence[int]) -> MSSResult:
    """Maximum subsequence sum by summing every pair of bounds."""
    best = MSSResult(0, 0, -1)
    n = len(values)
    for i in range(n):
        for j in range(n):
            total = sum(values[i:j + 1])
            if total > best.total:
                best = MSSResult(i, j, total)
    return best


def mss_quadratic(values: Sequence[int]) -> MSSResult:
    """Maximum subsequence sum with running sums from each start."""
    best = MSSResult(0, 0, -1)
    for i in range(len(values)):
        total = 0
        for j, value in enumerate(values[i:], start=i):
            total += value
            if total > best.total:
                best = MSSResult(i, j, total)
    return best


def mss_linear(values: Sequence[int]) -> MSSResult:
    """Maximum subsequence sum in a single pass."""
    best = MSSResult(0, 0, -1)
    total = 0
    start = 0
    for i, value in enumerate(values):
        total += value
        if total > best.total:
            best = MSSResult(start, i, total)
        if total < 0:
            start = i + 1
            total = 0
    return best