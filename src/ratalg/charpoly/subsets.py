"""Index subsets and principal minors."""
from __future__ import annotations

from math import comb
from typing import Iterator, Sequence

from ratalg.numbers.scalar import Scalar


def index_subsets(n: int, r: int) -> Iterator[tuple[int, ...]]:
    """All size-r subsets of {0..n-1} in lexicographic order.

    Recursive include/exclude on each index. Every call returns a fresh
    generator, so the sequence can be restarted.
    """
    if r < 0 or r > n:
        return

    def rec(start: int, chosen: tuple[int, ...]) -> Iterator[tuple[int, ...]]:
        if len(chosen) == r:
            yield chosen
            return
        # not enough indices left to fill the subset
        if n - start < r - len(chosen):
            return
        yield from rec(start + 1, chosen + (start,))
        yield from rec(start + 1, chosen)

    yield from rec(0, ())


def count_subsets(n: int, r: int) -> int:
    return comb(n, r) if 0 <= r <= n else 0


def principal_minor(
    matrix: Sequence[Sequence[Scalar]],
    indices: Sequence[int],
) -> list[list[Scalar]]:
    """Submatrix keeping the same rows and columns *indices*."""
    return [[matrix[i][j] for j in indices] for i in indices]
