"""Step-by-step trace of an algorithm run, for display by an outside renderer."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, Sequence

from ratalg.numbers.scalar import Scalar

logger = logging.getLogger(__name__)

Snapshot = tuple[tuple[Scalar, ...], ...]


@dataclass(frozen=True)
class TraceStep:
    """
    One recorded algorithm state.

    description: human-readable text of what was just done.
    matrix:      immutable snapshot of the working matrix (or of a vector
                 family, one vector per row), or None for text-only steps.
    """

    description: str
    matrix: Snapshot | None = None


def snapshot(rows: Sequence[Sequence[Scalar]]) -> Snapshot:
    return tuple(tuple(row) for row in rows)


class TraceRecorder:
    """Append-only accumulator threaded through the algorithms."""

    def __init__(self) -> None:
        self._steps: list[TraceStep] = []

    def record(self, description: str, matrix: Sequence[Sequence[Scalar]] | None = None) -> TraceStep:
        step = TraceStep(description, None if matrix is None else snapshot(matrix))
        self._steps.append(step)
        logger.debug("step %d: %s", len(self._steps), description)
        return step

    def record_vector(self, description: str, vector: Sequence[Scalar]) -> TraceStep:
        return self.record(description, [vector])

    @property
    def steps(self) -> tuple[TraceStep, ...]:
        return tuple(self._steps)

    def __len__(self) -> int:
        return len(self._steps)

    def __iter__(self) -> Iterator[TraceStep]:
        return iter(tuple(self._steps))
