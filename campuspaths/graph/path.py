"""Paths produced by the shortest-path search.

A path starts at a node and is extended one segment at a time. Each
segment records its own incremental cost; the path cost is their sum.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Iterator, List, TypeVar

N = TypeVar("N")


@dataclass(frozen=True, slots=True)
class Segment(Generic[N]):
    """One step of a path, from ``start`` to ``end`` at ``cost``."""

    start: N
    end: N
    cost: float


@dataclass(frozen=True, slots=True)
class Path(Generic[N]):
    """An immutable sequence of segments beginning at ``start``.

    A path with no segments is the trivial path from a node to itself,
    with cost 0.

    Attributes:
        start: The first node of the path
        segments: The consecutive segments, each starting where the
            previous one ends
    """

    start: N
    segments: tuple[Segment[N], ...] = ()

    @property
    def end(self) -> N:
        """Return the last node of the path."""
        if not self.segments:
            return self.start
        return self.segments[-1].end

    @property
    def cost(self) -> float:
        """Return the total cost of the path."""
        return sum(segment.cost for segment in self.segments)

    def extend(self, node: N, cost: float) -> Path[N]:
        """Return a new path with one more segment to ``node``.

        Args:
            node: The node the new segment leads to.
            cost: The incremental cost of the new segment.

        Returns:
            A new Path; this one is left unchanged.
        """
        segment = Segment(self.end, node, cost)
        return Path(self.start, self.segments + (segment,))

    def nodes(self) -> List[N]:
        """Return every node visited by the path, in order."""
        return [self.start] + [segment.end for segment in self.segments]

    # No __len__: a trivial path must stay truthy.
    def __iter__(self) -> Iterator[Segment[N]]:
        return iter(self.segments)


def format_path(
    path: Path[N], label: Callable[[N], str] = str
) -> List[str]:
    """Render a path as human-readable lines.

    One ``"<from> to <to> with weight <cost>"`` line is produced per
    segment, followed by a ``"total cost: <sum>"`` line. Costs are shown
    with three decimals.

    Args:
        path: The path to render.
        label: Converts a node into its display name.

    Returns:
        The rendered lines, without trailing newlines.
    """
    lines = [
        f"{label(segment.start)} to {label(segment.end)} with weight {segment.cost:.3f}"
        for segment in path
    ]
    lines.append(f"total cost: {path.cost:.3f}")
    return lines
