"""Binary min-heap of path steps keyed on accumulated distance.

There is no decrease-key: the search pushes a fresh step whenever it finds
a route to a vertex and discards stale ones when they surface. Ties are
resolved by heap position, which is deterministic for a given sequence of
operations.
"""

from __future__ import annotations

from typing import List

from ..domain.errors import EmptyHeapError
from ..domain.models import PathStep


class PathStepMinHeap:
    """Array-backed binary heap where the root is the cheapest step."""

    def __init__(self) -> None:
        self._values: List[PathStep] = []

    def insert(self, step: PathStep) -> None:
        """Add ``step`` and sift it up toward the root. O(log n)."""
        values = self._values
        values.append(step)
        index = len(values) - 1
        while index > 0:
            parent = (index - 1) // 2
            if values[index].accumulated_distance >= values[parent].accumulated_distance:
                break
            values[index], values[parent] = values[parent], values[index]
            index = parent

    def extract_min(self) -> PathStep:
        """Remove and return the cheapest step. O(log n).

        Raises:
            EmptyHeapError: If the heap holds no steps.
        """
        values = self._values
        if not values:
            raise EmptyHeapError("Cannot extract from an empty heap")

        result = values[0]
        last = values.pop()
        if not values:
            return result
        values[0] = last

        index = 0
        size = len(values)
        while True:
            left = 2 * index + 1
            right = left + 1
            smallest = index
            if left < size and values[left].accumulated_distance < values[smallest].accumulated_distance:
                smallest = left
            if right < size and values[right].accumulated_distance < values[smallest].accumulated_distance:
                smallest = right
            if smallest == index:
                break
            values[index], values[smallest] = values[smallest], values[index]
            index = smallest

        return result

    def peek(self) -> PathStep:
        if not self._values:
            raise EmptyHeapError("Cannot peek into an empty heap")
        return self._values[0]

    def is_empty(self) -> bool:
        return not self._values

    def __len__(self) -> int:
        return len(self._values)

    def __bool__(self) -> bool:
        return bool(self._values)

    def pretty(self) -> str:
        """Render the heap level by level, root first."""
        lines = ["HEAP:"]
        start, width, row = 0, 1, 0
        while start < len(self._values):
            level = self._values[start:start + width]
            lines.append(f"Row #{row}: " + " | ".join(str(step) for step in level))
            start += width
            width *= 2
            row += 1
        lines.append("END OF HEAP")
        return "\n".join(lines)
