"""Tests for the path step min-heap."""

import random

import pytest

from wayfinder.domain.errors import EmptyHeapError
from wayfinder.domain.models import Edge, PathStep
from wayfinder.graph.heap import PathStepMinHeap


def _step(distance: float, to_id: int = 1) -> PathStep:
    return PathStep(edge=Edge(from_id=0, to_id=to_id, length=1.0), accumulated_distance=distance)


def test_extract_from_empty_heap_raises():
    heap = PathStepMinHeap()

    assert heap.is_empty()
    with pytest.raises(EmptyHeapError):
        heap.extract_min()
    with pytest.raises(EmptyHeapError):
        heap.peek()


def test_extracts_in_ascending_order():
    heap = PathStepMinHeap()
    for distance in (5.0, 1.0, 4.0, 2.0, 3.0):
        heap.insert(_step(distance))

    assert len(heap) == 5
    assert heap.peek().accumulated_distance == 1.0
    assert [heap.extract_min().accumulated_distance for _ in range(5)] == [1.0, 2.0, 3.0, 4.0, 5.0]
    assert not heap


def test_duplicate_keys_are_all_kept():
    heap = PathStepMinHeap()
    for to_id in (1, 2, 3):
        heap.insert(_step(7.0, to_id))

    popped = {heap.extract_min().edge.to_id for _ in range(3)}
    assert popped == {1, 2, 3}


def test_random_interleaving_always_extracts_current_minimum():
    rng = random.Random(1234)
    heap = PathStepMinHeap()
    shadow = []

    for _ in range(500):
        if shadow and rng.random() < 0.4:
            step = heap.extract_min()
            expected = min(shadow)
            assert step.accumulated_distance == expected
            shadow.remove(expected)
        else:
            distance = rng.choice([rng.uniform(0, 100), float(rng.randint(0, 10))])
            heap.insert(_step(distance))
            shadow.append(distance)
        assert len(heap) == len(shadow)


def test_pretty_renders_levels():
    heap = PathStepMinHeap()
    for distance in (1.0, 2.0, 3.0, 4.0):
        heap.insert(_step(distance))

    lines = heap.pretty().splitlines()
    assert lines[0] == "HEAP:"
    assert lines[1].startswith("Row #0: ")
    assert lines[2].count(" | ") == 1
    assert lines[3].startswith("Row #2: ")
    assert lines[-1] == "END OF HEAP"
