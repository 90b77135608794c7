import pytest

from flexpath import SegmentedPath


def test_push_and_pop_order():
    segments = SegmentedPath()
    assert not segments.has_any
    segments.push("A")
    segments.push("B")
    assert segments.has_any
    assert len(segments) == 2
    assert segments.pop() == "B"
    assert list(segments) == ["A"]
    assert segments.pop() == "A"
    assert not segments


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        SegmentedPath().pop()


def test_clear():
    segments = SegmentedPath(["A", "B"])
    segments.clear()
    assert not segments.has_any
    assert list(segments) == []


def test_iteration_is_restartable():
    segments = SegmentedPath(["A", "B", "C"])
    iterator = iter(segments)
    assert next(iterator) == "A"
    assert list(segments) == ["A", "B", "C"]
    assert list(iterator) == ["B", "C"]


def test_iterate_segments_visits_in_order():
    visited = []
    SegmentedPath(["x", "y"]).iterate_segments(visited.append)
    assert visited == ["x", "y"]


def test_segment_containing_separator_is_kept_whole():
    # nothing is packed into a delimited string, so a '/' can't split a segment
    segments = SegmentedPath()
    segments.push("a/b")
    segments.push("c")
    assert list(segments) == ["a/b", "c"]
    assert segments.pop() == "c"
    assert list(segments) == ["a/b"]


def test_equality():
    assert SegmentedPath(["A", "B"]) == SegmentedPath(["A", "B"])
    assert SegmentedPath(["A/B"]) != SegmentedPath(["A", "B"])
    assert SegmentedPath() == SegmentedPath([])
    assert SegmentedPath(["A"]) != SegmentedPath()


def test_copy_is_independent():
    original = SegmentedPath(["A"])
    duplicate = original.copy()
    duplicate.push("B")
    assert list(original) == ["A"]
    assert list(duplicate) == ["A", "B"]
