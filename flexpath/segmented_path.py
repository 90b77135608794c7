# Copyright 2023 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
from typing import Callable, Iterable, Iterator, List, Optional


class SegmentedPath:
    """An ordered sequence of path segment names, with append/remove at the end.

    Segments are kept as a plain list rather than one delimiter-joined string, so a
    name can never corrupt the boundaries of its neighbours. Callers are expected to
    only push non-empty names; no validation happens here.
    """

    __slots__ = ("_segments",)

    def __init__(self, segments: Optional[Iterable[str]] = None):
        self._segments: List[str] = list(segments) if segments else []

    @property
    def has_any(self) -> bool:
        return len(self._segments) > 0

    def push(self, segment: str) -> None:
        self._segments.append(segment)

    def pop(self) -> str:
        """Remove and return the last segment.

        Raises:
            IndexError: If there are no segments.
        """
        return self._segments.pop()

    def clear(self) -> None:
        self._segments.clear()

    def iterate_segments(self, segment_action: Callable[[str], None]) -> None:
        """Call segment_action for each segment, in insertion order."""
        for segment in self:
            segment_action(segment)

    def copy(self) -> "SegmentedPath":
        return SegmentedPath(self._segments)

    def __iter__(self) -> Iterator[str]:
        return iter(self._segments)

    def __len__(self) -> int:
        return len(self._segments)

    def __bool__(self) -> bool:
        return self.has_any

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SegmentedPath):
            return NotImplemented
        return self._segments == other._segments

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"SegmentedPath({self._segments!r})"
