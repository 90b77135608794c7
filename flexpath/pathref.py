# Copyright 2023 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
import os
from typing import Optional, Tuple, Union

from loguru import logger

from flexpath.errors import InvalidChildNameError
from flexpath.segmented_path import SegmentedPath
from flexpath.utils.paths import (
    CURRENT_DIRECTORY_SEGMENT,
    PARENT_DIRECTORY_SEGMENT,
    POSIX_SEPARATOR,
    WINDOWS_SEPARATOR,
    find_separator,
    is_root_segment,
    join_tokens,
    split_segments,
)


class PathRef:
    """A relative or absolute path reference, normalized as it is built.

    A PathRef is a sensible replacement for joining path strings by hand. Joining a
    relative reference resolves '.' and '..' against what is already there, so a
    relative path stays relative and condensed (``A/B/../..`` becomes ``..`` rather
    than growing forever). Joining an absolute (``/X``) or rooted (``C:/X``,
    ``http://X``) reference replaces whatever was there before. Nothing here looks at
    a real filesystem.

    PathRef is a mutable value: methods change the instance in place. Use copy() (or
    the ``/`` operator, which returns a new instance) when an independent value is
    needed. There is no internal locking, so a single instance must not be mutated
    from several threads at once.

    Attributes:
        is_null (bool): True for a path created from None; distinct from an empty path.
        is_empty (bool): True for a non-null relative path with no segments.
        is_absolute (bool): True if the path is rooted or starts with a separator.
        is_relative (bool): True for a non-null path that is not absolute.
        is_rooted (bool): True if the path starts with a volume or scheme marker like 'C:'.
        is_pure_directory (bool): True if the last join ended in a trailing separator.
    """

    def __init__(self, anchor_path: Optional[str] = ""):
        """Create a path reference from an anchor path.

        Args:
            anchor_path (Optional[str]): The path to start from. None creates a null
                reference; the default creates an empty relative reference.
        """
        self._is_null = anchor_path is None
        self._is_absolute = False
        self._root_segment: Optional[str] = None
        self._parents = 0
        self._children = SegmentedPath()
        self._is_pure_directory = False
        self.join_with(anchor_path)

    @classmethod
    def combine(cls, *paths: Optional[str]) -> "PathRef":
        """Build a path from the first argument and join the rest onto it, in order.

        With no arguments the result is a null reference.
        """
        if not paths:
            return cls(None)
        path_ref = cls(paths[0])
        path_ref.join_with(*paths[1:])
        return path_ref

    @property
    def is_null(self) -> bool:
        return self._is_null

    @property
    def is_empty(self) -> bool:
        return (
            not self.is_null
            and not self.is_absolute
            and not self._children.has_any
            and self._parents == 0
        )

    @property
    def is_rooted(self) -> bool:
        # Once rooted, only clear() can drop the root again
        return not self.is_null and self._root_segment is not None

    @property
    def is_absolute(self) -> bool:
        return not self.is_null and (self.is_rooted or self._is_absolute)

    @property
    def is_relative(self) -> bool:
        return not self.is_null and not self.is_absolute

    @property
    def is_pure_directory(self) -> bool:
        return self._is_pure_directory

    @property
    def root_segment(self) -> Optional[str]:
        return self._root_segment

    @property
    def parent_count(self) -> int:
        return self._parents

    @property
    def children(self) -> Tuple[str, ...]:
        return tuple(self._children)

    def join_with(self, *paths: Optional[str]) -> "PathRef":
        """Join this path with one or more other paths, sequentially.

        A relative path is resolved against this one. An absolute or rooted path
        replaces this one. None is ignored.

        Returns:
            PathRef: self, so calls can be chained.
        """
        for path in paths:
            self._join_with_path(path)
        return self

    def _join_with_path(self, path: Optional[str]) -> None:
        if path is None:
            return

        self._is_null = False
        segments = split_segments(path)
        last = len(segments) - 1
        for i, segment in enumerate(segments):
            self._join_with_segment(segment, i == 0, i == last)

    def _join_with_segment(self, segment: str, is_start_segment: bool, is_end_segment: bool) -> None:
        self._is_pure_directory = False

        if not segment:
            if is_start_segment and not is_end_segment:
                # path started with a separator: a new absolute reference replaces everything
                logger.trace("Absolute path segment found, resetting path reference")
                self.clear()
                self._is_absolute = True
            elif is_end_segment and not is_start_segment:
                self._is_pure_directory = True
            # other empty segments (repeated separators, or an empty path) are skipped
            return

        if is_start_segment and is_root_segment(segment):
            logger.trace(f"Root segment '{segment}' found, resetting path reference")
            self.clear()
            self._root_segment = segment
            return

        if segment == PARENT_DIRECTORY_SEGMENT:
            self.point_to_parent()
        elif segment == CURRENT_DIRECTORY_SEGMENT:
            pass
        else:
            # already split on separators, so no need to validate
            self._point_to_child_unsafe(segment)

    def point_to_parent(self) -> None:
        """Change the path to point to the parent of the currently referenced target.

        Going up cancels the most recent child. For an absolute path without any
        children this does nothing, since there's nothing above the root.
        """
        self._is_null = False
        if self._children.has_any:
            self._children.pop()
        elif self.is_absolute:
            logger.trace("Discarding parent navigation beyond the root of an absolute path")
        else:
            self._parents += 1

    def point_to_child(self, child_name: str) -> None:
        """Change the path to point to a child directory or file of the current target.

        Only the bare minimum is checked (no separators, not made only of dots); this is
        not a full filesystem name validation.

        Raises:
            InvalidChildNameError: If child_name contains a separator or consists only of dots.
        """
        found = find_separator(child_name)
        if found is not None:
            character, index = found
            raise InvalidChildNameError(
                f"point_to_child child_name '{child_name}' contains invalid character "
                f"'{character}' at index {index}",
                child_name,
                character,
                index,
            )
        if not child_name.strip("."):
            raise InvalidChildNameError(
                f"point_to_child child_name '{child_name}' contains only dots which is invalid",
                child_name,
            )
        self._point_to_child_unsafe(child_name)

    def _point_to_child_unsafe(self, child_name: str) -> None:
        self._is_null = False
        self._is_pure_directory = False
        self._children.push(child_name)

    def clear(self) -> None:
        """Clear out the reference, making it an empty path.

        An absolute or rooted path stays absolute (but is no longer rooted), a relative
        path becomes an empty relative path, and a null path stays null.
        """
        self._is_absolute = self.is_absolute
        self._root_segment = None
        self._children.clear()
        self._parents = 0
        self._is_pure_directory = False

    def normalize_path(
        self, separator: Optional[str] = None, append_trailing_separator: Optional[bool] = None
    ) -> Optional[str]:
        """Render the path as text.

        Args:
            separator (Optional[str]): Directory separator to use. (Default: os.sep)
            append_trailing_separator (Optional[bool]): Whether to end the text with a
                separator. (Default: is_pure_directory)

        Returns:
            Optional[str]: The rendered path, or None for a null path.
        """
        if separator is None:
            separator = os.sep
        if append_trailing_separator is None:
            append_trailing_separator = self._is_pure_directory

        if self.is_null:
            return None

        if self.is_empty:
            if append_trailing_separator:
                return CURRENT_DIRECTORY_SEGMENT + separator
            return ""

        tokens = []
        prefix = ""
        if self.is_rooted:
            tokens.append(self._root_segment)
        elif self.is_absolute:
            prefix = separator
        tokens.extend([PARENT_DIRECTORY_SEGMENT] * self._parents)
        tokens.extend(self._children)
        return join_tokens(tokens, separator, prefix, append_trailing_separator)

    @property
    def windows_path(self) -> Optional[str]:
        """Path, as it should look like in a Windows file system."""
        return self.normalize_path(WINDOWS_SEPARATOR)

    @property
    def posix_path(self) -> Optional[str]:
        """Path, as it should look like in a POSIX file system."""
        return self.normalize_path(POSIX_SEPARATOR)

    @property
    def local_path(self) -> Optional[str]:
        """Path, as it should look like on the local file system."""
        return self.normalize_path()

    def copy(self) -> "PathRef":
        other = type(self).__new__(type(self))
        other._is_null = self._is_null
        other._is_absolute = self._is_absolute
        other._root_segment = self._root_segment
        other._parents = self._parents
        other._children = self._children.copy()
        other._is_pure_directory = self._is_pure_directory
        return other

    def __copy__(self) -> "PathRef":
        return self.copy()

    def __deepcopy__(self, memo) -> "PathRef":
        # all fields are immutable apart from the child list, which copy() duplicates
        return self.copy()

    def __truediv__(self, other: Union[str, "PathRef", None]) -> "PathRef":
        if isinstance(other, PathRef):
            other = other.posix_path
        elif other is not None and not isinstance(other, str):
            return NotImplemented
        return self.copy().join_with(other)

    def __rtruediv__(self, other: str) -> "PathRef":
        if not isinstance(other, str):
            return NotImplemented
        return PathRef(other).join_with(self.posix_path)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PathRef):
            return NotImplemented
        return (
            self._is_null == other._is_null
            and self._is_absolute == other._is_absolute
            and self._parents == other._parents
            and self._root_segment == other._root_segment
            and self._is_pure_directory == other._is_pure_directory
            and self._children == other._children
        )

    # mutable, so not hashable
    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        text = self.normalize_path()
        if text is None:
            raise ValueError("A null PathRef has no text form; use to_text() to get None instead")
        return text

    def __repr__(self) -> str:
        if self.is_null:
            return "PathRef(None)"
        return f"PathRef({self.posix_path!r})"


def parse(text: Optional[str]) -> PathRef:
    """Parse path text into a PathRef. None gives a null PathRef."""
    return PathRef(text)


def to_text(path_ref: PathRef, separator: Optional[str] = None) -> Optional[str]:
    """Render a PathRef as text, returning None for a null PathRef."""
    return path_ref.normalize_path(separator)


def combine(*paths: Optional[str]) -> PathRef:
    """Join path strings in order into a new PathRef, like os.path.join but normalized."""
    return PathRef.combine(*paths)
