# Copyright 2023 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
import os
import re
from typing import Iterable, List, Optional, Tuple

POSIX_SEPARATOR = "/"
WINDOWS_SEPARATOR = "\\"
VOLUME_SEPARATOR = ":"
PARENT_DIRECTORY_SEGMENT = ".."
CURRENT_DIRECTORY_SEGMENT = "."

# Both separators are recognized on every platform
DIRECTORY_SEPARATORS = (POSIX_SEPARATOR, WINDOWS_SEPARATOR)

_SEPARATOR_RE = re.compile(r"[\\/]")

SEPARATOR_STYLES = {
    "native": os.sep,
    "posix": POSIX_SEPARATOR,
    "windows": WINDOWS_SEPARATOR,
}


def split_segments(path: str) -> List[str]:
    """
    Split a path string on every recognized directory separator.

    Unlike str.split(os.sep), both '/' and '\\' are treated as separators and
    empty segments are kept, so callers can tell a leading separator ('' first),
    a trailing separator ('' last) and runs of separators ('' in the middle)
    apart from each other.

    Args:
        path (str): The path text to split.

    Returns:
        List[str]: The raw segments, always at least one ('' for an empty path).
    """
    return _SEPARATOR_RE.split(path)


def is_root_segment(segment: str) -> bool:
    """Return True if segment looks like a volume or scheme marker, e.g. 'C:' or 'http:'."""
    return bool(segment) and segment.endswith(VOLUME_SEPARATOR)


def find_separator(name: str) -> Optional[Tuple[str, int]]:
    """
    Find the first directory separator inside a single segment name.

    '/' is looked for before '\\', so a name containing both reports the '/'.

    Returns:
        Optional[Tuple[str, int]]: (character, index) of the offending separator, or None.
    """
    for sep in DIRECTORY_SEPARATORS:
        index = name.find(sep)
        if index >= 0:
            return sep, index
    return None


def join_tokens(
    tokens: Iterable[str], separator: str, prefix: str = "", trailing: bool = False
) -> str:
    """
    Join rendered path tokens with a separator.

    The prefix (a lone separator for absolute paths) is emitted as-is and is not
    treated as a token, so no separator is inserted between it and the first token.
    A trailing separator is only appended when at least one token was emitted.
    """
    parts = list(tokens)
    text = prefix + separator.join(parts)
    if trailing and parts:
        text += separator
    return text


def resolve_separator(style: Optional[str]) -> str:
    """
    Map a separator style name ('native', 'posix', 'windows') to its character.
    A single character that is not a known style name is returned unchanged.

    Raises:
        ValueError: If style is neither a known style name nor a single character.
    """
    if style is None:
        return os.sep
    key = style.lower()
    if key in SEPARATOR_STYLES:
        return SEPARATOR_STYLES[key]
    if len(style) == 1:
        return style
    raise ValueError(f"Unknown separator style '{style}'")
