# Copyright 2023 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
from typing import Optional


class InvalidChildNameError(ValueError):
    """Raised when a name passed to PathRef.point_to_child can't be a single path segment.

    Attributes:
        child_name (str): The rejected name.
        character (Optional[str]): The separator character found in the name, if any.
        index (Optional[int]): Index of that character within the name, if any.
    """

    def __init__(
        self, message: str, child_name: str, character: Optional[str] = None, index: Optional[int] = None
    ):
        super().__init__(message)
        self.child_name = child_name
        self.character = character
        self.index = index
