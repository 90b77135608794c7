# Copyright 2023 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
import importlib.metadata

from .errors import InvalidChildNameError
from .pathref import PathRef, combine, parse, to_text
from .segmented_path import SegmentedPath

try:
    __version__ = importlib.metadata.version("flexpath")
except importlib.metadata.PackageNotFoundError:
    __version__ = ""

__all__ = ["PathRef", "SegmentedPath", "InvalidChildNameError", "parse", "to_text", "combine"]
