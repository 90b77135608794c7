# Copyright 2023 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
from typing import Optional, Tuple

import click
from loguru import logger

from flexpath.configmanager import ConfigManager
from flexpath.errors import InvalidChildNameError
from flexpath.pathref import PathRef
from flexpath.utils.paths import resolve_separator


@click.command("normalize")
@click.argument("paths", nargs=-1)
@click.option(
    "--separator",
    is_flag=False,
    default=None,
    help="Separator to render with, options=native|posix|windows or a single character (default: render.separator setting, then native)",
)
@click.option(
    "--trailing/--no-trailing",
    default=None,
    help="Force or suppress a trailing separator (default: render.trailing_separator setting, then keep the input's own)",
)
@click.option(
    "--parent",
    "parents",
    type=click.IntRange(min=0),
    default=0,
    show_default=True,
    help="Number of times to navigate to the parent after joining PATHS",
)
@click.option(
    "--child",
    "children",
    multiple=True,
    help="Child name to navigate into after joining PATHS (may be repeated)",
)
# pylint: disable-next=too-many-positional-arguments
def normalize(
    paths: Tuple[str, ...],
    separator: Optional[str],
    trailing: Optional[bool],
    parents: int,
    children: Tuple[str, ...],
):
    """Join PATHS in order and print the normalized result.

    Later absolute or rooted PATHS replace earlier ones; '.' and '..' segments are resolved
    without looking at the filesystem.
    """
    config_manager = ConfigManager()
    if separator is None:
        separator = config_manager.render_separator()
    if trailing is None:
        trailing = config_manager.render_trailing_separator()

    try:
        sep = resolve_separator(separator)
    except ValueError as err:
        raise SystemExit(str(err)) from err

    if not paths and not parents and not children:
        logger.debug("No paths given, nothing to normalize")
        return

    path_ref = PathRef.combine(*paths) if paths else PathRef()
    for _ in range(parents):
        path_ref.point_to_parent()
    for child in children:
        try:
            path_ref.point_to_child(child)
        except InvalidChildNameError as err:
            raise SystemExit(str(err)) from err

    logger.debug(f"Normalized {list(paths)} to {path_ref!r}")
    click.echo(path_ref.normalize_path(sep, trailing))
