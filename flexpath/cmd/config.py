from typing import Any, List, Optional, Tuple

import click
from loguru import logger

from flexpath.configmanager import ConfigManager
from flexpath.utils.paths import resolve_separator


def _split_key(key: str) -> Tuple[str, str]:
    try:
        section, option = key.split(".", 1)
    except ValueError as err:
        raise SystemExit("Invalid KEY given. Is it in the format 'section.option'?") from err
    return section, option


def _convert_value(value: str) -> Any:
    # Convert 'true' and 'false' strings to boolean
    if value.lower() == "true":
        return True
    if value.lower() == "false":
        return False
    return value


@click.command("config")
@click.argument("key", required=True)
@click.argument("values", nargs=-1)
def config(key: str, values: Optional[List[str]]):
    """Get or set a configuration value.

    If only KEY is provided, the current value is displayed.
    If both KEY and one or more VALUES are provided, the configuration value is set.
    KEY should be in the format 'section.option', e.g. 'render.separator'.
    """
    config_manager = ConfigManager()
    section, option = _split_key(key)

    if not values:
        result = config_manager.get(section, option)
        if result is None:
            click.echo(f"Configuration '{key}' not found.")
        else:
            click.echo(f"{key} = {result}")
        return

    converted_values = [_convert_value(value) for value in values]
    # If there's only one value, store it as a single value, otherwise store as a list
    final_value = converted_values[0] if len(converted_values) == 1 else converted_values

    if (section, option) == ("render", "separator"):
        try:
            resolve_separator(str(final_value))
        except ValueError as err:
            raise SystemExit(
                f"Invalid separator '{final_value}'. Use native, posix, windows, or a single character."
            ) from err
    elif (section, option) == ("render", "trailing_separator") and not isinstance(final_value, bool):
        raise SystemExit(f"Invalid trailing_separator '{final_value}'. Use true or false.")

    logger.debug(f"Setting {key} in {config_manager.config_file_path}")
    config_manager.set(section, option, final_value)
    click.echo(f"Configuration '{key}' set to '{final_value}'.")
