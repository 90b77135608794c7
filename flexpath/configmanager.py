import os
import platform
from pathlib import Path
from typing import Any, Optional, Union

import tomlkit

RENDER_SECTION = "render"


class ConfigManager:
    """Settings for how flexpath renders paths, kept in a TOML file.

    The file is read once when the manager is created. set() writes straight back to
    the file through tomlkit, so comments and formatting a user added by hand survive.

    Attributes:
        app_name (str): Name of the directory holding the config file. (Default: 'flexpath')
        config_file_path (Path): The path to the configuration file.
    """

    def __init__(
        self, app_name: str = "flexpath", config_dir: Optional[Union[str, Path]] = None
    ) -> None:
        self.app_name = app_name
        self.config_file_path = self._get_config_file_path(config_dir)
        self.config = tomlkit.document()
        if self.config_file_path.exists():
            with open(self.config_file_path, "r") as configfile:
                self.config = tomlkit.parse(configfile.read())

    def _get_config_file_path(self, config_dir: Optional[Union[str, Path]]) -> Path:
        if config_dir:
            base_dir = Path(config_dir)
        elif platform.system() == "Windows":
            base_dir = Path(os.getenv("APPDATA", str(Path("~\\AppData\\Roaming"))))
        else:
            base_dir = Path(os.getenv("XDG_CONFIG_HOME", str(Path("~/.config"))))
        return (base_dir / self.app_name / "config.toml").expanduser()

    def get(self, section: str, option: str, fallback: Optional[Any] = None) -> Any:
        """Gets a configuration value, or fallback if the section or option is missing."""
        return self.config.get(section, {}).get(option, fallback)

    def set(self, section: str, option: str, value: Any) -> None:
        """Sets a configuration value and saves the configuration file."""
        if section not in self.config:
            self.config[section] = tomlkit.table()
        self.config[section][option] = value
        self.config_file_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_file_path, "w") as configfile:
            configfile.write(tomlkit.dumps(self.config))

    def render_separator(self) -> str:
        """The separator style to render paths with, from 'render.separator'.

        Returns:
            str: 'native', 'posix', 'windows', or a single separator character. (Default: 'native')
        """
        return str(self.get(RENDER_SECTION, "separator", fallback="native"))

    def render_trailing_separator(self) -> Optional[bool]:
        """Whether rendered paths should end with a separator, from 'render.trailing_separator'.

        Anything other than a TOML boolean is ignored.

        Returns:
            Optional[bool]: The setting, or None when each path keeps its own trailing separator.
        """
        value = self.get(RENDER_SECTION, "trailing_separator")
        if isinstance(value, bool):
            return value
        return None
