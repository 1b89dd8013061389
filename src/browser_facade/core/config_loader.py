import json
import logging
import os
from pathlib import Path
from typing import Dict, Any, Union, Optional

# Define project root relative to this file's location (src/browser_facade/core/config_loader.py)
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent.parent
CONFIG_DIR = PROJECT_ROOT / 'config'
DEFAULT_SETTINGS_FILE = CONFIG_DIR / 'settings.json'

# Prefix for environment overrides, e.g. BROWSER_FACADE_PERF_IMPLICIT_WAIT
ENV_OVERRIDE_PREFIX = "BROWSER_FACADE_"
HEADLESS_ENV = "HEADLESS"
TRUTHY_VALUES = ('1', 'true', 'yes', 'on')

logger = logging.getLogger(__name__)


def env_key_for(path_str: str) -> str:
    """Maps a dotted setting path to its environment override name."""
    return ENV_OVERRIDE_PREFIX + path_str.replace('.', '_').upper()


class ConfigLoader:
    def __init__(self, settings_file: Union[str, Path] = DEFAULT_SETTINGS_FILE,
                 settings: Optional[Dict[str, Any]] = None):
        """
        Initializes the ConfigLoader.

        Args:
            settings_file (Union[str, Path], optional): Path to the settings JSON file.
                                                        Defaults to 'config/settings.json'.
            settings (Dict[str, Any], optional): Pre-built settings; when given the file is not read.
        """
        self.settings_file: Path = Path(settings_file)

        if settings is not None:
            self.settings: Dict[str, Any] = settings
        else:
            self.settings = self._load_json(self.settings_file, default_value={})
            if not self.settings:
                logger.warning(f"Settings file '{self.settings_file}' was not found or is empty/invalid. Using empty settings.")

    def _load_json(self, file_path: Path, default_value: Dict) -> Any:
        """
        Loads a JSON file.

        Args:
            file_path (Path): The path to the JSON file.
            default_value (Dict): The default value to return if loading fails.

        Returns:
            Any: The loaded JSON data or the default value.
        """
        if not file_path.exists():
            logger.error(f"Configuration file not found: {file_path}")
            return default_value
        if not file_path.is_file():
            logger.error(f"Configuration path is not a file: {file_path}")
            return default_value

        try:
            with file_path.open('r', encoding='utf-8') as f:
                data = json.load(f)
                logger.debug(f"Successfully loaded JSON from {file_path}")
        except json.JSONDecodeError as e:
            logger.error(f"Could not decode JSON from {file_path}: {e}")
            return default_value
        except OSError as e:
            logger.error(f"An unexpected error occurred while loading {file_path}: {e}")
            return default_value

        if not isinstance(data, dict):
            logger.error(f"Configuration file {file_path} must contain a JSON object, found {type(data).__name__}.")
            return default_value
        return data

    def get_settings(self) -> Dict[str, Any]:
        """Returns all loaded settings."""
        return self.settings

    def get_setting(self, path_str: str, default: Any = None) -> Any:
        """
        Retrieves a setting value using a dot-separated path.

        Args:
            path_str (str): Dot-separated path to the setting (e.g., "logging.level").
            default (Any, optional): Default value if the setting is not found. Defaults to None.

        Returns:
            Any: The setting value or the default.
        """
        keys = path_str.split('.')
        current_level = self.settings
        try:
            for key in keys:
                if isinstance(current_level, dict):
                    current_level = current_level[key]
                else:  # Path leads to a non-dict item before all keys are consumed
                    logger.warning(f"Invalid path '{path_str}' at key '{key}'. Expected a dictionary, found {type(current_level)}.")
                    return default
            return current_level
        except KeyError:
            logger.debug(f"Setting '{path_str}' not found. Returning default: {default}")
            return default

    def get_cascading_setting(self, path_str: str, default: Any = None) -> Any:
        """
        Resolves a setting through the override cascade.

        Order: environment variable (see `env_key_for`), then the settings file,
        then `default`. Environment values are always strings.
        """
        env_name = env_key_for(path_str)
        env_value = os.environ.get(env_name)
        if env_value is not None and env_value.strip() != '':
            logger.debug(f"Setting '{path_str}' overridden by environment variable {env_name}.")
            return env_value
        return self.get_setting(path_str, default)

    def is_headless(self) -> bool:
        """Process-wide headless flag: HEADLESS env var wins over browser.headless."""
        env_value = os.environ.get(HEADLESS_ENV)
        if env_value is not None:
            return env_value.strip().lower() in TRUTHY_VALUES
        value = self.get_setting('browser.headless', False)
        if isinstance(value, str):
            return value.strip().lower() in TRUTHY_VALUES
        return bool(value)

    def get_browser_setting(self, setting_name: str, default: Any = None) -> Any:
        """Retrieves a cascading setting from the 'browser' block."""
        return self.get_cascading_setting(f'browser.{setting_name}', default)

    def get_logging_setting(self, setting_name: str, default: Any = None) -> Any:
        """Retrieves a specific setting from the 'logging' block."""
        return self.get_setting(f'logging.{setting_name}', default)
