# emoji_picker/config.py
# Description: Configuration management for the emoji picker.
#
# Imports
import copy
import sys
if sys.version_info < (3, 11):
    import tomli as tomllib
else:
    import tomllib
from pathlib import Path
from typing import Any, Dict, Optional, Union
#
# Third-Party Imports
from loguru import logger
#
#######################################################################################################################
#
# Functions:

# --- Path to the configuration file ---
DEFAULT_CONFIG_PATH = Path.home() / ".config" / "emoji_picker" / "config.toml"
DEFAULT_LOG_PATH = Path.home() / ".local" / "share" / "emoji_picker" / "logs" / "emoji_picker.log"

CONFIG_TOML_CONTENT = """
# Configuration for Emoji Picker
# Values here are read at startup; choices made inside the picker are never saved.

[general]
# Theme used when --theme is not given: "system", "light" or "dark".
# "system" follows the terminal background (COLORFGBG), dark if unknown.
theme = "system"

[logging]
# TRACE, DEBUG, INFO, WARNING, ERROR
log_level = "INFO"
# Empty means ~/.local/share/emoji_picker/logs/emoji_picker.log
log_file = ""
rotation = "5 MB"
retention = "7 days"
# Also log to stderr. Leave off while the picker owns the terminal.
console = false

[clipboard]
# Use the terminal's clipboard (OSC 52) when no system clipboard tool is found.
terminal_fallback = true
# Show a notification after every successful copy.
notify_on_copy = true
"""


class ConfigError(Exception):
    """Raised when an explicitly requested configuration file cannot be used."""


try:
    DEFAULT_CONFIG_FROM_TOML: Dict[str, Any] = tomllib.loads(CONFIG_TOML_CONTENT)
except tomllib.TOMLDecodeError as e:
    logger.critical(f"FATAL: Could not parse internal CONFIG_TOML_CONTENT: {e}. Application cannot start correctly.")
    DEFAULT_CONFIG_FROM_TOML = {}


# --- Helper for deep merging dictionaries ---
def deep_merge_dicts(base: Dict, update: Dict) -> Dict:
    """Recursively merges update_dict into base_dict."""
    merged = copy.deepcopy(base)
    for key, value in update.items():
        if isinstance(value, dict) and key in merged and isinstance(merged[key], dict):
            merged[key] = deep_merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged


def _write_default_config(path: Path) -> bool:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(CONFIG_TOML_CONTENT)
    except OSError as e:
        logger.error(f"Could not create default config file {path}: {e}. Using internal defaults.")
        return False
    logger.info(f"Created default config file at {path}")
    return True


# --- Primary Configuration Loading Logic ---
_CONFIG_CACHE: Optional[Dict[str, Any]] = None


def load_cli_config_and_ensure_existence(config_path: Union[str, Path, None] = None,
                                         force_reload: bool = False) -> Dict[str, Any]:
    """
    Loads settings from ~/.config/emoji_picker/config.toml, or from `config_path`.

    The default file is created from CONFIG_TOML_CONTENT when it doesn't exist. An
    explicit `config_path` must exist. User values are merged over the built-in
    defaults; a file that fails to parse is logged and the defaults are used.
    """
    global _CONFIG_CACHE
    if _CONFIG_CACHE is not None and not force_reload and config_path is None:
        return _CONFIG_CACHE

    loaded_config = copy.deepcopy(DEFAULT_CONFIG_FROM_TOML)

    if config_path is not None:
        path = Path(config_path).expanduser()
        if not path.is_file():
            raise ConfigError(f"Config file not found: {path}")
    else:
        path = DEFAULT_CONFIG_PATH
        if not path.exists():
            logger.info(f"Config file not found at {path}. Creating with default values.")
            if _write_default_config(path):
                loaded_config["_first_run"] = True
            _CONFIG_CACHE = loaded_config
            return loaded_config

    logger.info(f"Attempting to load config from: {path}")
    try:
        with open(path, "rb") as f:
            user_config_from_file = tomllib.load(f)
        loaded_config = deep_merge_dicts(loaded_config, user_config_from_file)
        logger.info(f"Successfully loaded and merged config from {path}")
    except tomllib.TOMLDecodeError as e:
        logger.error(f"Error decoding TOML config file {path}: {e}. Using internal defaults.")
    except OSError as e:
        logger.error(f"Could not read config file {path}: {e}. Using internal defaults.")

    _CONFIG_CACHE = loaded_config
    logger.debug(f"Config loaded with top-level keys: {list(loaded_config.keys())}")
    return loaded_config


# --- Setting Getter ---
def get_cli_setting(section: str, key: str, default: Any = None, config: Optional[Dict[str, Any]] = None) -> Any:
    """Helper to get a specific setting from the loaded configuration."""
    if config is None:
        config = load_cli_config_and_ensure_existence()
    section_data = config.get(section)
    if isinstance(section_data, dict):
        return section_data.get(key, default)
    return default


def resolve_log_path(config: Dict[str, Any]) -> Path:
    log_file = get_cli_setting("logging", "log_file", "", config=config)
    return Path(log_file).expanduser() if log_file else DEFAULT_LOG_PATH

#
# End of config.py
#######################################################################################################################
