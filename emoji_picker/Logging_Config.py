"""
Logging configuration for the emoji picker.

Logs go to a rotating file by default; a stderr sink can be enabled in the
[logging] section of the config, but stays off while the TUI owns the terminal.
"""

import sys
from typing import Any, Dict

from loguru import logger

from .config import get_cli_setting, resolve_log_path

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}"


def configure_application_logging(app_config: Dict[str, Any]) -> None:
    """
    Configure loguru sinks from the loaded configuration.

    This should be called once at startup, before the app runs.
    """
    level = str(get_cli_setting("logging", "log_level", "INFO", config=app_config)).upper()
    log_path = resolve_log_path(app_config)

    logger.remove()  # Remove default handler
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            sink=str(log_path),
            level=level,
            format=LOG_FORMAT,
            rotation=get_cli_setting("logging", "rotation", "5 MB", config=app_config),
            retention=get_cli_setting("logging", "retention", "7 days", config=app_config),
            encoding="utf-8",
        )
    except (OSError, ValueError) as e:
        # Keep a sink so startup errors are not lost
        logger.add(sink=sys.stderr, level="WARNING")
        logger.warning(f"Could not open log file {log_path}: {e}")

    if get_cli_setting("logging", "console", False, config=app_config):
        logger.add(sink=sys.stderr, level=level, colorize=True)

    logger.info(f"Logging configured: level={level}, file={log_path}")
