# emoji_picker/Utils/terminal_utils.py
# Description: Terminal capability detection utilities
#
# Imports
#
# Standard Library
import os
from typing import Literal, Mapping, Optional
#
# 3rd-party Libraries
from loguru import logger
#
#######################################################################################################################
#
# Functions:

ThemeChoice = Literal["system", "light", "dark"]
THEME_CHOICES = ("system", "light", "dark")

TEXTUAL_THEMES = {
    "light": "textual-light",
    "dark": "textual-dark",
}

# ANSI colour indexes that are light backgrounds (white, bright white)
_LIGHT_BACKGROUNDS = {7, 15}


def detect_terminal_background(environ: Optional[Mapping[str, str]] = None) -> Optional[Literal["light", "dark"]]:
    """
    Guess whether the terminal background is light or dark.

    Uses COLORFGBG ("fg;bg" or "fg;default;bg"), which rxvt, Konsole, iTerm2 and
    others export. Returns None when the variable is missing or unparsable.
    """
    env = os.environ if environ is None else environ
    colorfgbg = env.get("COLORFGBG", "")
    if not colorfgbg:
        return None

    bg = colorfgbg.split(";")[-1]
    try:
        bg_index = int(bg)
    except ValueError:
        logger.debug(f"Unrecognised COLORFGBG value: {colorfgbg!r}")
        return None
    return "light" if bg_index in _LIGHT_BACKGROUNDS else "dark"


def resolve_theme(choice: str, environ: Optional[Mapping[str, str]] = None) -> str:
    """Map a theme choice (system, light, dark) to a Textual theme name."""
    if choice not in THEME_CHOICES:
        raise ValueError(f"Unknown theme '{choice}', expected one of {', '.join(THEME_CHOICES)}")
    if choice == "system":
        detected = detect_terminal_background(environ) or "dark"
        logger.info(f"System theme resolved to '{detected}'")
        return TEXTUAL_THEMES[detected]
    return TEXTUAL_THEMES[choice]

#
# End of terminal_utils.py
#######################################################################################################################
