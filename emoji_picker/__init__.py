"""
emoji_picker - A Textual emoji picker

A single-screen Terminal User Interface built with the Textual framework:
search emoji by name, browse them by group, pick a skin tone, and click an
emoji to copy it to the clipboard.
"""

__version__ = "0.1.0"
__author__ = "Emoji Picker contributors"
__license__ = "AGPLv3+"

# Version tuple for programmatic comparison
VERSION_TUPLE = (0, 1, 0)

# Export key components when package is imported
__all__ = [
    "__version__",
    "__author__",
    "__license__",
    "VERSION_TUPLE",
]
