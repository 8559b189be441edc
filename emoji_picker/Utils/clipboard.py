# clipboard.py
# Description: Clipboard sink used when an emoji is picked
#
# Imports
from dataclasses import dataclass
from typing import Callable, Optional
#
# 3rd-party Libraries
import pyperclip
from loguru import logger
#
########################################################################################################################
#
# Classes:

METHOD_SYSTEM = "system"
METHOD_TERMINAL = "terminal"


class ClipboardUnavailableError(Exception):
    """No clipboard mechanism could take the text."""


@dataclass(frozen=True)
class CopyResult:
    """Outcome of one clipboard write."""
    text: str
    ok: bool
    method: Optional[str] = None
    error: Optional[str] = None


class ClipboardSink:
    """
    Writes text to the system clipboard through pyperclip.

    When pyperclip has no usable backend (no xclip/xsel/wl-copy, headless session) and
    a terminal writer is configured, the text is handed to the terminal instead
    (Textual's App.copy_to_clipboard, which emits an OSC 52 sequence).
    """

    def __init__(self, terminal_copy: Optional[Callable[[str], None]] = None, terminal_fallback: bool = True):
        self.terminal_copy = terminal_copy
        self.terminal_fallback = terminal_fallback

    def set_text(self, text: str) -> str:
        """Place `text` on the clipboard, returning the method used."""
        try:
            pyperclip.copy(text)
            return METHOD_SYSTEM
        except pyperclip.PyperclipException as e:
            if not (self.terminal_fallback and self.terminal_copy):
                raise ClipboardUnavailableError(str(e)) from e
            logger.debug(f"pyperclip unavailable ({e}), using terminal clipboard")

        try:
            self.terminal_copy(text)
        except Exception as e:
            raise ClipboardUnavailableError(f"Terminal clipboard failed: {e}") from e
        return METHOD_TERMINAL

    def copy(self, text: str) -> CopyResult:
        try:
            method = self.set_text(text)
        except ClipboardUnavailableError as e:
            return CopyResult(text=text, ok=False, error=str(e))
        return CopyResult(text=text, ok=True, method=method)

#
# End of clipboard.py
########################################################################################################################
