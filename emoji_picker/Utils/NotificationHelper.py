# NotificationHelper.py
# Description: Helper for user-facing notifications about clipboard writes
#
# Imports
from typing import TYPE_CHECKING, Optional
#
# Local Imports
from .clipboard import METHOD_TERMINAL, CopyResult
#
# Type checking imports
if TYPE_CHECKING:
    from textual.app import App
#
#######################################################################################################################
#
# Functions:

COPY_SUCCESS_TIMEOUT = 2.0
COPY_FAILURE_TIMEOUT = 8.0


def show_notification(
    app: 'App',
    message: str,
    severity: str = "information",
    timeout: Optional[float] = None
) -> None:
    """
    Show a Textual toast notification.

    Args:
        app: The app instance
        message: Message to display
        severity: Textual severity level (information, warning, error)
        timeout: Timeout in seconds, Textual's default when None
    """
    if timeout is None:
        app.notify(message, severity=severity)
    else:
        app.notify(message, severity=severity, timeout=timeout)


def notify_copy_result(app: 'App', result: CopyResult, notify_on_success: bool = True) -> None:
    """Tell the user whether the picked emoji reached the clipboard."""
    if not result.ok:
        show_notification(
            app,
            f"Could not copy {result.text} to the clipboard: {result.error}",
            severity="error",
            timeout=COPY_FAILURE_TIMEOUT,
        )
        return

    if not notify_on_success:
        return
    if result.method == METHOD_TERMINAL:
        message = f"Sent {result.text} to the terminal clipboard"
    else:
        message = f"Copied {result.text} to clipboard"
    show_notification(app, message, timeout=COPY_SUCCESS_TIMEOUT)

#
# End of NotificationHelper.py
#######################################################################################################################
