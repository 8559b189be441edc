"""
Tests for clipboard notifications.
"""
from emoji_picker.Utils.clipboard import METHOD_SYSTEM, METHOD_TERMINAL, CopyResult
from emoji_picker.Utils.NotificationHelper import notify_copy_result


def test_failure_is_an_error_notification(mock_app_minimal):
    notify_copy_result(mock_app_minimal, CopyResult(text="🐈", ok=False, error="no xclip"))
    args, kwargs = mock_app_minimal.notify.call_args
    assert "no xclip" in args[0]
    assert kwargs["severity"] == "error"


def test_success_message(mock_app_minimal):
    notify_copy_result(mock_app_minimal, CopyResult(text="🐈", ok=True, method=METHOD_SYSTEM))
    args, kwargs = mock_app_minimal.notify.call_args
    assert args[0] == "Copied 🐈 to clipboard"
    assert kwargs["severity"] == "information"


def test_terminal_success_message(mock_app_minimal):
    notify_copy_result(mock_app_minimal, CopyResult(text="🐈", ok=True, method=METHOD_TERMINAL))
    assert "terminal clipboard" in mock_app_minimal.notify.call_args[0][0]


def test_success_can_be_silenced(mock_app_minimal):
    notify_copy_result(mock_app_minimal, CopyResult(text="🐈", ok=True, method=METHOD_SYSTEM),
                       notify_on_success=False)
    mock_app_minimal.notify.assert_not_called()


def test_failure_is_never_silenced(mock_app_minimal):
    notify_copy_result(mock_app_minimal, CopyResult(text="🐈", ok=False, error="x"), notify_on_success=False)
    mock_app_minimal.notify.assert_called_once()
