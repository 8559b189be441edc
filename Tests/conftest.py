"""
Root conftest.py for shared test fixtures and configuration.
This file provides common fixtures used across the test suite.
"""

import shutil
import sys
import tempfile
from pathlib import Path
from typing import List
from unittest.mock import MagicMock

import pytest
from loguru import logger

# Add project root to Python path for consistent imports
PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from emoji_picker.Emoji_Data import EmojiDataset, get_emoji_dataset
from emoji_picker.Emoji_Data.emoji_dataset import parse_emoji_table
from emoji_picker.Utils.clipboard import ClipboardSink, ClipboardUnavailableError, METHOD_SYSTEM


def table_row(codes: str, status: str, version: str, name: str) -> str:
    """One emoji-test.txt line, with the glyph built from the code points."""
    glyph = "".join(chr(int(c, 16)) for c in codes.split())
    return f"{codes:<40} ; {status:<20} # {glyph} {version} {name}"


SAMPLE_TABLE: List[str] = [
    "# group: Smileys & Emotion",
    "# subgroup: face-smiling",
    table_row("1F600", "fully-qualified", "E1.0", "grinning face"),
    table_row("1F602", "fully-qualified", "E0.6", "face with tears of joy"),
    table_row("1F979", "fully-qualified", "E14.0", "face holding back tears"),
    table_row("1FAE8", "fully-qualified", "E15.0", "shaking face"),
    table_row("263A FE0F", "fully-qualified", "E0.6", "smiling face"),
    table_row("263A", "unqualified", "E0.6", "smiling face"),
    "",
    "# group: People & Body",
    table_row("1F44B", "fully-qualified", "E0.6", "waving hand"),
    table_row("1F44B 1F3FB", "fully-qualified", "E1.0", "waving hand: light skin tone"),
    table_row("1F44B 1F3FF", "fully-qualified", "E1.0", "waving hand: dark skin tone"),
    table_row("270C FE0F", "fully-qualified", "E0.6", "victory hand"),
    table_row("270C", "unqualified", "E0.6", "victory hand"),
    table_row("270C 1F3FD", "fully-qualified", "E1.0", "victory hand: medium skin tone"),
    table_row("1F91D", "fully-qualified", "E3.0", "handshake"),
    table_row("1F91D 1F3FB", "fully-qualified", "E14.0", "handshake: light skin tone"),
    table_row("1FAF1 1F3FB 200D 1FAF2 1F3FC", "fully-qualified", "E14.0",
              "handshake: light skin tone, medium-light skin tone"),
    "",
    "# group: Component",
    table_row("1F3FB", "component", "E1.0", "light skin tone"),
    "",
    "# group: Animals & Nature",
    table_row("1F408", "fully-qualified", "E0.7", "cat"),
    table_row("1F431", "fully-qualified", "E0.6", "cat face"),
    table_row("1F63A", "fully-qualified", "E0.6", "grinning cat"),
    "",
    "# group: Objects",
    table_row("1F4F7", "fully-qualified", "E0.7", "camera"),
    "",
    "#EOF",
]


@pytest.fixture(scope="session")
def emoji_dataset() -> EmojiDataset:
    """The bundled emoji table, parsed once per session."""
    return get_emoji_dataset()


@pytest.fixture
def sample_dataset() -> EmojiDataset:
    """A dozen hand-written rows covering versions, tones and skipped rows."""
    return EmojiDataset(parse_emoji_table(SAMPLE_TABLE))


@pytest.fixture
def isolated_temp_dir():
    """Create an isolated temporary directory that's always cleaned up."""
    temp_dir = tempfile.mkdtemp(prefix="emoji_picker_test_")
    temp_path = Path(temp_dir)
    yield temp_path
    if temp_path.exists():
        shutil.rmtree(temp_dir, ignore_errors=True)


# ========== Mock Fixtures ==========

@pytest.fixture
def mock_app_minimal():
    """Minimal mock app for unit tests that don't need full functionality."""
    app = MagicMock()
    app.notify = MagicMock()
    app.copy_to_clipboard = MagicMock()
    app.query_one = MagicMock()
    app.query = MagicMock()
    return app


class RecordingClipboard(ClipboardSink):
    """Clipboard sink that records writes instead of touching the system clipboard."""

    def __init__(self, available: bool = True):
        super().__init__(terminal_copy=None, terminal_fallback=False)
        self.available = available
        self.copied: List[str] = []

    def set_text(self, text: str) -> str:
        if not self.available:
            raise ClipboardUnavailableError("no clipboard in test")
        self.copied.append(text)
        return METHOD_SYSTEM


@pytest.fixture
def recording_clipboard() -> RecordingClipboard:
    return RecordingClipboard()


@pytest.fixture
def broken_clipboard() -> RecordingClipboard:
    return RecordingClipboard(available=False)


@pytest.fixture
def restore_loguru():
    """Put loguru back to a single stderr sink after a test reconfigures it."""
    yield
    logger.remove()
    logger.add(sys.stderr)


def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "ui: mark test as a UI test")
    config.addinivalue_line("markers", "property: mark test as a property-based test")
