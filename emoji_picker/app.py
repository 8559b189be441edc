# emoji_picker/app.py
# Description: Main application entry point for the emoji picker
#
# Imports
import argparse
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence
#
# 3rd-party Libraries
from loguru import logger
from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.reactive import reactive
from textual.widgets import Button, Footer, Input, Select
#
# Local Imports
from . import __version__
from .config import ConfigError, DEFAULT_CONFIG_FROM_TOML, get_cli_setting, load_cli_config_and_ensure_existence
from .Emoji_Data import EmojiDataset, EmojiDatasetError, Group, SkinTone, get_emoji_dataset
from .Logging_Config import configure_application_logging
from .state import SelectionEvent, SelectionState, SetGroup, SetSearch, SetSkinTone, copy_to_clipboard, reduce
from .Utils.clipboard import ClipboardSink, CopyResult
from .Utils.NotificationHelper import notify_copy_result
from .Utils.pagination import ResolvedEmoji, filter_and_paginate
from .Utils.terminal_utils import THEME_CHOICES, resolve_theme
from .Widgets.emoji_picker import EmojiButton, EmojiGrid, GroupBar, GroupButton, SearchInput, SkinToneSelect
#
#######################################################################################################################
#
# Classes:

class EmojiPickerApp(App[None]):
    """Searchable emoji picker; clicking an emoji copies it to the clipboard."""
    TITLE = "Emoji Picker"
    CSS_PATH = str(Path(__file__).parent / "css/emoji_picker.tcss")
    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", show=True),
        Binding("escape", "clear_search", "Clear search", show=True),
        Binding("ctrl+left", "prev_group", "Previous group", show=False, priority=True),
        Binding("ctrl+right", "next_group", "Next group", show=False, priority=True),
    ]

    selection: reactive[SelectionState] = reactive(SelectionState.initial, init=False, always_update=True)

    def __init__(self,
                 theme_choice: str = "system",
                 app_config: Optional[Dict[str, Any]] = None,
                 dataset: Optional[EmojiDataset] = None,
                 clipboard: Optional[ClipboardSink] = None,
                 **kwargs):
        super().__init__(**kwargs)
        self.app_config: Dict[str, Any] = app_config if app_config is not None else DEFAULT_CONFIG_FROM_TOML
        self.theme_choice = theme_choice
        self.dataset: EmojiDataset = dataset if dataset is not None else get_emoji_dataset()
        self.clipboard_sink = clipboard if clipboard is not None else ClipboardSink(
            terminal_copy=self.copy_to_clipboard,
            terminal_fallback=get_cli_setting("clipboard", "terminal_fallback", True, config=self.app_config),
        )
        self.notify_on_copy = get_cli_setting("clipboard", "notify_on_copy", True, config=self.app_config)
        self.rows: List[List[ResolvedEmoji]] = []

    def compose(self) -> ComposeResult:
        with Vertical(id="picker"):
            with Horizontal(id="search-bar"):
                yield SearchInput(id="search-input")
                yield SkinToneSelect(id="skin-tone-select")
            yield GroupBar(id="group-bar")
            yield EmojiGrid(id="emoji-grid")
        yield Footer()

    def on_mount(self) -> None:
        self.theme = resolve_theme(self.theme_choice)
        logger.info(f"Emoji Picker started with theme '{self.theme}' and {len(self.dataset)} emoji")
        self.selection = SelectionState.initial()
        self.query_one("#search-input", Input).focus()

    # --- State ---

    def dispatch_selection_event(self, event: SelectionEvent) -> None:
        """Run an event through the reducer; the watcher re-renders the grid."""
        self.selection = reduce(self.selection, event)

    def watch_selection(self, old: SelectionState, new: SelectionState) -> None:
        self.rows = filter_and_paginate(new.filter, self.dataset)
        self.query_one("#emoji-grid", EmojiGrid).populate_grid(self.rows)
        self.query_one("#group-bar", GroupBar).highlight(new.group)
        logger.debug(f"Rendered {sum(len(r) for r in self.rows)} emoji in {len(self.rows)} rows for {new.filter!r}")

    # --- Event handlers ---

    @on(Input.Changed, "#search-input")
    def handle_search_changed(self, event: Input.Changed) -> None:
        self.dispatch_selection_event(SetSearch(event.value))

    @on(Select.Changed, "#skin-tone-select")
    def handle_skin_tone_changed(self, event: Select.Changed) -> None:
        if isinstance(event.value, SkinTone):
            self.dispatch_selection_event(SetSkinTone(event.value))

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if isinstance(event.button, EmojiButton):
            self.copy_emoji(event.button.cell)
        elif isinstance(event.button, GroupButton):
            self.dispatch_selection_event(SetGroup(event.button.group))

    def copy_emoji(self, cell: ResolvedEmoji) -> CopyResult:
        result = copy_to_clipboard(cell, self.clipboard_sink)
        notify_copy_result(self, result, notify_on_success=self.notify_on_copy)
        return result

    # --- Actions ---

    def action_clear_search(self) -> None:
        search_input = self.query_one("#search-input", Input)
        if search_input.value:
            search_input.value = ""

    def _step_group(self, step: int) -> None:
        groups = list(Group)
        index = groups.index(self.selection.group)
        self.dispatch_selection_event(SetGroup(groups[(index + step) % len(groups)]))

    def action_prev_group(self) -> None:
        self._step_group(-1)

    def action_next_group(self) -> None:
        self._step_group(1)


#
# Functions:

def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Emoji Picker - search emoji and copy them to the clipboard",
        prog="emoji-picker"
    )
    parser.add_argument(
        "-t", "--theme",
        choices=THEME_CHOICES,
        default=None,
        help="Theme to use: system, light or dark; defaults to the config's [general] theme (system)"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to an alternate config.toml"
    )
    parser.add_argument(
        "-V", "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )
    return parser


def main_cli_runner(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point for the emoji-picker command."""
    args = build_arg_parser().parse_args(argv)

    try:
        app_config = load_cli_config_and_ensure_existence(config_path=args.config)
    except ConfigError as e:
        logger.error(str(e))
        return 1
    configure_application_logging(app_config)

    theme_choice = args.theme or get_cli_setting("general", "theme", "system", config=app_config)
    if theme_choice not in THEME_CHOICES:
        logger.warning(f"Ignoring unknown theme '{theme_choice}' from config, using 'system'")
        theme_choice = "system"

    try:
        dataset = get_emoji_dataset()
    except EmojiDatasetError as e:
        logger.error(f"Cannot start: {e}")
        return 1

    app_instance = EmojiPickerApp(theme_choice=theme_choice, app_config=app_config, dataset=dataset)
    try:
        app_instance.run()
    except KeyboardInterrupt:
        logger.info("--- KeyboardInterrupt received ---")
    except Exception:
        logger.exception("--- CRITICAL ERROR DURING app.run() ---")
        return 1
    return app_instance.return_code or 0


if __name__ == "__main__":
    sys.exit(main_cli_runner())

#
# End of app.py
#######################################################################################################################
