# emoji_picker.py
#
# Imports
from typing import List, Optional
#
# 3rd-party Libraries
import emoji
from textual.app import ComposeResult
from textual.containers import Horizontal, VerticalScroll
from textual.widgets import Button, Input, Select, Static
#
# Local Imports
from ..Emoji_Data import Group, SkinTone
from ..Utils.pagination import ResolvedEmoji
#
########################################################################################################################
#
# Classes:

SKIN_TONE_SAMPLE = "🖖"


def group_widget_id(group: Group) -> str:
    return "group-" + group.name.lower().replace("_", "-")


def shortcode_for(glyph: str) -> Optional[str]:
    """`:cat_face:` style shortcode from the emoji package, None when it has none."""
    code = emoji.demojize(glyph)
    if code == glyph or not (code.startswith(":") and code.endswith(":")):
        return None
    return code


def emoji_tooltip(cell: ResolvedEmoji) -> str:
    shortcode = shortcode_for(cell.glyph)
    return f"{cell.name}\n{shortcode}" if shortcode else cell.name


class EmojiButton(Button):
    def __init__(self, cell: ResolvedEmoji, **kwargs):
        super().__init__(label=cell.glyph, **kwargs)
        self.cell = cell
        self.tooltip = emoji_tooltip(cell)


class GroupButton(Button):
    def __init__(self, group: Group, **kwargs):
        super().__init__(label=group.icon, id=group_widget_id(group), **kwargs)
        self.group = group
        self.tooltip = group.label


class GroupBar(Horizontal):
    """One button per emoji group."""

    def compose(self) -> ComposeResult:
        for group in Group:
            yield GroupButton(group, classes="group_button")

    def highlight(self, group: Group) -> None:
        for button in self.query(GroupButton):
            button.set_class(button.group is group, "-active")


class SkinToneSelect(Select):
    """Drop-down of the six skin tones, each shown on the vulcan salute."""

    def __init__(self, value: SkinTone = SkinTone.DEFAULT, **kwargs):
        options = [
            (SKIN_TONE_SAMPLE + (tone.modifier or ""), tone)
            for tone in SkinTone
        ]
        super().__init__(options, value=value, allow_blank=False, **kwargs)


class SearchInput(Input):
    def __init__(self, **kwargs):
        super().__init__(placeholder="Search", **kwargs)


class EmojiGrid(VerticalScroll):
    """Scrollable rows of emoji buttons."""

    def populate_grid(self, rows: List[List[ResolvedEmoji]]) -> None:
        self.remove_children()

        row_widgets = []
        for row in rows:
            row_widgets.append(Horizontal(*[EmojiButton(cell, classes="emoji_button") for cell in row],
                                          classes="emoji_row"))
        self.mount_all(row_widgets)

        if not any(rows):
            self.mount(Static("No emojis found.", classes="no_emojis_message"))
        self.scroll_home(animate=False)

    @property
    def cells(self) -> List[ResolvedEmoji]:
        return [button.cell for button in self.query(EmojiButton)]

#
# End of emoji_picker.py
########################################################################################################################
