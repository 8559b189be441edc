"""
Picker selection state and its reducer.
"""

from dataclasses import dataclass, field, replace
from typing import Tuple, Union

from loguru import logger

from ..Emoji_Data import Group, SkinTone
from ..Utils.clipboard import ClipboardSink, CopyResult
from ..Utils.pagination import ResolvedEmoji

FilterKey = Tuple[Group, SkinTone, str]


@dataclass(frozen=True)
class SelectionState:
    """Current search text, group and skin tone plus the derived filter key."""

    search: str = ""
    group: Group = Group.SMILEYS_AND_EMOTION
    skin_tone: SkinTone = SkinTone.DEFAULT
    filter: FilterKey = field(default=(Group.SMILEYS_AND_EMOTION, SkinTone.DEFAULT, ""))

    @classmethod
    def initial(cls) -> 'SelectionState':
        """First group, default tone, empty search."""
        return cls._derive(search="", group=list(Group)[0], skin_tone=SkinTone.DEFAULT)

    @classmethod
    def _derive(cls, search: str, group: Group, skin_tone: SkinTone) -> 'SelectionState':
        return cls(search=search, group=group, skin_tone=skin_tone, filter=(group, skin_tone, search))


@dataclass(frozen=True)
class SetSearch:
    text: str


@dataclass(frozen=True)
class SetGroup:
    group: Group


@dataclass(frozen=True)
class SetSkinTone:
    skin_tone: SkinTone


SelectionEvent = Union[SetSearch, SetGroup, SetSkinTone]


def reduce(state: SelectionState, event: SelectionEvent) -> SelectionState:
    """Apply one UI event, returning the new state with its filter key recomputed."""
    if isinstance(event, SetSearch):
        new_state = replace(state, search=event.text)
    elif isinstance(event, SetGroup):
        new_state = replace(state, group=event.group)
    elif isinstance(event, SetSkinTone):
        new_state = replace(state, skin_tone=event.skin_tone)
    else:
        raise TypeError(f"Unknown selection event: {event!r}")

    new_state = replace(new_state, filter=(new_state.group, new_state.skin_tone, new_state.search))
    logger.trace(f"{event!r} -> filter={new_state.filter!r}")
    return new_state


def copy_to_clipboard(cell: ResolvedEmoji, sink: ClipboardSink) -> CopyResult:
    """Send the tone-resolved glyph of `cell` to the clipboard sink."""
    result = sink.copy(cell.glyph)
    if result.ok:
        logger.info(f"Copied '{cell.name}' ({cell.glyph}) via {result.method}")
    else:
        logger.warning(f"Could not copy '{cell.name}' to clipboard: {result.error}")
    return result
