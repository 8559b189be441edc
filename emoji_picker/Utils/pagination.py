"""
Filtering and row pagination for the emoji grid.
"""
from typing import Iterable, List, NamedTuple, Tuple

from loguru import logger

from ..Emoji_Data import Emoji, Group, SkinTone

# Emoji added in this standard version or later are not shown
VERSION_CUTOFF: Tuple[int, int] = (15, 0)
ITEMS_PER_ROW = 10
MIN_SEARCH_LENGTH = 2


class ResolvedEmoji(NamedTuple):
    """A grid cell: the glyph to show and copy, its name in that tone, plus its source record."""
    glyph: str
    name: str
    emoji: Emoji


def resolve_glyph(emoji_obj: Emoji, skin_tone: SkinTone) -> str:
    """Tone variant of the emoji, or its base glyph when it has none."""
    toned = emoji_obj.with_skin_tone(skin_tone)
    return toned if toned is not None else emoji_obj.glyph


def matches(emoji_obj: Emoji, group: Group, search: str) -> bool:
    """
    Membership test for the grid.

    An empty search selects by group. A non-empty search ignores the group and
    matches names containing the search text (case-sensitive), but only once it is
    at least MIN_SEARCH_LENGTH characters long; a single character matches nothing.
    """
    if emoji_obj.version >= VERSION_CUTOFF:
        return False
    if not search:
        return emoji_obj.group is group
    return search in emoji_obj.name and len(search) >= MIN_SEARCH_LENGTH


def filter_emojis(group: Group, skin_tone: SkinTone, search: str,
                  dataset: Iterable[Emoji]) -> List[ResolvedEmoji]:
    """Ordered, tone-resolved matches for the given filter."""
    return [
        ResolvedEmoji(resolve_glyph(e, skin_tone), e.name_with_skin_tone(skin_tone), e)
        for e in dataset
        if matches(e, group, search)
    ]


def row_count(total: int, items_per_row: int = ITEMS_PER_ROW) -> int:
    """Rows shown for `total` matches: only full rows, never fewer than one."""
    rows = total // items_per_row
    return rows if rows > 0 else 1


def paginate(items: List[ResolvedEmoji], items_per_row: int = ITEMS_PER_ROW) -> List[List[ResolvedEmoji]]:
    """
    Chunk `items` into rows of `items_per_row`.

    The number of rows is row_count(len(items)), so a trailing partial row is only
    kept when it is the sole row (e.g. 9 items -> one row of 9, 23 items -> two rows
    of 10). No items -> a single empty row.
    """
    rows = row_count(len(items), items_per_row)
    paged = [items[i * items_per_row:(i + 1) * items_per_row] for i in range(rows)]
    dropped = len(items) - sum(len(r) for r in paged)
    if dropped:
        logger.debug(f"{dropped} trailing emoji not placed in a row ({len(items)} matches)")
    return paged


def filter_and_paginate(filter_key: Tuple[Group, SkinTone, str],
                        dataset: Iterable[Emoji]) -> List[List[ResolvedEmoji]]:
    """Rows for a (group, skin tone, search) filter tuple."""
    group, skin_tone, search = filter_key
    return paginate(filter_emojis(group, skin_tone, search, dataset))
