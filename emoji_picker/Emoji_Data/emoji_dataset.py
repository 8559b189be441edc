# emoji_dataset.py
# Description: Loads the bundled Unicode emoji table into immutable Emoji records.
#
# Imports
import enum
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Tuple, Union
#
# 3rd-party Libraries
from loguru import logger
#
# Local Imports
#
########################################################################################################################
#
# Classes:

# Bundled copy of https://unicode.org/Public/emoji/15.1/emoji-test.txt
EMOJI_TEST_FILE = Path(__file__).parent / "emoji-test.txt"

FULLY_QUALIFIED = "fully-qualified"
VARIATION_SELECTOR_16 = 0xFE0F


class EmojiDatasetError(Exception):
    """Raised when the emoji table cannot be read or holds no emoji."""


class Group(enum.Enum):
    """The nine emoji groups offered by the picker, in dataset order."""
    SMILEYS_AND_EMOTION = "Smileys & Emotion"
    PEOPLE_AND_BODY = "People & Body"
    ANIMALS_AND_NATURE = "Animals & Nature"
    FOOD_AND_DRINK = "Food & Drink"
    TRAVEL_AND_PLACES = "Travel & Places"
    ACTIVITIES = "Activities"
    OBJECTS = "Objects"
    SYMBOLS = "Symbols"
    FLAGS = "Flags"

    @property
    def label(self) -> str:
        return self.value

    @property
    def icon(self) -> str:
        return GROUP_ICONS[self]


GROUP_ICONS: Dict[Group, str] = {
    Group.SMILEYS_AND_EMOTION: "😊",
    Group.PEOPLE_AND_BODY: "👨‍👩‍👧‍👦",
    Group.ANIMALS_AND_NATURE: "🐶🌳",
    Group.FOOD_AND_DRINK: "🍔🍕",
    Group.TRAVEL_AND_PLACES: "✈️🗺️",
    Group.ACTIVITIES: "⚽🎮",
    Group.OBJECTS: "📷💻",
    Group.SYMBOLS: "❤️✨",
    Group.FLAGS: "🏳️🚩",
}


class SkinTone(enum.Enum):
    """Skin tones; every tone except DEFAULT maps to a Fitzpatrick modifier."""
    DEFAULT = "default"
    LIGHT = "light"
    MEDIUM_LIGHT = "medium-light"
    MEDIUM = "medium"
    MEDIUM_DARK = "medium-dark"
    DARK = "dark"

    @property
    def modifier(self) -> Optional[str]:
        return SKIN_TONE_MODIFIERS.get(self)

    @property
    def label(self) -> str:
        if self is SkinTone.DEFAULT:
            return "Default"
        return f"{self.value.replace('-', ' ').capitalize()} skin tone"


SKIN_TONE_MODIFIERS: Dict[SkinTone, str] = {
    SkinTone.LIGHT: "\U0001F3FB",
    SkinTone.MEDIUM_LIGHT: "\U0001F3FC",
    SkinTone.MEDIUM: "\U0001F3FD",
    SkinTone.MEDIUM_DARK: "\U0001F3FE",
    SkinTone.DARK: "\U0001F3FF",
}
_TONE_BY_CODEPOINT: Dict[int, SkinTone] = {ord(mod): tone for tone, mod in SKIN_TONE_MODIFIERS.items()}


@dataclass(frozen=True)
class Emoji:
    """One fully-qualified emoji of the dataset."""
    glyph: str
    name: str
    group: Group
    version: Tuple[int, int]
    skin_tones: Dict[SkinTone, str] = field(default_factory=dict, compare=False, hash=False)
    skin_tone_names: Dict[SkinTone, str] = field(default_factory=dict, compare=False, hash=False)

    def with_skin_tone(self, tone: SkinTone) -> Optional[str]:
        """Glyph for `tone`, or None when this emoji has no such variant."""
        if tone is SkinTone.DEFAULT:
            return self.glyph if self.skin_tones else None
        return self.skin_tones.get(tone)

    def name_with_skin_tone(self, tone: SkinTone) -> str:
        """Name of the `tone` variant, e.g. "waving hand: dark skin tone"; the base name otherwise."""
        return self.skin_tone_names.get(tone, self.name)

    @property
    def supports_skin_tones(self) -> bool:
        return bool(self.skin_tones)

    def __str__(self) -> str:
        return self.glyph


class EmojiDataset:
    """Read-only, ordered collection of Emoji records."""

    def __init__(self, emojis: List[Emoji]):
        self._emojis: Tuple[Emoji, ...] = tuple(emojis)
        self._by_glyph: Dict[str, Emoji] = {e.glyph: e for e in self._emojis}

    def __iter__(self) -> Iterator[Emoji]:
        return iter(self._emojis)

    def __len__(self) -> int:
        return len(self._emojis)

    def __contains__(self, glyph: object) -> bool:
        return glyph in self._by_glyph

    def get(self, glyph: str) -> Optional[Emoji]:
        return self._by_glyph.get(glyph)

    def by_group(self, group: Group) -> List[Emoji]:
        return [e for e in self._emojis if e.group is group]

    def find_by_name(self, name: str) -> Optional[Emoji]:
        for emoji_obj in self._emojis:
            if emoji_obj.name == name:
                return emoji_obj
        return None


def parse_version(text: str) -> Tuple[int, int]:
    """'E13.1' -> (13, 1)"""
    major, _, minor = text.lstrip("E").partition(".")
    return int(major), int(minor or 0)


def _parse_line(line: str) -> Optional[Tuple[List[int], str, str, Tuple[int, int], str]]:
    # 1F44B 1F3FB ; fully-qualified # 👋🏻 E1.0 waving hand: light skin tone
    data, _, comment = line.partition("#")
    codes, _, status = data.partition(";")
    if not comment or not status:
        return None
    glyph, version, name = comment.strip().split(" ", 2)
    codepoints = [int(c, 16) for c in codes.split()]
    return codepoints, status.strip(), glyph, parse_version(version), name


def _base_key(codepoints: List[int]) -> Tuple[int, ...]:
    return tuple(c for c in codepoints if c != VARIATION_SELECTOR_16 and c not in _TONE_BY_CODEPOINT)


def parse_emoji_table(lines) -> List[Emoji]:
    """
    Build Emoji records from the lines of an emoji-test.txt file.

    Only fully-qualified rows of the nine picker groups become records. Rows carrying
    a single repeated skin tone modifier are attached to their base emoji as tone
    variants; mixed-tone rows and rows without a base are dropped.
    """
    group_lookup = {g.value: g for g in Group}
    current_group: Optional[Group] = None
    records: List[Tuple[str, str, Group, Tuple[int, int]]] = []
    tones_by_key: Dict[Tuple[int, ...], Dict[SkinTone, str]] = {}
    tone_names_by_key: Dict[Tuple[int, ...], Dict[SkinTone, str]] = {}
    index_by_key: Dict[Tuple[int, ...], int] = {}
    skipped_variants = 0

    for raw_line in lines:
        line = raw_line.strip()
        if not line:
            continue
        if line.startswith("# group:"):
            current_group = group_lookup.get(line[len("# group:"):].strip())
            continue
        if line.startswith("#") or current_group is None:
            continue

        parsed = _parse_line(line)
        if parsed is None:
            continue
        codepoints, status, glyph, version, name = parsed
        if status != FULLY_QUALIFIED:
            continue

        tones = {_TONE_BY_CODEPOINT[c] for c in codepoints if c in _TONE_BY_CODEPOINT}
        key = _base_key(codepoints)
        if not tones:
            if key not in index_by_key:
                index_by_key[key] = len(records)
            records.append((glyph, name, current_group, version))
            continue

        if len(tones) == 1 and key in index_by_key:
            tone = tones.pop()
            tones_by_key.setdefault(key, {})[tone] = glyph
            tone_names_by_key.setdefault(key, {})[tone] = name
        else:
            skipped_variants += 1

    logger.debug(f"Parsed {len(records)} emoji, {len(tones_by_key)} with skin tones, "
                 f"{skipped_variants} mixed or orphan tone rows skipped")

    emojis: List[Emoji] = []
    tones_by_index = {index_by_key[key]: key for key in tones_by_key}
    for i, (glyph, name, group, version) in enumerate(records):
        key = tones_by_index.get(i)
        if key is None:
            emojis.append(Emoji(glyph, name, group, version))
        else:
            emojis.append(Emoji(glyph, name, group, version,
                                dict(tones_by_key[key]), dict(tone_names_by_key[key])))
    return emojis


def load_emoji_dataset(path: Union[str, Path, None] = None) -> EmojiDataset:
    """Read and parse the emoji table at `path` (the bundled table by default)."""
    table_path = Path(path) if path is not None else EMOJI_TEST_FILE
    try:
        with open(table_path, "r", encoding="utf-8") as f:
            emojis = parse_emoji_table(f)
    except OSError as e:
        raise EmojiDatasetError(f"Could not read emoji table {table_path}: {e}") from e
    except ValueError as e:
        raise EmojiDatasetError(f"Malformed emoji table {table_path}: {e}") from e

    if not emojis:
        raise EmojiDatasetError(f"No emoji found in {table_path}")
    logger.info(f"Loaded {len(emojis)} emoji from {table_path.name}")
    return EmojiDataset(emojis)


# Lazy loading - will be initialized on first use
_EMOJI_DATASET_CACHE: Optional[EmojiDataset] = None


def get_emoji_dataset() -> EmojiDataset:
    """Get the bundled dataset, loading it lazily on first access."""
    global _EMOJI_DATASET_CACHE
    if _EMOJI_DATASET_CACHE is None:
        _EMOJI_DATASET_CACHE = load_emoji_dataset()
    return _EMOJI_DATASET_CACHE

#
# End of emoji_dataset.py
########################################################################################################################
