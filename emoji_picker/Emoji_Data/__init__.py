"""
Static emoji dataset for the picker.
"""

from .emoji_dataset import (
    Emoji,
    EmojiDataset,
    EmojiDatasetError,
    Group,
    SkinTone,
    get_emoji_dataset,
    load_emoji_dataset,
)

__all__ = [
    'Emoji',
    'EmojiDataset',
    'EmojiDatasetError',
    'Group',
    'SkinTone',
    'get_emoji_dataset',
    'load_emoji_dataset',
]
