"""
Tests for parsing the emoji table into Emoji records.
"""
import pytest

from emoji_picker.Emoji_Data import EmojiDatasetError, Group, SkinTone, load_emoji_dataset
from emoji_picker.Emoji_Data.emoji_dataset import SKIN_TONE_MODIFIERS, parse_version


class TestParseVersion:
    def test_major_minor(self):
        assert parse_version("E13.1") == (13, 1)

    def test_old_versions_sort_below_new(self):
        assert parse_version("E0.6") < parse_version("E1.0") < parse_version("E15.0")


class TestSampleTable:
    def test_only_fully_qualified_rows_of_picker_groups_become_records(self, sample_dataset):
        names = [e.name for e in sample_dataset]
        assert names == [
            "grinning face", "face with tears of joy", "face holding back tears", "shaking face",
            "smiling face", "waving hand", "victory hand", "handshake", "cat", "cat face",
            "grinning cat", "camera",
        ]

    def test_component_rows_are_dropped(self, sample_dataset):
        assert sample_dataset.find_by_name("light skin tone") is None

    def test_tone_variants_attach_to_base(self, sample_dataset):
        waving = sample_dataset.find_by_name("waving hand")
        assert set(waving.skin_tones) == {SkinTone.LIGHT, SkinTone.DARK}
        assert waving.with_skin_tone(SkinTone.LIGHT) == "\U0001F44B\U0001F3FB"
        assert waving.with_skin_tone(SkinTone.MEDIUM) is None

    def test_tone_variants_keep_their_own_name(self, sample_dataset):
        waving = sample_dataset.find_by_name("waving hand")
        assert waving.name_with_skin_tone(SkinTone.DARK) == "waving hand: dark skin tone"
        assert waving.name_with_skin_tone(SkinTone.MEDIUM) == "waving hand"
        assert waving.name_with_skin_tone(SkinTone.DEFAULT) == "waving hand"

    def test_variation_selector_is_ignored_when_matching_base(self, sample_dataset):
        victory = sample_dataset.find_by_name("victory hand")
        assert victory.glyph == "\u270C\uFE0F"
        assert victory.with_skin_tone(SkinTone.MEDIUM) == "\u270C\U0001F3FD"

    def test_mixed_tone_rows_are_not_variants(self, sample_dataset):
        handshake = sample_dataset.find_by_name("handshake")
        assert handshake.skin_tones == {SkinTone.LIGHT: "\U0001F91D\U0001F3FB"}
        assert sample_dataset.find_by_name("handshake: light skin tone, medium-light skin tone") is None

    def test_default_tone_resolves_to_base_only_for_toned_emoji(self, sample_dataset):
        assert sample_dataset.find_by_name("waving hand").with_skin_tone(SkinTone.DEFAULT) == "\U0001F44B"
        assert sample_dataset.find_by_name("camera").with_skin_tone(SkinTone.DEFAULT) is None

    def test_groups_and_versions(self, sample_dataset):
        cat = sample_dataset.find_by_name("cat")
        assert cat.group is Group.ANIMALS_AND_NATURE
        assert cat.version == (0, 7)
        assert [e.name for e in sample_dataset.by_group(Group.OBJECTS)] == ["camera"]

    def test_lookup_by_glyph(self, sample_dataset):
        assert "\U0001F4F7" in sample_dataset
        assert sample_dataset.get("\U0001F4F7").name == "camera"
        assert sample_dataset.get("x") is None


class TestBundledTable:
    def test_tone_variants_are_folded_into_base_records(self, emoji_dataset):
        # Emoji 15.1: 1898 base records, 323 of them with tone variants
        assert len(emoji_dataset) == 1898
        assert sum(e.supports_skin_tones for e in emoji_dataset) == 323

    def test_every_group_is_populated(self, emoji_dataset):
        for group in Group:
            assert emoji_dataset.by_group(group), group

    def test_records_are_never_tone_variants(self, emoji_dataset):
        modifiers = set(SKIN_TONE_MODIFIERS.values())
        for e in emoji_dataset:
            assert not any(m in e.glyph for m in modifiers), e.name

    def test_tone_variant_glyphs_carry_their_modifier(self, emoji_dataset):
        for e in emoji_dataset:
            for tone, glyph in e.skin_tones.items():
                assert tone.modifier in glyph, (e.name, tone)

    def test_waving_hand_has_every_tone(self, emoji_dataset):
        waving = emoji_dataset.find_by_name("waving hand")
        assert set(waving.skin_tones) == set(SKIN_TONE_MODIFIERS)

    def test_dataset_order_follows_table(self, emoji_dataset):
        smileys = emoji_dataset.by_group(Group.SMILEYS_AND_EMOTION)
        assert smileys[0].name == "grinning face"
        assert list(emoji_dataset)[0].group is Group.SMILEYS_AND_EMOTION
        assert list(emoji_dataset)[-1].group is Group.FLAGS


class TestLoadErrors:
    def test_missing_file(self, isolated_temp_dir):
        with pytest.raises(EmojiDatasetError):
            load_emoji_dataset(isolated_temp_dir / "missing.txt")

    def test_empty_file(self, isolated_temp_dir):
        path = isolated_temp_dir / "empty.txt"
        path.write_text("# group: Objects\n", encoding="utf-8")
        with pytest.raises(EmojiDatasetError):
            load_emoji_dataset(path)
