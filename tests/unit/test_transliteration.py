"""Unit tests for ASCII transliteration and its use by the slugifier."""

import pytest

from fileslug import (
    DEFAULT_OPTIONS,
    MINIMAL_FEATURES,
    SlugFeatures,
    SlugOptions,
    slugify,
    slugify_with,
)
from fileslug.text.translit import transliterate


def test_slugify_transliterates_latin_diacritics_and_ligatures() -> None:
    """Accented Latin letters and ligatures should map to plain ASCII."""

    assert slugify("Crème brûlée") == "creme-brulee"
    assert slugify("Ångström") == "angstrom"
    assert slugify("straße") == "strasse"
    assert slugify("FLŰGGÅƏNK∂€ČHIŒβØL∫en") == "fluggaenkoechioebolsen"


def test_slugify_transliterates_cyrillic() -> None:
    """Cyrillic words should be romanized, dropping soft and hard signs."""

    assert slugify("Прeвед мЕдВеД") == "preved-medved"
    assert slugify("Киев") == "kiev"
    assert slugify("объём") == "obem"
    assert slugify("Щастя і Єдність") == "shchastya-i-yednist"


def test_slugify_transliteration_respects_keep_underscore() -> None:
    """Underscores next to transliterated letters should follow the option."""

    assert slugify("Харьков_Ужгород") == "harkov_uzhgorod"
    assert (
        slugify_with("Харьков_Ужгород", SlugOptions(keep_underscore=False))
        == "harkov-uzhgorod"
    )


def test_slugify_title_cases_uppercase_when_not_lowercasing() -> None:
    """Uppercase sources should capitalize only the first replacement letter."""

    options = SlugOptions(lowercase=False)

    assert slugify_with("Щука", options) == "Shchuka"
    assert slugify_with("Ærø", options) == "Aero"
    assert slugify_with("Straße", options) == "Strasse"


def test_slugify_treats_unmapped_characters_as_boundaries() -> None:
    """Characters without a mapping should still split words."""

    assert slugify("日本 test") == "test"
    assert slugify("a漢b") == "a-b"


def test_slugify_without_transliteration_capability() -> None:
    """A minimal capability profile should treat non-ASCII text as boundaries."""

    assert slugify_with("Привіт світ", DEFAULT_OPTIONS, features=MINIMAL_FEATURES) == "file"
    assert slugify_with("Crème", DEFAULT_OPTIONS, features=MINIMAL_FEATURES) == "cr-me"
    no_transliteration = SlugFeatures(transliterate=False)
    assert (
        slugify_with("Вещати умеют мнози", DEFAULT_OPTIONS, features=no_transliteration)
        == "file"
    )


@pytest.mark.parametrize(
    ("character", "lowercase", "expected"),
    [
        ("ж", True, "zh"),
        ("Ж", True, "zh"),
        ("Ж", False, "Zh"),
        ("щ", False, "shch"),
        ("ї", True, "yi"),
        ("Є", False, "Ye"),
        ("Þ", False, "Th"),
        ("é", False, "e"),
        ("É", False, "E"),
        ("ß", False, "ss"),
        ("€", False, "e"),
        ("ь", False, ""),
        ("Ъ", False, ""),
    ],
)
def test_transliterate_maps_single_characters(
    character: str, lowercase: bool, expected: str
) -> None:
    """Known characters should map to case-adjusted ASCII replacements."""

    assert transliterate(character, lowercase) == expected


@pytest.mark.parametrize("character", ["a", "Z", "_", "-", "漢", "\U0001F600"])
def test_transliterate_returns_none_without_mapping(character: str) -> None:
    """ASCII input and unmapped characters should report no mapping."""

    assert transliterate(character, True) is None
