"""Best-effort ASCII transliteration for single characters.

Responsibilities:
- Map Latin diacritics, ligatures, Cyrillic letters, and a few visual
  look-alikes to ASCII replacements.
- Title-case replacements for uppercase input when lowercasing is not requested.

The table is rough and practical rather than a standard romanization scheme.
"""

from __future__ import annotations


_REPLACEMENT_GROUPS: tuple[tuple[str, str], ...] = (
    # Latin
    ("a", "ÀÁÂÃÄÅĀĂĄàáâãäåāăą"),
    ("c", "ÇĆĈĊČçćĉċč"),
    ("d", "ÐĎĐðďđ"),
    ("e", "ƏəÈÉÊËĒĔĖĘĚèéêëēĕėęě"),
    ("i", "ÌÍÎÏĨĪĬĮİìíîïĩīĭįı"),
    ("l", "Łł"),
    ("n", "ÑŃŅŇñńņň"),
    ("o", "ÒÓÔÕÖØŌŎŐòóôõöøōŏő"),
    ("s", "ŠšŚś"),
    ("u", "ÙÚÛÜŨŪŬŮŰŲùúûüũūŭůűų"),
    ("y", "ÝŸýÿ"),
    ("z", "ŽžŹźŻż"),
    ("th", "Þþ"),
    ("ae", "Ææ"),
    ("oe", "Œœ"),
    ("ss", "ß"),
    # Cyrillic, including Ukrainian letters
    ("a", "Аа"),
    ("b", "Бб"),
    ("v", "Вв"),
    ("g", "ГгҐґ"),
    ("d", "Дд"),
    ("e", "ЕеЁёЭэ"),
    ("ye", "Єє"),
    ("zh", "Жж"),
    ("z", "Зз"),
    ("i", "ИиІі"),
    ("yi", "Її"),
    ("y", "ЙйЫы"),
    ("k", "Кк"),
    ("l", "Лл"),
    ("m", "Мм"),
    ("n", "Нн"),
    ("o", "Оо"),
    ("p", "Пп"),
    ("r", "Рр"),
    ("s", "Сс"),
    ("t", "Тт"),
    ("u", "Уу"),
    ("f", "Фф"),
    ("h", "Хх"),
    ("ts", "Цц"),
    ("ch", "Чч"),
    ("sh", "Шш"),
    ("shch", "Щщ"),
    ("yu", "Юю"),
    ("ya", "Яя"),
    # Soft and hard signs are dropped
    ("", "ЪъЬь"),
    # Visual look-alikes
    ("o", "∂"),
    ("e", "€"),
    ("s", "∫"),
    ("b", "β"),
)

_TRANSLITERATION_TABLE: dict[str, str] = {
    character: replacement
    for replacement, characters in _REPLACEMENT_GROUPS
    for character in characters
}


def transliterate(character: str, lowercase: bool) -> str | None:
    """Return an ASCII replacement for one character, or `None` when unmapped.

    An empty string means the character should be dropped silently. When the
    input is uppercase and `lowercase` is false, the first letter of the
    replacement is capitalized.
    """

    if character.isascii():
        return None

    replacement = _TRANSLITERATION_TABLE.get(character)
    if replacement is None:
        return None

    if character.isupper() and not lowercase:
        return _title_case(replacement)
    return replacement


def _title_case(value: str) -> str:
    """Uppercase the first character of an ASCII replacement."""

    if not value:
        return value
    return value[0].upper() + value[1:]
