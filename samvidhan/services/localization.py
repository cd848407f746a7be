"""
samvidhan/services/localization.py
Language fallback for localized content fields.

Localized columns come in triples: <field>_en, <field>_hi, <field>_ta.
Hindi and Tamil values are optional; a NULL or empty translation always
resolves to the English value. Unknown language codes resolve to English.
"""
from typing import Any, Mapping, Optional

DEFAULT_LANGUAGE = "en"
SUPPORTED_LANGUAGES = ("en", "hi", "ta")


def normalize_language(lang: Optional[str]) -> str:
    """Map a request language code onto en/hi/ta."""
    if not lang:
        return DEFAULT_LANGUAGE
    lang = lang.strip().lower()
    return lang if lang in SUPPORTED_LANGUAGES else DEFAULT_LANGUAGE


def _read(record: Any, name: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def resolve(record: Any, field: str, lang: Optional[str]) -> Any:
    """
    Return the value of `field` for `lang` with English fallback.

    Works on ORM instances and on plain dicts.

        resolve(article, "title", "hi")  # title_hi or title_en
    """
    lang = normalize_language(lang)
    english = _read(record, f"{field}_en")
    if lang == DEFAULT_LANGUAGE:
        return english
    localized = _read(record, f"{field}_{lang}")
    return localized if localized else english


def pick_language(options: Mapping[str, Any], lang: Optional[str]) -> Any:
    """Select the entry for `lang` from a {"en": ..., "hi": ...} mapping."""
    lang = lang.strip().lower() if lang else DEFAULT_LANGUAGE
    if lang in options and options[lang]:
        return options[lang]
    return options[DEFAULT_LANGUAGE]


def localized_part(part: Any, lang: Optional[str]) -> Optional[dict]:
    """Nested part reference used on article payloads."""
    if part is None:
        return None
    return {"number": part.number, "title": resolve(part, "title", lang)}
