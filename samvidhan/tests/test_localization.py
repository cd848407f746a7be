"""
Language fallback for localized fields.
"""
import pytest

from samvidhan.orm.article import Article
from samvidhan.services.localization import (
    localized_part,
    normalize_language,
    pick_language,
    resolve,
)


def make_article(**overrides) -> Article:
    values = {
        "number": "21",
        "title_en": "Protection of Life and Personal Liberty",
        "title_hi": "जीवन और व्यक्तिगत स्वतंत्रता का संरक्षण",
        "title_ta": None,
        "content_en": "No person shall be deprived of his life...",
    }
    values.update(overrides)
    return Article(**values)


class TestResolve:
    def test_english_is_returned_for_en(self):
        article = make_article()
        assert resolve(article, "title", "en") == "Protection of Life and Personal Liberty"

    def test_hindi_value_is_used_when_present(self):
        article = make_article()
        assert resolve(article, "title", "hi") == "जीवन और व्यक्तिगत स्वतंत्रता का संरक्षण"

    @pytest.mark.parametrize("lang", ["hi", "ta"])
    def test_missing_translation_falls_back_to_english(self, lang):
        article = make_article(title_hi=None, title_ta=None)
        assert resolve(article, "title", lang) == article.title_en

    def test_empty_translation_falls_back_to_english(self):
        article = make_article(title_hi="")
        assert resolve(article, "title", "hi") == article.title_en

    @pytest.mark.parametrize("lang", ["fr", "xx", "", None, "EN-us"])
    def test_unknown_codes_resolve_to_english(self, lang):
        article = make_article()
        assert resolve(article, "title", lang) == article.title_en

    def test_works_on_plain_dicts(self):
        record = {"summary_en": "English", "summary_ta": "தமிழ்"}
        assert resolve(record, "summary", "ta") == "தமிழ்"
        assert resolve(record, "summary", "hi") == "English"


def test_normalize_language():
    assert normalize_language("HI") == "hi"
    assert normalize_language(" ta ") == "ta"
    assert normalize_language("bn") == "en"
    assert normalize_language(None) == "en"


def test_pick_language_prefers_requested_entry():
    options = {"en": ["letter"], "hi": ["पत्र"]}
    assert pick_language(options, "hi") == ["पत्र"]
    assert pick_language(options, "ta") == ["letter"]
    assert pick_language({"en": ["letter"], "hi": []}, "hi") == ["letter"]


def test_localized_part_is_resolved_independently():
    class PartStub:
        number = 3
        title_en = "Fundamental Rights"
        title_hi = None
        title_ta = "அடிப்படை உரிமைகள்"

    assert localized_part(PartStub(), "hi") == {"number": 3, "title": "Fundamental Rights"}
    assert localized_part(PartStub(), "ta") == {"number": 3, "title": "அடிப்படை உரிமைகள்"}
    assert localized_part(None, "en") is None
