"""
Tests for the per-language aggregators and the phrase and category builders.
"""

from phrasebook.build_dictionaries import default_phrase_pipeline, default_translation_pipeline
from phrasebook.categories import build_categories
from phrasebook.definitions import Phrase, Translation
from phrasebook.locales import Language
from phrasebook.phrases import Phrases, build_phrases

ALL_LANGUAGES = [Language.CS, Language.EN, Language.PL, Language.SK]


def make_phrase(phrase_id, text="ahoj"):
    return Phrase(id=phrase_id, main=Translation(text), uk=Translation("привіт"))


class TestPhrases:

    def test_get_without_add_returns_none(self):
        assert Phrases().get(Language.CS) is None

    def test_add_then_get(self):
        phrases = Phrases()
        phrase = make_phrase("rec1")

        phrases.add(Language.CS, phrase)

        assert phrases.get(Language.CS) == {"rec1": phrase}
        assert phrases.get(Language.PL) is None

    def test_same_id_overwrites(self):
        phrases = Phrases()
        second = make_phrase("rec1", "nazdar")

        phrases.add(Language.CS, make_phrase("rec1")).add(Language.CS, second)

        assert phrases.get(Language.CS) == {"rec1": second}

    def test_plain_language_code_lookup(self):
        phrases = Phrases().add(Language.SK, make_phrase("rec1"))

        assert "rec1" in phrases.get("sk")


class TestBuildPhrases:

    def test_end_to_end_phrase(self, phrases_table):
        phrases = build_phrases(phrases_table, ALL_LANGUAGES, default_phrase_pipeline(),
                                default_translation_pipeline())

        phrase = phrases.get(Language.CS)["recHello"]
        assert phrase.main.translation == "ahoj"
        assert phrase.main.transcription == "агой"
        assert phrase.uk.translation == "привіт"
        assert phrase.uk.transcription == "pryvit"
        assert phrase.image_url == "https://dl.airtable.com/hello.png"
        assert phrase.main.sound_url is None

    def test_language_without_table_keeps_transcription_empty(self, phrases_table):
        phrases = build_phrases(phrases_table, ALL_LANGUAGES, default_phrase_pipeline(),
                                default_translation_pipeline())

        phrase = phrases.get(Language.EN)["recHello"]
        assert phrase.main.translation == "hello"
        assert phrase.main.transcription is None
        assert phrase.uk.transcription is None

    def test_skips_rows_and_languages_without_text(self, phrases_table):
        phrases = build_phrases(phrases_table, ALL_LANGUAGES, [], [])

        assert set(phrases.get(Language.CS)) == {"recHello", "recYes"}
        assert set(phrases.get(Language.EN)) == {"recHello"}
        assert set(phrases.get(Language.PL)) == {"recYes"}
        assert set(phrases.get(Language.SK)) == {"recHello"}

    def test_row_without_image(self, phrases_table):
        phrases = build_phrases(phrases_table, ALL_LANGUAGES, [], [])

        assert phrases.get(Language.PL)["recYes"].image_url is None

    def test_no_pipelines_leaves_transcriptions_empty(self, phrases_table):
        phrases = build_phrases(phrases_table, [Language.CS], [], [])

        assert phrases.get(Language.CS)["recYes"].main.transcription is None

    def test_passes_query_options(self, phrases_table):
        build_phrases(phrases_table, [Language.CS], [], [], view="Grid view", max_records=20)

        assert phrases_table.calls == [{"view": "Grid view", "max_records": 20, "page_size": None}]

    def test_no_rows(self, make_table):
        phrases = build_phrases(make_table([[]]), ALL_LANGUAGES, [], [])

        assert phrases.get(Language.CS) is None


class TestBuildCategories:

    def test_categories_per_language(self, categories_table):
        categories = build_categories(categories_table, ALL_LANGUAGES,
                                      default_translation_pipeline())

        assert set(categories.get(Language.CS)) == {"recGreetings", "recBasics"}
        assert set(categories.get(Language.EN)) == {"recGreetings"}
        assert set(categories.get(Language.PL)) == {"recBasics"}
        assert categories.get(Language.SK) is None

    def test_category_fields(self, categories_table):
        categories = build_categories(categories_table, ALL_LANGUAGES,
                                      default_translation_pipeline())

        category = categories.get(Language.PL)["recBasics"]
        assert category.name.translation == "Podstawy"
        assert category.uk.translation == "Основи"
        assert category.uk.transcription == "Osnowy"
        assert category.phrases == ["recYes"]
        assert category.image_url is None
