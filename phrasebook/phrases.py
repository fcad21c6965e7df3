# -*- coding: utf-8 -*-
"""Collects phrases per language and builds them from the phrases table."""

import logging
from typing import Dict, Generic, Iterable, Optional, Sequence, TypeVar

from phrasebook.airtable import AirtableTable, field_value, first_attachment_url
from phrasebook.common import is_missing
from phrasebook.definitions import Phrase, PhrasePipe, Translation, TranslationPipe
from phrasebook.locales import ANCHOR_LANGUAGE, Language
from phrasebook.pipelines import run_phrase_pipeline, run_translation_pipeline

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


class LanguageBuckets(Generic[T]):
    """Items keyed by language, then by item id.

    get() returns None for a language nothing was ever added to, so callers can
    tell "no data collected" apart from an empty result.
    """

    kind = "Item"

    def __init__(self):
        self.map_by_language: Dict[str, Dict[str, T]] = {}

    def add(self, language: Language, item: T) -> "LanguageBuckets[T]":
        bucket = self.map_by_language.setdefault(str(language), {})

        if item.id in bucket:
            # ids come from Airtable record ids; the later record wins
            LOGGER.debug("%s %s already added for %s, replacing it", self.kind, item.id, language)
        bucket[item.id] = item

        LOGGER.debug("%s %s %s", self.kind, language, item)
        return self

    def get(self, language: Language) -> Optional[Dict[str, T]]:
        return self.map_by_language.get(str(language))


class Phrases(LanguageBuckets[Phrase]):
    kind = "Phrase"


def build_phrase(record_id: str, language: Language, in_language: str, in_ukrainian: str,
                 image_url: Optional[str], phrase_pipeline: Sequence[PhrasePipe],
                 translation_pipeline: Sequence[TranslationPipe]) -> Phrase:
    main = run_translation_pipeline(translation_pipeline, language, language,
                                    Translation(translation=str(in_language)))
    uk = run_translation_pipeline(translation_pipeline, language, ANCHOR_LANGUAGE,
                                  Translation(translation=str(in_ukrainian)))
    phrase = Phrase(id=record_id, main=main, uk=uk, image_url=image_url)
    return run_phrase_pipeline(phrase_pipeline, language, phrase)


def build_phrases(table: AirtableTable, languages: Iterable[Language],
                  phrase_pipeline: Sequence[PhrasePipe],
                  translation_pipeline: Sequence[TranslationPipe],
                  view: Optional[str] = None, max_records: Optional[int] = None,
                  page_size: Optional[int] = None) -> Phrases:
    LOGGER.info("Fetching and building phrases")
    languages = list(languages)
    phrases = Phrases()

    for records in table.iter_pages(view=view, max_records=max_records, page_size=page_size):
        for record in records:
            record_id = str(record["id"])
            in_ukrainian = field_value(record, ANCHOR_LANGUAGE.value)

            if is_missing(in_ukrainian):
                LOGGER.info("Skipping phrase for language %s id %s", ANCHOR_LANGUAGE, record_id)
                continue

            image_url = first_attachment_url(record, "image")

            for language in languages:
                in_language = field_value(record, str(language))

                if is_missing(in_language):
                    LOGGER.info("Skipping phrase for language %s id %s", language, record_id)
                    continue

                phrase = build_phrase(record_id, language, in_language, in_ukrainian, image_url,
                                      phrase_pipeline, translation_pipeline)
                phrases.add(language, phrase)

    return phrases
