# -*- coding: utf-8 -*-
"""Builds per-language categories from the categories table.

A category row has a name per language (same field names as the phrases
table), an optional "image" attachment and a "phrases" field linking to rows of
the phrases table. The linked record ids are the phrase ids used in the output.
"""

import logging
from typing import Iterable, Optional, Sequence

from phrasebook.airtable import AirtableTable, field_value, first_attachment_url
from phrasebook.common import is_missing
from phrasebook.definitions import Category, Translation, TranslationPipe
from phrasebook.locales import ANCHOR_LANGUAGE, Language
from phrasebook.phrases import LanguageBuckets
from phrasebook.pipelines import run_translation_pipeline

LOGGER = logging.getLogger(__name__)


class Categories(LanguageBuckets[Category]):
    kind = "Category"


def build_categories(table: AirtableTable, languages: Iterable[Language],
                     translation_pipeline: Sequence[TranslationPipe] = (),
                     view: Optional[str] = None,
                     page_size: Optional[int] = None) -> Categories:
    LOGGER.info("Fetching and building categories")
    languages = list(languages)
    categories = Categories()

    for record in table.iter_records(view=view, page_size=page_size):
        record_id = str(record["id"])
        in_ukrainian = field_value(record, ANCHOR_LANGUAGE.value)

        if is_missing(in_ukrainian):
            LOGGER.info("Skipping category for language %s id %s", ANCHOR_LANGUAGE, record_id)
            continue

        phrase_ids = [str(phrase_id) for phrase_id in field_value(record, "phrases") or []]
        image_url = first_attachment_url(record, "image")

        for language in languages:
            in_language = field_value(record, str(language))

            if is_missing(in_language):
                LOGGER.info("Skipping category for language %s id %s", language, record_id)
                continue

            category = Category(
                id=record_id,
                name=run_translation_pipeline(translation_pipeline, language, language,
                                              Translation(translation=str(in_language))),
                uk=run_translation_pipeline(translation_pipeline, language, ANCHOR_LANGUAGE,
                                            Translation(translation=str(in_ukrainian))),
                phrases=list(phrase_ids),
                image_url=image_url,
            )
            categories.add(language, category)

    return categories
