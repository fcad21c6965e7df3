# -*- coding: utf-8 -*-
"""
Build the uk-<language>-dictionary.json files from the Airtable base.

Run from the project root so `config` resolves:

    AIRTABLE_API_KEY=... python -m phrasebook.build_dictionaries --output-dir out/

Workflow:
 1. Read every row of the phrases table, page by page, and build one phrase
    per (row, language) through the translation and phrase pipelines.
 2. Read the categories table the same way.
 3. Write one JSON file per language that has both phrases and categories.
"""

import argparse
import logging
import os
from pathlib import Path
from typing import List, Optional, Sequence

from config import (AIRTABLE_API_KEY_ENV, AIRTABLE_BASE_ID, AIRTABLE_VIEW, CATEGORIES_TABLE,
                    LANGUAGES, LOG_DIR, OUTPUT_DIR, PAGE_SIZE, PHRASES_MAX_RECORDS,
                    PHRASES_TABLE, REQUEST_TIMEOUT_SECONDS)
from phrasebook.airtable import AirtableTable
from phrasebook.categories import build_categories
from phrasebook.common import setup_logging
from phrasebook.definitions import PhrasePipe, TranslationPipe
from phrasebook.locales import Language
from phrasebook.output import dictionary_filename, save_json
from phrasebook.phrase_pipes import NormalizeImageUrl
from phrasebook.phrases import build_phrases
from phrasebook.transcription import GenerateTranscription

LOGGER = logging.getLogger(__name__)


def default_translation_pipeline() -> List[TranslationPipe]:
    return [
        GenerateTranscription(),
    ]


def default_phrase_pipeline() -> List[PhrasePipe]:
    return [
        NormalizeImageUrl(),
    ]


def build_dictionaries(phrases_table: AirtableTable, categories_table: AirtableTable,
                       languages: Sequence[Language], output_dir: Path,
                       phrase_pipeline: Sequence[PhrasePipe],
                       translation_pipeline: Sequence[TranslationPipe],
                       view: Optional[str] = AIRTABLE_VIEW,
                       max_records: Optional[int] = PHRASES_MAX_RECORDS,
                       page_size: Optional[int] = PAGE_SIZE) -> List[Path]:
    """Build and write every dictionary, returning the paths written."""
    phrases = build_phrases(phrases_table, languages, phrase_pipeline, translation_pipeline,
                            view=view, max_records=max_records, page_size=page_size)
    categories = build_categories(categories_table, languages, translation_pipeline,
                                  view=view, page_size=page_size)

    written = []
    for language in languages:
        categories_in_language = categories.get(language)

        if categories_in_language is None:
            LOGGER.info("Skipping language pack - no categories %s", language)
            continue

        phrases_in_language = phrases.get(language)

        if phrases_in_language is None:
            LOGGER.info("Skipping language pack - no phrases %s", language)
            continue

        LOGGER.info("Saving language %s", language)

        data = {
            "language": str(language),
            "categories": categories_in_language,
            "phrases": phrases_in_language,
        }
        written.append(save_json(data, dictionary_filename(language), output_dir))

    return written


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Build the Ukrainian phrasebook dictionaries")
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=OUTPUT_DIR,
        help="Where to write the uk-<language>-dictionary.json files",
    )
    parser.add_argument(
        "--max-records",
        type=int,
        default=PHRASES_MAX_RECORDS,
        help="Fetch only the first N phrase rows (for debugging)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    setup_logging(args.verbose, LOG_DIR)

    api_key = os.environ.get(AIRTABLE_API_KEY_ENV)
    if not api_key:
        raise SystemExit(f"Set {AIRTABLE_API_KEY_ENV} to an Airtable API key with read access")

    phrases_table = AirtableTable(AIRTABLE_BASE_ID, PHRASES_TABLE, api_key,
                                  timeout=REQUEST_TIMEOUT_SECONDS)
    categories_table = AirtableTable(AIRTABLE_BASE_ID, CATEGORIES_TABLE, api_key,
                                     timeout=REQUEST_TIMEOUT_SECONDS)

    written = build_dictionaries(
        phrases_table,
        categories_table,
        LANGUAGES,
        args.output_dir,
        phrase_pipeline=default_phrase_pipeline(),
        translation_pipeline=default_translation_pipeline(),
        max_records=args.max_records,
    )

    print(f"Wrote {len(written)} dictionaries into {args.output_dir}")
    for path in written:
        print(f"  {path.name}")


if __name__ == "__main__":
    main()
