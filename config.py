# -*- coding: utf-8 -*-
"""User-editable configuration for the Ukrainian phrasebook dictionary builder.

Values below point at the production Airtable base. Update them to build
dictionaries from your own copy of the base, or to write the output somewhere
other than the default working directory.
"""

from pathlib import Path

from phrasebook.locales import Language


# --- Airtable source ---------------------------------------------------------

# Id of the Airtable base holding the phrase and category tables. The API key is
# never stored here, export it as AIRTABLE_API_KEY before running the build.
AIRTABLE_BASE_ID = "appLciQqZNGDR3J6W"
AIRTABLE_API_KEY_ENV = "AIRTABLE_API_KEY"

# Table and view names as they appear in the Airtable UI.
PHRASES_TABLE = "Phrases data"
CATEGORIES_TABLE = "Categories data"
AIRTABLE_VIEW = "Grid view"

# Limit the number of phrase rows while testing. None fetches every row.
PHRASES_MAX_RECORDS = None

# Airtable returns at most 100 records per page.
PAGE_SIZE = 100
REQUEST_TIMEOUT_SECONDS = 30


# --- Languages ---------------------------------------------------------------

# Target languages, in build order. Ukrainian is always the anchor and must not
# be listed here.
LANGUAGES = [Language.CS, Language.EN, Language.PL, Language.SK]


# --- Output & scratch directories -------------------------------------------

# Where the uk-<language>-dictionary.json files and the build log end up. Can
# be overridden per run with --output-dir.
WORKDIR = Path.cwd()
OUTPUT_DIR = WORKDIR / "dictionaries"
LOG_DIR = WORKDIR / "logs"
