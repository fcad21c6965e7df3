# -*- coding: utf-8 -*-
"""Phonetic transcription between Ukrainian and the target languages."""

import logging
import re
from typing import Dict, List, Mapping, Optional, Tuple

from phrasebook.definitions import Translation
from phrasebook.locales import ANCHOR_LANGUAGE, Language
from phrasebook.transliterations import (DEFAULT_TABLES, SubstitutionTable,
                                         TranscriptionTables)

LOGGER = logging.getLogger(__name__)

CompiledTable = List[Tuple[re.Pattern, str]]

PUNCTUATION = (".", "?", "!")


def remove_punctuation(text: str) -> str:
    # Only the first occurrence of each mark is removed: "Hi!! Hi!!" -> "Hi! Hi!!"
    for mark in PUNCTUATION:
        text = text.replace(mark, "", 1)
    return text


def compile_table(table: SubstitutionTable) -> CompiledTable:
    return [(re.compile(pattern), replacement) for pattern, replacement in table]


def transcribe(table, text: str) -> str:
    """Apply every (pattern, replacement) rule of table to text, in order.

    Each rule replaces all non-overlapping matches and sees the output of the
    rules before it. Patterns may be strings or compiled regexes; replacements
    are inserted literally. Without a table the text is returned unchanged.
    """
    if table is None:
        return text

    result = text
    for pattern, replacement in table:
        result = re.sub(pattern, lambda _match, value=replacement: value, result)
    return remove_punctuation(result)


class GenerateTranscription:
    """Translation stage that fills in Translation.transcription.

    Ukrainian text is transcribed with the table from Ukrainian into the
    dictionary's language, text in the dictionary's language with the table
    back into Ukrainian. Languages without a table are left untouched.
    """

    def __init__(self, tables: TranscriptionTables = DEFAULT_TABLES):
        self.from_anchor = self._compile_all(tables.from_anchor)
        self.to_anchor = self._compile_all(tables.to_anchor)

    @staticmethod
    def _compile_all(tables: Mapping[str, SubstitutionTable]) -> Dict[str, CompiledTable]:
        return {str(key): compile_table(table) for key, table in tables.items()}

    def table_for(self, language_pack: Language, language: Language) -> Optional[CompiledTable]:
        tables = self.from_anchor if language == ANCHOR_LANGUAGE else self.to_anchor
        return tables.get(str(language_pack))

    def execute(self, language_pack: Language, language: Language,
                translation: Translation) -> Translation:
        table = self.table_for(language_pack, language)

        if table is None:
            return translation

        translation.transcription = transcribe(table, translation.translation)
        LOGGER.debug("Transcribed %s (%s) %r -> %r", language, language_pack,
                     translation.translation, translation.transcription)

        return translation
