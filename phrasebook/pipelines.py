# -*- coding: utf-8 -*-
"""Ordered stage runners. Stages run exactly in the order the caller lists them."""

from typing import Iterable

from phrasebook.definitions import Phrase, PhrasePipe, Translation, TranslationPipe
from phrasebook.locales import Language


def run_translation_pipeline(pipes: Iterable[TranslationPipe], language_pack: Language,
                             language: Language, translation: Translation) -> Translation:
    for pipe in pipes:
        translation = pipe.execute(language_pack, language, translation)
    return translation


def run_phrase_pipeline(pipes: Iterable[PhrasePipe], language_pack: Language,
                        phrase: Phrase) -> Phrase:
    for pipe in pipes:
        phrase = pipe.execute(language_pack, phrase)
    return phrase
