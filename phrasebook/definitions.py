# -*- coding: utf-8 -*-
"""Records produced by the build and the stage interfaces that transform them."""

from dataclasses import dataclass, field
from typing import List, Optional, Protocol

from phrasebook.locales import Language


@dataclass
class Translation:
    translation: str
    transcription: Optional[str] = None
    sound_url: Optional[str] = None


@dataclass
class Phrase:
    id: str
    main: Translation
    uk: Translation
    image_url: Optional[str] = None


@dataclass
class Category:
    id: str
    name: Translation
    uk: Translation
    phrases: List[str] = field(default_factory=list)
    image_url: Optional[str] = None


class TranslationPipe(Protocol):
    def execute(self, language_pack: Language, language: Language,
                translation: Translation) -> Translation:
        """Return the (possibly updated) translation.

        language_pack is the target language of the dictionary being built,
        language is the language the translation itself is written in.
        """
        ...


class PhrasePipe(Protocol):
    def execute(self, language_pack: Language, phrase: Phrase) -> Phrase:
        ...
