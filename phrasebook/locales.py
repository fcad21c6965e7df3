# -*- coding: utf-8 -*-
from enum import Enum


class Language(str, Enum):
    UK = "uk"
    CS = "cs"
    EN = "en"
    PL = "pl"
    SK = "sk"

    def __str__(self) -> str:
        return self.value


# Every substitution table is defined relative to this language.
ANCHOR_LANGUAGE = Language.UK
