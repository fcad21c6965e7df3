# -*- coding: utf-8 -*-
"""Substitution tables for Ukrainian <-> Czech, Polish and Slovak transcription.

Every table is an ordered list of (regex pattern, replacement) pairs. Rules are
applied one after another, so a rule sees the output of every rule before it.
Multi-letter sequences therefore come before the single letters they contain.

Rules are written in lower case; _with_capitals() adds the capitalised variant
of each rule right after it, which covers sentence and name initials.
"""

from dataclasses import dataclass, field
from typing import List, Mapping, Tuple

from phrasebook.locales import Language

SubstitutionTable = List[Tuple[str, str]]

# Ukrainian consonants in both cases, used in look-behinds for iotated vowels.
UK_CONSONANTS = "бвгґджзклмнпрстфхцчшщ"
UK_CONSONANTS += UK_CONSONANTS.upper()


def _with_capitals(rules: SubstitutionTable) -> SubstitutionTable:
    table: SubstitutionTable = []
    for pattern, replacement in rules:
        table.append((pattern, replacement))
        capital = pattern.capitalize()
        if capital != pattern:
            table.append((capital, replacement.capitalize()))
    return table


ua2cz = _with_capitals([
    ("['’ʼ]", ""),
    ("ьо", "jo"),
    ("йо", "jo"),
    ("дь", "ď"),
    ("ть", "ť"),
    ("нь", "ň"),
    ("щ", "šč"),
    ("ж", "ž"),
    ("ч", "č"),
    ("ш", "š"),
    ("х", "ch"),
    ("ц", "c"),
    ("я", "ja"),
    ("ю", "ju"),
    ("є", "je"),
    ("ї", "ji"),
    ("й", "j"),
    ("и", "y"),
    ("і", "i"),
    ("ґ", "g"),
    ("г", "h"),
    ("ь", ""),
    ("а", "a"),
    ("б", "b"),
    ("в", "v"),
    ("д", "d"),
    ("е", "e"),
    ("з", "z"),
    ("к", "k"),
    ("л", "l"),
    ("м", "m"),
    ("н", "n"),
    ("о", "o"),
    ("п", "p"),
    ("р", "r"),
    ("с", "s"),
    ("т", "t"),
    ("у", "u"),
    ("ф", "f"),
])

cz2ua = _with_capitals([
    ("ch", "х"),
    ("šč", "щ"),
    ("dž", "дж"),
    ("ja", "я"),
    ("já", "я"),
    ("ju", "ю"),
    ("jú", "ю"),
    ("jů", "ю"),
    ("je", "є"),
    ("jé", "є"),
    ("jo", "йо"),
    ("ji", "ї"),
    ("jí", "ї"),
    ("ě", "є"),
    ("ň", "нь"),
    ("ť", "ть"),
    ("ď", "дь"),
    ("ř", "рж"),
    ("č", "ч"),
    ("š", "ш"),
    ("ž", "ж"),
    ("c", "ц"),
    ("h", "г"),
    ("g", "ґ"),
    ("x", "кс"),
    ("q", "кв"),
    ("w", "в"),
    ("y", "и"),
    ("ý", "и"),
    ("i", "і"),
    ("í", "і"),
    ("j", "й"),
    ("á", "а"),
    ("é", "е"),
    ("ú", "у"),
    ("ů", "у"),
    ("ó", "о"),
    ("a", "а"),
    ("b", "б"),
    ("d", "д"),
    ("e", "е"),
    ("f", "ф"),
    ("k", "к"),
    ("l", "л"),
    ("m", "м"),
    ("n", "н"),
    ("o", "о"),
    ("p", "п"),
    ("r", "р"),
    ("s", "с"),
    ("t", "т"),
    ("u", "у"),
    ("v", "в"),
    ("z", "з"),
])

ua2pl = _with_capitals([
    ("['’ʼ]", ""),
    ("ьо", "io"),
    ("йо", "jo"),
    ("(?<=[%s])я" % UK_CONSONANTS, "ia"),
    ("(?<=[%s])ю" % UK_CONSONANTS, "iu"),
    ("(?<=[%s])є" % UK_CONSONANTS, "ie"),
    ("щ", "szcz"),
    ("ш", "sz"),
    ("ч", "cz"),
    ("ж", "ż"),
    ("х", "ch"),
    ("нь", "ń"),
    ("сь", "ś"),
    ("зь", "ź"),
    ("ць", "ć"),
    ("ль", "l"),
    ("л(?=[ії]|i)", "l"),
    ("л", "ł"),
    ("ц", "c"),
    ("я", "ja"),
    ("ю", "ju"),
    ("є", "je"),
    ("ї", "ji"),
    ("й", "j"),
    ("и", "y"),
    ("і", "i"),
    ("ґ", "g"),
    ("г", "h"),
    ("в", "w"),
    ("ь", ""),
    ("а", "a"),
    ("б", "b"),
    ("д", "d"),
    ("е", "e"),
    ("з", "z"),
    ("к", "k"),
    ("м", "m"),
    ("н", "n"),
    ("о", "o"),
    ("п", "p"),
    ("р", "r"),
    ("с", "s"),
    ("т", "t"),
    ("у", "u"),
    ("ф", "f"),
])

pl2ua = _with_capitals([
    ("szcz", "щ"),
    ("sz", "ш"),
    ("cz", "ч"),
    ("ch", "х"),
    ("rz", "ж"),
    ("dż", "дж"),
    ("dz", "дз"),
    ("ż", "ж"),
    ("ź", "зь"),
    ("ś", "сь"),
    ("ć", "ць"),
    ("ń", "нь"),
    ("ł", "в"),
    ("ia", "я"),
    ("ie", "є"),
    ("io", "ьо"),
    ("iu", "ю"),
    ("ja", "я"),
    ("je", "є"),
    ("jo", "йо"),
    ("ju", "ю"),
    ("ą", "он"),
    ("ę", "ен"),
    ("ó", "у"),
    ("y", "и"),
    ("i", "і"),
    ("j", "й"),
    ("w", "в"),
    ("h", "х"),
    ("g", "ґ"),
    ("c", "ц"),
    ("x", "кс"),
    ("a", "а"),
    ("b", "б"),
    ("d", "д"),
    ("e", "е"),
    ("f", "ф"),
    ("k", "к"),
    ("l", "л"),
    ("m", "м"),
    ("n", "н"),
    ("o", "о"),
    ("p", "п"),
    ("r", "р"),
    ("s", "с"),
    ("t", "т"),
    ("u", "у"),
    ("z", "з"),
])

ua2sk = _with_capitals([
    ("['’ʼ]", ""),
    ("ьо", "io"),
    ("йо", "jo"),
    ("дь", "ď"),
    ("ть", "ť"),
    ("нь", "ň"),
    ("ль", "ľ"),
    ("щ", "šč"),
    ("ж", "ž"),
    ("ч", "č"),
    ("ш", "š"),
    ("х", "ch"),
    ("ц", "c"),
    ("я", "ja"),
    ("ю", "ju"),
    ("є", "je"),
    ("ї", "ji"),
    ("й", "j"),
    ("и", "y"),
    ("і", "i"),
    ("ґ", "g"),
    ("г", "h"),
    ("ь", ""),
    ("а", "a"),
    ("б", "b"),
    ("в", "v"),
    ("д", "d"),
    ("е", "e"),
    ("з", "z"),
    ("к", "k"),
    ("л", "l"),
    ("м", "m"),
    ("н", "n"),
    ("о", "o"),
    ("п", "p"),
    ("р", "r"),
    ("с", "s"),
    ("т", "t"),
    ("у", "u"),
    ("ф", "f"),
])

sk2ua = _with_capitals([
    ("ch", "х"),
    ("šč", "щ"),
    ("dž", "дж"),
    ("dz", "дз"),
    ("ia", "я"),
    ("ie", "є"),
    ("iu", "ю"),
    ("ja", "я"),
    ("je", "є"),
    ("jo", "йо"),
    ("ju", "ю"),
    ("ô", "уо"),
    ("ä", "е"),
    ("ľ", "ль"),
    ("ĺ", "л"),
    ("ŕ", "р"),
    ("ň", "нь"),
    ("ť", "ть"),
    ("ď", "дь"),
    ("č", "ч"),
    ("š", "ш"),
    ("ž", "ж"),
    ("c", "ц"),
    ("h", "г"),
    ("g", "ґ"),
    ("x", "кс"),
    ("q", "кв"),
    ("w", "в"),
    ("y", "и"),
    ("ý", "и"),
    ("i", "і"),
    ("í", "і"),
    ("j", "й"),
    ("á", "а"),
    ("é", "е"),
    ("ú", "у"),
    ("ó", "о"),
    ("a", "а"),
    ("b", "б"),
    ("d", "д"),
    ("e", "е"),
    ("f", "ф"),
    ("k", "к"),
    ("l", "л"),
    ("m", "м"),
    ("n", "н"),
    ("o", "о"),
    ("p", "п"),
    ("r", "р"),
    ("s", "с"),
    ("t", "т"),
    ("u", "у"),
    ("v", "в"),
    ("z", "з"),
])


@dataclass(frozen=True)
class TranscriptionTables:
    """Tables keyed by the non-anchor language code, one mapping per direction."""

    from_anchor: Mapping[str, SubstitutionTable] = field(default_factory=dict)
    to_anchor: Mapping[str, SubstitutionTable] = field(default_factory=dict)


DEFAULT_TABLES = TranscriptionTables(
    from_anchor={
        Language.CS.value: ua2cz,
        Language.PL.value: ua2pl,
        Language.SK.value: ua2sk,
    },
    to_anchor={
        Language.CS.value: cz2ua,
        Language.PL.value: pl2ua,
        Language.SK.value: sk2ua,
    },
)
