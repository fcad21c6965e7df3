# -*- coding: utf-8 -*-
from urllib.parse import urlsplit, urlunsplit

from phrasebook.definitions import Phrase
from phrasebook.locales import Language


def normalize_image_url(url):
    """Trim the URL and upgrade it to https. Blank URLs become None."""
    if url is None:
        return None
    url = url.strip()
    if not url:
        return None
    # protocol-relative, eg //dl.airtable.com/...
    if url.startswith("//"):
        url = "https:" + url
    parts = urlsplit(url)
    if parts.scheme == "http":
        parts = parts._replace(scheme="https")
    return urlunsplit(parts)


class NormalizeImageUrl:
    def execute(self, language_pack: Language, phrase: Phrase) -> Phrase:
        phrase.image_url = normalize_image_url(phrase.image_url)
        return phrase
