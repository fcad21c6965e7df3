# -*- coding: utf-8 -*-
"""
Minimal read-only client for the Airtable REST API.

Airtable lists records page by page:

    GET https://api.airtable.com/v0/{base_id}/{table}?view=...&pageSize=...

Each response carries {"records": [...], "offset": "..."}; the offset is sent
back with the next request and is missing on the last page. Records look like

    {"id": "rec...", "createdTime": "...", "fields": {"uk": "...", "cs": "..."}}

Empty cells are simply absent from "fields".
"""

import logging
from typing import Iterator, List, Optional
from urllib.parse import quote

import requests

LOGGER = logging.getLogger(__name__)

API_URL = "https://api.airtable.com/v0"


class AirtableTable:
    def __init__(self, base_id: str, table_name: str, api_key: str,
                 session: Optional[requests.Session] = None, timeout: float = 30):
        self.base_id = base_id
        self.table_name = table_name
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"Authorization": f"Bearer {api_key}"})

    @property
    def url(self) -> str:
        return f"{API_URL}/{self.base_id}/{quote(self.table_name, safe='')}"

    def iter_pages(self, view: Optional[str] = None, max_records: Optional[int] = None,
                   page_size: Optional[int] = None) -> Iterator[List[dict]]:
        """Yield one list of records per page until Airtable stops sending an offset.

        The next page is requested only when the caller asks for it. Any HTTP
        error is raised as requests.HTTPError; there are no retries.
        """
        params = {}
        if view:
            params["view"] = view
        if max_records is not None:
            params["maxRecords"] = max_records
        if page_size is not None:
            params["pageSize"] = page_size

        page = 0
        while True:
            resp = self.session.get(self.url, params=params, timeout=self.timeout)
            resp.raise_for_status()
            payload = resp.json()

            page += 1
            records = payload.get("records", [])
            LOGGER.debug("Fetched page %d of %s: %d records", page, self.table_name, len(records))
            yield records

            offset = payload.get("offset")
            if not offset:
                break
            params = dict(params, offset=offset)

    def iter_records(self, **kwargs) -> Iterator[dict]:
        for records in self.iter_pages(**kwargs):
            yield from records


def field_value(record: dict, name: str):
    return record.get("fields", {}).get(name)


def first_attachment_url(record: dict, name: str = "image") -> Optional[str]:
    attachments = field_value(record, name)
    if attachments:
        return attachments[0].get("url")
    return None
