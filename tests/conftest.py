"""Shared fixtures for the dictionary builder tests."""

import pytest


class FakeTable:
    """Stands in for AirtableTable, serving canned pages of records."""

    def __init__(self, pages):
        self.pages = pages
        self.calls = []

    def iter_pages(self, **kwargs):
        self.calls.append(kwargs)
        for page in self.pages:
            yield list(page)

    def iter_records(self, **kwargs):
        for page in self.iter_pages(**kwargs):
            yield from page


def record(record_id, **fields):
    return {"id": record_id, "createdTime": "2022-03-01T10:00:00.000Z", "fields": fields}


@pytest.fixture
def make_table():
    return FakeTable


@pytest.fixture
def phrases_table():
    return FakeTable([
        [
            record(
                "recHello",
                uk="привіт",
                cs="ahoj",
                sk="ahoj",
                en="hello",
                image=[
                    {"id": "att1", "url": "https://dl.airtable.com/hello.png"},
                    {"id": "att2", "url": "https://dl.airtable.com/hello-2.png"},
                ],
            ),
            record("recNoUkrainian", cs="děkuji", en="thank you"),
        ],
        [
            record("recYes", uk="так", cs="ano", pl="tak", en=""),
        ],
    ])


@pytest.fixture
def categories_table():
    return FakeTable([
        [
            record("recGreetings", uk="Вітання", cs="Pozdravy", en="Greetings",
                   phrases=["recHello"]),
            record("recBasics", uk="Основи", cs="Základy", pl="Podstawy",
                   phrases=["recYes"]),
        ],
    ])
