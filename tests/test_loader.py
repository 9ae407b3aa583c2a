from __future__ import annotations

import logging
from dataclasses import dataclass

from markpage.exceptions import MalformedMetadataError, MissingMetadataError
from markpage.loader import load_frontmatter


@dataclass
class Page:
    title: str


DOCUMENTS = [
    ("good.md", '+++\ntitle = "Good"\n+++\nbody'),
    ("broken.md", "+++\ntitle = \n+++\nbody"),
    ("plain.md", "no frontmatter here"),
    ("yaml.md", "---\ntitle: Yaml\n---\nbody"),
]


def test_load_frontmatter_keeps_one_result_per_document():
    results = load_frontmatter(DOCUMENTS)

    assert [item.rel_path for item in results] == ["good.md", "broken.md", "plain.md", "yaml.md"]
    assert results[0].frontmatter == {"title": "Good"}
    assert results[3].frontmatter == {"title": "Yaml"}


def test_load_frontmatter_records_errors_without_aborting():
    results = load_frontmatter(DOCUMENTS)

    assert [item.ok for item in results] == [True, False, False, True]
    assert isinstance(results[1].error, MalformedMetadataError)
    assert isinstance(results[2].error, MissingMetadataError)
    assert results[1].frontmatter is None


def test_load_frontmatter_with_record_type():
    results = load_frontmatter(DOCUMENTS, Page)

    assert results[0].frontmatter == Page(title="Good")
    assert results[3].frontmatter == Page(title="Yaml")


def test_load_frontmatter_logs_failures(caplog):
    with caplog.at_level(logging.WARNING, logger="markpage.loader"):
        load_frontmatter(DOCUMENTS)

    messages = [record.getMessage() for record in caplog.records]
    assert any("broken.md" in message for message in messages)
    assert any("plain.md" in message for message in messages)


def test_load_frontmatter_empty_batch():
    assert load_frontmatter([]) == []
