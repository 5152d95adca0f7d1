"""Tests for natural-language selector translation and document queries."""

import pytest
from bs4 import BeautifulSoup

from talktocode.dom import DomQuery, translate
from talktocode.results import ErrorKind

_HTML = """
<main id="main">
  <button class="btn primary">Save</button>
  <button class="btn">Cancel</button>
  <p class="theme-note">Hi</p>
</main>
"""


@pytest.mark.parametrize("fragment, expected", [
    ("class btn", ".btn"),
    ("id main", "#main"),
    ("the id main", "#main"),
    ("elements with class btn", ".btn"),
    ("button", "button"),
    ("class theme-note", ".theme-note"),
])
def test_translate(fragment, expected):
    assert translate(fragment) == expected


def test_query_without_document():
    result = DomQuery().query("class btn")
    assert result.kind == ErrorKind.UNAVAILABLE
    assert result.message == "DOM not available"


def test_query_by_class():
    dom = DomQuery(_HTML)
    assert [el.get_text() for el in dom.query("class btn")] == ["Save", "Cancel"]


def test_query_by_id():
    dom = DomQuery(_HTML)
    found = dom.query("id main")
    assert len(found) == 1
    assert found[0].name == "main"


def test_query_accepts_soup():
    dom = DomQuery(BeautifulSoup(_HTML, "html.parser"))
    assert dom.available
    assert len(dom.query("class primary")) == 1


def test_query_no_matches():
    assert DomQuery(_HTML).query("class missing") == []


def test_invalid_selector():
    result = DomQuery(_HTML).query("class btn >>> ???")
    assert result.kind == ErrorKind.INVALID_SELECTOR
    assert result.message.startswith("Invalid selector:")


def test_set_document_later():
    dom = DomQuery()
    assert not dom.available
    dom.set_document(_HTML)
    assert len(dom.query("class btn")) == 2
