"""Element lookup in an HTML document from a natural-language selector.

    "class button"          ->  ".button"
    "the id main"           ->  "#main"
    "elements with class a" ->  ".a"

The document is HTML text or a BeautifulSoup tree supplied by the host. With
no document there is nothing to search, and query() says so with an
UNAVAILABLE error rather than raising.
"""

import re

from bs4 import BeautifulSoup

from talktocode.results import ErrorKind, ErrorResult

_CLASS_PHRASE = re.compile(r"\bclass\s+([a-zA-Z0-9_-]+)")
_ID_PHRASE = re.compile(r"\bid\s+([a-zA-Z0-9_-]+)")
_FILLER = re.compile(r"\b(?:elements?|with|the)\b", re.IGNORECASE)


def translate(fragment):
    """Turn a natural-language selector fragment into a CSS selector."""
    selector = fragment
    if "class" in selector:
        selector = _CLASS_PHRASE.sub(r".\1", selector)
    if "id" in selector:
        selector = _ID_PHRASE.sub(r"#\1", selector)
    selector = _FILLER.sub("", selector)
    return " ".join(selector.split())


class DomQuery:
    """Runs translated selectors against one document."""

    def __init__(self, document=None):
        self.set_document(document)

    def set_document(self, document):
        """Use document (HTML text, a BeautifulSoup tree, or None) from now on."""
        if isinstance(document, str):
            document = BeautifulSoup(document, "html.parser")
        self.soup = document

    @property
    def available(self):
        return self.soup is not None

    def query(self, fragment):
        """Elements matching fragment, or an ErrorResult."""
        if self.soup is None:
            return ErrorResult(kind=ErrorKind.UNAVAILABLE, message="DOM not available")
        selector = translate(fragment)
        try:
            return self.soup.select(selector)
        except Exception as e:
            return ErrorResult(kind=ErrorKind.INVALID_SELECTOR,
                               message=f"Invalid selector: {e}")
