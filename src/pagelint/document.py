"""HTML document loading and querying."""
from __future__ import annotations

import logging
from pathlib import Path

from bs4 import BeautifulSoup, ParserRejectedMarkup, Tag
from bs4.builder import builder_registry

logger = logging.getLogger("pagelint")

DEFAULT_PARSER = "html.parser"

_BOM = "\ufeff"


class ParseError(Exception):
    """Raised when a document cannot be read or parsed into a tree."""


class Document:
    """A parsed HTML page.

    Wraps the raw markup together with its BeautifulSoup tree. Rules only
    read from it; nothing in PageLint mutates a loaded document.
    """

    def __init__(self, source: str, soup: BeautifulSoup, path: str | None = None):
        self._source = source
        self._soup = soup
        self.path = path

    @classmethod
    def from_string(cls, markup: str, parser: str = DEFAULT_PARSER, path: str | None = None) -> Document:
        if not isinstance(markup, str):
            raise ParseError(f"Expected markup as str, got {type(markup).__name__}")
        if builder_registry.lookup(parser) is None:
            raise ParseError(f"Unknown HTML parser '{parser}'")

        if markup.startswith(_BOM):
            markup = markup[len(_BOM):]

        try:
            soup = BeautifulSoup(markup, parser)
        except ParserRejectedMarkup as exc:
            raise ParseError(f"Markup rejected by {parser}: {exc}") from exc

        return cls(markup, soup, path=path)

    @classmethod
    def from_file(cls, path: str | Path, parser: str = DEFAULT_PARSER) -> Document:
        file_path = Path(path)
        try:
            markup = file_path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise ParseError(f"{file_path} is not valid UTF-8: {exc}") from exc
        except OSError as exc:
            raise ParseError(f"Cannot read {file_path}: {exc}") from exc

        logger.debug("Loaded %s (%d characters)", file_path, len(markup))
        return cls.from_string(markup, parser=parser, path=str(file_path))

    @property
    def source(self) -> str:
        """The raw markup as loaded."""
        return self._source

    def select(self, selector: str) -> list[Tag]:
        return self._soup.select(selector)

    def select_one(self, selector: str) -> Tag | None:
        return self._soup.select_one(selector)

    def count(self, selector: str) -> int:
        return len(self.select(selector))

    def attr(self, selector: str, name: str) -> str | None:
        """Return attribute `name` of the first match, or None.

        Multi-valued attributes such as ``rel`` come back space-joined.
        """
        tag = self.select_one(selector)
        if tag is None:
            return None
        value = tag.get(name)
        if isinstance(value, list):
            return " ".join(value)
        return value

    def text(self, selector: str) -> str:
        """Concatenated text of every element matching `selector`."""
        return "".join(tag.get_text() for tag in self.select(selector))


def load_document(source: str | Path, parser: str = DEFAULT_PARSER) -> Document:
    """Load a Document from a file path (Path) or from markup (str)."""
    if isinstance(source, Path):
        return Document.from_file(source, parser=parser)
    return Document.from_string(source, parser=parser)
