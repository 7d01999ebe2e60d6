"""Shared helpers for pack rules."""
from __future__ import annotations

from urllib.parse import urlparse

from bs4 import Tag

_ABSOLUTE_SCHEMES = {"http", "https"}


def is_absolute_url(value: str | None) -> bool:
    """Return True for an http(s) URL with a host."""
    if not value:
        return False
    parsed = urlparse(value.strip())
    return parsed.scheme in _ABSOLUTE_SCHEMES and bool(parsed.netloc)


def attr_tokens(tag: Tag, name: str) -> list[str]:
    """Whitespace-separated, lower-cased tokens of an attribute."""
    value = tag.get(name)
    if value is None:
        return []
    if isinstance(value, list):
        value = " ".join(value)
    return value.lower().split()


def describe(tag: Tag, attr: str, label: str, index: int) -> str:
    """Identify an element by `attr`, falling back to its position."""
    value = tag.get(attr)
    return value if value else f"{label} #{index}"
