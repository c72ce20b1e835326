from __future__ import annotations

import re

from bs4 import BeautifulSoup, Tag
from bs4.builder import ParserRejectedMarkup

from .errors import ParseFailure

_WS = re.compile(r"\s+")


def parse_markup(html: str | bytes, *, parser: str = "html.parser") -> BeautifulSoup:
    """Parse saved page markup into a queryable tree.

    Bytes must be UTF-8. Plain text without any tags parses to a tree with
    no elements; only input the tree builder cannot tokenize is a failure.
    """

    if isinstance(html, bytes):
        try:
            html = html.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ParseFailure(f"markup is not valid UTF-8: {e}") from e
    if not isinstance(html, str):
        raise ParseFailure(f"expected markup text, got {type(html).__name__}")

    try:
        return BeautifulSoup(html, parser)
    except ParserRejectedMarkup as e:
        raise ParseFailure(str(e)) from e


def select_first(node: Tag, selector: str) -> Tag | None:
    return node.select_one(selector)


def select_all(node: Tag, selector: str) -> list[Tag]:
    return list(node.select(selector))


def attr(node: Tag, name: str) -> str | None:
    value = node.get(name)
    if value is None:
        return None
    # class/rel style attributes come back as lists.
    if isinstance(value, list):
        return " ".join(value)
    return str(value)


def text_of(node: Tag) -> str:
    return node.get_text().strip()


def collapsed_text_of(node: Tag) -> str:
    return _WS.sub(" ", node.get_text(" ")).strip()
