"""Extract work metadata and tags from saved archive listing markup.

Both entry points are pure: they parse the given text, query the resulting
tree and either return a fresh value or raise a ``FicScrapeError``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from typing import Final

from bs4 import Tag

from .errors import ElementNotFound, FieldInvalid
from .markup import (
    attr,
    collapsed_text_of,
    parse_markup,
    select_all,
    select_first,
    text_of,
)
from .models import FicMetadata, TagCategory, TagMap
from .urls import work_id_from_href


@dataclass(frozen=True)
class ListingSelectors:
    listing: str = 'li[role="article"]'
    heading_link: str = "h4.heading a"
    last_updated: str = ".datetime"
    author: str = 'a[rel="author"]'
    summary: str = "blockquote.userstuff.summary"
    series: str = "ul.series li"
    language: str = "dd.language"
    chapters: str = "dd.chapters"
    words: str = "dd.words"
    kudos: str = "dd.kudos"
    hits: str = "dd.hits"
    parser: str = "html.parser"


DEFAULT_SELECTORS = ListingSelectors()


_LISTING_DATE = re.compile(r"([0-9]{1,2})\s+([A-Za-z]{3})\s+([0-9]{4})")

_MONTHS: Final[dict[str, int]] = {
    name: number
    for number, name in enumerate(
        (
            "jan",
            "feb",
            "mar",
            "apr",
            "may",
            "jun",
            "jul",
            "aug",
            "sep",
            "oct",
            "nov",
            "dec",
        ),
        start=1,
    )
}


def parse_count(text: str) -> int | None:
    """Parse a comma-grouped count such as ``12,345``."""

    cleaned = text.replace(",", "").strip()
    if not cleaned.isascii() or not cleaned.isdigit():
        return None
    try:
        return int(cleaned)
    except ValueError:
        # Exceeds the interpreter's int string conversion limit.
        return None


def parse_listing_date(text: str) -> date:
    """Parse a listing date such as ``15 Jan 2024``.

    Month abbreviations are matched against a fixed English table, so the
    result does not depend on the process locale.
    """

    cleaned = text.strip()
    match = _LISTING_DATE.fullmatch(cleaned)
    month = _MONTHS.get(match.group(2).lower()) if match else None
    if match is None or month is None:
        raise FieldInvalid("date", repr(cleaned))
    try:
        return date(int(match.group(3)), month, int(match.group(1)))
    except ValueError as e:
        raise FieldInvalid("date", repr(cleaned)) from e


def tags_from_node(node: Tag) -> TagMap:
    tags: TagMap = {}
    for category in TagCategory:
        values: list[str] = []
        for item in select_all(node, category.selector):
            text = text_of(item)
            if category is TagCategory.CATEGORY:
                values.extend(p.strip() for p in text.split(",") if p.strip())
            elif text:
                values.append(text)
        if values:
            tags[category] = values
    return tags


def gettags(html: str, *, selectors: ListingSelectors = DEFAULT_SELECTORS) -> TagMap:
    """Group tag texts by category.

    Categories without any tag are left out; a page with no tags at all
    yields an empty mapping.
    """

    return tags_from_node(parse_markup(html, parser=selectors.parser))


def _optional_text(node: Tag, selector: str) -> str | None:
    found = select_first(node, selector)
    if found is None:
        return None
    return text_of(found) or None


def _optional_count(node: Tag, selector: str) -> int | None:
    text = _optional_text(node, selector)
    if text is None:
        return None
    return parse_count(text)


def _texts(node: Tag, selector: str, *, collapse: bool = False) -> tuple[str, ...]:
    read = collapsed_text_of if collapse else text_of
    return tuple(t for t in (read(found) for found in select_all(node, selector)) if t)


def _summary(node: Tag, selector: str) -> str | None:
    block = select_first(node, selector)
    if block is None:
        return None
    paragraphs = [text_of(p) for p in select_all(block, "p")]
    paragraphs = [p for p in paragraphs if p]
    if paragraphs:
        return "\n\n".join(paragraphs)
    return text_of(block) or None


def extract_fic_metadata(
    html: str, *, selectors: ListingSelectors = DEFAULT_SELECTORS
) -> FicMetadata:
    """Build a ``FicMetadata`` from the first work listing in ``html``.

    Id, title, url and last-updated date are required and any problem with
    them raises. Everything else is filled in when present.
    """

    soup = parse_markup(html, parser=selectors.parser)

    listing = select_first(soup, selectors.listing)
    if listing is None:
        raise ElementNotFound("listing")

    link = select_first(listing, selectors.heading_link)
    if link is None:
        raise ElementNotFound("heading")

    href = attr(link, "href")
    if href is None:
        raise FieldInvalid("id", "heading link has no href")
    work_id = work_id_from_href(href)
    if work_id is None:
        raise FieldInvalid("id", f"no numeric work id in {href!r}")

    name = text_of(link)
    if not name:
        raise FieldInvalid("title", "heading link text is empty")

    stamp = select_first(listing, selectors.last_updated)
    if stamp is None:
        raise ElementNotFound("date")
    last_updated = parse_listing_date(text_of(stamp))

    return FicMetadata(
        id=work_id,
        name=name,
        url=href,
        last_updated=last_updated,
        authors=_texts(listing, selectors.author),
        summary=_summary(listing, selectors.summary),
        series=_texts(listing, selectors.series, collapse=True),
        language=_optional_text(listing, selectors.language),
        chapters=_optional_text(listing, selectors.chapters),
        words=_optional_count(listing, selectors.words),
        kudos=_optional_count(listing, selectors.kudos),
        hits=_optional_count(listing, selectors.hits),
        tags=tags_from_node(listing),
    )
