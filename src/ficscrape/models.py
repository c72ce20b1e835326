from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Final


class TagCategory(str, Enum):
    FREEFORMS = "freeforms"
    WARNINGS = "warnings"
    FANDOMS = "fandoms"
    RELATIONSHIPS = "relationships"
    CHARACTERS = "characters"
    RATING = "rating"
    CATEGORY = "category"

    @property
    def container_selector(self) -> str:
        return "." + self.value

    @property
    def item_selectors(self) -> tuple[str, ...]:
        return _ITEM_SELECTORS.get(self, ("a.tag",))

    @property
    def selector(self) -> str:
        """Combined selector; matches come back in document order."""
        return ", ".join(
            f"{self.container_selector} {item}" for item in self.item_selectors
        )


_ITEM_SELECTORS: Final[dict[TagCategory, tuple[str, ...]]] = {
    # Required-tag symbols carry their label in a nested span.text; work
    # pages list the same values as ordinary tag links.
    TagCategory.RATING: ("span.text", "a.tag"),
    TagCategory.CATEGORY: ("span.text", "a.tag"),
}

TagMap = dict[TagCategory, list[str]]


@dataclass(frozen=True)
class FicMetadata:
    id: int
    name: str
    url: str
    last_updated: date
    authors: tuple[str, ...] = ()
    summary: str | None = None
    series: tuple[str, ...] = ()
    language: str | None = None
    chapters: str | None = None
    words: int | None = None
    kudos: int | None = None
    hits: int | None = None
    tags: TagMap = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "url": self.url,
            "last_updated": self.last_updated.isoformat(),
            "authors": list(self.authors),
            "summary": self.summary,
            "series": list(self.series),
            "language": self.language,
            "chapters": self.chapters,
            "words": self.words,
            "kudos": self.kudos,
            "hits": self.hits,
            "tags": tags_to_dict(self.tags),
        }


def tags_to_dict(tags: TagMap) -> dict[str, list[str]]:
    return {category.value: list(values) for category, values in tags.items()}
