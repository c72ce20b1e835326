from __future__ import annotations


class FicScrapeError(Exception):
    """Base class for every extraction failure."""

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class ParseFailure(FicScrapeError):
    """The input could not be tokenized as markup at all."""


class ElementNotFound(FicScrapeError):
    """A required structural element is absent.

    ``kind`` is one of ``"listing"``, ``"heading"`` or ``"date"``.
    """

    def __init__(self, kind: str) -> None:
        super().__init__(kind)
        self.kind = kind

    def __str__(self) -> str:
        return f"element not found: {self.kind}"


class FieldInvalid(FicScrapeError):
    """A located field fails its contract.

    ``field`` is one of ``"id"``, ``"title"`` or ``"date"``.
    """

    def __init__(self, field: str, detail: str | None = None) -> None:
        super().__init__(field)
        self.field = field
        self.detail = detail

    def __str__(self) -> str:
        if self.detail:
            return f"invalid field {self.field}: {self.detail}"
        return f"invalid field: {self.field}"
