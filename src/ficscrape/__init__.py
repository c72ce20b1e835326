"""ficscrape core library.

Turns saved fanfiction archive listing markup into work metadata records
and categorized tag maps. Fetching pages and storing records are left to
callers.
"""

from __future__ import annotations

from .errors import ElementNotFound, FicScrapeError, FieldInvalid, ParseFailure
from .extraction import (
    DEFAULT_SELECTORS,
    ListingSelectors,
    extract_fic_metadata,
    gettags,
)
from .models import FicMetadata, TagCategory, TagMap

__all__ = [
    "DEFAULT_SELECTORS",
    "ElementNotFound",
    "FicMetadata",
    "FicScrapeError",
    "FieldInvalid",
    "ListingSelectors",
    "ParseFailure",
    "TagCategory",
    "TagMap",
    "__version__",
    "extract_fic_metadata",
    "gettags",
]

__version__ = "0.1.0"
