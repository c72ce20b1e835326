from __future__ import annotations

import re
from urllib.parse import ParseResult, urljoin, urlparse

ARCHIVE_BASE_URL = "https://archiveofourown.org"

_DIGITS = re.compile(r"[0-9]+")


def work_id_from_href(href: str) -> int | None:
    """Return the work id carried by a link target, if any.

    - Reads the trailing path segment; query and fragment are ignored.
    - Tolerates one trailing slash.
    - Only ASCII digits with a value above zero count as an id.
    """

    try:
        parsed: ParseResult = urlparse(href.strip())
    except ValueError:
        # Unbalanced IPv6 brackets in the netloc.
        return None
    path = parsed.path
    if path.endswith("/"):
        path = path[:-1]
    segment = path.rsplit("/", 1)[-1]
    if not _DIGITS.fullmatch(segment):
        return None
    try:
        work_id = int(segment)
    except ValueError:
        # Exceeds the interpreter's int string conversion limit.
        return None
    if work_id <= 0:
        return None
    return work_id


def absolute_work_url(href: str, *, base_url: str = ARCHIVE_BASE_URL) -> str:
    return urljoin(base_url.rstrip("/") + "/", href.strip())
