"""Parsing of day/month/year dates as shown on Spanish-locale pages."""

import re
from datetime import datetime

from feedsmith.utils.errors import FeedParseError

# Used when an episode page shows no date at all
FALLBACK_PUBLISHED = datetime(2000, 1, 1)

_SEPARATORS = re.compile(r"[/·:]")


def from_spanish_date(text: str) -> datetime:
    """Parse a ``day/month/year`` string into a naive local datetime.

    ``/``, ``·`` and ``:`` are all accepted as separators; only the first
    three fields are used, so ``"05/03/2021 · 10:00"`` parses to 5 March 2021.

    Args:
        text: Date text from the page

    Returns:
        Midnight of that day, without timezone

    Raises:
        FeedParseError: If the text does not hold a valid calendar date
    """
    parts = [part.strip() for part in _SEPARATORS.split(text)]
    if len(parts) < 3:
        raise FeedParseError(f"Not a day/month/year date: {text!r}")

    try:
        day, month, year = (int(part) for part in parts[:3])
        return datetime(year, month, day)
    except ValueError as e:
        raise FeedParseError(f"Invalid date {text!r}: {e}") from e


def parse_published(text: str | None) -> datetime:
    """Parse an episode date line such as ``"05/03/2021 · 10:00"``.

    Only the part before the first ``·`` is considered. Empty or missing
    text gives FALLBACK_PUBLISHED.
    """
    date_text = (text or "").split("·")[0].strip()
    if not date_text:
        return FALLBACK_PUBLISHED
    return from_spanish_date(date_text)
