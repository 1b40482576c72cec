"""Hour-to-card assignment.

Cards are derived from a hash of ``"{date}-{hour}"``, so a given day always
reproduces the same spread, with or without persisted state. Repeats across
hours are allowed.
"""

import hashlib
from datetime import date
from typing import Optional

from tarot_timer.catalog import CardCatalog, get_catalog
from tarot_timer.models import HOURS_PER_DAY, validate_date, validate_hour


def seed_for(day: date, hour: int) -> str:
    return f"{day.isoformat()}-{hour}"


def assign_index(day, hour, size: int) -> int:
    """Map (date, hour) to an index in ``range(size)``.

    Raises:
        InvalidArgumentError: If the date or hour is malformed.
    """
    day = validate_date(day)
    hour = validate_hour(hour)
    digest = hashlib.sha256(seed_for(day, hour).encode("utf-8")).digest()
    return int.from_bytes(digest[:8], "big") % size


def assign(day, hour, catalog: Optional[CardCatalog] = None) -> str:
    """Return the card id for ``hour`` on ``day``.

    Args:
        day: Calendar date (``date`` or ISO string).
        hour: Clock hour 0..23.
        catalog: Catalog to draw from. Defaults to the full deck.

    Returns:
        Card id, identical for every call with the same (day, hour).

    Raises:
        InvalidArgumentError: If the date or hour is malformed.
    """
    catalog = catalog or get_catalog()
    cards = catalog.all_cards()
    return cards[assign_index(day, hour, len(cards))].id


def assign_day(day, catalog: Optional[CardCatalog] = None) -> tuple[str, ...]:
    """Return the card ids for hours 0..23 of ``day``."""
    day = validate_date(day)
    return tuple(assign(day, hour, catalog) for hour in range(HOURS_PER_DAY))
