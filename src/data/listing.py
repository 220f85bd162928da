"""Villa listing snapshot: free-text price and lease term parsing.

Listings arrive with human-entered strings ("US$ 350,000", "25 years").
Only price and lease term feed the projection; title, description and
image are carried for display.
"""

import logging
import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from src.models.projection_input import ProjectionInput

logger = logging.getLogger(__name__)

_CURRENCY_MARKERS = re.compile(r"US\$|\$|Rp", re.IGNORECASE)
_FIRST_INTEGER = re.compile(r"\d+")


@dataclass(frozen=True)
class ListingSnapshot:
    title: str = ""
    description: str = ""
    image_url: str = ""
    price: str | Decimal | int | float | None = None
    lease_term: str | int | None = None


def parse_usd_price(value: str | Decimal | int | float | None) -> Decimal | None:
    """Parse a listing price into a Decimal.

    Strips currency markers and comma separators. A single dot followed by
    exactly three digits ("350.000") is read as a thousands separator, as is
    any dot when there is more than one.
    """
    if value is None:
        return None
    if isinstance(value, (int, float, Decimal)):
        return _finite(Decimal(str(value)), value)

    cleaned = _CURRENCY_MARKERS.sub("", value).strip().replace(",", "")
    if not cleaned:
        return None

    parts = cleaned.split(".")
    if (len(parts) == 2 and len(parts[1]) == 3) or len(parts) > 2:
        cleaned = "".join(parts)

    try:
        return _finite(Decimal(cleaned), value)
    except InvalidOperation:
        logger.warning("Unparseable listing price: %r", value)
        return None


def _finite(price: Decimal, raw) -> Decimal | None:
    if not price.is_finite():
        logger.warning("Unparseable listing price: %r", raw)
        return None
    return price


def parse_lease_years(value: str | int | None) -> int | None:
    """First integer in a free-text lease term ("25 years + 20 ext" -> 25)."""
    if value is None:
        return None
    if isinstance(value, int):
        return value
    match = _FIRST_INTEGER.search(value)
    if not match:
        return None
    return int(match.group(0))


def inputs_from_listing(listing: ListingSnapshot, **overrides) -> ProjectionInput:
    """Seed projection inputs from a listing.

    Unparseable price or lease term become 0 so the engine's input guard
    rejects the scenario instead of guessing.
    """
    price = parse_usd_price(listing.price)
    lease_years = parse_lease_years(listing.lease_term)
    if price is None or lease_years is None:
        logger.info("Listing %r is missing a usable price or lease term", listing.title)

    kwargs = dict(
        property_price=price if price is not None else Decimal("0"),
        lease_years=lease_years or 0,
    )
    kwargs.update(overrides)
    return ProjectionInput(**kwargs)
