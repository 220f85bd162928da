from decimal import Decimal

import pytest

from src.data.listing import (
    ListingSnapshot,
    inputs_from_listing,
    parse_lease_years,
    parse_usd_price,
)
from src.engine.projection import compute_projection
from src.engine.random_sequence import RandomSequence


class TestParseUsdPrice:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("US$ 350,000", Decimal("350000")),
            ("$275,500", Decimal("275500")),
            ("Rp 1.500.000", Decimal("1500000")),
            ("350.000", Decimal("350000")),
            ("199.99", Decimal("199.99")),
            (420000, Decimal("420000")),
        ],
    )
    def test_formats(self, raw, expected):
        assert parse_usd_price(raw) == expected

    @pytest.mark.parametrize("raw", [None, "", "US$", "price on request", "NaN", "US$ Infinity", float("nan"), Decimal("NaN")])
    def test_unparseable(self, raw):
        assert parse_usd_price(raw) is None


class TestParseLeaseYears:
    def test_free_text(self):
        assert parse_lease_years("25 years") == 25
        assert parse_lease_years("Leasehold 30 yrs + 20 extension") == 30

    def test_int_passthrough(self):
        assert parse_lease_years(18) == 18

    def test_no_number(self):
        assert parse_lease_years("freehold") is None
        assert parse_lease_years(None) is None


class TestInputsFromListing:
    def test_seeds_price_and_lease(self):
        listing = ListingSnapshot(title="Villa Padi", price="US$ 300,000", lease_term="10 years")
        inputs = inputs_from_listing(
            listing, daily_rate_high=Decimal("150"), daily_rate_low=Decimal("100")
        )
        assert inputs.property_price == Decimal("300000")
        assert inputs.lease_years == 10
        assert compute_projection(inputs, RandomSequence()) is not None

    def test_unusable_listing_is_rejected_by_engine(self):
        listing = ListingSnapshot(title="Villa Awan", price="on request", lease_term="freehold")
        inputs = inputs_from_listing(listing)
        assert inputs.property_price == Decimal("0")
        assert inputs.lease_years == 0
        assert compute_projection(inputs, RandomSequence()) is None

    def test_nan_price_is_rejected_by_engine(self):
        listing = ListingSnapshot(title="Villa Bulan", price="NaN", lease_term="10 years")
        inputs = inputs_from_listing(listing)
        assert inputs.property_price == Decimal("0")
        assert compute_projection(inputs, RandomSequence()) is None
