"""Canonical test fixtures used across all engine tests.

Fixture: $300K villa on a 10-year lease, $150/$100 seasonal daily rates,
85%/72% occupancy, 15% management + 10% utilities + 10% taxes, no OTA fees.
All stochastic and inflationary dynamics off unless a fixture says otherwise.
"""

import pytest
from dataclasses import replace
from decimal import Decimal

from src.models.projection_input import (
    AdditionalCostEvent,
    FixedAmount,
    PercentOfPrice,
    ProjectionInput,
)


@pytest.fixture
def canonical_inputs() -> ProjectionInput:
    """$300K villa, 10-year lease, static dynamics."""
    return ProjectionInput(
        property_price=Decimal("300000"),
        lease_years=10,
        daily_rate_high=Decimal("150"),
        daily_rate_low=Decimal("100"),
        occupancy_high=Decimal("0.85"),
        occupancy_low=Decimal("0.72"),
        management_fee_pct=Decimal("0.15"),
        utilities_maintenance_pct=Decimal("0.10"),
        taxes_pct=Decimal("0.10"),
        ota_fees_pct=Decimal("0"),
        apply_inflation=False,
        fluctuate_occupancy=False,
        apply_growth_destabilization=False,
        enable_resale_strategy=False,
    )


@pytest.fixture
def dynamic_inputs(canonical_inputs) -> ProjectionInput:
    """Canonical villa with inflation, occupancy swing and destabilization on."""
    return replace(
        canonical_inputs,
        apply_inflation=True,
        inflation_rate=Decimal("0.03"),
        fluctuate_occupancy=True,
        apply_growth_destabilization=True,
        first_year_revenue_penalty=Decimal("0.15"),
        annual_base_growth_trend=Decimal("0.03"),
        annual_random_fluctuation_max=Decimal("0.15"),
    )


@pytest.fixture
def resale_inputs(canonical_inputs) -> ProjectionInput:
    """Canonical villa with the year-5 resale strategy at 8x income."""
    return replace(
        canonical_inputs,
        enable_resale_strategy=True,
        resale_profit_multiplier=Decimal("8"),
        apply_sale_tax_on_resale=True,
        sale_tax_rate_on_resale=Decimal("0.10"),
        apply_agency_commission_on_resale=True,
        agency_commission_rate_on_resale=Decimal("0.05"),
    )


@pytest.fixture
def roof_replacement() -> AdditionalCostEvent:
    return AdditionalCostEvent(
        id="roof",
        year=3,
        description="Roof replacement",
        amount=FixedAmount(amount=Decimal("5000")),
    )


@pytest.fixture
def pool_refit() -> AdditionalCostEvent:
    """2% of price in year 1."""
    return AdditionalCostEvent(
        id="pool",
        year=1,
        description="Pool refit",
        amount=PercentOfPrice(percent=Decimal("0.02")),
    )

