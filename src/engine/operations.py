"""Per-year operating schedule: occupancy, daily rate, revenue, costs.

Pure functions: Decimal in, Decimal out. No I/O.
"""

from decimal import Decimal, ROUND_HALF_UP

from src.models.projection_input import ProjectionInput
from src.models.results import YearProjection

TWO_PLACES = Decimal("0.01")

DAYS_PER_YEAR = 365
OCCUPANCY_SWING = Decimal("0.10")  # +/- 10% between seasons
RAMP_UP_MIDPOINT_YEAR = 3


def _swing(draw: Decimal) -> Decimal:
    """Map a draw in [0, 1) onto [-1, 1)."""
    return draw * 2 - 1


def _clamp_unit(value: Decimal) -> Decimal:
    return max(Decimal("0"), min(Decimal("1"), value))


def average_occupancy(inputs: ProjectionInput, draw: Decimal) -> Decimal:
    """Mean of high and low season occupancy for one year.

    With fluctuation on, the high season moves up by a relative delta and the
    low season down by the same delta (or the reverse for draws below 0.5).
    """
    high = inputs.occupancy_high
    low = inputs.occupancy_low
    if inputs.fluctuate_occupancy:
        delta = _swing(draw) * OCCUPANCY_SWING
        high = _clamp_unit(high * (1 + delta))
        low = _clamp_unit(low * (1 - delta))
    return (high + low) / 2


def inflated_daily_rate(inputs: ProjectionInput, year: int) -> Decimal:
    """Average daily rate for a year, before growth destabilization."""
    rate = inputs.average_daily_rate
    if inputs.apply_inflation:
        rate *= (1 + inputs.inflation_rate) ** (year - 1)
    return rate


def ramp_up_factor(first_year_penalty: Decimal, year: int) -> Decimal:
    """Sigmoid ramp-up centered on year 3: 1 - penalty / (1 + e^-(y-3))."""
    exponent = Decimal(-(year - RAMP_UP_MIDPOINT_YEAR))
    return 1 - first_year_penalty / (1 + exponent.exp())


def trend_factor(annual_growth: Decimal, year: int) -> Decimal:
    return (1 + annual_growth) ** (year - 1)


def random_factor(draw: Decimal, fluctuation_max: Decimal) -> Decimal:
    return 1 + _swing(draw) * fluctuation_max


def growth_factor(inputs: ProjectionInput, year: int, draw: Decimal) -> Decimal:
    """Combined destabilization multiplier; 1 when the model is switched off."""
    if not inputs.apply_growth_destabilization:
        return Decimal("1")
    return (
        ramp_up_factor(inputs.first_year_revenue_penalty, year)
        * trend_factor(inputs.annual_base_growth_trend, year)
        * random_factor(draw, inputs.annual_random_fluctuation_max)
    )


def recurring_costs(inputs: ProjectionInput, revenue: Decimal) -> dict[str, Decimal]:
    """Itemized percentage-of-revenue costs."""
    management = (revenue * inputs.management_fee_pct).quantize(TWO_PLACES, ROUND_HALF_UP)
    utilities = (revenue * inputs.utilities_maintenance_pct).quantize(TWO_PLACES, ROUND_HALF_UP)
    taxes = (revenue * inputs.taxes_pct).quantize(TWO_PLACES, ROUND_HALF_UP)
    ota = (revenue * inputs.ota_fees_pct).quantize(TWO_PLACES, ROUND_HALF_UP)

    return {
        "management_fee": management,
        "utilities_maintenance": utilities,
        "taxes": taxes,
        "ota_fees": ota,
        "total": management + utilities + taxes + ota,
    }


def additional_costs_by_year(inputs: ProjectionInput) -> dict[int, Decimal]:
    """Sum scheduled capex per lease year."""
    by_year: dict[int, Decimal] = {}
    for event in inputs.active_additional_costs:
        cost = event.cost_for(inputs.property_price).quantize(TWO_PLACES, ROUND_HALF_UP)
        by_year[event.year] = by_year.get(event.year, Decimal("0")) + cost
    return by_year


def net_yield(net_profit: Decimal, property_price: Decimal) -> Decimal | None:
    if property_price <= 0:
        return None
    return net_profit / property_price


def project_year(
    inputs: ProjectionInput,
    year: int,
    draw: Decimal,
    prior_cumulative: Decimal,
    additional_cost: Decimal = Decimal("0"),
) -> YearProjection:
    """Build one year of the schedule from the previous year's cash position."""
    occupancy = average_occupancy(inputs, draw)
    rate = inflated_daily_rate(inputs, year)
    revenue = rate * DAYS_PER_YEAR * occupancy

    # Reported rate takes the same multiplier as revenue
    factor = growth_factor(inputs, year, draw)
    revenue = (revenue * factor).quantize(TWO_PLACES, ROUND_HALF_UP)
    rate = (rate * factor).quantize(TWO_PLACES, ROUND_HALF_UP)

    costs = recurring_costs(inputs, revenue)
    net_profit = revenue - costs["total"]

    return YearProjection(
        year=year,
        revenue=revenue,
        avg_occupancy=occupancy,
        avg_daily_rate=rate,
        management_fee=costs["management_fee"],
        utilities_maintenance=costs["utilities_maintenance"],
        taxes=costs["taxes"],
        ota_fees=costs["ota_fees"],
        total_costs=costs["total"],
        net_profit=net_profit,
        net_yield_percent=net_yield(net_profit, inputs.property_price),
        additional_cost_in_year=additional_cost,
        cumulative_cash_flow=prior_cumulative + net_profit - additional_cost,
    )


def build_schedule(
    inputs: ProjectionInput, draws: tuple[Decimal, ...]
) -> list[YearProjection]:
    """Year-by-year schedule, cumulative cash flow seeded at -property_price."""
    capex = additional_costs_by_year(inputs)
    projections: list[YearProjection] = []
    cumulative = -inputs.property_price

    for year in range(1, inputs.lease_years + 1):
        proj = project_year(
            inputs,
            year,
            draws[year - 1],
            prior_cumulative=cumulative,
            additional_cost=capex.get(year, Decimal("0")),
        )
        projections.append(proj)
        cumulative = proj.cumulative_cash_flow

    return projections
