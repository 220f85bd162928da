"""Summary metrics derived from a yearly schedule.

Pure functions. No I/O.
"""

from decimal import Decimal

from src.models.results import YearProjection

SUMMARY_YEARS = 5


def break_even_year(projections: list[YearProjection]) -> int | None:
    """First year whose cumulative cash flow is non-negative."""
    for proj in projections:
        if proj.cumulative_cash_flow >= 0:
            return proj.year
    return None


def payback_period(
    projections: list[YearProjection], property_price: Decimal
) -> Decimal | None:
    """Fractional years to recover the investment.

    Interpolates linearly inside the break-even year using that year's
    operating profit. Falls back to the whole break-even year when that
    profit is not positive.
    """
    year = break_even_year(projections)
    if year is None:
        return None

    proj = projections[year - 1]
    if proj.net_profit <= 0:
        return Decimal(year)

    if year > 1:
        prior_cumulative = projections[year - 2].cumulative_cash_flow
    else:
        prior_cumulative = -property_price
    return (year - 1) + (-prior_cumulative / proj.net_profit)


def first_years(
    projections: list[YearProjection], years: int = SUMMARY_YEARS
) -> list[YearProjection]:
    return projections[:years]


def average_of(projections: list[YearProjection], attr: str) -> Decimal:
    """Mean of one YearProjection field; 0 for an empty schedule."""
    if not projections:
        return Decimal("0")
    total = sum((getattr(p, attr) for p in projections), Decimal("0"))
    return total / len(projections)


def average_annual_net_yield(
    average_income: Decimal, property_price: Decimal
) -> Decimal:
    if property_price <= 0:
        return Decimal("0")
    return average_income / property_price
