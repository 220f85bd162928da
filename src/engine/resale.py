"""Five-year resale strategy: sell the operating lease at the end of year 5.

The business is valued on a multiple of average operating income, scaled by
the share of the lease still remaining. Sale tax and agency commission are
each charged on the gross value (not on each other).

Pure functions. No I/O.
"""

from dataclasses import replace
from decimal import Decimal, ROUND_HALF_UP

from src.models.projection_input import ProjectionInput
from src.models.results import ResaleStrategyResult, YearProjection

TWO_PLACES = Decimal("0.01")

RESALE_YEAR = 5


def is_eligible(inputs: ProjectionInput) -> bool:
    return inputs.enable_resale_strategy and inputs.lease_years >= RESALE_YEAR


def gross_resale_value(
    average_income: Decimal, profit_multiplier: Decimal, lease_years: int
) -> Decimal:
    """Income multiple scaled by the remaining lease fraction; 0 if income <= 0."""
    if average_income <= 0 or lease_years <= 0:
        return Decimal("0")
    remaining = lease_years - RESALE_YEAR
    value = average_income * profit_multiplier * Decimal(remaining) / Decimal(lease_years)
    return value.quantize(TWO_PLACES, ROUND_HALF_UP)


def evaluate_resale_strategy(
    inputs: ProjectionInput,
    projections: list[YearProjection],
    average_income: Decimal,
) -> ResaleStrategyResult | None:
    """Evaluate the year-5 exit against the primary schedule.

    Args:
        inputs: Scenario inputs (resale toggles and rates)
        projections: Primary schedule; only years 1-5 are read
        average_income: Average operating net profit over years 1-5
    """
    if not is_eligible(inputs):
        return None

    gross = gross_resale_value(
        average_income, inputs.resale_profit_multiplier, inputs.lease_years
    )

    sale_tax = Decimal("0")
    if inputs.apply_sale_tax_on_resale:
        sale_tax = (gross * inputs.sale_tax_rate_on_resale).quantize(TWO_PLACES, ROUND_HALF_UP)
    commission = Decimal("0")
    if inputs.apply_agency_commission_on_resale:
        commission = (gross * inputs.agency_commission_rate_on_resale).quantize(
            TWO_PLACES, ROUND_HALF_UP
        )
    net_resale = gross - sale_tax - commission

    # Re-accumulate years 1-5, folding the sale into year 5
    held = projections[:RESALE_YEAR]
    cumulative = -inputs.property_price
    strategy_years: list[YearProjection] = []
    for proj in held:
        cumulative += proj.net_profit - proj.additional_cost_in_year
        if proj.year == RESALE_YEAR:
            cumulative += net_resale
        strategy_years.append(replace(proj, cumulative_cash_flow=cumulative))

    total_investment = inputs.property_price + sum(
        (p.additional_cost_in_year for p in held), Decimal("0")
    )
    roi = cumulative / total_investment if total_investment > 0 else None

    return ResaleStrategyResult(
        gross_resale_value_before_costs=gross,
        sale_tax_amount=sale_tax,
        agency_commission_amount=commission,
        projected_resale_value=net_resale,
        final_cumulative_cash_flow_including_resale=cumulative,
        total_investment_through_year_5=total_investment,
        strategy_roi_percent=roi,
        yearly_projections=strategy_years,
    )
