"""How each scheduled capital expenditure lands against operating profit.

Pure functions. No I/O.
"""

from decimal import Decimal, ROUND_HALF_UP

from src.models.projection_input import ProjectionInput
from src.models.results import AdditionalCostImpactDetail, YearProjection

TWO_PLACES = Decimal("0.01")


def _projection_for(projections: list[YearProjection], year: int) -> YearProjection | None:
    if 1 <= year <= len(projections):
        return projections[year - 1]
    return None


def analyze_additional_costs(
    inputs: ProjectionInput, projections: list[YearProjection]
) -> list[AdditionalCostImpactDetail]:
    """One impact detail per configured event, in input order."""
    details: list[AdditionalCostImpactDetail] = []

    for event in inputs.active_additional_costs:
        cost = event.cost_for(inputs.property_price).quantize(TWO_PLACES, ROUND_HALF_UP)
        prior = _projection_for(projections, event.year - 1)
        current = _projection_for(projections, event.year)

        if current is not None:
            cumulative_after = current.cumulative_cash_flow
        else:
            cumulative_after = -inputs.property_price - cost

        details.append(
            AdditionalCostImpactDetail(
                event_id=event.id,
                year=event.year,
                description=event.description,
                cost=cost,
                operational_net_profit_year_prior=prior.net_profit if prior else None,
                covered_by_prior_year_profit=prior.net_profit >= cost if prior else None,
                operational_net_profit_year_of=current.net_profit if current else None,
                cumulative_cash_flow_after_cost_in_year=cumulative_after,
            )
        )

    return details


def total_additional_costs(inputs: ProjectionInput) -> Decimal:
    return sum(
        (
            event.cost_for(inputs.property_price).quantize(TWO_PLACES, ROUND_HALF_UP)
            for event in inputs.active_additional_costs
        ),
        Decimal("0"),
    )
