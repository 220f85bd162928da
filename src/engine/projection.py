"""Yield projection orchestrator: composes the engine sub-modules.

Pure computation apart from the caller-owned RandomSequence, which may be
regenerated. ProjectionInput in, CalculatedData (or None) out.
"""

import logging

from src.models.projection_input import ProjectionInput
from src.models.results import CalculatedData

from src.engine.random_sequence import RandomSequence
from src.engine.operations import build_schedule
from src.engine.aggregates import (
    break_even_year,
    payback_period,
    first_years,
    average_of,
    average_annual_net_yield,
)
from src.engine.resale import evaluate_resale_strategy
from src.engine.cost_impact import analyze_additional_costs, total_additional_costs

logger = logging.getLogger(__name__)


def is_computable(inputs: ProjectionInput) -> bool:
    """A projection needs a positive price and at least one lease year."""
    return inputs.property_price > 0 and inputs.lease_years > 0


def compute_projection(
    inputs: ProjectionInput,
    sequence: RandomSequence,
    reroll: bool = False,
) -> CalculatedData | None:
    """Run the full yield projection.

    Returns None for a non-positive price or lease term. The caller owns
    the sequence: pass the same one across calls to replay identical random
    draws. reroll=True draws a new sequence first.
    """
    if not is_computable(inputs):
        logger.debug(
            "Skipping projection: price=%s lease_years=%s",
            inputs.property_price,
            inputs.lease_years,
        )
        return None

    draws = sequence.get_or_regenerate(inputs.lease_years, reroll=reroll)

    projections = build_schedule(inputs, draws)

    # Break-even
    be_year = break_even_year(projections)
    payback = payback_period(projections, inputs.property_price)

    # Averages
    early = first_years(projections)
    avg_income = average_of(early, "net_profit")

    resale = evaluate_resale_strategy(inputs, projections, avg_income)
    impacts = analyze_additional_costs(inputs, projections)

    return CalculatedData(
        yearly_projections=projections,
        break_even_year=be_year,
        payback_period_years=payback,
        average_first_five_years_revenue=average_of(early, "revenue"),
        average_first_five_years_costs=average_of(early, "total_costs"),
        average_first_five_years_income=avg_income,
        average_annual_net_yield_percent=average_annual_net_yield(
            avg_income, inputs.property_price
        ),
        average_first_five_years_daily_rate=average_of(early, "avg_daily_rate"),
        average_first_five_years_occupancy=average_of(early, "avg_occupancy"),
        average_overall_occupancy=average_of(projections, "avg_occupancy"),
        resale_strategy=resale,
        total_additional_costs=total_additional_costs(inputs),
        additional_cost_impacts=impacts,
    )
