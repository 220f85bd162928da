"""Yield projection routes: the calculator's "calculate yield" entry point."""

import logging
from dataclasses import asdict

from fastapi import APIRouter, Depends, HTTPException

from src.api.deps import SequenceRegistry, get_sequence_registry
from src.api.schemas import (
    CalculateRequest,
    CalculationResponse,
    ProjectionInputSchema,
    ResetSequenceRequest,
)
from src.config import settings
from src.engine.projection import compute_projection
from src.models.results import CalculatedData

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/yield", tags=["yield"])


def _result_to_response(result: CalculatedData, session_id: str) -> CalculationResponse:
    """Convert engine CalculatedData to API response."""
    return CalculationResponse(session_id=session_id, **asdict(result))


@router.post("/calculate", response_model=CalculationResponse)
def calculate(
    req: CalculateRequest,
    registry: SequenceRegistry = Depends(get_sequence_registry),
):
    """Compute the yearly schedule and summary metrics for a scenario.

    The session's random draws are replayed unless reroll is set.
    """
    session_id = req.session_id or settings.default_session_id
    inputs = req.inputs.to_inputs()
    sequence = registry.get(session_id)

    result = compute_projection(inputs, sequence, reroll=req.reroll)
    if result is None:
        raise HTTPException(
            status_code=400,
            detail="Property price and lease years must both be greater than zero.",
        )

    logger.info(
        "Projection for session %s: %d years, break-even %s",
        session_id,
        inputs.lease_years,
        result.break_even_year,
    )
    return _result_to_response(result, session_id)


@router.post("/sequence/reset")
def reset_sequence(
    req: ResetSequenceRequest,
    registry: SequenceRegistry = Depends(get_sequence_registry),
):
    """Drop a session's random draws; the next calculation draws fresh ones."""
    session_id = req.session_id or settings.default_session_id
    existed = registry.reset(session_id)
    return {"session_id": session_id, "reset": existed}


@router.get("/defaults", response_model=ProjectionInputSchema)
def defaults():
    """Default calculator scenario (price left at zero for the user to fill)."""
    return ProjectionInputSchema(property_price=0)
