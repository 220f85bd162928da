"""Pydantic schemas for API request/response models."""

import logging
from decimal import Decimal
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, model_validator

from src.config import settings
from src.models.projection_input import (
    AdditionalCostEvent,
    CostMode,
    FixedAmount,
    PercentOfPrice,
    ProjectionInput,
)

logger = logging.getLogger(__name__)


# ---- Scenario record ----

class AdditionalCostEventSchema(BaseModel):
    id: str = Field(default_factory=lambda: uuid4().hex)
    year: int
    description: str = ""
    mode: CostMode
    amount: Decimal = Field(..., description="Fraction of price (percent_of_price) or cash amount")

    def to_event(self) -> AdditionalCostEvent:
        if self.mode is CostMode.PERCENT_OF_PRICE:
            amount = PercentOfPrice(percent=self.amount)
        else:
            amount = FixedAmount(amount=self.amount)
        return AdditionalCostEvent(
            id=self.id, year=self.year, description=self.description, amount=amount
        )

    @classmethod
    def from_event(cls, event: AdditionalCostEvent) -> "AdditionalCostEventSchema":
        if isinstance(event.amount, PercentOfPrice):
            amount = event.amount.percent
        else:
            amount = event.amount.amount
        return cls(
            id=event.id,
            year=event.year,
            description=event.description,
            mode=event.mode,
            amount=amount,
        )


class ProjectionInputSchema(BaseModel):
    """Flat scenario record, as saved and as posted by the calculator form."""

    # Core
    property_price: Decimal = Field(..., description="Purchase price in USD")
    lease_years: int = Field(25, le=settings.max_lease_years)
    daily_rate_high: Decimal = Decimal("0")
    daily_rate_low: Decimal = Decimal("0")
    occupancy_high: Decimal = Field(Decimal("0.85"), ge=0, le=1)
    occupancy_low: Decimal = Field(Decimal("0.72"), ge=0, le=1)

    # Costs (fraction of revenue)
    management_fee_pct: Decimal = Decimal("0.15")
    utilities_maintenance_pct: Decimal = Decimal("0.10")
    taxes_pct: Decimal = Decimal("0.10")
    ota_fees_pct: Decimal = Decimal("0")

    # Dynamics
    apply_inflation: bool = True
    inflation_rate: Decimal = Decimal("0.03")
    fluctuate_occupancy: bool = True
    apply_growth_destabilization: bool = True
    first_year_revenue_penalty: Decimal = Decimal("0.15")
    annual_base_growth_trend: Decimal = Decimal("0.03")
    annual_random_fluctuation_max: Decimal = Decimal("0.15")

    # Resale strategy
    enable_resale_strategy: bool = True
    resale_profit_multiplier: Decimal = Decimal("8")
    apply_sale_tax_on_resale: bool = True
    sale_tax_rate_on_resale: Decimal = Decimal("0.10")
    apply_agency_commission_on_resale: bool = True
    agency_commission_rate_on_resale: Decimal = Decimal("0.05")

    # Additional costs
    enable_additional_costs: bool = False
    additional_costs: list[AdditionalCostEventSchema] = Field(default_factory=list)

    @model_validator(mode="after")
    def clamp_cost_years(self) -> "ProjectionInputSchema":
        """Pull event years into [1, lease_years]."""
        if self.lease_years <= 0:
            return self
        for event in self.additional_costs:
            clamped = max(1, min(event.year, self.lease_years))
            if clamped != event.year:
                logger.warning(
                    "Cost event %s year %d outside lease, clamped to %d",
                    event.id, event.year, clamped,
                )
                event.year = clamped
        return self

    def to_inputs(self) -> ProjectionInput:
        fields = self.model_dump(exclude={"additional_costs"})
        return ProjectionInput(
            **fields,
            additional_costs=tuple(e.to_event() for e in self.additional_costs),
        )

    @classmethod
    def from_inputs(cls, inputs: ProjectionInput) -> "ProjectionInputSchema":
        fields = {
            name: getattr(inputs, name)
            for name in cls.model_fields
            if name != "additional_costs"
        }
        return cls(
            **fields,
            additional_costs=[
                AdditionalCostEventSchema.from_event(e) for e in inputs.additional_costs
            ],
        )


# ---- Request schemas ----

class CalculateRequest(BaseModel):
    session_id: str | None = Field(None, description="Random sequence owner; defaults to a shared session")
    reroll: bool = False
    inputs: ProjectionInputSchema


class ResetSequenceRequest(BaseModel):
    session_id: str | None = None


# ---- Response schemas ----

class YearProjectionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    year: int
    revenue: Decimal
    avg_occupancy: Decimal
    avg_daily_rate: Decimal
    management_fee: Decimal
    utilities_maintenance: Decimal
    taxes: Decimal
    ota_fees: Decimal
    total_costs: Decimal
    net_profit: Decimal
    net_yield_percent: Decimal | None = None
    additional_cost_in_year: Decimal
    cumulative_cash_flow: Decimal


class ResaleStrategyResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    gross_resale_value_before_costs: Decimal
    sale_tax_amount: Decimal
    agency_commission_amount: Decimal
    projected_resale_value: Decimal
    final_cumulative_cash_flow_including_resale: Decimal
    total_investment_through_year_5: Decimal
    strategy_roi_percent: Decimal | None = None
    yearly_projections: list[YearProjectionResponse]


class AdditionalCostImpactResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    event_id: str
    year: int
    description: str
    cost: Decimal
    operational_net_profit_year_prior: Decimal | None = None
    covered_by_prior_year_profit: bool | None = None
    operational_net_profit_year_of: Decimal | None = None
    cumulative_cash_flow_after_cost_in_year: Decimal


class CalculationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    session_id: str
    yearly_projections: list[YearProjectionResponse]
    break_even_year: int | None = None
    payback_period_years: Decimal | None = None
    average_first_five_years_revenue: Decimal
    average_first_five_years_costs: Decimal
    average_first_five_years_income: Decimal
    average_annual_net_yield_percent: Decimal
    average_first_five_years_daily_rate: Decimal
    average_first_five_years_occupancy: Decimal
    average_overall_occupancy: Decimal
    resale_strategy: ResaleStrategyResponse | None = None
    total_additional_costs: Decimal
    additional_cost_impacts: list[AdditionalCostImpactResponse]
