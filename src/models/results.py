from dataclasses import dataclass, field
from decimal import Decimal


@dataclass
class YearProjection:
    year: int

    # Operations
    revenue: Decimal = Decimal("0")
    avg_occupancy: Decimal = Decimal("0")
    avg_daily_rate: Decimal = Decimal("0")

    # Recurring costs (fraction of revenue)
    management_fee: Decimal = Decimal("0")
    utilities_maintenance: Decimal = Decimal("0")
    taxes: Decimal = Decimal("0")
    ota_fees: Decimal = Decimal("0")
    total_costs: Decimal = Decimal("0")

    net_profit: Decimal = Decimal("0")  # Operational, excludes capex
    net_yield_percent: Decimal | None = None  # net_profit / property_price

    # Capex and cash position
    additional_cost_in_year: Decimal = Decimal("0")
    cumulative_cash_flow: Decimal = Decimal("0")


@dataclass
class ResaleStrategyResult:
    """Exit after year 5: sell the operating business on an income multiple."""

    gross_resale_value_before_costs: Decimal = Decimal("0")
    sale_tax_amount: Decimal = Decimal("0")
    agency_commission_amount: Decimal = Decimal("0")
    projected_resale_value: Decimal = Decimal("0")  # Net of tax and commission

    final_cumulative_cash_flow_including_resale: Decimal = Decimal("0")
    total_investment_through_year_5: Decimal = Decimal("0")
    strategy_roi_percent: Decimal | None = None

    yearly_projections: list[YearProjection] = field(default_factory=list)


@dataclass
class AdditionalCostImpactDetail:
    event_id: str
    year: int
    description: str
    cost: Decimal = Decimal("0")
    operational_net_profit_year_prior: Decimal | None = None
    covered_by_prior_year_profit: bool | None = None
    operational_net_profit_year_of: Decimal | None = None
    cumulative_cash_flow_after_cost_in_year: Decimal = Decimal("0")


@dataclass
class CalculatedData:
    yearly_projections: list[YearProjection] = field(default_factory=list)

    # Break-even
    break_even_year: int | None = None
    payback_period_years: Decimal | None = None

    # First five years (or the whole lease if shorter)
    average_first_five_years_revenue: Decimal = Decimal("0")
    average_first_five_years_costs: Decimal = Decimal("0")
    average_first_five_years_income: Decimal = Decimal("0")
    average_annual_net_yield_percent: Decimal = Decimal("0")
    average_first_five_years_daily_rate: Decimal = Decimal("0")
    average_first_five_years_occupancy: Decimal = Decimal("0")

    average_overall_occupancy: Decimal = Decimal("0")

    resale_strategy: ResaleStrategyResult | None = None

    total_additional_costs: Decimal = Decimal("0")
    additional_cost_impacts: list[AdditionalCostImpactDetail] = field(default_factory=list)
