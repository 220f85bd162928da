from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class CostMode(Enum):
    PERCENT_OF_PRICE = "percent_of_price"
    FIXED_AMOUNT = "fixed_amount"


@dataclass(frozen=True)
class PercentOfPrice:
    """Cost expressed as a fraction of the property price."""
    percent: Decimal  # e.g. Decimal("0.02") for 2%


@dataclass(frozen=True)
class FixedAmount:
    """Cost expressed as a fixed cash amount."""
    amount: Decimal


@dataclass(frozen=True)
class AdditionalCostEvent:
    """One-time capital expenditure scheduled for a lease year.

    The amount is exactly one of PercentOfPrice or FixedAmount.
    """
    id: str
    year: int  # 1-indexed lease year
    description: str
    amount: PercentOfPrice | FixedAmount

    @property
    def mode(self) -> CostMode:
        if isinstance(self.amount, PercentOfPrice):
            return CostMode.PERCENT_OF_PRICE
        return CostMode.FIXED_AMOUNT

    def cost_for(self, property_price: Decimal) -> Decimal:
        if isinstance(self.amount, PercentOfPrice):
            return property_price * self.amount.percent
        return self.amount.amount


@dataclass(frozen=True)
class ProjectionInput:
    # Core
    property_price: Decimal
    lease_years: int = 25
    daily_rate_high: Decimal = Decimal("0")
    daily_rate_low: Decimal = Decimal("0")
    occupancy_high: Decimal = Decimal("0.85")
    occupancy_low: Decimal = Decimal("0.72")

    # Costs (fraction of revenue)
    management_fee_pct: Decimal = Decimal("0.15")
    utilities_maintenance_pct: Decimal = Decimal("0.10")
    taxes_pct: Decimal = Decimal("0.10")
    ota_fees_pct: Decimal = Decimal("0")

    # Dynamics
    apply_inflation: bool = False
    inflation_rate: Decimal = Decimal("0.03")
    fluctuate_occupancy: bool = False
    apply_growth_destabilization: bool = False
    first_year_revenue_penalty: Decimal = Decimal("0.15")
    annual_base_growth_trend: Decimal = Decimal("0.03")
    annual_random_fluctuation_max: Decimal = Decimal("0.15")

    # Hold 5 years, then sell the operating business
    enable_resale_strategy: bool = False
    resale_profit_multiplier: Decimal = Decimal("8")
    apply_sale_tax_on_resale: bool = True
    sale_tax_rate_on_resale: Decimal = Decimal("0.10")
    apply_agency_commission_on_resale: bool = True
    agency_commission_rate_on_resale: Decimal = Decimal("0.05")

    # Capital expenditures
    enable_additional_costs: bool = True
    additional_costs: tuple[AdditionalCostEvent, ...] = ()

    @property
    def average_daily_rate(self) -> Decimal:
        return (self.daily_rate_high + self.daily_rate_low) / 2

    @property
    def total_cost_ratio(self) -> Decimal:
        return (
            self.management_fee_pct
            + self.utilities_maintenance_pct
            + self.taxes_pct
            + self.ota_fees_pct
        )

    @property
    def active_additional_costs(self) -> tuple[AdditionalCostEvent, ...]:
        if not self.enable_additional_costs:
            return ()
        return self.additional_costs
