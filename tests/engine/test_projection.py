from dataclasses import replace
from decimal import Decimal

import pytest

from src.engine.projection import compute_projection, is_computable
from src.engine.random_sequence import RandomSequence


class TestInputGuard:
    @pytest.mark.parametrize("price", [Decimal("0"), Decimal("-1")])
    def test_non_positive_price(self, canonical_inputs, price):
        inputs = replace(canonical_inputs, property_price=price)
        assert not is_computable(inputs)
        assert compute_projection(inputs, RandomSequence()) is None

    @pytest.mark.parametrize("lease_years", [0, -5])
    def test_non_positive_lease(self, canonical_inputs, lease_years):
        inputs = replace(canonical_inputs, lease_years=lease_years)
        assert compute_projection(inputs, RandomSequence()) is None

    def test_rejected_input_leaves_sequence_alone(self, canonical_inputs):
        seq = RandomSequence(seed=1)
        draws = seq.get_or_regenerate(10)
        compute_projection(replace(canonical_inputs, property_price=Decimal("0")), seq, reroll=True)
        assert seq.draws is draws


class TestProjection:
    def test_one_entry_per_year(self, dynamic_inputs):
        result = compute_projection(dynamic_inputs, RandomSequence(seed=11))
        assert len(result.yearly_projections) == 10
        for i, proj in enumerate(result.yearly_projections):
            assert proj.year == i + 1

    def test_single_year_lease(self, canonical_inputs):
        result = compute_projection(replace(canonical_inputs, lease_years=1), RandomSequence())
        assert len(result.yearly_projections) == 1
        assert result.average_first_five_years_income == Decimal("23280.17")

    def test_canonical_golden_values(self, canonical_inputs):
        result = compute_projection(canonical_inputs, RandomSequence())
        year1 = result.yearly_projections[0]
        assert year1.revenue == Decimal("35815.63")
        assert year1.total_costs == Decimal("12535.46")
        assert year1.net_profit == Decimal("23280.17")
        assert year1.cumulative_cash_flow == Decimal("-276719.83")
        assert abs(year1.revenue - Decimal("35814")) < 5
        assert abs(year1.cumulative_cash_flow - Decimal("-276721")) < 5

    def test_cumulative_and_yield_invariants(self, dynamic_inputs, roof_replacement, pool_refit):
        inputs = replace(dynamic_inputs, additional_costs=(roof_replacement, pool_refit))
        result = compute_projection(inputs, RandomSequence(seed=5))
        prior = -inputs.property_price
        for proj in result.yearly_projections:
            assert proj.cumulative_cash_flow == prior + proj.net_profit - proj.additional_cost_in_year
            assert abs(proj.net_yield_percent - proj.net_profit / inputs.property_price) < Decimal("1e-12")
            prior = proj.cumulative_cash_flow

    def test_summary_fields(self, canonical_inputs):
        result = compute_projection(canonical_inputs, RandomSequence())
        assert result.break_even_year is None
        assert result.payback_period_years is None
        assert result.average_first_five_years_revenue == Decimal("35815.63")
        assert result.average_first_five_years_costs == Decimal("12535.46")
        assert result.average_first_five_years_daily_rate == Decimal("125.00")
        assert result.average_first_five_years_occupancy == Decimal("0.785")
        assert result.average_overall_occupancy == Decimal("0.785")
        assert result.average_annual_net_yield_percent == Decimal("23280.17") / Decimal("300000")
        assert result.resale_strategy is None
        assert result.total_additional_costs == Decimal("0")
        assert result.additional_cost_impacts == []

    def test_resale_and_cost_impacts_attached(self, resale_inputs, roof_replacement):
        inputs = replace(resale_inputs, additional_costs=(roof_replacement,))
        result = compute_projection(inputs, RandomSequence())
        assert result.resale_strategy is not None
        assert len(result.resale_strategy.yearly_projections) == 5
        assert result.total_additional_costs == Decimal("5000.00")
        assert result.additional_cost_impacts[0].covered_by_prior_year_profit is True


class TestReplay:
    def test_same_sequence_replays_identically(self, dynamic_inputs):
        seq = RandomSequence(seed=21)
        first = compute_projection(dynamic_inputs, seq)
        second = compute_projection(dynamic_inputs, seq)
        assert first == second

    def test_unseeded_sequence_replays_identically(self, dynamic_inputs):
        seq = RandomSequence()
        assert compute_projection(dynamic_inputs, seq) == compute_projection(dynamic_inputs, seq)

    def test_sequence_is_required(self, dynamic_inputs):
        with pytest.raises(TypeError):
            compute_projection(dynamic_inputs)

    def test_reroll_changes_schedule(self, dynamic_inputs):
        seq = RandomSequence(seed=21)
        first = compute_projection(dynamic_inputs, seq)
        rerolled = compute_projection(dynamic_inputs, seq, reroll=True)
        assert rerolled.yearly_projections != first.yearly_projections

    def test_reset_changes_schedule(self, dynamic_inputs):
        seq = RandomSequence(seed=21)
        first = compute_projection(dynamic_inputs, seq)
        seq.reset()
        assert compute_projection(dynamic_inputs, seq) != first

    def test_input_edits_keep_draws(self, dynamic_inputs):
        seq = RandomSequence(seed=21)
        compute_projection(dynamic_inputs, seq)
        draws = seq.draws
        compute_projection(replace(dynamic_inputs, daily_rate_high=Decimal("180")), seq)
        assert seq.draws is draws

    def test_lease_change_redraws(self, dynamic_inputs):
        seq = RandomSequence(seed=21)
        compute_projection(dynamic_inputs, seq)
        result = compute_projection(replace(dynamic_inputs, lease_years=12), seq)
        assert len(seq) == 12
        assert len(result.yearly_projections) == 12

    def test_static_scenario_ignores_draws(self, canonical_inputs):
        seq = RandomSequence(seed=21)
        first = compute_projection(canonical_inputs, seq)
        assert compute_projection(canonical_inputs, seq, reroll=True) == first
