"""Tests for chart data series, figures and exports."""

import csv
import json
import sys
import os

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from tokencalc.config.loader import load_config
from tokencalc.config.schema import MarketAssumptions, SystemParams, UserInputs
from tokencalc.engine.calculator import compute
from tokencalc.engine.formulas import token_price
from tokencalc.reporting.charts import (
    create_bonding_curve_chart,
    create_burn_split_chart,
    create_emission_chart,
)
from tokencalc.reporting.export import export_csv, export_json
from tokencalc.reporting.series import bonding_curve_series, burn_split_series, emission_series

PARAMS = SystemParams()
MARKET = MarketAssumptions()
INPUTS = UserInputs()


class TestEmissionSeries:
    """Cumulative mint per period."""

    def test_shows_at_least_ten_periods(self):
        series = emission_series(INPUTS, PARAMS, MARKET)
        assert list(series.columns) == ['period', 'minted', 'price']
        assert list(series['period']) == list(range(11))

    def test_extends_to_user_period(self):
        series = emission_series(INPUTS.model_copy(update={'period': 12.7}), PARAMS, MARKET)
        assert series['period'].iloc[-1] == 12

    def test_mint_happens_at_user_period(self):
        series = emission_series(INPUTS.model_copy(update={'period': 3}), PARAMS, MARKET)
        assert (series.loc[series['period'] < 3, 'minted'] == 0).all()
        after = series.loc[series['period'] >= 3, 'minted']
        assert (after > 0).all()
        assert after.nunique() == 1

    def test_cohort_growth_lowers_mint(self):
        """Price grows with the whole cohort, so the series mints no more than the engine."""
        series = emission_series(INPUTS, PARAMS, MARKET)
        results = compute(INPUTS, PARAMS, MARKET)
        assert 0 < series['minted'].iloc[-1] <= results.total_minted_user

    def test_price_non_decreasing(self):
        series = emission_series(INPUTS, PARAMS, MARKET)
        assert series['price'].is_monotonic_increasing
        assert series['price'].iloc[0] == pytest.approx(10_001)


class TestBondingCurveSeries:

    def test_default_range(self):
        series = bonding_curve_series(PARAMS)
        assert len(series) == 101
        assert series['total_minted'].iloc[-1] == 100_000
        assert series['price'].iloc[0] == PARAMS.p0
        assert series['price'].iloc[-1] == pytest.approx(1 + 0.0001 * 100_000 ** 2)

    def test_matches_engine_price(self):
        series = bonding_curve_series(PARAMS, max_supply=20_000, step=5_000)
        for supply, price in zip(series['total_minted'], series['price']):
            assert price == pytest.approx(token_price(supply, PARAMS))

    def test_custom_range(self):
        series = bonding_curve_series(PARAMS, max_supply=10, step=5)
        assert list(series['total_minted']) == [0, 5, 10]


class TestBurnSplitSeries:

    def test_slices(self):
        results = compute(INPUTS, PARAMS)
        series = burn_split_series(results)
        assert list(series['share']) == [0.7, 0.3]
        assert series['value'].sum() == pytest.approx(results.total_burned)


class TestCharts:
    """Figures build from the series without errors."""

    def test_emission_chart(self):
        fig = create_emission_chart(emission_series(INPUTS, PARAMS))
        assert len(fig.data) == 1

    def test_bonding_curve_chart(self):
        fig = create_bonding_curve_chart(bonding_curve_series(PARAMS))
        assert len(fig.data[0].x) == 101

    def test_burn_split_chart(self):
        fig = create_burn_split_chart(burn_split_series(compute(INPUTS, PARAMS)))
        assert fig.data[0].type == 'pie'


class TestExport:

    def test_export_json(self, tmp_path):
        config = load_config()
        results = compute(config.inputs, config.system, config.market)
        path = tmp_path / "results.json"
        export_json(results, str(path), config)

        data = json.loads(path.read_text())
        assert data['config_hash'] == config.compute_hash()
        assert data['results']['total_burned'] == pytest.approx(results.total_burned)

    def test_export_json_without_config(self, tmp_path):
        path = tmp_path / "results.json"
        export_json(compute(INPUTS, PARAMS), str(path))
        assert 'config' not in json.loads(path.read_text())

    def test_export_csv(self, tmp_path):
        results = compute(INPUTS, PARAMS)
        path = tmp_path / "purchases.csv"
        export_csv(results, str(path))

        with open(path) as f:
            rows = list(csv.DictReader(f))
        assert len(rows) == 5
        assert float(rows[-1]['cumulative_minted']) == pytest.approx(results.total_minted_user)
