"""Unit tests for the formula library."""

import math
import sys
import os

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from tokencalc.config.schema import SystemParams
from tokencalc.engine.formulas import (
    cashback_percent,
    diminishing_factor,
    discount_percent,
    quality_factor,
    token_price,
)

PARAMS = SystemParams()


class TestCashbackPercent:
    """Cashback decays linearly from launch and never goes negative."""

    def test_at_launch(self):
        assert cashback_percent(0, PARAMS) == PARAMS.cb_base

    def test_one_period_after_launch(self):
        assert cashback_percent(1, PARAMS) == 0.05 * (1 - 0.01 * 1)

    def test_decreasing_in_time(self):
        values = [cashback_percent(t, PARAMS) for t in range(0, 120, 10)]
        assert values == sorted(values, reverse=True)

    def test_clamped_at_zero(self):
        assert cashback_percent(100, PARAMS) == 0.0
        assert cashback_percent(1_000, PARAMS) == 0.0

    def test_before_launch_exceeds_base(self):
        """No upper clamp: a time before launch yields more than the base rate."""
        assert cashback_percent(-10, PARAMS) == pytest.approx(0.05 * 1.1)

    def test_respects_launch_time(self):
        params = SystemParams(t_launch=5)
        assert cashback_percent(5, params) == params.cb_base


class TestQualityFactor:
    """Quality factor spans [1, 1 + beta]."""

    def test_scenario_value(self):
        assert quality_factor(0.1, 0.8, PARAMS) == 1 + 0.3 * (1 - 0.1) * 0.8

    def test_baseline(self):
        assert quality_factor(1.0, 1.0, PARAMS) == 1.0
        assert quality_factor(0.0, 0.0, PARAMS) == 1.0

    def test_maximum(self):
        assert quality_factor(0.0, 1.0, PARAMS) == pytest.approx(1 + PARAMS.beta)


class TestDiminishingFactor:
    """Diminishing factor starts at 1 and decays with cumulative mint."""

    def test_zero_mint(self):
        assert diminishing_factor(0, PARAMS) == 1.0

    def test_at_user_cap(self):
        assert diminishing_factor(PARAMS.user_cap, PARAMS) == pytest.approx(math.exp(-PARAMS.gamma))

    def test_strictly_decreasing(self):
        values = [diminishing_factor(m, PARAMS) for m in (0, 100, 1_000, 10_000, 100_000)]
        assert all(a > b for a, b in zip(values, values[1:]))

    def test_tends_to_zero(self):
        assert diminishing_factor(1e7, PARAMS) < 1e-100


class TestTokenPrice:
    """Bonding curve is convex and bounded below by P0."""

    def test_zero_supply_is_p0(self):
        assert token_price(0, PARAMS) == PARAMS.p0

    def test_known_point(self):
        assert token_price(10_000, PARAMS) == pytest.approx(10_001.0)

    def test_non_decreasing(self):
        supplies = [0, 1, 10, 1_000, 50_000, 100_000]
        prices = [token_price(s, PARAMS) for s in supplies]
        assert prices == sorted(prices)
        assert all(p >= PARAMS.p0 for p in prices)

    def test_flat_when_k_is_zero(self):
        params = SystemParams(k=0)
        assert token_price(123_456, params) == params.p0


class TestDiscountPercent:
    """Discount decays with market burn and never goes negative."""

    def test_no_burn(self):
        assert discount_percent(0, PARAMS) == PARAMS.discount_base

    def test_at_burn_cap(self):
        assert discount_percent(PARAMS.burn_cap, PARAMS) == pytest.approx(0.1 * (1 - 0.006))

    def test_clamped_at_zero(self):
        huge = PARAMS.burn_cap / PARAMS.theta * 2
        assert discount_percent(huge, PARAMS) == 0.0
