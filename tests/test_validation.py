"""Tests for input validation, correction and parameter sanity checks."""

import sys
import os

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from tokencalc.config.loader import config_from_dict, load_config
from tokencalc.config.schema import UserInputs
from tokencalc.validation.inputs import correct_input, correct_inputs, validate_input
from tokencalc.validation.sanity_checks import SanityChecker, ValidationWarning


class TestValidateInput:
    """Field-level range checks."""

    @pytest.mark.parametrize("field,value", [
        ('purchase_price', 0),
        ('purchase_price', 1500.5),
        ('number_of_purchases', 1),
        ('number_of_purchases', 12),
        ('period', 0),
        ('period', 3.7),
        ('review_quality', 0),
        ('review_quality', 1),
        ('return_probability', 0.5),
    ])
    def test_valid_values(self, field, value):
        assert validate_input(field, value) is None

    @pytest.mark.parametrize("field,value", [
        ('purchase_price', -1),
        ('number_of_purchases', 0),
        ('number_of_purchases', 2.5),
        ('period', -0.1),
        ('review_quality', 1.01),
        ('return_probability', -0.2),
        ('return_probability', float('nan')),
        ('purchase_price', float('nan')),
    ])
    def test_invalid_values(self, field, value):
        message = validate_input(field, value)
        assert isinstance(message, str)
        assert message

    def test_unknown_field(self):
        with pytest.raises(ValueError):
            validate_input('coupon', 1)


class TestCorrectInput:
    """Correction applied when a field loses focus."""

    def test_probabilities_clamped(self):
        assert correct_input('review_quality', 1.5) == 1.0
        assert correct_input('return_probability', -0.3) == 0.0

    def test_purchases_floored_to_at_least_one(self):
        assert correct_input('number_of_purchases', 0) == 1
        assert correct_input('number_of_purchases', 3.8) == 3
        assert correct_input('number_of_purchases', -4) == 1

    def test_infinite_purchases(self):
        assert correct_input('number_of_purchases', float('-inf')) == 1
        assert correct_input('number_of_purchases', float('inf')) == float('inf')

    def test_non_negative_fields(self):
        assert correct_input('purchase_price', -100) == 0.0
        assert correct_input('period', -2) == 0.0

    def test_valid_value_unchanged(self):
        assert correct_input('period', 2.5) == 2.5

    def test_unknown_field(self):
        with pytest.raises(ValueError):
            correct_input('coupon', 1)

    def test_correct_inputs(self):
        corrected = correct_inputs(UserInputs(
            purchase_price=-1,
            number_of_purchases=0,
            period=-2,
            review_quality=2,
            return_probability=-0.5,
        ))
        assert corrected == UserInputs(
            purchase_price=0,
            number_of_purchases=1,
            period=0,
            review_quality=1,
            return_probability=0,
        )


class TestSanityChecker:
    """Config-level checks reported as ValidationWarning."""

    def test_default_inputs_are_valid(self):
        assert SanityChecker(load_config()).check_inputs() == []

    def test_invalid_inputs_reported_per_field(self):
        checker = SanityChecker(load_config())
        warnings = checker.check_inputs(UserInputs(review_quality=2, return_probability=-1))
        assert len(warnings) == 2
        assert all(isinstance(w, ValidationWarning) for w in warnings)
        assert all(w.severity == "error" and w.category == "input" for w in warnings)

    def test_default_price_warning(self):
        """Default k puts the price at the initial supply far above P0."""
        warnings = SanityChecker(load_config()).check_params()
        assert len(warnings) == 1
        assert "P0" in warnings[0].message

    def test_fast_cashback_decay_warning(self):
        config = config_from_dict({'system': {'alpha': 0.05}, 'market': {'initial_global_minted': 0}})
        warnings = SanityChecker(config).check_params()
        assert len(warnings) == 1
        assert "Cashback" in warnings[0].message

    def test_theta_warning(self):
        config = config_from_dict({'system': {'theta': 2.0}, 'market': {'initial_global_minted': 0}})
        messages = [w.message for w in SanityChecker(config).check_params()]
        assert any("Discount" in m for m in messages)

    def test_saturated_discount_warning(self):
        """Assumed market burn above burn_cap / theta leaves no discount."""
        config = config_from_dict({
            'system': {'theta': 1.0, 'burn_cap': 0.1},
            'market': {'initial_global_minted': 0},
        })
        messages = [w.message for w in SanityChecker(config).check_params()]
        assert any("saturates" in m for m in messages)

    def test_access_fee_warning(self):
        config = config_from_dict({
            'system': {'access_fee': 20_000},
            'market': {'initial_global_minted': 0},
        })
        messages = [w.message for w in SanityChecker(config).check_params()]
        assert any("Access fee" in m for m in messages)
