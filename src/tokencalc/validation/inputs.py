"""Field-level checks and corrections for buyer inputs.

These belong to whoever drives the engine (a form, the CLI). The engine
itself accepts any value.
"""

import math
from typing import Optional

from ..config.schema import UserInputs

INPUT_FIELDS = (
    "purchase_price",
    "number_of_purchases",
    "period",
    "review_quality",
    "return_probability",
)


def _is_nan(value: float) -> bool:
    return isinstance(value, float) and math.isnan(value)


def _is_integer(value: float) -> bool:
    return float(value).is_integer()


def validate_input(field: str, value: float) -> Optional[str]:
    """
    Check a single input value.

    Args:
        field: One of INPUT_FIELDS
        value: Candidate value

    Returns:
        Human-readable error message, or None if the value is valid
    """
    if field == "purchase_price":
        if _is_nan(value) or value < 0:
            return "Purchase price must be a non-negative number"
    elif field == "number_of_purchases":
        if _is_nan(value) or math.isinf(value) or value < 1 or not _is_integer(value):
            return "Number of purchases must be an integer of at least 1"
    elif field == "period":
        if _is_nan(value) or value < 0:
            return "Period must be a non-negative number"
    elif field == "review_quality":
        if _is_nan(value) or value < 0 or value > 1:
            return "Review quality must be a number between 0 and 1"
    elif field == "return_probability":
        if _is_nan(value) or value < 0 or value > 1:
            return "Return probability must be a number between 0 and 1"
    else:
        raise ValueError(f"Unknown input field: {field}")
    return None


def correct_input(field: str, value: float) -> float:
    """
    Pull an invalid value back into range; valid values pass unchanged.

    NaN and +inf have no sensible correction and are returned as is.
    """
    if validate_input(field, value) is None or _is_nan(value):
        return value

    if field in ("review_quality", "return_probability"):
        return max(0.0, min(1.0, value))
    if field == "number_of_purchases":
        if math.isinf(value):
            return value if value > 0 else 1
        return max(1, math.floor(value))
    # purchase_price, period
    return max(0.0, value)


def correct_inputs(inputs: UserInputs) -> UserInputs:
    """Apply `correct_input` to every field."""
    corrected = {
        name: correct_input(name, getattr(inputs, name))
        for name in INPUT_FIELDS
    }
    return UserInputs(**corrected)
