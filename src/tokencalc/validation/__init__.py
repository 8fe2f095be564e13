"""Input validation and parameter sanity checks."""

from .inputs import INPUT_FIELDS, correct_input, correct_inputs, validate_input
from .sanity_checks import SanityChecker, ValidationWarning

__all__ = [
    "INPUT_FIELDS",
    "SanityChecker",
    "ValidationWarning",
    "correct_input",
    "correct_inputs",
    "validate_input",
]
