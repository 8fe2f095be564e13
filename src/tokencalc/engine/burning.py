"""Burn accumulator: tokens a user spends on discounts and access.

Discounts are redeemed at a single token price snapshot taken after the
session, so the price is not recomputed per purchase. The access fee is
denominated in tokens and added once per session.
"""

from ..config.schema import SystemParams, UserInputs
from .formulas import discount_percent

# Share of every burn that is destroyed; the rest goes to sellers
BURN_DESTROYED_SHARE = 0.7
BURN_REDISTRIBUTED_SHARE = 0.3


def discount_in_currency(inputs: UserInputs, discount: float) -> float:
    """Currency value of the discount on one purchase."""
    return inputs.purchase_price * discount


def compute_discount_burn(
    inputs: UserInputs,
    params: SystemParams,
    market_burned_this_year: float,
    token_price: float,
) -> float:
    """Tokens burned for discounts over all purchases, excluding the access fee."""
    discount = discount_percent(market_burned_this_year, params)
    total_burned = 0.0
    for _ in range(inputs.number_of_purchases):
        total_burned += discount_in_currency(inputs, discount) / token_price
    return total_burned


def compute_burned_tokens(
    inputs: UserInputs,
    params: SystemParams,
    market_burned_this_year: float,
    token_price: float,
) -> float:
    """
    Total tokens burned in a session.

    Args:
        inputs: Buyer inputs
        params: System parameters
        market_burned_this_year: Market-wide burn proxy feeding the discount decay
        token_price: Post-session token price used for every purchase

    Returns:
        Discount burn plus the flat access fee
    """
    return compute_discount_burn(inputs, params, market_burned_this_year, token_price) + params.access_fee


def split_burn(total_burned: float) -> tuple[float, float]:
    """Split a burn into (destroyed, redistributed)."""
    return total_burned * BURN_DESTROYED_SHARE, total_burned * BURN_REDISTRIBUTED_SHARE
