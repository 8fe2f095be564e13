"""Formula library: cashback, quality, diminishing returns, price, discount.

Every function is total over its documented domain and degrades by clamping
rather than failing:

- CB%(t)       = max(0, CB_base * (1 - alpha * (t - t_launch)))
- QF           = 1 + beta * (1 - return_probability) * review_quality
- DF(m)        = exp(-gamma * m / user_cap)
- P(S)         = P0 * (1 + k * S^2)
- discount%(B) = max(0, discount_base * (1 - theta * B / burn_cap))
"""

import math

from ..config.schema import SystemParams


def cashback_percent(t: float, params: SystemParams) -> float:
    """Cashback fraction at time `t`, decaying linearly from launch."""
    return max(0.0, params.cb_base * (1 - params.alpha * (t - params.t_launch)))


def quality_factor(return_probability: float, review_quality: float, params: SystemParams) -> float:
    """Reward multiplier in [1, 1 + beta] for good reviews and few returns."""
    return 1 + params.beta * (1 - return_probability) * review_quality


def diminishing_factor(total_minted_user: float, params: SystemParams) -> float:
    """Anti-whale multiplier; 1 at zero mint, tends to 0 as the user's mint grows."""
    return math.exp(-params.gamma * (total_minted_user / params.user_cap))


def token_price(total_minted: float, params: SystemParams) -> float:
    """Bonding curve price for a global supply of `total_minted` tokens."""
    return params.p0 * (1 + params.k * total_minted ** 2)


def discount_percent(burned_year: float, params: SystemParams) -> float:
    """Discount fraction, decaying as market-wide burn approaches the cap."""
    return max(0.0, params.discount_base * (1 - params.theta * (burned_year / params.burn_cap)))
