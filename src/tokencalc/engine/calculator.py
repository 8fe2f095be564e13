"""Result composition: one buyer session turned into mint, burn and price.

Flow:
1. Mint accumulator seeded with the initial global supply.
2. Global supply approximated as initial + user mint * assumed users;
   the token price is read off the bonding curve at that supply.
3. Market-wide burn approximated as user mint * burn rate * assumed users;
   it degrades the discount used by the burn accumulator.
4. The burn is split 70% destroyed / 30% redistributed to sellers.

The computation is pure: identical inputs give identical results, and
nothing is carried between calls.
"""

import logging
from dataclasses import asdict, dataclass
from functools import lru_cache
from typing import Any, Dict, Optional, Tuple

from ..config.schema import MarketAssumptions, SystemParams, UserInputs
from .burning import compute_burned_tokens, discount_in_currency, split_burn
from .formulas import cashback_percent, discount_percent, quality_factor, token_price
from .minting import PurchaseMint, compute_minted_tokens, period_to_time

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MintBreakdown:
    """Intermediate mint quantities."""
    cashback_percent: float
    quality_factor: float
    df_at_first_purchase: float
    df_at_last_purchase: float
    minted_per_purchase_average: float
    cap_usage: float  # total_minted_user / user_cap
    purchases: Tuple[PurchaseMint, ...]


@dataclass(frozen=True)
class BurnBreakdown:
    """Intermediate burn quantities."""
    discount_percent: float
    discount_per_purchase: float  # currency
    discount_total: float  # currency
    burn_for_discount: float  # tokens
    access_fee: float  # tokens
    burn_destroyed: float
    burn_redistributed: float


@dataclass(frozen=True)
class Interpretation:
    """Session figures expressed in currency at the post-session price."""
    total_spend: float
    minted_value: float
    burned_value: float
    net_value: float
    effective_value: float  # discounts received + value of minted tokens
    effective_return_percent: float  # effective_value / total_spend


@dataclass(frozen=True)
class Assumptions:
    """Market approximation inputs and the values derived from them."""
    assumed_users: float
    assumed_burn_rate: float
    initial_global_minted: float
    new_global_total_minted: float
    market_burned_this_year: float


@dataclass(frozen=True)
class Breakdown:
    """Diagnostics grouped by concern."""
    mint: MintBreakdown
    burn: BurnBreakdown
    interpretation: Interpretation
    assumptions: Assumptions


@dataclass(frozen=True)
class Results:
    """Aggregate figures for one session plus their breakdown."""
    total_minted_user: float
    token_price: float
    total_burned: float
    burn_destroyed: float
    burn_redistributed: float
    net_tokens: float  # may be negative
    breakdown: Breakdown

    def to_dict(self) -> Dict[str, Any]:
        """Convert results to a nested dictionary."""
        return asdict(self)


def approximate_global_supply(total_minted_user: float, market: MarketAssumptions) -> float:
    """Global supply assuming every similar user minted as much as this one."""
    return market.initial_global_minted + total_minted_user * market.assumed_users


def approximate_market_burn(total_minted_user: float, market: MarketAssumptions) -> float:
    """Market-wide burn this year under the same assumption."""
    return total_minted_user * market.assumed_burn_rate * market.assumed_users


def compute(
    inputs: UserInputs,
    params: SystemParams,
    market: Optional[MarketAssumptions] = None,
) -> Results:
    """
    Compute mint, burn and price for a buyer session.

    Args:
        inputs: Buyer inputs (not range-checked)
        params: System parameters
        market: Market approximation constants (defaults if omitted)

    Returns:
        Fully populated Results
    """
    if market is None:
        market = MarketAssumptions()

    mint = compute_minted_tokens(inputs, params, market.initial_global_minted)
    total_minted_user = mint.total_minted_user

    new_global_total_minted = approximate_global_supply(total_minted_user, market)
    price = token_price(new_global_total_minted, params)

    market_burned = approximate_market_burn(total_minted_user, market)
    total_burned = compute_burned_tokens(inputs, params, market_burned, price)
    burn_destroyed, burn_redistributed = split_burn(total_burned)
    net_tokens = total_minted_user - total_burned

    discount = discount_percent(market_burned, params)
    per_purchase_discount = discount_in_currency(inputs, discount)
    discount_total = per_purchase_discount * max(inputs.number_of_purchases, 0)

    total_spend = inputs.purchase_price * max(inputs.number_of_purchases, 0)
    minted_value = total_minted_user * price
    effective_value = discount_total + minted_value
    effective_return = effective_value / total_spend if total_spend > 0 else 0.0

    breakdown = Breakdown(
        mint=MintBreakdown(
            cashback_percent=cashback_percent(period_to_time(inputs.period), params),
            quality_factor=quality_factor(inputs.return_probability, inputs.review_quality, params),
            df_at_first_purchase=mint.df_at_first_purchase,
            df_at_last_purchase=mint.df_at_last_purchase,
            minted_per_purchase_average=mint.minted_per_purchase_average,
            cap_usage=total_minted_user / params.user_cap,
            purchases=mint.purchases,
        ),
        burn=BurnBreakdown(
            discount_percent=discount,
            discount_per_purchase=per_purchase_discount,
            discount_total=discount_total,
            burn_for_discount=total_burned - params.access_fee,
            access_fee=params.access_fee,
            burn_destroyed=burn_destroyed,
            burn_redistributed=burn_redistributed,
        ),
        interpretation=Interpretation(
            total_spend=total_spend,
            minted_value=minted_value,
            burned_value=total_burned * price,
            net_value=net_tokens * price,
            effective_value=effective_value,
            effective_return_percent=effective_return,
        ),
        assumptions=Assumptions(
            assumed_users=market.assumed_users,
            assumed_burn_rate=market.assumed_burn_rate,
            initial_global_minted=market.initial_global_minted,
            new_global_total_minted=new_global_total_minted,
            market_burned_this_year=market_burned,
        ),
    )

    logger.debug(
        "Computed session: minted=%.6f burned=%.6f price=%.4f",
        total_minted_user, total_burned, price
    )

    return Results(
        total_minted_user=total_minted_user,
        token_price=price,
        total_burned=total_burned,
        burn_destroyed=burn_destroyed,
        burn_redistributed=burn_redistributed,
        net_tokens=net_tokens,
        breakdown=breakdown,
    )


class TokenomicsEngine:
    """Calculator bound to one parameter set.

    Parameters are fixed at construction; `compute` is memoized on the
    (immutable, hashable) inputs so re-rendering with unchanged inputs is free.
    """

    def __init__(
        self,
        params: Optional[SystemParams] = None,
        market: Optional[MarketAssumptions] = None,
        cache_size: int = 128,
    ):
        """
        Initialize the engine.

        Args:
            params: System parameters (defaults if omitted)
            market: Market approximation constants (defaults if omitted)
            cache_size: Maximum number of memoized input sets
        """
        self.params = params if params is not None else SystemParams()
        self.market = market if market is not None else MarketAssumptions()
        self._compute_cached = lru_cache(maxsize=cache_size)(self._compute)

    def _compute(self, inputs: UserInputs) -> Results:
        logger.debug("Cache miss for %r", inputs)
        return compute(inputs, self.params, self.market)

    def compute(self, inputs: UserInputs) -> Results:
        """Compute results for `inputs`, reusing the previous answer if unchanged."""
        return self._compute_cached(inputs)

    def cache_info(self):
        """Memoization statistics (hits, misses, maxsize, currsize)."""
        return self._compute_cached.cache_info()

    def clear_cache(self) -> None:
        self._compute_cached.cache_clear()
