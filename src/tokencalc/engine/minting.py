"""Mint accumulator: tokens issued to a user over one purchase session.

All purchases of a session happen at the same time `t = floor(period)`, but
they are still processed one after another. Each purchase sees the
diminishing factor of the user's own cumulative mint and the bonding-curve
price of the global cumulative mint, both of which grow after it.
"""

import math
from dataclasses import dataclass
from functools import reduce
from typing import Tuple

from ..config.schema import SystemParams, UserInputs
from .formulas import cashback_percent, diminishing_factor, quality_factor, token_price


@dataclass(frozen=True)
class PurchaseMint:
    """Diagnostics for a single purchase."""
    index: int
    cashback_percent: float
    quality_factor: float
    diminishing_factor: float
    token_price: float
    minted: float


@dataclass(frozen=True)
class MintResult:
    """Outcome of the mint accumulator."""
    total_minted_user: float
    new_global_total_minted: float  # global_total_minted_before + user mint
    df_at_first_purchase: float
    df_at_last_purchase: float  # factor a hypothetical next purchase would get
    minted_per_purchase_average: float
    purchases: Tuple[PurchaseMint, ...] = ()


# (user_cumulative, global_cumulative, per-purchase diagnostics)
_MintAccumulator = Tuple[float, float, Tuple[PurchaseMint, ...]]


def period_to_time(period: float) -> int:
    """Integer time step used by every formula for a session."""
    return math.floor(period)


def mint_for_purchase(
    purchase_price: float,
    cashback: float,
    quality: float,
    user_cumulative: float,
    global_cumulative: float,
    params: SystemParams,
) -> Tuple[float, float, float]:
    """
    Mint for one purchase given the running totals.

    Returns:
        (minted, diminishing_factor, token_price)
    """
    df = diminishing_factor(user_cumulative, params)
    price = token_price(global_cumulative, params)
    return purchase_price * cashback * quality * df / price, df, price


def compute_minted_tokens(
    inputs: UserInputs,
    params: SystemParams,
    global_total_minted_before: float,
) -> MintResult:
    """
    Fold the purchases of a session into user and global mint totals.

    Args:
        inputs: Buyer inputs
        params: System parameters
        global_total_minted_before: Global supply before the session

    Returns:
        MintResult with totals and per-purchase diagnostics
    """
    t = period_to_time(inputs.period)
    cashback = cashback_percent(t, params)
    quality = quality_factor(inputs.return_probability, inputs.review_quality, params)

    def step(acc: _MintAccumulator, index: int) -> _MintAccumulator:
        user_cumulative, global_cumulative, purchases = acc
        minted, df, price = mint_for_purchase(
            inputs.purchase_price, cashback, quality,
            user_cumulative, global_cumulative, params
        )
        record = PurchaseMint(
            index=index,
            cashback_percent=cashback,
            quality_factor=quality,
            diminishing_factor=df,
            token_price=price,
            minted=minted,
        )
        return user_cumulative + minted, global_cumulative + minted, purchases + (record,)

    initial: _MintAccumulator = (0.0, global_total_minted_before, ())
    total_minted_user, global_total, purchases = reduce(
        step, range(inputs.number_of_purchases), initial
    )

    if inputs.number_of_purchases > 0:
        average = total_minted_user / inputs.number_of_purchases
    else:
        average = 0.0

    return MintResult(
        total_minted_user=total_minted_user,
        new_global_total_minted=global_total,
        df_at_first_purchase=diminishing_factor(0.0, params),
        df_at_last_purchase=diminishing_factor(total_minted_user, params),
        minted_per_purchase_average=average,
        purchases=purchases,
    )
