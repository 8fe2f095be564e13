"""Chart data series derived from the engine formulas."""

import math
from typing import Optional

import numpy as np
import pandas as pd

from ..config.schema import MarketAssumptions, SystemParams, UserInputs
from ..engine.burning import BURN_DESTROYED_SHARE, BURN_REDISTRIBUTED_SHARE
from ..engine.calculator import Results
from ..engine.formulas import cashback_percent, quality_factor, token_price
from ..engine.minting import mint_for_purchase, period_to_time


def emission_series(
    inputs: UserInputs,
    params: SystemParams,
    market: Optional[MarketAssumptions] = None,
    min_periods: int = 10,
) -> pd.DataFrame:
    """
    Cumulative user mint and token price per period.

    Every purchase lands in period floor(period). Within that period the
    global supply grows by `minted * assumed_users` per purchase, so the
    price reflects the whole cohort of similar buyers.

    Returns:
        DataFrame with columns period, minted, price
    """
    if market is None:
        market = MarketAssumptions()

    max_period = math.floor(max(inputs.period, min_periods))
    user_period = period_to_time(inputs.period)
    quality = quality_factor(inputs.return_probability, inputs.review_quality, params)

    cumulative_minted = 0.0
    global_total_minted = market.initial_global_minted
    rows = []
    for t in range(max_period + 1):
        if t == user_period:
            cashback = cashback_percent(t, params)
            for _ in range(inputs.number_of_purchases):
                minted, _, _ = mint_for_purchase(
                    inputs.purchase_price, cashback, quality,
                    cumulative_minted, global_total_minted, params
                )
                cumulative_minted += minted
                global_total_minted += minted * market.assumed_users

        rows.append({
            'period': t,
            'minted': cumulative_minted,
            'price': token_price(global_total_minted, params),
        })

    return pd.DataFrame(rows, columns=['period', 'minted', 'price'])


def bonding_curve_series(
    params: SystemParams,
    max_supply: float = 100_000,
    step: float = 1_000,
) -> pd.DataFrame:
    """Token price sampled along the bonding curve from 0 to `max_supply`."""
    supply = np.arange(0, max_supply + step / 2, step)
    price = token_price(supply, params)
    return pd.DataFrame({'total_minted': supply, 'price': price})


def burn_split_series(results: Results) -> pd.DataFrame:
    """Destroyed and redistributed slices of the session burn."""
    return pd.DataFrame([
        {'name': 'Destroyed', 'share': BURN_DESTROYED_SHARE, 'value': results.burn_destroyed},
        {'name': 'Redistributed to sellers', 'share': BURN_REDISTRIBUTED_SHARE,
         'value': results.burn_redistributed},
    ])
