"""Economic simulation engine."""

from .burning import (
    BURN_DESTROYED_SHARE,
    BURN_REDISTRIBUTED_SHARE,
    compute_burned_tokens,
    split_burn,
)
from .calculator import (
    Assumptions,
    Breakdown,
    BurnBreakdown,
    Interpretation,
    MintBreakdown,
    Results,
    TokenomicsEngine,
    compute,
)
from .formulas import (
    cashback_percent,
    diminishing_factor,
    discount_percent,
    quality_factor,
    token_price,
)
from .minting import MintResult, PurchaseMint, compute_minted_tokens

__all__ = [
    "BURN_DESTROYED_SHARE",
    "BURN_REDISTRIBUTED_SHARE",
    "Assumptions",
    "Breakdown",
    "BurnBreakdown",
    "Interpretation",
    "MintBreakdown",
    "MintResult",
    "PurchaseMint",
    "Results",
    "TokenomicsEngine",
    "cashback_percent",
    "compute",
    "compute_burned_tokens",
    "compute_minted_tokens",
    "diminishing_factor",
    "discount_percent",
    "quality_factor",
    "split_burn",
    "token_price",
]
