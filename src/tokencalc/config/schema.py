"""Pydantic schema for configuration validation."""

import hashlib
import json
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field


class SystemParams(BaseModel):
    """Fixed economic constants of the protocol."""
    model_config = ConfigDict(frozen=True)

    cb_base: float = Field(default=0.05, ge=0, description="Base cashback fraction")
    alpha: float = Field(default=0.01, ge=0, description="Cashback degradation per period")
    beta: float = Field(default=0.3, ge=0, description="Quality factor coefficient")
    gamma: float = Field(default=0.5, ge=0, description="Diminishing returns coefficient")
    p0: float = Field(default=1.0, gt=0, description="Initial token price")
    k: float = Field(default=0.0001, ge=0, description="Bonding curve coefficient")
    discount_base: float = Field(default=0.1, ge=0, description="Base discount fraction")
    theta: float = Field(default=0.006, ge=0, description="Discount degradation coefficient")
    burn_cap: float = Field(default=1_000_000, gt=0, description="Market-wide burn cap per year")
    access_fee: float = Field(default=10.0, ge=0, description="Flat access fee in tokens")
    user_cap: float = Field(default=10_000, gt=0, description="Per-user token cap")
    t_launch: float = Field(default=0.0, description="Launch time")


class MarketAssumptions(BaseModel):
    """Heuristic stand-in for the market the calculator cannot observe.

    The global supply is approximated as `assumed_users` buyers who each
    minted as much as the modelled user.
    """
    model_config = ConfigDict(frozen=True)

    assumed_users: float = Field(default=100, ge=0, description="Similar users in the market")
    assumed_burn_rate: float = Field(
        default=0.3, ge=0, le=1,
        description="Fraction of minted supply burned market-wide per period"
    )
    initial_global_minted: float = Field(
        default=10_000, ge=0,
        description="Global supply before this user's activity"
    )


class UserInputs(BaseModel):
    """One buyer's purchase behaviour.

    No range constraints here: the engine computes with whatever it gets.
    Use `tokencalc.validation` to check or correct values first.
    """
    model_config = ConfigDict(frozen=True)

    purchase_price: float = Field(default=1000.0, description="Average price of one purchase")
    number_of_purchases: int = Field(default=5, description="Purchases in the session")
    period: float = Field(default=1.0, description="Time since launch, in periods")
    review_quality: float = Field(default=0.8, description="Review quality, 0..1")
    return_probability: float = Field(default=0.1, description="Return probability, 0..1")


class Config(BaseModel):
    """Complete calculator configuration."""
    model_config = ConfigDict(frozen=True)

    system: SystemParams = Field(default_factory=SystemParams)
    market: MarketAssumptions = Field(default_factory=MarketAssumptions)
    inputs: UserInputs = Field(default_factory=UserInputs)

    def compute_hash(self) -> str:
        """Compute config hash for reproducibility."""
        config_dict = self.model_dump()
        config_str = json.dumps(config_dict, sort_keys=True)
        return hashlib.sha256(config_str.encode()).hexdigest()[:16]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Config':
        """Create config from dictionary."""
        return cls(**data)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return self.model_dump()
