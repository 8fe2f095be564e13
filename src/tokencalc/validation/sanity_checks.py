"""Sanity checks for calculator inputs and parameters."""

from dataclasses import dataclass
from typing import List, Optional

from ..config.schema import Config, UserInputs
from ..engine.calculator import approximate_market_burn
from ..engine.formulas import token_price
from ..engine.minting import compute_minted_tokens
from .inputs import INPUT_FIELDS, validate_input


@dataclass
class ValidationWarning:
    """A validation warning with severity and message."""
    severity: str  # "warning" or "error"
    category: str  # "input" or "bounds"
    message: str
    details: Optional[str] = None


class SanityChecker:
    """Run sanity checks on configuration and buyer inputs."""

    # Horizon (in periods) within which cashback running out is worth flagging
    CASHBACK_HORIZON = 50
    # Price at the initial supply relative to P0 above which purchases mint almost nothing
    PRICE_INFLATION_LIMIT = 1_000.0

    def __init__(self, config: Config):
        """Initialize with configuration."""
        self.config = config

    def check_inputs(self, inputs: Optional[UserInputs] = None) -> List[ValidationWarning]:
        """
        Check buyer inputs against their allowed ranges.

        Args:
            inputs: Inputs to check (config defaults if omitted)

        Returns:
            List of validation warnings, one error per invalid field
        """
        if inputs is None:
            inputs = self.config.inputs

        warnings = []
        for name in INPUT_FIELDS:
            value = getattr(inputs, name)
            message = validate_input(name, value)
            if message is not None:
                warnings.append(ValidationWarning(
                    severity="error",
                    category="input",
                    message=message,
                    details=f"{name} = {value}"
                ))
        return warnings

    def check_params(self) -> List[ValidationWarning]:
        """
        Check system parameters and market assumptions for implausible values.

        Returns:
            List of validation warnings
        """
        warnings = []
        params = self.config.system
        market = self.config.market

        # Cashback reaches zero at t_launch + 1/alpha
        if params.alpha > 0:
            zero_at = params.t_launch + 1 / params.alpha
            if zero_at - params.t_launch < self.CASHBACK_HORIZON:
                warnings.append(ValidationWarning(
                    severity="warning",
                    category="bounds",
                    message=f"Cashback falls to zero at period {zero_at:.1f}",
                    details=f"alpha = {params.alpha}"
                ))

        # Discount reaches zero once market burn hits burn_cap / theta
        if params.theta > 1:
            warnings.append(ValidationWarning(
                severity="warning",
                category="bounds",
                message="Discount vanishes before market burn reaches the burn cap",
                details=f"theta = {params.theta}"
            ))

        # Market burn assumed for the configured buyer
        minted = compute_minted_tokens(self.config.inputs, params, market.initial_global_minted).total_minted_user
        assumed_burn = approximate_market_burn(minted, market)
        if params.theta * assumed_burn / params.burn_cap >= 1:
            warnings.append(ValidationWarning(
                severity="warning",
                category="bounds",
                message="Assumed market burn saturates the discount to zero",
                details=(
                    f"theta = {params.theta}, assumed burn = {assumed_burn:,.2f}, "
                    f"burn_cap = {params.burn_cap:,.0f}"
                )
            ))

        initial_price = token_price(market.initial_global_minted, params)
        if initial_price > params.p0 * self.PRICE_INFLATION_LIMIT:
            warnings.append(ValidationWarning(
                severity="warning",
                category="bounds",
                message=(
                    f"Token price at the initial global supply is "
                    f"{initial_price / params.p0:,.0f}x P0; purchases will mint very few tokens"
                ),
                details=(
                    f"k = {params.k}, initial_global_minted = "
                    f"{market.initial_global_minted:,.0f}"
                )
            ))

        if params.access_fee > params.user_cap:
            warnings.append(ValidationWarning(
                severity="warning",
                category="bounds",
                message="Access fee exceeds the per-user token cap",
                details=f"access_fee = {params.access_fee}, user_cap = {params.user_cap}"
            ))

        return warnings
