"""Configuration schema and loaders."""

from .loader import config_from_dict, load_config
from .schema import Config, MarketAssumptions, SystemParams, UserInputs

__all__ = [
    "Config",
    "MarketAssumptions",
    "SystemParams",
    "UserInputs",
    "config_from_dict",
    "load_config",
]
