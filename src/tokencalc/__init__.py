"""B2C tokenomics calculator: mint, burn and bonding-curve price for a buyer."""

__version__ = "1.0.0"
