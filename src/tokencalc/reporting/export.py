"""Export functionality for CSV and JSON."""

import json
from typing import Optional

import pandas as pd

from ..config.schema import Config
from ..engine.calculator import Results


def export_csv(results: Results, filepath: str):
    """Export the per-purchase mint diagnostics to CSV."""
    data = []
    for purchase in results.breakdown.mint.purchases:
        data.append({
            'purchase': purchase.index + 1,
            'cashback_percent': purchase.cashback_percent,
            'quality_factor': purchase.quality_factor,
            'diminishing_factor': purchase.diminishing_factor,
            'token_price': purchase.token_price,
            'minted': purchase.minted,
        })

    df = pd.DataFrame(data, columns=[
        'purchase', 'cashback_percent', 'quality_factor',
        'diminishing_factor', 'token_price', 'minted',
    ])
    df['cumulative_minted'] = df['minted'].cumsum()
    df.to_csv(filepath, index=False)


def export_json(results: Results, filepath: str, config: Optional[Config] = None):
    """Export results (and optionally the config that produced them) to JSON."""
    export_data = {'results': results.to_dict()}
    if config is not None:
        export_data['config'] = config.to_dict()
        export_data['config_hash'] = config.compute_hash()

    with open(filepath, 'w') as f:
        json.dump(export_data, f, indent=2)
