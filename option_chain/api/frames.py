"""Tabular views of an option chain."""

from typing import TYPE_CHECKING, Sequence

import pandas as pd

from option_chain.utils.types import OptionChain

if TYPE_CHECKING:
    from option_chain.api.response import OptionChainResponse

COLUMNS = ["asset_price", "strike", "days_to_expiry", "price"]


def chain_to_frame(chain: OptionChain, asset_prices: Sequence[float]) -> pd.DataFrame:
    """
    Flatten a nested chain into one row per grid point.

    Args:
        chain: Result of OptionChainCalculator.compute_option_chain
        asset_prices: Asset price of each outer level, in chain order

    Returns:
        DataFrame with columns asset_price, strike, days_to_expiry, price,
        rows in grid order
    """
    if len(asset_prices) != len(chain):
        raise ValueError(
            f"Expected {len(chain)} asset prices for the chain, got {len(asset_prices)}"
        )

    rows = [
        (asset_price, position.strike, position.days_to_expiry, position.price)
        for asset_price, positions_per_strike in zip(asset_prices, chain)
        for positions in positions_per_strike
        for position in positions
    ]
    return pd.DataFrame(rows, columns=COLUMNS)


def pivot_strike_by_expiry(frame: pd.DataFrame, asset_price: float) -> pd.DataFrame:
    """
    Strike × days-to-expiry price table for one asset price.

    Strikes run down the index ascending; expiry columns keep the chain's
    descending order.
    """
    subset = frame[frame["asset_price"] == asset_price]
    if subset.empty:
        raise ValueError(f"No rows for asset price {asset_price}")

    table = subset.pivot(index="strike", columns="days_to_expiry", values="price")
    expiries = list(dict.fromkeys(subset["days_to_expiry"]))
    return table[expiries]


def response_to_frame(response: "OptionChainResponse") -> pd.DataFrame:
    """Flatten a labeled, rounded chain response like chain_to_frame."""
    rows = [
        (level.asset_price, strike.strike_price, expiry.days_to_expiry, expiry.price)
        for level in response.values
        for strike in level.strike_expiry_prices
        for expiry in strike.expiry_prices
    ]
    return pd.DataFrame(rows, columns=COLUMNS)
