"""
Command-line interface for the option chain pricer.

This CLI provides access to:
- Option chain pricing over asset × strike × days-to-expiry grids
- Single-point Black-Scholes pricing through the same engine
"""

import json
import logging

import click

from option_chain.api.frames import pivot_strike_by_expiry, response_to_frame
from option_chain.api.response import build_option_chain_response, round_price
from option_chain.core.engine import OptionChainCalculator
from option_chain.utils.constants import PRICE_DECIMALS
from option_chain.utils.exceptions import OptionChainError
from option_chain.utils.types import ValueSpan

OPTION_TYPES = click.Choice(["Call", "Put"], case_sensitive=False)


@click.group()
@click.version_option(version="1.0.0")
@click.option("--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose):
    """Option Chain Pricer - Black-Scholes prices across asset, strike and expiry grids."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


@cli.command()
@click.option("--asset-name", "-n", default="ASSET", help="Name of the asset")
@click.option("--type", "-t", "option_type", type=OPTION_TYPES, default="Call")
@click.option("--asset-low", type=float, required=True, help="Low end of asset price range")
@click.option("--asset-high", type=float, required=True, help="High end of asset price range")
@click.option("--asset-step", type=float, default=0.0, help="Step for asset price range")
@click.option("--strike-low", type=float, required=True, help="Low end of strike price range")
@click.option("--strike-high", type=float, required=True, help="High end of strike price range")
@click.option("--strike-step", type=float, default=0.0, help="Step for strike price range")
@click.option("--days-low", type=float, required=True, help="Low end of days to expiry range")
@click.option("--days-high", type=float, required=True, help="High end of days to expiry range")
@click.option("--days-step", type=float, default=0.0, help="Step for days to expiry range")
@click.option("--rate", "-r", type=float, required=True, help="Risk-free rate")
@click.option("--vol", "-v", type=float, required=True, help="Volatility (annualized)")
@click.option("--decimals", type=int, default=PRICE_DECIMALS, help="Decimal places in prices")
@click.option("--json", "as_json", is_flag=True, help="Print the response as JSON")
def chain(
    asset_name, option_type,
    asset_low, asset_high, asset_step,
    strike_low, strike_high, strike_step,
    days_low, days_high, days_step,
    rate, vol, decimals, as_json,
):
    """Calculate an option chain using Black-Scholes."""
    try:
        response = build_option_chain_response(
            asset_name,
            option_type,
            ValueSpan(asset_low, asset_high, asset_step),
            ValueSpan(strike_low, strike_high, strike_step),
            ValueSpan(days_low, days_high, days_step),
            risk_free_rate=rate,
            volatility=vol,
            decimals=decimals,
        )
    except OptionChainError as e:
        click.echo(f"\nError: {e}", err=True)
        raise SystemExit(1)

    if as_json:
        click.echo(json.dumps(response.to_dict(), indent=2))
        return

    frame = response_to_frame(response)

    click.echo(f"\n{response.request.option_type} chain for {asset_name}")
    for level in response.values:
        click.echo(f"\nAsset price {level.asset_price:g} (rows: strike, columns: days to expiry)")
        click.echo(pivot_strike_by_expiry(frame, level.asset_price).to_string())


@cli.command()
@click.option("--spot", "-S", type=float, required=True, help="Spot price")
@click.option("--strike", "-K", type=float, required=True, help="Strike price")
@click.option("--days", "-d", type=float, required=True, help="Days to expiry")
@click.option("--rate", "-r", type=float, required=True, help="Risk-free rate")
@click.option("--vol", "-v", type=float, required=True, help="Volatility (annualized)")
@click.option("--type", "-t", "option_type", type=OPTION_TYPES, default="Call")
def price(spot, strike, days, rate, vol, option_type):
    """Calculate a single option price using Black-Scholes."""
    try:
        calculator = OptionChainCalculator(option_type, vol, rate, days)
        position = calculator.price(spot, strike, days)
    except OptionChainError as e:
        click.echo(f"\nError: {e}", err=True)
        raise SystemExit(1)

    click.echo(
        f"\n{calculator.option_type.value} Option Price: ${round_price(position.price, 4):.4f}"
    )


if __name__ == "__main__":
    cli()
