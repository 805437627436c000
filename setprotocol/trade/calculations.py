"""Pure trade-quote arithmetic: no I/O.

Everything is integer or ``Decimal`` math; floats never enter the pipeline.
Set "units" are component quantities per 10^18 of Set supply.
"""
from __future__ import annotations

import decimal
from decimal import ROUND_FLOOR, Decimal, InvalidOperation

from ..models import PositionState, SetDetails

PRECISE_UNIT = 10**18

# Wide enough for uint256 values scaled by 10^18
_CONTEXT = decimal.Context(prec=100)


def sanitize_amount(raw_amount: str, decimals: int) -> int:
    """Convert a human amount (".5") into base units (5 * 10^17).

    Raises ValueError for non-numeric input or more fractional digits than
    the token supports.
    """
    try:
        value = Decimal(str(raw_amount).strip())
    except InvalidOperation as e:
        raise ValueError(f"Invalid amount {raw_amount!r}") from e

    if not value.is_finite() or value <= 0:
        raise ValueError(f"Amount must be a positive number. Got {raw_amount!r}")

    scaled = value.scaleb(decimals, context=_CONTEXT)
    if scaled != scaled.to_integral_value(context=_CONTEXT):
        raise ValueError(f"Amount {raw_amount!r} has more than {decimals} decimal places")
    return int(scaled)


def max_trade_amount(set_details: SetDetails, token_address: str) -> int:
    """Total quantity of ``token_address`` the Set holds in its default position."""
    for position in set_details.positions:
        if (
            position.component.lower() == token_address.lower()
            and position.position_state == PositionState.DEFAULT
        ):
            return position.unit * set_details.total_supply // PRECISE_UNIT
    raise ValueError(f"Token {token_address} is not a default position of the Set")


def amount_to_units(amount: int, total_supply: int) -> int:
    if total_supply <= 0:
        raise ValueError("Set total supply must be positive")
    return amount * PRECISE_UNIT // total_supply


def units_to_amount(units: int, total_supply: int) -> int:
    return units * total_supply // PRECISE_UNIT


def min_receive_units(
    buy_amount: int,
    slippage_percentage: Decimal,
    fee_percentage: Decimal,
    total_supply: int,
) -> int:
    """Units the Set must at least receive after slippage and fee."""
    keep = (Decimal(100) - slippage_percentage - fee_percentage) / 100
    min_amount = _CONTEXT.multiply(Decimal(buy_amount), keep).to_integral_value(
        rounding=ROUND_FLOOR, context=_CONTEXT
    )
    return amount_to_units(int(min_amount), total_supply)


def apply_gas_buffer(gas: int, buffer_percentage: int) -> int:
    return gas * (100 + buffer_percentage) // 100


def token_display_amount(amount: int, decimals: int) -> Decimal:
    return Decimal(amount).scaleb(-decimals, context=_CONTEXT)


def usd_value(amount: int, decimals: int, price_usd: Decimal) -> Decimal:
    return _CONTEXT.multiply(token_display_amount(amount, decimals), price_usd)


def gas_cost_in_chain_currency(gas: int, gas_price_gwei: Decimal) -> Decimal:
    return _CONTEXT.multiply(Decimal(gas), gas_price_gwei).scaleb(-9, context=_CONTEXT)


def calculate_slippage(from_usd: Decimal, to_usd: Decimal) -> Decimal:
    """Percentage of the input's USD value lost in the output.

    Negative values mean the output is worth more than the input.
    """
    if from_usd == 0:
        return Decimal(0)
    return _CONTEXT.divide(from_usd - to_usd, from_usd) * 100


# ---------------------------------------------------------------------------
# Presentation
# ---------------------------------------------------------------------------


def format_decimal(value: Decimal) -> str:
    """Plain fixed-point string without trailing zeros: 1.000 → "1"."""
    normalized = value.normalize(context=_CONTEXT)
    return format(normalized, "f")


def format_usd(value: Decimal) -> str:
    """$1,597.20, or four significant digits below one cent ($0.002347)."""
    if value != 0 and abs(value) < Decimal("0.01"):
        exponent = Decimal(1).scaleb(value.adjusted() - 3)
        return "$" + format(value.quantize(exponent), "f")
    return f"${value:,.2f}"


def format_percentage(value: Decimal | float) -> str:
    return f"{Decimal(str(value)):.2f}%"


def format_chain_currency(value: Decimal, symbol: str) -> str:
    return f"{value:.7f} {symbol}"
