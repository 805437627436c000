"""0x swap API quoter."""
from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any

from ..chains.networks import NetworkInfo
from ..models import SwapQuote
from .http import DEFAULT_TIMEOUT, fetch_json

logger = logging.getLogger(__name__)


def parse_quote(data: dict[str, Any]) -> SwapQuote:
    """Decode a 0x ``/swap/v1/quote`` response body."""
    return SwapQuote(
        price=Decimal(str(data["price"])),
        guaranteed_price=Decimal(str(data.get("guaranteedPrice", data["price"]))),
        buy_amount=int(data["buyAmount"]),
        sell_amount=int(data["sellAmount"]),
        gas=int(data.get("gas", 0)),
        calldata=data["data"],
    )


def _fraction(percentage: float | Decimal) -> str:
    """0x takes percentages as fractions: 2 (%) → "0.02"."""
    fraction = Decimal(str(percentage)) / 100
    return format(fraction.normalize(), "f")


class ZeroExQuoter:
    """Fetch swap quotes from the 0x API for one network."""

    def __init__(
        self,
        network: NetworkInfo,
        api_key: str = "",
        api_url: str | None = None,
        timeout: int = DEFAULT_TIMEOUT,
    ) -> None:
        self.network = network
        self.api_key = api_key
        self.api_url = api_url or network.zero_ex_api_url
        self.timeout = timeout

    async def fetch_quote(
        self,
        sell_token: str,
        buy_token: str,
        sell_amount: int,
        slippage_percentage: float,
        is_firm_quote: bool = True,
        fee_percentage: float = 0.0,
        fee_recipient: str = "",
        excluded_sources: list[str] | None = None,
    ) -> SwapQuote:
        params: dict[str, str] = {
            "sellToken": sell_token,
            "buyToken": buy_token,
            "sellAmount": str(sell_amount),
            "slippagePercentage": _fraction(slippage_percentage),
            "skipValidation": "true",
            "intentOnFilling": "true" if is_firm_quote else "false",
        }
        if excluded_sources:
            params["excludedSources"] = ",".join(excluded_sources)
        if fee_percentage and fee_recipient:
            params["feeRecipient"] = fee_recipient
            params["buyTokenPercentageFee"] = _fraction(fee_percentage)

        headers = {"0x-api-key": self.api_key} if self.api_key else None

        data = await fetch_json(self.api_url, params=params, headers=headers, timeout=self.timeout)
        quote = parse_quote(data)
        logger.info(
            "0x quote on %s: sell %s %s for %s %s",
            self.network.name, quote.sell_amount, sell_token, quote.buy_amount, buy_token,
        )
        return quote
