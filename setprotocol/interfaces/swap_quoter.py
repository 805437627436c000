"""Swap quoter protocol: DEX aggregator quote abstraction."""
from typing import Protocol

from ..models import SwapQuote


class SwapQuoter(Protocol):
    """Abstract interface for quoting a token swap."""

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
    ) -> SwapQuote: ...
