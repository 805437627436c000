"""Price oracle protocol: token price feed abstraction."""
from decimal import Decimal
from typing import Protocol


class PriceOracle(Protocol):
    """Abstract interface for fetching USD prices keyed by lowercase address."""

    async def fetch_token_prices(self, token_addresses: list[str]) -> dict[str, Decimal]: ...
