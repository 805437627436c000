"""Gas oracle protocol: gas price source abstraction."""
from decimal import Decimal
from typing import Protocol


class GasOracle(Protocol):
    """Abstract interface for fetching the current gas price in gwei."""

    async def fetch_gas_price(self) -> Decimal: ...
