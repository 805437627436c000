"""Protocol interfaces for the quote aggregator's data sources."""
from .gas_oracle import GasOracle
from .price_oracle import PriceOracle
from .swap_quoter import SwapQuoter
from .token_list import TokenListProvider

__all__ = ["GasOracle", "PriceOracle", "SwapQuoter", "TokenListProvider"]
