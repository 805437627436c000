"""Trade-quote aggregation."""
from .quoter import TradeQuoter

__all__ = ["TradeQuoter"]
