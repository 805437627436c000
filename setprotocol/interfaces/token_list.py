"""Token list protocol: token metadata registry abstraction."""
from typing import Protocol

from ..models import TokenInfo


class TokenListProvider(Protocol):
    """Abstract interface for fetching a chain's token list."""

    async def fetch_token_list(self) -> list[TokenInfo]: ...
