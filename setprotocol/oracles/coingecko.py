"""CoinGecko price oracle and token list."""
import logging
from decimal import Decimal

from ..chains.networks import NetworkInfo
from ..models import TokenInfo
from .http import DEFAULT_TIMEOUT, fetch_json

logger = logging.getLogger(__name__)

COINGECKO_API_URL = "https://api.coingecko.com/api/v3"
COINGECKO_TOKEN_LIST_URL = "https://tokens.coingecko.com/uniswap/all.json"


def parse_token_list(raw_tokens: list[dict], chain_id: int | None = None) -> list[TokenInfo]:
    """Convert Uniswap-format token list entries into TokenInfo models."""
    tokens: list[TokenInfo] = []
    for raw in raw_tokens:
        tokens.append(
            TokenInfo(
                chain_id=int(chain_id if chain_id is not None else raw.get("chainId", 1)),
                address=raw["address"].lower(),
                name=raw.get("name", ""),
                symbol=raw.get("symbol", ""),
                decimals=int(raw.get("decimals", 18)),
                logo_uri=raw.get("logoURI") or None,
            )
        )
    return tokens


class CoinGeckoOracle:
    """Fetch USD token prices and the CoinGecko Uniswap token list."""

    def __init__(
        self,
        network: NetworkInfo,
        api_url: str = COINGECKO_API_URL,
        token_list_url: str = COINGECKO_TOKEN_LIST_URL,
        timeout: int = DEFAULT_TIMEOUT,
    ) -> None:
        self.network = network
        self.api_url = api_url.rstrip("/")
        self.token_list_url = token_list_url
        self.timeout = timeout

    async def fetch_token_prices(self, token_addresses: list[str]) -> dict[str, Decimal]:
        """Return USD prices keyed by lowercase token address.

        Tokens CoinGecko does not know are absent from the result.
        """
        if not token_addresses:
            return {}

        addresses = [address.lower() for address in token_addresses]
        url = f"{self.api_url}/simple/token_price/{self.network.coingecko_platform}"
        params = {
            "contract_addresses": ",".join(addresses),
            "vs_currencies": ",".join("usd" for _ in addresses),
        }

        data = await fetch_json(url, params=params, timeout=self.timeout)

        prices: dict[str, Decimal] = {}
        for address, quote in data.items():
            if "usd" in quote:
                prices[address.lower()] = Decimal(str(quote["usd"]))

        logger.info("Fetched %d token prices from CoinGecko", len(prices))
        for address, price in sorted(prices.items()):
            logger.debug("  %s: $%s", address, price)
        return prices

    async def fetch_token_list(self) -> list[TokenInfo]:
        data = await fetch_json(self.token_list_url, timeout=self.timeout)
        return parse_token_list(data.get("tokens", []))
