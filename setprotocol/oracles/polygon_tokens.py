"""Polygon token list: Sushiswap volumes enriched with logos from other registries."""
from __future__ import annotations

import asyncio
import json
import logging
from decimal import Decimal
from typing import Any

from ..chains.networks import POLYGON
from ..models import TokenInfo
from .coingecko import COINGECKO_TOKEN_LIST_URL, parse_token_list
from .http import DEFAULT_TIMEOUT, fetch_json

logger = logging.getLogger(__name__)

SUSHI_SUBGRAPH_URL = "https://api.thegraph.com/subgraphs/name/sushiswap/matic-exchange"
QUICKSWAP_TOKEN_LIST_URL = (
    "https://raw.githubusercontent.com/sameepsi/quickswap-default-token-list"
    "/master/src/tokens/mainnet.json"
)
MATIC_MAPPER_URL = "https://tokenmapper.api.matic.today/api/v1/mapping"

SUSHI_TOKENS_QUERY = """
{
  tokens(first: 200, orderBy: volumeUSD, orderDirection: desc) {
    id
    name
    symbol
    decimals
    volumeUSD
  }
}
"""


class PolygonTokenListService:
    """Build the Polygon token list ordered by Sushiswap USD volume.

    Logos come from the Quickswap default list; tokens missing there fall
    back to the logo of their Ethereum root token (via the Polygon PoS token
    mapper and the CoinGecko list).
    """

    def __init__(
        self,
        subgraph_url: str = SUSHI_SUBGRAPH_URL,
        quickswap_url: str = QUICKSWAP_TOKEN_LIST_URL,
        mapper_url: str = MATIC_MAPPER_URL,
        coingecko_token_list_url: str = COINGECKO_TOKEN_LIST_URL,
        timeout: int = DEFAULT_TIMEOUT,
    ) -> None:
        self.subgraph_url = subgraph_url
        self.quickswap_url = quickswap_url
        self.mapper_url = mapper_url
        self.coingecko_token_list_url = coingecko_token_list_url
        self.timeout = timeout

    async def fetch_sushi_tokens(self) -> list[dict[str, Any]]:
        data = await fetch_json(
            self.subgraph_url,
            json_body={"query": SUSHI_TOKENS_QUERY},
            timeout=self.timeout,
        )
        return data.get("data", {}).get("tokens", [])

    async def fetch_quickswap_tokens(self) -> list[dict[str, Any]]:
        return await fetch_json(self.quickswap_url, timeout=self.timeout)

    async def fetch_root_token_mapping(self) -> dict[str, str]:
        """Map lowercase child (Polygon) token address → root (Ethereum) address."""
        mapping: dict[str, str] = {}
        offset = 0
        limit = 200

        while True:
            params = {
                "map_type": json.dumps(["POS"]),
                "chain_id": str(POLYGON.chain_id),
                "limit": str(limit),
                "offset": str(offset),
            }
            data = await fetch_json(self.mapper_url, params=params, timeout=self.timeout)
            page = data.get("data", {})
            for entry in page.get("mapping", []):
                mapping[entry["child_token"].lower()] = entry["root_token"].lower()

            if not page.get("has_next_page"):
                break
            offset += limit

        return mapping

    async def fetch_coingecko_logos(self) -> dict[str, str]:
        data = await fetch_json(self.coingecko_token_list_url, timeout=self.timeout)
        return {
            token.address: token.logo_uri
            for token in parse_token_list(data.get("tokens", []))
            if token.logo_uri
        }

    async def fetch_token_list(self) -> list[TokenInfo]:
        sushi_tokens, quickswap_tokens, root_mapping, root_logos = await asyncio.gather(
            self.fetch_sushi_tokens(),
            self.fetch_quickswap_tokens(),
            self.fetch_root_token_mapping(),
            self.fetch_coingecko_logos(),
        )

        quickswap_logos = {
            token.address: token.logo_uri
            for token in parse_token_list(quickswap_tokens, POLYGON.chain_id)
            if token.logo_uri
        }

        tokens: list[TokenInfo] = []
        for raw in sushi_tokens:
            address = raw["id"].lower()
            logo_uri = quickswap_logos.get(address)
            if logo_uri is None and address in root_mapping:
                logo_uri = root_logos.get(root_mapping[address])

            tokens.append(
                TokenInfo(
                    chain_id=POLYGON.chain_id,
                    address=address,
                    name=raw.get("name", ""),
                    symbol=raw.get("symbol", ""),
                    decimals=int(raw.get("decimals", 18)),
                    logo_uri=logo_uri,
                    volume_usd=Decimal(str(raw.get("volumeUSD", "0"))),
                )
            )

        tokens.sort(key=lambda token: token.volume_usd or Decimal(0), reverse=True)
        logger.info("Built Polygon token list with %d tokens", len(tokens))
        return tokens
