"""Integration tests for the Polygon token list service."""
from __future__ import annotations

from decimal import Decimal

import pytest

from conftest import (
    COINGECKO_TOKENS_POLY,
    MATIC_MAPPER_RESPONSE,
    QUICKSWAP_TOKENS,
    SUSHI_SUBGRAPH_RESPONSE,
    USDC_LOGO,
    WBTC_LOGO,
    WBTC_POLYGON,
    HttpRoutes,
)
from setprotocol.oracles import PolygonTokenListService
from setprotocol.oracles.coingecko import COINGECKO_TOKEN_LIST_URL
from setprotocol.oracles.polygon_tokens import (
    MATIC_MAPPER_URL,
    QUICKSWAP_TOKEN_LIST_URL,
    SUSHI_SUBGRAPH_URL,
)

ROOT_WBTC_LOGO = "https://assets.coingecko.com/coins/images/7598/thumb/wrapped_bitcoin_wbtc.png"


@pytest.fixture()
def routes(http: HttpRoutes) -> HttpRoutes:
    http[SUSHI_SUBGRAPH_URL] = SUSHI_SUBGRAPH_RESPONSE
    http[QUICKSWAP_TOKEN_LIST_URL] = QUICKSWAP_TOKENS
    http[MATIC_MAPPER_URL] = MATIC_MAPPER_RESPONSE
    http[COINGECKO_TOKEN_LIST_URL] = COINGECKO_TOKENS_POLY
    return http


class TestPolygonTokenList:
    @pytest.mark.asyncio
    async def test_ordered_by_volume(self, routes: HttpRoutes) -> None:
        tokens = await PolygonTokenListService().fetch_token_list()

        assert [t.symbol for t in tokens] == ["USDC", "WBTC", "MATIC"]
        assert [t.volume_usd for t in tokens] == [
            Decimal("333000000.123"),
            Decimal("222000000.123"),
            Decimal("123000000.123"),
        ]
        assert all(t.chain_id == 137 for t in tokens)

    @pytest.mark.asyncio
    async def test_quickswap_logos(self, routes: HttpRoutes) -> None:
        tokens = {t.symbol: t for t in await PolygonTokenListService().fetch_token_list()}

        assert tokens["USDC"].logo_uri == USDC_LOGO
        assert tokens["WBTC"].logo_uri == WBTC_LOGO
        assert tokens["MATIC"].logo_uri is None
        assert tokens["WBTC"].decimals == 8
        assert tokens["WBTC"].address == WBTC_POLYGON.lower()

    @pytest.mark.asyncio
    async def test_root_token_logo_fallback(self, routes: HttpRoutes) -> None:
        routes[QUICKSWAP_TOKEN_LIST_URL] = []
        routes[COINGECKO_TOKEN_LIST_URL] = {
            "tokens": [
                {"chainId": 1, "address": "0x2260fac5e5542a773aa44fbcfedf7c193bc2c599",
                 "name": "Wrapped BTC", "symbol": "WBTC", "decimals": 8,
                 "logoURI": ROOT_WBTC_LOGO},
            ]
        }

        tokens = {t.symbol: t for t in await PolygonTokenListService().fetch_token_list()}

        assert tokens["WBTC"].logo_uri == ROOT_WBTC_LOGO
        assert tokens["USDC"].logo_uri is None

    @pytest.mark.asyncio
    async def test_subgraph_queried_with_post(self, routes: HttpRoutes) -> None:
        await PolygonTokenListService().fetch_token_list()

        [request] = routes.requests_to(SUSHI_SUBGRAPH_URL)
        assert request.method == "POST"
        assert "volumeUSD" in request.json["query"]

    @pytest.mark.asyncio
    async def test_mapper_paginates(self, routes: HttpRoutes) -> None:
        first_page = {
            "data": {**MATIC_MAPPER_RESPONSE["data"], "mapping": [], "has_next_page": True}
        }
        routes.paged(MATIC_MAPPER_URL, first_page, MATIC_MAPPER_RESPONSE)

        mapping = await PolygonTokenListService().fetch_root_token_mapping()

        offsets = [r.params["offset"] for r in routes.requests_to(MATIC_MAPPER_URL)]
        assert offsets == ["0", "200"]
        assert mapping[WBTC_POLYGON.lower()] == "0x2260fac5e5542a773aa44fbcfedf7c193bc2c599"

    @pytest.mark.asyncio
    async def test_failed_source_aborts(self, routes: HttpRoutes) -> None:
        del routes.routes[QUICKSWAP_TOKEN_LIST_URL]
        with pytest.raises(RuntimeError, match="HTTP 404"):
            await PolygonTokenListService().fetch_token_list()
