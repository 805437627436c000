"""Supported networks and their per-chain endpoints and tokens."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class NetworkInfo:
    chain_id: int
    name: str
    currency_symbol: str
    # Wrapped native token, used to price gas in USD
    currency_address: str
    coingecko_platform: str
    zero_ex_api_url: str
    gas_station_url: str


ETHEREUM = NetworkInfo(
    chain_id=1,
    name="ethereum",
    currency_symbol="ETH",
    currency_address="0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2",
    coingecko_platform="ethereum",
    zero_ex_api_url="https://api.0x.org/swap/v1/quote",
    gas_station_url="https://ethgasstation.info/json/ethgasAPI.json",
)

POLYGON = NetworkInfo(
    chain_id=137,
    name="polygon",
    currency_symbol="MATIC",
    currency_address="0x0d500b1d8e8ef31e21c99d1db9a6444d3adf1270",
    coingecko_platform="polygon-pos",
    zero_ex_api_url="https://polygon.api.0x.org/swap/v1/quote",
    gas_station_url="https://gasstation-mainnet.matic.network",
)

GAS_NOW_URL = "https://www.gasnow.org/api/v3/gas/price"

NETWORKS: dict[int, NetworkInfo] = {
    ETHEREUM.chain_id: ETHEREUM,
    POLYGON.chain_id: POLYGON,
}


def get_network(chain_id: int) -> NetworkInfo:
    try:
        return NETWORKS[chain_id]
    except KeyError:
        raise ValueError(f"Unsupported chain id {chain_id}") from None
