"""Third-party quote, gas, price and token-list services."""
from .coingecko import CoinGeckoOracle
from .gas_station import EthGasStationOracle, GasNowOracle, MaticGasStationOracle
from .polygon_tokens import PolygonTokenListService
from .zero_ex import ZeroExQuoter

__all__ = [
    "CoinGeckoOracle",
    "EthGasStationOracle",
    "GasNowOracle",
    "MaticGasStationOracle",
    "PolygonTokenListService",
    "ZeroExQuoter",
]
