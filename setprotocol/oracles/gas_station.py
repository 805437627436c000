"""Gas price oracles. All prices are returned in gwei."""
import logging
from decimal import Decimal

from ..chains.networks import ETHEREUM, GAS_NOW_URL, POLYGON
from .http import DEFAULT_TIMEOUT, fetch_json

logger = logging.getLogger(__name__)

GWEI = Decimal(10**9)


class EthGasStationOracle:
    """ethgasstation.info reports prices in tenths of a gwei."""

    def __init__(
        self,
        url: str = ETHEREUM.gas_station_url,
        tier: str = "fast",
        timeout: int = DEFAULT_TIMEOUT,
    ) -> None:
        self.url = url
        self.tier = tier
        self.timeout = timeout

    async def fetch_gas_price(self) -> Decimal:
        data = await fetch_json(self.url, timeout=self.timeout)
        gas_price = Decimal(str(data[self.tier])) / 10
        logger.info("EthGasStation %s gas price: %s gwei", self.tier, gas_price)
        return gas_price


class GasNowOracle:
    """gasnow.org reports prices in wei under ``data``; tiers are rapid/fast/standard/slow."""

    def __init__(
        self, url: str = GAS_NOW_URL, tier: str = "fast", timeout: int = DEFAULT_TIMEOUT
    ) -> None:
        self.url = url
        self.tier = tier
        self.timeout = timeout

    async def fetch_gas_price(self) -> Decimal:
        data = await fetch_json(self.url, timeout=self.timeout)
        gas_price = Decimal(str(data["data"][self.tier])) / GWEI
        logger.info("GasNow %s gas price: %s gwei", self.tier, gas_price)
        return gas_price


class MaticGasStationOracle:
    """Polygon gas station reports prices directly in gwei."""

    def __init__(
        self,
        url: str = POLYGON.gas_station_url,
        tier: str = "fast",
        timeout: int = DEFAULT_TIMEOUT,
    ) -> None:
        self.url = url
        self.tier = tier
        self.timeout = timeout

    async def fetch_gas_price(self) -> Decimal:
        data = await fetch_json(self.url, timeout=self.timeout)
        gas_price = Decimal(str(data[self.tier]))
        logger.info("Matic gas station %s gas price: %s gwei", self.tier, gas_price)
        return gas_price
