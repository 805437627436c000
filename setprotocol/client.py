"""SetClient: wires one web3 connection into every wrapper and API."""
from __future__ import annotations

import logging

from web3 import AsyncWeb3

from .api import ERC20API, FeeAPI, IssuanceAPI, SetTokenAPI, SystemAPI, TradeAPI
from .chains import POLYGON, NetworkInfo, build_web3, get_network
from .config import AppConfig
from .interfaces.gas_oracle import GasOracle
from .interfaces.token_list import TokenListProvider
from .oracles import (
    CoinGeckoOracle,
    EthGasStationOracle,
    GasNowOracle,
    MaticGasStationOracle,
    PolygonTokenListService,
    ZeroExQuoter,
)
from .trade import TradeQuoter
from .wrappers import (
    BasicIssuanceModuleWrapper,
    ContractWrapper,
    ControllerWrapper,
    ERC20Wrapper,
    ProtocolViewerWrapper,
    SetTokenCreatorWrapper,
    SetTokenWrapper,
    StreamingFeeModuleWrapper,
    TradeModuleWrapper,
)

logger = logging.getLogger(__name__)


def _build_gas_oracle(config: AppConfig, network: NetworkInfo) -> GasOracle:
    api = config.api
    if network == POLYGON:
        return MaticGasStationOracle(network.gas_station_url, api.gas_tier, api.http_timeout)
    if api.gas_oracle == "gasnow":
        return GasNowOracle(tier=api.gas_tier, timeout=api.http_timeout)
    return EthGasStationOracle(network.gas_station_url, api.gas_tier, api.http_timeout)


def _build_token_list(
    config: AppConfig, network: NetworkInfo, coingecko: CoinGeckoOracle
) -> TokenListProvider:
    if network == POLYGON:
        return PolygonTokenListService(
            coingecko_token_list_url=config.api.coingecko_token_list_url,
            timeout=config.api.http_timeout,
        )
    return coingecko


class SetClient:
    """Entry point to Set Protocol v2 on one chain.

    All wrappers share a single ``ContractWrapper`` so contract handles are
    cached across APIs.
    """

    def __init__(self, config: AppConfig, w3: AsyncWeb3 | None = None) -> None:
        self.config = config
        self.network = get_network(config.chain.chain_id)
        self.web3 = w3 if w3 is not None else build_web3(config.chain)
        self.contracts = ContractWrapper(self.web3)

        addresses = config.contracts
        api = config.api

        set_token = SetTokenWrapper(self.contracts)
        erc20 = ERC20Wrapper(self.contracts)
        protocol_viewer = ProtocolViewerWrapper(
            self.contracts, addresses.protocol_viewer, addresses.streaming_fee_module
        )
        trade_module = TradeModuleWrapper(self.contracts, addresses.trade_module)

        coingecko = CoinGeckoOracle(
            self.network, api.coingecko_url, api.coingecko_token_list_url, api.http_timeout
        )
        token_list = _build_token_list(config, self.network, coingecko)
        quoter = TradeQuoter(
            network=self.network,
            config=config.trade_quote,
            protocol_viewer=protocol_viewer,
            trade_module=trade_module,
            erc20=erc20,
            swap_quoter=ZeroExQuoter(
                self.network,
                api_key=api.zero_ex_api_key,
                api_url=api.zero_ex_api_urls.get(self.network.chain_id),
                timeout=api.http_timeout,
            ),
            gas_oracle=_build_gas_oracle(config, self.network),
            price_oracle=coingecko,
            token_list=token_list,
        )

        self.set_token = SetTokenAPI(
            set_token,
            SetTokenCreatorWrapper(self.contracts, addresses.set_token_creator),
            protocol_viewer,
            addresses.streaming_fee_module,
        )
        self.erc20 = ERC20API(erc20)
        self.issuance = IssuanceAPI(
            BasicIssuanceModuleWrapper(self.contracts, addresses.basic_issuance_module)
        )
        self.fees = FeeAPI(
            StreamingFeeModuleWrapper(self.contracts, addresses.streaming_fee_module)
        )
        self.system = SystemAPI(ControllerWrapper(self.contracts, addresses.controller))
        self.trade = TradeAPI(trade_module, quoter, token_list)

        logger.debug("SetClient ready on %s (chain %d)", self.network.name, self.network.chain_id)
