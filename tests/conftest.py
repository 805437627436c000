"""Shared test fixtures, an in-memory contract layer and sample data."""
from __future__ import annotations

import textwrap
from pathlib import Path
from types import SimpleNamespace
from typing import Any, Iterator
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from web3 import Web3
from web3.exceptions import ContractLogicError

from setprotocol.config import (
    ApiConfig,
    AppConfig,
    ChainConfig,
    ContractsConfig,
    TradeQuoteConfig,
)
from setprotocol.models import ModuleState
from setprotocol.wrappers import ContractWrapper

# ---------------------------------------------------------------------------
# Addresses
# ---------------------------------------------------------------------------

MANAGER = "0x0DEa6d942a2D8f594844F973366859616Dd5ea50"
OTHER_ACCOUNT = "0x89A3EFC92f3FAbe59F3DeAa5e5e92773EE29fA37"
CONTROLLER = "0xa4c8d221d8BB851f83aadd0223a8900A6921A349"
SET_TOKEN_CREATOR = "0x1111111111111111111111111111111111111111"
BASIC_ISSUANCE_MODULE = "0x2222222222222222222222222222222222222222"
STREAMING_FEE_MODULE = "0x3333333333333333333333333333333333333333"
TRADE_MODULE = "0x4444444444444444444444444444444444444444"
PROTOCOL_VIEWER = "0x5555555555555555555555555555555555555555"

DPI = "0x1494ca1f11d487c2bbe4543e90080aeba4ba3c2b"
DPI_CHECKSUM = Web3.to_checksum_address(DPI)
YFI = "0x0bc529c00C6401aEF6D220BE8C6Ea1667F6Ad93e"
MKR = "0x9f8F72aA9304c8B593d555F12eF6589cC3A579A2"
NULL_ADDRESS = "0x0000000000000000000000000000000000000000"

BUD = "0xd7dc13984d4fe87f389e50067fb3eedb3f704ea0"
USDC_POLYGON = "0x2791Bca1f2de4661ED88A30C99A7a9449Aa84174"
WBTC_POLYGON = "0x1BFD67037B42Cf73acF2047067bd4F2C47D9BfD6"


# ---------------------------------------------------------------------------
# In-memory contract layer
# ---------------------------------------------------------------------------


def revert(reason: str) -> ContractLogicError:
    return ContractLogicError(f"execution reverted: {reason}")


class _FakeCall:
    def __init__(self, contract: FakeContract, name: str, args: tuple[Any, ...]) -> None:
        self._contract = contract
        self._name = name
        self._args = args

    async def call(self, tx: dict[str, Any] | None = None) -> Any:
        return self._contract.dispatch("call", self._name, self._args, tx or {})

    async def transact(self, tx: dict[str, Any] | None = None) -> Any:
        return self._contract.dispatch("transact", self._name, self._args, tx or {})

    async def estimate_gas(self, tx: dict[str, Any] | None = None) -> int:
        return self._contract.dispatch("estimate_gas", self._name, self._args, tx or {})


class _FakeFunctions:
    def __init__(self, contract: FakeContract) -> None:
        self._contract = contract

    def __getattr__(self, name: str):
        return lambda *args: _FakeCall(self._contract, name, args)


class FakeContract:
    """Mimics ``contract.functions.<name>(*args).call/transact/estimate_gas``.

    Subclasses implement ``fn_<name>(tx, *args)``; every invocation is
    recorded in ``calls`` as ``(kind, name, args, sender)``.
    """

    def __init__(self) -> None:
        self.functions = _FakeFunctions(self)
        self.calls: list[tuple[str, str, tuple[Any, ...], str | None]] = []
        self.gas_estimates: dict[str, int] = {}

    def dispatch(self, kind: str, name: str, args: tuple[Any, ...], tx: dict[str, Any]) -> Any:
        self.calls.append((kind, name, args, tx.get("from")))
        if kind == "estimate_gas":
            return self.gas_estimates[name]
        result = getattr(self, f"fn_{name}")(tx, *args)
        if kind == "transact":
            return "0x" + f"{len(self.calls):064x}"
        return result


class FakeSetToken(FakeContract):
    """SetToken module lifecycle: NONE → PENDING (manager) → INITIALIZED (module)."""

    def __init__(
        self,
        manager: str,
        positions: list[tuple] | None = None,
        controller_modules: set[str] | None = None,
    ) -> None:
        super().__init__()
        self.manager = manager
        self.positions = positions or []
        self.controller_modules = {m.lower() for m in controller_modules or set()}
        self.module_states: dict[str, ModuleState] = {}
        self.modules: list[str] = []

    def _state(self, module: str) -> ModuleState:
        return self.module_states.get(module.lower(), ModuleState.NONE)

    def _only_manager(self, tx: dict[str, Any]) -> None:
        if str(tx.get("from", "")).lower() != self.manager.lower():
            raise revert("Only manager can call")

    def fn_controller(self, tx):
        return CONTROLLER

    def fn_manager(self, tx):
        return self.manager

    def fn_getPositions(self, tx):
        return list(self.positions)

    def fn_getModules(self, tx):
        return list(self.modules)

    def fn_getComponents(self, tx):
        return [p[0] for p in self.positions]

    def fn_isComponent(self, tx, component):
        return any(p[0].lower() == component.lower() for p in self.positions)

    def fn_getDefaultPositionRealUnit(self, tx, component):
        for p in self.positions:
            if p[0].lower() == component.lower() and p[3] == 0:
                return p[2]
        return 0

    def fn_getTotalComponentRealUnits(self, tx, component):
        return sum(p[2] for p in self.positions if p[0].lower() == component.lower())

    def fn_moduleStates(self, tx, module):
        return int(self._state(module))

    def fn_isInitializedModule(self, tx, module):
        return self._state(module) == ModuleState.INITIALIZED

    def fn_isPendingModule(self, tx, module):
        return self._state(module) == ModuleState.PENDING

    def fn_addModule(self, tx, module):
        self._only_manager(tx)
        if self._state(module) != ModuleState.NONE:
            raise revert("Module must not be added")
        if module.lower() not in self.controller_modules:
            raise revert("Must be enabled on Controller")
        self.module_states[module.lower()] = ModuleState.PENDING

    def fn_initializeModule(self, tx):
        module = str(tx.get("from", ""))
        if self._state(module) != ModuleState.PENDING:
            raise revert("Module must be pending")
        self.module_states[module.lower()] = ModuleState.INITIALIZED
        self.modules.append(module)

    def fn_removeModule(self, tx, module):
        self._only_manager(tx)
        if self._state(module) != ModuleState.INITIALIZED:
            raise revert("Module must be added")
        self.module_states[module.lower()] = ModuleState.NONE
        self.modules = [m for m in self.modules if m.lower() != module.lower()]

    def fn_setManager(self, tx, manager):
        self._only_manager(tx)
        self.manager = manager


class FakeProtocolViewer(FakeContract):
    def __init__(self, details: dict[str, tuple] | None = None) -> None:
        super().__init__()
        self.details = {k.lower(): v for k, v in (details or {}).items()}
        self.balances: dict[tuple[str, str], int] = {}
        self.fee_info: dict[str, tuple] = {}

    def fn_getSetDetails(self, tx, set_token, modules):
        return self.details[set_token.lower()]

    def fn_batchFetchDetails(self, tx, set_tokens, modules):
        return [self.details[s.lower()] for s in set_tokens]

    def fn_batchFetchManagers(self, tx, set_tokens):
        return [self.details[s.lower()][2] for s in set_tokens]

    def fn_batchFetchBalancesOf(self, tx, tokens, owners):
        return [self.balances.get((t.lower(), o.lower()), 0) for t, o in zip(tokens, owners)]

    def fn_batchFetchAllowances(self, tx, tokens, owners, spenders):
        return [0 for _ in tokens]

    def fn_batchFetchModuleStates(self, tx, set_tokens, modules):
        return [list(self.details[s.lower()][4]) for s in set_tokens]

    def fn_batchFetchStreamingFeeInfo(self, tx, fee_module, set_tokens):
        return [self.fee_info[s.lower()] for s in set_tokens]


class FakeTradeModule(FakeContract):
    def __init__(self, trade_gas: int = 300000) -> None:
        super().__init__()
        self.gas_estimates["trade"] = trade_gas

    def fn_initialize(self, tx, set_token):
        return None

    def fn_trade(self, tx, *args):
        return None


class FakeERC20(FakeContract):
    def __init__(self, decimals: int = 18, balances: dict[str, int] | None = None) -> None:
        super().__init__()
        self._decimals = decimals
        self.balances = {k.lower(): v for k, v in (balances or {}).items()}

    def fn_decimals(self, tx):
        return self._decimals

    def fn_balanceOf(self, tx, owner):
        return self.balances.get(owner.lower(), 0)


class FakeEth:
    """Subset of ``AsyncWeb3.eth`` used by the wrappers."""

    def __init__(self, accounts: list[str] | None = None) -> None:
        self._accounts = list(accounts or [])
        self.default_account = None
        self.contracts: dict[str, FakeContract] = {}
        self.receipts: dict[str, Any] = {}
        self.contract = MagicMock(side_effect=self._contract)

    def _contract(self, address: str, abi: list[dict[str, Any]]) -> FakeContract:
        return self.contracts[Web3.to_checksum_address(address)]

    @property
    def accounts(self):
        async def _accounts() -> list[str]:
            return list(self._accounts)

        return _accounts()

    async def get_transaction_receipt(self, tx_hash: str) -> Any:
        return self.receipts[tx_hash]


class FakeWeb3:
    def __init__(self, accounts: list[str] | None = None) -> None:
        self.eth = FakeEth(accounts)

    def register(self, address: str, contract: FakeContract) -> FakeContract:
        self.eth.contracts[Web3.to_checksum_address(address)] = contract
        return contract


@pytest.fixture()
def fake_w3() -> FakeWeb3:
    return FakeWeb3(accounts=[MANAGER, OTHER_ACCOUNT])


@pytest.fixture()
def contracts(fake_w3: FakeWeb3) -> ContractWrapper:
    return ContractWrapper(fake_w3)


# ---------------------------------------------------------------------------
# HTTP routing
# ---------------------------------------------------------------------------


def _mock_response(status: int, data: Any = None) -> AsyncMock:
    response = AsyncMock()
    response.status = status
    response.json = AsyncMock(return_value=data)
    response.__aenter__ = AsyncMock(return_value=response)
    response.__aexit__ = AsyncMock(return_value=None)
    return response


class HttpRoutes:
    """URL → JSON body table served by a patched ``aiohttp.ClientSession``.

    Unknown URLs answer HTTP 404.
    """

    def __init__(self) -> None:
        self.routes: dict[str, Any] = {}
        self.pages: dict[str, Iterator[Any]] = {}
        self.calls: list[SimpleNamespace] = []

    def __setitem__(self, url: str, data: Any) -> None:
        self.routes[url] = data

    def paged(self, url: str, *bodies: Any) -> None:
        """Serve ``bodies`` in order on successive requests to ``url``."""
        self.pages[url] = iter(bodies)

    def _respond(self, method: str, url: str, **kwargs: Any) -> AsyncMock:
        self.calls.append(SimpleNamespace(method=method, url=url, **kwargs))
        if url in self.pages:
            return _mock_response(200, next(self.pages[url]))
        if url not in self.routes:
            return _mock_response(404)
        return _mock_response(200, self.routes[url])

    def requests_to(self, url: str) -> list[SimpleNamespace]:
        return [call for call in self.calls if call.url == url]

    def session(self) -> AsyncMock:
        session = AsyncMock()
        session.get = MagicMock(side_effect=lambda url, **kw: self._respond("GET", url, **kw))
        session.post = MagicMock(side_effect=lambda url, **kw: self._respond("POST", url, **kw))
        session.__aenter__ = AsyncMock(return_value=session)
        session.__aexit__ = AsyncMock(return_value=None)
        return session


@pytest.fixture()
def http() -> Iterator[HttpRoutes]:
    routes = HttpRoutes()
    with patch("setprotocol.oracles.http.aiohttp.ClientSession", return_value=routes.session()):
        with patch("setprotocol.oracles.http.aiohttp.TCPConnector"):
            yield routes


# ---------------------------------------------------------------------------
# Config fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def sample_contracts_config() -> ContractsConfig:
    return ContractsConfig(
        controller=CONTROLLER,
        set_token_creator=SET_TOKEN_CREATOR,
        basic_issuance_module=BASIC_ISSUANCE_MODULE,
        streaming_fee_module=STREAMING_FEE_MODULE,
        trade_module=TRADE_MODULE,
        protocol_viewer=PROTOCOL_VIEWER,
    )


@pytest.fixture()
def sample_app_config(sample_contracts_config: ContractsConfig) -> AppConfig:
    return AppConfig(
        chain=ChainConfig(chain_id=1, rpc_url="http://localhost:8545", rpc_timeout=10),
        contracts=sample_contracts_config,
        api=ApiConfig(zero_ex_api_key="test-key"),
        trade_quote=TradeQuoteConfig(),
    )


SAMPLE_YAML = textwrap.dedent(f"""\
    chain:
      chain_id: 137
      rpc_url: "https://polygon-rpc.example.com"
      rpc_timeout: 10
    contracts:
      controller: "{CONTROLLER}"
      trade_module: "{TRADE_MODULE}"
      protocol_viewer: "{PROTOCOL_VIEWER}"
    api:
      zero_ex_api_key: "key-123"
      zero_ex_api_urls:
        137: "https://polygon.example.com/swap/v1/quote"
      gas_oracle: gasnow
      gas_tier: rapid
      http_timeout: 15
    trade_quote:
      slippage_percentage: 1.5
      fee_percentage: 0.5
      gas_buffer_percentage: 10
      is_firm_quote: false
""")


@pytest.fixture()
def sample_yaml_path(tmp_path: Path) -> Path:
    cfg_file = tmp_path / "config.yaml"
    cfg_file.write_text(SAMPLE_YAML)
    return cfg_file


# ---------------------------------------------------------------------------
# Recorded mainnet responses (DPI on Ethereum, BUD on Polygon)
# ---------------------------------------------------------------------------

DPI_TOTAL_SUPPLY = 0x5DF56BC958049751D8FB

DPI_DETAILS = (
    "DefiPulse Index",
    "DPI",
    MANAGER,
    [],
    [],
    [
        (YFI, NULL_ADDRESS, 0x022281F9089B0F, 0, b""),
        (MKR, NULL_ADDRESS, 0x354E308B36C16B, 0, b""),
    ],
    DPI_TOTAL_SUPPLY,
)

BUD_DETAILS = (
    "BUD Set",
    "BUD",
    OTHER_ACCOUNT,
    ["0xE99447aBbD5A7730b26D2D16fCcB2086319e4bC3"],
    [0, 0],
    [
        (USDC_POLYGON, NULL_ADDRESS, 0x02FAF080, 0, b""),
        (WBTC_POLYGON, NULL_ADDRESS, 0x015AD9, 0, b""),
    ],
    10**18,
)

ZERO_EX_QUOTE_ETH = {
    "price": "0.082625382321048146",
    "guaranteedPrice": "0.082625382321048146",
    "data": "0x415565b00000000000000000000000009f8f72aa9304c8b593d555f12ef6589cc3a579a2",
    "buyAmount": "41312691160507030",
    "sellAmount": "499999999999793729",
    "gas": "346000",
}

ZERO_EX_QUOTE_POLY = {
    "price": "0.00002973",
    "guaranteedPrice": "0.00002973",
    "data": "0x415565b00000000000000000000000002791bca1f2de4661ed88a30c99a7a9449aa84174",
    "gas": "240000",
    "buyAmount": "2973",
    "sellAmount": "1000000",
}

ETH_GAS_STATION_RESPONSE = {"fast": 610, "fastest": 610, "safeLow": 178, "average": 178}

GAS_NOW_RESPONSE = {
    "data": {
        "rapid": 61000000000,
        "fast": 61000000000,
        "standard": 17800000000,
        "slow": 17800000000,
    }
}

MATIC_GAS_STATION_RESPONSE = {"fast": 5, "fastest": 7.5, "standard": 1}

COINGECKO_TOKENS_ETH = {
    "tokens": [
        {"chainId": 1, "address": "0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2",
         "name": "Wrapped Eth", "symbol": "WETH", "decimals": 18, "logoURI": ""},
        {"chainId": 1, "address": "0x0bc529c00c6401aef6d220be8c6ea1667f6ad93e",
         "name": "Maker", "symbol": "MKR", "decimals": 18, "logoURI": ""},
        {"chainId": 1, "address": "0x9f8f72aa9304c8b593d555f12ef6589cc3a579a2",
         "name": "Yearn", "symbol": "YFI", "decimals": 18, "logoURI": ""},
    ]
}

COINGECKO_TOKENS_POLY = {
    "tokens": [
        {"chainId": 1, "address": "0x7d1afa7b718fb893db30a3abc0cfc608aacfebb0",
         "name": "Matic Token", "symbol": "MATIC", "decimals": 18, "logoURI": ""},
        {"chainId": 1, "address": "0x2260fac5e5542a773aa44fbcfedf7c193bc2c599",
         "name": "Wrapped BTC", "symbol": "WBTC", "decimals": 18, "logoURI": ""},
        {"chainId": 1, "address": "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48",
         "name": "USD Coin", "symbol": "USDC", "decimals": 6, "logoURI": ""},
    ]
}

COINGECKO_PRICES_ETH = {
    "0x0bc529c00c6401aef6d220be8c6ea1667f6ad93e": {"usd": 39087},
    "0x9f8f72aa9304c8b593d555f12ef6589cc3a579a2": {"usd": 3194.41},
    "0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2": {"usd": 2493.12},
}

COINGECKO_PRICES_POLY = {
    "0x1bfd67037b42cf73acf2047067bd4f2c47d9bfd6": {"usd": 33595},
    "0x2791bca1f2de4661ed88a30c99a7a9449aa84174": {"usd": 1.01},
    "0x0d500b1d8e8ef31e21c99d1db9a6444d3adf1270": {"usd": 1.49},
}

WBTC_LOGO = (
    "https://raw.githubusercontent.com/trustwallet/assets/master/blockchains/ethereum"
    "/assets/0x2260FAC5E5542a773Aa44fBCfeDf7C193bc2C599/logo.png"
)
USDC_LOGO = (
    "https://raw.githubusercontent.com/trustwallet/assets/master/blockchains/ethereum"
    "/assets/0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48/logo.png"
)

QUICKSWAP_TOKENS = [
    {"name": "Wrapped BTC", "address": WBTC_POLYGON, "symbol": "WBTC",
     "decimals": 8, "chainId": 137, "logoURI": WBTC_LOGO},
    {"name": "USD Coin", "address": USDC_POLYGON, "symbol": "USDC",
     "decimals": 6, "chainId": 137, "logoURI": USDC_LOGO},
]

SUSHI_SUBGRAPH_RESPONSE = {
    "data": {
        "tokens": [
            {"id": "0x7d1afa7b718fb893db30a3abc0cfc608aacfebb0", "name": "Matic Token",
             "symbol": "MATIC", "decimals": 18, "volumeUSD": "123000000.123"},
            {"id": "0x1bfd67037b42cf73acf2047067bd4f2c47d9bfd6", "name": "Wrapped BTC",
             "symbol": "WBTC", "decimals": 8, "volumeUSD": "222000000.123"},
            {"id": "0x2791bca1f2de4661ed88a30c99a7a9449aa84174", "name": "USD Coin",
             "symbol": "USDC", "decimals": 6, "volumeUSD": "333000000.123"},
        ]
    }
}

MATIC_MAPPER_RESPONSE = {
    "message": "success",
    "data": {
        "mapping": [
            {"root_token": "0x2260FAC5E5542a773Aa44fBCfeDf7C193bc2C599",
             "child_token": WBTC_POLYGON, "map_type": "POS", "decimals": 8},
            {"root_token": "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48",
             "child_token": USDC_POLYGON, "map_type": "POS", "decimals": 6},
        ],
        "limit": 200,
        "offset": 800,
        "has_next_page": False,
    },
}
