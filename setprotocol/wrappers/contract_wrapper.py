"""Contract loading with a process-wide connection cache."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from web3 import AsyncWeb3, Web3

from ..assertions import is_address
from .abis import ABIS

logger = logging.getLogger(__name__)


def _checksum_arg(abi_type: str, components: list[dict[str, Any]] | None, value: Any) -> Any:
    """Checksum every address inside ``value`` as laid out by its ABI type."""
    if abi_type.endswith("[]"):
        return [_checksum_arg(abi_type[:-2], components, item) for item in value]
    if abi_type == "tuple" and components:
        return tuple(
            _checksum_arg(c["type"], c.get("components"), item)
            for c, item in zip(components, value)
        )
    if abi_type == "address" and isinstance(value, str) and is_address(value):
        return Web3.to_checksum_address(value)
    return value


@dataclass(frozen=True, eq=False)
class ContractHandle:
    """A contract bound to the address that sends its calls."""

    kind: str
    address: str
    caller: str
    contract: Any

    def _tx(self, tx_opts: dict[str, Any] | None) -> dict[str, Any]:
        return {"from": self.caller, **(tx_opts or {})}

    def _args(self, method: str, args: tuple[Any, ...]) -> tuple[Any, ...]:
        # web3 rejects addresses that are not checksummed
        inputs = next(
            (
                f["inputs"]
                for f in ABIS[self.kind]
                if f.get("type") == "function"
                and f["name"] == method
                and len(f["inputs"]) == len(args)
            ),
            None,
        )
        if inputs is None:
            return args
        return tuple(
            _checksum_arg(i["type"], i.get("components"), arg) for i, arg in zip(inputs, args)
        )

    async def call(self, method: str, *args: Any) -> Any:
        fn = getattr(self.contract.functions, method)
        return await fn(*self._args(method, args)).call(self._tx(None))

    async def transact(
        self, method: str, *args: Any, tx_opts: dict[str, Any] | None = None
    ) -> Any:
        fn = getattr(self.contract.functions, method)
        tx_hash = await fn(*self._args(method, args)).transact(self._tx(tx_opts))
        logger.info("Sent %s.%s from %s", self.kind, method, self.caller)
        return tx_hash

    async def estimate_gas(
        self, method: str, *args: Any, tx_opts: dict[str, Any] | None = None
    ) -> int:
        fn = getattr(self.contract.functions, method)
        return int(await fn(*self._args(method, args)).estimate_gas(self._tx(tx_opts)))


class ContractWrapper:
    """Load contract handles, caching one per (kind, address, caller)."""

    def __init__(self, w3: AsyncWeb3) -> None:
        self._w3 = w3
        self._cache: dict[str, ContractHandle] = {}

    @property
    def web3(self) -> AsyncWeb3:
        return self._w3

    async def resolve_caller(self, caller: str | None = None) -> str:
        """Return the sending address, defaulting to the node's first account."""
        if caller:
            return Web3.to_checksum_address(caller)

        default = self._w3.eth.default_account
        if is_address(default):
            return Web3.to_checksum_address(default)

        accounts = await self._w3.eth.accounts
        if not accounts:
            raise RuntimeError("No caller given and the node exposes no accounts")
        return Web3.to_checksum_address(accounts[0])

    async def load(
        self, kind: str, address: str, caller: str | None = None
    ) -> ContractHandle:
        # Resolve first: nothing below may suspend between lookup and insert.
        caller_address = await self.resolve_caller(caller)
        checksum_address = Web3.to_checksum_address(address)
        cache_key = f"{kind}_{checksum_address}_{caller_address}"

        handle = self._cache.get(cache_key)
        if handle is not None:
            logger.debug("Contract cache hit: %s", cache_key)
            return handle

        contract = self._w3.eth.contract(address=checksum_address, abi=ABIS[kind])
        handle = ContractHandle(
            kind=kind,
            address=checksum_address,
            caller=caller_address,
            contract=contract,
        )
        self._cache[cache_key] = handle
        return handle

    async def load_controller(self, address: str, caller: str | None = None) -> ContractHandle:
        return await self.load("Controller", address, caller)

    async def load_erc20(self, address: str, caller: str | None = None) -> ContractHandle:
        return await self.load("ERC20", address, caller)

    async def load_basic_issuance_module(
        self, address: str, caller: str | None = None
    ) -> ContractHandle:
        return await self.load("BasicIssuance", address, caller)

    async def load_trade_module(self, address: str, caller: str | None = None) -> ContractHandle:
        return await self.load("TradeModule", address, caller)

    async def load_set_token(self, address: str, caller: str | None = None) -> ContractHandle:
        return await self.load("SetToken", address, caller)

    async def load_set_token_creator(
        self, address: str, caller: str | None = None
    ) -> ContractHandle:
        return await self.load("SetTokenCreator", address, caller)

    async def load_streaming_fee_module(
        self, address: str, caller: str | None = None
    ) -> ContractHandle:
        return await self.load("StreamingFeeModule", address, caller)

    async def load_protocol_viewer(
        self, address: str, caller: str | None = None
    ) -> ContractHandle:
        return await self.load("ProtocolViewer", address, caller)
