"""ProtocolViewer wrapper: batched reads in a single eth_call."""
from __future__ import annotations

from typing import Sequence

from .. import assertions
from ..models import ModuleState, SetDetails, StreamingFeeInfo
from .contract_wrapper import ContractWrapper


class ProtocolViewerWrapper:
    """Reduce N per-token reads to one aggregated remote call.

    Parallel address arrays must already be aligned; mismatched lengths are
    rejected before the call is made.
    """

    def __init__(
        self,
        contracts: ContractWrapper,
        protocol_viewer_address: str,
        streaming_fee_module_address: str,
    ) -> None:
        self._contracts = contracts
        self._protocol_viewer_address = protocol_viewer_address
        self._streaming_fee_module_address = streaming_fee_module_address

    async def _load(self, caller: str | None):
        return await self._contracts.load_protocol_viewer(
            self._protocol_viewer_address, caller
        )

    async def batch_fetch_balances_of(
        self,
        token_addresses: Sequence[str],
        owner_addresses: Sequence[str],
        caller: str | None = None,
    ) -> list[int]:
        assertions.is_equal_length(
            token_addresses, owner_addresses,
            "Token addresses and owner addresses must be equal length.",
        )
        viewer = await self._load(caller)
        balances = await viewer.call(
            "batchFetchBalancesOf", list(token_addresses), list(owner_addresses)
        )
        return [int(b) for b in balances]

    async def batch_fetch_allowances(
        self,
        token_addresses: Sequence[str],
        owner_addresses: Sequence[str],
        spender_addresses: Sequence[str],
        caller: str | None = None,
    ) -> list[int]:
        message = "Token, owner and spender addresses must be equal length."
        assertions.is_equal_length(token_addresses, owner_addresses, message)
        assertions.is_equal_length(token_addresses, spender_addresses, message)
        viewer = await self._load(caller)
        allowances = await viewer.call(
            "batchFetchAllowances",
            list(token_addresses),
            list(owner_addresses),
            list(spender_addresses),
        )
        return [int(a) for a in allowances]

    async def batch_fetch_module_states(
        self,
        set_token_addresses: Sequence[str],
        module_addresses: Sequence[str],
        caller: str | None = None,
    ) -> list[list[ModuleState]]:
        viewer = await self._load(caller)
        states = await viewer.call(
            "batchFetchModuleStates", list(set_token_addresses), list(module_addresses)
        )
        return [[ModuleState(int(s)) for s in row] for row in states]

    async def batch_fetch_managers(
        self, set_token_addresses: Sequence[str], caller: str | None = None
    ) -> list[str]:
        viewer = await self._load(caller)
        return list(await viewer.call("batchFetchManagers", list(set_token_addresses)))

    async def batch_fetch_streaming_fee_info(
        self, set_token_addresses: Sequence[str], caller: str | None = None
    ) -> list[StreamingFeeInfo]:
        viewer = await self._load(caller)
        infos = await viewer.call(
            "batchFetchStreamingFeeInfo",
            self._streaming_fee_module_address,
            list(set_token_addresses),
        )
        return [StreamingFeeInfo.from_tuple(info) for info in infos]

    async def get_set_details(
        self,
        set_token_address: str,
        module_addresses: Sequence[str],
        caller: str | None = None,
    ) -> SetDetails:
        viewer = await self._load(caller)
        raw = await viewer.call("getSetDetails", set_token_address, list(module_addresses))
        return SetDetails.from_tuple(raw)

    async def batch_fetch_details(
        self,
        set_token_addresses: Sequence[str],
        module_addresses: Sequence[str],
        caller: str | None = None,
    ) -> list[SetDetails]:
        viewer = await self._load(caller)
        raw_details = await viewer.call(
            "batchFetchDetails", list(set_token_addresses), list(module_addresses)
        )
        return [SetDetails.from_tuple(raw) for raw in raw_details]
