"""StreamingFeeModule wrapper."""
from __future__ import annotations

from typing import Any

from ..models import FeeState
from .contract_wrapper import ContractWrapper


class StreamingFeeModuleWrapper:
    def __init__(self, contracts: ContractWrapper, module_address: str) -> None:
        self._contracts = contracts
        self._module_address = module_address

    async def _load(self, caller: str | None):
        return await self._contracts.load_streaming_fee_module(self._module_address, caller)

    async def initialize(
        self,
        set_address: str,
        settings: FeeState,
        caller: str | None = None,
        tx_opts: dict[str, Any] | None = None,
    ) -> Any:
        module = await self._load(caller)
        return await module.transact(
            "initialize", set_address, settings.as_tuple(), tx_opts=tx_opts
        )

    async def accrue_fee(
        self,
        set_address: str,
        caller: str | None = None,
        tx_opts: dict[str, Any] | None = None,
    ) -> Any:
        module = await self._load(caller)
        return await module.transact("accrueFee", set_address, tx_opts=tx_opts)

    async def update_streaming_fee(
        self,
        set_address: str,
        new_fee: int,
        caller: str | None = None,
        tx_opts: dict[str, Any] | None = None,
    ) -> Any:
        module = await self._load(caller)
        return await module.transact("updateStreamingFee", set_address, new_fee, tx_opts=tx_opts)

    async def update_fee_recipient(
        self,
        set_address: str,
        new_fee_recipient: str,
        caller: str | None = None,
        tx_opts: dict[str, Any] | None = None,
    ) -> Any:
        module = await self._load(caller)
        return await module.transact(
            "updateFeeRecipient", set_address, new_fee_recipient, tx_opts=tx_opts
        )

    async def fee_states(self, set_address: str, caller: str | None = None) -> FeeState:
        module = await self._load(caller)
        recipient, max_fee, fee, last_timestamp = await module.call("feeStates", set_address)
        return FeeState(
            fee_recipient=recipient,
            max_streaming_fee_percentage=int(max_fee),
            streaming_fee_percentage=int(fee),
            last_streaming_fee_timestamp=int(last_timestamp),
        )

    async def get_fee(self, set_address: str, caller: str | None = None) -> int:
        """Unaccrued fee, as a percentage of supply scaled by 1e18."""
        module = await self._load(caller)
        return int(await module.call("getFee", set_address))
