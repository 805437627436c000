"""Streaming fee API."""
from __future__ import annotations

from typing import Any

from .. import assertions
from ..models import FeeState
from ..wrappers.streaming_fee_module import StreamingFeeModuleWrapper

# Fee percentages are 18-decimal fixed point: 10**16 is 1%
MAX_FEE_PERCENTAGE = 10**18


def _is_valid_fee(name: str, fee: int) -> None:
    if not 0 <= fee <= MAX_FEE_PERCENTAGE:
        raise ValueError(f"{name} must be between 0 and {MAX_FEE_PERCENTAGE}. Got {fee}")


class FeeAPI:
    def __init__(self, streaming_fee_module: StreamingFeeModuleWrapper) -> None:
        self._streaming_fee_module = streaming_fee_module

    async def initialize_streaming_fee(
        self,
        set_address: str,
        settings: FeeState,
        caller: str | None = None,
        tx_opts: dict[str, Any] | None = None,
    ) -> Any:
        assertions.is_valid_address("setAddress", set_address)
        assertions.is_valid_address("feeRecipient", settings.fee_recipient)
        _is_valid_fee("maxStreamingFeePercentage", settings.max_streaming_fee_percentage)
        _is_valid_fee("streamingFeePercentage", settings.streaming_fee_percentage)
        if settings.streaming_fee_percentage > settings.max_streaming_fee_percentage:
            raise ValueError("Streaming fee must not exceed the max streaming fee")
        return await self._streaming_fee_module.initialize(set_address, settings, caller, tx_opts)

    async def accrue_fee(
        self,
        set_address: str,
        caller: str | None = None,
        tx_opts: dict[str, Any] | None = None,
    ) -> Any:
        assertions.is_valid_address("setAddress", set_address)
        return await self._streaming_fee_module.accrue_fee(set_address, caller, tx_opts)

    async def update_streaming_fee(
        self,
        set_address: str,
        new_fee: int,
        caller: str | None = None,
        tx_opts: dict[str, Any] | None = None,
    ) -> Any:
        assertions.is_valid_address("setAddress", set_address)
        _is_valid_fee("newFee", new_fee)
        return await self._streaming_fee_module.update_streaming_fee(
            set_address, new_fee, caller, tx_opts
        )

    async def update_fee_recipient(
        self,
        set_address: str,
        new_fee_recipient: str,
        caller: str | None = None,
        tx_opts: dict[str, Any] | None = None,
    ) -> Any:
        assertions.is_valid_address("setAddress", set_address)
        assertions.is_valid_address("newFeeRecipient", new_fee_recipient)
        return await self._streaming_fee_module.update_fee_recipient(
            set_address, new_fee_recipient, caller, tx_opts
        )

    async def get_fee_state(self, set_address: str, caller: str | None = None) -> FeeState:
        assertions.is_valid_address("setAddress", set_address)
        return await self._streaming_fee_module.fee_states(set_address, caller)

    async def get_unaccrued_fee(self, set_address: str, caller: str | None = None) -> int:
        assertions.is_valid_address("setAddress", set_address)
        return await self._streaming_fee_module.get_fee(set_address, caller)
