"""Issuance API: mint and redeem Sets through the BasicIssuanceModule."""
from __future__ import annotations

from typing import Any

from .. import assertions
from ..wrappers.basic_issuance_module import NULL_ADDRESS, BasicIssuanceModuleWrapper


def _is_positive(name: str, quantity: int) -> None:
    if quantity <= 0:
        raise ValueError(f"{name} must be greater than 0. Got {quantity}")


class IssuanceAPI:
    """Issuance requires the caller to have approved every component to the module."""

    def __init__(self, issuance_module: BasicIssuanceModuleWrapper) -> None:
        self._issuance_module = issuance_module

    async def initialize(
        self,
        set_address: str,
        pre_issuance_hook: str = NULL_ADDRESS,
        caller: str | None = None,
        tx_opts: dict[str, Any] | None = None,
    ) -> Any:
        assertions.is_valid_address("setAddress", set_address)
        assertions.is_valid_address("preIssuanceHook", pre_issuance_hook)
        return await self._issuance_module.initialize(
            set_address, pre_issuance_hook, caller, tx_opts
        )

    async def issue(
        self,
        set_address: str,
        quantity: int,
        recipient: str,
        caller: str | None = None,
        tx_opts: dict[str, Any] | None = None,
    ) -> Any:
        assertions.is_valid_address("setAddress", set_address)
        assertions.is_valid_address("recipient", recipient)
        _is_positive("quantity", quantity)
        return await self._issuance_module.issue(set_address, quantity, recipient, caller, tx_opts)

    async def redeem(
        self,
        set_address: str,
        quantity: int,
        recipient: str,
        caller: str | None = None,
        tx_opts: dict[str, Any] | None = None,
    ) -> Any:
        assertions.is_valid_address("setAddress", set_address)
        assertions.is_valid_address("recipient", recipient)
        _is_positive("quantity", quantity)
        return await self._issuance_module.redeem(set_address, quantity, recipient, caller, tx_opts)

    async def get_required_component_units_for_issue(
        self, set_address: str, quantity: int, caller: str | None = None
    ) -> tuple[list[str], list[int]]:
        assertions.is_valid_address("setAddress", set_address)
        _is_positive("quantity", quantity)
        return await self._issuance_module.get_required_component_units_for_issue(
            set_address, quantity, caller
        )
