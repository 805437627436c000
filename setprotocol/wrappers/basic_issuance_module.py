"""BasicIssuanceModule wrapper."""
from __future__ import annotations

from typing import Any

from .contract_wrapper import ContractWrapper

NULL_ADDRESS = "0x0000000000000000000000000000000000000000"


class BasicIssuanceModuleWrapper:
    def __init__(self, contracts: ContractWrapper, module_address: str) -> None:
        self._contracts = contracts
        self._module_address = module_address

    async def initialize(
        self,
        set_address: str,
        pre_issuance_hook: str = NULL_ADDRESS,
        caller: str | None = None,
        tx_opts: dict[str, Any] | None = None,
    ) -> Any:
        module = await self._contracts.load_basic_issuance_module(
            self._module_address, caller
        )
        return await module.transact(
            "initialize", set_address, pre_issuance_hook, tx_opts=tx_opts
        )

    async def issue(
        self,
        set_address: str,
        quantity: int,
        recipient: str,
        caller: str | None = None,
        tx_opts: dict[str, Any] | None = None,
    ) -> Any:
        module = await self._contracts.load_basic_issuance_module(
            self._module_address, caller
        )
        return await module.transact("issue", set_address, quantity, recipient, tx_opts=tx_opts)

    async def redeem(
        self,
        set_address: str,
        quantity: int,
        recipient: str,
        caller: str | None = None,
        tx_opts: dict[str, Any] | None = None,
    ) -> Any:
        module = await self._contracts.load_basic_issuance_module(
            self._module_address, caller
        )
        return await module.transact("redeem", set_address, quantity, recipient, tx_opts=tx_opts)

    async def get_required_component_units_for_issue(
        self, set_address: str, quantity: int, caller: str | None = None
    ) -> tuple[list[str], list[int]]:
        module = await self._contracts.load_basic_issuance_module(
            self._module_address, caller
        )
        components, units = await module.call(
            "getRequiredComponentUnitsForIssue", set_address, quantity
        )
        return list(components), [int(u) for u in units]
