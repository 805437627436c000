"""SetToken wrapper: one method per SetToken contract function."""
from __future__ import annotations

from typing import Any

from ..models import ModuleState, Position
from .contract_wrapper import ContractWrapper


class SetTokenWrapper:
    """Handles all functions on the SetToken smart contract.

    Reverts (for example "Only manager can call" or "Module must be
    pending") are raised by web3 as ``ContractLogicError`` and are not
    interpreted here.
    """

    def __init__(self, contracts: ContractWrapper) -> None:
        self._contracts = contracts

    async def controller(self, set_address: str, caller: str | None = None) -> str:
        set_token = await self._contracts.load_set_token(set_address, caller)
        return await set_token.call("controller")

    async def manager(self, set_address: str, caller: str | None = None) -> str:
        set_token = await self._contracts.load_set_token(set_address, caller)
        return await set_token.call("manager")

    async def get_positions(
        self, set_address: str, caller: str | None = None
    ) -> list[Position]:
        set_token = await self._contracts.load_set_token(set_address, caller)
        raw_positions = await set_token.call("getPositions")
        return [Position.from_tuple(raw) for raw in raw_positions]

    async def get_modules(self, set_address: str, caller: str | None = None) -> list[str]:
        set_token = await self._contracts.load_set_token(set_address, caller)
        return list(await set_token.call("getModules"))

    async def get_components(
        self, set_address: str, caller: str | None = None
    ) -> list[str]:
        set_token = await self._contracts.load_set_token(set_address, caller)
        return list(await set_token.call("getComponents"))

    async def is_component(
        self, set_address: str, component: str, caller: str | None = None
    ) -> bool:
        set_token = await self._contracts.load_set_token(set_address, caller)
        return await set_token.call("isComponent", component)

    async def module_states(
        self, set_address: str, module_address: str, caller: str | None = None
    ) -> ModuleState:
        set_token = await self._contracts.load_set_token(set_address, caller)
        return ModuleState(int(await set_token.call("moduleStates", module_address)))

    async def get_default_position_real_unit(
        self, set_address: str, component: str, caller: str | None = None
    ) -> int:
        set_token = await self._contracts.load_set_token(set_address, caller)
        return int(await set_token.call("getDefaultPositionRealUnit", component))

    async def get_total_component_real_units(
        self, set_address: str, component: str, caller: str | None = None
    ) -> int:
        set_token = await self._contracts.load_set_token(set_address, caller)
        return int(await set_token.call("getTotalComponentRealUnits", component))

    async def is_initialized_module(
        self, set_address: str, module_address: str, caller: str | None = None
    ) -> bool:
        set_token = await self._contracts.load_set_token(set_address, caller)
        return await set_token.call("isInitializedModule", module_address)

    async def is_pending_module(
        self, set_address: str, module_address: str, caller: str | None = None
    ) -> bool:
        set_token = await self._contracts.load_set_token(set_address, caller)
        return await set_token.call("isPendingModule", module_address)

    # ------------------------------------------------------------------
    # Transactions
    # ------------------------------------------------------------------

    async def add_module(
        self,
        set_address: str,
        module_address: str,
        caller: str | None = None,
        tx_opts: dict[str, Any] | None = None,
    ) -> Any:
        """Add a module; only the manager may call. Leaves it PENDING."""
        set_token = await self._contracts.load_set_token(set_address, caller)
        return await set_token.transact("addModule", module_address, tx_opts=tx_opts)

    async def remove_module(
        self,
        set_address: str,
        module_address: str,
        caller: str | None = None,
        tx_opts: dict[str, Any] | None = None,
    ) -> Any:
        set_token = await self._contracts.load_set_token(set_address, caller)
        return await set_token.transact("removeModule", module_address, tx_opts=tx_opts)

    async def set_manager(
        self,
        set_address: str,
        manager_address: str,
        caller: str | None = None,
        tx_opts: dict[str, Any] | None = None,
    ) -> Any:
        set_token = await self._contracts.load_set_token(set_address, caller)
        return await set_token.transact("setManager", manager_address, tx_opts=tx_opts)

    async def initialize_module(
        self,
        set_address: str,
        caller: str | None = None,
        tx_opts: dict[str, Any] | None = None,
    ) -> Any:
        """Initialize the calling module, moving it from PENDING to INITIALIZED."""
        set_token = await self._contracts.load_set_token(set_address, caller)
        return await set_token.transact("initializeModule", tx_opts=tx_opts)
