"""Controller wrapper: registry of factories, modules, resources and Sets."""
from __future__ import annotations

from .contract_wrapper import ContractWrapper


class ControllerWrapper:
    def __init__(self, contracts: ContractWrapper, controller_address: str) -> None:
        self._contracts = contracts
        self._controller_address = controller_address

    async def _list(self, method: str, caller: str | None) -> list[str]:
        controller = await self._contracts.load_controller(
            self._controller_address, caller
        )
        return list(await controller.call(method))

    async def get_factories(self, caller: str | None = None) -> list[str]:
        return await self._list("getFactories", caller)

    async def get_modules(self, caller: str | None = None) -> list[str]:
        return await self._list("getModules", caller)

    async def get_resources(self, caller: str | None = None) -> list[str]:
        return await self._list("getResources", caller)

    async def get_sets(self, caller: str | None = None) -> list[str]:
        return await self._list("getSets", caller)

    async def is_set(self, set_address: str, caller: str | None = None) -> bool:
        controller = await self._contracts.load_controller(
            self._controller_address, caller
        )
        return await controller.call("isSet", set_address)

    async def is_module(self, module_address: str, caller: str | None = None) -> bool:
        controller = await self._contracts.load_controller(
            self._controller_address, caller
        )
        return await controller.call("isModule", module_address)
