"""System API: reads against the protocol Controller."""
from __future__ import annotations

from .. import assertions
from ..wrappers.controller import ControllerWrapper


class SystemAPI:
    def __init__(self, controller: ControllerWrapper) -> None:
        self._controller = controller

    async def get_factories(self) -> list[str]:
        return await self._controller.get_factories()

    async def get_modules(self) -> list[str]:
        return await self._controller.get_modules()

    async def get_resources(self) -> list[str]:
        return await self._controller.get_resources()

    async def get_sets(self) -> list[str]:
        return await self._controller.get_sets()

    async def is_set(self, set_address: str) -> bool:
        assertions.is_valid_address("setAddress", set_address)
        return await self._controller.is_set(set_address)

    async def is_module(self, module_address: str) -> bool:
        assertions.is_valid_address("moduleAddress", module_address)
        return await self._controller.is_module(module_address)
