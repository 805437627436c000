"""ERC20 wrapper."""
from __future__ import annotations

from typing import Any

from .contract_wrapper import ContractWrapper


class ERC20Wrapper:
    def __init__(self, contracts: ContractWrapper) -> None:
        self._contracts = contracts

    async def name(self, token_address: str, caller: str | None = None) -> str:
        token = await self._contracts.load_erc20(token_address, caller)
        return await token.call("name")

    async def symbol(self, token_address: str, caller: str | None = None) -> str:
        token = await self._contracts.load_erc20(token_address, caller)
        return await token.call("symbol")

    async def decimals(self, token_address: str, caller: str | None = None) -> int:
        token = await self._contracts.load_erc20(token_address, caller)
        return int(await token.call("decimals"))

    async def total_supply(self, token_address: str, caller: str | None = None) -> int:
        token = await self._contracts.load_erc20(token_address, caller)
        return int(await token.call("totalSupply"))

    async def balance_of(
        self, token_address: str, owner_address: str, caller: str | None = None
    ) -> int:
        token = await self._contracts.load_erc20(token_address, caller)
        return int(await token.call("balanceOf", owner_address))

    async def allowance(
        self,
        token_address: str,
        owner_address: str,
        spender_address: str,
        caller: str | None = None,
    ) -> int:
        token = await self._contracts.load_erc20(token_address, caller)
        return int(await token.call("allowance", owner_address, spender_address))

    async def approve(
        self,
        token_address: str,
        spender_address: str,
        amount: int,
        caller: str | None = None,
        tx_opts: dict[str, Any] | None = None,
    ) -> Any:
        token = await self._contracts.load_erc20(token_address, caller)
        return await token.transact("approve", spender_address, amount, tx_opts=tx_opts)

    async def transfer(
        self,
        token_address: str,
        to_address: str,
        amount: int,
        caller: str | None = None,
        tx_opts: dict[str, Any] | None = None,
    ) -> Any:
        token = await self._contracts.load_erc20(token_address, caller)
        return await token.transact("transfer", to_address, amount, tx_opts=tx_opts)
