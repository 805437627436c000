"""ERC20 API."""
from __future__ import annotations

from typing import Any

from .. import assertions
from ..wrappers.erc20 import ERC20Wrapper


class ERC20API:
    def __init__(self, erc20: ERC20Wrapper) -> None:
        self._erc20 = erc20

    async def get_balance(
        self, token_address: str, user_address: str, caller: str | None = None
    ) -> int:
        assertions.is_valid_address("tokenAddress", token_address)
        assertions.is_valid_address("userAddress", user_address)
        return await self._erc20.balance_of(token_address, user_address, caller)

    async def get_allowance(
        self,
        token_address: str,
        owner_address: str,
        spender_address: str,
        caller: str | None = None,
    ) -> int:
        assertions.is_valid_address("tokenAddress", token_address)
        assertions.is_valid_address("ownerAddress", owner_address)
        assertions.is_valid_address("spenderAddress", spender_address)
        return await self._erc20.allowance(token_address, owner_address, spender_address, caller)

    async def get_decimals(self, token_address: str, caller: str | None = None) -> int:
        assertions.is_valid_address("tokenAddress", token_address)
        return await self._erc20.decimals(token_address, caller)

    async def get_total_supply(self, token_address: str, caller: str | None = None) -> int:
        assertions.is_valid_address("tokenAddress", token_address)
        return await self._erc20.total_supply(token_address, caller)

    async def approve(
        self,
        token_address: str,
        spender_address: str,
        amount: int,
        caller: str | None = None,
        tx_opts: dict[str, Any] | None = None,
    ) -> Any:
        assertions.is_valid_address("tokenAddress", token_address)
        assertions.is_valid_address("spenderAddress", spender_address)
        if amount < 0:
            raise ValueError(f"Approval amount must not be negative. Got {amount}")
        return await self._erc20.approve(token_address, spender_address, amount, caller, tx_opts)

    async def transfer(
        self,
        token_address: str,
        to_address: str,
        amount: int,
        caller: str | None = None,
        tx_opts: dict[str, Any] | None = None,
    ) -> Any:
        assertions.is_valid_address("tokenAddress", token_address)
        assertions.is_valid_address("toAddress", to_address)
        if amount <= 0:
            raise ValueError(f"Transfer amount must be positive. Got {amount}")
        return await self._erc20.transfer(token_address, to_address, amount, caller, tx_opts)
