"""TradeModule wrapper."""
from __future__ import annotations

from typing import Any

from .contract_wrapper import ContractWrapper


class TradeModuleWrapper:
    def __init__(self, contracts: ContractWrapper, trade_module_address: str) -> None:
        self._contracts = contracts
        self._trade_module_address = trade_module_address

    @property
    def address(self) -> str:
        return self._trade_module_address

    async def initialize(
        self,
        set_address: str,
        caller: str | None = None,
        tx_opts: dict[str, Any] | None = None,
    ) -> Any:
        module = await self._contracts.load_trade_module(self._trade_module_address, caller)
        return await module.transact("initialize", set_address, tx_opts=tx_opts)

    async def trade(
        self,
        set_address: str,
        exchange_name: str,
        send_token: str,
        send_quantity: int,
        receive_token: str,
        min_receive_quantity: int,
        data: str,
        caller: str | None = None,
        tx_opts: dict[str, Any] | None = None,
    ) -> Any:
        """Swap ``send_quantity`` units of ``send_token`` held by the Set."""
        module = await self._contracts.load_trade_module(self._trade_module_address, caller)
        return await module.transact(
            "trade",
            set_address,
            exchange_name,
            send_token,
            send_quantity,
            receive_token,
            min_receive_quantity,
            data,
            tx_opts=tx_opts,
        )

    async def estimate_gas_for_trade(
        self,
        set_address: str,
        exchange_name: str,
        send_token: str,
        send_quantity: int,
        receive_token: str,
        min_receive_quantity: int,
        data: str,
        caller: str | None = None,
    ) -> int:
        module = await self._contracts.load_trade_module(self._trade_module_address, caller)
        return await module.estimate_gas(
            "trade",
            set_address,
            exchange_name,
            send_token,
            send_quantity,
            receive_token,
            min_receive_quantity,
            data,
        )
