"""Trade API: TradeModule transactions and 0x-backed trade quotes."""
from __future__ import annotations

from decimal import Decimal
from typing import Any

from .. import assertions
from ..interfaces.token_list import TokenListProvider
from ..models import TokenInfo, TradeQuote
from ..trade.quoter import TradeQuoter
from ..wrappers.trade_module import TradeModuleWrapper


class TradeAPI:
    def __init__(
        self,
        trade_module: TradeModuleWrapper,
        quoter: TradeQuoter,
        token_list: TokenListProvider,
    ) -> None:
        self._trade_module = trade_module
        self._quoter = quoter
        self._token_list = token_list

    async def initialize(
        self,
        set_address: str,
        caller: str | None = None,
        tx_opts: dict[str, Any] | None = None,
    ) -> Any:
        assertions.is_valid_address("setAddress", set_address)
        return await self._trade_module.initialize(set_address, caller, tx_opts)

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
        """Execute a trade, typically with the values of a ``TradeQuote``."""
        assertions.is_valid_address("setAddress", set_address)
        assertions.is_valid_address("sendToken", send_token)
        assertions.is_valid_address("receiveToken", receive_token)
        if not exchange_name:
            raise ValueError("Exchange adapter name must not be empty")
        if send_quantity <= 0:
            raise ValueError(f"sendQuantity must be greater than 0. Got {send_quantity}")
        if min_receive_quantity < 0:
            raise ValueError(f"minReceiveQuantity must not be negative. Got {min_receive_quantity}")

        return await self._trade_module.trade(
            set_address,
            exchange_name,
            send_token,
            send_quantity,
            receive_token,
            min_receive_quantity,
            data,
            caller,
            tx_opts,
        )

    async def fetch_trade_quote(
        self,
        from_token: str,
        to_token: str,
        raw_amount: str,
        set_token: str,
        from_token_decimals: int | None = None,
        to_token_decimals: int | None = None,
        gas_price: Decimal | float | None = None,
        slippage_percentage: float | None = None,
        fee_percentage: float | None = None,
        fee_recipient: str | None = None,
        is_firm_quote: bool | None = None,
        excluded_sources: list[str] | None = None,
    ) -> TradeQuote:
        return await self._quoter.generate_quote(
            from_token,
            to_token,
            raw_amount,
            set_token,
            from_token_decimals=from_token_decimals,
            to_token_decimals=to_token_decimals,
            gas_price=gas_price,
            slippage_percentage=slippage_percentage,
            fee_percentage=fee_percentage,
            fee_recipient=fee_recipient,
            is_firm_quote=is_firm_quote,
            excluded_sources=excluded_sources,
        )

    async def fetch_token_list(self) -> list[TokenInfo]:
        return await self._token_list.fetch_token_list()
