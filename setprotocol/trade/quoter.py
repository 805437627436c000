"""Trade-quote aggregation: swap quote + gas + prices → display-ready quote."""
from __future__ import annotations

import asyncio
import logging
from decimal import Decimal

from .. import assertions
from ..chains.networks import NetworkInfo
from ..config import TradeQuoteConfig
from ..interfaces.gas_oracle import GasOracle
from ..interfaces.price_oracle import PriceOracle
from ..interfaces.swap_quoter import SwapQuoter
from ..interfaces.token_list import TokenListProvider
from ..models import TradeQuote, TradeQuoteDisplay
from ..wrappers.erc20 import ERC20Wrapper
from ..wrappers.protocol_viewer import ProtocolViewerWrapper
from ..wrappers.trade_module import TradeModuleWrapper
from . import calculations as calc

logger = logging.getLogger(__name__)


class TradeQuoter:
    """Build TradeModule trade quotes for a SetToken.

    Every remote request must succeed; the first failure aborts the quote.
    """

    def __init__(
        self,
        network: NetworkInfo,
        config: TradeQuoteConfig,
        protocol_viewer: ProtocolViewerWrapper,
        trade_module: TradeModuleWrapper,
        erc20: ERC20Wrapper,
        swap_quoter: SwapQuoter,
        gas_oracle: GasOracle,
        price_oracle: PriceOracle,
        token_list: TokenListProvider,
    ) -> None:
        self._network = network
        self._config = config
        self._protocol_viewer = protocol_viewer
        self._trade_module = trade_module
        self._erc20 = erc20
        self._swap_quoter = swap_quoter
        self._gas_oracle = gas_oracle
        self._price_oracle = price_oracle
        self._token_list = token_list

    async def _resolve_decimals(
        self, from_token: str, to_token: str, from_decimals: int | None, to_decimals: int | None
    ) -> tuple[int, int]:
        if from_decimals is not None and to_decimals is not None:
            return from_decimals, to_decimals

        tokens = {t.address.lower(): t.decimals for t in await self._token_list.fetch_token_list()}

        async def lookup(address: str, known: int | None) -> int:
            if known is not None:
                return known
            if address.lower() in tokens:
                return tokens[address.lower()]
            logger.debug("Token %s not in token list, reading decimals on-chain", address)
            return await self._erc20.decimals(address)

        return await lookup(from_token, from_decimals), await lookup(to_token, to_decimals)

    async def _gas_price(self, gas_price: Decimal | None) -> Decimal:
        if gas_price is not None:
            return gas_price
        return await self._gas_oracle.fetch_gas_price()

    async def generate_quote(
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
        """Quote trading ``raw_amount`` of ``from_token`` held by ``set_token``."""
        cfg = self._config
        slippage = Decimal(str(cfg.slippage_percentage if slippage_percentage is None else slippage_percentage))
        fee = Decimal(str(cfg.fee_percentage if fee_percentage is None else fee_percentage))
        fee_recipient = cfg.fee_recipient if fee_recipient is None else fee_recipient
        is_firm_quote = cfg.is_firm_quote if is_firm_quote is None else is_firm_quote

        assertions.is_valid_address("fromToken", from_token)
        assertions.is_valid_address("toToken", to_token)
        assertions.is_valid_address("setToken", set_token)
        assertions.is_valid_percentage("slippagePercentage", slippage)
        assertions.is_valid_percentage("feePercentage", fee)
        if fee_recipient:
            assertions.is_valid_address("feeRecipient", fee_recipient)
        if slippage + fee >= 100:
            raise ValueError("Slippage and fee percentages must sum to less than 100")

        from_decimals, to_decimals = await self._resolve_decimals(
            from_token, to_token, from_token_decimals, to_token_decimals
        )
        amount = calc.sanitize_amount(raw_amount, from_decimals)

        set_details = await self._protocol_viewer.get_set_details(
            set_token, [self._trade_module.address]
        )
        max_amount = calc.max_trade_amount(set_details, from_token)
        if amount > max_amount:
            raise ValueError(
                f"Amount {raw_amount} exceeds the Set's {from_token} position ({max_amount})"
            )

        total_supply = set_details.total_supply
        from_units = calc.amount_to_units(amount, total_supply)
        request_amount = calc.units_to_amount(from_units, total_supply)

        currency = self._network.currency_address
        swap_quote, gas_price_gwei, prices = await asyncio.gather(
            self._swap_quoter.fetch_quote(
                from_token,
                to_token,
                request_amount,
                float(slippage),
                is_firm_quote=is_firm_quote,
                fee_percentage=float(fee),
                fee_recipient=fee_recipient,
                excluded_sources=excluded_sources,
            ),
            self._gas_price(None if gas_price is None else Decimal(str(gas_price))),
            self._price_oracle.fetch_token_prices([currency, from_token, to_token]),
        )

        to_units = calc.min_receive_units(swap_quote.buy_amount, slippage, fee, total_supply)

        estimated_gas = await self._trade_module.estimate_gas_for_trade(
            set_token,
            cfg.exchange_adapter_name,
            from_token,
            from_units,
            to_token,
            to_units,
            swap_quote.calldata,
            caller=set_details.manager,
        )
        gas = calc.apply_gas_buffer(estimated_gas, cfg.gas_buffer_percentage)

        from_price = prices.get(from_token.lower(), Decimal(0))
        to_price = prices.get(to_token.lower(), Decimal(0))
        currency_price = prices.get(currency.lower(), Decimal(0))

        from_usd = calc.usd_value(swap_quote.sell_amount, from_decimals, from_price)
        to_usd = calc.usd_value(swap_quote.buy_amount, to_decimals, to_price)
        gas_cost = calc.gas_cost_in_chain_currency(gas, gas_price_gwei)
        gas_cost_usd = gas_cost * currency_price

        quote = TradeQuote(
            from_address=set_token,
            from_token_address=from_token,
            to_token_address=to_token,
            exchange_adapter_name=cfg.exchange_adapter_name,
            calldata=swap_quote.calldata,
            gas=str(gas),
            gas_price=calc.format_decimal(gas_price_gwei),
            slippage_percentage=calc.format_percentage(slippage),
            from_token_amount=str(from_units),
            to_token_amount=str(to_units),
            display=TradeQuoteDisplay(
                input_amount_raw=str(raw_amount),
                input_amount=str(amount),
                quote_amount=str(swap_quote.sell_amount),
                from_token_display_amount=calc.format_decimal(
                    calc.token_display_amount(swap_quote.sell_amount, from_decimals)
                ),
                to_token_display_amount=calc.format_decimal(
                    calc.token_display_amount(swap_quote.buy_amount, to_decimals)
                ),
                from_token_price_usd=calc.format_usd(from_usd),
                to_token_price_usd=calc.format_usd(to_usd),
                gas_costs_usd=calc.format_usd(gas_cost_usd),
                gas_costs_chain_currency=calc.format_chain_currency(
                    gas_cost, self._network.currency_symbol
                ),
                fee_percentage=calc.format_percentage(fee),
                slippage=calc.format_percentage(calc.calculate_slippage(from_usd, to_usd)),
            ),
        )

        logger.info(
            "Trade quote for %s: %s %s → %s %s (slippage %s, gas %s)",
            set_details.symbol,
            quote.display.from_token_display_amount,
            from_token,
            quote.display.to_token_display_amount,
            to_token,
            quote.display.slippage,
            quote.display.gas_costs_usd,
        )
        return quote
