"""Data models: all frozen (immutable) views of remote state."""
from __future__ import annotations

from dataclasses import asdict, dataclass
from decimal import Decimal
from enum import IntEnum
from typing import Any, Sequence


class PositionState(IntEnum):
    DEFAULT = 0
    EXTERNAL = 1


class ModuleState(IntEnum):
    NONE = 0
    PENDING = 1
    INITIALIZED = 2


def _hex(data: bytes | str) -> str:
    if isinstance(data, str):
        return data if data.startswith("0x") else "0x" + data
    return "0x" + bytes(data).hex()


@dataclass(frozen=True)
class Position:
    """Single component holding of a SetToken."""

    component: str
    module: str
    unit: int
    position_state: PositionState = PositionState.DEFAULT
    data: str = "0x"

    @classmethod
    def from_tuple(cls, raw: Sequence[Any]) -> Position:
        component, module, unit, position_state, data = raw
        return cls(
            component=component,
            module=module,
            unit=int(unit),
            position_state=PositionState(int(position_state)),
            data=_hex(data),
        )


@dataclass(frozen=True)
class SetDetails:
    """Snapshot of a SetToken as returned by the ProtocolViewer."""

    name: str
    symbol: str
    manager: str
    modules: tuple[str, ...] = ()
    module_statuses: tuple[ModuleState, ...] = ()
    positions: tuple[Position, ...] = ()
    total_supply: int = 0

    @classmethod
    def from_tuple(cls, raw: Sequence[Any]) -> SetDetails:
        name, symbol, manager, modules, statuses, positions, total_supply = raw
        return cls(
            name=name,
            symbol=symbol,
            manager=manager,
            modules=tuple(modules),
            module_statuses=tuple(ModuleState(int(s)) for s in statuses),
            positions=tuple(Position.from_tuple(p) for p in positions),
            total_supply=int(total_supply),
        )


@dataclass(frozen=True)
class StreamingFeeInfo:
    fee_recipient: str
    streaming_fee_percentage: int
    unaccrued_fees: int

    @classmethod
    def from_tuple(cls, raw: Sequence[Any]) -> StreamingFeeInfo:
        fee_recipient, percentage, unaccrued = raw
        return cls(
            fee_recipient=fee_recipient,
            streaming_fee_percentage=int(percentage),
            unaccrued_fees=int(unaccrued),
        )


@dataclass(frozen=True)
class SetDetailsWithStreamingInfo(SetDetails):
    fee_recipient: str = ""
    streaming_fee_percentage: int = 0
    unaccrued_fees: int = 0


@dataclass(frozen=True)
class FeeState:
    """Streaming fee settings stored by the StreamingFeeModule for one Set."""

    fee_recipient: str
    max_streaming_fee_percentage: int
    streaming_fee_percentage: int
    last_streaming_fee_timestamp: int = 0

    def as_tuple(self) -> tuple[str, int, int, int]:
        return (
            self.fee_recipient,
            self.max_streaming_fee_percentage,
            self.streaming_fee_percentage,
            self.last_streaming_fee_timestamp,
        )


@dataclass(frozen=True)
class TokenInfo:
    chain_id: int
    address: str
    name: str
    symbol: str
    decimals: int
    logo_uri: str | None = None
    volume_usd: Decimal | None = None


@dataclass(frozen=True)
class SwapQuote:
    """Swap provider quote, decoded from the provider's JSON."""

    price: Decimal
    guaranteed_price: Decimal
    buy_amount: int
    sell_amount: int
    gas: int
    calldata: str


@dataclass(frozen=True)
class TradeQuoteDisplay:
    """Presentation strings; never parse these back into numbers."""

    input_amount_raw: str
    input_amount: str
    quote_amount: str
    from_token_display_amount: str
    to_token_display_amount: str
    from_token_price_usd: str
    to_token_price_usd: str
    gas_costs_usd: str
    gas_costs_chain_currency: str
    fee_percentage: str
    slippage: str


@dataclass(frozen=True)
class TradeQuote:
    from_address: str
    from_token_address: str
    to_token_address: str
    exchange_adapter_name: str
    calldata: str
    gas: str
    gas_price: str
    slippage_percentage: str
    from_token_amount: str
    to_token_amount: str
    display: TradeQuoteDisplay

    def to_dict(self) -> dict[str, Any]:
        """Return the quote in the camelCase JSON shape used by Set clients."""
        return {
            "from": self.from_address,
            "fromTokenAddress": self.from_token_address,
            "toTokenAddress": self.to_token_address,
            "exchangeAdapterName": self.exchange_adapter_name,
            "calldata": self.calldata,
            "gas": self.gas,
            "gasPrice": self.gas_price,
            "slippagePercentage": self.slippage_percentage,
            "fromTokenAmount": self.from_token_amount,
            "toTokenAmount": self.to_token_amount,
            "display": {
                _camel(key): value for key, value in asdict(self.display).items()
            },
        }


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)
