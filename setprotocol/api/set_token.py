"""SetToken API: create Sets, read their state and manage their modules."""
from __future__ import annotations

from dataclasses import fields
from typing import Any, Sequence

from .. import assertions
from ..models import ModuleState, Position, SetDetails, SetDetailsWithStreamingInfo
from ..wrappers.protocol_viewer import ProtocolViewerWrapper
from ..wrappers.set_token import SetTokenWrapper
from ..wrappers.set_token_creator import SetTokenCreatorWrapper


class SetTokenAPI:
    """Validated entry points for SetToken creation, reads and module management.

    Arguments are checked before any contract call; contract reverts
    propagate unchanged.
    """

    def __init__(
        self,
        set_token: SetTokenWrapper,
        creator: SetTokenCreatorWrapper,
        protocol_viewer: ProtocolViewerWrapper,
        streaming_fee_module_address: str,
    ) -> None:
        self._set_token = set_token
        self._creator = creator
        self._protocol_viewer = protocol_viewer
        self._streaming_fee_module_address = streaming_fee_module_address

    # ------------------------------------------------------------------
    # Creation
    # ------------------------------------------------------------------

    async def create(
        self,
        component_addresses: Sequence[str],
        units: Sequence[int],
        module_addresses: Sequence[str],
        manager_address: str,
        name: str,
        symbol: str,
        caller: str | None = None,
        tx_opts: dict[str, Any] | None = None,
    ) -> Any:
        assertions.is_not_empty_list(
            component_addresses, "Component addresses must contain at least one component."
        )
        assertions.is_equal_length(
            component_addresses, units, "Component addresses and units must be equal length."
        )
        assertions.is_valid_address_list("componentAddresses", component_addresses)
        assertions.is_valid_address_list("moduleAddresses", module_addresses)
        assertions.is_valid_address("managerAddress", manager_address)

        return await self._creator.create(
            component_addresses,
            units,
            module_addresses,
            manager_address,
            name,
            symbol,
            caller=caller,
            tx_opts=tx_opts,
        )

    async def get_set_address_from_create_hash(self, tx_hash: str) -> str:
        assertions.is_valid_bytes32("txHash", tx_hash)
        return await self._creator.get_created_set_address(tx_hash)

    # ------------------------------------------------------------------
    # Batched reads
    # ------------------------------------------------------------------

    async def fetch_set_details(
        self,
        set_token_address: str,
        module_addresses: Sequence[str],
        caller: str | None = None,
    ) -> SetDetails | SetDetailsWithStreamingInfo:
        """Set details, plus streaming fee info when the Set uses the fee module."""
        assertions.is_valid_address("setTokenAddress", set_token_address)
        assertions.is_valid_address_list("moduleAddresses", module_addresses)

        details = await self._protocol_viewer.get_set_details(
            set_token_address, module_addresses, caller
        )

        fee_module = self._streaming_fee_module_address
        if not fee_module or fee_module.lower() not in {m.lower() for m in details.modules}:
            return details

        [fee_info] = await self._protocol_viewer.batch_fetch_streaming_fee_info(
            [set_token_address], caller
        )
        return SetDetailsWithStreamingInfo(
            **{f.name: getattr(details, f.name) for f in fields(details)},
            fee_recipient=fee_info.fee_recipient,
            streaming_fee_percentage=fee_info.streaming_fee_percentage,
            unaccrued_fees=fee_info.unaccrued_fees,
        )

    async def batch_fetch_set_details(
        self,
        set_token_addresses: Sequence[str],
        module_addresses: Sequence[str],
        caller: str | None = None,
    ) -> list[SetDetails]:
        assertions.is_valid_address_list("setTokenAddresses", set_token_addresses)
        assertions.is_valid_address_list("moduleAddresses", module_addresses)
        return await self._protocol_viewer.batch_fetch_details(
            set_token_addresses, module_addresses, caller
        )

    async def batch_fetch_managers(
        self, set_token_addresses: Sequence[str], caller: str | None = None
    ) -> list[str]:
        assertions.is_valid_address_list("setTokenAddresses", set_token_addresses)
        return await self._protocol_viewer.batch_fetch_managers(set_token_addresses, caller)

    async def batch_fetch_balances_of(
        self,
        token_addresses: Sequence[str],
        user_address: str,
        caller: str | None = None,
    ) -> list[int]:
        assertions.is_valid_address("userAddress", user_address)
        assertions.is_valid_address_list("tokenAddress", token_addresses)
        owners = [user_address] * len(token_addresses)
        return await self._protocol_viewer.batch_fetch_balances_of(
            token_addresses, owners, caller
        )

    async def batch_fetch_allowances(
        self,
        token_addresses: Sequence[str],
        owner_address: str,
        spender_address: str,
        caller: str | None = None,
    ) -> list[int]:
        assertions.is_valid_address("ownerAddress", owner_address)
        assertions.is_valid_address("spenderAddress", spender_address)
        assertions.is_valid_address_list("tokenAddress", token_addresses)
        owners = [owner_address] * len(token_addresses)
        spenders = [spender_address] * len(token_addresses)
        return await self._protocol_viewer.batch_fetch_allowances(
            token_addresses, owners, spenders, caller
        )

    # ------------------------------------------------------------------
    # Single-Set reads
    # ------------------------------------------------------------------

    async def get_controller_address(self, set_address: str) -> str:
        assertions.is_valid_address("setAddress", set_address)
        return await self._set_token.controller(set_address)

    async def get_manager_address(self, set_address: str) -> str:
        assertions.is_valid_address("setAddress", set_address)
        return await self._set_token.manager(set_address)

    async def get_positions(
        self, set_address: str, caller: str | None = None
    ) -> list[Position]:
        assertions.is_valid_address("setAddress", set_address)
        return await self._set_token.get_positions(set_address, caller)

    async def get_modules(self, set_address: str, caller: str | None = None) -> list[str]:
        assertions.is_valid_address("setAddress", set_address)
        return await self._set_token.get_modules(set_address, caller)

    async def get_module_state(
        self, set_address: str, module_address: str, caller: str | None = None
    ) -> ModuleState:
        assertions.is_valid_address("setAddress", set_address)
        assertions.is_valid_address("moduleAddress", module_address)
        return await self._set_token.module_states(set_address, module_address, caller)

    async def is_module_enabled(
        self, set_address: str, module_address: str, caller: str | None = None
    ) -> bool:
        assertions.is_valid_address("setAddress", set_address)
        assertions.is_valid_address("moduleAddress", module_address)
        return await self._set_token.is_initialized_module(set_address, module_address, caller)

    async def is_module_pending(
        self, set_address: str, module_address: str, caller: str | None = None
    ) -> bool:
        assertions.is_valid_address("setAddress", set_address)
        assertions.is_valid_address("moduleAddress", module_address)
        return await self._set_token.is_pending_module(set_address, module_address, caller)

    # ------------------------------------------------------------------
    # Module management
    # ------------------------------------------------------------------

    async def add_module(
        self,
        set_address: str,
        module_address: str,
        caller: str | None = None,
        tx_opts: dict[str, Any] | None = None,
    ) -> Any:
        assertions.is_valid_address("setAddress", set_address)
        assertions.is_valid_address("moduleAddress", module_address)
        return await self._set_token.add_module(set_address, module_address, caller, tx_opts)

    async def set_manager(
        self,
        set_address: str,
        manager_address: str,
        caller: str | None = None,
        tx_opts: dict[str, Any] | None = None,
    ) -> Any:
        assertions.is_valid_address("setAddress", set_address)
        assertions.is_valid_address("managerAddress", manager_address)
        return await self._set_token.set_manager(set_address, manager_address, caller, tx_opts)

    async def initialize_module(
        self,
        set_address: str,
        caller: str | None = None,
        tx_opts: dict[str, Any] | None = None,
    ) -> Any:
        assertions.is_valid_address("setAddress", set_address)
        return await self._set_token.initialize_module(set_address, caller, tx_opts)
