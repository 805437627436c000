"""SetTokenCreator wrapper: deploys and registers new SetTokens."""
from __future__ import annotations

import logging
from typing import Any, Sequence

from .contract_wrapper import ContractWrapper

logger = logging.getLogger(__name__)


class SetTokenCreatorWrapper:
    def __init__(self, contracts: ContractWrapper, creator_address: str) -> None:
        self._contracts = contracts
        self._creator_address = creator_address

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
        creator = await self._contracts.load_set_token_creator(self._creator_address, caller)
        return await creator.transact(
            "create",
            list(component_addresses),
            [int(u) for u in units],
            list(module_addresses),
            manager_address,
            name,
            symbol,
            tx_opts=tx_opts,
        )

    async def get_created_set_address(self, tx_hash: str, caller: str | None = None) -> str:
        """Read the new SetToken address from a create transaction's logs."""
        creator = await self._contracts.load_set_token_creator(self._creator_address, caller)
        receipt = await self._contracts.web3.eth.get_transaction_receipt(tx_hash)
        events = creator.contract.events.SetTokenCreated().process_receipt(receipt)
        if not events:
            raise RuntimeError(f"No SetTokenCreated event in transaction {tx_hash}")
        set_address = events[0]["args"]["_setToken"]
        logger.info("SetToken %s created in %s", set_address, tx_hash)
        return set_address
