"""EVM node connection."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import aiohttp
from web3 import AsyncHTTPProvider, AsyncWeb3

if TYPE_CHECKING:
    from ..config import ChainConfig

logger = logging.getLogger(__name__)


def build_web3(config: ChainConfig) -> AsyncWeb3:
    """Create an AsyncWeb3 bound to the configured JSON-RPC endpoint."""
    provider = AsyncHTTPProvider(
        config.rpc_url,
        request_kwargs={"timeout": aiohttp.ClientTimeout(total=config.rpc_timeout)},
    )
    logger.debug("Connecting to chain %s via %s", config.chain_id, config.rpc_url)
    return AsyncWeb3(provider)
