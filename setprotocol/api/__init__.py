"""Validated, user-facing APIs over the contract wrappers."""
from .erc20 import ERC20API
from .fee import FeeAPI
from .issuance import IssuanceAPI
from .set_token import SetTokenAPI
from .system import SystemAPI
from .trade import TradeAPI

__all__ = ["ERC20API", "FeeAPI", "IssuanceAPI", "SetTokenAPI", "SystemAPI", "TradeAPI"]
