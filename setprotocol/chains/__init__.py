from .evm import build_web3
from .networks import ETHEREUM, POLYGON, NetworkInfo, get_network

__all__ = ["build_web3", "ETHEREUM", "POLYGON", "NetworkInfo", "get_network"]
