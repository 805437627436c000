"""Typed wrappers over the Set Protocol v2 contracts."""
from .basic_issuance_module import BasicIssuanceModuleWrapper
from .contract_wrapper import ContractHandle, ContractWrapper
from .controller import ControllerWrapper
from .erc20 import ERC20Wrapper
from .protocol_viewer import ProtocolViewerWrapper
from .set_token import SetTokenWrapper
from .set_token_creator import SetTokenCreatorWrapper
from .streaming_fee_module import StreamingFeeModuleWrapper
from .trade_module import TradeModuleWrapper

__all__ = [
    "BasicIssuanceModuleWrapper",
    "ContractHandle",
    "ContractWrapper",
    "ControllerWrapper",
    "ERC20Wrapper",
    "ProtocolViewerWrapper",
    "SetTokenWrapper",
    "SetTokenCreatorWrapper",
    "StreamingFeeModuleWrapper",
    "TradeModuleWrapper",
]
