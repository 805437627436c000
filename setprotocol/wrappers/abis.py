"""Minimal ABIs for the Set Protocol v2 contracts used by the wrappers."""
from __future__ import annotations

from typing import Any


def _arg(name: str, type_: str, components: list[dict[str, Any]] | None = None) -> dict[str, Any]:
    arg: dict[str, Any] = {"name": name, "type": type_}
    if components is not None:
        arg["components"] = components
    return arg


def _fn(
    name: str,
    inputs: list[dict[str, Any]],
    outputs: list[dict[str, Any]] | None = None,
    mutability: str = "view",
) -> dict[str, Any]:
    return {
        "type": "function",
        "name": name,
        "inputs": inputs,
        "outputs": outputs or [],
        "stateMutability": mutability,
    }


_ADDRESS_OUT = [_arg("", "address")]
_ADDRESS_LIST_OUT = [_arg("", "address[]")]
_BOOL_OUT = [_arg("", "bool")]
_UINT_OUT = [_arg("", "uint256")]

POSITION_COMPONENTS = [
    _arg("component", "address"),
    _arg("module", "address"),
    _arg("unit", "int256"),
    _arg("positionState", "uint8"),
    _arg("data", "bytes"),
]

SET_DETAILS_COMPONENTS = [
    _arg("name", "string"),
    _arg("symbol", "string"),
    _arg("manager", "address"),
    _arg("modules", "address[]"),
    _arg("moduleStatuses", "uint8[]"),
    _arg("positions", "tuple[]", POSITION_COMPONENTS),
    _arg("totalSupply", "uint256"),
]

FEE_STATE_COMPONENTS = [
    _arg("feeRecipient", "address"),
    _arg("maxStreamingFeePercentage", "uint256"),
    _arg("streamingFeePercentage", "uint256"),
    _arg("lastStreamingFeeTimestamp", "uint256"),
]

STREAMING_FEE_INFO_COMPONENTS = [
    _arg("feeRecipient", "address"),
    _arg("streamingFeePercentage", "uint256"),
    _arg("unaccruedFees", "uint256"),
]

ERC20_ABI = [
    _fn("name", [], [_arg("", "string")]),
    _fn("symbol", [], [_arg("", "string")]),
    _fn("decimals", [], [_arg("", "uint8")]),
    _fn("totalSupply", [], _UINT_OUT),
    _fn("balanceOf", [_arg("account", "address")], _UINT_OUT),
    _fn("allowance", [_arg("owner", "address"), _arg("spender", "address")], _UINT_OUT),
    _fn(
        "approve",
        [_arg("spender", "address"), _arg("amount", "uint256")],
        _BOOL_OUT,
        "nonpayable",
    ),
    _fn(
        "transfer",
        [_arg("recipient", "address"), _arg("amount", "uint256")],
        _BOOL_OUT,
        "nonpayable",
    ),
]

SET_TOKEN_ABI = ERC20_ABI + [
    _fn("controller", [], _ADDRESS_OUT),
    _fn("manager", [], _ADDRESS_OUT),
    _fn("getPositions", [], [_arg("", "tuple[]", POSITION_COMPONENTS)]),
    _fn("getModules", [], _ADDRESS_LIST_OUT),
    _fn("getComponents", [], _ADDRESS_LIST_OUT),
    _fn("isComponent", [_arg("_component", "address")], _BOOL_OUT),
    _fn("moduleStates", [_arg("", "address")], [_arg("", "uint8")]),
    _fn("getDefaultPositionRealUnit", [_arg("_component", "address")], [_arg("", "int256")]),
    _fn("getTotalComponentRealUnits", [_arg("_component", "address")], [_arg("", "int256")]),
    _fn("isInitializedModule", [_arg("_module", "address")], _BOOL_OUT),
    _fn("isPendingModule", [_arg("_module", "address")], _BOOL_OUT),
    _fn("addModule", [_arg("_module", "address")], mutability="nonpayable"),
    _fn("removeModule", [_arg("_module", "address")], mutability="nonpayable"),
    _fn("setManager", [_arg("_manager", "address")], mutability="nonpayable"),
    _fn("initializeModule", [], mutability="nonpayable"),
]

CONTROLLER_ABI = [
    _fn("getFactories", [], _ADDRESS_LIST_OUT),
    _fn("getModules", [], _ADDRESS_LIST_OUT),
    _fn("getResources", [], _ADDRESS_LIST_OUT),
    _fn("getSets", [], _ADDRESS_LIST_OUT),
    _fn("isSet", [_arg("_setToken", "address")], _BOOL_OUT),
    _fn("isModule", [_arg("_module", "address")], _BOOL_OUT),
]

BASIC_ISSUANCE_MODULE_ABI = [
    _fn(
        "initialize",
        [_arg("_setToken", "address"), _arg("_preIssueHook", "address")],
        mutability="nonpayable",
    ),
    _fn(
        "issue",
        [_arg("_setToken", "address"), _arg("_quantity", "uint256"), _arg("_to", "address")],
        mutability="nonpayable",
    ),
    _fn(
        "redeem",
        [_arg("_setToken", "address"), _arg("_quantity", "uint256"), _arg("_to", "address")],
        mutability="nonpayable",
    ),
    _fn(
        "getRequiredComponentUnitsForIssue",
        [_arg("_setToken", "address"), _arg("_quantity", "uint256")],
        [_arg("", "address[]"), _arg("", "uint256[]")],
    ),
]

TRADE_MODULE_ABI = [
    _fn("initialize", [_arg("_setToken", "address")], mutability="nonpayable"),
    _fn(
        "trade",
        [
            _arg("_setToken", "address"),
            _arg("_exchangeName", "string"),
            _arg("_sendToken", "address"),
            _arg("_sendQuantity", "uint256"),
            _arg("_receiveToken", "address"),
            _arg("_minReceiveQuantity", "uint256"),
            _arg("_data", "bytes"),
        ],
        mutability="nonpayable",
    ),
]

STREAMING_FEE_MODULE_ABI = [
    _fn(
        "initialize",
        [_arg("_setToken", "address"), _arg("_settings", "tuple", FEE_STATE_COMPONENTS)],
        mutability="nonpayable",
    ),
    _fn("accrueFee", [_arg("_setToken", "address")], mutability="nonpayable"),
    _fn(
        "updateStreamingFee",
        [_arg("_setToken", "address"), _arg("_newFee", "uint256")],
        mutability="nonpayable",
    ),
    _fn(
        "updateFeeRecipient",
        [_arg("_setToken", "address"), _arg("_newFeeRecipient", "address")],
        mutability="nonpayable",
    ),
    _fn("feeStates", [_arg("", "address")], FEE_STATE_COMPONENTS),
    _fn("getFee", [_arg("_setToken", "address")], _UINT_OUT),
]

SET_TOKEN_CREATOR_ABI = [
    _fn(
        "create",
        [
            _arg("_components", "address[]"),
            _arg("_units", "int256[]"),
            _arg("_modules", "address[]"),
            _arg("_manager", "address"),
            _arg("_name", "string"),
            _arg("_symbol", "string"),
        ],
        _ADDRESS_OUT,
        "nonpayable",
    ),
    {
        "type": "event",
        "name": "SetTokenCreated",
        "anonymous": False,
        "inputs": [
            {"name": "_setToken", "type": "address", "indexed": True},
            {"name": "_manager", "type": "address", "indexed": False},
            {"name": "_name", "type": "string", "indexed": False},
            {"name": "_symbol", "type": "string", "indexed": False},
        ],
    },
]

PROTOCOL_VIEWER_ABI = [
    _fn(
        "batchFetchBalancesOf",
        [_arg("_tokenAddresses", "address[]"), _arg("_ownerAddresses", "address[]")],
        [_arg("", "uint256[]")],
    ),
    _fn(
        "batchFetchAllowances",
        [
            _arg("_tokenAddresses", "address[]"),
            _arg("_ownerAddresses", "address[]"),
            _arg("_spenderAddresses", "address[]"),
        ],
        [_arg("", "uint256[]")],
    ),
    _fn(
        "batchFetchModuleStates",
        [_arg("_setTokens", "address[]"), _arg("_modules", "address[]")],
        [_arg("", "uint256[][]")],
    ),
    _fn("batchFetchManagers", [_arg("_setTokens", "address[]")], _ADDRESS_LIST_OUT),
    _fn(
        "batchFetchStreamingFeeInfo",
        [_arg("_streamingFeeModule", "address"), _arg("_setTokens", "address[]")],
        [_arg("", "tuple[]", STREAMING_FEE_INFO_COMPONENTS)],
    ),
    _fn(
        "getSetDetails",
        [_arg("_setToken", "address"), _arg("_moduleList", "address[]")],
        [_arg("", "tuple", SET_DETAILS_COMPONENTS)],
    ),
    _fn(
        "batchFetchDetails",
        [_arg("_setTokenAddresses", "address[]"), _arg("_moduleList", "address[]")],
        [_arg("", "tuple[]", SET_DETAILS_COMPONENTS)],
    ),
]

ABIS: dict[str, list[dict[str, Any]]] = {
    "Controller": CONTROLLER_ABI,
    "ERC20": ERC20_ABI,
    "BasicIssuance": BASIC_ISSUANCE_MODULE_ABI,
    "TradeModule": TRADE_MODULE_ABI,
    "SetToken": SET_TOKEN_ABI,
    "SetTokenCreator": SET_TOKEN_CREATOR_ABI,
    "StreamingFeeModule": STREAMING_FEE_MODULE_ABI,
    "ProtocolViewer": PROTOCOL_VIEWER_ABI,
}
