"""Pre-call argument checks: no I/O.

Every check raises ``ValueError`` so that malformed input is rejected before
any contract call or HTTP request is made.
"""
from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from typing import Any, Sequence

from web3 import Web3

_BYTES32_RE = re.compile(r"^0x[0-9a-fA-F]{64}$")
_ADDRESS_RE = re.compile(r"^0x[0-9a-fA-F]{40}$")


def is_address(value: Any) -> bool:
    """True for a 20-byte hex address that is single-case or correctly checksummed."""
    if not isinstance(value, str) or not _ADDRESS_RE.match(value):
        return False
    body = value[2:]
    if body == body.lower() or body == body.upper():
        return True
    return Web3.is_checksum_address(value)


def is_valid_address(name: str, value: Any) -> None:
    if not is_address(value):
        raise ValueError(f"Expected {name} to conform to schema /Address. Got {value!r}")


def is_valid_address_list(name: str, values: Sequence[Any]) -> None:
    for value in values:
        is_valid_address(name, value)


def is_valid_bytes32(name: str, value: Any) -> None:
    if not isinstance(value, str) or not _BYTES32_RE.match(value):
        raise ValueError(f"Expected {name} to conform to schema /Bytes32. Got {value!r}")


def is_equal_length(first: Sequence[Any], second: Sequence[Any], message: str) -> None:
    if len(first) != len(second):
        raise ValueError(message)


def is_not_empty_list(values: Sequence[Any], message: str) -> None:
    if not values:
        raise ValueError(message)


def is_valid_percentage(name: str, value: Any) -> None:
    """Percentages are expressed in whole units, e.g. 2 for 2%."""
    try:
        number = Decimal(str(value))
    except InvalidOperation as e:
        raise ValueError(f"{name} must be a number. Got {value!r}") from e
    if not number.is_finite() or number < 0 or number > 100:
        raise ValueError(f"{name} must be between 0 and 100. Got {value!r}")
