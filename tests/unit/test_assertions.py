"""Unit tests for pre-call argument validation."""
from __future__ import annotations

import pytest

from setprotocol import assertions

VALID = "0x9f8F72aA9304c8B593d555F12eF6589cC3A579A2"


class TestIsValidAddress:
    def test_checksum_address(self) -> None:
        assertions.is_valid_address("token", VALID)

    def test_lowercase_address(self) -> None:
        assertions.is_valid_address("token", VALID.lower())

    def test_bad_checksum_rejected(self) -> None:
        bad = "0x9F8F72aA9304c8B593d555F12eF6589cC3A579A2"
        with pytest.raises(ValueError, match="token"):
            assertions.is_valid_address("token", bad)

    def test_uppercase_address(self) -> None:
        assertions.is_valid_address("token", "0x" + VALID[2:].upper())

    def test_digits_only_address(self) -> None:
        assertions.is_valid_address("module", "0x" + "4" * 40)

    def test_is_address_predicate(self) -> None:
        assert assertions.is_address(VALID)
        assert not assertions.is_address("0x9F8F72aA9304c8B593d555F12eF6589cC3A579A2")
        assert not assertions.is_address(None)

    @pytest.mark.parametrize("value", ["", "0x123", "not-an-address", None, 42])
    def test_malformed_rejected(self, value) -> None:
        with pytest.raises(ValueError, match="/Address"):
            assertions.is_valid_address("setAddress", value)

    def test_list_reports_first_bad_entry(self) -> None:
        with pytest.raises(ValueError, match="moduleAddresses"):
            assertions.is_valid_address_list("moduleAddresses", [VALID, "0xnope"])

    def test_empty_list_passes(self) -> None:
        assertions.is_valid_address_list("moduleAddresses", [])


class TestIsValidBytes32:
    def test_valid_hash(self) -> None:
        assertions.is_valid_bytes32("txHash", "0x" + "ab" * 32)

    @pytest.mark.parametrize("value", ["0x" + "ab" * 31, "ab" * 32, "0x" + "zz" * 32])
    def test_invalid_hash(self, value: str) -> None:
        with pytest.raises(ValueError, match="/Bytes32"):
            assertions.is_valid_bytes32("txHash", value)


class TestListChecks:
    def test_equal_length(self) -> None:
        assertions.is_equal_length([1, 2], ["a", "b"], "mismatch")

    def test_unequal_length(self) -> None:
        with pytest.raises(ValueError, match="mismatch"):
            assertions.is_equal_length([1, 2], ["a"], "mismatch")

    def test_empty_list_rejected(self) -> None:
        with pytest.raises(ValueError, match="at least one"):
            assertions.is_not_empty_list([], "Must contain at least one component.")


class TestIsValidPercentage:
    @pytest.mark.parametrize("value", [0, 2, "2.5", 100])
    def test_in_range(self, value) -> None:
        assertions.is_valid_percentage("slippagePercentage", value)

    @pytest.mark.parametrize("value", [-1, 100.01, "abc", float("nan"), float("inf")])
    def test_out_of_range(self, value) -> None:
        with pytest.raises(ValueError, match="slippagePercentage"):
            assertions.is_valid_percentage("slippagePercentage", value)
