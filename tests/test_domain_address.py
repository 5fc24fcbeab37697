"""Regression tests for hex to bech32 owner address conversion."""

from __future__ import annotations

import logging

import pytest

from registry_dashboard.domain import (
    domain_address_decode_bech32,
    domain_address_display,
    domain_address_to_bech32,
)

_OWNER_HEX = "2d6ff5d5a2f7d1e1c8bfa1cbae10d6bb5f0f6f2e"


def test_domain_address_to_bech32_encodes_with_laconic_prefix() -> None:
    """Encode a 20-byte hex address into the laconic bech32 form.

    Returns:
        None: Assertions validate prefix, length and round-trip decoding.

    Raises:
        AssertionError: Raised when encoding output is malformed.
    """

    result = domain_address_to_bech32(_OWNER_HEX)

    assert result.succeeded is True
    assert result.failure_reason is None
    assert result.value.startswith("laconic1")
    # 32 data characters for 20 bytes plus a 6 character checksum.
    assert len(result.value) == len("laconic1") + 32 + 6
    assert result.value == result.value.lower()


@pytest.mark.parametrize(
    "hex_address",
    [_OWNER_HEX, "00", "ff" * 20, "0123456789abcdef0123456789ABCDEF01234567"],
)
def test_domain_address_round_trips_through_decode(hex_address: str) -> None:
    """Decode the encoded address back into the original bytes.

    Args:
        hex_address: Valid hex input.

    Returns:
        None: Assertions validate round-trip byte equality.

    Raises:
        AssertionError: Raised when decoded bytes differ from input bytes.
    """

    encoded_address = domain_address_display(hex_address)

    assert domain_address_decode_bech32(encoded_address) == bytes.fromhex(hex_address)


@pytest.mark.parametrize("invalid_input", ["not-hex", "abc", "zz11", "0x1234", "ab cd", " ab", "ab\n"])
def test_domain_address_invalid_hex_returns_input_unchanged(
    invalid_input: str,
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Return the original input and log the cause when hex decoding fails.

    Args:
        invalid_input: Non-hex or odd-length input.
        caplog: Pytest log capture fixture.

    Returns:
        None: Assertions validate fail-open behavior.

    Raises:
        AssertionError: Raised when conversion raises or alters the input.
    """

    with caplog.at_level(logging.WARNING, logger="registry_dashboard.domain.address"):
        result = domain_address_to_bech32(invalid_input)

    assert result.succeeded is False
    assert result.value == invalid_input
    assert "invalid hex address" in (result.failure_reason or "")
    assert domain_address_display(invalid_input) == invalid_input
    assert any("Address conversion failed" in record.getMessage() for record in caplog.records)


def test_domain_address_decode_rejects_foreign_prefix_and_garbage() -> None:
    """Return None for addresses that are not valid laconic bech32 strings."""

    encoded_address = domain_address_display(_OWNER_HEX)

    assert domain_address_decode_bech32(encoded_address, prefix="cosmos") is None
    assert domain_address_decode_bech32("laconic1notavalidchecksum") is None
    assert domain_address_decode_bech32("") is None
