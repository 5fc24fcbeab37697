"""Hex to bech32 address conversion for registry owner addresses."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Final

from bech32 import bech32_decode, bech32_encode, convertbits

logger = logging.getLogger(__name__)

LACONIC_ADDRESS_PREFIX: Final[str] = "laconic"
_HEX_ADDRESS_PATTERN: Final[re.Pattern[str]] = re.compile(r"(?:[0-9a-fA-F]{2})*")


@dataclass(frozen=True)
class AddressEncodeResult:
    """Outcome of one address conversion.

    Attributes:
        value: Bech32 address on success, the untouched input otherwise.
        succeeded: Whether `value` is an encoded address.
        failure_reason: Conversion failure description when not succeeded.
    """

    value: str
    succeeded: bool
    failure_reason: str | None = None


def domain_address_to_bech32(hex_address: str, prefix: str = LACONIC_ADDRESS_PREFIX) -> AddressEncodeResult:
    """Encode a hex address as bech32, falling back to the input on failure.

    Args:
        hex_address: Raw address bytes in hexadecimal.
        prefix: Human-readable bech32 prefix.

    Returns:
        AddressEncodeResult: Encoded address or the original input with the failure cause.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    if not isinstance(hex_address, str) or _HEX_ADDRESS_PATTERN.fullmatch(hex_address) is None:
        return _address_fallback(hex_address, "invalid hex address: expected an even number of hex digits")

    address_bytes = bytes.fromhex(hex_address)

    words = convertbits(address_bytes, 8, 5, True)
    if words is None:
        return _address_fallback(hex_address, "bit regrouping failed")

    encoded_address = bech32_encode(prefix, words)
    if encoded_address is None:
        return _address_fallback(hex_address, "bech32 encoding failed")
    return AddressEncodeResult(value=encoded_address, succeeded=True)


def domain_address_display(hex_address: str) -> str:
    """Return the display form of a hex owner address.

    Args:
        hex_address: Raw address bytes in hexadecimal.

    Returns:
        str: Bech32 address, or the input unchanged when it cannot be encoded.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return domain_address_to_bech32(hex_address).value


def domain_address_decode_bech32(address: str, prefix: str = LACONIC_ADDRESS_PREFIX) -> bytes | None:
    """Decode a bech32 address back into raw bytes.

    Args:
        address: Bech32 address string.
        prefix: Expected human-readable prefix.

    Returns:
        bytes | None: Raw address bytes, or None when the address is invalid.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    decoded_prefix, words = bech32_decode(address)
    if decoded_prefix != prefix or words is None:
        return None
    address_bytes = convertbits(words, 5, 8, False)
    if address_bytes is None:
        return None
    return bytes(address_bytes)


def _address_fallback(hex_address: str, failure_reason: str) -> AddressEncodeResult:
    logger.warning("Address conversion failed for %r: %s", hex_address, failure_reason)
    return AddressEncodeResult(value=hex_address, succeeded=False, failure_reason=failure_reason)


__all__ = [
    "AddressEncodeResult",
    "LACONIC_ADDRESS_PREFIX",
    "domain_address_decode_bech32",
    "domain_address_display",
    "domain_address_to_bech32",
]
