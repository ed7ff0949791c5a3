"""
Bech32 (BIP-173) checksummed base-32 strings, as used by NIP-19.

Unlike BIP-173 segwit addresses there is no 90-character limit: NIP-19 TLV
entities routinely run longer.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from ..errors import EncodeContractViolationError, InvalidBech32Error

CHARSET = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"
_CHARSET_REV = {c: i for i, c in enumerate(CHARSET)}
_GENERATOR = (0x3B6A57B2, 0x26508E6D, 0x1EA119FA, 0x3D4233DD, 0x2A1462B3)
CHECKSUM_LENGTH = 6
MAX_HRP_LENGTH = 83


def bech32_polymod(values: Iterable[int]) -> int:
    """BCH checksum accumulator over 5-bit values; 1 for a valid string."""
    chk = 1
    for v in values:
        top = chk >> 25
        chk = (chk & 0x1FFFFFF) << 5 ^ v
        for i in range(5):
            if (top >> i) & 1:
                chk ^= _GENERATOR[i]
    return chk


def bech32_hrp_expand(hrp: str) -> list[int]:
    """High bits of each hrp char, a 0 separator, then the low bits."""
    return [ord(c) >> 5 for c in hrp] + [0] + [ord(c) & 31 for c in hrp]


def convert_bits(
    data: Iterable[int], from_bits: int, to_bits: int, pad: bool = True
) -> list[int] | None:
    """
    Regroup a sequence of from_bits-wide values into to_bits-wide values.

    Args:
        data: Input values, each < 2**from_bits.
        from_bits, to_bits: Group widths (8 and 5 for bech32).
        pad: Zero-pad the final group. When False, leftover bits must be
            fewer than from_bits and all zero.

    Returns:
        The regrouped values, or None for out-of-range input or a
        non-canonical tail.
    """
    acc = 0
    bits = 0
    ret: list[int] = []
    maxv = (1 << to_bits) - 1
    for value in data:
        if value < 0 or value >> from_bits:
            return None
        acc = ((acc << from_bits) | value) & ((1 << (from_bits + to_bits)) - 1)
        bits += from_bits
        while bits >= to_bits:
            bits -= to_bits
            ret.append((acc >> bits) & maxv)
    if pad:
        if bits:
            ret.append((acc << (to_bits - bits)) & maxv)
    elif bits >= from_bits or ((acc << (to_bits - bits)) & maxv):
        return None
    return ret


def _create_checksum(hrp: str, data: Sequence[int]) -> list[int]:
    polymod = bech32_polymod(bech32_hrp_expand(hrp) + list(data) + [0] * 6) ^ 1
    return [(polymod >> 5 * (5 - i)) & 31 for i in range(CHECKSUM_LENGTH)]


def bech32_encode(hrp: str, data: bytes) -> str:
    """
    Encode bytes as a lowercase bech32 string.

    Args:
        hrp: Human-readable prefix, 1-83 printable ASCII chars, no uppercase.
        data: Payload bytes.

    Returns:
        hrp + "1" + data chars + 6 checksum chars.

    Raises:
        EncodeContractViolationError: hrp is out of contract.
    """
    if not 1 <= len(hrp) <= MAX_HRP_LENGTH:
        raise EncodeContractViolationError("hrp must be 1-83 characters")
    if any(ord(c) < 33 or ord(c) > 126 for c in hrp) or hrp != hrp.lower():
        raise EncodeContractViolationError("hrp must be lowercase printable ASCII")
    five_bit = convert_bits(data, 8, 5, pad=True)
    if five_bit is None:
        raise EncodeContractViolationError("payload is not a byte sequence")
    combined = five_bit + _create_checksum(hrp, five_bit)
    return hrp + "1" + "".join(CHARSET[d] for d in combined)


def bech32_decode(bech: str) -> tuple[str, bytes]:
    """
    Decode and verify a bech32 string.

    Args:
        bech: All-lowercase or all-uppercase bech32 string.

    Returns:
        (hrp, payload) with hrp lowercased.

    Raises:
        InvalidBech32Error: any structural, charset, case, checksum or
            padding problem.
    """
    if any(ord(c) < 33 or ord(c) > 126 for c in bech):
        raise InvalidBech32Error("character outside printable ASCII")
    if bech.lower() != bech and bech.upper() != bech:
        raise InvalidBech32Error("mixed case")
    bech = bech.lower()
    pos = bech.rfind("1")
    if pos < 1:
        raise InvalidBech32Error("missing separator or empty hrp")
    if pos + CHECKSUM_LENGTH + 1 > len(bech):
        raise InvalidBech32Error("checksum too short")
    hrp = bech[:pos]
    try:
        data = [_CHARSET_REV[c] for c in bech[pos + 1 :]]
    except KeyError as e:
        raise InvalidBech32Error(f"invalid data character {e.args[0]!r}") from None
    if bech32_polymod(bech32_hrp_expand(hrp) + data) != 1:
        raise InvalidBech32Error("checksum mismatch")
    decoded = convert_bits(data[:-CHECKSUM_LENGTH], 5, 8, pad=False)
    if decoded is None:
        raise InvalidBech32Error("non-canonical padding")
    return hrp, bytes(decoded)


__all__: tuple[str, ...] = (
    "CHARSET",
    "bech32_decode",
    "bech32_encode",
    "bech32_hrp_expand",
    "bech32_polymod",
    "convert_bits",
)
