"""
BIP-340: Schnorr signatures over secp256k1 with x-only public keys.

Only signing lives here; verification is left to whoever consumes the
signature.
"""

from __future__ import annotations

import secrets

from ..curves.secp256k1 import (
    G,
    N,
    Infinity,
    has_even_y,
    int_to_bytes32,
    privkey_to_scalar,
    scalar_mul,
)
from ..errors import (
    InvalidAuxLengthError,
    InvalidKeyRangeError,
    InvalidMessageLengthError,
    NonceIsZeroError,
    PointAtInfinityError,
)
from ..hashes import tagged_hash

TAG_AUX = "BIP0340/aux"
TAG_NONCE = "BIP0340/nonce"
TAG_CHALLENGE = "BIP0340/challenge"


def _xor_bytes(a: bytes, b: bytes) -> bytes:
    return bytes(x ^ y for x, y in zip(a, b))


def schnorr_sign(msg: bytes, privkey: bytes, aux: bytes | None = None) -> bytes:
    """
    Sign a 32-byte message per BIP-340.

    Deterministic when aux is given; otherwise 32 bytes of fresh randomness are
    drawn for this call only.

    Args:
        msg: 32-byte message (already hashed by the caller, e.g. a Nostr event id).
        privkey: 32-byte secp256k1 private key.
        aux: Optional 32 bytes of auxiliary randomness.

    Returns:
        64-byte signature R.x || s.

    Raises:
        InvalidMessageLengthError: msg is not 32 bytes.
        InvalidKeyRangeError: privkey is not 32 bytes or not in [1, n-1].
        NonceIsZeroError: derived nonce is zero mod n.
    """
    if len(msg) != 32:
        raise InvalidMessageLengthError(f"msg must be 32 bytes, got {len(msg)}")
    d0 = privkey_to_scalar(privkey)
    pub = scalar_mul(d0, G)
    if isinstance(pub, Infinity):
        raise PointAtInfinityError("public key is the point at infinity")
    d = d0 if has_even_y(pub) else N - d0

    if aux is None:
        aux = secrets.token_bytes(32)
    elif len(aux) != 32:
        raise InvalidAuxLengthError(f"aux must be 32 bytes, got {len(aux)}")

    px = int_to_bytes32(pub.x)
    t = _xor_bytes(int_to_bytes32(d), tagged_hash(TAG_AUX, aux))
    k0 = int.from_bytes(tagged_hash(TAG_NONCE, t + px + msg), "big") % N
    if k0 == 0:
        raise NonceIsZeroError("nonce is zero")

    r = scalar_mul(k0, G)
    if isinstance(r, Infinity):
        # unreachable: k0 is in [1, n-1]
        raise PointAtInfinityError("nonce point is the point at infinity")
    k = k0 if has_even_y(r) else N - k0

    rx = int_to_bytes32(r.x)
    e = int.from_bytes(tagged_hash(TAG_CHALLENGE, rx + px + msg), "big") % N
    s = (k + e * d) % N
    return rx + int_to_bytes32(s)


def sign_event_id(
    event_id_hex: str, privkey_hex: str, aux: bytes | None = None
) -> str:
    """
    Hex convenience around schnorr_sign for Nostr event ids.

    Args:
        event_id_hex: 64 hex chars, the sha256 event id.
        privkey_hex: 64 hex chars.
        aux: Optional 32 bytes of auxiliary randomness.

    Returns:
        128 hex chars (lowercase).
    """
    try:
        msg = bytes.fromhex(event_id_hex)
    except ValueError as e:
        raise InvalidMessageLengthError("event id is not valid hex") from e
    try:
        privkey = bytes.fromhex(privkey_hex)
    except ValueError as e:
        raise InvalidKeyRangeError("privkey is not valid hex") from e
    return schnorr_sign(msg, privkey, aux).hex()


__all__: tuple[str, ...] = (
    "TAG_AUX",
    "TAG_CHALLENGE",
    "TAG_NONCE",
    "schnorr_sign",
    "sign_event_id",
)
