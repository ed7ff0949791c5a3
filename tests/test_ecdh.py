"""NIP-04 shared-secret derivation."""

from __future__ import annotations

import pytest

from nostrcrypto import (
    InvalidKeyRangeError,
    InvalidPublicKeyError,
    PointAtInfinityError,
    ecdh_nip04,
    generate_private_key,
    pubkey_create,
)
from nostrcrypto.curves.secp256k1 import N, P

PRIV_ONE = bytes(31) + b"\x01"
PRIV_TWO = bytes(31) + b"\x02"
GX = bytes.fromhex("79be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798")
TWO_G_X = bytes.fromhex(
    "c6047f9441ed7d6d3045406e95c07cd85c778e4b8cef3ca7abac09b95c709ee5"
)


def test_known_values() -> None:
    assert ecdh_nip04(PRIV_TWO, GX) == TWO_G_X
    assert ecdh_nip04(PRIV_ONE, TWO_G_X) == TWO_G_X


def test_identity_scalar_returns_peer_x() -> None:
    pub = pubkey_create(generate_private_key())
    assert ecdh_nip04(PRIV_ONE, pub) == pub


def test_symmetry() -> None:
    for _ in range(10):
        a = generate_private_key()
        b = generate_private_key()
        shared = ecdh_nip04(a, pubkey_create(b))
        assert len(shared) == 32
        assert shared == ecdh_nip04(b, pubkey_create(a))


def test_zero_scalar_is_infinity() -> None:
    with pytest.raises(PointAtInfinityError):
        ecdh_nip04(bytes(32), GX)
    with pytest.raises(PointAtInfinityError):
        ecdh_nip04(N.to_bytes(32, "big"), GX)


def test_rejects_bad_peer_key() -> None:
    with pytest.raises(InvalidPublicKeyError):
        ecdh_nip04(PRIV_ONE, GX[:31])
    with pytest.raises(InvalidPublicKeyError):
        ecdh_nip04(PRIV_ONE, P.to_bytes(32, "big"))
    # first x whose x^3 + 7 is a quadratic non-residue
    x = next(x for x in range(1, 100) if pow(x**3 + 7, (P - 1) // 2, P) != 1)
    with pytest.raises(InvalidPublicKeyError):
        ecdh_nip04(PRIV_ONE, x.to_bytes(32, "big"))


def test_rejects_bad_privkey_length() -> None:
    with pytest.raises(InvalidKeyRangeError):
        ecdh_nip04(b"\x01", GX)
