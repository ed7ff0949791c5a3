"""
secp256k1 (Bitcoin/Nostr curve): affine point arithmetic and x-only key derivation.

Pure Python integers; every reduction mod P or N is explicit. Scalar
multiplication is double-and-add over the bits of the scalar, so it branches
on secret bits and is NOT constant-time.
"""

from __future__ import annotations

import secrets
from typing import Final, NamedTuple, Union

from ..errors import (
    EncodeContractViolationError,
    InvalidKeyRangeError,
    InvalidPublicKeyError,
    PointAtInfinityError,
)

P: Final = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F
N: Final = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
_Gx = 0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798
_Gy = 0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8
# Curve equation y^2 = x^3 + 7
_B = 7


class Point(NamedTuple):
    """Affine point with both coordinates in [0, P)."""

    x: int
    y: int


class Infinity:
    """The identity element. Compare with isinstance, or use INFINITY."""

    __slots__ = ()

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Infinity)

    def __hash__(self) -> int:
        return hash("secp256k1-infinity")

    def __repr__(self) -> str:
        return "INFINITY"


INFINITY: Final = Infinity()
G: Final = Point(_Gx, _Gy)

ECPoint = Union[Point, Infinity]


def _mod_inv(a: int, n: int) -> int:
    """Modular inverse; raises ValueError when a is not invertible."""
    return pow(a, -1, n)


def is_on_curve(point: ECPoint) -> bool:
    """True for INFINITY and for any affine point satisfying y^2 = x^3 + 7."""
    if isinstance(point, Infinity):
        return True
    x, y = point
    if not (0 <= x < P and 0 <= y < P):
        return False
    return (y * y - x * x * x - _B) % P == 0


def point_add(p: ECPoint, q: ECPoint) -> ECPoint:
    """
    Add two points in affine coordinates.

    Args:
        p, q: Points on secp256k1 (either may be INFINITY).

    Returns:
        p + q; INFINITY when q is the negation of p.
    """
    if isinstance(p, Infinity):
        return q
    if isinstance(q, Infinity):
        return p
    if p.x == q.x:
        if p.y != q.y or p.y == 0:
            return INFINITY
        # Tangent slope for doubling
        lam = 3 * p.x * p.x * _mod_inv(2 * p.y, P) % P
    else:
        lam = (q.y - p.y) * _mod_inv(q.x - p.x, P) % P
    rx = (lam * lam - p.x - q.x) % P
    ry = (lam * (p.x - rx) - p.y) % P
    return Point(rx, ry)


def scalar_mul(k: int, point: ECPoint = G) -> ECPoint:
    """
    Scalar multiplication k * point, double-and-add from the least significant bit.

    The scalar is reduced mod N first; a zero scalar gives INFINITY.
    """
    k %= N
    result: ECPoint = INFINITY
    addend = point
    while k:
        if k & 1:
            result = point_add(result, addend)
        addend = point_add(addend, addend)
        k >>= 1
    return result


def int_to_bytes32(value: int) -> bytes:
    """Big-endian, zero-padded, exactly 32 bytes."""
    if value < 0 or value.bit_length() > 256:
        raise EncodeContractViolationError("value does not fit in 32 bytes")
    return value.to_bytes(32, "big")


def has_even_y(point: Point) -> bool:
    return point.y % 2 == 0


def lift_x(x: int) -> Point:
    """
    Even-y point with the given x-coordinate (BIP-340 lift_x).

    Since P = 3 (mod 4), a square root of c is c^((P+1)/4) when one exists.

    Raises:
        InvalidPublicKeyError: x >= P or x^3 + 7 is not a square mod P.
    """
    if not 0 <= x < P:
        raise InvalidPublicKeyError("x-coordinate out of field range")
    y_sq = (pow(x, 3, P) + _B) % P
    y = pow(y_sq, (P + 1) // 4, P)
    if y * y % P != y_sq:
        raise InvalidPublicKeyError("x-coordinate is not on secp256k1")
    return Point(x, y if y % 2 == 0 else P - y)


def privkey_to_scalar(privkey: bytes) -> int:
    """Decode a 32-byte private key and check 0 < d < N."""
    if len(privkey) != 32:
        raise InvalidKeyRangeError("privkey must be 32 bytes")
    d = int.from_bytes(privkey, "big")
    if d == 0 or d >= N:
        raise InvalidKeyRangeError("privkey must be in [1, n-1]")
    return d


def pubkey_point(privkey: bytes) -> Point:
    """Full public point d*G for a 32-byte private key."""
    point = scalar_mul(privkey_to_scalar(privkey), G)
    if isinstance(point, Infinity):
        raise PointAtInfinityError("public key is the point at infinity")
    return point


def pubkey_create(privkey: bytes) -> bytes:
    """
    Derive the x-only public key (32 bytes) from a 32-byte private key.

    Args:
        privkey: 32-byte secp256k1 private key, big-endian.

    Returns:
        32-byte big-endian x-coordinate of d*G.

    Raises:
        InvalidKeyRangeError: privkey is not 32 bytes or not in [1, n-1].
        PointAtInfinityError: d*G is the identity.
    """
    return int_to_bytes32(pubkey_point(privkey).x)


def generate_private_key() -> bytes:
    """Fresh 32-byte private key from the OS CSPRNG, uniform in [1, n-1]."""
    while True:
        candidate = secrets.token_bytes(32)
        if 0 < int.from_bytes(candidate, "big") < N:
            return candidate


__all__: tuple[str, ...] = (
    "ECPoint",
    "G",
    "INFINITY",
    "Infinity",
    "N",
    "P",
    "Point",
    "generate_private_key",
    "has_even_y",
    "int_to_bytes32",
    "is_on_curve",
    "lift_x",
    "point_add",
    "privkey_to_scalar",
    "pubkey_create",
    "pubkey_point",
    "scalar_mul",
)
