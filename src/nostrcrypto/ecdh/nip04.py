"""
NIP-04 shared secret: x-coordinate of d * lift_x(peer_x).

The peer key is x-only, so the even-y point is always used. The result is the
raw shared x-coordinate; hashing it into a symmetric key is up to the caller.
"""

from __future__ import annotations

from ..curves.secp256k1 import Infinity, int_to_bytes32, lift_x, scalar_mul
from ..errors import InvalidKeyRangeError, InvalidPublicKeyError, PointAtInfinityError


def ecdh_nip04(privkey: bytes, peer_x: bytes) -> bytes:
    """
    Derive the legacy NIP-04 shared x-coordinate.

    Args:
        privkey: 32-byte private key (reduced mod n like any scalar).
        peer_x: 32-byte x-only public key of the other party.

    Returns:
        32-byte x-coordinate of the shared point.

    Raises:
        InvalidKeyRangeError: privkey is not 32 bytes.
        InvalidPublicKeyError: peer_x is not 32 bytes or not on the curve.
        PointAtInfinityError: privkey is 0 mod n.
    """
    if len(privkey) != 32:
        raise InvalidKeyRangeError("privkey must be 32 bytes")
    if len(peer_x) != 32:
        raise InvalidPublicKeyError("peer public key must be 32 bytes")
    peer = lift_x(int.from_bytes(peer_x, "big"))
    shared = scalar_mul(int.from_bytes(privkey, "big"), peer)
    if isinstance(shared, Infinity):
        raise PointAtInfinityError("shared point is the point at infinity")
    return int_to_bytes32(shared.x)


__all__: tuple[str, ...] = ("ecdh_nip04",)
