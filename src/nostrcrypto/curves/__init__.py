"""Elliptic-curve arithmetic: secp256k1 (Bitcoin/Nostr)."""

from .secp256k1 import (
    G,
    INFINITY,
    N,
    P,
    Point,
    generate_private_key,
    lift_x,
    point_add,
    pubkey_create,
    scalar_mul,
)

__all__: tuple[str, ...] = (
    "G",
    "INFINITY",
    "N",
    "P",
    "Point",
    "generate_private_key",
    "lift_x",
    "point_add",
    "pubkey_create",
    "scalar_mul",
)
