"""
BIP-340 tagged hashes over SHA-256 (stdlib hashlib).
"""

from __future__ import annotations

import hashlib


def tagged_hash(tag: str, data: bytes) -> bytes:
    """
    BIP-340 tagged hash: SHA256(SHA256(tag) || SHA256(tag) || data).

    Args:
        tag: Domain-separation tag, UTF-8 encoded before hashing.
        data: Message bytes.

    Returns:
        32-byte digest.
    """
    tag_hash = hashlib.sha256(tag.encode("utf-8")).digest()
    return hashlib.sha256(tag_hash + tag_hash + data).digest()


__all__: tuple[str, ...] = ("tagged_hash",)
