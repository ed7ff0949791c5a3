"""Hash functions: BIP-340 tagged hash."""

from .tagged import tagged_hash

__all__: tuple[str, ...] = ("tagged_hash",)
