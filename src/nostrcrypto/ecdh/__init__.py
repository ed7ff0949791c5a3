"""Key agreement: NIP-04 legacy ECDH."""

from .nip04 import ecdh_nip04

__all__: tuple[str, ...] = ("ecdh_nip04",)
