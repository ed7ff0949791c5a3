"""Signing schemes: BIP-340 Schnorr (Nostr events)."""

from .bip340 import schnorr_sign, sign_event_id

__all__: tuple[str, ...] = ("schnorr_sign", "sign_event_id")
