"""Human-readable keys and references: NIP-19 (npub, nsec, note, nprofile, ...)."""

from .nip19 import (
    AddressPointer,
    EventPointer,
    Nip19Entity,
    Profile,
    decode_nip19,
    derive_public_key,
    encode_naddr,
    encode_nevent,
    encode_note,
    encode_nprofile,
    encode_npub,
    encode_nsec,
    is_valid_bech32,
    parse_nostr_link,
    parse_private_key,
    parse_public_key,
    shorten_pubkey,
)

__all__: tuple[str, ...] = (
    "AddressPointer",
    "EventPointer",
    "Nip19Entity",
    "Profile",
    "decode_nip19",
    "derive_public_key",
    "encode_naddr",
    "encode_nevent",
    "encode_note",
    "encode_nprofile",
    "encode_npub",
    "encode_nsec",
    "is_valid_bech32",
    "parse_nostr_link",
    "parse_private_key",
    "parse_public_key",
    "shorten_pubkey",
)
