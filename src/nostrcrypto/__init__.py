"""
Nostr crypto primitives: secp256k1, BIP-340 Schnorr, NIP-04 ECDH, bech32/NIP-19.
Pure Python, no native crypto library; the curve module can be cythonized.
"""

from .__about__ import __version__
from .curves import generate_private_key, pubkey_create
from .ecdh import ecdh_nip04
from .errors import (
    EncodeContractViolationError,
    InvalidAuxLengthError,
    InvalidBech32Error,
    InvalidKeyRangeError,
    InvalidMessageLengthError,
    InvalidPublicKeyError,
    NonceIsZeroError,
    NostrCryptoError,
    PointAtInfinityError,
)
from .hashes import tagged_hash
from .keys import (
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
from .serde import bech32_decode, bech32_encode
from .signing import schnorr_sign, sign_event_id

__all__: tuple[str, ...] = (
    # About
    "__version__",
    # Hashes
    "tagged_hash",
    # Curves: secp256k1
    "generate_private_key",
    "pubkey_create",
    # Signing: BIP-340
    "schnorr_sign",
    "sign_event_id",
    # ECDH: NIP-04
    "ecdh_nip04",
    # Serde: bech32
    "bech32_decode",
    "bech32_encode",
    # Keys: NIP-19
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
    # Errors
    "EncodeContractViolationError",
    "InvalidAuxLengthError",
    "InvalidBech32Error",
    "InvalidKeyRangeError",
    "InvalidMessageLengthError",
    "InvalidPublicKeyError",
    "NonceIsZeroError",
    "NostrCryptoError",
    "PointAtInfinityError",
)
