#!/usr/bin/env python3
"""Example: generate a Nostr identity and show its NIP-19 forms."""

from nostrcrypto import (derive_public_key, encode_npub, encode_nsec,
                         generate_private_key, parse_private_key,
                         shorten_pubkey)

priv_hex = generate_private_key().hex()
pub_hex = derive_public_key(priv_hex)
nsec = encode_nsec(priv_hex)
print("npub:", encode_npub(pub_hex))
print("nsec:", nsec)
print("short:", shorten_pubkey(pub_hex))
print("nsec parses back:", parse_private_key(nsec) == priv_hex)
