#!/usr/bin/env python3
"""Example: sign a Nostr event id (BIP-340) and derive a NIP-04 shared secret."""

import hashlib
import json

from nostrcrypto import (ecdh_nip04, generate_private_key, pubkey_create,
                         schnorr_sign)

alice = generate_private_key()
bob = generate_private_key()
alice_pub = pubkey_create(alice)

# NIP-01 event id: sha256 of the serialized [0, pubkey, created_at, kind, tags, content]
event = [0, alice_pub.hex(), 1700000000, 1, [], "hello nostr"]
event_id = hashlib.sha256(
    json.dumps(event, separators=(",", ":"), ensure_ascii=False).encode()
).digest()
print("id: ", event_id.hex())
print("sig:", schnorr_sign(event_id, alice).hex())

shared_a = ecdh_nip04(alice, pubkey_create(bob))
shared_b = ecdh_nip04(bob, alice_pub)
print("shared secret agrees:", shared_a == shared_b)
