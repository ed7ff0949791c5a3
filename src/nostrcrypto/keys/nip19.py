"""
NIP-19: human-readable Nostr keys and entity references.

The plain helpers (parse_private_key, encode_npub, shorten_pubkey, ...) take
user or UI input and answer None rather than raising. The TLV encoders and
decode_nip19 are for programmatic use and raise NostrCryptoError subclasses.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterable, NamedTuple, Union

from ..curves.secp256k1 import pubkey_create
from ..errors import (
    EncodeContractViolationError,
    InvalidBech32Error,
    NostrCryptoError,
)
from ..serde.bech32 import bech32_decode, bech32_encode

logger = logging.getLogger(__name__)

HRP_NPUB = "npub"
HRP_NSEC = "nsec"
HRP_NOTE = "note"
HRP_NPROFILE = "nprofile"
HRP_NEVENT = "nevent"
HRP_NADDR = "naddr"

NOSTR_URI_PREFIX = "nostr:"

# TLV record types
TLV_SPECIAL = 0
TLV_RELAY = 1
TLV_AUTHOR = 2
TLV_KIND = 3

_HEX_RE = re.compile(r"[0-9a-fA-F]*")
_HEX64_RE = re.compile(r"[0-9a-fA-F]{64}")


@dataclass(frozen=True)
class Profile:
    pubkey: str
    relays: tuple[str, ...] = ()


@dataclass(frozen=True)
class EventPointer:
    id: str
    relays: tuple[str, ...] = ()
    author: str | None = None
    kind: int | None = None


@dataclass(frozen=True)
class AddressPointer:
    identifier: str
    pubkey: str
    kind: int
    relays: tuple[str, ...] = ()


class Nip19Entity(NamedTuple):
    """Decoded entity: type is the hrp, data is hex for npub/nsec/note."""

    type: str
    data: Union[str, Profile, EventPointer, AddressPointer]


def _hex_to_bytes(value: object) -> bytes | None:
    if not isinstance(value, str) or len(value) % 2:
        return None
    if not _HEX_RE.fullmatch(value):
        return None
    return bytes.fromhex(value)


def _hex32(value: object) -> bytes | None:
    raw = _hex_to_bytes(value)
    if raw is None or len(raw) != 32:
        return None
    return raw


# --- Keys ---


def parse_private_key(text: str) -> str | None:
    """
    Parse an nsec1... string or 64 hex chars into a lowercase hex private key.

    Returns:
        64 lowercase hex chars, or None if the input is neither form.
    """
    trimmed = text.strip()
    if trimmed.startswith(HRP_NSEC + "1"):
        try:
            hrp, payload = bech32_decode(trimmed)
        except InvalidBech32Error as e:
            logger.debug("rejected nsec input: %s", e)
            return None
        if hrp != HRP_NSEC or len(payload) != 32:
            logger.debug("rejected nsec input: hrp=%s len=%d", hrp, len(payload))
            return None
        return payload.hex()
    if _HEX64_RE.fullmatch(trimmed):
        return trimmed.lower()
    return None


def parse_public_key(text: str) -> str | None:
    """Parse an npub1... string or 64 hex chars into a lowercase hex pubkey."""
    trimmed = text.strip()
    if trimmed.startswith(HRP_NPUB + "1"):
        try:
            hrp, payload = bech32_decode(trimmed)
        except InvalidBech32Error as e:
            logger.debug("rejected npub input: %s", e)
            return None
        if hrp != HRP_NPUB or len(payload) != 32:
            return None
        return payload.hex()
    if _HEX64_RE.fullmatch(trimmed):
        return trimmed.lower()
    return None


def derive_public_key(privkey_hex: str) -> str | None:
    """x-only public key hex for a private key hex, or None if invalid."""
    privkey = _hex32(privkey_hex)
    if privkey is None:
        return None
    try:
        return pubkey_create(privkey).hex()
    except NostrCryptoError as e:
        logger.debug("cannot derive public key: %s", e)
        return None


def _encode_hex32(hrp: str, value_hex: str) -> str | None:
    raw = _hex32(value_hex)
    if raw is None:
        return None
    return bech32_encode(hrp, raw)


def encode_npub(pubkey_hex: str) -> str | None:
    return _encode_hex32(HRP_NPUB, pubkey_hex)


def encode_nsec(privkey_hex: str) -> str | None:
    return _encode_hex32(HRP_NSEC, privkey_hex)


def encode_note(event_id_hex: str) -> str | None:
    return _encode_hex32(HRP_NOTE, event_id_hex)


def shorten_pubkey(pubkey_hex: str, chars: int = 8) -> str:
    """
    Short display form: the npub1 prefix plus `chars` characters.

    Falls back to the first `chars` characters of the input when it cannot be
    encoded. Never raises.
    """
    npub = encode_npub(pubkey_hex)
    if npub is None:
        return pubkey_hex[:chars] if isinstance(pubkey_hex, str) else ""
    return npub[: chars + len(HRP_NPUB) + 1]


def is_valid_bech32(text: str, prefix: str | None = None) -> bool:
    """True if text decodes cleanly and, when given, has hrp == prefix."""
    try:
        hrp, _ = bech32_decode(text)
    except InvalidBech32Error:
        return False
    return prefix is None or hrp == prefix


# --- TLV entities ---


def _encode_tlv(records: Iterable[tuple[int, bytes]]) -> bytes:
    out = bytearray()
    for tag, value in records:
        if len(value) > 255:
            raise EncodeContractViolationError(f"TLV value for type {tag} too long")
        out.append(tag)
        out.append(len(value))
        out += value
    return bytes(out)


def _decode_tlv(data: bytes) -> dict[int, list[bytes]]:
    records: dict[int, list[bytes]] = {}
    i = 0
    while i < len(data):
        if i + 2 > len(data):
            raise InvalidBech32Error("truncated TLV header")
        tag, length = data[i], data[i + 1]
        value = data[i + 2 : i + 2 + length]
        if len(value) != length:
            raise InvalidBech32Error("truncated TLV value")
        records.setdefault(tag, []).append(value)
        i += 2 + length
    return records


def _require_hex32(value: str, what: str) -> bytes:
    raw = _hex32(value)
    if raw is None:
        raise EncodeContractViolationError(f"{what} must be 64 hex chars")
    return raw


def _relay_records(relays: Iterable[str]) -> list[tuple[int, bytes]]:
    return [(TLV_RELAY, r.encode("utf-8")) for r in relays]


def _kind_bytes(kind: int) -> bytes:
    if not 0 <= kind < 2**32:
        raise EncodeContractViolationError("kind must fit in 32 bits")
    return kind.to_bytes(4, "big")


def encode_nprofile(pubkey_hex: str, relays: Iterable[str] = ()) -> str:
    records = [(TLV_SPECIAL, _require_hex32(pubkey_hex, "pubkey"))]
    records += _relay_records(relays)
    return bech32_encode(HRP_NPROFILE, _encode_tlv(records))


def encode_nevent(
    event_id_hex: str,
    relays: Iterable[str] = (),
    author: str | None = None,
    kind: int | None = None,
) -> str:
    records = [(TLV_SPECIAL, _require_hex32(event_id_hex, "event id"))]
    records += _relay_records(relays)
    if author is not None:
        records.append((TLV_AUTHOR, _require_hex32(author, "author")))
    if kind is not None:
        records.append((TLV_KIND, _kind_bytes(kind)))
    return bech32_encode(HRP_NEVENT, _encode_tlv(records))


def encode_naddr(
    identifier: str, pubkey_hex: str, kind: int, relays: Iterable[str] = ()
) -> str:
    records = [(TLV_SPECIAL, identifier.encode("utf-8"))]
    records += _relay_records(relays)
    records.append((TLV_AUTHOR, _require_hex32(pubkey_hex, "pubkey")))
    records.append((TLV_KIND, _kind_bytes(kind)))
    return bech32_encode(HRP_NADDR, _encode_tlv(records))


def _single(records: dict[int, list[bytes]], tag: int, size: int | None) -> bytes | None:
    values = records.get(tag)
    if not values:
        return None
    if size is not None and len(values[0]) != size:
        raise InvalidBech32Error(f"TLV type {tag} must be {size} bytes")
    return values[0]


def _relays(records: dict[int, list[bytes]]) -> tuple[str, ...]:
    return tuple(r.decode("utf-8") for r in records.get(TLV_RELAY, []))


def decode_nip19(text: str) -> Nip19Entity:
    """
    Decode any NIP-19 entity.

    Returns:
        Nip19Entity(type, data): hex string data for npub, nsec and note;
        Profile, EventPointer or AddressPointer for the TLV types.

    Raises:
        InvalidBech32Error: malformed string, payload or unknown prefix.
    """
    hrp, payload = bech32_decode(text)
    if hrp in (HRP_NPUB, HRP_NSEC, HRP_NOTE):
        if len(payload) != 32:
            raise InvalidBech32Error(f"{hrp} payload must be 32 bytes")
        return Nip19Entity(hrp, payload.hex())

    records = _decode_tlv(payload)
    try:
        if hrp == HRP_NPROFILE:
            pubkey = _single(records, TLV_SPECIAL, 32)
            if pubkey is None:
                raise InvalidBech32Error("nprofile without pubkey")
            return Nip19Entity(hrp, Profile(pubkey.hex(), _relays(records)))
        if hrp == HRP_NEVENT:
            event_id = _single(records, TLV_SPECIAL, 32)
            if event_id is None:
                raise InvalidBech32Error("nevent without id")
            author = _single(records, TLV_AUTHOR, 32)
            kind = _single(records, TLV_KIND, 4)
            return Nip19Entity(
                hrp,
                EventPointer(
                    event_id.hex(),
                    _relays(records),
                    author.hex() if author is not None else None,
                    int.from_bytes(kind, "big") if kind is not None else None,
                ),
            )
        if hrp == HRP_NADDR:
            identifier = _single(records, TLV_SPECIAL, None)
            author = _single(records, TLV_AUTHOR, 32)
            kind = _single(records, TLV_KIND, 4)
            if identifier is None or author is None or kind is None:
                raise InvalidBech32Error("naddr missing identifier, author or kind")
            return Nip19Entity(
                hrp,
                AddressPointer(
                    identifier.decode("utf-8"),
                    author.hex(),
                    int.from_bytes(kind, "big"),
                    _relays(records),
                ),
            )
    except UnicodeDecodeError as e:
        raise InvalidBech32Error("TLV text is not UTF-8") from e
    raise InvalidBech32Error(f"unknown NIP-19 prefix {hrp!r}")


def parse_nostr_link(link: str) -> Nip19Entity | None:
    """
    Parse a (possibly nostr:-prefixed) reference to a profile, note, event or
    address. nsec strings are never accepted here.
    """
    text = link.strip()
    if text[: len(NOSTR_URI_PREFIX)].lower() == NOSTR_URI_PREFIX:
        text = text[len(NOSTR_URI_PREFIX) :]
    try:
        entity = decode_nip19(text)
    except InvalidBech32Error as e:
        logger.debug("failed to parse nostr link: %s", e)
        return None
    if entity.type == HRP_NSEC:
        logger.debug("refusing to parse nsec as a nostr link")
        return None
    return entity


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
    "encode_npub",
    "encode_nprofile",
    "encode_nsec",
    "is_valid_bech32",
    "parse_nostr_link",
    "parse_private_key",
    "parse_public_key",
    "shorten_pubkey",
)
