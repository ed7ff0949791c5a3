"""Serialization / deserialization (serde): bech32 and future text formats."""

from .bech32 import bech32_decode, bech32_encode, convert_bits

__all__: tuple[str, ...] = ("bech32_decode", "bech32_encode", "convert_bits")
