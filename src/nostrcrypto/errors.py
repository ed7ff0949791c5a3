"""
Error kinds raised by nostrcrypto.

All of them derive from ValueError, so code that only cares about "bad input"
can keep catching ValueError.
"""

from __future__ import annotations


class NostrCryptoError(ValueError):
    """Base class for every error raised by this package."""


class InvalidKeyRangeError(NostrCryptoError):
    """Private key is not 32 bytes or not in [1, n-1]."""


class InvalidPublicKeyError(NostrCryptoError):
    """X-only public key is not 32 bytes or has no point on the curve."""


class PointAtInfinityError(NostrCryptoError):
    """A scalar multiplication landed on the point at infinity."""


class InvalidMessageLengthError(NostrCryptoError):
    """Message to sign is not exactly 32 bytes."""


class InvalidAuxLengthError(NostrCryptoError):
    """Auxiliary randomness is not exactly 32 bytes."""


class NonceIsZeroError(NostrCryptoError):
    """Derived BIP-340 nonce reduced to zero (negligible probability)."""


class InvalidBech32Error(NostrCryptoError):
    """Bad checksum, charset, case, separator or padding in a bech32 string."""


class EncodeContractViolationError(NostrCryptoError):
    """An encoder was called with arguments outside its contract."""


__all__: tuple[str, ...] = (
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
