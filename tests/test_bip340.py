"""BIP-340 signing checked against an independent verifier.

Set NOSTRCRYPTO_SLOW_TESTS=1 to run the 10,000-pair sweep.
"""

from __future__ import annotations

import os
import secrets

import pytest

from nostrcrypto import (
    InvalidAuxLengthError,
    InvalidKeyRangeError,
    generate_private_key,
    pubkey_create,
    schnorr_sign,
    tagged_hash,
)
from nostrcrypto.curves.secp256k1 import (
    G,
    N,
    P,
    Infinity,
    lift_x,
    point_add,
    scalar_mul,
)
from nostrcrypto.errors import InvalidPublicKeyError

SLOW = os.environ.get("NOSTRCRYPTO_SLOW_TESTS") == "1"


def bip340_verify(msg: bytes, pubkey: bytes, sig: bytes) -> bool:
    """Reference verification equation: s*G - e*P == R with even y."""
    if len(sig) != 64 or len(pubkey) != 32:
        return False
    try:
        pub = lift_x(int.from_bytes(pubkey, "big"))
    except InvalidPublicKeyError:
        return False
    r = int.from_bytes(sig[:32], "big")
    s = int.from_bytes(sig[32:], "big")
    if r >= P or s >= N:
        return False
    e = int.from_bytes(tagged_hash("BIP0340/challenge", sig[:32] + pubkey + msg), "big") % N
    point = point_add(scalar_mul(s, G), scalar_mul(N - e, pub))
    if isinstance(point, Infinity):
        return False
    return point.y % 2 == 0 and point.x == r


# --- BIP-340 test-vectors.csv: (public key, message, signature, expected) ---
MSG_243F = "243F6A8885A308D313198A2E03707344A4093822299F31D0082EFA98EC4E6C89"
SIG_1 = (
    "6896BD60EEAE296DB48A229FF71DFE071BDE413E6D43F917DC8DCF8C78DE3341"
    "8906D11AC976ABCCB20B091292BFF4EA897EFCB639EA871CFA95F6DE339E4B0A"
)
PUB_1 = "DFF1D77F2A671C5F36183726DB2341BE58FEAE1DA2DECED843240F7B502BA659"
P_HEX = "FFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F"
N_HEX = "FFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141"

VERIFY_VECTORS = [
    (
        "F9308A019258C31049344F85F89D5229B531C845836F99B08601F113BCE036F9",
        "0000000000000000000000000000000000000000000000000000000000000000",
        "E907831F80848D1069A5371B402410364BDF1C5F8307B0084C55F1CE2DCA8215"
        "25F66A4A85EA8B71E482A74F382D2CE5EBEEE8FDB2172F477DF4900D310536C0",
        True,
    ),
    (PUB_1, MSG_243F, SIG_1, True),
    (
        "DD308AFEC5777E13121FA72B9CC1B7CC0139715309B086C960E18FD969774EB8",
        "7E2D58D8B3BCDF1ABADEC7829054F90DDA9805AAB56C77333024B9D0A508B75C",
        "5831AAEED7B44BB74E5EAB94BA9D4294C49BCF2A60728D8B4C200F50DD313C1B"
        "AB745879A5AD954A72C45A91C3A51D3C7ADEA98D82F8481E0E1E03674A6F3FB7",
        True,
    ),
    (
        "25D1DFF95105F5253C4022F628A996AD3A0D95FBF21D468A1B33F8C160D8F517",
        "FFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFF",
        "7EB0509757E246F19449885651611CB965ECC1A187DD51B64FDA1EDC9637D5EC"
        "97582B9CB13DB3933705B32BA982AF5AF25FD78881EBB32771FC5922EFC66EA3",
        True,
    ),
    # verify-only: R.x has many leading zero bytes
    (
        "D69C3509BB99E412E68B0FE8544E72837DFA30746D8BE2AA65975F29D22DC7B9",
        "4DF3C3F68FCC83B27E9D42C90431A72499F17875C81A599B566C9889B9696703",
        "00000000000000000000003B78CE563F89A0ED9414F5AA28AD0D96D6795F9C63"
        "76AFB1548AF603B3EB45C9F8207DEE1060CB71C04E80F593060B07D28308D7F4",
        True,
    ),
    # public key not on the curve
    (
        "EEFDEA4CDB677750A420FEE807EACF21EB9898AE79B9768766E4FAA04A2D4A34",
        MSG_243F,
        "6CFF5C3BA86C69EA4B7376F31A9BCB4F74C1976089B2D9963DA2E5543E177769"
        "69E89B4C5564D00349106B8497785DD7D1D713A8AE82B32FA79D5F7FC407D39B",
        False,
    ),
    # r equal to the field size
    (PUB_1, MSG_243F, P_HEX + SIG_1[64:], False),
    # s equal to the curve order
    (PUB_1, MSG_243F, SIG_1[:64] + N_HEX, False),
    # wrong message
    (PUB_1, "00" * 32, SIG_1, False),
]


@pytest.mark.parametrize("pubkey, msg, sig, expected", VERIFY_VECTORS)
def test_verifier_on_published_vectors(
    pubkey: str, msg: str, sig: str, expected: bool
) -> None:
    assert (
        bip340_verify(bytes.fromhex(msg), bytes.fromhex(pubkey), bytes.fromhex(sig))
        is expected
    )


def _check_random_pairs(count: int) -> None:
    for _ in range(count):
        priv = generate_private_key()
        msg = secrets.token_bytes(32)
        sig = schnorr_sign(msg, priv)
        assert bip340_verify(msg, pubkey_create(priv), sig)


def test_random_signatures_verify() -> None:
    _check_random_pairs(20)


@pytest.mark.slow
@pytest.mark.skipif(not SLOW, reason="set NOSTRCRYPTO_SLOW_TESTS=1")
def test_random_signatures_verify_sweep() -> None:
    _check_random_pairs(10_000)


def test_verifier_rejects_tampered_signature() -> None:
    priv = generate_private_key()
    msg = bytes(32)
    sig = schnorr_sign(msg, priv, bytes(32))
    pub = pubkey_create(priv)
    assert bip340_verify(msg, pub, sig)
    assert not bip340_verify(b"\x01" + msg[1:], pub, sig)
    assert not bip340_verify(msg, pub, sig[:63] + bytes([sig[63] ^ 1]))


def test_explicit_aux_is_deterministic() -> None:
    priv = generate_private_key()
    msg = secrets.token_bytes(32)
    aux = secrets.token_bytes(32)
    assert schnorr_sign(msg, priv, aux) == schnorr_sign(msg, priv, aux)


def test_missing_aux_randomizes() -> None:
    priv = generate_private_key()
    msg = secrets.token_bytes(32)
    sig_a = schnorr_sign(msg, priv)
    sig_b = schnorr_sign(msg, priv)
    assert sig_a != sig_b
    pub = pubkey_create(priv)
    assert bip340_verify(msg, pub, sig_a) and bip340_verify(msg, pub, sig_b)


def test_odd_y_key_is_normalized() -> None:
    """Both d and n-d give the same x-only key and valid signatures."""
    d = int.from_bytes(generate_private_key(), "big")
    priv = d.to_bytes(32, "big")
    neg = (N - d).to_bytes(32, "big")
    assert pubkey_create(priv) == pubkey_create(neg)
    msg = bytes(range(32))
    for key in (priv, neg):
        assert bip340_verify(msg, pubkey_create(key), schnorr_sign(msg, key, bytes(32)))


def test_signature_s_below_order() -> None:
    sig = schnorr_sign(bytes(32), generate_private_key())
    assert int.from_bytes(sig[32:], "big") < N


def test_rejects_bad_privkey() -> None:
    with pytest.raises(InvalidKeyRangeError):
        schnorr_sign(bytes(32), bytes(32), bytes(32))
    with pytest.raises(InvalidKeyRangeError):
        schnorr_sign(bytes(32), N.to_bytes(32, "big"), bytes(32))


def test_rejects_bad_aux_length() -> None:
    with pytest.raises(InvalidAuxLengthError):
        schnorr_sign(bytes(32), generate_private_key(), bytes(31))
