"""
Benchmark BIP-340 signing and bech32/NIP-19 encoding.
Compares time per call and peak memory (tracemalloc) per run.

Run from repo root:

  PYTHONPATH=src python benchmarks/signing.py

Or after pip install -e .:

  python benchmarks/signing.py
"""

from __future__ import annotations

import os
import sys
import time
import tracemalloc

_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
_src = os.path.join(_root, "src")
if _src not in sys.path:
    sys.path.insert(0, _src)

from nostrcrypto import (
    bech32_decode,
    encode_npub,
    parse_private_key,
    pubkey_create,
    schnorr_sign,
)

N_TIME = 200
N_MEM = 50
PRIV = bytes(31) + bytes([1])
PUB_HEX = pubkey_create(PRIV).hex()
MSG = bytes(range(32))
AUX = bytes(32)
NPUB = encode_npub(PUB_HEX)


def _time_per_call(fn, *args, n: int = N_TIME, **kwargs) -> float:
    for _ in range(5):
        fn(*args, **kwargs)
    start = time.perf_counter()
    for _ in range(n):
        fn(*args, **kwargs)
    return (time.perf_counter() - start) / n


def _peak_kb(fn, *args, n: int = N_MEM, **kwargs) -> float:
    tracemalloc.start()
    if hasattr(tracemalloc, "reset_peak"):
        tracemalloc.reset_peak()
    for _ in range(n):
        fn(*args, **kwargs)
    _, peak = tracemalloc.get_traced_memory()
    tracemalloc.stop()
    return peak / 1024.0


def main() -> None:
    print("Benchmark: signing and encoding")
    print(f"  n = {N_TIME} (time), {N_MEM} (memory)")
    print()

    print("  --- BIP-340 ---")
    t = _time_per_call(schnorr_sign, MSG, PRIV, AUX, n=N_TIME // 4) * 1000
    print(f"  schnorr_sign (aux)     {t:.4f} ms")
    t = _time_per_call(schnorr_sign, MSG, PRIV, n=N_TIME // 4) * 1000
    print(f"  schnorr_sign (random)  {t:.4f} ms")
    print()

    print("  --- bech32 / NIP-19 ---")
    t = _time_per_call(encode_npub, PUB_HEX) * 1000
    print(f"  encode_npub            {t:.4f} ms")
    t = _time_per_call(bech32_decode, NPUB) * 1000
    print(f"  bech32_decode          {t:.4f} ms")
    t = _time_per_call(parse_private_key, PRIV.hex()) * 1000
    print(f"  parse_private_key      {t:.4f} ms")
    print()

    print("  --- Peak memory (KiB) ---")
    print(f"  schnorr_sign   {_peak_kb(schnorr_sign, MSG, PRIV, AUX):.2f}")
    print(f"  encode_npub    {_peak_kb(encode_npub, PUB_HEX):.2f}")


if __name__ == "__main__":
    main()
