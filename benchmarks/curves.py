"""
Benchmark secp256k1 operations: pure Python vs the optional Cython build.

Run from repo root:

  PYTHONPATH=src python benchmarks/curves.py

To time the compiled curve module, build it first:

  NOSTRCRYPTO_CYTHONIZE=1 pip install -e .
  python benchmarks/curves.py
"""

from __future__ import annotations

import os
import sys
import time

_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
_src = os.path.join(_root, "src")
if _src not in sys.path:
    sys.path.insert(0, _src)

import nostrcrypto.curves.secp256k1 as secp
from nostrcrypto import ecdh_nip04, pubkey_create

PRIV = bytes.fromhex(
    "b7e151628aed2a6abf7158809cf4f3c762e7160f38b4da56a784d9045190cfef"
)
PEER_X = pubkey_create(bytes(31) + bytes([3]))


def _time_it(fn, *args, n: int = 100, **kwargs) -> float:
    # Warmup
    for _ in range(5):
        fn(*args, **kwargs)
    start = time.perf_counter()
    for _ in range(n):
        fn(*args, **kwargs)
    return (time.perf_counter() - start) / n


def main() -> None:
    compiled = not secp.__file__.endswith(".py")
    n = 100
    print(f"Benchmark: secp256k1 ({'Cython' if compiled else 'pure Python'})")
    print(f"  Iterations: {n}")
    print()

    t = _time_it(secp.point_add, secp.G, secp.G, n=n * 10)
    print(f"  point_add (double)  {t*1e6:.2f} us")
    t = _time_it(pubkey_create, PRIV, n=n)
    print(f"  pubkey_create       {t*1e3:.2f} ms")
    t = _time_it(ecdh_nip04, PRIV, PEER_X, n=n)
    print(f"  ecdh_nip04          {t*1e3:.2f} ms")
    t = _time_it(secp.lift_x, int.from_bytes(PEER_X, "big"), n=n * 10)
    print(f"  lift_x              {t*1e6:.2f} us")


if __name__ == "__main__":
    main()
