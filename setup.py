import os
import re

from setuptools import Extension, find_packages, setup

# Pure Python by default; NOSTRCRYPTO_CYTHONIZE=1 compiles the curve module.
ext_modules = []
if os.environ.get("NOSTRCRYPTO_CYTHONIZE") == "1":
    from Cython.Build import cythonize

    ext_modules = cythonize(
        [
            Extension(
                "nostrcrypto.curves.secp256k1",
                ["src/nostrcrypto/curves/secp256k1.py"],
                extra_compile_args=[
                    "-O3",
                    "-Wno-unused-function",
                    "-Wno-unused-variable",
                ],
                language="c",
            ),
        ],
        compiler_directives={
            "language_level": 3,
            "boundscheck": False,
            "wraparound": False,
            "nonecheck": False,
            "initializedcheck": False,
        },
        build_dir="build/cython",
    )

with open(os.path.join("src", "nostrcrypto", "__about__.py")) as f:
    version = re.search(r'__version__ = "([^"]+)"', f.read()).group(1)

if __name__ == "__main__":
    setup(
        name="nostrcrypto",
        version=version,
        description="Nostr crypto primitives: secp256k1, BIP-340, NIP-04 ECDH, bech32",
        python_requires=">=3.9",
        packages=find_packages(where="src"),
        package_dir={"": "src"},
        install_requires=[],
        extras_require={
            "cython": ["Cython>=3.0"],
            "test": ["pytest>=7"],
        },
        ext_modules=ext_modules,
    )
