"""
Build script for htmlize. Metadata lives in pyproject.toml.

Set HTMLIZE_USE_MYPYC=1 to compile the decoder modules with mypyc:

    HTMLIZE_USE_MYPYC=1 pip install .
"""

import os
import sys

from setuptools import setup

# Decoder hot path. escape.py is a single str.translate call and gains nothing.
MYPYC_MODULES = [
    "src/htmlize/buffer.py",
    "src/htmlize/smallset.py",
    "src/htmlize/numeric.py",
    "src/htmlize/named.py",
    "src/htmlize/unescape.py",
]


def mypyc_extensions() -> list:
    try:
        from mypyc.build import mypycify
    except ImportError:
        sys.exit("HTMLIZE_USE_MYPYC=1 needs mypyc: pip install htmlize[mypyc]")

    return mypycify(
        MYPYC_MODULES,
        opt_level=os.environ.get("MYPYC_OPT_LEVEL", "3"),
        debug_level=os.environ.get("MYPYC_DEBUG_LEVEL", "0"),
    )


if __name__ == "__main__":
    use_mypyc = os.environ.get("HTMLIZE_USE_MYPYC", "0") == "1"
    setup(ext_modules=mypyc_extensions() if use_mypyc else [])
