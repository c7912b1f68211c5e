"""HTML5 named character reference table.

The normative list lives at
https://html.spec.whatwg.org/multipage/named-characters.html. Python ships the
same data set as ``html.entities.html5`` (2231 names), so the table is derived
from it once at import time instead of being generated at build time.

Some names are valid without a trailing semicolon, and some of those are
prefixes of other names: ``&times &times; &timesb; &timesbar; &timesd;``.
Every spelling is therefore kept as its own key, including the leading ``&``.
"""

import html.entities
from types import MappingProxyType


def _build_table(source):
    table = {}
    for name, expansion in source.items():
        table[b"&" + name.encode("ascii")] = expansion.encode("utf-8")
    return table


_TABLE = _build_table(html.entities.html5)

# Spelling (b"&amp;", b"&amp", ...) -> UTF-8 expansion. Read-only.
ENTITIES = MappingProxyType(_TABLE)

# Bounds on key length in bytes, leading "&" and trailing ";" included.
ENTITY_MIN_LENGTH = min(len(key) for key in _TABLE)
ENTITY_MAX_LENGTH = max(len(key) for key in _TABLE)
