"""Escaping of reserved HTML characters.

Each variant is one ``str.translate`` pass; characters outside its table are
copied unchanged. Already escaped text is escaped again (``&amp;`` becomes
``&amp;amp;``).
"""

from __future__ import annotations

_TEXT_REPLACEMENTS = {"&": "&amp;", "<": "&lt;", ">": "&gt;"}
_ATTRIBUTE_REPLACEMENTS = {**_TEXT_REPLACEMENTS, '"': "&quot;"}
_ALL_QUOTES_REPLACEMENTS = {**_ATTRIBUTE_REPLACEMENTS, "'": "&apos;"}

_TEXT_TABLE = str.maketrans(_TEXT_REPLACEMENTS)
_ATTRIBUTE_TABLE = str.maketrans(_ATTRIBUTE_REPLACEMENTS)
_ALL_QUOTES_TABLE = str.maketrans(_ALL_QUOTES_REPLACEMENTS)


def _as_text(raw: str | bytes | bytearray | memoryview | None) -> str:
    if raw is None:
        return ""
    if isinstance(raw, str):
        return raw
    return bytes(raw).decode("utf-8", "replace")


def escape_text(raw: str | bytes | bytearray | memoryview | None) -> str:
    """Escape a string used in a text node, i.e. regular text.

    Do not use this in attributes:

        >>> escape_text('Björk & Борис O\\'Brien <3, "love > hate"')
        'Björk &amp; Борис O\\'Brien &lt;3, "love &gt; hate"'
    """
    return _as_text(raw).translate(_TEXT_TABLE)


def escape_attribute(raw: str | bytes | bytearray | memoryview | None) -> str:
    """Escape a string to be used in a double quoted attribute.

        >>> escape_attribute('Björk & Борис O\\'Brien <3, "love > hate"')
        "Björk &amp; Борис O'Brien &lt;3, &quot;love &gt; hate&quot;"
    """
    return _as_text(raw).translate(_ATTRIBUTE_TABLE)


def escape_all_quotes(raw: str | bytes | bytearray | memoryview | None) -> str:
    """Escape a string including both single and double quotes.

    Leaving apostrophes alone is generally safe, so ``escape_text`` or
    ``escape_attribute`` is usually what you want.
    """
    return _as_text(raw).translate(_ALL_QUOTES_TABLE)
