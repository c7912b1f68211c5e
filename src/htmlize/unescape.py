"""Character reference decoding.

Based on the character reference state of the WHATWG tokenizer
(https://html.spec.whatwg.org/multipage/parsing.html#character-reference-state),
applied to a standalone byte string instead of a token stream. Every input has
a defined output: references that cannot be resolved are copied through
verbatim.
"""

from __future__ import annotations

from .buffer import ByteCursor
from .errors import ParseError, StrictModeError
from .named import match_named_reference
from .numeric import match_numeric_reference


class UnescapeOpts:
    __slots__ = ("collect_errors", "debug", "strict")

    def __init__(self, collect_errors=False, strict=False, debug=False):
        self.collect_errors = bool(collect_errors)
        self.strict = bool(strict)
        self.debug = bool(debug)


class Unescaper:
    """Reusable decoder.

    Usage:
        unescaper = Unescaper(UnescapeOpts(collect_errors=True))
        unescaper.run(b"&times 3")  # b"\\xc3\\x97 3"
        unescaper.errors            # [ParseError('missing-semicolon-...', line=1, column=1)]

    ``errors`` only holds the diagnostics of the most recent ``run``. An
    instance keeps per-run state and must not be shared between threads.
    """

    __slots__ = ("_data", "_line", "_line_start", "_ref_start", "_scanned", "errors", "opts")

    def __init__(self, opts: UnescapeOpts | None = None) -> None:
        self.opts = opts or UnescapeOpts()
        self.errors: list[ParseError] = []
        self._data = b""
        self._ref_start = 0
        self._reset_position()

    def run(self, escaped: bytes | bytearray | memoryview) -> bytes:
        data = bytes(escaped)
        self.errors = []
        if b"&" not in data:
            return data

        self._data = data
        self._reset_position()
        opts = self.opts
        report = self._emit_error if (opts.collect_errors or opts.strict) else None
        cursor = ByteCursor(data)
        out = bytearray()

        while True:
            amp = cursor.find(0x26)
            if amp == -1:
                out += cursor.take_until(cursor.length)
                break
            out += cursor.take_until(amp)

            cursor.expect(0x26)  # "&"
            self._ref_start = amp
            if cursor.peek() == 0x23:  # "#"
                expansion = match_numeric_reference(cursor, report)
            else:
                expansion = match_named_reference(cursor, report)

            if opts.debug:
                self.debug(f"{data[amp : cursor.pos]!r} -> {expansion!r}")
            out += expansion

        return bytes(out)

    def debug(self, message, indent=4):
        if self.opts.debug:
            print(f"{' ' * indent}{message}")

    def _reset_position(self):
        self._line = 1
        self._line_start = 0
        self._scanned = 0

    def _emit_error(self, code):
        data = self._data
        pos = self._ref_start
        # References only move forward, so count newlines since the last error.
        scanned = self._scanned
        if pos > scanned:
            newlines = data.count(b"\n", scanned, pos)
            if newlines:
                self._line += newlines
                self._line_start = data.rfind(b"\n", scanned, pos) + 1
            self._scanned = pos
        error = ParseError(code, line=self._line, column=pos - self._line_start + 1)
        if self.opts.strict:
            raise StrictModeError(error)
        self.errors.append(error)


def unescape_bytes(escaped: bytes | bytearray | memoryview) -> bytes:
    """Expand all character references in a byte string.

    Bytes outside references are copied as-is, so input that is not valid
    UTF-8 stays exactly as invalid as it was.
    """
    return Unescaper().run(escaped)


def unescape(escaped: str | bytes | bytearray | memoryview, *, strict: bool = False) -> str:
    """Expand all valid character references.

    Named references, including the legacy ones that may omit the trailing
    semicolon, are matched longest first, so ``&timesb;`` is ``\\u22a0`` while
    ``&timesa`` is ``\\xd7a``. Numeric references go through the HTML
    correction table. Anything that does not form a valid reference is
    returned unchanged.

    Args:
        escaped: text to decode. ``str`` is processed as UTF-8; bytes input
            that is not valid UTF-8 is decoded with replacement characters.
        strict: raise ``StrictModeError`` on the first malformed reference
            instead of passing it through.

    Returns:
        str: the decoded text
    """
    if isinstance(escaped, str):
        if "&" not in escaped:
            return escaped
        data = escaped.encode("utf-8", "surrogatepass")
        errors = "surrogatepass"
    else:
        data = escaped
        errors = "replace"

    opts = UnescapeOpts(strict=True) if strict else None
    return Unescaper(opts).run(data).decode("utf-8", errors)
