"""Numeric character references: ``&#NNN;`` and ``&#xHHH;``.

Parsing follows the numeric character reference states of the WHATWG
tokenizer (§13.2.5.75-80); the value is then passed through the correction
table of the "numeric character reference end state".
"""

from .smallset import DECIMAL_DIGITS, HEX_DIGITS

# U+FFFD, used as the expansion of null, surrogate and out-of-range references.
REPLACEMENT_CHAR = "\ufffd"

_U32_MAX = 0xFFFFFFFF

# Significant digits that can still fit in 32 bits, per base.
_U32_MAX_DIGITS = {10: 10, 16: 8}

# control-character-reference exceptions: C1 code points that browsers read
# as Windows-1252.
LEGACY_CONTROL_REPLACEMENTS = {
    0x80: "\u20ac",  # EURO SIGN
    0x82: "\u201a",  # SINGLE LOW-9 QUOTATION MARK
    0x83: "\u0192",  # LATIN SMALL LETTER F WITH HOOK
    0x84: "\u201e",  # DOUBLE LOW-9 QUOTATION MARK
    0x85: "\u2026",  # HORIZONTAL ELLIPSIS
    0x86: "\u2020",  # DAGGER
    0x87: "\u2021",  # DOUBLE DAGGER
    0x88: "\u02c6",  # MODIFIER LETTER CIRCUMFLEX ACCENT
    0x89: "\u2030",  # PER MILLE SIGN
    0x8A: "\u0160",  # LATIN CAPITAL LETTER S WITH CARON
    0x8B: "\u2039",  # SINGLE LEFT-POINTING ANGLE QUOTATION MARK
    0x8C: "\u0152",  # LATIN CAPITAL LIGATURE OE
    0x8E: "\u017d",  # LATIN CAPITAL LETTER Z WITH CARON
    0x91: "\u2018",  # LEFT SINGLE QUOTATION MARK
    0x92: "\u2019",  # RIGHT SINGLE QUOTATION MARK
    0x93: "\u201c",  # LEFT DOUBLE QUOTATION MARK
    0x94: "\u201d",  # RIGHT DOUBLE QUOTATION MARK
    0x95: "\u2022",  # BULLET
    0x96: "\u2013",  # EN DASH
    0x97: "\u2014",  # EM DASH
    0x98: "\u02dc",  # SMALL TILDE
    0x99: "\u2122",  # TRADE MARK SIGN
    0x9A: "\u0161",  # LATIN SMALL LETTER S WITH CARON
    0x9B: "\u203a",  # SINGLE RIGHT-POINTING ANGLE QUOTATION MARK
    0x9C: "\u0153",  # LATIN SMALL LIGATURE OE
    0x9E: "\u017e",  # LATIN SMALL LETTER Z WITH CARON
    0x9F: "\u0178",  # LATIN CAPITAL LETTER Y WITH DIAERESIS
}

# https://infra.spec.whatwg.org/#ascii-whitespace
_ASCII_WHITESPACE = frozenset((0x09, 0x0A, 0x0C, 0x0D, 0x20))


def is_noncharacter(codepoint):
    # https://infra.spec.whatwg.org/#noncharacter
    if 0xFDD0 <= codepoint <= 0xFDEF:
        return True
    return codepoint <= 0x10FFFF and (codepoint & 0xFFFE) == 0xFFFE


def is_surrogate(codepoint):
    return 0xD800 <= codepoint <= 0xDFFF


def is_control(codepoint):
    return codepoint <= 0x1F or 0x7F <= codepoint <= 0x9F


def correct_numeric_reference(codepoint):
    """Apply the numeric reference correction table.

    Args:
        codepoint: parsed value of the reference, 0 <= codepoint <= 0xFFFFFFFF

    Returns:
        tuple: (replacement, error_code). ``replacement`` is the character to
        emit, or None when the reference must stay literal. ``error_code`` is
        the parse error name, or None for a clean reference.
    """
    if codepoint == 0:
        return REPLACEMENT_CHAR, "null-character-reference"
    if codepoint > 0x10FFFF:
        return REPLACEMENT_CHAR, "character-reference-outside-unicode-range"
    if is_surrogate(codepoint):
        return REPLACEMENT_CHAR, "surrogate-character-reference"
    if is_noncharacter(codepoint):
        return None, "noncharacter-character-reference"

    legacy = LEGACY_CONTROL_REPLACEMENTS.get(codepoint)
    if legacy is not None:
        return legacy, "control-character-reference"

    # CR is left literal rather than mapped to LF; other whitespace passes.
    if codepoint == 0x0D:
        return None, "control-character-reference"
    if codepoint in _ASCII_WHITESPACE:
        return chr(codepoint), None
    if is_control(codepoint):
        return None, "control-character-reference"

    return chr(codepoint), None


def match_numeric_reference(cursor, report=None):
    """Consume a numeric reference and return the bytes to emit.

    The cursor must sit on the ``#`` right after ``&``. ``report`` is called
    as ``report(code)`` for every non-fatal condition found.
    """
    cursor.expect(0x23)  # "#"
    literal = bytearray(b"&#")

    if cursor.at_end():
        if report is not None:
            report("absence-of-digits-in-numeric-character-reference")
        return bytes(literal)

    nxt = cursor.peek()
    if nxt == 0x78 or nxt == 0x58:  # "x" / "X"
        literal.append(cursor.expect(nxt))
        digits = cursor.consume_run(HEX_DIGITS)
        base = 16
    else:
        digits = cursor.consume_run(DECIMAL_DIGITS)
        base = 10
    literal += digits

    if cursor.peek() == 0x3B:  # ";"
        literal.append(cursor.expect(0x3B))
    elif report is not None and digits:
        report("missing-semicolon-after-character-reference")

    if not digits:
        if report is not None:
            report("absence-of-digits-in-numeric-character-reference")
        return bytes(literal)

    # Leading zeros are unbounded; anything longer than 32 bits allows is
    # rejected before int() sees it.
    significant = digits.lstrip(b"0")
    if len(significant) > _U32_MAX_DIGITS[base]:
        codepoint = None
    else:
        codepoint = int(significant or b"0", base)
    if codepoint is None or codepoint > _U32_MAX:
        if report is not None:
            report("character-reference-outside-unicode-range")
        return bytes(literal)

    replacement, error = correct_numeric_reference(codepoint)
    if error is not None and report is not None:
        report(error)
    if replacement is None:
        return bytes(literal)
    return replacement.encode("utf-8")
