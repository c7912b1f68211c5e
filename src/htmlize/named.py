"""Named character references (``&amp;``, ``&times``, ...)."""

from .entities import ENTITIES, ENTITY_MAX_LENGTH, ENTITY_MIN_LENGTH
from .smallset import ALPHANUMERIC


def match_named_reference(cursor, report=None):
    """Consume a named reference and return the bytes to emit.

    The cursor sits just after ``&``. The longest table key that is a prefix
    of the candidate wins; whatever the candidate holds beyond that key is
    ordinary text and is emitted after the expansion. With no match the
    candidate comes back unchanged.

    ``report(code)`` is called for non-fatal conditions, as in
    ``match_numeric_reference``.
    """
    candidate = b"&" + cursor.consume_run(ALPHANUMERIC)
    if cursor.peek() == 0x3B:  # ";"
        cursor.expect(0x3B)
        candidate += b";"

    length = len(candidate)
    if length < ENTITY_MIN_LENGTH:
        return candidate

    for check_len in range(min(length, ENTITY_MAX_LENGTH), ENTITY_MIN_LENGTH - 1, -1):
        expansion = ENTITIES.get(candidate[:check_len])
        if expansion is None:
            continue
        if report is not None and candidate[check_len - 1] != 0x3B:
            report("missing-semicolon-after-character-reference")
        if check_len < length:
            return expansion + candidate[check_len:]
        return expansion

    if report is not None and candidate[-1] == 0x3B:
        report("unknown-named-character-reference")
    return candidate
