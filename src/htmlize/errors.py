"""Diagnostics raised or collected while decoding character references."""


class ParseError:
    """A malformed character reference: WHATWG error code plus 1-based location."""

    __slots__ = ("code", "column", "line")

    def __init__(self, code, line=None, column=None):
        self.code = code
        self.line = line
        self.column = column

    def __repr__(self):
        return f"ParseError({self.code!r}, line={self.line}, column={self.column})"

    def __str__(self):
        return f"({self.line},{self.column}): {self.code}"

    def __eq__(self, other):
        if not isinstance(other, ParseError):
            return NotImplemented
        return (self.code, self.line, self.column) == (other.code, other.line, other.column)

    __hash__ = None


class StrictModeError(SyntaxError):
    """Raised at the first malformed reference in strict mode."""

    def __init__(self, error):
        self.error = error
        super().__init__(str(error))
