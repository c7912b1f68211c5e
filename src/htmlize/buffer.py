"""Explicit-index cursor over an in-memory byte buffer.

Peeking reads ``data[pos]``; consuming advances ``pos``. Scanners hand the
cursor to each other, so whatever one consumes the next never sees again.
"""

PEEK_MATCH_ERROR = "next() did not match previous peek()"


class ByteCursor:
    __slots__ = ("data", "length", "pos")

    def __init__(self, data, pos=0):
        self.data = data
        self.length = len(data)
        self.pos = pos

    def at_end(self):
        return self.pos >= self.length

    def peek(self):
        if self.pos >= self.length:
            return None
        return self.data[self.pos]

    def next(self):
        if self.pos >= self.length:
            return None
        byte = self.data[self.pos]
        self.pos += 1
        return byte

    def expect(self, byte):
        """Consume one byte the caller has already peeked.

        A mismatch means the scanning logic itself is broken, never the input,
        so it is raised as an AssertionError and not recovered from.
        """
        if self.next() != byte:
            raise AssertionError(PEEK_MATCH_ERROR)
        return byte

    def consume_run(self, byte_set):
        """Consume the maximal run of bytes in ``byte_set`` and return it."""
        start = self.pos
        data = self.data
        upper = self.length
        pos = start
        while pos < upper and byte_set.contains(data[pos]):
            pos += 1
        self.pos = pos
        return bytes(data[start:pos])

    def find(self, byte):
        """Index of the next ``byte`` at or after the cursor, or -1."""
        return self.data.find(byte, self.pos)

    def take_until(self, end):
        """Consume and return everything up to ``end`` (exclusive)."""
        chunk = self.data[self.pos : end]
        self.pos = end
        return chunk
