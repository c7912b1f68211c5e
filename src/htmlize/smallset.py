class SmallByteSet:
    __slots__ = ("_mask",)

    def __init__(self, chars):
        mask = 0
        for c in chars:
            code = ord(c)
            if code >= 128:
                raise ValueError("SmallByteSet only supports ASCII")
            mask |= 1 << code
        self._mask = mask

    def contains(self, byte):
        if byte >= 128:
            return False
        return (self._mask >> byte) & 1 == 1


DECIMAL_DIGITS = SmallByteSet("0123456789")
HEX_DIGITS = SmallByteSet("0123456789abcdefABCDEF")
ALPHANUMERIC = SmallByteSet("0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")
