import unittest

from htmlize import escape_all_quotes, escape_attribute, escape_text

BASIC_CORPUS = [
    ("", ""),
    ("clean", "clean"),
    ("< >", "&lt; &gt;"),
    ("&amp;", "&amp;amp;"),
]

QUOTED = "He said, \"That's mine.\""
DIRTY = '<a href="/?q=1&r=2" title=\'x\'>Björk & Борис</a>'


class TestEscape(unittest.TestCase):
    def test_basic_corpus(self):
        for escape in (escape_text, escape_attribute, escape_all_quotes):
            for raw, expected in BASIC_CORPUS:
                assert escape(raw) == expected, (escape.__name__, raw)

    def test_text_leaves_quotes(self):
        assert escape_text(QUOTED) == QUOTED

    def test_attribute_escapes_double_quotes(self):
        assert escape_attribute(QUOTED) == "He said, &quot;That's mine.&quot;"

    def test_all_quotes(self):
        assert escape_all_quotes(QUOTED) == "He said, &quot;That&apos;s mine.&quot;"

    def test_dirty_html(self):
        assert escape_text(DIRTY) == '&lt;a href="/?q=1&amp;r=2" title=\'x\'&gt;Björk &amp; Борис&lt;/a&gt;'
        assert escape_all_quotes(DIRTY) == (
            "&lt;a href=&quot;/?q=1&amp;r=2&quot; title=&apos;x&apos;&gt;Björk &amp; Борис&lt;/a&gt;"
        )

    def test_clean_html_unchanged(self):
        clean = "Nothing to see here, just text."
        assert escape_text(clean) == clean

    def test_not_idempotent(self):
        once = escape_text("a & b")
        assert once == "a &amp; b"
        assert escape_text(once) == "a &amp;amp; b"

    def test_bytes_input(self):
        assert escape_text(b"<3") == "&lt;3"
        assert escape_attribute(bytearray('"Björk"'.encode())) == "&quot;Björk&quot;"

    def test_none(self):
        assert escape_text(None) == ""


if __name__ == "__main__":
    unittest.main()
