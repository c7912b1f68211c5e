"""Entity table and whole-table decoding."""

import html.entities
import unittest

from htmlize import ENTITIES, ENTITY_MAX_LENGTH, ENTITY_MIN_LENGTH, unescape_bytes
from htmlize.buffer import ByteCursor
from htmlize.named import match_named_reference
from htmlize.numeric import correct_numeric_reference, is_noncharacter, match_numeric_reference


class TestEntityTable(unittest.TestCase):
    def test_table_covers_html5_names(self):
        assert len(ENTITIES) == len(html.entities.html5)
        assert ENTITIES[b"&amp;"] == b"&"
        assert ENTITIES[b"&amp"] == b"&"
        assert ENTITIES[b"&AMP;"] == b"&"

    def test_length_bounds(self):
        assert ENTITY_MIN_LENGTH == 3
        assert ENTITY_MAX_LENGTH == len(b"&CounterClockwiseContourIntegral;")
        assert all(ENTITY_MIN_LENGTH <= len(key) <= ENTITY_MAX_LENGTH for key in ENTITIES)

    def test_keys_share_prefixes(self):
        for key in (b"&times", b"&times;", b"&timesb;", b"&timesbar;", b"&timesd;"):
            assert key in ENTITIES
        assert b"&timesb" not in ENTITIES

    def test_table_is_read_only(self):
        with self.assertRaises(TypeError):
            ENTITIES[b"&new;"] = b"x"

    def test_every_entity_decodes_alone(self):
        for key, expansion in ENTITIES.items():
            assert unescape_bytes(key) == expansion, key

    def test_all_entities_corpus(self):
        source = b" ".join(ENTITIES.keys())
        expanded = b" ".join(ENTITIES.values())
        assert unescape_bytes(source) == expanded

    def test_longest_match_over_shared_prefixes(self):
        """A key never decodes as a shorter key plus leftover text."""
        for key in ENTITIES:
            for short_len in range(ENTITY_MIN_LENGTH, len(key)):
                shorter = key[:short_len]
                if shorter in ENTITIES:
                    assert unescape_bytes(key) != ENTITIES[shorter] + key[short_len:]


class TestNamedMatcher(unittest.TestCase):
    def test_consumes_candidate_and_semicolon(self):
        cursor = ByteCursor(b"&timesb;rest", pos=1)
        assert match_named_reference(cursor) == "⊠".encode()
        assert cursor.pos == 8

    def test_stops_at_non_alphanumeric(self):
        cursor = ByteCursor(b"&lt<b>", pos=1)
        assert match_named_reference(cursor) == b"<"
        assert cursor.pos == 3

    def test_short_candidate(self):
        cursor = ByteCursor(b"&a", pos=1)
        assert match_named_reference(cursor) == b"&a"

    def test_reports_missing_semicolon(self):
        codes = []
        match_named_reference(ByteCursor(b"&copy", pos=1), codes.append)
        assert codes == ["missing-semicolon-after-character-reference"]


class TestNumericResolver(unittest.TestCase):
    def test_requires_hash(self):
        with self.assertRaises(AssertionError):
            match_numeric_reference(ByteCursor(b"&x41;", pos=1))

    def test_returns_literal_with_semicolon(self):
        cursor = ByteCursor(b"&#xFFFE;!", pos=1)
        assert match_numeric_reference(cursor) == b"&#xFFFE;"
        assert cursor.pos == 8

    def test_correction_table(self):
        assert correct_numeric_reference(0) == ("\ufffd", "null-character-reference")
        assert correct_numeric_reference(0x95) == ("\u2022", "control-character-reference")
        assert correct_numeric_reference(0x0A) == ("\n", None)
        assert correct_numeric_reference(0x0D) == (None, "control-character-reference")
        assert correct_numeric_reference(0x41) == ("A", None)

    def test_noncharacters(self):
        assert is_noncharacter(0xFDD0)
        assert is_noncharacter(0xFDEF)
        assert not is_noncharacter(0xFDF0)
        for plane in range(17):
            assert is_noncharacter(plane * 0x10000 + 0xFFFE)
            assert is_noncharacter(plane * 0x10000 + 0xFFFF)
            assert not is_noncharacter(plane * 0x10000 + 0xFFFD)
        assert not is_noncharacter(0x11FFFE)


class TestByteCursor(unittest.TestCase):
    def test_peek_does_not_consume(self):
        cursor = ByteCursor(b"ab")
        assert cursor.peek() == 0x61
        assert cursor.peek() == 0x61
        assert cursor.next() == 0x61
        assert cursor.next() == 0x62
        assert cursor.peek() is None
        assert cursor.next() is None
        assert cursor.at_end()

    def test_expect_mismatch_is_fatal(self):
        with self.assertRaises(AssertionError):
            ByteCursor(b"a").expect(0x23)


if __name__ == "__main__":
    unittest.main()
