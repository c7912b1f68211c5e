from .entities import ENTITIES, ENTITY_MAX_LENGTH, ENTITY_MIN_LENGTH
from .errors import ParseError, StrictModeError
from .escape import escape_all_quotes, escape_attribute, escape_text
from .numeric import REPLACEMENT_CHAR
from .unescape import UnescapeOpts, Unescaper, unescape, unescape_bytes

__all__ = [
    "ENTITIES",
    "ENTITY_MAX_LENGTH",
    "ENTITY_MIN_LENGTH",
    "REPLACEMENT_CHAR",
    "ParseError",
    "StrictModeError",
    "UnescapeOpts",
    "Unescaper",
    "escape_all_quotes",
    "escape_attribute",
    "escape_text",
    "unescape",
    "unescape_bytes",
]
