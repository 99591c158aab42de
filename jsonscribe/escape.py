r"""
Escape - Per-character escaping for JSON string literals.

Every character is handled on its own, so a literal can be escaped chunk by
chunk as it streams in:

- ``"`` and ``\`` get a backslash,
- \b \f \n \r \t use their two-character forms,
- other control characters below U+0020 become \u00XX,
- everything else passes through (or, with ensure_ascii, anything above
  U+007F becomes \uXXXX, using surrogate pairs for astral characters).
"""

_SHORT_ESCAPES = {
    '"': '\\"',
    '\\': '\\\\',
    '\b': '\\b',
    '\f': '\\f',
    '\n': '\\n',
    '\r': '\\r',
    '\t': '\\t',
}


def _unicode_escape(code_point: int) -> str:
    if code_point > 0xFFFF:
        code_point -= 0x10000
        high = 0xD800 | (code_point >> 10)
        low = 0xDC00 | (code_point & 0x3FF)
        return '\\u%04x\\u%04x' % (high, low)
    return '\\u%04x' % code_point


def _build_table() -> dict:
    table = {code_point: _unicode_escape(code_point) for code_point in range(0x20)}
    table.update({ord(char): escaped for char, escaped in _SHORT_ESCAPES.items()})
    return table


ESCAPE_TABLE = _build_table()


class _AsciiEscapeTable(dict):
    """Translation table that also escapes non-ASCII characters on demand."""

    def __missing__(self, code_point: int) -> str:
        if code_point < 0x80:
            raise KeyError(code_point)
        escaped = _unicode_escape(code_point)
        self[code_point] = escaped
        return escaped


ASCII_ESCAPE_TABLE = _AsciiEscapeTable(ESCAPE_TABLE)


def escape(text: str, ensure_ascii: bool = False) -> str:
    """
    Escape text for the inside of a JSON string literal (quotes not added).

    Args:
        text: Characters to escape. May be a single character or any chunk
            of a longer literal.
        ensure_ascii: Also escape every character above U+007F.
    """
    return text.translate(ASCII_ESCAPE_TABLE if ensure_ascii else ESCAPE_TABLE)


def quote(text: str, ensure_ascii: bool = False) -> str:
    """Return text as a complete, double-quoted JSON string literal."""
    return '"' + escape(text, ensure_ascii) + '"'
