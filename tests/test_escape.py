"""Test escaping of string literal content."""

import json

from jsonscribe.escape import escape, quote


def test_quote_and_backslash():
    assert escape('a"b\\c') == 'a\\"b\\\\c'


def test_short_control_escapes():
    assert escape('\b\f\n\r\t') == '\\b\\f\\n\\r\\t'


def test_other_control_characters_use_unicode_form():
    assert escape('\x00') == '\\u0000'
    assert escape('\x01') == '\\u0001'
    assert escape('\x1f') == '\\u001f'


def test_printable_and_non_ascii_pass_through():
    text = "plain / text é 漢字 😀 \x7f  "
    assert escape(text) == text


def test_ensure_ascii():
    assert escape('é', ensure_ascii=True) == '\\u00e9'
    assert escape('漢', ensure_ascii=True) == '\\u6f22'
    assert escape('😀', ensure_ascii=True) == '\\ud83d\\ude00'
    assert escape('abc~\x7f', ensure_ascii=True) == 'abc~\x7f'


def test_round_trip_through_json_parser():
    """Escaped text parses back to the original string."""
    text = 'quote " backslash \\ ' + ''.join(chr(i) for i in range(0x20)) + ' end é 😀'
    assert json.loads(quote(text)) == text
    assert json.loads(quote(text, ensure_ascii=True)) == text


def test_chunked_escaping_matches_whole():
    """Escaping character by character gives the same text as escaping all at once."""
    text = 'Line 1\nLine 2\t"quoted"\\\x02'
    assert ''.join(escape(char) for char in text) == escape(text)


def test_matches_json_dumps():
    text = 'Quote: " Backslash: \\ Tab: \t Newline: \n Bell: \x07'
    assert quote(text) == json.dumps(text, ensure_ascii=False)
