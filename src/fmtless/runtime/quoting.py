"""Double-quoted string literals for the %q verb.

Escaping rules:
    - \\a \\b \\f \\n \\r \\t \\v \\\\ \\" use their short escapes
    - Other printable characters (including non-ASCII) pass through
    - Non-printable characters below U+0080 become \\xNN
    - Other non-printable characters become \\uNNNN or \\UNNNNNNNN
    - Bytes that are not valid UTF-8 become \\xNN

The result is a valid Python string literal: ast.literal_eval() of
quote(s) gives back s.

Python 3.13+. Zero external dependencies.
"""

__all__ = ["quote", "quote_bytes"]

_SHORT_ESCAPES: dict[str, str] = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\\": "\\\\",
    '"': '\\"',
}

# surrogateescape maps undecodable byte 0xNN to U+DCNN (0x80 <= NN <= 0xFF).
_SURROGATE_ESCAPE_LOW: int = 0xDC80
_SURROGATE_ESCAPE_HIGH: int = 0xDCFF


def _escape(char: str) -> str:
    escaped = _SHORT_ESCAPES.get(char)
    if escaped is not None:
        return escaped
    if char.isprintable():
        return char
    code = ord(char)
    if code < 0x80:
        return f"\\x{code:02x}"
    if code < 0x10000:
        return f"\\u{code:04x}"
    return f"\\U{code:08x}"


def quote(text: str) -> str:
    """Return text as a double-quoted, escaped literal.

    Example:
        >>> quote('a "quoted" word')
        '"a \\\\"quoted\\\\" word"'
        >>> quote("tab\\there")
        '"tab\\\\there"'
    """
    return '"' + "".join(_escape(char) for char in text) + '"'


def quote_bytes(data: bytes) -> str:
    """Quote a byte sequence as if it were UTF-8 text.

    Invalid UTF-8 bytes are written as \\xNN escapes instead of failing.
    """
    text = data.decode("utf-8", errors="surrogateescape")
    parts: list[str] = []
    for char in text:
        code = ord(char)
        if _SURROGATE_ESCAPE_LOW <= code <= _SURROGATE_ESCAPE_HIGH:
            parts.append(f"\\x{code - 0xDC00:02x}")
        else:
            parts.append(_escape(char))
    return '"' + "".join(parts) + '"'
