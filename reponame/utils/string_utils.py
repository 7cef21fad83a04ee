"""
String Manipulation Utilities for reponame.

Helpers for rendering untrusted input safely inside error messages and logs.
"""

from __future__ import annotations

from typing import Dict


# Escapes for the common whitespace control characters
_CONTROL_CHAR_ESCAPES: Dict[str, str] = {
    "\r": "\\r",
    "\n": "\\n",
    "\t": "\\t",
}

# Placeholder for every other control character
_CONTROL_CHAR_PLACEHOLDER = "<?>"


def is_control_char(char: str) -> bool:
    """Return True for C0 control characters and DEL."""
    code = ord(char)
    return code < 0x20 or code == 0x7F


def sanitize_control_chars(text: str) -> str:
    """
    Make a string safe to embed in a single-line message.

    Carriage returns, newlines and tabs are replaced by their backslash
    escapes; any other control character becomes ``<?>``.

    Args:
        text: Arbitrary, possibly user-supplied string

    Returns:
        The sanitized string
    """
    if not any(is_control_char(char) for char in text):
        return text

    parts = []
    for char in text:
        if char in _CONTROL_CHAR_ESCAPES:
            parts.append(_CONTROL_CHAR_ESCAPES[char])
        elif is_control_char(char):
            parts.append(_CONTROL_CHAR_PLACEHOLDER)
        else:
            parts.append(char)
    return "".join(parts)
