"""Rendering of decoded payload text for messages and reports."""

from __future__ import annotations


def display_text(text: str) -> str:
    """Return ``text`` with lone surrogates escaped as backslash sequences.

    JSON string escapes can decode to code points that have no UTF-8 form;
    messages built from payload values must stay encodable.
    """
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        return text.encode("utf-8", "backslashreplace").decode("utf-8")
    return text
