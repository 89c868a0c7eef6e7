"""Lookup of single query parameters straight from a raw query string."""

from __future__ import annotations

from urllib.parse import unquote_plus

_HEX = frozenset("0123456789abcdefABCDEF")


def _query_unescape(text: str) -> str:
    """Decode a query component, returning ``""`` on a malformed escape."""
    index = text.find("%")
    while index != -1:
        pair = text[index + 1:index + 3]
        if len(pair) != 2 or not set(pair) <= _HEX:
            return ""
        index = text.find("%", index + 3)
    return unquote_plus(text)


def get(query: str, name: str) -> str:
    """Return the value of query parameter ``name`` from a raw ``query``.

    Only the first occurrence is used. A parameter present without a value
    yields ``"true"``; a missing one yields ``""``.
    """
    pos = 0
    length = len(query)
    while pos < length:
        end = query.find("=", pos)
        if end == -1:
            end = query.find("&", pos)
        if end == -1:
            end = length

        if _query_unescape(query[pos:end]) == name:
            if end == length or query[end] == "&":
                return "true"
            pos = end + 1
            end = query.find("&", pos)
            if end == -1:
                end = length
            return _query_unescape(query[pos:end])

        amp = query.find("&", pos)
        if amp == -1:
            break
        pos = amp + 1
    return ""