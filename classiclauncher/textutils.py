"""String helpers for paths, command lines and trimming."""

from __future__ import annotations

import os

_SEPARATOR = "\\" if os.name == "nt" else "/"
_FOREIGN_SEPARATOR = "/" if _SEPARATOR == "\\" else "\\"
_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset("0123456789")


def normalize_path(path: str) -> str:
    """Use the platform's separator throughout and collapse repeated separators."""
    converted = replace_string(path, _FOREIGN_SEPARATOR, _SEPARATOR)
    return remove_duplicate_slashes(converted)


def replace_string(value: str, old: str, new: str) -> str:
    """Replace every occurrence of ``old``; an empty ``old`` leaves ``value`` as is."""
    if not old:
        return value
    return value.replace(old, new)


def remove_duplicate_slashes(text: str) -> str:
    """Collapse runs of the platform's path separator into one."""
    parts: list[str] = []
    previous_is_slash = False
    for char in text:
        if char == _SEPARATOR:
            if not previous_is_slash:
                parts.append(char)
            previous_is_slash = True
        else:
            parts.append(char)
            previous_is_slash = False
    return "".join(parts)


def split_string(text: str) -> list[str]:
    """Split on whitespace, keeping double-quoted sections (and their quotes) whole."""
    tokens: list[str] = []
    token: list[str] = []
    inside_quotes = False

    for char in text:
        if char not in _WHITESPACE or inside_quotes:
            token.append(char)
            if char == '"':
                inside_quotes = not inside_quotes
        else:
            trimmed = trim("".join(token))
            token = [trimmed] if trimmed else []
            if trimmed:
                tokens.append(trimmed)
                token = []

    if token:
        tokens.append(trim("".join(token)))
    return tokens


def ltrim(text: str) -> str:
    """Strip leading whitespace; a string of whitespace only is returned unchanged."""
    for index, char in enumerate(text):
        if char not in _WHITESPACE:
            return text[index:]
    return text


def rtrim(text: str) -> str:
    """Strip trailing whitespace; a string of whitespace only is returned unchanged."""
    for index in range(len(text), 0, -1):
        if text[index - 1] not in _WHITESPACE:
            return text[:index]
    return text


def trim(text: str) -> str:
    """Strip whitespace from both ends, as :func:`ltrim` and :func:`rtrim` do."""
    return ltrim(rtrim(text))


def is_all_digits(text: str) -> bool:
    """True if every character is an ASCII digit (also true for an empty string)."""
    return all(char in _DIGITS for char in text)