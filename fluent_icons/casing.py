"""Casing conventions used to turn icon names into Python identifiers."""

from __future__ import annotations

import keyword
import re
from typing import Callable, Dict, List

SNAKE_CASE = "snake_case"
SCREAMING_SNAKE_CASE = "screaming_snake_case"
UPPER_CAMEL_CASE = "upper_camel_case"
LOWER_CAMEL_CASE = "lower_camel_case"

# Acronym runs end before a capital that starts a lower-case word (XMLHttp -> XML, Http).
_WORD_RE = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z0-9]+|[A-Z]+")


def split_words(text: str) -> List[str]:
    """Split text into words on separators and case boundaries."""
    return _WORD_RE.findall(text)


def to_snake_case(text: str) -> str:
    return "_".join(word.lower() for word in split_words(text))


def to_screaming_snake_case(text: str) -> str:
    return "_".join(word.upper() for word in split_words(text))


def to_upper_camel_case(text: str) -> str:
    return "".join(word.capitalize() for word in split_words(text))


def to_lower_camel_case(text: str) -> str:
    words = split_words(text)
    if not words:
        return ""
    return words[0].lower() + "".join(word.capitalize() for word in words[1:])


def to_title_case(text: str) -> str:
    """Return a human readable form, e.g. ``AddCircle`` -> ``Add Circle``."""
    return " ".join(word.capitalize() for word in split_words(text))


CASINGS: Dict[str, Callable[[str], str]] = {
    SNAKE_CASE: to_snake_case,
    SCREAMING_SNAKE_CASE: to_screaming_snake_case,
    UPPER_CAMEL_CASE: to_upper_camel_case,
    LOWER_CAMEL_CASE: to_lower_camel_case,
}


def make_identifier(text: str, casing: str) -> str | None:
    """Apply ``casing`` to ``text`` and return a valid, non-keyword Python identifier.

    Returns ``None`` when the text has no usable words. Names starting with a
    digit get a leading underscore and keywords get a trailing one
    (``class`` -> ``class_``).
    """
    try:
        transform = CASINGS[casing]
    except KeyError:
        raise ValueError(f"Unknown casing: {casing}") from None

    name = transform(text)
    if not name:
        return None
    if name[0].isdigit():
        name = f"_{name}"
    if keyword.iskeyword(name):
        name = f"{name}_"
    return name


__all__ = [
    "CASINGS",
    "LOWER_CAMEL_CASE",
    "SCREAMING_SNAKE_CASE",
    "SNAKE_CASE",
    "UPPER_CAMEL_CASE",
    "make_identifier",
    "split_words",
    "to_lower_camel_case",
    "to_screaming_snake_case",
    "to_snake_case",
    "to_title_case",
    "to_upper_camel_case",
]
