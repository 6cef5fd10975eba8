"""Name transformation: affix stripping, case styling, and sanitization.

Turns a C constant name such as ``kIOPSPowerAdapterIDKey`` into a Swift case
identifier such as ``powerAdapterID``. Everything here is a pure function of
its arguments; reserved-word handling is injected through ``KeywordPolicy`` so
the rules stay independent of the target language.
"""

import logging
import re
from dataclasses import dataclass
from typing import Callable, Optional, Pattern

from .models import CaseStyle

logger = logging.getLogger(__name__)

# Anything that is not a letter or digit splits tokens (so "_" does too)
SEPARATOR_PATTERN: Pattern = re.compile(r"[\W_]+")

# Anything that is not a letter, digit, or underscore is invalid in an identifier
INVALID_IDENTIFIER_PATTERN: Pattern = re.compile(r"\W+")


@dataclass(frozen=True)
class KeywordPolicy:
    """Reserved-word check and quoting rule of the target declaration syntax."""

    is_reserved: Callable[[str], bool]
    quote: Callable[[str], str]

    def escape(self, identifier: str) -> str:
        if self.is_reserved(identifier):
            return self.quote(identifier)
        return identifier


NO_RESERVED_WORDS = KeywordPolicy(is_reserved=lambda name: False, quote=lambda name: name)


def _longest_match(affixes: list[str], matches: Callable[[str], bool]) -> Optional[str]:
    best = None
    for affix in affixes:
        if affix and matches(affix) and (best is None or len(affix) > len(best)):
            best = affix
    return best


def strip_prefix(name: str, prefixes: list[str]) -> str:
    """Remove the longest non-empty prefix from the list that the name starts with."""
    best = _longest_match(prefixes, name.startswith)
    if best is None:
        return name
    return name[len(best):]


def strip_suffix(name: str, suffixes: list[str]) -> str:
    """Remove the longest non-empty suffix from the list that the name ends with."""
    best = _longest_match(suffixes, name.endswith)
    if best is None:
        return name
    return name[: len(name) - len(best)]


def strip_affixes(name: str, prefixes: list[str], suffixes: list[str]) -> str:
    """Strip the best prefix, then the best suffix of what remains."""
    return strip_suffix(strip_prefix(name, prefixes), suffixes)


def split_tokens(value: str) -> list[str]:
    """Split on runs of non-alphanumeric characters, dropping empty tokens."""
    return [token for token in SEPARATOR_PATTERN.split(value) if token]


def _capitalize_token(token: str) -> str:
    return token[:1].upper() + token[1:].lower()


def upper_camel_from_tokens(tokens: list[str]) -> str:
    return "".join(_capitalize_token(token) for token in tokens)


def lower_camel_from_tokens(tokens: list[str]) -> str:
    if not tokens:
        return ""
    return tokens[0].lower() + "".join(_capitalize_token(token) for token in tokens[1:])


def lower_camel_from_camel(value: str) -> str:
    """
    Lowercase the leading word of an already camel-cased name.

    The leading run of capitals decides what happens:

    - no capitals (``already``): unchanged
    - all capitals (``ID``): fully lowercased, ``id``
    - one capital (``PowerAdapterID``): ``powerAdapterID``
    - an acronym run (``HTTPServer``): the run's last capital starts the next
      word, giving ``httpServer``
    """
    run = 0
    while run < len(value) and value[run].isupper():
        run += 1

    if run == 0:
        return value
    if run == len(value):
        return value.lower()
    if run == 1:
        return value[0].lower() + value[1:]
    return value[: run - 1].lower() + value[run - 1:]


def apply_case_style(value: str, style: CaseStyle) -> str:
    """
    Apply a case-style policy to a stripped name.

    Args:
        value: Name after affix stripping
        style: Policy to apply

    Returns:
        The styled name; not yet guaranteed to be a valid identifier
    """
    if style == CaseStyle.KEEP:
        return value

    has_separator = SEPARATOR_PATTERN.search(value) is not None

    if style == CaseStyle.UPPER_CAMEL:
        if has_separator:
            return upper_camel_from_tokens(split_tokens(value))
        return value[:1].upper() + value[1:]

    if has_separator:
        return lower_camel_from_tokens(split_tokens(value))
    return lower_camel_from_camel(value)


def sanitize_identifier(value: str) -> str:
    """
    Coerce a styled name into a valid identifier.

    Each run of characters other than letters, digits, and underscore becomes
    one underscore. Leading underscores are trimmed while more than one
    character remains, and a leading digit gets an underscore prepended.

    Examples:
        >>> sanitize_identifier("2Fast-Name!!")
        '_2Fast_Name_'
        >>> sanitize_identifier("!!")
        '_'
    """
    result = INVALID_IDENTIFIER_PATTERN.sub("_", value)

    while result.startswith("_") and len(result) > 1:
        result = result[1:]

    if result and result[0].isdigit():
        result = "_" + result

    if not result:
        result = "_"

    return result
