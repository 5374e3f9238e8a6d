# topmark:header:start
#
#   project      : Printkit
#   file         : naming.py
#   file_relpath : src/printkit/reflection/naming.py
#   license      : MIT
#   copyright    : (c) 2025 Printkit contributors
#
# topmark:header:end

"""Identifier normalization for column labels.

Field names and serialization names arrive in whatever convention the record author
used (``myField``, ``my_field``, ``MyField``, ``field1``, ``HTTPServer``). Column
labels are rendered in a single "shouting" form with words separated by spaces:

    >>> to_screaming_words("myField")
    'MY FIELD'
    >>> to_screaming_words("my_field")
    'MY FIELD'
    >>> to_screaming_words("HTTPServer2")
    'HTTP SERVER 2'
"""

from __future__ import annotations

import re
from typing import Final

# Acronym followed by a capitalized word, capitalized/lower word, bare acronym,
# digit run, then any other letters (non-ASCII).
_WORD_RE: Final[re.Pattern[str]] = re.compile(
    r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+|[A-Z]+|\d+|[^\W\d_]+"
)


def split_words(identifier: str) -> list[str]:
    """Split an identifier into its words.

    Separators (``_``, ``-``, ``.``, whitespace) are dropped; case transitions and
    letter/digit boundaries start a new word.

    Args:
        identifier: The identifier to split.

    Returns:
        The words in order of appearance (possibly empty).
    """
    return _WORD_RE.findall(identifier)


def to_screaming_words(identifier: str, delimiter: str = " ") -> str:
    """Return ``identifier`` as upper-case words joined by ``delimiter``.

    Args:
        identifier: A camelCase, snake_case, PascalCase or kebab-case identifier.
        delimiter: Word separator in the result.

    Returns:
        The normalized label; an identifier without any word characters is
        returned upper-cased and otherwise unchanged.
    """
    words = split_words(identifier)
    if not words:
        return identifier.upper()
    return delimiter.join(word.upper() for word in words)
