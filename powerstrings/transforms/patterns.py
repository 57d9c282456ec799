"""Wildcard patterns for separators and find/replace.

A user pattern may contain the wildcard token ``%w%`` meaning "any text".
Patterns without the token stay literal strings. Patterns with it compile to
a regular expression where everything else is matched literally:

  split mode    ``%w%`` -> ``(?:.*?)``  lazy, non-capturing, so split
                results never gain extra elements from groups
  replace mode  ``%w%`` -> ``(.*)``     greedy, capturing, numbered from 1

Replacement text follows the browser convention: ``$&`` is the whole
match, ``$1``..``$99`` are wildcard captures, ``$$`` is a dollar sign, and
``$` `` / ``$'`` are the text before / after the match.
"""

from __future__ import annotations

import enum
import re

WILDCARD = "%w%"

_SPLIT_GROUP = "(?:.*?)"
_REPLACE_GROUP = "(.*)"
_REPLACEMENT_TOKEN = re.compile(r"\$(\$|&|`|'|[0-9]{1,2})")


class PatternMode(str, enum.Enum):
    SPLIT = "split"
    REPLACE = "replace"


def has_wildcard(raw: str) -> bool:
    return WILDCARD in raw


def translate(raw: str, mode: PatternMode) -> str | re.Pattern[str]:
    """Compile ``raw`` for ``mode``, or return it unchanged if it has no wildcard."""
    if not has_wildcard(raw):
        return raw
    group = _SPLIT_GROUP if mode is PatternMode.SPLIT else _REPLACE_GROUP
    literal_parts = [re.escape(part) for part in raw.split(WILDCARD)]
    return re.compile(group.join(literal_parts), re.DOTALL)


def split_by(value: str, separator: str | re.Pattern[str]) -> list[str]:
    """Split like ``String.prototype.split`` does, for a literal or a pattern.

    An empty literal separator splits into characters. For patterns, an
    empty match at the current split start never produces a piece, and an
    empty input gives ``[]`` when the pattern matches it.
    """
    if isinstance(separator, str):
        if separator == "":
            return list(value)
        return value.split(separator)

    size = len(value)
    if size == 0:
        return [] if separator.match(value) else [value]

    pieces: list[str] = []
    start = 0
    pos = 0
    while pos < size:
        match = separator.match(value, pos)
        if match is None or match.end() == start:
            pos += 1
            continue
        pieces.append(value[start:pos])
        start = match.end()
        pos = start
    pieces.append(value[start:])
    return pieces


def expand_replacement(template: str, match: re.Match[str]) -> str:
    """Expand ``$``-references in ``template`` against ``match``.

    A reference to a group the pattern does not have is kept verbatim; a
    group that did not take part in the match expands to empty text.
    """
    group_count = match.re.groups

    def _substitute(token: re.Match[str]) -> str:
        ref = token.group(1)
        if ref == "$":
            return "$"
        if ref == "&":
            return match.group(0)
        if ref == "`":
            return match.string[:match.start()]
        if ref == "'":
            return match.string[match.end():]
        number = int(ref)
        if 1 <= number <= group_count:
            return match.group(number) or ""
        # "$12" with a single group means "$1" followed by "2"
        if len(ref) == 2 and 1 <= int(ref[0]) <= group_count:
            return (match.group(int(ref[0])) or "") + ref[1]
        return token.group(0)

    return _REPLACEMENT_TOKEN.sub(_substitute, template)


def replace_all(value: str, pattern: str | re.Pattern[str], replacement: str) -> str:
    """Replace every occurrence of ``pattern`` in ``value``."""
    if isinstance(pattern, str):
        pattern = re.compile(re.escape(pattern))
    return pattern.sub(lambda m: expand_replacement(replacement, m), value)
