# Copyright (c) 2013-2025 NASK. All rights reserved.

"""
The XML entity escape codes which are the only allowed form of the
XML-reserved characters inside Sitemap URLs (see:
https://www.sitemaps.org/protocol.html#escaping).
"""

from types import MappingProxyType


#: Escape code -> raw (XML-reserved) character.
ESCAPE_CODES = MappingProxyType({
    '&amp;': '&',
    '&apos;': "'",
    '&quot;': '"',
    '&gt;': '>',
    '&lt;': '<',
})

#: The raw characters that must be escaped in Sitemap URLs.
ENTITIES = frozenset(ESCAPE_CODES.values())

# (longest first, so that the first match is the longest one)
_ESCAPE_CODES_BY_LENGTH = tuple(sorted(ESCAPE_CODES, key=len, reverse=True))


def match_escape_code(s, index):
    """
    Get the length of the escape code that begins at `index` in `s`
    (or 0 if there is no such escape code there).

    >>> match_escape_code('a&amp;b', 1)
    5
    >>> match_escape_code('&quot;', 0)
    6
    >>> match_escape_code('a&b', 1)
    0
    >>> match_escape_code('a&amp', 1)   # cut off at the end of the string
    0
    >>> match_escape_code('a&amp;b', 0)
    0
    """
    for escape_code in _ESCAPE_CODES_BY_LENGTH:
        if s.startswith(escape_code, index):
            return len(escape_code)
    return 0
