# Copyright (c) 2013-2025 NASK. All rights reserved.

"""
Character class predicates (based on RFC 3986, sec. 2 and 3).

Each predicate takes a single character and tells whether it belongs
to the particular grammar class; any other object (including strings
whose length is not 1) makes a predicate return :obj:`False`.

>>> is_scheme_char('h', start=True)
True
>>> is_scheme_char('+', start=True)
False
>>> is_scheme_char('+')
True
>>> is_userinfo_char(':')
True
>>> is_userinfo_char('@')
False
>>> is_uri_char('@')
True
>>> is_uri_char(' ')
False
>>> is_percent_encoding_char('f')
True
>>> is_percent_encoding_char('g')
False
>>> is_uri_char('ab')
False
"""

import string


#
# Character sets
#

ALPHA = frozenset(string.ascii_letters)
DIGIT = frozenset(string.digits)
HEXDIG = frozenset(string.hexdigits)

# unreserved = ALPHA / DIGIT / "-" / "." / "_" / "~"
UNRESERVED = ALPHA | DIGIT | frozenset('-._~')

# sub-delims = "!" / "$" / "&" / "'" / "(" / ")" / "*" / "+" / "," / ";" / "="
SUB_DELIMS = frozenset("!$&'()*+,;=")

# scheme = ALPHA *( ALPHA / DIGIT / "+" / "-" / "." )
SCHEME_START_CHARS = ALPHA
SCHEME_CHARS = ALPHA | DIGIT | frozenset('+-.')

# userinfo = *( unreserved / pct-encoded / sub-delims / ":" )
USERINFO_CHARS = UNRESERVED | SUB_DELIMS | frozenset(':%')

# pchar / "/" / "?" -- plus "%" (starting a percent-encoding,
# whose digits are checked separately); note that the "#" which
# separates the fragment is *not* included (the checkers handle it
# by position)
URI_CHARS = UNRESERVED | SUB_DELIMS | frozenset(':@/?%')



#
# Predicates
#

def _is_char_in(c, char_set):
    return isinstance(c, str) and len(c) == 1 and c in char_set


def is_scheme_char(c, *, start=False):
    return _is_char_in(c, SCHEME_START_CHARS if start else SCHEME_CHARS)


def is_userinfo_char(c):
    return _is_char_in(c, USERINFO_CHARS)


def is_uri_char(c):
    return _is_char_in(c, URI_CHARS)


def is_percent_encoding_char(c):
    return _is_char_in(c, HEXDIG)
