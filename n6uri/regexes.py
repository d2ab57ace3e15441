# Copyright (c) 2013-2025 NASK. All rights reserved.

"""
This module contains several regular expression objects (most of
them are used in other parts of the *n6uri* library).
"""


import re


#: IPv4 address in decimal dotted-quad notation (leading zeros
#: are *not* allowed, as such octets may be ambiguously interpreted
#: as octal numbers).
#:
#: Used by :func:`n6uri.addr_helpers.is_ipv4`.
IPv4_STRICT_DECIMAL_REGEX = re.compile(r'''
    \A
    (?:
        (?:
            25[0-5]       # 250..255
        |
            2[0-4][0-9]   # 200..249
        |
            1[0-9][0-9]   # 100..199
        |
            [1-9]?[0-9]   # 0..99
        )
        (?:
            \.            # dot
            (?=           # followed by next octet...
                [0-9]
            )
        |                 # or
            (?=           # termination
                \Z
            )
        )
    ){4}
    \Z
''', re.ASCII | re.VERBOSE)


#: One group of an IPv6 address (1 to 4 hexadecimal digits).
#:
#: Used by :func:`n6uri.addr_helpers.is_ipv6`.
IPv6_HEX_GROUP_REGEX = re.compile(r'\A[0-9A-Fa-f]{1,4}\Z', re.ASCII)


#: IPv6 zone identifier (RFC 6874) -- treated as an opaque token, so
#: only the characters that would break the enclosing URI are excluded.
#:
#: Used by :func:`n6uri.addr_helpers.is_ipv6`.
IPv6_ZONE_ID_REGEX = re.compile(r'\A[^%/?#\[\]@\s]+\Z')


#: Domain name label (ASCII form) -- the strict, RFC-compliant variant:
#: letters, digits and hyphens, a hyphen neither at the beginning nor at
#: the end, at most 63 characters.
#:
#: Used by :func:`n6uri.domain_helpers.is_domain_label`.
DOMAIN_LABEL_ASCII_STRICT_REGEX = re.compile(r'''
    \A
    [0-9A-Za-z]           # label is not allowed to start with '-'
    (?:
        [\-0-9A-Za-z]{0,61}
        [0-9A-Za-z]       # label is not allowed to end with '-'
    )?
    \Z
''', re.ASCII | re.VERBOSE)


#: Top-level domain label consisting of digits only (such a domain
#: name would be confused with an IPv4 address).
#:
#: Used by :func:`n6uri.domain_helpers.is_domain`.
ALL_DIGITS_LABEL_REGEX = re.compile(r'\A[0-9]+\Z', re.ASCII)


#: URI port (RFC 3986: ``port = *DIGIT``; here: at least one digit,
#: as an empty port is reported by the parser as absent).
#:
#: Used by :func:`n6uri.checkers.check_uri`.
PORT_REGEX = re.compile(r'\A[0-9]+\Z', re.ASCII)


#: Punycode-encoded (ACE) domain label prefix, case-insensitive.
#:
#: Used by the :mod:`n6uri.punycode` and :mod:`n6uri.domain_helpers`
#: modules.
ACE_PREFIX_REGEX = re.compile(r'\Axn--', re.ASCII | re.IGNORECASE)
