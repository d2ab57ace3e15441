# Copyright (c) 2013-2025 NASK. All rights reserved.

import logging
from typing import Optional

from n6uri.regexes import (
    IPv4_STRICT_DECIMAL_REGEX,
    IPv6_HEX_GROUP_REGEX,
    IPv6_ZONE_ID_REGEX,
)


LOGGER = logging.getLogger(__name__)


IPv4 = 'v4'
IPv6 = 'v6'

IPv6_MAX_GROUPS = 8
IPv6_COMPRESSION_MARKER = '::'
IPv6_ZONE_ID_SEPARATOR = '%'


def is_ip(value) -> Optional[str]:
    """
    Classify the given value as an IPv4 address (``'v4'``), an IPv6
    address (``'v6'``) or neither (:obj:`None`).

    >>> is_ip('192.168.0.1')
    'v4'
    >>> is_ip('2001:db8::1')
    'v6'
    >>> is_ip('::ffff:192.168.0.1')
    'v6'
    >>> is_ip('fe80::1%eth0')
    'v6'
    >>> is_ip('256.0.0.1') is None
    True
    >>> is_ip('2001:db8::1::2') is None
    True
    >>> is_ip('example.com') is None
    True
    >>> is_ip(None) is None
    True
    """
    if is_ipv4(value):
        return IPv4
    if is_ipv6(value):
        return IPv6
    return None


def is_ipv4(value) -> bool:
    """
    Check whether the given value is an IPv4 address in the decimal
    dotted-quad notation.

    Note: octets with leading zeros (such as ``010``) are *not*
    accepted, as they might be interpreted as octal numbers.

    >>> is_ipv4('0.0.0.0')
    True
    >>> is_ipv4('255.255.255.255')
    True
    >>> is_ipv4('10.20.30.040')
    False
    >>> is_ipv4('1.2.3')
    False
    >>> is_ipv4('1.2.3.4.')
    False
    >>> is_ipv4('1..2.3')
    False
    """
    return isinstance(value, str) and IPv4_STRICT_DECIMAL_REGEX.search(value) is not None


def is_ipv6(value) -> bool:
    """
    Check whether the given value is an IPv6 address (RFC 4291,
    sec. 2.2), optionally followed by a zone identifier (RFC 6874).

    >>> is_ipv6('2001:0db8:85a3:0000:0000:8a2e:0370:7334')
    True
    >>> is_ipv6('2001:DB8:85A3::8A2E:370:7334')
    True
    >>> is_ipv6('::')
    True
    >>> is_ipv6('::1')
    True
    >>> is_ipv6('1::')
    True
    >>> is_ipv6('1:2:3:4:5:6:1.2.3.4')
    True
    >>> is_ipv6('fe80::1%25eth0')
    True

    >>> is_ipv6('1:2:3:4:5:6:7')           # too few groups (and no "::")
    False
    >>> is_ipv6('1:2:3:4:5:6:7:8:9')       # too many groups
    False
    >>> is_ipv6('1:2:3:4::5:6:7:8')        # too many groups (with "::")
    False
    >>> is_ipv6('1::2::3')                 # more than one "::"
    False
    >>> is_ipv6(':1:2:3:4:5:6:7')          # single leading colon
    False
    >>> is_ipv6('12345::')                 # too long group
    False
    >>> is_ipv6('g::')                     # not a hex digit
    False
    >>> is_ipv6('::1.2.3.04')              # invalid embedded IPv4
    False
    >>> is_ipv6('1.2.3.4::')               # embedded IPv4 not at the end
    False
    >>> is_ipv6('fe80::1%')                # empty zone identifier
    False
    >>> is_ipv6('')
    False
    """
    if not isinstance(value, str):
        return False
    address, sep, zone_id = value.partition(IPv6_ZONE_ID_SEPARATOR)
    if sep and not IPv6_ZONE_ID_REGEX.search(zone_id):
        LOGGER.debug('IPv6 candidate %a: invalid zone identifier', value)
        return False
    compression_count = address.count(IPv6_COMPRESSION_MARKER)
    if compression_count > 1:
        LOGGER.debug('IPv6 candidate %a: more than one "::"', value)
        return False
    if compression_count == 1:
        head, _, tail = address.partition(IPv6_COMPRESSION_MARKER)
        head_groups = head.split(':') if head else []
        tail_groups = tail.split(':') if tail else []
        max_groups = IPv6_MAX_GROUPS - 1
    else:
        head_groups = address.split(':')
        tail_groups = []
        max_groups = IPv6_MAX_GROUPS
    groups = head_groups + tail_groups
    group_count = len(groups)
    _, _, last_part = address.rpartition(':')
    if '.' in last_part:
        # an embedded IPv4 address replaces the last two groups
        if not is_ipv4(groups.pop()):
            return False
        group_count += 1
    if any(not IPv6_HEX_GROUP_REGEX.search(group) for group in groups):
        return False
    if compression_count == 1:
        return group_count <= max_groups
    return group_count == max_groups
