# Copyright (c) 2013-2025 NASK. All rights reserved.

import logging

from n6uri.exceptions import PunycodeError
from n6uri.punycode import (
    LABEL_SEPARATOR,
    decode,
    encode,
)
from n6uri.regexes import (
    ACE_PREFIX_REGEX,
    ALL_DIGITS_LABEL_REGEX,
    DOMAIN_LABEL_ASCII_STRICT_REGEX,
)


LOGGER = logging.getLogger(__name__)


DOMAIN_MAX_LENGTH = 253
DOMAIN_LABEL_MAX_LENGTH = 63


def is_domain(value) -> bool:
    """
    Check whether the given value is a valid domain name.

    Labels containing non-ASCII characters are accepted only if they
    can be converted to the ASCII (*Punycode*) form; labels already in
    that form (prefixed with ``xn--``) are accepted only if they can be
    decoded.  Then the ASCII form is checked: at most 253 characters in
    total, each label being 1 to 63 letters, digits or hyphens (a
    hyphen neither at the beginning nor at the end of a label).

    Additionally, the top-level label is not allowed to consist of
    digits only (so that IPv4-like strings are not taken for domain
    names).

    >>> is_domain('example.com')
    True
    >>> is_domain('www.EXAMPLE.com')
    True
    >>> is_domain('localhost')
    True
    >>> is_domain('xn--bcher-kva.example')
    True
    >>> is_domain('b\xfccher.example')
    True

    >>> is_domain('')
    False
    >>> is_domain('example..com')
    False
    >>> is_domain('example.com.')
    False
    >>> is_domain('-example.com')
    False
    >>> is_domain('example-.com')
    False
    >>> is_domain('under_score.example.com')
    False
    >>> is_domain('192.168.0.1')
    False
    >>> is_domain('xn--bcher-kv.example')
    False
    >>> is_domain(None)
    False
    """
    if not isinstance(value, str) or not value:
        return False
    ascii_labels = []
    for label in value.split(LABEL_SEPARATOR):
        ascii_label = _get_ascii_label(label)
        if ascii_label is None:
            return False
        ascii_labels.append(ascii_label)
    ascii_value = LABEL_SEPARATOR.join(ascii_labels)
    if len(ascii_value) > DOMAIN_MAX_LENGTH:
        LOGGER.debug('domain %a: longer than %d characters', value, DOMAIN_MAX_LENGTH)
        return False
    if not all(map(is_domain_label, ascii_labels)):
        return False
    if ALL_DIGITS_LABEL_REGEX.search(ascii_labels[-1]):
        LOGGER.debug('domain %a: top-level label consists of digits only', value)
        return False
    return True


def is_domain_label(label) -> bool:
    """
    Check whether the given value is a valid domain name label.

    >>> is_domain_label('example')
    True
    >>> is_domain_label('a-b-c')
    True
    >>> is_domain_label(63 * 'a')
    True
    >>> is_domain_label('xn--bcher-kva')
    True
    >>> is_domain_label('b\xfccher')
    True

    >>> is_domain_label(64 * 'a')
    False
    >>> is_domain_label('')
    False
    >>> is_domain_label('-ab')
    False
    >>> is_domain_label('ab-')
    False
    >>> is_domain_label('a.b')
    False
    >>> is_domain_label('xn--bcher-kv')
    False
    """
    if not isinstance(label, str):
        return False
    ascii_label = _get_ascii_label(label)
    if ascii_label is None:
        return False
    if len(ascii_label) > DOMAIN_LABEL_MAX_LENGTH:
        LOGGER.debug('domain label %a: longer than %d characters',
                     label, DOMAIN_LABEL_MAX_LENGTH)
        return False
    return DOMAIN_LABEL_ASCII_STRICT_REGEX.search(ascii_label) is not None


def _get_ascii_label(label):
    # -> the ASCII form of the label (or None if it cannot be obtained
    #    or if the label is in the Punycode form but cannot be decoded)
    try:
        ascii_label = encode(label)
        if ACE_PREFIX_REGEX.search(ascii_label):
            decode(ascii_label)
    except PunycodeError as exc:
        LOGGER.debug('domain label %a: %s', label, exc)
        return None
    return ascii_label
