# Copyright (c) 2013-2025 NASK. All rights reserved.

import unittest

from unittest_expander import (
    expand,
    foreach,
    param,
)

from n6uri.domain_helpers import (
    DOMAIN_LABEL_MAX_LENGTH,
    DOMAIN_MAX_LENGTH,
    is_domain,
    is_domain_label,
)
from n6uri.punycode import decode


# (63 + 1 + 63 + 1 + 63 + 1 + 61 = 253 characters)
LONGEST_DOMAIN = '.'.join([63 * 'a', 63 * 'b', 63 * 'c', 61 * 'd'])
TOO_LONG_DOMAIN = LONGEST_DOMAIN + 'd'


@expand
class Test_is_domain(unittest.TestCase):

    def test_lengths_of_prepared_values(self):
        self.assertEqual(len(LONGEST_DOMAIN), DOMAIN_MAX_LENGTH)
        self.assertEqual(len(TOO_LONG_DOMAIN), DOMAIN_MAX_LENGTH + 1)

    @foreach(
        'example.com',
        'www.example.com',
        'WWW.Example.COM',
        'localhost',
        'a.b',
        'a-b.c-d.example',
        '123.example.com',
        'example.c0m',
        'xn--nxasmq6b',
        'xn--nxasmq6b.com',
        'XN--BCHER-KVA.example',
        'b\xfccher.example',
        'www.b\xfccher.example',
        'm\xfcnchen.de',
        param(LONGEST_DOMAIN).label('longest domain'),
        param('{}.example'.format(63 * 'x')).label('longest label'),
    )
    def test_valid(self, value):
        self.assertTrue(is_domain(value))

    @foreach(
        '',
        '.',
        '.example.com',
        'example.com.',
        'example..com',
        '-example.com',
        'example-.com',
        'exa_mple.com',
        'exa mple.com',
        'example.com/',
        'user@example.com',
        'example.com:80',
        '192.168.0.1',
        'example.123',
        '[::1]',
        'xn--bcher-kv.example',
        'xn--.example',
        param(TOO_LONG_DOMAIN).label('254-character domain'),
        param('{}.example'.format(64 * 'x')).label('64-character label'),
    )
    def test_not_valid(self, value):
        self.assertFalse(is_domain(value))

    @foreach(None, 42, b'example.com')
    def test_non_str(self, value):
        self.assertFalse(is_domain(value))

    def test_unicode_equivalent_of_punycode_label(self):
        unicode_label = decode('xn--nxasmq6b')
        self.assertFalse(unicode_label.isascii())
        self.assertTrue(is_domain(unicode_label))
        self.assertTrue(is_domain(unicode_label + '.com'))

    def test_length_is_checked_for_ascii_form(self):
        # 'ü' takes 1 character but its label's ASCII form is longer
        label = 'b\xfccher'
        value = '.'.join([63 * 'a', 63 * 'b', 63 * 'c', 54 * 'd', label])
        self.assertLessEqual(len(value), DOMAIN_MAX_LENGTH)
        self.assertFalse(is_domain(value))


@expand
class Test_is_domain_label(unittest.TestCase):

    @foreach(
        'a',
        '1',
        'example',
        'EXAMPLE',
        'a-b',
        'a--b',
        '123',
        'xn--bcher-kva',
        'b\xfccher',
        param(DOMAIN_LABEL_MAX_LENGTH * 'a').label('longest label'),
    )
    def test_valid(self, domain_label):
        self.assertTrue(is_domain_label(domain_label))

    @foreach(
        '',
        '-',
        '-a',
        'a-',
        'a_b',
        'a.b',
        'a b',
        'xn--bcher-kv',
        param((DOMAIN_LABEL_MAX_LENGTH + 1) * 'a').label('too long label'),
        param('\xfc' * 60).label('too long ASCII form'),
        None,
        42,
    )
    def test_not_valid(self, domain_label):
        self.assertFalse(is_domain_label(domain_label))
