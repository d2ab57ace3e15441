# Copyright (c) 2013-2025 NASK. All rights reserved.

import string
import unittest

from unittest_expander import (
    expand,
    foreach,
)

from n6uri.chars import (
    is_percent_encoding_char,
    is_scheme_char,
    is_uri_char,
    is_userinfo_char,
)


ALL_ASCII = [chr(i) for i in range(128)]


@expand
class Test_is_scheme_char(unittest.TestCase):

    def test_start(self):
        accepted = {c for c in ALL_ASCII if is_scheme_char(c, start=True)}
        self.assertEqual(accepted, set(string.ascii_letters))

    def test_subsequent(self):
        accepted = {c for c in ALL_ASCII if is_scheme_char(c)}
        self.assertEqual(accepted, set(string.ascii_letters + string.digits + '+-.'))

    @foreach('\xe9', 'ab', '', None, 42)
    def test_other_values(self, c):
        self.assertFalse(is_scheme_char(c))
        self.assertFalse(is_scheme_char(c, start=True))


@expand
class Test_is_userinfo_char(unittest.TestCase):

    def test_accepted_ascii(self):
        accepted = {c for c in ALL_ASCII if is_userinfo_char(c)}
        self.assertEqual(accepted, set(
            string.ascii_letters + string.digits + "-._~" + "!$&'()*+,;=" + ':%'))

    @foreach('@', '/', '?', '#', '[', ']', ' ', '\xe9', 'ab', '', None)
    def test_rejected(self, c):
        self.assertFalse(is_userinfo_char(c))


@expand
class Test_is_uri_char(unittest.TestCase):

    def test_accepted_ascii(self):
        accepted = {c for c in ALL_ASCII if is_uri_char(c)}
        self.assertEqual(accepted, set(
            string.ascii_letters + string.digits + "-._~" + "!$&'()*+,;=" + ':@/?%'))

    @foreach('#', '[', ']', ' ', '"', '<', '>', '\\', '^', '`', '{', '|', '}',
             '\x7f', '\xe9', 'ą', 'ab', '', None)
    def test_rejected(self, c):
        self.assertFalse(is_uri_char(c))


@expand
class Test_is_percent_encoding_char(unittest.TestCase):

    def test_accepted_ascii(self):
        accepted = {c for c in ALL_ASCII if is_percent_encoding_char(c)}
        self.assertEqual(accepted, set('0123456789abcdefABCDEF'))

    @foreach('g', 'G', '%', '１', '12', '', None)
    def test_rejected(self, c):
        self.assertFalse(is_percent_encoding_char(c))
