# Copyright (c) 2013-2025 NASK. All rights reserved.

import unittest

from unittest_expander import (
    expand,
    foreach,
)

from n6uri.exceptions import (
    ConfigError,
    PunycodeError,
    URIError,
    URIErrorKind,
    make_uri_error,
)


@expand
class TestURIErrorKind(unittest.TestCase):

    def test_members(self):
        self.assertEqual({kind.name for kind in URIErrorKind}, {
            'URI_INVALID_TYPE',
            'URI_MISSING_SCHEME',
            'URI_EMPTY_SCHEME',
            'URI_MISSING_PATH',
            'URI_INVALID_PATH',
            'URI_INVALID_HOST',
            'URI_INVALID_SCHEME_CHAR',
            'URI_INVALID_USERINFO_CHAR',
            'URI_INVALID_PORT',
            'URI_INVALID_CHAR',
            'URI_INVALID_SITEMAP_CHAR',
            'URI_INVALID_PERCENT_ENCODING',
            'URI_MISSING_AUTHORITY',
            'URI_INVALID_SCHEME',
        })

    @foreach(list(URIErrorKind))
    def test_value_equal_to_name(self, kind):
        self.assertEqual(kind.value, kind.name)
        self.assertEqual(str(kind), kind.name)
        self.assertIs(URIErrorKind(kind.name), kind)


class TestURIError(unittest.TestCase):

    def test_basics(self):
        exc = URIError(URIErrorKind.URI_INVALID_HOST, public_message='Bad host.', value='x')
        self.assertIsInstance(exc, ValueError)
        self.assertIs(exc.kind, URIErrorKind.URI_INVALID_HOST)
        self.assertEqual(exc.code, 'URI_INVALID_HOST')
        self.assertEqual(exc.value, 'x')
        self.assertEqual(exc.public_message, 'Bad host.')
        self.assertEqual(str(exc), 'Bad host.')
        self.assertEqual(exc.args, (URIErrorKind.URI_INVALID_HOST,))

    def test_kind_given_as_str(self):
        exc = URIError('URI_INVALID_PORT')
        self.assertIs(exc.kind, URIErrorKind.URI_INVALID_PORT)
        self.assertIsNone(exc.value)

    def test_default_public_message(self):
        exc = URIError(URIErrorKind.URI_MISSING_AUTHORITY)
        self.assertEqual(exc.public_message, 'Invalid URI (URI_MISSING_AUTHORITY).')

    def test_unknown_kind(self):
        with self.assertRaises(ValueError):
            URIError('URI_NO_SUCH_KIND')

    def test_illegal_keyword_argument(self):
        with self.assertRaises(TypeError):
            URIError(URIErrorKind.URI_INVALID_HOST, foo='bar')

    def test_repr(self):
        exc = URIError(URIErrorKind.URI_INVALID_HOST, public_message='Bad host.')
        self.assertEqual(
            repr(exc),
            "<URIError: args=(URIErrorKind.URI_INVALID_HOST,); public_message='Bad host.'>")


class Test_make_uri_error(unittest.TestCase):

    def test_ascii_message(self):
        exc = make_uri_error(URIErrorKind.URI_INVALID_HOST,
                             'Host {value} is not {what}.',
                             'b\xfccher',
                             what='ą')
        self.assertIsInstance(exc, URIError)
        self.assertIs(exc.kind, URIErrorKind.URI_INVALID_HOST)
        self.assertEqual(exc.public_message, 'Host b\\xfccher is not \\u0105.')
        self.assertEqual(exc.value, 'b\xfccher')


class TestOtherErrors(unittest.TestCase):

    def test_punycode_error(self):
        self.assertTrue(issubclass(PunycodeError, ValueError))

    def test_config_error(self):
        self.assertTrue(issubclass(ConfigError, Exception))
        self.assertFalse(issubclass(ConfigError, ValueError))
