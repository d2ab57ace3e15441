# Copyright (c) 2013-2025 NASK. All rights reserved.

import enum

from n6uri.encoding_helpers import ascii_str


#
# Error kinds
#

class URIErrorKind(enum.Enum):

    """
    The enumeration of all failure kinds reported by the *n6uri*
    checkers (see: :exc:`URIError`).

    The value of each member is equal to its name, so that it can be
    used as a stable, machine-readable code (e.g., in API responses).

    >>> URIErrorKind.URI_INVALID_HOST
    URIErrorKind.URI_INVALID_HOST
    >>> str(URIErrorKind.URI_INVALID_HOST)
    'URI_INVALID_HOST'
    >>> URIErrorKind('URI_INVALID_PORT') is URIErrorKind.URI_INVALID_PORT
    True
    """

    URI_INVALID_TYPE = 'URI_INVALID_TYPE'
    URI_MISSING_SCHEME = 'URI_MISSING_SCHEME'
    URI_EMPTY_SCHEME = 'URI_EMPTY_SCHEME'
    URI_MISSING_PATH = 'URI_MISSING_PATH'
    URI_INVALID_PATH = 'URI_INVALID_PATH'
    URI_INVALID_HOST = 'URI_INVALID_HOST'
    URI_INVALID_SCHEME_CHAR = 'URI_INVALID_SCHEME_CHAR'
    URI_INVALID_USERINFO_CHAR = 'URI_INVALID_USERINFO_CHAR'
    URI_INVALID_PORT = 'URI_INVALID_PORT'
    URI_INVALID_CHAR = 'URI_INVALID_CHAR'
    URI_INVALID_SITEMAP_CHAR = 'URI_INVALID_SITEMAP_CHAR'
    URI_INVALID_PERCENT_ENCODING = 'URI_INVALID_PERCENT_ENCODING'
    URI_MISSING_AUTHORITY = 'URI_MISSING_AUTHORITY'
    URI_INVALID_SCHEME = 'URI_INVALID_SCHEME'

    def __str__(self):
        return self.value

    def __repr__(self):
        return f'{type(self).__qualname__}.{self.name}'



#
# Generic mix-ins
#

class _ErrorWithPublicMessageMixin(object):

    r"""
    A mix-in class that provides the :attr:`public_message` property.

    The value of this property is a string.  It is taken either from
    the `public_message` constructor keyword argument or -- if the
    argument was not specified -- from the value of the
    :attr:`default_public_message` attribute.

    The public message should be a complete sentence (or several
    sentences): first word capitalized (if not being an identifier
    that begins with a lower case letter) + the period at the end.

    The :class:`str` conversion provided by the class uses the value
    of :attr:`public_message`:

    >>> class SomeError(_ErrorWithPublicMessageMixin, Exception):
    ...     pass
    ...
    >>> str(SomeError('a', 'b'))  # using attribute default_public_message
    'Invalid URI.'
    >>> str(SomeError('a', 'b', public_message='Spąm.'))
    'Spąm.'

    The :func:`repr` conversion results in a programmer-readable
    representation (containing the class name, :func:`repr`-formatted
    constructor arguments and the :attr:`public_message` property):

    >>> SomeError('a', 'b')   # using class's default_public_message
    <SomeError: args=('a', 'b'); public_message='Invalid URI.'>
    >>> SomeError('a', 'b', public_message='Spam.')
    <SomeError: args=('a', 'b'); public_message='Spam.'>
    """

    #: (overridable in subclasses)
    default_public_message = 'Invalid URI.'

    def __init__(self, *args, **kwargs):
        try:
            public_message = kwargs.pop('public_message')
        except KeyError:
            pass
        else:
            self._public_message = str(public_message)
        try:
            super(_ErrorWithPublicMessageMixin, self).__init__(*args, **kwargs)
        except TypeError:
            if kwargs:
                raise TypeError(
                    'illegal keyword arguments for {} constructor: {}'.format(
                        self.__class__.__name__,
                        ', '.join(sorted(map(repr, kwargs)))))
            else:
                raise

    @property
    def public_message(self):
        """The aforementioned property."""
        try:
            return self._public_message
        except AttributeError:
            # (in subclasses `default_public_message` can also be a @property)
            self._public_message = str(self.default_public_message)
            return self._public_message

    def __str__(self):
        return self.public_message

    def __repr__(self):
        return ('<{0.__class__.__name__}: args={0.args!r}; '
                'public_message={0.public_message!r}>'.format(self))



#
# Actual exception classes
#

class URIError(_ErrorWithPublicMessageMixin, ValueError):

    """
    Raised by the *n6uri* checkers when the given URI is not valid.

    Instances *must* be initialized with the error kind (a
    :class:`URIErrorKind` member or its string value) as the first
    positional argument; optionally, with the following keyword-only
    arguments:

    * `public_message` (see: :exc:`_ErrorWithPublicMessageMixin`);
    * `value`: the offending value or character (default: :obj:`None`).

    They become attributes of the exception instance -- respectively:
    :attr:`kind`, :attr:`public_message`, :attr:`value`.  Additionally,
    there is the :attr:`code` property (the kind's string value).

    >>> exc = URIError(URIErrorKind.URI_INVALID_PORT,
    ...                public_message='Port must be a number, got "x1".',
    ...                value='x1')
    >>> exc.kind
    URIErrorKind.URI_INVALID_PORT
    >>> exc.code
    'URI_INVALID_PORT'
    >>> exc.value
    'x1'
    >>> str(exc)
    'Port must be a number, got "x1".'
    >>> isinstance(exc, ValueError)
    True

    >>> URIError('URI_MISSING_SCHEME').kind
    URIErrorKind.URI_MISSING_SCHEME
    >>> str(URIError('URI_MISSING_SCHEME'))
    'Invalid URI (URI_MISSING_SCHEME).'

    >>> URIError('NO_SUCH_KIND')   # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
      ...
    ValueError: ...
    """

    def __init__(self, kind, *args, **kwargs):
        self.kind = URIErrorKind(kind)
        self.value = kwargs.pop('value', None)
        super(URIError, self).__init__(self.kind, *args, **kwargs)

    @property
    def default_public_message(self):
        return 'Invalid URI ({}).'.format(self.kind)

    @property
    def code(self):
        return self.kind.value


class PunycodeError(ValueError):

    """
    Raised by the :mod:`n6uri.punycode` functions when a label cannot
    be encoded or decoded (invalid digit, premature end of input,
    arithmetic overflow, etc.).
    """


class ConfigError(Exception):

    """
    Raised by the :mod:`n6uri.config` functions when the check options
    configuration is missing or not valid.

    >>> exc = ConfigError('no such section: "uri_checks"')
    >>> str(exc)
    'no such section: "uri_checks"'
    """


def make_uri_error(kind, msg_template, value=None, **format_kwargs):
    """
    A helper to create a :exc:`URIError` whose public message is
    formatted with values made ASCII-safe (with :func:`ascii_str`).

    >>> exc = make_uri_error(URIErrorKind.URI_INVALID_CHAR,
    ...                      'Invalid URI character "{value}".', 'ą')
    >>> str(exc)
    'Invalid URI character "\\\\u0105".'
    >>> exc.value == 'ą'
    True
    """
    public_message = msg_template.format(
        value=ascii_str(value),
        **{k: ascii_str(v) for k, v in format_kwargs.items()})
    return URIError(kind, public_message=public_message, value=value)
