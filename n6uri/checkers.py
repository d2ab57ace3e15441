# Copyright (c) 2013-2025 NASK. All rights reserved.

"""
The URI checkers (based on RFC 3986 and -- in the case of Sitemap
URLs -- on https://www.sitemaps.org/protocol.html#escaping).

Each checker takes a string and either returns a :class:`CheckResult`
(with all URI components extracted) or raises
:exc:`~n6uri.exceptions.URIError` -- whose :attr:`kind` tells which
rule has been broken first (the checks are performed in a fixed order,
and the first failure is the one reported).

>>> check_http_url('http://example.com/a?b=c').host
'example.com'
>>> check_http_url('mailto:John.Doe@example.com')   # doctest: +IGNORE_EXCEPTION_DETAIL
Traceback (most recent call last):
  ...
n6uri.exceptions.URIError: ...
"""

import dataclasses

from n6uri.addr_helpers import (
    IPv4,
    IPv6,
    is_ip,
)
from n6uri.chars import (
    is_percent_encoding_char,
    is_scheme_char,
    is_uri_char,
    is_userinfo_char,
)
from n6uri.config import (
    CheckOptions,
    HTTPS_SITEMAP_URL_OPTIONS,
    HTTPS_URL_OPTIONS,
    HTTP_SITEMAP_URL_OPTIONS,
    SITEMAP_URL_OPTIONS,
    WEB_URL_OPTIONS,
)
from n6uri.domain_helpers import is_domain
from n6uri.exceptions import (
    URIError,
    URIErrorKind,
    make_uri_error,
)
from n6uri.parser import (
    FRAGMENT_SEPARATOR,
    IP_LITERAL_START,
    USERINFO_SEPARATOR,
    URIComponents,
    parse_uri,
)
from n6uri.regexes import PORT_REGEX
from n6uri.sitemap import (
    ENTITIES,
    match_escape_code,
)


PERCENT_ENCODING_START = '%'
PERCENT_ENCODING_DIGITS_NUM = 2
ESCAPE_CODE_START = '&'


@dataclasses.dataclass(frozen=True)
class CheckResult(URIComponents):

    """
    The result of a successful check: the URI components (see:
    :class:`n6uri.parser.URIComponents`) plus ``valid=True``.
    """

    valid: bool = True


#
# Percent-encoding check
#

def check_percent_encoding(s, index=0, length=None):
    """
    Check the percent-encoding (if any) that begins at `index` in `s`.

    Returns the number of *additional* characters the caller's scan
    loop should skip: 2 if there is a percent-encoding at `index`, 0
    otherwise.

    Raises :exc:`~n6uri.exceptions.URIError` (with the kind
    ``URI_INVALID_PERCENT_ENCODING``) if the percent-encoding is not
    valid (i.e., it is not a ``%`` followed by two hexadecimal digits,
    before `length` is reached).

    >>> check_percent_encoding('%20')
    2
    >>> check_percent_encoding('%C3%BC', 3)
    2
    >>> check_percent_encoding('a%20', 0)
    0
    >>> check_percent_encoding('%2G')   # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
      ...
    n6uri.exceptions.URIError: ...
    """
    if not isinstance(s, str):
        raise URIError(
            URIErrorKind.URI_INVALID_PERCENT_ENCODING,
            public_message='A string is required when checking for percent-encoding.',
            value=s)
    if not (isinstance(length, int) and not isinstance(length, bool) and length >= 0):
        length = len(s)
    if not (isinstance(index, int) and not isinstance(index, bool) and 0 <= index < length):
        index = 0
    if length <= 0 or s[index] != PERCENT_ENCODING_START:
        return 0
    if index + PERCENT_ENCODING_DIGITS_NUM >= length:
        raise make_uri_error(
            URIErrorKind.URI_INVALID_PERCENT_ENCODING,
            'Incomplete percent-encoding "{value}".',
            s[index:length])
    for i in range(index + 1, index + 1 + PERCENT_ENCODING_DIGITS_NUM):
        if not is_percent_encoding_char(s[i]):
            raise make_uri_error(
                URIErrorKind.URI_INVALID_PERCENT_ENCODING,
                'Invalid percent-encoding character "{value}".',
                s[i])
    return PERCENT_ENCODING_DIGITS_NUM



#
# Generic URI checks
#

def check_uri_syntax(uri):
    """
    Check the basic syntax of the given URI (RFC 3986).

    Note that it does *not* fully check whether the URI is valid; the
    rules checked are:

    1. scheme is required and cannot be empty;
    2. path is required (it can be empty);
    3. if authority is present, path must be empty or start with "/";
    4. if authority is not present, path must not start with "//";
    5. authority must have been split consistently (if not, the host
       part is deemed malformed).

    >>> check_uri_syntax('mailto:').scheme
    'mailto'
    >>> check_uri_syntax('foo://example.com:8042/over/there?name=ferret#nose').valid
    True
    """
    if not isinstance(uri, str):
        raise URIError(
            URIErrorKind.URI_INVALID_TYPE,
            public_message='URI must be a string.',
            value=uri)

    components = parse_uri(uri)

    if components.scheme is None:
        raise URIError(
            URIErrorKind.URI_MISSING_SCHEME,
            public_message='URI scheme is required.')
    if not components.scheme:
        raise URIError(
            URIErrorKind.URI_EMPTY_SCHEME,
            public_message='URI scheme must not be empty.')

    if components.path is None:
        raise URIError(
            URIErrorKind.URI_MISSING_PATH,
            public_message='URI path is required.')

    if components.authority:
        if components.path and not components.path.startswith('/'):
            raise make_uri_error(
                URIErrorKind.URI_INVALID_PATH,
                'Path must be empty or start with "/" when authority '
                'is present, got "{value}".',
                components.path)
    elif components.path.startswith('//'):
        raise make_uri_error(
            URIErrorKind.URI_INVALID_PATH,
            'Path must not start with "//" when authority '
            'is not present, got "{value}".',
            components.path)

    if components.authority is None and components.authority_punydecoded is not None:
        raise make_uri_error(
            URIErrorKind.URI_INVALID_HOST,
            'Host must be a valid IP or domain name, got "{value}".',
            components.authority_punydecoded)

    return CheckResult(**dataclasses.asdict(components))


def check_uri(uri, *, sitemap=False):
    """
    Check whether the given URI is valid (RFC 3986).

    The function uses :func:`check_uri_syntax` to check the URI type
    and basic syntax; then the rules checked are:

    1. scheme can contain only specific characters (RFC 3986,
       sec. 3.1);
    2. if authority is present:

       a. userinfo (if any) can contain only specific characters
          (RFC 3986, sec. 3.2.1), with valid percent-encodings;
       b. host must be a valid IP address or domain name (the one
          enclosed in square brackets must be an IPv6 address);
       c. port (if any) must be a number;

    3. path, query and fragment can contain only specific characters
       (RFC 3986, sec. 3.3-3.5), with valid percent-encodings;
    4. if `sitemap` is true: the XML-reserved characters in path,
       query and fragment must be escaped.

    >>> check_uri('ftp://ftp.is.co.za/rfc/rfc1808.txt').path
    '/rfc/rfc1808.txt'
    >>> check_uri('urn:oasis:names:specification:docbook:dtd:xml:4.1.2').path
    'oasis:names:specification:docbook:dtd:xml:4.1.2'
    """
    result = check_uri_syntax(uri)

    for i, c in enumerate(result.scheme):
        if not is_scheme_char(c, start=(i == 0)):
            raise make_uri_error(
                URIErrorKind.URI_INVALID_SCHEME_CHAR,
                'Invalid scheme character "{value}".',
                c)

    if result.authority is not None:
        _check_authority(result)

    _check_pathqf(result, sitemap=sitemap)
    return result


def _check_authority(result):
    userinfo = result.userinfo or ''
    userinfo_len = len(userinfo)
    i = 0
    while i < userinfo_len:
        if not is_userinfo_char(userinfo[i]):
            raise make_uri_error(
                URIErrorKind.URI_INVALID_USERINFO_CHAR,
                'Invalid userinfo character "{value}".',
                userinfo[i])
        i += check_percent_encoding(userinfo, i, userinfo_len) + 1

    hostport = result.authority.rpartition(USERINFO_SEPARATOR)[2]
    is_ip_literal = hostport.startswith(IP_LITERAL_START)
    if is_ip_literal:
        host_ok = (is_ip(result.host) == IPv6)
    else:
        host_ok = (is_ip(result.host) == IPv4 or is_domain(result.host))
    if not host_ok:
        raise make_uri_error(
            URIErrorKind.URI_INVALID_HOST,
            'Host must be a valid IP or domain name, got "{value}".',
            result.host)

    if result.port is not None and not PORT_REGEX.search(result.port):
        raise make_uri_error(
            URIErrorKind.URI_INVALID_PORT,
            'Port must be a number, got "{value}".',
            result.port)


def _check_pathqf(result, sitemap):
    pathqf = result.pathqf
    pathqf_len = len(pathqf)
    # (the "#" separating the fragment is the only one allowed)
    fragment_sep_index = (pathqf_len - len(result.fragment) - len(FRAGMENT_SEPARATOR)
                          if result.fragment is not None
                          else None)
    i = 0
    while i < pathqf_len:
        c = pathqf[i]
        if i == fragment_sep_index:
            i += 1
            continue
        if not is_uri_char(c):
            raise make_uri_error(
                URIErrorKind.URI_INVALID_CHAR,
                'Invalid URI character "{value}".',
                c)
        offset = check_percent_encoding(pathqf, i, pathqf_len)
        if sitemap and not offset:
            offset = _check_sitemap_char(pathqf, i)
        i += offset + 1


def _check_sitemap_char(pathqf, i):
    # -> the number of *additional* characters to skip
    c = pathqf[i]
    if c == ESCAPE_CODE_START:
        escape_code_len = match_escape_code(pathqf, i)
        if not escape_code_len:
            raise make_uri_error(
                URIErrorKind.URI_INVALID_SITEMAP_CHAR,
                'Entity "{value}" must be escaped.',
                c)
        return escape_code_len - 1
    if c in ENTITIES:
        raise make_uri_error(
            URIErrorKind.URI_INVALID_SITEMAP_CHAR,
            'Entity "{value}" must be escaped.',
            c)
    return 0



#
# HTTP(S) URL checks
#

def check_http_url(uri, *, https=False, web=False, sitemap=False):
    """
    Check whether the given URI is a valid HTTP URL (or, depending on
    the options, HTTPS or any *web* URL, possibly a Sitemap one -- see:
    :class:`n6uri.config.CheckOptions`).

    The function uses :func:`check_uri` to check the URI is valid;
    then the rules checked are:

    1. scheme must be ``http`` (or ``https``, depending on the
       options; note that schemes are case-insensitive);
    2. authority must be present.

    >>> check_http_url('HTTP://example.com').scheme
    'http'
    >>> check_http_url('https://example.com', web=True).scheme
    'https'
    """
    options = CheckOptions(https=https, web=web, sitemap=sitemap)
    return check_http_url_with_options(uri, options)


def check_http_url_with_options(uri, options):
    """
    Like :func:`check_http_url` but taking the options as a
    :class:`n6uri.config.CheckOptions` instance.
    """
    result = check_uri(uri, sitemap=options.sitemap)
    allowed_schemes = options.allowed_schemes
    if result.scheme not in allowed_schemes:
        raise make_uri_error(
            URIErrorKind.URI_INVALID_SCHEME,
            'Scheme must be {allowed}, got "{value}".',
            result.scheme,
            allowed=' or '.join(allowed_schemes))
    if result.authority is None:
        raise URIError(
            URIErrorKind.URI_MISSING_AUTHORITY,
            public_message='Authority is required.')
    return result


def check_https_url(uri):
    """Like :func:`check_http_url` but the scheme must be ``https``."""
    return check_http_url_with_options(uri, HTTPS_URL_OPTIONS)


def check_http_sitemap_url(uri):
    """Check whether the given URI is a valid HTTP Sitemap URL."""
    return check_http_url_with_options(uri, HTTP_SITEMAP_URL_OPTIONS)


def check_https_sitemap_url(uri):
    """Check whether the given URI is a valid HTTPS Sitemap URL."""
    return check_http_url_with_options(uri, HTTPS_SITEMAP_URL_OPTIONS)


def check_web_url(uri):
    """Like :func:`check_http_url` but the scheme can be ``http`` or ``https``."""
    return check_http_url_with_options(uri, WEB_URL_OPTIONS)


def check_sitemap_url(uri):
    """
    Check whether the given URI is a valid HTTP or HTTPS Sitemap URL.

    >>> check_sitemap_url('https://example.com/a&amp;b').path
    '/a&amp;b'
    >>> check_sitemap_url('https://example.com/a&b')   # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
      ...
    n6uri.exceptions.URIError: ...
    """
    return check_http_url_with_options(uri, SITEMAP_URL_OPTIONS)
