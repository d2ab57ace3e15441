# Copyright (c) 2013-2025 NASK. All rights reserved.

"""
*n6uri* -- RFC 3986 URI/URL checking, including internationalized
host names (*Punycode*, RFC 3492) and Sitemap URLs.
"""


from n6uri.addr_helpers import (
    is_ip,
    is_ipv4,
    is_ipv6,
)
from n6uri.checkers import (
    CheckResult,

    check_percent_encoding,
    check_uri_syntax,
    check_uri,
    check_http_url,
    check_http_url_with_options,
    check_https_url,
    check_http_sitemap_url,
    check_https_sitemap_url,
    check_web_url,
    check_sitemap_url,
)
from n6uri.config import (
    CheckOptions,
    load_check_options,
)
from n6uri.domain_helpers import (
    is_domain,
    is_domain_label,
)
from n6uri.exceptions import (
    ConfigError,
    PunycodeError,
    URIError,
    URIErrorKind,
)
from n6uri.parser import (
    URIComponents,
    parse_uri,
)
from n6uri.punycode import (
    domain_to_ascii,
    domain_to_unicode,
)


__all__ = [
    'is_ip',
    'is_ipv4',
    'is_ipv6',

    'CheckResult',

    'check_percent_encoding',
    'check_uri_syntax',
    'check_uri',
    'check_http_url',
    'check_http_url_with_options',
    'check_https_url',
    'check_http_sitemap_url',
    'check_https_sitemap_url',
    'check_web_url',
    'check_sitemap_url',

    'CheckOptions',
    'load_check_options',

    'is_domain',
    'is_domain_label',

    'ConfigError',
    'PunycodeError',
    'URIError',
    'URIErrorKind',

    'URIComponents',
    'parse_uri',

    'domain_to_ascii',
    'domain_to_unicode',
]
