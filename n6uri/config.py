# Copyright (c) 2013-2025 NASK. All rights reserved.

"""
The check options: the fixed structure of the boolean flags the
URL checkers accept, plus the means to load them from a configuration
(*INI*) file.

An example configuration file section:

.. code-block:: ini

    [uri_checks]
    https = no
    web = yes
    sitemap = yes
"""

import configparser
import dataclasses
import logging

from n6uri.encoding_helpers import (
    ascii_str,
    str_to_bool,
)
from n6uri.exceptions import ConfigError


LOGGER = logging.getLogger(__name__)


DEFAULT_CONFIG_SECTION = 'uri_checks'


@dataclasses.dataclass(frozen=True)
class CheckOptions:

    """
    The options of :func:`n6uri.checkers.check_http_url` (and of its
    specializations):

    * `https` -- if true: the scheme must be ``https``;
    * `web` -- if true (and `https` is false): the scheme must be
      ``http`` or ``https``;
    * `sitemap` -- if true: the XML-reserved characters must be
      escaped (as required for URLs in *Sitemap* documents).

    If both `https` and `web` are false, the scheme must be ``http``.

    >>> CheckOptions()
    CheckOptions(https=False, web=False, sitemap=False)
    >>> CheckOptions(web=True).allowed_schemes
    ('http', 'https')
    >>> CheckOptions(https=True, web=True).allowed_schemes
    ('https',)
    >>> CheckOptions().allowed_schemes
    ('http',)
    """

    https: bool = False
    web: bool = False
    sitemap: bool = False

    @property
    def allowed_schemes(self):
        if self.https:
            return ('https',)
        if self.web:
            return ('http', 'https')
        return ('http',)

    @classmethod
    def from_mapping(cls, mapping):
        """
        Make an instance from the given mapping (e.g., a
        :mod:`configparser` section), whose keys must be a subset of
        the option names and whose values must be :class:`bool`
        instances or YES/NO flag strings (see:
        :func:`n6uri.encoding_helpers.str_to_bool`).

        >>> CheckOptions.from_mapping({'web': 'yes', 'sitemap': True})
        CheckOptions(https=False, web=True, sitemap=True)
        >>> CheckOptions.from_mapping({})
        CheckOptions(https=False, web=False, sitemap=False)

        >>> CheckOptions.from_mapping({'http2': 'yes'})   # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
          ...
        n6uri.exceptions.ConfigError: ...
        >>> CheckOptions.from_mapping({'web': 'maybe'})   # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
          ...
        n6uri.exceptions.ConfigError: ...
        """
        option_names = {field.name for field in dataclasses.fields(cls)}
        illegal_keys = set(mapping).difference(option_names)
        if illegal_keys:
            raise ConfigError('illegal check option names: {}'.format(
                ', '.join(sorted('"{}"'.format(ascii_str(k)) for k in illegal_keys))))
        kwargs = {}
        for name, value in mapping.items():
            if isinstance(value, bool):
                kwargs[name] = value
                continue
            try:
                kwargs[name] = str_to_bool(value)
            except (TypeError, ValueError) as exc:
                raise ConfigError('check option "{}": {}'.format(
                    name, ascii_str(exc))) from exc
        return cls(**kwargs)


def load_check_options(config_path, section=DEFAULT_CONFIG_SECTION):
    """
    Read the given *INI* file and make a :class:`CheckOptions` instance
    from the specified section of it.

    Raises :exc:`~n6uri.exceptions.ConfigError` if the file cannot be
    read or parsed, if the section is missing or if its content is not
    valid (see: :meth:`CheckOptions.from_mapping`).
    """
    config_parser = configparser.ConfigParser(default_section='__no_defaults__')
    try:
        read_paths = config_parser.read(config_path, encoding='utf-8')
    except (configparser.Error, UnicodeError) as exc:
        raise ConfigError('cannot parse the config file {!a} ({})'.format(
            str(config_path), ascii_str(exc))) from exc
    if not read_paths:
        raise ConfigError('cannot read the config file {!a}'.format(str(config_path)))
    try:
        section_content = config_parser[section]
    except KeyError:
        raise ConfigError('no section "{}" in the config file {!a}'.format(
            ascii_str(section), str(config_path))) from None
    options = CheckOptions.from_mapping(dict(section_content))
    LOGGER.debug('check options loaded from %a: %r', str(config_path), options)
    return options



#
# Presets (used by the URL checker specializations)
#

HTTP_URL_OPTIONS = CheckOptions()
HTTPS_URL_OPTIONS = CheckOptions(https=True)
HTTP_SITEMAP_URL_OPTIONS = CheckOptions(sitemap=True)
HTTPS_SITEMAP_URL_OPTIONS = CheckOptions(https=True, sitemap=True)
WEB_URL_OPTIONS = CheckOptions(web=True)
SITEMAP_URL_OPTIONS = CheckOptions(web=True, sitemap=True)
