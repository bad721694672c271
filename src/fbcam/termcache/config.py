# term-cache - Cached lookup of ontology terms
# Copyright © 2026 Damien Goutte-Gattat
#
# This file is part of the term-cache project and distributed under
# the terms of the MIT license. See the LICENSE.md file in that project
# for the detailed conditions.

"""Reading of the ontologies configuration.

Ontologies are configured with `<prefix>.<setting>` keys, for example:

    GO.uri = http://current.geneontology.org/ontology/go.obo
    GO.format = obo
    GO.refresh-interval = 600
    GO.tolerate-refresh-exception = true

The keys are read from the `[ontologies]` section of an INI file, or
from a plain properties file without any section header.
"""

import os
import re
from configparser import ConfigParser, Error as ConfigParserError
from configparser import MissingSectionHeaderError

from fbcam.termcache.cache import (
    DEFAULT_FORMAT,
    DEFAULT_REFRESH_INTERVAL,
    OntologySpec,
)
from fbcam.termcache.errors import ConfigurationError
from fbcam.termcache.resources import DEFAULT_TIMEOUT

SECTION = 'ontologies'
PROPERTY_SEP = '.'

PROPERTY_URI = 'uri'
PROPERTY_USER_NAME = 'username'
PROPERTY_PASSWORD = 'password'
PROPERTY_REFRESH_INTERVAL = 'refresh-interval'
PROPERTY_TOLERATE_REFRESH_EXCEPTION = 'tolerate-refresh-exception'
PROPERTY_FORMAT = 'format'
PROPERTY_CLASS = 'class'
PROPERTY_TIMEOUT = 'timeout'

ENVIRONMENT_PREFIX = 'TERMCACHE_'


def new_config_parser():
    """Gets a ConfigParser suitable for ontology settings.

    Keys are case-sensitive (prefixes such as "GO" are kept as they
    are) and values are not interpolated.
    """

    parser = ConfigParser(interpolation=None, comment_prefixes=('#', ';', '!'))
    parser.optionxform = str
    return parser


def read_properties(source):
    """Reads ontology settings as a flat dictionary.

    :param source: the path to a configuration file, a ConfigParser
        object, or a dictionary of `<prefix>.<setting>` keys
    :return: a dictionary of `<prefix>.<setting>` keys
    :raise ConfigurationError: if the settings cannot be read
    """

    if isinstance(source, dict):
        return {str(k): str(v).strip() for k, v in source.items()}
    elif isinstance(source, ConfigParser):
        if not source.has_section(SECTION):
            return {}
        return {k: v.strip() for k, v in source.items(SECTION)}

    parser = new_config_parser()
    try:
        with open(source, 'r', encoding='utf-8') as f:
            text = f.read()
    except OSError as e:
        raise ConfigurationError(f"Cannot read configuration file {source}: {e}") from e

    try:
        try:
            parser.read_string(text, source=str(source))
        except MissingSectionHeaderError:
            # Plain properties file
            parser = new_config_parser()
            parser.read_string(f'[{SECTION}]\n' + text, source=str(source))
    except ConfigParserError as e:
        raise ConfigurationError(f"Invalid configuration file {source}: {e}") from e

    return read_properties(parser)


def get_prefixes(properties):
    """Gets the sorted list of the prefixes in a settings dictionary."""

    prefixes = set()
    for key in properties:
        if PROPERTY_SEP in key:
            prefixes.add(key[: key.index(PROPERTY_SEP)])
    return sorted(prefixes)


def read_specs(source, overrides=None):
    """Reads the settings of all configured ontologies.

    :param source: anything accepted by `read_properties`
    :param overrides: a dictionary that may override the URIs of the
        ontologies, either with `<prefix>.uri` keys or with
        `TERMCACHE_<PREFIX>_URI` keys; defaults to the environment
    :return: a list of OntologySpec objects, sorted by prefix
    :raise ConfigurationError: if a setting is missing or invalid
    """

    if overrides is None:
        overrides = os.environ
    properties = read_properties(source)
    return [
        get_spec(prefix, properties, overrides)
        for prefix in get_prefixes(properties)
    ]


def get_spec(prefix, properties, overrides=None):
    """Builds the OntologySpec for a single prefix."""

    def get(setting, fallback=None):
        return properties.get(f'{prefix}{PROPERTY_SEP}{setting}', fallback)

    uri = get(PROPERTY_URI)
    if overrides:
        uri = _get_uri_override(prefix, overrides, uri)
    if not uri:
        raise ConfigurationError(
            f"Missing required setting '{prefix}.{PROPERTY_URI}'"
        )

    return OntologySpec(
        prefix,
        uri,
        username=get(PROPERTY_USER_NAME, ''),
        password=get(PROPERTY_PASSWORD, ''),
        refresh_interval=_parse_interval(prefix, get(PROPERTY_REFRESH_INTERVAL)),
        tolerate_refresh_exception=_parse_bool(
            prefix,
            PROPERTY_TOLERATE_REFRESH_EXCEPTION,
            get(PROPERTY_TOLERATE_REFRESH_EXCEPTION),
        ),
        format=get(PROPERTY_FORMAT) or get(PROPERTY_CLASS) or DEFAULT_FORMAT,
        timeout=_parse_timeout(prefix, get(PROPERTY_TIMEOUT)),
    )


def _get_uri_override(prefix, overrides, default):
    env_name = re.sub(r'\W', '_', prefix.upper())
    for key in (
        f'{prefix}{PROPERTY_SEP}{PROPERTY_URI}',
        f'{ENVIRONMENT_PREFIX}{env_name}_URI',
    ):
        if overrides.get(key):
            return overrides[key]
    return default


def _parse_interval(prefix, value):
    if not value:
        return DEFAULT_REFRESH_INTERVAL
    try:
        return int(value)
    except ValueError:
        raise ConfigurationError(
            f"Invalid value for '{prefix}.{PROPERTY_REFRESH_INTERVAL}': {value!r} is not an integer"
        )


def _parse_bool(prefix, setting, value):
    if not value:
        return False
    if value.lower() == 'true':
        return True
    elif value.lower() == 'false':
        return False
    raise ConfigurationError(
        f"Invalid value for '{prefix}.{setting}': {value!r} is not true or false"
    )


def _parse_timeout(prefix, value):
    if not value:
        return DEFAULT_TIMEOUT
    try:
        timeout = float(value)
    except ValueError:
        timeout = 0
    if timeout <= 0:
        raise ConfigurationError(
            f"Invalid value for '{prefix}.{PROPERTY_TIMEOUT}': {value!r} is not a positive number"
        )
    return timeout
