# term-cache - Cached lookup of ontology terms
# Copyright © 2026 Damien Goutte-Gattat
#
# This file is part of the term-cache project and distributed under
# the terms of the MIT license. See the LICENSE.md file in that project
# for the detailed conditions.

import logging
from types import MappingProxyType

from fbcam.termcache.config import read_specs
from fbcam.termcache.errors import InvalidIdentifierError, UnknownPrefixError
from fbcam.termcache.registry import get_default_registry
from fbcam.termcache.resources import ResourceAccessor

PREFIX_SEPARATOR = ':'


class PrefixRouter(object):
    """Centralised access to all configured ontologies.

    Terms are looked up by their full ID (for example GO:0000001); the
    part before the first separator selects the ontology.
    """

    def __init__(
        self,
        config,
        registry=None,
        accessor=None,
        stream_provider=None,
        overrides=None,
    ):
        """Creates a new instance and loads all ontologies.

        :param config: the ontology settings (anything accepted by
            `config.read_specs`)
        :param registry: the OntologyRegistry to create the ontologies
            with; defaults to the registry of the built-in formats
        :param accessor: the ResourceAccessor to read the ontologies
            with; if None, each ontology gets its own default accessor
        :param stream_provider: a callable that takes an URI and returns
            a binary file object (or None); ignored if `accessor` is set
        :param overrides: a dictionary of URI overrides, see
            `config.read_specs`
        :raise ConfigurationError: if the settings are invalid
        :raise UnknownFormatError: if an ontology has an unknown format
        :raise ResourceError: if an ontology cannot be read
        :raise ParseError: if an ontology cannot be parsed
        """

        if registry is None:
            registry = get_default_registry()

        self._caches = {}
        for spec in read_specs(config, overrides):
            if accessor is None and stream_provider is not None:
                spec_accessor = ResourceAccessor(
                    stream_provider=stream_provider, timeout=spec.timeout
                )
            else:
                spec_accessor = accessor
            logging.info(f"Loading ontology '{spec.prefix}' ({spec.format})")
            self._caches[spec.prefix] = registry.create(
                spec.format, spec, spec_accessor
            )

    @property
    def prefixes(self):
        return sorted(self._caches.keys())

    def as_map(self):
        """Gets a read-only dictionary of prefixes to TermCache objects."""

        return MappingProxyType(self._caches)

    def is_valid_id(self, identifier):
        """Indicates whether an ID contains a prefix separator.

        For example, "GO:0001" is a valid ID, "GO-0001" is not.
        """

        if identifier is None:
            return False
        return PREFIX_SEPARATOR in identifier

    def get_term(self, identifier):
        """Gets the term associated with an ontology ID.

        :param identifier: the ontology ID
        :return: the term
        :raise InvalidIdentifierError: if the ID has no prefix
        :raise UnknownPrefixError: if no ontology is configured for
            the prefix of the ID
        :raise TermNotFoundError: if the ID is not in the ontology
        :raise ResourceError: if the ontology could not be refreshed
        :raise ParseError: likewise
        """

        if not self.is_valid_id(identifier):
            raise InvalidIdentifierError(identifier, PREFIX_SEPARATOR)

        prefix = identifier.split(PREFIX_SEPARATOR, 1)[0]
        cache = self._caches.get(prefix)
        if cache is None:
            raise UnknownPrefixError(prefix)
        return cache.get_term(identifier)

    def describe(self):
        """Gets a human-readable summary of all ontologies."""

        parts = ["Ontologies:\n"]
        for prefix in self.prefixes:
            parts.append(self._caches[prefix].describe())
        return '\n'.join(parts)

    def __str__(self):
        return self.describe()

    def __contains__(self, prefix):
        return prefix in self._caches

    def __len__(self):
        return len(self._caches)
