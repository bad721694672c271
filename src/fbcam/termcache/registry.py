# term-cache - Cached lookup of ontology terms
# Copyright © 2026 Damien Goutte-Gattat
#
# This file is part of the term-cache project and distributed under
# the terms of the MIT license. See the LICENSE.md file in that project
# for the detailed conditions.

import logging
from threading import Lock

from fbcam.termcache.errors import UnknownFormatError
from fbcam.termcache.formats import register_builtin_formats


class OntologyRegistry(object):
    """Associates ontology format keys to TermCache factories.

    A factory is a callable taking an OntologySpec and a
    ResourceAccessor (or None) and returning a TermCache.
    """

    def __init__(self):
        self._factories = {}

    @property
    def formats(self):
        """The sorted list of registered format keys."""

        return sorted(self._factories.keys())

    def register(self, key, factory):
        """Registers a factory for a format.

        A factory already registered under the same key is replaced.
        """

        if key in self._factories and self._factories[key] is not factory:
            logging.warning(f"Overriding factory for ontology format '{key}'")
        self._factories[key] = factory

    def create(self, key, spec, accessor=None):
        """Creates a TermCache for an ontology in the given format.

        :param key: the format key
        :param spec: the OntologySpec describing the ontology
        :param accessor: the ResourceAccessor to read the ontology
            with, or None to use a default one
        :raise UnknownFormatError: if no factory is registered for
            the format
        """

        factory = self._factories.get(key)
        if factory is None:
            raise UnknownFormatError(key, self.formats)
        return factory(spec, accessor)

    def __contains__(self, key):
        return key in self._factories


_default_registry = None
_default_registry_lock = Lock()


def get_default_registry():
    """Gets the process-wide registry of the built-in formats."""

    global _default_registry

    with _default_registry_lock:
        if _default_registry is None:
            registry = OntologyRegistry()
            register_builtin_formats(registry)
            _default_registry = registry
    return _default_registry
