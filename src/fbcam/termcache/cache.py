# term-cache - Cached lookup of ontology terms
# Copyright © 2026 Damien Goutte-Gattat
#
# This file is part of the term-cache project and distributed under
# the terms of the MIT license. See the LICENSE.md file in that project
# for the detailed conditions.

"""Cached access to the terms of a single ontology."""

import io
import logging
from threading import RLock
from types import MappingProxyType

from fbcam.termcache.errors import ParseError, ResourceError, TermNotFoundError
from fbcam.termcache.resources import DEFAULT_TIMEOUT, ResourceAccessor
from fbcam.termcache.staleness import StalenessProbe

DEFAULT_REFRESH_INTERVAL = 60
DEFAULT_FORMAT = 'tab'


class OntologySpec(object):
    """Identity and refresh policy of an ontology."""

    def __init__(
        self,
        prefix,
        uri,
        username='',
        password='',
        refresh_interval=DEFAULT_REFRESH_INTERVAL,
        tolerate_refresh_exception=False,
        format=DEFAULT_FORMAT,
        timeout=DEFAULT_TIMEOUT,
    ):
        """Creates a new instance.

        :param prefix: the ontology prefix, for example "GO"
        :param uri: the location of the ontology file (package
            resource, local path, or URL)
        :param username: user name to access a secured ontology
        :param password: password to access a secured ontology
        :param refresh_interval: how often (in seconds) to check the
            ontology for updates; 0 or less to check on every lookup
        :param tolerate_refresh_exception: if True, errors when
            refreshing the ontology are logged instead of raised
        :param format: the key of the ontology format
        :param timeout: how long (in seconds) to wait for a remote
            server
        """

        self._prefix = prefix
        self._uri = uri
        self._username = username or ''
        self._password = password or ''
        self._refresh_interval = refresh_interval
        self._tolerate = tolerate_refresh_exception
        self._format = format
        self._timeout = timeout

    @property
    def prefix(self):
        return self._prefix

    @property
    def uri(self):
        return self._uri

    @property
    def username(self):
        return self._username

    @property
    def password(self):
        return self._password

    @property
    def refresh_interval(self):
        return self._refresh_interval

    @property
    def tolerate_refresh_exception(self):
        return self._tolerate

    @property
    def format(self):
        return self._format

    @property
    def timeout(self):
        return self._timeout

    def __eq__(self, other):
        if not isinstance(other, OntologySpec):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def _key(self):
        return (
            self._prefix,
            self._uri,
            self._username,
            self._password,
            self._refresh_interval,
            self._tolerate,
            self._format,
            self._timeout,
        )

    def __repr__(self):
        return f'OntologySpec(prefix={self._prefix!r}, uri={self._uri!r}, format={self._format!r})'


class TermCache(object):
    """Provides a cached map of the terms of an ontology.

    The terms are loaded when the object is created. Before each lookup,
    the backing resource is checked for changes (at most once per
    refresh interval) and the terms are reloaded if needed.
    """

    def __init__(self, spec, adapter, accessor=None):
        """Creates a new instance and loads the terms.

        :param spec: the OntologySpec describing the ontology
        :param adapter: the format adapter to parse the ontology with
        :param accessor: the ResourceAccessor to read the ontology
            with; if None, a default accessor is used
        :raise ResourceError: if the ontology cannot be read
        :raise ParseError: if the ontology cannot be parsed
        """

        self._spec = spec
        self._adapter = adapter
        if accessor is None:
            accessor = ResourceAccessor(timeout=spec.timeout)
        self._accessor = accessor
        self._probe = StalenessProbe(spec.refresh_interval)
        self._lock = RLock()

        with self._lock:
            self._probe.checked()
            snapshot = self._fetch()
            self._terms = self._load(snapshot)
            self._probe.record(snapshot)

    @property
    def spec(self):
        return self._spec

    @property
    def prefix(self):
        return self._spec.prefix

    @property
    def uri(self):
        return self._spec.uri

    @property
    def username(self):
        return self._spec.username

    @property
    def password(self):
        return self._spec.password

    @property
    def refresh_interval(self):
        return self._spec.refresh_interval

    @property
    def tolerate_refresh_exception(self):
        return self._spec.tolerate_refresh_exception

    @property
    def format(self):
        return self._adapter.key

    @property
    def terms(self):
        """The currently active (read-only) mapping of IDs to terms."""

        return self._terms

    def get_term(self, identifier):
        """Gets the term associated with an ontology ID.

        :param identifier: the ontology ID, for example GO:0000001
        :return: the term
        :raise TermNotFoundError: if the ID is not in the ontology
        :raise ResourceError: if the ontology could not be refreshed
            and refresh exceptions are not tolerated
        :raise ParseError: likewise
        """

        self.refresh()
        terms = self._terms
        if identifier not in terms:
            raise TermNotFoundError(identifier)
        return terms[identifier]

    def refresh(self):
        """Reloads the terms if the ontology has been updated.

        :return: True if new terms have been loaded, otherwise False
        """

        with self._lock:
            if not self._probe.due():
                logging.debug(f"Skipping check of ontology '{self.prefix}'")
                return False
            self._probe.checked()

            try:
                snapshot = self._fetch(self._probe.previous)
                if snapshot is None or not self._probe.is_modified(snapshot):
                    logging.debug(f"Ontology '{self.prefix}' has not changed")
                    return False
                terms = self._load(snapshot)
            except (ResourceError, ParseError) as e:
                if self.tolerate_refresh_exception:
                    logging.warning(f"Could not refresh ontology '{self.prefix}': {e}")
                    return False
                raise

            self._terms = terms
            self._probe.record(snapshot)
            return True

    def describe(self):
        """Gets a human-readable summary of the ontology."""

        password = '****' if self.password else ''
        lines = [
            f"Prefix:\t{self.prefix}",
            f"Format:\t{self.format}",
            f"URI:\t{self.uri}",
            f"User name:\t{self.username}",
            f"Password:\t{password}",
            f"Refresh interval:\t{self.refresh_interval}",
            f"Tolerate refresh exceptions:\t{self.tolerate_refresh_exception}",
            f"Term count:\t{len(self._terms)}",
        ]
        return '\n'.join(lines) + '\n'

    def __str__(self):
        return self.describe()

    def __len__(self):
        return len(self._terms)

    def __contains__(self, identifier):
        return identifier in self._terms

    def _fetch(self, previous=None):
        return self._accessor.fetch(
            self.uri,
            username=self.username,
            password=self.password,
            previous=previous,
            timeout=self._spec.timeout,
        )

    def _load(self, snapshot):
        terms = self._adapter.parse(io.BytesIO(snapshot.content), source=self.uri)
        logging.info(f"Loaded {len(terms)} terms for ontology '{self.prefix}' from {self.uri}")
        return MappingProxyType(dict(terms))
