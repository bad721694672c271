# term-cache - Cached lookup of ontology terms
# Copyright © 2026 Damien Goutte-Gattat
#
# This file is part of the term-cache project and distributed under
# the terms of the MIT license. See the LICENSE.md file in that project
# for the detailed conditions.

"""Access to the files backing an ontology."""

import hashlib
import importlib.resources
import logging
import os
from urllib.parse import urlparse, unquote

import requests

from fbcam.termcache.errors import ResourceError

DEFAULT_TIMEOUT = 30


class Snapshot(object):
    """The content of a resource, as read at a given time."""

    def __init__(self, content, etag=None, last_modified=None):
        """Creates a new instance.

        :param content: the raw bytes of the resource
        :param etag: the ETag sent by the server, if any
        :param last_modified: the Last-Modified header sent by the
            server, if any
        """

        self._content = content
        self._etag = etag
        self._last_modified = last_modified
        self._fingerprint = None

    @property
    def content(self):
        return self._content

    @property
    def etag(self):
        return self._etag

    @property
    def last_modified(self):
        return self._last_modified

    @property
    def fingerprint(self):
        """A SHA-256 digest of the content."""

        if self._fingerprint is None:
            self._fingerprint = hashlib.sha256(self._content).hexdigest()
        return self._fingerprint


class ResourceAccessor(object):
    """Helper object to read the resource behind an URI.

    An URI is resolved by trying, in order:

    1. the stream provider supplied by the caller, if any;
    2. a file within the Python package given as `package`, if any;
    3. a file on the local filesystem;
    4. a remote HTTP(S) location.
    """

    def __init__(self, stream_provider=None, package=None, timeout=DEFAULT_TIMEOUT):
        """Creates a new instance.

        :param stream_provider: a callable that takes an URI and
            returns a binary file object, or None if it cannot provide
            that URI
        :param package: the name of a package to look up resources in
        :param timeout: default timeout (in seconds) for remote fetches
        """

        self._provider = stream_provider
        self._package = package
        self._timeout = timeout

    @property
    def timeout(self):
        return self._timeout

    def fetch(self, uri, username='', password='', previous=None, timeout=None):
        """Reads the resource behind an URI.

        :param uri: the URI of the resource
        :param username: user name for remote resources
        :param password: password for remote resources
        :param previous: the Snapshot obtained by the last successful
            fetch, if any; used to make conditional remote requests
        :param timeout: timeout for remote fetches, overriding the
            default timeout
        :return: a Snapshot, or None if the remote server reported
            that the resource has not changed since `previous`
        """

        if self._provider is not None:
            try:
                stream = self._provider(uri)
            except OSError as e:
                raise ResourceError(uri, e) from e
            if stream is not None:
                logging.debug(f"Reading {uri} from stream provider")
                return Snapshot(self._read(uri, stream))

        resource = self._find_package_resource(uri)
        if resource is not None:
            logging.debug(f"Reading {uri} from package {self._package}")
            try:
                stream = resource.open('rb')
            except OSError as e:
                raise ResourceError(uri, e) from e
            return Snapshot(self._read(uri, stream))

        path = self._get_local_path(uri)
        if path is not None and os.path.exists(path):
            logging.debug(f"Reading {uri} from local file")
            try:
                stream = open(path, 'rb')
            except OSError as e:
                raise ResourceError(uri, e) from e
            return Snapshot(self._read(uri, stream))

        if urlparse(uri).scheme in ('http', 'https'):
            if timeout is None:
                timeout = self._timeout
            return self._fetch_remote(uri, username, password, previous, timeout)

        raise ResourceError(uri, "no such resource, file, or URL")

    def _read(self, uri, stream):
        try:
            with stream:
                content = stream.read()
        except OSError as e:
            raise ResourceError(uri, e) from e
        if isinstance(content, str):
            content = content.encode('utf-8')
        return content

    def _find_package_resource(self, uri):
        if self._package is None:
            return None
        try:
            resource = importlib.resources.files(self._package).joinpath(
                uri.lstrip('/')
            )
        except ModuleNotFoundError as e:
            raise ResourceError(uri, e) from e
        if resource.is_file():
            return resource
        return None

    def _get_local_path(self, uri):
        parsed = urlparse(uri)
        if parsed.scheme == 'file':
            return unquote(parsed.path)
        elif len(parsed.scheme) <= 1:
            # Plain path (possibly with a Windows drive letter)
            return uri
        return None

    def _fetch_remote(self, uri, username, password, previous, timeout):
        headers = {}
        if previous is not None:
            if previous.etag is not None:
                headers['If-None-Match'] = previous.etag
            if previous.last_modified is not None:
                headers['If-Modified-Since'] = previous.last_modified
        auth = None
        if username:
            auth = (username, password)

        logging.debug(f"Fetching {uri}")
        try:
            with requests.get(
                uri, headers=headers, auth=auth, timeout=timeout
            ) as response:
                if response.status_code == 304:
                    return None
                response.raise_for_status()
                return Snapshot(
                    response.content,
                    etag=response.headers.get('ETag'),
                    last_modified=response.headers.get('Last-Modified'),
                )
        except requests.RequestException as e:
            raise ResourceError(uri, e) from e
