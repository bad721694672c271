# term-cache - Cached lookup of ontology terms
# Copyright © 2026 Damien Goutte-Gattat
#
# This file is part of the term-cache project and distributed under
# the terms of the MIT license. See the LICENSE.md file in that project
# for the detailed conditions.

"""Exceptions raised when looking up ontology terms."""


class TermCacheError(Exception):
    """Base class for all errors raised by this package."""


class ConfigurationError(TermCacheError):
    """Raised when the ontology configuration is missing or malformed."""


class InvalidIdentifierError(TermCacheError, ValueError):
    """Raised when an identifier does not contain a prefix separator."""

    def __init__(self, identifier, separator):
        super().__init__(
            f"ID ({identifier}) does not contain the prefix separator '{separator}'"
        )
        self.identifier = identifier


class UnknownPrefixError(TermCacheError, LookupError):
    """Raised when no ontology is configured for a prefix."""

    def __init__(self, prefix):
        super().__init__(f"Unrecognised prefix: {prefix}")
        self.prefix = prefix


class UnknownFormatError(TermCacheError, LookupError):
    """Raised when no factory is registered for a format key."""

    def __init__(self, key, known=None):
        msg = f"Unknown ontology format: {key}"
        if known:
            msg += f" (known formats: {', '.join(known)})"
        super().__init__(msg)
        self.key = key


class TermNotFoundError(TermCacheError, LookupError):
    """Raised when an identifier is absent from a loaded ontology."""

    def __init__(self, identifier):
        super().__init__(f"Could not find term for ontology ID: {identifier}")
        self.identifier = identifier


class ParseError(TermCacheError, ValueError):
    """Raised when the content of an ontology file cannot be parsed.

    :param message: a description of the problem
    :param source: the URI of the file being parsed, if known
    :param lineno: the (1-based) number of the offending line
    :param line: the offending line itself
    :param expected: the expected number of columns or fields
    :param found: the number of columns or fields actually found
    """

    def __init__(
        self, message, source=None, lineno=None, line=None, expected=None, found=None
    ):
        self.message = message
        self.source = source
        self.lineno = lineno
        self.line = line
        self.expected = expected
        self.found = found
        super().__init__(self._format())

    def _format(self):
        msg = self.message
        if self.line is not None:
            msg += f" for line {self.line!r}"
        if self.expected is not None or self.found is not None:
            msg += f" [expected={self.expected} found={self.found}]"
        location = []
        if self.source is not None:
            location.append(self.source)
        if self.lineno is not None:
            location.append(f"line {self.lineno}")
        if location:
            msg = f"{', '.join(location)}: {msg}"
        return msg


class ResourceError(TermCacheError, IOError):
    """Raised when an ontology resource cannot be obtained."""

    def __init__(self, uri, reason):
        super().__init__(f"Could not get input stream for {uri}: {reason}")
        self.uri = uri
