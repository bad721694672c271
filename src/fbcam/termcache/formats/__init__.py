# term-cache - Cached lookup of ontology terms
# Copyright © 2026 Damien Goutte-Gattat
#
# This file is part of the term-cache project and distributed under
# the terms of the MIT license. See the LICENSE.md file in that project
# for the detailed conditions.

"""Parsers for the supported ontology file formats.

Each format is implemented by an adapter object with a `key` attribute
and a `parse(stream, source=None)` method, which reads a binary stream
and returns a read-only mapping of ontology IDs to terms. When an ID
occurs several times in a file, the last occurrence wins.

Each format module also provides a `register(registry)` function that
makes the format available in an OntologyRegistry.
"""

from fbcam.termcache.formats import dag, obo, tab

BUILTIN_FORMATS = (tab, obo, dag)


def register_builtin_formats(registry):
    """Registers all the built-in formats into a registry."""

    for module in BUILTIN_FORMATS:
        module.register(registry)
