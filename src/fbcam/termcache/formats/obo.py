# term-cache - Cached lookup of ontology terms
# Copyright © 2026 Damien Goutte-Gattat
#
# This file is part of the term-cache project and distributed under
# the terms of the MIT license. See the LICENSE.md file in that project
# for the detailed conditions.

"""OBO-formatted ontologies. For example:

    [Term]
    id: GO:0000001
    name: mitochondrion inheritance
    namespace: biological_process
    is_a: GO:0048308 ! organelle inheritance
"""

from types import MappingProxyType

from pronto import Ontology

from fbcam.termcache.cache import TermCache
from fbcam.termcache.errors import ParseError

KEY = 'obo'


class OboAdapter(object):
    """Parser for OBO ontologies, backed by Pronto."""

    key = KEY

    def parse(self, stream, source=None):
        try:
            # Imports are not followed, only the terms of this file are needed
            backend = Ontology(stream, import_depth=0)
        except (OSError, SyntaxError, TypeError, ValueError) as e:
            raise ParseError(f"Could not load terms ({e})", source=source) from e

        terms = {}
        for term in backend.terms():
            if term.name is not None:
                terms[term.id] = term.name
        return MappingProxyType(terms)


def create(spec, accessor=None):
    return TermCache(spec, OboAdapter(), accessor)


def register(registry):
    registry.register(KEY, create)
