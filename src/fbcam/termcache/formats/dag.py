# term-cache - Cached lookup of ontology terms
# Copyright © 2026 Damien Goutte-Gattat
#
# This file is part of the term-cache project and distributed under
# the terms of the MIT license. See the LICENSE.md file in that project
# for the detailed conditions.

"""Ontologies in the old GO flat file (DAG) format. For example:

    $Gene_Ontology ; GO:0003673
     <molecular_function ; GO:0003674
      %antioxidant activity ; GO:0016209

Indentation gives the depth of a term in the hierarchy and the leading
symbol its relationship to its parent. Only the IDs and names of the
terms are kept; the hierarchy itself is discarded.
"""

import io
import re
from types import MappingProxyType

from fbcam.termcache.cache import TermCache
from fbcam.termcache.errors import ParseError

KEY = 'dag'

COMMENT = '!'
RELATIONSHIPS = '$%<~@^'
FIELD_SEPARATOR = ';'
ID_SEPARATOR = ','
MIN_FIELDS = 2

# A relationship symbol introducing another parent
_PARENT_RE = re.compile(r'\s[%<~@^]')
_FIELD_RE = re.compile(r'(?<!\\)' + FIELD_SEPARATOR)
_ESCAPE_RE = re.compile(r'\\(.)')


class DagAdapter(object):
    """Parser for GO flat files."""

    key = KEY

    def parse(self, stream, source=None):
        terms = {}
        reader = io.TextIOWrapper(stream, encoding='utf-8', newline=None)
        try:
            for lineno, line in enumerate(reader, start=1):
                line = line.rstrip('\r\n')
                body = line.strip()
                if not body or body.startswith(COMMENT):
                    continue
                term_id, name = self._parse_line(body, line, lineno, source)
                terms[term_id] = name
        except UnicodeDecodeError as e:
            raise ParseError(f"Invalid UTF-8 content ({e})", source=source) from e
        finally:
            reader.detach()
        return MappingProxyType(terms)

    def _parse_line(self, body, line, lineno, source):
        if body[0] not in RELATIONSHIPS:
            raise ParseError(
                f"Unknown relationship symbol {body[0]!r}",
                source=source,
                lineno=lineno,
                line=line,
            )

        # Only the first term reference is defined by this line; the
        # following ones are references to additional parents.
        definition = _PARENT_RE.split(body[1:], maxsplit=1)[0]
        fields = [f.strip() for f in _FIELD_RE.split(definition)]
        if len(fields) < MIN_FIELDS or not fields[1]:
            raise ParseError(
                "Too few fields",
                source=source,
                lineno=lineno,
                line=line,
                expected=MIN_FIELDS,
                found=len([f for f in fields if f]),
            )

        name = _ESCAPE_RE.sub(r'\1', fields[0])
        term_id = fields[1].split(ID_SEPARATOR)[0].strip()
        return term_id, name


def create(spec, accessor=None):
    return TermCache(spec, DagAdapter(), accessor)


def register(registry):
    registry.register(KEY, create)
