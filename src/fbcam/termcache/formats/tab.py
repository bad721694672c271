# term-cache - Cached lookup of ontology terms
# Copyright © 2026 Damien Goutte-Gattat
#
# This file is part of the term-cache project and distributed under
# the terms of the MIT license. See the LICENSE.md file in that project
# for the detailed conditions.

"""Tab-delimited ontologies.

The format is one term per line, as ID<tab>term. Lines beginning with
a `!` are comments. For example:

    GO:0000001	mitochondrion inheritance
    GO:0000002	mitochondrial genome maintenance
    GO:0000003	reproduction
"""

import io
from types import MappingProxyType

from fbcam.termcache.cache import TermCache
from fbcam.termcache.errors import ParseError

KEY = 'tab'

COMMENT = '!'
SEPARATOR = '\t'
COLUMN_ID = 0
COLUMN_TERM = COLUMN_ID + 1
MIN_COLUMNS = COLUMN_TERM + 1


class TabAdapter(object):
    """Parser for tab-delimited ontologies."""

    key = KEY

    def parse(self, stream, source=None):
        terms = {}
        reader = io.TextIOWrapper(stream, encoding='utf-8', newline=None)
        try:
            for lineno, line in enumerate(reader, start=1):
                line = line.rstrip('\r\n')
                if line.startswith(COMMENT):
                    continue
                # Trailing empty columns do not count
                columns = line.rstrip(SEPARATOR).split(SEPARATOR)
                if len(columns) < MIN_COLUMNS:
                    raise ParseError(
                        "Too few columns",
                        source=source,
                        lineno=lineno,
                        line=line,
                        expected=MIN_COLUMNS,
                        found=len(columns),
                    )
                terms[columns[COLUMN_ID]] = columns[COLUMN_TERM]
        except UnicodeDecodeError as e:
            raise ParseError(f"Invalid UTF-8 content ({e})", source=source) from e
        finally:
            reader.detach()
        return MappingProxyType(terms)


def create(spec, accessor=None):
    return TermCache(spec, TabAdapter(), accessor)


def register(registry):
    registry.register(KEY, create)
