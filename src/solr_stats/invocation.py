"""Mapping from the plugin's program name to a metric identifier.

Munin runs one symlink per graph, e.g. ``solr_query_result_cache_hit_ratio``
pointing at the ``solr_`` plugin. Everything after the first underscore of the
basename is the identifier.
"""

from __future__ import annotations

import os
from typing import Optional


def identifier_from_program(program: str) -> Optional[str]:
    """Return the identifier encoded in ``program`` or ``None``."""
    name = os.path.basename(program)
    _prefix, sep, identifier = name.partition("_")
    if not sep or not identifier:
        return None
    return identifier


def resolve_identifier(program: str, override: Optional[str] = None) -> Optional[str]:
    """Prefer an explicit ``override`` over the program name."""
    if override:
        return override
    return identifier_from_program(program)
