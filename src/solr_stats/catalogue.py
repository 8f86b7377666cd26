"""Registry of the Solr statistics this plugin knows how to graph."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping

from .errors import UnknownMetricError

DEFAULT_QUERY_HANDLER = "/select"

RATIO_SUFFIX = "_hit_ratio"
BYTE_SIZED_PREFIX = "index_size"


class MetricKind(str, Enum):
    """How the monitoring agent should treat successive samples."""

    GAUGE = "GAUGE"
    COUNTER = "COUNTER"

    @property
    def munin_type(self) -> str:
        return "DERIVE" if self is MetricKind.COUNTER else "GAUGE"


class Section(str, Enum):
    """Top-level ``solr-info`` groups of the stats document."""

    CORE = "CORE"
    QUERYHANDLER = "QUERYHANDLER"
    CACHE = "CACHE"


@dataclass(frozen=True)
class MetricDefinition:
    """
    Where a single statistic lives in ``stats.jsp`` and how to present it.

    Attributes:
        identifier (str): Catalogue key, also used as the field name in the
                          plugin output.
        kind (MetricKind): Gauge or monotonically increasing counter.
        section (Section): Group holding the entry.
        component_name (str): Matched against each entry's ``<name>``.
        field_name (str): The ``name`` attribute of the ``<stat>`` to read.
        display_title (str): Graph title.
        display_unit (str): Vertical axis label.
    """

    identifier: str
    kind: MetricKind
    section: Section
    component_name: str
    field_name: str
    display_title: str
    display_unit: str

    @property
    def is_ratio(self) -> bool:
        return self.identifier.endswith(RATIO_SUFFIX)

    @property
    def is_byte_sized(self) -> bool:
        return self.identifier.startswith(BYTE_SIZED_PREFIX)


MetricCatalogue = Mapping[str, MetricDefinition]

# (name in stats.jsp, identifier prefix, graph title)
CACHES: tuple[tuple[str, str, str], ...] = (
    ("queryResultCache", "query_result_cache", "Query result cache"),
    ("documentCache", "document_cache", "Document cache"),
    ("filterCache", "filter_cache", "Filter cache"),
    ("fieldValueCache", "field_value_cache", "Field value cache"),
)

# (identifier suffix, stat name, kind, title suffix, unit)
_CACHE_STATS: tuple[tuple[str, str, MetricKind, str, str], ...] = (
    ("size", "size", MetricKind.GAUGE, "size", "entries"),
    ("hit_ratio", "hitratio", MetricKind.GAUGE, "hit ratio", "ratio"),
    ("lookups", "lookups", MetricKind.COUNTER, "lookups", "lookups / ${graph_period}"),
    ("warmup_time", "warmupTime", MetricKind.GAUGE, "warmup time", "ms"),
    (
        "cumulative_lookups",
        "cumulative_lookups",
        MetricKind.COUNTER,
        "cumulative lookups",
        "lookups / ${graph_period}",
    ),
    ("hits", "cumulative_hits", MetricKind.COUNTER, "hits", "hits / ${graph_period}"),
    (
        "inserts",
        "cumulative_inserts",
        MetricKind.COUNTER,
        "inserts",
        "inserts / ${graph_period}",
    ),
    (
        "evictions",
        "cumulative_evictions",
        MetricKind.COUNTER,
        "evictions",
        "evictions / ${graph_period}",
    ),
)

# (identifier, stat name, kind, title, unit)
_QUERY_HANDLER_STATS: tuple[tuple[str, str, MetricKind, str, str], ...] = (
    ("query_handler_requests", "requests", MetricKind.COUNTER, "requests", "requests / ${graph_period}"),
    ("query_handler_errors", "errors", MetricKind.COUNTER, "errors", "errors / ${graph_period}"),
    ("query_handler_timeouts", "timeouts", MetricKind.COUNTER, "timeouts", "timeouts / ${graph_period}"),
    ("query_handler_total_time", "totalTime", MetricKind.COUNTER, "total time", "ms / ${graph_period}"),
    (
        "query_handler_avg_time_per_request",
        "avgTimePerRequest",
        MetricKind.GAUGE,
        "average time per request",
        "ms",
    ),
    (
        "query_handler_avg_requests_per_second",
        "avgRequestsPerSecond",
        MetricKind.GAUGE,
        "average requests per second",
        "requests/s",
    ),
)

_CORE_STATS: tuple[tuple[str, str, str, str], ...] = (
    ("index_size", "indexSize", "Index size", "bytes"),
    ("numdocs", "numDocs", "Number of documents", "documents"),
    ("maxdoc", "maxDoc", "Maximum document number", "documents"),
    ("deleted_docs", "deletedDocs", "Deleted documents", "documents"),
)


def _core_definitions() -> Iterable[MetricDefinition]:
    for identifier, field_name, title, unit in _CORE_STATS:
        yield MetricDefinition(
            identifier=identifier,
            kind=MetricKind.GAUGE,
            section=Section.CORE,
            component_name="searcher",
            field_name=field_name,
            display_title=title,
            display_unit=unit,
        )


def _query_handler_definitions(query_handler: str) -> Iterable[MetricDefinition]:
    for identifier, field_name, kind, title, unit in _QUERY_HANDLER_STATS:
        yield MetricDefinition(
            identifier=identifier,
            kind=kind,
            section=Section.QUERYHANDLER,
            component_name=query_handler,
            field_name=field_name,
            display_title=f"Query handler {query_handler} {title}",
            display_unit=unit,
        )


def _cache_definitions() -> Iterable[MetricDefinition]:
    for cache_name, prefix, cache_title in CACHES:
        for suffix, field_name, kind, title, unit in _CACHE_STATS:
            yield MetricDefinition(
                identifier=f"{prefix}_{suffix}",
                kind=kind,
                section=Section.CACHE,
                component_name=cache_name,
                field_name=field_name,
                display_title=f"{cache_title} {title}",
                display_unit=unit,
            )


def build_catalogue(query_handler: str | None = DEFAULT_QUERY_HANDLER) -> MetricCatalogue:
    """Return the read-only catalogue for the given query handler path.

    An empty or missing ``query_handler`` falls back to
    :data:`DEFAULT_QUERY_HANDLER`.
    """
    handler = (query_handler or "").strip() or DEFAULT_QUERY_HANDLER
    entries: dict[str, MetricDefinition] = {}
    for definition in (
        *_core_definitions(),
        *_query_handler_definitions(handler),
        *_cache_definitions(),
    ):
        if definition.identifier in entries:
            raise ValueError(f"Duplicate metric identifier: {definition.identifier}")
        entries[definition.identifier] = definition
    return MappingProxyType(entries)


def lookup(catalogue: MetricCatalogue, identifier: str | None) -> MetricDefinition:
    """Return the definition for ``identifier`` or raise ``UnknownMetricError``."""
    if not identifier or identifier not in catalogue:
        raise UnknownMetricError(identifier)
    return catalogue[identifier]
