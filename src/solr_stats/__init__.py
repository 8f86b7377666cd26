"""Munin plugin for Solr ``admin/stats.jsp`` statistics."""

from .catalogue import (
    DEFAULT_QUERY_HANDLER,
    MetricCatalogue,
    MetricDefinition,
    MetricKind,
    Section,
    build_catalogue,
)
from .config import Settings
from .dispatcher import Dispatcher, Mode, ProbeResult, parse_mode
from .errors import (
    InvalidValueError,
    MalformedDocumentError,
    MetricNotFoundError,
    SolrStatsError,
    TransportError,
    UnknownMetricError,
    UnknownUnitError,
)
from .invocation import identifier_from_program, resolve_identifier
from .units import to_bytes

__all__ = [
    "DEFAULT_QUERY_HANDLER",
    "MetricCatalogue",
    "MetricDefinition",
    "MetricKind",
    "Section",
    "build_catalogue",
    "Settings",
    "Dispatcher",
    "Mode",
    "ProbeResult",
    "parse_mode",
    "InvalidValueError",
    "MalformedDocumentError",
    "MetricNotFoundError",
    "SolrStatsError",
    "TransportError",
    "UnknownMetricError",
    "UnknownUnitError",
    "identifier_from_program",
    "resolve_identifier",
    "to_bytes",
]
