"""The four plugin modes and the table that routes to them."""

from __future__ import annotations

import importlib.util
import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Mapping, Optional, Tuple

import structlog

from .catalogue import MetricCatalogue, MetricDefinition, MetricKind, build_catalogue, lookup
from .config import Settings
from .errors import InvalidValueError
from .units import to_bytes

logger = structlog.get_logger(__name__)

GRAPH_CATEGORY = "solr"
UNKNOWN_VALUE = "U"

# Import name -> what it provides, checked by ``probe``.
REQUIRED_FACILITIES: Mapping[str, str] = {
    "httpx": "HTTP client",
    "defusedxml": "XML parser",
}

DocumentSource = Callable[[], str]


class Mode(str, Enum):
    DESCRIBE = "describe"
    FETCH = "fetch"
    PROBE = "probe"
    LIST = "list"


# Munin's argument names map onto the modes above.
MODE_ALIASES: Dict[str, Mode] = {
    "config": Mode.DESCRIBE,
    "describe": Mode.DESCRIBE,
    "fetch": Mode.FETCH,
    "autoconf": Mode.PROBE,
    "probe": Mode.PROBE,
    "suggest": Mode.LIST,
    "list": Mode.LIST,
}


def parse_mode(value: Optional[str]) -> Mode:
    """Return the mode named by ``value``; ``None`` means ``fetch``."""
    if value is None:
        return Mode.FETCH
    try:
        return MODE_ALIASES[value]
    except KeyError:
        raise ValueError(f"Unknown mode: {value}") from None


@dataclass(frozen=True)
class ProbeResult:
    """Outcome of the capability probe; never raised, only reported."""

    available: bool
    reasons: Tuple[str, ...] = ()

    @property
    def line(self) -> str:
        if self.available:
            return "yes"
        return f"no ({', '.join(self.reasons)})"


def describe(catalogue: MetricCatalogue, identifier: Optional[str]) -> List[str]:
    """Return the ``config`` lines for ``identifier``."""
    definition = lookup(catalogue, identifier)
    field = definition.identifier
    lines = [
        f"graph_category {GRAPH_CATEGORY}",
        f"graph_title {definition.display_title}",
        f"graph_vlabel {definition.display_unit}",
        f"{field}.label {definition.field_name}",
        f"{field}.info {definition.display_title} "
        f"({definition.section.value} {definition.component_name})",
        f"{field}.type {definition.kind.munin_type}",
    ]
    if definition.kind is MetricKind.COUNTER or definition.is_ratio:
        lines.append(f"{field}.min 0")
    if definition.is_ratio:
        lines.append(f"{field}.max 1")
    if definition.is_byte_sized:
        lines.append("graph_args --base 1024 --lower-limit 0")
    return lines


def format_value(definition: MetricDefinition, raw: str) -> str:
    """Turn the extracted stat text into the number printed after ``.value``."""
    if definition.is_byte_sized:
        return str(to_bytes(raw))
    try:
        return str(int(raw))
    except ValueError:
        pass
    try:
        number = float(raw)
    except ValueError:
        raise InvalidValueError(
            f"Stat {definition.field_name!r} for {definition.identifier} is not numeric: {raw!r}"
        ) from None
    if math.isnan(number):
        return UNKNOWN_VALUE
    if math.isinf(number):
        raise InvalidValueError(
            f"Stat {definition.field_name!r} for {definition.identifier} is not finite: {raw!r}"
        )
    return repr(number)


def fetch(
    catalogue: MetricCatalogue, identifier: Optional[str], source: DocumentSource
) -> List[str]:
    """Return the single ``<id>.value`` line for ``identifier``.

    The catalogue lookup happens before ``source`` is called, so an unknown
    identifier never touches the network.
    """
    from .navigator import extract

    definition = lookup(catalogue, identifier)
    document = source()
    raw = extract(document, definition)
    value = format_value(definition, raw)
    return [f"{definition.identifier}.value {value}"]


def probe(required: Mapping[str, str] = REQUIRED_FACILITIES) -> ProbeResult:
    """Report whether the modules needed for ``fetch`` can be imported."""
    reasons = []
    for module, purpose in required.items():
        try:
            found = importlib.util.find_spec(module) is not None
        except (ImportError, ValueError):
            found = False
        if not found:
            reasons.append(f"{purpose} {module} not installed")
    return ProbeResult(available=not reasons, reasons=tuple(reasons))


def list_identifiers(catalogue: MetricCatalogue) -> List[str]:
    """Return every identifier in lexicographic order."""
    return sorted(catalogue)


class Dispatcher:
    """Runs one mode against a catalogue built from ``settings``."""

    def __init__(
        self, settings: Settings, *, source: Optional[DocumentSource] = None
    ) -> None:
        self.settings = settings
        self.catalogue = build_catalogue(settings.query_handler)
        self._source = source
        self._handlers: Dict[Mode, Callable[[Optional[str]], List[str]]] = {
            Mode.DESCRIBE: lambda identifier: describe(self.catalogue, identifier),
            Mode.FETCH: self._fetch,
            Mode.PROBE: lambda _identifier: [probe().line],
            Mode.LIST: lambda _identifier: list_identifiers(self.catalogue),
        }

    def _fetch(self, identifier: Optional[str]) -> List[str]:
        if self._source is not None:
            return fetch(self.catalogue, identifier, self._source)
        from .transport import StatsClient

        lookup(self.catalogue, identifier)
        with StatsClient(self.settings) as client:
            return fetch(self.catalogue, identifier, client.fetch_document)

    def run(self, mode: Mode, identifier: Optional[str] = None) -> List[str]:
        """Return the output lines for ``mode``."""
        logger.debug("dispatch", mode=mode.value, metric=identifier)
        return self._handlers[mode](identifier)
