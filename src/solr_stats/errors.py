"""Exceptions raised while describing or fetching Solr statistics."""


class SolrStatsError(Exception):
    """Base class for every failure that aborts a plugin invocation."""

    pass


class UnknownMetricError(SolrStatsError):
    """Raised when the requested identifier is not in the catalogue."""

    def __init__(self, identifier: str | None) -> None:
        self.identifier = identifier
        if identifier:
            super().__init__(f"Unknown metric: {identifier}")
        else:
            super().__init__("No metric identifier could be derived from the invocation")


class MalformedDocumentError(SolrStatsError):
    """Raised when the stats page is not well-formed XML."""

    pass


class MetricNotFoundError(SolrStatsError):
    """Raised when the document lacks the entry or stat a metric points at."""

    pass


class InvalidValueError(MetricNotFoundError):
    """Raised when a stat exists but its text is not a number."""

    pass


class UnknownUnitError(SolrStatsError, ValueError):
    """Raised when a sized quantity carries a unit other than KB, MB or GB."""

    pass


class TransportError(SolrStatsError):
    """Raised when the stats page cannot be retrieved."""

    pass
