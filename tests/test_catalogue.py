import pytest

from solr_stats import (
    DEFAULT_QUERY_HANDLER,
    MetricKind,
    Section,
    UnknownMetricError,
    build_catalogue,
)
from solr_stats.catalogue import CACHES, lookup


def test_catalogue_contains_core_and_handler_metrics():
    catalogue = build_catalogue("/select")
    for identifier in (
        "index_size",
        "numdocs",
        "maxdoc",
        "query_handler_requests",
        "query_handler_errors",
        "query_handler_timeouts",
        "query_handler_total_time",
        "query_handler_avg_time_per_request",
    ):
        assert identifier in catalogue


@pytest.mark.parametrize("prefix", [prefix for _, prefix, _ in CACHES])
def test_every_cache_has_full_stat_set(prefix):
    catalogue = build_catalogue()
    for suffix in (
        "size",
        "hit_ratio",
        "lookups",
        "warmup_time",
        "cumulative_lookups",
        "hits",
        "inserts",
        "evictions",
    ):
        definition = catalogue[f"{prefix}_{suffix}"]
        assert definition.section is Section.CACHE


def test_catalogue_has_at_least_three_caches():
    catalogue = build_catalogue()
    components = {d.component_name for d in catalogue.values() if d.section is Section.CACHE}
    assert len(components) >= 3


def test_query_handler_parameterises_component_name():
    first = build_catalogue("/select")
    second = build_catalogue("/search")
    assert set(first) == set(second)
    handler_ids = [i for i, d in first.items() if d.section is Section.QUERYHANDLER]
    assert handler_ids
    for identifier in handler_ids:
        assert first[identifier].component_name == "/select"
        assert second[identifier].component_name == "/search"


@pytest.mark.parametrize("handler", ["", "   ", None])
def test_empty_handler_falls_back_to_default(handler):
    catalogue = build_catalogue(handler)
    assert catalogue["query_handler_requests"].component_name == DEFAULT_QUERY_HANDLER


def test_catalogue_is_read_only():
    catalogue = build_catalogue()
    with pytest.raises(TypeError):
        catalogue["numdocs"] = catalogue["maxdoc"]  # type: ignore[index]


def test_definitions_are_frozen():
    definition = build_catalogue()["numdocs"]
    with pytest.raises(AttributeError):
        definition.field_name = "maxDoc"  # type: ignore[misc]


def test_ratio_and_byte_predicates():
    catalogue = build_catalogue()
    assert catalogue["query_result_cache_hit_ratio"].is_ratio
    assert not catalogue["query_result_cache_hits"].is_ratio
    assert catalogue["index_size"].is_byte_sized
    assert not catalogue["numdocs"].is_byte_sized


def test_counter_kinds_render_as_derive():
    catalogue = build_catalogue()
    assert catalogue["filter_cache_evictions"].kind is MetricKind.COUNTER
    assert MetricKind.COUNTER.munin_type == "DERIVE"
    assert MetricKind.GAUGE.munin_type == "GAUGE"


def test_lookup_unknown_identifier():
    catalogue = build_catalogue()
    with pytest.raises(UnknownMetricError):
        lookup(catalogue, "no_such_metric")
    with pytest.raises(UnknownMetricError):
        lookup(catalogue, None)
