from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterator

import pytest

# Ensure the src directory and the root CLI module are importable when
# solr-stats isn't installed
_root = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(_root / "src"))
sys.path.insert(0, str(_root))

from solr_stats.config.loader import load_settings  # noqa: E402

STATS_XML = """<?xml version="1.0" encoding="UTF-8"?>
<?xml-stylesheet type="text/xsl" href="stats.xsl"?>
<solr>
  <core>collection1</core>
  <schema>example</schema>
  <host>solr01</host>
  <solr-info>
    <CORE>
      <entry>
        <name>
          searcher
        </name>
        <class>org.apache.solr.search.SolrIndexSearcher</class>
        <stats>
          <stat name="numDocs">
            1234
          </stat>
          <stat name="maxDoc">
            1300
          </stat>
          <stat name="deletedDocs">
            66
          </stat>
          <stat name="indexSize">
            12.5 MB
          </stat>
        </stats>
      </entry>
    </CORE>
    <QUERYHANDLER>
      <entry>
        <name>
          /update
        </name>
        <stats>
          <stat name="requests">
            7
          </stat>
        </stats>
      </entry>
      <entry>
        <name>
          org.apache.solr.handler.component.SearchHandler/select
        </name>
        <stats>
          <stat name="requests">
            4711
          </stat>
          <stat name="errors">
            3
          </stat>
          <stat name="timeouts">
            0
          </stat>
          <stat name="totalTime">
            98765
          </stat>
          <stat name="avgTimePerRequest">
            20.96
          </stat>
          <stat name="avgRequestsPerSecond">
            0.5
          </stat>
        </stats>
      </entry>
    </QUERYHANDLER>
    <CACHE>
      <entry>
        <name>
          queryResultCache
        </name>
        <stats>
          <stat name="lookups">
            200
          </stat>
          <stat name="hitratio">
            0.85
          </stat>
          <stat name="size">
            512
          </stat>
          <stat name="warmupTime">
            14
          </stat>
          <stat name="cumulative_lookups">
            9000
          </stat>
          <stat name="cumulative_hits">
            7650
          </stat>
          <stat name="cumulative_inserts">
            1350
          </stat>
          <stat name="cumulative_evictions">
            12
          </stat>
        </stats>
      </entry>
      <entry>
        <name>
          fieldValueCache
        </name>
        <stats>
          <stat name="hitratio">
            NaN
          </stat>
        </stats>
      </entry>
    </CACHE>
  </solr-info>
</solr>
"""

SOLR_ENV_KEYS = (
    "scheme",
    "host",
    "port",
    "path",
    "query_handler",
    "metric",
    "log_level",
    "log_json",
)


@pytest.fixture
def stats_xml() -> str:
    return STATS_XML


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for key in SOLR_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    load_settings.cache_clear()
    yield
    load_settings.cache_clear()
