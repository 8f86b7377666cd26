"""Lookup of a single stat inside the ``admin/stats.jsp`` XML document.

The document Solr serves looks like::

    <solr>
      <solr-info>
        <CORE>
          <entry>
            <name>searcher</name>
            <stats>
              <stat name="numDocs">1234</stat>
            </stats>
          </entry>
        </CORE>
        <QUERYHANDLER>...</QUERYHANDLER>
        <CACHE>...</CACHE>
      </solr-info>
    </solr>
"""

from __future__ import annotations

import xml.etree.ElementTree as StdElementTree
from typing import Iterator
from xml.etree.ElementTree import Element

import structlog
from defusedxml import DefusedXmlException, ElementTree

from .catalogue import MetricDefinition
from .errors import MalformedDocumentError, MetricNotFoundError

logger = structlog.get_logger(__name__)


def parse_document(document: str | bytes) -> Element:
    """Parse ``document`` or raise :class:`MalformedDocumentError`."""
    try:
        return ElementTree.fromstring(document)
    except (StdElementTree.ParseError, DefusedXmlException) as exc:
        raise MalformedDocumentError(f"Stats document is not well-formed XML: {exc}") from exc


def _component_matches(name: str, component_name: str, exact: bool) -> bool:
    if exact:
        return name == component_name
    return component_name in name


def iter_entries(
    root: Element, section: str, component_name: str, *, exact: bool = False
) -> Iterator[Element]:
    """Yield the ``entry`` elements of ``section`` whose name matches.

    By default an entry matches when ``component_name`` is a substring of its
    ``<name>`` text, so ``/select`` also finds ``org.apache.solr.handler./select``
    style names. Pass ``exact=True`` to require equality.
    """
    sections = [root] if root.tag == section else root.iterfind(f".//{section}")
    for section_node in sections:
        for entry in section_node.iterfind("entry"):
            name = (entry.findtext("name") or "").strip()
            if _component_matches(name, component_name, exact):
                yield entry


def find_stat(
    root: Element,
    section: str,
    component_name: str,
    field_name: str,
    *,
    exact: bool = False,
) -> str:
    """Return the stripped text of the first matching stat."""
    for entry in iter_entries(root, section, component_name, exact=exact):
        for stat in entry.iterfind("stats/stat"):
            if stat.get("name") == field_name:
                return (stat.text or "").strip()
    raise MetricNotFoundError(
        f"No stat {field_name!r} for component {component_name!r} in section {section}"
    )


def extract(document: str | bytes, definition: MetricDefinition, *, exact: bool = False) -> str:
    """Return the raw text value ``definition`` points at in ``document``."""
    root = parse_document(document)
    value = find_stat(
        root,
        definition.section.value,
        definition.component_name,
        definition.field_name,
        exact=exact,
    )
    logger.debug(
        "stat_extracted",
        metric=definition.identifier,
        section=definition.section.value,
        component=definition.component_name,
        value=value,
    )
    return value
