#!/usr/bin/env python3
# ruff: noqa: E402
import argparse
import sys
from pathlib import Path

# Ensure local package import when run directly without installation
_src_path = Path(__file__).resolve().parent / "src"
if _src_path.exists() and str(_src_path) not in sys.path:
    sys.path.insert(0, str(_src_path))

import structlog

from solr_stats.config.loader import load_settings
from solr_stats.dispatcher import MODE_ALIASES, Dispatcher, parse_mode
from solr_stats.errors import SolrStatsError
from solr_stats.invocation import resolve_identifier
from solr_stats.logging_utils import configure_logging

logger = structlog.get_logger("solr_stats_cli")


def _build_parser(prog: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=prog,
        description=(
            "Munin plugin for Solr statistics. Symlink it as "
            "solr_<metric> to graph one metric."
        ),
    )
    parser.add_argument(
        "mode",
        nargs="?",
        choices=sorted(MODE_ALIASES),
        default=None,
        help="config, autoconf, suggest or fetch (default)",
    )
    return parser


def main(argv: list[str] | None = None, prog: str | None = None) -> None:
    """Entry point for the ``solr_`` console script."""
    program = prog if prog is not None else sys.argv[0]
    parser = _build_parser(Path(program).name or "solr_")
    args = parser.parse_args(argv)

    configure_logging()
    settings = load_settings()

    mode = parse_mode(args.mode)
    identifier = resolve_identifier(program, settings.metric)
    try:
        lines = Dispatcher(settings).run(mode, identifier)
    except SolrStatsError as exc:
        logger.error("invocation_failed", mode=mode.value, metric=identifier, error=str(exc))
        print(f"ERROR: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    for line in lines:
        print(line)


if __name__ == "__main__":
    main()
