"""Entry point — python -m esclusterstats."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="esclusterstats",
        description="Elasticsearch cluster stats plugin for monitoring agents",
    )
    parser.add_argument("--scheme", default=None, help="Scheme (default: http)")
    parser.add_argument("--host", default=None, help="Host (default: localhost)")
    parser.add_argument("--port", type=int, default=None, help="Port (default: 9200)")
    parser.add_argument(
        "--metric-key-prefix",
        default=None,
        help="Metric key prefix (default: elasticsearchclusterstats)",
    )
    parser.add_argument(
        "-c", "--config",
        help="Path to configuration YAML file",
        default=None,
    )
    parser.add_argument(
        "--graphs",
        action="store_true",
        help="Print graph definitions as JSON and exit",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    from esclusterstats.app import Application, setup_logging
    from esclusterstats.config.settings import load_config
    from esclusterstats.errors import ConfigError

    try:
        settings = load_config(args.config)
    except ConfigError as exc:
        setup_logging()
        logging.getLogger(__name__).error("%s", exc)
        return 1

    setup_logging(logging.DEBUG if args.verbose else settings.log_level)

    for flag, field in (("scheme", "scheme"), ("host", "host"), ("port", "port")):
        value = getattr(args, flag)
        if value is not None:
            setattr(settings.cluster, field, value)
    if args.metric_key_prefix is not None:
        settings.metric_key_prefix = args.metric_key_prefix

    app = Application(settings=settings)
    if args.graphs:
        return app.print_graphs()
    return asyncio.run(app.run())


if __name__ == "__main__":
    sys.exit(main())
