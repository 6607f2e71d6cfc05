from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace

from .core.errors import RegistryLoadError
from .runtime.config import ServiceConfig
from .runtime.log import configure_logging, parse_log_level
from .runtime.server import serve

logger = logging.getLogger("ouiserve")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ouiserve", description="ouiserve: OUI vendor lookup service")
    p.add_argument("--source", help="Path to the IEEE oui.txt registry file (env: OUISERVE_SOURCE)")
    p.add_argument("--host", help="Bind host (env: OUISERVE_HOST)")
    p.add_argument("--port", type=int, help="Bind port (env: OUISERVE_PORT)")
    p.add_argument("--log-level", help="Log level (env: OUISERVE_LOG_LEVEL)")
    p.add_argument("--no-access-log", action="store_true", help="Disable the per-request access log")
    return p


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    try:
        cfg = ServiceConfig.from_env()
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        raise SystemExit(2)

    overrides: dict[str, object] = {}
    if args.source:
        overrides["source"] = args.source
    if args.host:
        overrides["host"] = args.host
    if args.port is not None:
        overrides["port"] = args.port
    if args.no_access_log:
        overrides["access_log"] = False

    try:
        if args.log_level:
            overrides["log_level"] = parse_log_level(args.log_level)
        cfg = replace(cfg, **overrides)
        configure_logging(cfg.log_level)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        raise SystemExit(2)

    try:
        serve(cfg)
    except RegistryLoadError as e:
        logger.error("%s", e)
        raise SystemExit(1)
    except KeyboardInterrupt:
        raise SystemExit(0)


if __name__ == "__main__":
    main()
