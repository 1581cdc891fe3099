from __future__ import annotations

import argparse
import logging
from dataclasses import replace

import uvicorn

from order_desk.adapters.inbound.console import run_console
from order_desk.bootstrap import build_usecases
from order_desk.config import Settings, configure_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="order-desk", description="In-memory order desk.")
    p.add_argument("--log-level", default=None, help="Override ORDER_DESK_LOG_LEVEL.")

    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("console", help="Interactive order menu on stdin/stdout.")

    serve = sub.add_parser("serve", help="Serve the HTTP API with uvicorn.")
    serve.add_argument("--host", default=None, help="Override ORDER_DESK_HOST.")
    serve.add_argument("--port", type=int, default=None, help="Override ORDER_DESK_PORT.")

    return p


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = Settings.from_env()
    if args.log_level:
        settings = replace(settings, log_level=args.log_level.upper())
    configure_logging(settings.log_level)

    if args.cmd == "console":
        return run_console(build_usecases(settings))

    host = args.host or settings.host
    port = args.port if args.port is not None else settings.port
    logger.info("serving on %s:%d", host, port)
    uvicorn.run(
        "order_desk.asgi:create_asgi_app",
        factory=True,
        host=host,
        port=port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
