# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Run the loyalty service: ``python -m loyalty -a host:port -d DATABASE_URI``."""

from __future__ import annotations

import argparse
import signal
import sys
import threading

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.serving import make_server

from loyalty.app import create_app
from loyalty.infrastructure.container import Container
from loyalty.infrastructure.health import check_database
from loyalty.shared.config import AppConfig
from loyalty.shared.logging import logger


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="loyalty", description="Loyalty points service")
    parser.add_argument("-a", dest="run_address", help="listen address (RUN_ADDRESS)")
    parser.add_argument("-d", dest="database_uri", help="database URI (DATABASE_URI)")
    parser.add_argument(
        "-r", dest="accrual_address", help="accrual system address (ACCRUAL_SYSTEM_ADDRESS)"
    )
    return parser.parse_args(argv)


def load_runtime_config(argv: list[str]) -> AppConfig:
    """Environment and defaults first, command line flags on top."""
    args = _parse_args(argv)
    config = AppConfig()
    if args.run_address is not None:
        config.run_address = args.run_address
    if args.database_uri is not None:
        config.database = config.database.model_copy(update={"url": args.database_uri})
    if args.accrual_address is not None:
        config.accrual_system_address = args.accrual_address
    config.validate_startup()
    return config


def split_address(address: str) -> tuple[str, int]:
    host, _, port = address.rpartition(":")
    if not port.isdigit():
        raise ValueError(f"invalid run address {address!r}: expected host:port")
    host = host.removeprefix("[").removesuffix("]")
    return host or "0.0.0.0", int(port)


def main(argv: list[str] | None = None) -> int:
    try:
        config = load_runtime_config(sys.argv[1:] if argv is None else argv)
        host, port = split_address(config.run_address)
    except (ValidationError, ValueError) as exc:
        print(exc, file=sys.stderr)
        return 2

    container = Container(config)
    try:
        app = create_app(container=container)
        check_database(container.engine)
    except SQLAlchemyError as exc:
        logger.error(f"startup: database unavailable {type(exc).__name__}: {exc}")
        return 1

    server = make_server(host, port, app, threaded=True)

    def _shutdown(signum, _frame) -> None:
        logger.info(f"shutdown requested (signal {signum})")
        threading.Thread(target=server.shutdown, daemon=True).start()

    signal.signal(signal.SIGINT, _shutdown)
    signal.signal(signal.SIGTERM, _shutdown)

    logger.info(f"http server starting on {host}:{port}")
    try:
        server.serve_forever()
    finally:
        server.server_close()
        container.engine.dispose()
        logger.info("shutdown complete")
    return 0


if __name__ == "__main__":
    sys.exit(main())
