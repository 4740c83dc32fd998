# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from loyalty.shared.config import DatabaseConfig
from loyalty.shared.logging import logger


class Base(DeclarativeBase):
    pass


def create_db_engine(config: DatabaseConfig) -> Engine:
    backend = make_url(config.url).get_backend_name()
    kwargs: dict[str, Any] = {"echo": False, "future": True, "pool_pre_ping": True}

    if backend == "sqlite":
        # the busy timeout bounds how long a statement waits on a locked database
        kwargs["connect_args"] = {
            "check_same_thread": False,
            "timeout": config.statement_timeout,
        }
    else:
        kwargs.update(
            pool_size=config.pool_size,
            max_overflow=config.max_overflow,
            pool_timeout=config.pool_timeout,
        )
        if backend == "postgresql":
            timeout_ms = int(config.statement_timeout * 1000)
            kwargs["connect_args"] = {"options": f"-c statement_timeout={timeout_ms}"}

    return create_engine(config.url, **kwargs)


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)


def init_db(engine: Engine) -> None:
    from loyalty.infrastructure.db import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.info("Database schema ensured")
