# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import DeclarativeBase, Session, scoped_session, sessionmaker

from todolist.shared.config import load_config
from todolist.shared.config.settings import DatabaseConfig
from todolist.shared.logging import logger


class Base(DeclarativeBase):
    pass


def build_engine(config: DatabaseConfig) -> Engine:
    url = make_url(config.url)
    if url.get_backend_name() == "sqlite":
        # pool sizing does not apply to sqlite's file or in-memory pools
        return create_engine(
            url,
            connect_args={"check_same_thread": False, "timeout": config.pool_timeout},
        )
    return create_engine(
        url,
        pool_pre_ping=True,
        pool_size=config.pool_size,
        max_overflow=config.max_overflow,
        pool_timeout=config.pool_timeout,
    )


ENGINE: Engine = build_engine(load_config().database)

SessionLocal = scoped_session(
    sessionmaker(bind=ENGINE, autoflush=False, expire_on_commit=False)
)


@contextmanager
def session_scope() -> Iterator[Session]:
    """One unit of work: commit on success, roll back on any error."""
    session = SessionLocal()
    try:
        yield session
        session.commit()
    except Exception as exc:
        session.rollback()
        logger.warning(f"db.session: rolled back ({type(exc).__name__})")
        raise
    finally:
        SessionLocal.remove()


def init_db() -> None:
    Base.metadata.create_all(bind=ENGINE)
    logger.info(f"db: schema ready on {ENGINE.url.render_as_string(hide_password=True)}")


__all__ = ["ENGINE", "Base", "SessionLocal", "build_engine", "init_db", "session_scope"]
