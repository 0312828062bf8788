"""Process-lifetime handle on the relational store."""

import json
import threading
from contextlib import contextmanager
from typing import Any, Dict, Generator, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import (
    ArgumentError,
    DisconnectionError,
    InterfaceError,
    NoSuchModuleError,
    OperationalError,
)
from sqlalchemy.exc import TimeoutError as PoolTimeoutError
from sqlalchemy.orm import Session, sessionmaker

from ..errors import ConnectivityError
from ..utils.logging import get_logger

logger = get_logger(__name__)

# Driver-level failures meaning "the store cannot be reached right now"
CONNECTIVITY_ERRORS = (
    OperationalError,
    InterfaceError,
    DisconnectionError,
    PoolTimeoutError,
)


def _json_serializer(value: Any) -> str:
    # Store non-ASCII text unescaped
    return json.dumps(value, ensure_ascii=False)


class StoreHandle:
    """
    Lazily-created engine and session factory for one database URL.

    Construct once at process start and pass it to whatever needs the store.
    The engine is built on first use and then shared by every request until
    `dispose()`; it is never recreated implicitly.
    """

    def __init__(
        self,
        database_url: Optional[str],
        *,
        echo: bool = False,
        engine_options: Optional[Dict[str, Any]] = None,
    ):
        self.database_url = database_url
        self.echo = echo
        self._engine_options = dict(engine_options or {})
        self._engine: Optional[Engine] = None
        self._sessionmaker: Optional[sessionmaker] = None
        self._disposed = False
        self._lock = threading.Lock()

    @property
    def is_initialized(self) -> bool:
        return self._engine is not None

    @property
    def is_configured(self) -> bool:
        return bool(self.database_url)

    @property
    def engine(self) -> Engine:
        """The shared engine, created on first access."""
        if self._engine is not None:
            return self._engine
        with self._lock:
            self._initialize()
            return self._engine

    @property
    def session_factory(self) -> sessionmaker:
        factory = self._sessionmaker
        if factory is not None:
            return factory
        with self._lock:
            self._initialize()
            return self._sessionmaker

    def _initialize(self) -> None:
        """Create engine and session factory; caller holds the lock."""
        if self._engine is not None:
            return
        engine = self._create_engine()
        # Publish the factory before the engine; the fast paths skip the lock
        self._sessionmaker = sessionmaker(bind=engine, autoflush=False, autocommit=False)
        self._engine = engine

    def _create_engine(self) -> Engine:
        if self._disposed:
            raise ConnectivityError("Store handle has been disposed")
        if not self.database_url:
            raise ConnectivityError("DATABASE_URL environment variable is required")
        try:
            engine = create_engine(
                self.database_url,
                echo=self.echo,
                future=True,
                json_serializer=_json_serializer,
                **self._engine_options,
            )
        except (ArgumentError, NoSuchModuleError, ImportError) as exc:
            raise ConnectivityError(f"Unusable database URL: {exc}") from exc
        logger.debug("Created store engine for %s", engine.url.render_as_string(hide_password=True))
        return engine

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """
        Context manager for SQLAlchemy sessions.

        Connectivity failures raised inside the block surface as
        ConnectivityError. The session is rolled back on error and always
        closed; committing is left to the caller.
        """
        session = self.session_factory()
        try:
            yield session
        except CONNECTIVITY_ERRORS as exc:
            session.rollback()
            raise ConnectivityError(f"Store unavailable: {exc}") from exc
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def dispose(self) -> None:
        """End the handle's lifetime and release pooled connections."""
        with self._lock:
            if self._engine is not None:
                self._engine.dispose()
            self._engine = None
            self._sessionmaker = None
            self._disposed = True
