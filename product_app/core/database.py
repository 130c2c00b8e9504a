"""
Conexión a base de datos PostgreSQL

SQLAlchemy se usa sólo como pool de conexiones; las queries se escriben
en SQL directo con psycopg2 (RealDictCursor).

The pool is created once at startup and handed to the repositories,
nothing in the application reaches for it as a module global.
"""
import logging
from contextlib import contextmanager

import psycopg2
from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError

from .config import Settings

logger = logging.getLogger(__name__)

# Errors raised while acquiring a connection (SQLAlchemy wraps them)
# or while executing a statement (psycopg2)
DATABASE_ERRORS = (psycopg2.Error, SQLAlchemyError)


class DatabasePool:
    """
    Process-scoped pool of PostgreSQL connections

    Connections are acquired per statement through connection() and
    returned to the pool when the block exits.
    """

    def __init__(self, engine):
        self._engine = engine

    @classmethod
    def from_settings(cls, settings: Settings) -> "DatabasePool":
        """
        Build the pool from application settings

        - DB_MAX_CONNECTIONS bounds the number of open connections
        - DB_MAX_CONNECTION_IDLE_TIME recycles connections older than N seconds
        """
        engine = create_engine(
            settings.get_database_url(),
            pool_size=settings.DB_MAX_CONNECTIONS,
            max_overflow=0,  # hard upper bound
            pool_recycle=settings.DB_MAX_CONNECTION_IDLE_TIME,
            pool_pre_ping=True,  # Verificar conexión antes de usar
        )
        logger.info(
            f"Database pool created (max_connections={settings.DB_MAX_CONNECTIONS}, "
            f"idle_time={settings.DB_MAX_CONNECTION_IDLE_TIME}s)"
        )
        return cls(engine)

    @contextmanager
    def connection(self):
        """
        Context manager yielding a raw psycopg2 connection from the pool

        Commits when the block succeeds, rolls back when it raises.

        Example:
            with pool.connection() as conn:
                with conn.cursor(cursor_factory=RealDictCursor) as cursor:
                    cursor.execute("SELECT * FROM products")
                    rows = cursor.fetchall()
        """
        conn = self._engine.raw_connection()
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            # Returns the connection to the pool
            conn.close()

    def ping(self) -> None:
        """Run SELECT 1 against the database, raising on failure"""
        with self.connection() as conn:
            with conn.cursor() as cursor:
                cursor.execute("SELECT 1")
                cursor.fetchone()

    def close(self) -> None:
        """Close every pooled connection"""
        self._engine.dispose()
        logger.info("Database pool closed")
