# app/database/db_connection.py

import logging
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base
from ..config.settings import DB_CONFIG, DB_SSL_MODE, DATABASE_URL

# Single Base for every model
Base = declarative_base()

logger = logging.getLogger(__name__)


def build_connection_string() -> str:
    """
    PostgreSQL when every DB_* variable is set, otherwise DATABASE_URL.
    """
    missing = [k for k in ('database', 'user', 'password', 'host', 'port') if not DB_CONFIG.get(k)]
    if missing:
        return DATABASE_URL

    ssl_query = f"?sslmode={DB_SSL_MODE}" if DB_SSL_MODE else ""
    return (
        f"postgresql://{DB_CONFIG['user']}:{DB_CONFIG['password']}"
        f"@{DB_CONFIG['host']}:{DB_CONFIG['port']}/{DB_CONFIG['database']}{ssl_query}"
    )


def create_store_engine(url: str, **kwargs) -> Engine:
    """Creates an engine; SQLite connections get foreign keys enforced."""
    if url.startswith("sqlite"):
        connect_args = kwargs.pop("connect_args", {})
        connect_args.setdefault("check_same_thread", False)
        new_engine = create_engine(url, connect_args=connect_args, **kwargs)

        @event.listens_for(new_engine, "connect")
        def _enable_sqlite_fks(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys = ON;")
            cursor.close()

        return new_engine

    return create_engine(url, pool_pre_ping=True, **kwargs)


engine = create_store_engine(build_connection_string())

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)


# Dependency for FastAPI
def get_db():
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
