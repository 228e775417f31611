"""
Abstract base class for domain initializers.
"""
from abc import ABC, abstractmethod
from typing import List, Optional
import logging

from sqlalchemy import Table
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

logger = logging.getLogger(__name__)


class DomainInitializer(ABC):
    """
    Base class for domain initializers.

    Each domain subclasses it, naming its tables and, optionally, the seed
    data. The engine and session factory default to the application ones
    and can be swapped (tests run against an in-memory database).
    """

    def __init__(self, engine: Optional[Engine] = None, session_factory: Optional[sessionmaker] = None):
        self._engine = engine
        self._session_factory = session_factory

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            from app.database.db_connection import engine
            self._engine = engine
        return self._engine

    @property
    def session_factory(self) -> sessionmaker:
        if self._session_factory is None:
            self._session_factory = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)
        return self._session_factory

    @abstractmethod
    def get_domain_name(self) -> str:
        """Name of the domain, used in logs and as registry key."""

    @abstractmethod
    def get_tables(self) -> List[Table]:
        """Tables owned by the domain."""

    def initialize_tables(self) -> None:
        """
        Creates the domain tables (checkfirst), in dependency order.
        """
        from app.database.db_connection import Base

        owned = {t.name for t in self.get_tables()}
        tables_to_create = [t for t in Base.metadata.sorted_tables if t.name in owned]

        if not tables_to_create:
            logger.warning(f"⚠️ No tables found for domain '{self.get_domain_name()}'. Check that its models are imported.")
            return

        logger.info(f"📋 Creating {len(tables_to_create)} table(s) of domain {self.get_domain_name()}...")
        for table in tables_to_create:
            table.create(self.engine, checkfirst=True)
            logger.info(f"  ✅ Table {table.name} created/verified")

    def initialize_data(self) -> None:
        """
        Seeds initial data (optional). Default: nothing.
        """

    def validate(self) -> bool:
        return True

    def initialize(self) -> None:
        """
        Entry point called by the database initialization.
        """
        logger.info(f"🏗️ Initializing domain {self.get_domain_name()}...")

        try:
            self.initialize_tables()
            self.initialize_data()

            if self.validate():
                logger.info(f"✅ Domain {self.get_domain_name()} initialized.")
            else:
                logger.warning(f"⚠️ Domain {self.get_domain_name()} initialized, but validation failed.")
        except Exception as e:
            logger.error(f"❌ Error initializing domain {self.get_domain_name()}: {e}", exc_info=True)
            raise
