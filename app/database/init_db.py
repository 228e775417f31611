import logging

# Importing the initializers registers them
from app.api.store.database import StoreInitializer  # noqa: F401
from app.database.domain.registry import get_registry

logger = logging.getLogger(__name__)


def initialize_database() -> None:
    """Runs every registered domain initializer, in registration order."""
    registry = get_registry()
    logger.info(f"🚀 Initializing database ({registry.count()} domain(s))...")

    for initializer in registry.get_all():
        initializer.initialize()

    logger.info("✅ Database initialized.")


if __name__ == "__main__":
    initialize_database()
