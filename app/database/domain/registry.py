"""
Registry of domain initializers.
"""
from typing import List, Dict, Optional
import logging

from .base import DomainInitializer

logger = logging.getLogger(__name__)


class DomainRegistry:
    """
    Central registry of domain initializers, kept in registration order.
    """

    def __init__(self):
        self._initializers: Dict[str, DomainInitializer] = {}

    def register(self, initializer: DomainInitializer) -> None:
        domain_name = initializer.get_domain_name()

        if domain_name in self._initializers:
            logger.warning(f"⚠️ Domain '{domain_name}' already registered. Replacing...")

        self._initializers[domain_name] = initializer
        logger.debug(f"📝 Domain '{domain_name}' registered")

    def get(self, domain_name: str) -> Optional[DomainInitializer]:
        return self._initializers.get(domain_name)

    def get_all(self) -> List[DomainInitializer]:
        return list(self._initializers.values())

    def clear(self) -> None:
        """Empties the registry (useful for tests)."""
        self._initializers.clear()

    def count(self) -> int:
        return len(self._initializers)


# Global registry instance
_registry = DomainRegistry()


def register_domain(initializer: DomainInitializer) -> None:
    _registry.register(initializer)


def get_registry() -> DomainRegistry:
    return _registry
