from app.api.store.database.initializer import StoreInitializer

__all__ = ["StoreInitializer"]
