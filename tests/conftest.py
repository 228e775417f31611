import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.api.store.database.initializer import StoreInitializer
from app.database.db_connection import create_store_engine, get_db
from app.main import app


@pytest.fixture
def engine():
    # one shared in-memory database per test
    test_engine = create_store_engine("sqlite://", poolclass=StaticPool)
    yield test_engine
    test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    StoreInitializer(engine=engine, session_factory=factory, seed=True).initialize()
    return factory


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
