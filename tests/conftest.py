"""
Shared test fixtures: throwaway SQLite database, test client, default config,
request builder.
"""

import os
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# Point settings at the test database before importing app modules
os.environ["DATABASE_URL"] = "sqlite:///./test.db"

from pouchquote.database import Base, get_db
from pouchquote.defaults import DEFAULT_DIGITAL_CONFIG
from pouchquote.main import app
from pouchquote.schemas import DigitalCalcRequest, Dimensions, MaterialLayer


TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(autouse=True)
def setup_database():
    """Create all tables before each test, drop after."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client():
    """FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def db():
    """Direct database session for test setup/assertions."""
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def config():
    """Shipped default operator config."""
    return DEFAULT_DIGITAL_CONFIG


def layer(name="PET 12μ", square_price=10.0, layer_type="print", material_id=None):
    return MaterialLayer(
        id=f"layer-{name}",
        layer_type=layer_type,
        material_id=name if material_id is None else material_id,
        square_price=square_price,
        name=name,
    )


def build_request(**overrides):
    """A 100 x 150 mm three-side pouch, 30000 pcs, one 10 CNY/m² layer, no extras."""
    fields = {
        "bag_type_id": "threeSide",
        "dimensions": Dimensions(width=100, height=150),
        "quantity": 30000,
        "sku_count": 1,
        "tax_rate": 13,
        "exchange_rate": 7.2,
        "material_layers": [layer()],
    }
    fields.update(overrides)
    return DigitalCalcRequest(**fields)


@pytest.fixture
def make_request():
    """Request builder; keyword overrides replace top-level request fields."""
    return build_request
