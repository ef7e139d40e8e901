import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["CACHE_ENABLED"] = "false"

from datetime import date  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402
from sqlmodel import Session, SQLModel, create_engine  # noqa: E402

import maventoys.models  # noqa: E402,F401
from maventoys.core import limiter  # noqa: E402
from maventoys.database import get_session  # noqa: E402
from maventoys.main import app  # noqa: E402
from maventoys.models import Category, Employee, Product, Store  # noqa: E402


@pytest.fixture(name="engine")
def engine_fixture():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture(name="session")
def session_fixture(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture(name="client")
def client_fixture(session):
    def get_session_override():
        return session

    limiter.enabled = False
    app.dependency_overrides[get_session] = get_session_override
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


@pytest.fixture
def catalog(session):
    """One store, one employee and two toys in a single category."""
    store = Store(name="Maven Toys Guadalajara 1", city="Guadalajara", location="Downtown",
                  open_date=date(2010, 5, 1))
    category = Category(name="Toys")
    session.add(store)
    session.add(category)
    session.commit()

    employee = Employee(first_name="Ana", last_name="Lopez", store_id=store.id)
    lego = Product(name="Lego Bricks", cost=6.0, price=10.0, category_id=category.id,
                   creation_date=date(2022, 1, 1))
    yoyo = Product(name="Yo-Yo", cost=2.0, price=5.0, category_id=category.id,
                   creation_date=date(2022, 1, 1))
    session.add_all([employee, lego, yoyo])
    session.commit()

    return {
        "store": store.id,
        "employee": employee.id,
        "category": category.id,
        "lego": lego.id,
        "yoyo": yoyo.id,
    }
