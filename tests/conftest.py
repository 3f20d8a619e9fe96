# tests/conftest.py
import os

# must be set before vehicles.db is imported
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from vehicles import models  # noqa: F401
from vehicles.crud import seed_manufacturers
from vehicles.db import Base, engine, SessionLocal
from vehicles.schemas import Car, Condition, Details, Location, Manufacturer


class InMemoryRepository:
    """Dict-backed stand-in for CarRepository that hands out copies."""

    def __init__(self):
        self.rows = {}
        self.next_id = 1
        self.saved = []

    def find_all(self):
        return [c.model_copy(deep=True) for c in self.rows.values()]

    def find_by_id(self, car_id):
        car = self.rows.get(car_id)
        return car.model_copy(deep=True) if car else None

    def save(self, car):
        self.saved.append(car.model_copy(deep=True))
        stored = car.model_copy(deep=True)
        stored.price = None
        if stored.id is None:
            stored.id = self.next_id
            self.next_id += 1
        self.rows[stored.id] = stored
        return stored.model_copy(deep=True)

    def delete(self, car):
        del self.rows[car.id]


class FakePriceClient:
    def __init__(self):
        self.prices = {}
        self.calls = []

    def get_price(self, vehicle_id):
        self.calls.append(vehicle_id)
        return self.prices.get(vehicle_id, f"USD {vehicle_id}000.00")


class FakeMapsClient:
    def __init__(self, address="123 Main St"):
        self.address = address
        self.calls = []

    def get_address(self, location):
        self.calls.append(location)
        return location.model_copy(update={"address": self.address})


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    seed_manufacturers(session)
    yield session
    session.close()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def make_car():
    def _make_car(**overrides):
        data = dict(
            details=Details(
                body="sedan",
                model="Impala",
                manufacturer=Manufacturer(code=101, name="Chevrolet"),
                number_of_doors=4,
                fuel_type="Gasoline",
                engine="3.6L V6",
                mileage=32280,
                model_year=2018,
                production_year=2018,
                external_color="white",
            ),
            condition=Condition.USED,
            location=Location(lat=40.73061, lon=-73.935242),
        )
        data.update(overrides)
        return Car(**data)
    return _make_car


@pytest.fixture
def car(make_car):
    return make_car()


@pytest.fixture
def repo():
    return InMemoryRepository()


@pytest.fixture
def price_client():
    return FakePriceClient()


@pytest.fixture
def maps_client():
    return FakeMapsClient()
