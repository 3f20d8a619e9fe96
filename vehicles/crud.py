# vehicles/crud.py
"""Persistence for `Car` entities.

`CarRepository` wraps one SQLAlchemy session and converts between ORM rows
and the `schemas.Car` records the service works with, so callers never hold
on to session-bound objects.
"""
from datetime import datetime, timezone
from sqlalchemy import select
from sqlalchemy.orm import Session
from typing import List, Optional
from . import models, schemas
from .utils import get_logger

logger = get_logger("crud")

DEFAULT_MANUFACTURERS = {
    100: "Audi",
    101: "Chevrolet",
    102: "Ford",
    103: "BMW",
    104: "Dodge",
}

def seed_manufacturers(db: Session):
    existing = set(db.scalars(select(models.Manufacturer.code)).all())
    missing = [models.Manufacturer(code=code, name=name)
               for code, name in DEFAULT_MANUFACTURERS.items() if code not in existing]
    if missing:
        db.add_all(missing)
        db.commit()
        logger.info("Seeded %d manufacturers", len(missing))

def to_schema(obj: models.Car) -> schemas.Car:
    return schemas.Car(
        id=obj.id,
        condition=obj.condition,
        details=schemas.Details(
            body=obj.body,
            model=obj.model,
            manufacturer=schemas.Manufacturer.model_validate(obj.manufacturer),
            number_of_doors=obj.number_of_doors,
            fuel_type=obj.fuel_type,
            engine=obj.engine,
            mileage=obj.mileage,
            model_year=obj.model_year,
            production_year=obj.production_year,
            external_color=obj.external_color,
        ),
        location=schemas.Location(lat=obj.lat, lon=obj.lon),
        created_at=obj.created_at,
        modified_at=obj.modified_at,
    )


class CarRepository:

    def __init__(self, db: Session):
        self.db = db

    def find_all(self) -> List[schemas.Car]:
        rows = self.db.scalars(select(models.Car).order_by(models.Car.id)).all()
        return [to_schema(r) for r in rows]

    def find_by_id(self, car_id: int) -> Optional[schemas.Car]:
        obj = self.db.get(models.Car, car_id)
        if obj is None:
            return None
        return to_schema(obj)

    def save(self, car: schemas.Car) -> schemas.Car:
        """Insert `car` when it has no id, otherwise update its row in place."""
        if car.id is None:
            obj = models.Car()
            self.db.add(obj)
        else:
            obj = self.db.get(models.Car, car.id)
            if obj is None:
                raise ValueError(f"car {car.id} is not persisted")
        self._apply(obj, car)
        self.db.commit()
        self.db.refresh(obj)
        logger.info("Saved car %s", obj.id)
        return to_schema(obj)

    def delete(self, car: schemas.Car):
        obj = self.db.get(models.Car, car.id)
        if obj is None:
            return
        self.db.delete(obj)
        self.db.commit()
        logger.info("Deleted car %s", car.id)

    def _apply(self, obj: models.Car, car: schemas.Car):
        details = car.details
        obj.condition = car.condition.value
        obj.body = details.body
        obj.model = details.model
        obj.manufacturer = self._manufacturer(details.manufacturer)
        obj.number_of_doors = details.number_of_doors
        obj.fuel_type = details.fuel_type
        obj.engine = details.engine
        obj.mileage = details.mileage
        obj.model_year = details.model_year
        obj.production_year = details.production_year
        obj.external_color = details.external_color
        obj.lat = car.location.lat
        obj.lon = car.location.lon
        obj.modified_at = car.modified_at or datetime.now(timezone.utc)

    def _manufacturer(self, manufacturer: schemas.Manufacturer) -> models.Manufacturer:
        obj = self.db.get(models.Manufacturer, manufacturer.code)
        if obj is None:
            # unknown codes are registered on first use
            obj = models.Manufacturer(code=manufacturer.code, name=manufacturer.name)
            self.db.add(obj)
        return obj
