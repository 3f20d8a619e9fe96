# vehicles/models.py
"""SQLAlchemy ORM models for persisted entities.

Defines `Manufacturer` reference data and the `Car` table. Address fields
and price are resolved by external services at read time and have no
columns here.
"""
from sqlalchemy import Column, Integer, Text, Float, DateTime, Enum, ForeignKey, func
from sqlalchemy.orm import relationship
from .db import Base

class Manufacturer(Base):
    __tablename__ = "manufacturers"
    code = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(Text, nullable=False)

class Car(Base):
    __tablename__ = "cars"
    id = Column(Integer, primary_key=True, index=True)
    condition = Column(Enum("NEW", "USED", name="car_condition"), nullable=False)
    body = Column(Text, nullable=False)
    model = Column(Text, nullable=False)
    manufacturer_code = Column(Integer, ForeignKey("manufacturers.code"), nullable=False)
    number_of_doors = Column(Integer)
    fuel_type = Column(Text)
    engine = Column(Text)
    mileage = Column(Integer)
    model_year = Column(Integer)
    production_year = Column(Integer)
    external_color = Column(Text)
    lat = Column(Float, nullable=False)
    lon = Column(Float, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    modified_at = Column(DateTime(timezone=True))

    manufacturer = relationship(Manufacturer, lazy="joined")
