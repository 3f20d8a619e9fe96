# vehicles/schemas.py
from enum import Enum
from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

class Condition(str, Enum):
    NEW = "NEW"
    USED = "USED"

class Manufacturer(BaseModel):
    code: int
    name: str
    class Config:
        from_attributes = True

class Details(BaseModel):
    body: str = Field(..., min_length=1)
    model: str = Field(..., min_length=1)
    manufacturer: Manufacturer
    number_of_doors: Optional[int] = None
    fuel_type: Optional[str] = None
    engine: Optional[str] = None
    mileage: Optional[int] = None
    model_year: Optional[int] = None
    production_year: Optional[int] = None
    external_color: Optional[str] = None
    class Config:
        # allow model_year without clashing with pydantic's model_ prefix
        protected_namespaces = ()

class Location(BaseModel):
    lat: float
    lon: float
    # filled in by the maps service, never stored
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip: Optional[str] = None

class Car(BaseModel):
    id: Optional[int] = None
    details: Details
    condition: Condition
    location: Location
    price: Optional[str] = None
    created_at: Optional[datetime] = None
    modified_at: Optional[datetime] = None
