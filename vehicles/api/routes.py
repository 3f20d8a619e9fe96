# vehicles/api/routes.py
from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session
from typing import List
from .. import schemas
from ..clients import MapsClient, PriceClient
from ..crud import CarRepository
from ..db import get_db
from ..services import CarService

router = APIRouter()

def get_car_service(db: Session = Depends(get_db)) -> CarService:
    return CarService(CarRepository(db), MapsClient(), PriceClient())

@router.get("/health")
def health():
    return {"status": "ok"}

@router.get("/cars", response_model=List[schemas.Car])
def list_cars(service: CarService = Depends(get_car_service)):
    return service.list()


@router.get("/cars/{car_id}", response_model=schemas.Car)
def get_car(car_id: int, service: CarService = Depends(get_car_service)):
    return service.find_by_id(car_id)


@router.post("/cars", response_model=schemas.Car, status_code=201)
def create_car(payload: schemas.Car, service: CarService = Depends(get_car_service)):
    # ids are assigned by the database
    payload.id = None
    return service.save(payload)


@router.put("/cars/{car_id}", response_model=schemas.Car)
def update_car(car_id: int, payload: schemas.Car, service: CarService = Depends(get_car_service)):
    payload.id = car_id
    return service.save(payload)


@router.delete("/cars/{car_id}", status_code=204)
def delete_car(car_id: int, service: CarService = Depends(get_car_service)):
    service.delete(car_id)
    return Response(status_code=204)
