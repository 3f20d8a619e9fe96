# vehicles/services.py
"""Car service: create, read, update and delete cars, gathering location and
price data from the maps and pricing services on every read.
"""
from typing import List
from .clients import MapsClient, PriceClient
from .crud import CarRepository
from .exceptions import CarNotFoundException
from .schemas import Car


class CarService:

    def __init__(self, repository: CarRepository, maps_client: MapsClient, price_client: PriceClient):
        self.repository = repository
        self.maps_client = maps_client
        self.price_client = price_client

    def list(self) -> List[Car]:
        cars = self.repository.find_all()
        for car in cars:
            car.location = self.maps_client.get_address(car.location)
            car.price = self.price_client.get_price(car.id)
        return cars

    def find_by_id(self, car_id: int) -> Car:
        """Get a car with its price and address, or raise `CarNotFoundException`."""
        car = self.repository.find_by_id(car_id)
        if car is None:
            raise CarNotFoundException(car_id)
        car.price = self.price_client.get_price(car_id)
        car.location = self.maps_client.get_address(car.location)
        return car

    def save(self, car: Car) -> Car:
        """Create `car` if it has no id, otherwise update the stored car.

        Updates only touch details, condition, location and modified_at; the
        price always comes from the pricing service and is never stored.
        """
        if car.id is not None:
            stored = self.repository.find_by_id(car.id)
            if stored is None:
                raise CarNotFoundException(car.id)
            stored.details = car.details
            stored.condition = car.condition
            stored.location = car.location
            stored.modified_at = car.modified_at
            return self.repository.save(stored)

        return self.repository.save(car)

    def delete(self, car_id: int):
        car = self.repository.find_by_id(car_id)
        if car is None:
            raise CarNotFoundException(car_id)
        self.repository.delete(car)
