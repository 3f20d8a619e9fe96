# vehicles/exceptions.py
"""Domain exceptions for the vehicles service."""
from typing import Optional


class CarNotFoundException(Exception):
    """Raised when no car with the requested id exists."""
    def __init__(self, car_id: Optional[int] = None, message: Optional[str] = None):
        self.car_id = car_id
        self.message = message or "Car not found"
        super().__init__(self.message)
