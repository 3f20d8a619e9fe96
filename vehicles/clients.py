# vehicles/clients.py
"""HTTP clients for the pricing and maps services.

Both clients make one request per call and fall back to a harmless value
when the remote service cannot answer.
"""
import os
import requests
from dotenv import load_dotenv
from .schemas import Location
from .utils import get_logger

load_dotenv()
PRICING_URL = os.getenv("PRICING_URL", "http://localhost:8082")
MAPS_URL = os.getenv("MAPS_URL", "http://localhost:9191")
CLIENT_TIMEOUT = float(os.getenv("CLIENT_TIMEOUT", "10"))

logger = get_logger("clients")

PRICE_UNAVAILABLE = "(consult price)"


class PriceClient:

    def __init__(self, base_url: str = PRICING_URL, timeout: float = CLIENT_TIMEOUT):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def get_price(self, vehicle_id: int) -> str:
        """Return the price of a vehicle formatted as "<currency> <price>".

        Falls back to ``PRICE_UNAVAILABLE`` if the pricing service fails.
        """
        try:
            r = requests.get(
                f"{self.base_url}/services/price",
                params={"vehicleId": vehicle_id},
                timeout=self.timeout
            )
            r.raise_for_status()
            data = r.json()
            return f"{data['currency']} {data['price']}"
        except (requests.RequestException, ValueError, KeyError, TypeError) as e:
            logger.error("Unexpected error retrieving price for vehicle %s: %s", vehicle_id, e)
        return PRICE_UNAVAILABLE


class MapsClient:

    def __init__(self, base_url: str = MAPS_URL, timeout: float = CLIENT_TIMEOUT):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def get_address(self, location: Location) -> Location:
        """Return a copy of `location` with its address resolved.

        The input is returned unchanged if the maps service is unavailable.
        """
        try:
            r = requests.get(
                f"{self.base_url}/maps",
                params={"lat": location.lat, "lon": location.lon},
                timeout=self.timeout
            )
            r.raise_for_status()
            data = r.json()
            return location.model_copy(update={
                "address": data.get("address"),
                "city": data.get("city"),
                "state": data.get("state"),
                "zip": data.get("zip"),
            })
        except (requests.RequestException, ValueError, AttributeError) as e:
            logger.warning("Map service is down: %s", e)
        return location
