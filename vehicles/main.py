from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from vehicles.db import Base, engine, SessionLocal
import vehicles.models  # noqa: F401 ensure models are imported so tables are known
from vehicles.api.routes import router as api_router
from vehicles.crud import seed_manufacturers
from vehicles.exceptions import CarNotFoundException
from vehicles.utils import get_logger

logger = get_logger("main")

# create FastAPI instance
app = FastAPI(title="Vehicles API")
app.include_router(api_router)


@app.exception_handler(CarNotFoundException)
def car_not_found_handler(request: Request, exc: CarNotFoundException):
    logger.info("Car %s not found (%s %s)", exc.car_id, request.method, request.url.path)
    return JSONResponse(status_code=404, content={"detail": exc.message})


@app.on_event("startup")
def on_startup_create_tables():
    # Ensure tables exist and reference data is present
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        seed_manufacturers(db)
    finally:
        db.close()
