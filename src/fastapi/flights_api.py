import logging
from typing import List, Optional

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from src.flight_routes.application import FlightRoutes
from src.flight_routes.config import Config
from src.flight_routes.exceptions import FlightValidationError, RepositoryError
from src.flight_routes.schemas.flight import FlightDraft

# Configure logging for console output
logging.basicConfig(
    level=Config.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

flight_routes = FlightRoutes(db_path=Config.DB_PATH)

app = FastAPI(title="Flight Routes API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=Config.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


# --- Pydantic Schemas (The JSON Contract) ---


class FlightRequest(BaseModel):
    # Nullable on purpose: FlightService reports missing fields as a 400
    source: Optional[str] = None
    destination: Optional[str] = None
    price: Optional[int] = None

    def to_draft(self) -> FlightDraft:
        return FlightDraft(
            source=self.source,
            destination=self.destination,
            price=self.price,
        )


class FlightSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)  # Allows reading from dataclasses

    id: int
    source: str
    destination: str
    price: int


class RouteRequest(BaseModel):
    origin: str
    destination: str
    maxFlights: Optional[int] = Field(default=None, ge=0)  # None = no limit


class RouteSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    cities: List[str]
    total_price: int = Field(serialization_alias="totalPrice")


# --- Error Handlers ---


@app.exception_handler(FlightValidationError)
async def flight_validation_error_handler(request: Request, exc: FlightValidationError):
    logger.info("Rejected flight on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.exception_handler(RepositoryError)
async def repository_error_handler(request: Request, exc: RepositoryError):
    logger.error("Storage failure on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=500, content={"detail": "Flight storage unavailable"})


# --- API Endpoints ---


@app.post("/api/routes", response_model=List[RouteSchema])
async def get_routes(request: RouteRequest):
    # An unreachable destination is an empty list, not an error
    return flight_routes.find_routes(
        origin=request.origin,
        destination=request.destination,
        max_hops=request.maxFlights,
    )


@app.post("/api/create", response_model=FlightSchema)
async def create_flight(flight: FlightRequest):
    return flight_routes.create_flight(flight.to_draft())


@app.get("/api/flights", response_model=List[FlightSchema])
async def get_all_flights():
    return flight_routes.list_flights()


@app.post("/api/bulkcreate", response_model=List[FlightSchema])
async def bulk_create_flights(flights: List[FlightRequest]):
    return flight_routes.bulk_create_flights(f.to_draft() for f in flights)


@app.delete("/api/flights")
async def delete_all_flights():
    flight_routes.delete_all_flights()
    return Response(status_code=200)


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {
        "status": "healthy" if flight_routes.is_ready else "unavailable",
        "algorithm": flight_routes.algorithm_name,
    }
