import logging

from fastapi import Depends, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from sqlmodel import Session

from maventoys import __version__
from maventoys.api import (
    categories_router,
    employees_router,
    products_router,
    sales_router,
    stores_router,
)
from maventoys.cache import invalidate_all
from maventoys.core import limiter
from maventoys.core.config import settings
from maventoys.core.logging import setup_logging
from maventoys.database import create_db_and_tables, get_session, ping
from maventoys.exceptions import GeneralException, IdNotFound, InvalidRequest

logger = logging.getLogger(__name__)

WRITE_METHODS = ("POST", "PUT", "PATCH")

app = FastAPI(title="Maven Toys API", version=__version__)

# Setup rate limiting
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# Setup CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(IdNotFound)
def id_not_found_handler(request: Request, exc: IdNotFound):
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"message": "Entity not found", "data": exc.to_dict()},
    )


@app.exception_handler(InvalidRequest)
def invalid_request_handler(request: Request, exc: InvalidRequest):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Invalid request", "data": exc.to_dict()},
    )


@app.exception_handler(GeneralException)
def general_exception_handler(request: Request, exc: GeneralException):
    logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Unexpected error", "data": exc.to_dict()},
    )


@app.exception_handler(RequestValidationError)
def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Invalid request", "data": {"errors": jsonable_encoder(exc.errors())}},
    )


@app.on_event("startup")
def on_startup():
    setup_logging()
    create_db_and_tables()
    logger.info("Maven Toys API %s started", __version__)


# Cache invalidation middleware
@app.middleware("http")
async def invalidate_cache_middleware(request: Request, call_next):
    response = await call_next(request)

    if settings.CACHE_ENABLED and request.method in WRITE_METHODS and response.status_code < 400:
        invalidate_all()

    return response


# Include routers
app.include_router(
    stores_router,
    prefix="/stores",
    tags=["Stores"]
)
app.include_router(
    employees_router,
    prefix="/employees",
    tags=["Employees"]
)
app.include_router(
    categories_router,
    prefix="/categories",
    tags=["Categories"]
)
app.include_router(
    products_router,
    prefix="/products",
    tags=["Products"]
)
app.include_router(
    sales_router,
    prefix="/sales",
    tags=["Sales"]
)


@app.get("/")
def read_root():
    return {"message": "Welcome to Maven Toys API"}


@app.get("/health")
def health(session: Session = Depends(get_session)):
    ping(session)
    return {"status": "ok"}


def run():
    import uvicorn

    uvicorn.run("maventoys.main:app", host="0.0.0.0", port=8000)
