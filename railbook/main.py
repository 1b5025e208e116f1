import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from railbook.config import settings
from railbook.database import Base, engine
from railbook.exceptions import RailbookError, ValidationError, describe_validation_errors
from railbook.logging_config import configure_logging
from railbook.auth import router as auth_router
from railbook.stations import router as stations_router
from railbook.trains import router as trains_router, fares_router
from railbook.bookings import router as bookings_router
from railbook.status import router as status_router

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger("railbook.main")

@asynccontextmanager
async def lifespan(app: FastAPI):
    Base.metadata.create_all(bind=engine)
    yield

# Create FastAPI app
app = FastAPI(
    title=settings.PROJECT_NAME,
    version="1.0.0",
    description="Railway ticket search, booking and live status API",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(RailbookError)
def railbook_error_handler(request: Request, exc: RailbookError):
    """Turn any engine failure into one user-facing message"""
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    else:
        logger.info("%s %s rejected: %s", request.method, request.url.path, exc.message)

    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message}, headers=headers)

@app.exception_handler(RequestValidationError)
def request_validation_error_handler(request: Request, exc: RequestValidationError):
    """Malformed input is reported like any other ValidationError"""
    message = describe_validation_errors(exc.errors())
    logger.info("%s %s rejected: %s", request.method, request.url.path, message)
    return JSONResponse(status_code=ValidationError.status_code, content={"detail": message})

# Include routers
app.include_router(
    auth_router.router,
    prefix=f"{settings.API_V1_STR}/auth",
    tags=["Authentication"]
)

app.include_router(
    stations_router.router,
    prefix=f"{settings.API_V1_STR}/stations",
    tags=["Stations"]
)

app.include_router(
    trains_router,
    prefix=f"{settings.API_V1_STR}/trains",
    tags=["Train Search"]
)

app.include_router(
    fares_router,
    prefix=f"{settings.API_V1_STR}/fares",
    tags=["Fares"]
)

app.include_router(
    bookings_router,
    prefix=f"{settings.API_V1_STR}/bookings",
    tags=["Bookings"]
)

app.include_router(
    status_router,
    prefix=f"{settings.API_V1_STR}/status",
    tags=["Live Status"]
)

@app.get("/")
def root():
    """Root endpoint"""
    return {
        "message": settings.PROJECT_NAME,
        "version": "1.0.0",
        "docs": "/docs"
    }

@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
