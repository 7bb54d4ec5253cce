"""
UserPanel Backend - FastAPI Application

User registration, login and an admin control panel over a JSON user document.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from userpanel.config import get_settings
from userpanel.core.errors import StoreError
from userpanel.database.connections import get_user_store
from userpanel.routers import auth, control, health

logger = logging.getLogger("userpanel")


def configure_logging(level: str) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Startup:
    - Configure logging
    - Open the user store and check the document loads

    The app still starts if the document is unreadable; requests touching
    the store will then fail with 500 until it is fixed.
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("Starting up UserPanel Backend...")

    try:
        users = get_user_store().load()
        logger.info("User store ready (%d users)", len(users))
    except StoreError as e:
        logger.warning("User store initialization warning: %s", e)

    yield

    logger.info("Shutting down UserPanel Backend...")


# Create FastAPI application
app = FastAPI(
    title="UserPanel API",
    description="""
## User registration and control panel API

### Features
- **Register / Login**: bcrypt-hashed passwords in a JSON user document
- **Control panel**: list, edit and delete users

### Control panel
There are no sessions. Every `/control` request carries the admin password
in its JSON body as `admin_password`.
    """,
    version="0.1.0",
    lifespan=lifespan,
)

# Configure CORS
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StoreError)
async def store_error_handler(request: Request, exc: StoreError):
    """Store failures are fatal to the request; nothing is retried."""
    logger.error(
        "User store error on %s %s: %s",
        request.method,
        request.url.path,
        exc,
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "User store unavailable"},
    )


# Include routers
app.include_router(health.router)
app.include_router(auth.router)
app.include_router(control.router)


@app.get("/", tags=["Root"])
async def root():
    """Root endpoint with API information."""
    return {
        "name": "UserPanel API",
        "version": "0.1.0",
        "docs": "/docs",
        "health": "/health",
    }


# Dev runner
if __name__ == "__main__":
    import uvicorn
    uvicorn.run("userpanel.main:app", host=settings.host, port=settings.port, reload=True)
