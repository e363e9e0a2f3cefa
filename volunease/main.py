import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from volunease.config import settings
from volunease.db import get_database
from volunease.errors import VolunEaseError
from volunease.logging_config import setup_logging
from volunease.routers import auth, banners, health, posts, preferences, requests
from volunease.services.stores import RequestStore

setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # honour overrides so tests index their own database
    db = app.dependency_overrides.get(get_database, get_database)()
    RequestStore.from_db(db).ensure_indexes()
    yield


app = FastAPI(title="VolunEase API", lifespan=lifespan)

# requests without an Origin header (server-to-server) are not affected
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_URLS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(VolunEaseError)
async def volunease_error_handler(request: Request, exc: VolunEaseError):
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


@app.exception_handler(PyMongoError)
async def store_error_handler(request: Request, exc: PyMongoError):
    logger.error("Store failure on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"message": "Internal server error"})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"message": "Internal server error"})


# routers
app.include_router(health.router)
app.include_router(auth.router)
app.include_router(posts.router)
app.include_router(requests.router)
app.include_router(preferences.router)
app.include_router(banners.router)


if __name__ == "__main__":
    import uvicorn

    logger.info("VolunEase is running on %s", settings.SERVER_PORT)
    uvicorn.run(app, host="0.0.0.0", port=settings.SERVER_PORT)
