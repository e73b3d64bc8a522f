from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging
import time

from .core.config import settings
from .core.cache import cache
from .core.database import close_db_connections, init_models
from .core.exceptions import ChatHubException, chathub_exception_handler, general_exception_handler
from .core.logging import setup_logging

from .routers import health, users, rooms, messages, uploads, notifications

setup_logging()
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting ChatHub API")

    if settings.auto_create_tables:
        await init_models()

    await cache.connect()
    if cache.enabled:
        logger.info("Cache initialized")

    yield

    logger.info("Shutting down ChatHub API")
    await cache.disconnect()
    await close_db_connections()
    logger.info("Shutdown complete")

app = FastAPI(
    title="ChatHub API",
    description="Chat rooms, messages, shared uploads with comments, and push notifications",
    version=settings.app_version,
    lifespan=lifespan
)

@app.middleware("http")
async def add_process_time_header(request: Request, call_next):
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = str(process_time)
    logger.info(f"{request.method} {request.url.path} - {process_time:.3f}s")
    return response

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    max_age=3600,
)

app.add_exception_handler(ChatHubException, chathub_exception_handler)
app.add_exception_handler(Exception, general_exception_handler)

app.include_router(health.router)
app.include_router(users.router)
app.include_router(rooms.router)
app.include_router(messages.router)
app.include_router(uploads.router)
app.include_router(notifications.router)

@app.get("/")
async def root():
    return {
        "message": "ChatHub API",
        "version": settings.app_version,
        "status": "active"
    }

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
