from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging
import time

from .core.config import settings
from .core.database import close_db_connections, init_models
from .core.error_handlers import register_exception_handlers
from .core.logging import setup_logging
from .routers import health, auth, students, teachers, branches, receipts, activity_logs

setup_logging()
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting Tuition Back-Office API")

    if settings.environment == "development":
        await init_models()

    yield

    logger.info("Shutting down Tuition Back-Office API")
    await close_db_connections()
    logger.info("Shutdown complete")


def create_app() -> FastAPI:
    app = FastAPI(
        title="Tuition Back-Office API",
        description="Students, teachers, branches, fees, receipts and activity log for a tuition-center chain",
        version=settings.app_version,
        lifespan=lifespan
    )

    @app.middleware("http")
    async def add_process_time_header(request: Request, call_next):
        start_time = time.time()
        response = await call_next(request)
        process_time = time.time() - start_time
        response.headers["X-Process-Time"] = str(process_time)
        logger.info(f"{request.method} {request.url.path} - {response.status_code} - {process_time:.3f}s")
        return response

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        max_age=3600,
    )

    register_exception_handlers(app)

    app.include_router(health.router)
    app.include_router(auth.router)
    app.include_router(students.router)
    app.include_router(teachers.router)
    app.include_router(branches.router)
    app.include_router(receipts.router)
    app.include_router(activity_logs.router)

    @app.get("/")
    async def root():
        return {
            "message": "Welcome to the Tuition Back-Office API! The server is running successfully.",
            "version": settings.app_version,
        }

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("tuition_api.main:app", host="0.0.0.0", port=8000, reload=True)
