# yoda/main.py
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import uvicorn

from yoda import __version__
from yoda.api import auth, letter, schedule
from yoda.config import Settings, settings as default_settings
from yoda.errors import ValidationError, YodaError
from yoda.schemas import HealthResponse, MessageResponse
from yoda.services.container import ServiceContainer
from yoda.services.demo_seeder import seed_demo_data
from yoda.utils.logger import setup_logger

logger = setup_logger()


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    field = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
    message = first.get("msg", "Invalid value")
    return f"{field}: {message}" if field else message


def register_exception_handlers(app: FastAPI):
    @app.exception_handler(YodaError)
    async def yoda_error_handler(request: Request, exc: YodaError):
        headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
        body = MessageResponse(message=exc.message).model_dump()
        return JSONResponse(status_code=exc.status_code, content=body, headers=headers)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return await yoda_error_handler(request, ValidationError(_validation_message(exc)))

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}")
        return JSONResponse(status_code=500, content={"message": "Internal server error"})


def create_app(settings: Optional[Settings] = None, container: Optional[ServiceContainer] = None) -> FastAPI:
    settings = settings or default_settings
    container = container or ServiceContainer(settings)
    setup_logger(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Your Yoda service starting")
        logger.info(f"Debug mode: {settings.debug}")

        if settings.seed_demo_data:
            await seed_demo_data(container)

        if settings.letter_job_enabled:
            container.letter_job.start()

        yield

        logger.info("Your Yoda service shutting down")
        container.letter_job.stop()

    app = FastAPI(
        title="Your Yoda",
        description="Schedule journaling with supportive letters from a chosen persona",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(auth.router, prefix="/api")
    app.include_router(schedule.router, prefix="/api")
    app.include_router(letter.router, prefix="/api")

    @app.get("/")
    async def root():
        return {
            "service": "Your Yoda",
            "version": __version__,
            "status": "running",
        }

    @app.get("/health", response_model=HealthResponse)
    async def health_check():
        return HealthResponse(
            status="healthy",
            letter_job_running=container.letter_job.running,
            counts={
                "users": len(container.users),
                "schedules": len(container.schedules),
                "letters": len(container.letters),
            },
        )

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(
        "yoda.main:app",
        host=default_settings.host,
        port=default_settings.port,
        reload=default_settings.debug,
        log_level=default_settings.log_level.lower(),
    )
