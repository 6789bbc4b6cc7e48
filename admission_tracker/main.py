from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from admission_tracker.api.v1.admissions.router import router as admissions_router
from admission_tracker.api.v1.auth.router import router as auth_router
from admission_tracker.api.v1.consultants.router import router as consultants_router
from admission_tracker.api.v1.health.router import router as health_router
from admission_tracker.core.config import settings
from admission_tracker.core.logging import configure_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    yield


def create_app() -> FastAPI:
    app = FastAPI(title="Admission Tracker", lifespan=lifespan)

    # CORS: allow the admissions frontend to call this API
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routers
    app.include_router(auth_router)
    app.include_router(health_router)
    app.include_router(admissions_router)
    app.include_router(consultants_router)

    return app


app = create_app()
