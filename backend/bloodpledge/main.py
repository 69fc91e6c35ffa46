"""
BloodPledge - Blood donation pledge API
Tracks hospitals, patients requesting blood and donors, and records pledges between them.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api import donors, hospitals, patients
from .api.errors import register_exception_handlers
from .core.config import settings
from .seed_demo import seed_demo_data
from .services.bank import BloodBank

logging.basicConfig(level=settings.LOG_LEVEL)


def create_app(bank: Optional[BloodBank] = None) -> FastAPI:
    bank = bank or BloodBank()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # NOTE: In production, use Alembic migrations instead of create_all()
        bank.create_tables()
        if settings.SEED_DEMO_DATA:
            seed_demo_data(bank)
        yield

    app = FastAPI(
        title="BloodPledge API",
        description=(
            "Registry of hospitals, patients and donors. "
            "Donors pledge blood pints to patients or hospitals; both sides are updated atomically."
        ),
        version=settings.VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.bank = bank

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(hospitals.router, prefix="/api/v1")
    app.include_router(patients.router, prefix="/api/v1")
    app.include_router(donors.router, prefix="/api/v1")

    @app.get("/health")
    def health_check():
        return {"status": "healthy", "service": "BloodPledge API", "version": settings.VERSION}

    return app


app = create_app()
