import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.routers import calculate, health, holidays

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="Award Interpreter API",
    description="Single-shift interpretation: ordinary hours, overtime, public holiday penalties and meal allowances",
    version="1.0.0",
)

# CORS — open for now, the presentation layer is served from another origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API routers
app.include_router(health.router)
app.include_router(calculate.router)
app.include_router(holidays.router)
