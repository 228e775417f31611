import os

from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from app.core.exception_handlers import (
    validation_exception_handler,
    http_exception_handler,
    general_exception_handler
)
from app.utils.logger import logger
from app.config.settings import CORS_ORIGINS, CORS_ALLOW_ALL, BASE_URL as SETTINGS_BASE_URL, ENABLE_DOCS

# ───────────────────────────
# Models are registered on the Base through the routers' imports
# ───────────────────────────
from app.api.store.router.router import api_store
from app.api.monitoring.router import router_public as monitoring_router_public

BASE_URL = SETTINGS_BASE_URL or os.getenv("BASE_URL", "http://localhost:8000")

# ──────────────────────────
# FastAPI instance
# ──────────────────────────
app = FastAPI(
    title="CornerStore API",
    version="1.0.0",
    description="Cashiers, products, categories and orders of the corner store",
    docs_url=("/swagger" if ENABLE_DOCS else None),
    redoc_url=("/redoc" if ENABLE_DOCS else None),
    openapi_url=("/openapi.json" if ENABLE_DOCS else None),
    servers=[{"url": BASE_URL, "description": "Environment base URL"}],
    redirect_slashes=False  # avoids 307 redirects when the URL has no trailing slash
)

# ───────────────────────────
# Global exception handlers
# ───────────────────────────
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(HTTPException, http_exception_handler)
app.add_exception_handler(Exception, general_exception_handler)

# ───────────────────────────
# Middlewares
# Executed in REVERSE order of addition (last added runs first)
# ───────────────────────────
from app.utils.prometheus_metrics import PrometheusMiddleware
app.add_middleware(PrometheusMiddleware)

if CORS_ALLOW_ALL:
    allowed_origins = ["*"]
    allow_credentials = False
else:
    allowed_origins = CORS_ORIGINS or ["*"]
    allow_credentials = bool(CORS_ORIGINS)
app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ───────────────────────────
# Startup / Shutdown
# ───────────────────────────
@app.on_event("startup")
async def startup():
    from app.database.init_db import initialize_database

    logger.info("Starting API and database...")
    initialize_database()
    logger.info("API started.")


@app.on_event("shutdown")
async def shutdown():
    logger.info("API stopped.")


# ───────────────────────────
# Routes
# ───────────────────────────
@app.get("/")
async def root():
    return {"status": "ok", "message": "API is running"}


@app.get("/health")
async def health():
    return {"status": "healthy"}


app.include_router(monitoring_router_public)
app.include_router(api_store)
