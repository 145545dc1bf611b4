"""Smart Inventory FastAPI application.

Catalogue browsing, guest ordering and administration over HTTP. Every
request runs inside the inventory domain context; each command is handled
in its own unit of work on the configured provider.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from catalogue.api import category_router, product_router
from ordering.api import order_router
from reporting.api import dashboard_router
from shared.config import get_settings
from shared.domain import init_domain, inventory
from shared.utils.db import setup_db
from shared.utils.logging import configure_logging, get_logger
from shared.web import install_error_handling

logger = get_logger(__name__)

# Initialized at import so uvicorn workers share the registered elements.
# INVENTORY_ENV and INVENTORY_DATABASE_URL select the provider.
init_domain()


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    configure_logging(log_dir=None if settings.env == "test" else settings.log_dir)
    setup_db(inventory)
    logger.info("application_started", env=settings.env)
    yield
    logger.info("application_stopped")


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Smart Inventory API",
    description="Inventory management: catalogue, guest orders and stock tracking",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

install_error_handling(app)

# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
app.include_router(product_router)
app.include_router(category_router)
app.include_router(order_router)
app.include_router(dashboard_router)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(content={"status": "ok", "env": get_settings().env})
