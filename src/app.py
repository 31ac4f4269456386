"""Products FastAPI application.

Web server that processes product commands synchronously via HTTP. Every
request under ``/products`` runs inside the products domain context.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV selects the config overlay from src/products/domain.toml.
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from products.domain import products
from products.utils.logging import add_context, clear_context, get_logger

logger = get_logger(__name__)

products.init()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Seed an empty collection once the store is reachable."""
    from products.product.seed import seed_db
    from products.utils import settings

    if settings.SEED_ON_STARTUP:
        inserted = seed_db(products)
        logger.info("Startup seed finished", inserted=inserted)
    yield


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Products API",
    description="Product collection with stock quantity adjustments",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the products domain context for product routes."""
    if not request.url.path.startswith("/products"):
        # Health check, docs
        return await call_next(request)

    add_context(method=request.method, path=request.url.path)
    try:
        with products.domain_context():
            return await call_next(request)
    finally:
        clear_context()


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from products.api import product_router, register_error_handlers  # noqa: E402

app.include_router(product_router)
register_error_handlers(app)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(content={"status": "ok", "domain": products.name})
