"""Exception-to-response mapping for the Products API.

Protean's handlers cover validation errors (400). Unknown identifiers map to
404 and store failures to 503, each with an ``{"error": ...}`` body.
"""

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from protean.exceptions import ObjectNotFoundError
from protean.integrations.fastapi import register_exception_handlers

from products.exceptions import StoreUnavailableError

logger = structlog.get_logger(__name__)


async def _not_found(request: Request, exc: ObjectNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"error": str(exc)})


async def _store_unavailable(request: Request, exc: StoreUnavailableError) -> JSONResponse:
    logger.error("Product store unavailable", path=request.url.path, operation=exc.operation, error=str(exc.cause))
    return JSONResponse(status_code=503, content={"error": str(exc)})


def register_error_handlers(app: FastAPI) -> None:
    register_exception_handlers(app)
    app.add_exception_handler(ObjectNotFoundError, _not_found)
    app.add_exception_handler(StoreUnavailableError, _store_unavailable)
