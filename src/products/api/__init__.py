"""Products domain API package."""

from products.api.errors import register_error_handlers
from products.api.routes import product_router

__all__ = ["product_router", "register_error_handlers"]
