"""Ordering domain API package."""

from ordering.api.routes import order_router, product_router, settings_router, subscription_router

__all__ = ["product_router", "order_router", "subscription_router", "settings_router"]
