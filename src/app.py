"""BlueSpring FastAPI application.

Multi-domain web server that processes commands synchronously via HTTP.
Each request is wrapped in the correct domain context based on URL prefix.

Usage:
    uvicorn src.app:app --host 0.0.0.0 --port 8000 --reload
"""

import uuid

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from domains import DOMAIN_NAMES, get_domain
from shared.http import register_error_handlers
from shared.logging import bind_request_context, clear_request_context, configure_logging, get_logger

configure_logging()
logger = get_logger(__name__)

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# Domains are initialized at module level so uvicorn workers share them.
# PROTEAN_ENV controls which config overlay is applied.
ordering, notifications, backoffice = (get_domain(name) for name in DOMAIN_NAMES)

# ---------------------------------------------------------------------------
# Route-to-domain mapping
# ---------------------------------------------------------------------------
_ROUTE_DOMAIN_MAP = {
    "/products": ordering,
    "/orders": ordering,
    "/subscriptions": ordering,
    "/settings": ordering,
    "/notifications": notifications,
    "/messages": backoffice,
    "/testimonials": backoffice,
}


def _resolve_domain(path: str):
    """Return the domain for the given request path, or None."""
    for prefix, domain in _ROUTE_DOMAIN_MAP.items():
        if path.startswith(prefix):
            return domain
    return None


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="BlueSpring API",
    description="Water delivery orders, subscriptions and back office",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the correct Protean domain context for each request."""
    domain = _resolve_domain(request.url.path)
    bind_request_context(request_id=request.headers.get("x-request-id", uuid.uuid4().hex))
    try:
        if domain is not None:
            bind_request_context(domain=domain.name)
            with domain.domain_context():
                return await call_next(request)
        # No domain match: health check and docs
        return await call_next(request)
    finally:
        clear_request_context()


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from backoffice.api import message_router, testimonial_router  # noqa: E402
from notifications.api import router as notification_router  # noqa: E402
from ordering.api import order_router, product_router, settings_router, subscription_router  # noqa: E402

app.include_router(product_router)
app.include_router(order_router)
app.include_router(subscription_router)
app.include_router(settings_router)
app.include_router(notification_router)
app.include_router(message_router)
app.include_router(testimonial_router)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(
        content={
            "status": "ok",
            "domains": {domain.name: {"name": domain.name} for domain in (ordering, notifications, backoffice)},
        }
    )
