"""HTTP error mapping shared by the FastAPI app and the API tests.

Protean's handlers turn ValidationError (and therefore OrdersClosedError and
InvalidTransitionError) into 400 and ObjectNotFoundError into 404. Store
failures become a generic 503 so internals never reach the client.
"""

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from protean.integrations.fastapi import register_exception_handlers

from shared.errors import PersistenceError

logger = structlog.get_logger(__name__)

RETRY_MESSAGE = "Something went wrong on our side. Please try again."


async def persistence_error_handler(request: Request, exc: PersistenceError) -> JSONResponse:
    logger.error("request_failed_persistence", path=request.url.path, error=str(exc))
    return JSONResponse(status_code=503, content={"error": RETRY_MESSAGE})


def register_error_handlers(app: FastAPI) -> None:
    register_exception_handlers(app)
    app.add_exception_handler(PersistenceError, persistence_error_handler)
