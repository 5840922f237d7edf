"""
Error kinds for the calculation engine.

The lookup tables clamp every in-range query, so the only failure the engine
knows is a query it cannot order: NaN, infinite or negative inputs, or an
unknown oocyte estimator name.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class InvalidInputError(ValueError):
    """Raised when a calculation input is not a finite, non-negative number."""


def add_exception_handlers(app: FastAPI) -> None:
    """Map InvalidInputError escaping a route to a 422 response."""

    @app.exception_handler(InvalidInputError)
    async def invalid_input_handler(request: Request, exc: InvalidInputError):
        logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(
            status_code=422,
            content={"error": "invalid_input", "detail": str(exc)},
        )
