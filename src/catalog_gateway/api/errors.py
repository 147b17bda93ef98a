"""Map gateway exceptions to HTTP responses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from catalog_gateway.exceptions import CatalogGatewayError, DecodeError

logger = logging.getLogger(__name__)


def install_exception_handlers(app: FastAPI) -> None:
    """Register handlers turning ``CatalogGatewayError`` into ``{"detail": ...}`` responses."""

    @app.exception_handler(CatalogGatewayError)
    def _handle_gateway_error(request: Request, exc: CatalogGatewayError) -> JSONResponse:
        if isinstance(exc, DecodeError):
            logger.error("%s %s: upstream contract broken: %s", request.method, request.url.path, exc)
        else:
            logger.warning("%s %s failed with %d: %s", request.method, request.url.path, exc.status_code, exc)
        return JSONResponse(status_code=exc.status_code, content={"detail": str(exc)})
