"""Catalog gateway exceptions."""

from __future__ import annotations

from fastapi import status


class CatalogGatewayError(Exception):
    """Base exception for all catalog gateway errors."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        if status_code is not None:
            self.status_code = status_code


class UpstreamError(CatalogGatewayError):
    """The metadata engine could not serve the request."""

    status_code = status.HTTP_502_BAD_GATEWAY


class UpstreamStatusError(UpstreamError):
    """The metadata engine answered with a non-OK status (passed through)."""

    def __init__(self, status_code: int, body: bytes = b""):
        super().__init__(f"Upstream responded with status {status_code}", status_code)
        self.body = body


class UpstreamConnectionError(UpstreamError):
    """Failed to connect to the metadata engine."""


class UpstreamTimeoutError(UpstreamError):
    """The metadata engine did not answer in time."""

    status_code = status.HTTP_504_GATEWAY_TIMEOUT


class DecodeError(CatalogGatewayError):
    """Upstream payload violates the expected response contract."""


class UnsupportedFilterError(CatalogGatewayError):
    """A search modifier the resource kind cannot honor."""

    status_code = status.HTTP_400_BAD_REQUEST
