"""
YouMDB error taxonomy.

Services raise these and never recover from them; ``install_error_handlers``
maps each one onto an HTTP status for the API layer.
"""
from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse


class YouMDBError(Exception):
    """Base class for every application error."""

    status_code = 500

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message or self.__class__.__name__


class NotFound(YouMDBError):
    """A single-record lookup found nothing."""

    status_code = 404


class InvalidArgument(YouMDBError):
    """A filter or payload value is malformed."""

    status_code = 400


class PermissionDenied(YouMDBError):
    """Write attempted without an authenticated, non-guest identity."""

    status_code = 403


class StoreError(YouMDBError):
    """Any record store / backend failure. The message is passed through as-is."""

    status_code = 502


class ImportFailed(YouMDBError):
    """The YouTube metadata API had no match or handle resolution failed."""

    status_code = 422


async def youmdb_error_handler(_request: Request, exc: YouMDBError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "error": exc.__class__.__name__},
    )


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(YouMDBError, youmdb_error_handler)
