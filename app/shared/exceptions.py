# app/shared/exceptions.py
"""
Domain errors raised by services and storage providers.
Rendered as {"error": message} by the handler registered in app/main.py.
"""
from fastapi import Request, status
from fastapi.responses import JSONResponse


class ClinicalNotesError(Exception):
    """Base class for errors with a client-visible message."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ClinicalNotesError):
    """Missing or invalid required fields."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(ClinicalNotesError):
    """Lookup by id found nothing."""

    status_code = status.HTTP_404_NOT_FOUND


class UnimplementedError(ClinicalNotesError):
    """Capability declared but not available yet."""

    status_code = status.HTTP_501_NOT_IMPLEMENTED


async def clinical_notes_error_handler(request: Request, exc: ClinicalNotesError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})
