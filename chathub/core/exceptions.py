# chathub/core/exceptions.py
"""Custom exceptions for the ChatHub application."""
from fastapi import Request
from fastapi.responses import JSONResponse
import logging

logger = logging.getLogger(__name__)


class ChatHubException(Exception):
    """Base exception for ChatHub domain operations."""
    def __init__(self, message: str, status_code: int = 500):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class ValidationError(ChatHubException):
    """Malformed or out-of-range input."""
    def __init__(self, message: str):
        super().__init__(message, 422)


class NotFoundError(ChatHubException):
    """Referenced entity does not exist."""
    def __init__(self, message: str):
        super().__init__(message, 404)


class ConflictError(ChatHubException):
    """Uniqueness violation."""
    def __init__(self, message: str):
        super().__init__(message, 409)


class AuthorizationError(ChatHubException):
    """Actor lacks the relationship required for the action."""
    def __init__(self, message: str = "Permission denied"):
        super().__init__(message, 403)


class PersistenceError(ChatHubException):
    """The store rejected a write."""
    def __init__(self, message: str):
        super().__init__(message, 500)


async def chathub_exception_handler(request: Request, exc: ChatHubException):
    """Handle domain exceptions raised by services"""
    logger.error(f"{exc.__class__.__name__}: {exc.message} - Path: {request.url.path}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message, "type": exc.__class__.__name__}
    )

async def general_exception_handler(request: Request, exc: Exception):
    """Handle general exceptions"""
    logger.error(f"Unexpected error: {str(exc)} - Path: {request.url.path}")
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error", "type": "InternalError"}
    )
