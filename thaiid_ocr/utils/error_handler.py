"""
Centralized error handling for the Thai ID card OCR service.

Custom exception classes carry a message plus a details dict, and the
helpers below log failures with the context they happened in.
"""

import logging
from typing import Any, Dict, Optional
from dataclasses import dataclass


class ThaiIDOCRError(Exception):
    """Base exception class for all service errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ConfigurationError(ThaiIDOCRError):
    """Raised when settings such as the Vision API key are missing or invalid."""
    pass


class ValidationError(ThaiIDOCRError):
    """Raised when request input such as an image URI is invalid."""
    pass


class NetworkError(ThaiIDOCRError):
    """Raised when the request to the OCR provider cannot be completed."""
    pass


class VisionAPIError(ThaiIDOCRError):
    """Raised when the Vision API answers with an error or an unreadable body."""
    pass


@dataclass
class ErrorContext:
    """Context information for error reporting."""
    operation: str
    module: str
    function: str
    input_data: Optional[Dict[str, Any]] = None
    timestamp: Optional[str] = None


def handle_error(
    error: Exception,
    context: ErrorContext,
    logger: logging.Logger,
    reraise: bool = True,
    default_return: Any = None
) -> Any:
    """
    Centralized error handling with logging and optional recovery.

    Args:
        error: The exception that occurred
        context: Context information about where the error occurred
        logger: Logger instance to use for error reporting
        reraise: Whether to re-raise the exception after logging
        default_return: Value to return if not re-raising

    Returns:
        The default_return value if not re-raising

    Raises:
        The original exception if reraise is True
    """
    error_msg = f"Error in {context.module}.{context.function} during {context.operation}"

    if isinstance(error, ThaiIDOCRError):
        error_msg += f": {error.message}"
        if error.details:
            error_msg += f" | Details: {error.details}"
    else:
        error_msg += f": {str(error)}"

    logger.error(
        error_msg,
        extra={
            "error_type": type(error).__name__,
            "operation": context.operation,
            "error_module": context.module,
            "error_function": context.function,
            "input_data": context.input_data,
            "timestamp": context.timestamp,
        },
        exc_info=True
    )

    if reraise:
        raise error

    return default_return
