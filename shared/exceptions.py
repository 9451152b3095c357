"""
Custom exceptions and error handling utilities.

This module centralizes all custom exceptions used throughout the application
and provides utilities for consistent error handling and reporting.

The domain core (repositories, pricing, reporting) never raises these; they
belong to the input layers (CLI, HTTP API) and to entity validation.
"""

from typing import Dict, Any, Optional
import logging


# =================== BASE EXCEPTIONS ===================

class FitZoneError(Exception):
    """Base exception for all FitZone application errors."""

    def __init__(
        self,
        message: str,
        code: str = None,
        details: Dict[str, Any] = None,
        original_exception: Exception = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__.replace("Error", "").lower()
        self.details = details or {}
        self.original_exception = original_exception

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        result = {
            "error": self.message,
            "code": self.code,
            "type": self.__class__.__name__
        }

        if self.details:
            result["details"] = self.details

        if self.original_exception:
            result["original_error"] = str(self.original_exception)

        return result


# =================== DATA AND VALIDATION EXCEPTIONS ===================

class DataValidationError(FitZoneError):
    """Raised when data validation fails."""
    pass


# =================== CONFIGURATION EXCEPTIONS ===================

class ConfigurationError(FitZoneError):
    """Raised when configuration is invalid or incomplete."""

    def __init__(self, setting: str, reason: str):
        super().__init__(
            message=f"Invalid configuration for {setting}: {reason}",
            code="configuration_error",
            details={"setting": setting, "reason": reason}
        )
        self.setting = setting
        self.reason = reason


# =================== REPOSITORY EXCEPTIONS ===================

class RepositoryError(FitZoneError):
    """Base class for repository errors."""
    pass


class EntityNotFoundError(RepositoryError):
    """Raised when requested entity is not found."""

    def __init__(self, entity_type: str, identifier: Any, details: Dict[str, Any] = None):
        message = f"{entity_type} not found: {identifier}"
        super().__init__(
            message=message,
            code="entity_not_found",
            details={
                "entity_type": entity_type,
                "identifier": str(identifier),
                **(details or {})
            }
        )
        self.entity_type = entity_type
        self.identifier = identifier


# =================== BUSINESS LOGIC EXCEPTIONS ===================

class BusinessLogicError(FitZoneError):
    """Base class for business logic violations."""
    pass


# =================== ERROR HANDLING UTILITIES ===================

def handle_exception(
    exception: Exception,
    logger: logging.Logger,
    context: Dict[str, Any] = None,
    reraise: bool = False
) -> Dict[str, Any]:
    """
    Centralized exception handling utility.

    Args:
        exception: The exception to handle
        logger: Logger instance for error reporting
        context: Additional context information
        reraise: Whether to re-raise the exception

    Returns:
        Dictionary representation of the error
    """
    if isinstance(exception, FitZoneError):
        error_dict = exception.to_dict()
        logger.warning("FitZoneError: %s", exception.message, extra={
            "error_code": exception.code,
            "details": exception.details,
            "context": context
        })
    else:
        error_dict = {
            "error": str(exception),
            "code": "unexpected_error",
            "type": exception.__class__.__name__
        }
        logger.error("Unexpected error: %s", exception, extra={
            "exception_type": exception.__class__.__name__,
            "context": context
        }, exc_info=True)

    if context:
        error_dict["context"] = context

    if reraise:
        raise exception

    return error_dict


def create_error_response(
    exception: Exception,
    include_details: bool = True
) -> Dict[str, Any]:
    """
    Create standardized API error response from exception.

    Args:
        exception: Exception to convert
        include_details: Whether to include detailed error information

    Returns:
        Error response dictionary
    """
    if isinstance(exception, FitZoneError):
        response = {
            "success": False,
            "error": exception.message,
            "code": exception.code
        }

        if include_details and exception.details:
            response["details"] = exception.details

        return response

    return {
        "success": False,
        "error": str(exception),
        "code": "unexpected_error"
    }


def status_code_for(exception: Exception) -> int:
    """Map an exception to the HTTP status code the API reports it with."""
    if isinstance(exception, EntityNotFoundError):
        return 404
    if isinstance(exception, (DataValidationError, BusinessLogicError)):
        return 400
    if isinstance(exception, ConfigurationError):
        return 503
    return 500


# =================== EXPORT ALL EXCEPTIONS ===================

__all__ = [
    # Base exceptions
    "FitZoneError",

    # Data validation exceptions
    "DataValidationError",

    # Configuration exceptions
    "ConfigurationError",

    # Repository exceptions
    "RepositoryError",
    "EntityNotFoundError",

    # Business logic exceptions
    "BusinessLogicError",

    # Utility functions
    "handle_exception",
    "create_error_response",
    "status_code_for",
]
