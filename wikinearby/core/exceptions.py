"""
Custom exceptions for the nearby article service.

Remote failures from either query stage surface as ``TransportFailure``;
a page id with no metadata is not an error and never raises.
"""

from typing import Optional, Dict, Any
from enum import Enum


class ErrorCode(str, Enum):
    """Standardized error codes for the application."""
    
    # Remote query errors
    TRANSPORT_FAILURE = "TRANSPORT_FAILURE"
    MALFORMED_RESPONSE = "MALFORMED_RESPONSE"
    REMOTE_SERVICE_ERROR = "REMOTE_SERVICE_ERROR"
    
    # Input errors
    INVALID_SEARCH_QUERY = "INVALID_SEARCH_QUERY"
    UNSUPPORTED_SPATIAL_REFERENCE = "UNSUPPORTED_SPATIAL_REFERENCE"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    
    # Generic errors
    NOT_FOUND = "NOT_FOUND"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


class NearbyServiceException(Exception):
    """Base exception for the nearby article service."""
    
    def __init__(
        self,
        message: str,
        error_code: ErrorCode,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.status_code = status_code


class TransportFailure(NearbyServiceException):
    """Raised when a remote query fails at the network or HTTP level."""
    
    def __init__(
        self,
        message: str = "Remote query failed",
        details: Optional[Dict[str, Any]] = None,
        error_code: ErrorCode = ErrorCode.TRANSPORT_FAILURE
    ):
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
            status_code=502
        )


class MalformedResponseError(TransportFailure):
    """Raised when the remote service answers with a body we cannot read."""
    
    def __init__(self, message: str = "Malformed response from remote service", details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            details=details,
            error_code=ErrorCode.MALFORMED_RESPONSE
        )


class RemoteServiceError(TransportFailure):
    """Raised when the remote service reports an API-level error object."""
    
    def __init__(self, code: str, info: str):
        super().__init__(
            message=f"Remote service error '{code}': {info}",
            details={"code": code, "info": info},
            error_code=ErrorCode.REMOTE_SERVICE_ERROR
        )


class InvalidSearchQueryError(NearbyServiceException):
    """Raised when search parameters violate the query invariants."""
    
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            error_code=ErrorCode.INVALID_SEARCH_QUERY,
            details=details,
            status_code=400
        )


class UnsupportedSpatialReferenceError(NearbyServiceException):
    """Raised when a wkid cannot be resolved to a coordinate reference system."""
    
    def __init__(self, wkid: int):
        super().__init__(
            message=f"Spatial reference {wkid} is not supported",
            error_code=ErrorCode.UNSUPPORTED_SPATIAL_REFERENCE,
            details={"wkid": wkid},
            status_code=400
        )
