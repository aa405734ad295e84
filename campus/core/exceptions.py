"""
Custom exceptions for the campus package.
"""

from typing import Optional, Any, Dict


class CampusException(Exception):
    """Base exception for all campus-related errors."""
    
    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}


class ConfigurationError(CampusException):
    """Raised when configuration is invalid."""
    pass
