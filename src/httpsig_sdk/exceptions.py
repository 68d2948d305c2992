"""
Exception classes for the HTTP Signatures SDK
"""

from typing import Optional, Dict, Any


class HttpSigSDKError(Exception):
    """Base exception for all HTTP Signatures SDK errors"""
    
    def __init__(self, message: str, error_code: str = "UNKNOWN_ERROR", details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.error_code = error_code
        self.details = details or {}


class ValidationError(HttpSigSDKError):
    """Exception raised for malformed caller input"""
    pass


class UnsupportedPlatformError(HttpSigSDKError):
    """Exception raised when a required cryptographic feature is not available"""
    pass
