"""
Custom exceptions for PayPay operations.

This module defines the domain errors raised by the PayPay client.
Transport failures (aiohttp.ClientError, timeouts, malformed JSON) are
never wrapped and reach the caller unchanged.
"""
from typing import Optional


class PayPayError(Exception):
    """Base exception for all PayPay-related errors."""
    
    def __init__(self, message: str, code: Optional[str] = None) -> None:
        """
        Initialize the exception.
        
        Args:
            message: Error message
            code: Short upper-case error identifier (if available)
        """
        self.code = code
        self.message = message
        super().__init__(message)


class SessionNotEstablished(PayPayError):
    """Raised when an authorized call is made without an access token."""
    
    def __init__(self, message: str = "Access token has not been set.") -> None:
        super().__init__(message, "TOKEN_NOT_SET")


class InvalidCredentials(PayPayError):
    """Raised when sign-in is neither successful nor OTP-challenged."""
    
    def __init__(self, message: str = "an invalid password provided.") -> None:
        super().__init__(message, "INVALID_PASSWORD")


class InvalidOtp(PayPayError):
    """Raised when OTP verification does not succeed."""
    
    def __init__(self, message: str = "an invalid otp code is provided.") -> None:
        super().__init__(message, "OTP_INVALID")


class TokenRevoked(PayPayError):
    """Raised when the server reports a classified error for an authorized call."""
    
    def __init__(self, message: str = "Access token has been revoked") -> None:
        super().__init__(message, "TOKEN_REVOKED")


class LinkNotPending(PayPayError):
    """Raised when accepting a link whose order is no longer pending."""
    
    def __init__(self, status: str) -> None:
        """
        Initialize the exception.
        
        Args:
            status: Actual order status reported for the link
        """
        self.status = status
        super().__init__(f"the link is not pending: {status}", "LINK_STATUS_INVALID")


class PasscodeRequired(PayPayError):
    """Raised when a link needs a passcode and none was given."""
    
    def __init__(self, message: str = "the link requires a passcode") -> None:
        super().__init__(message, "LINK_PASSCODE_REQUIRED")


class UnknownError(PayPayError):
    """Raised for responses that are neither success nor a recognized error."""
    
    def __init__(self, result_message: str, result_code: Optional[str] = None) -> None:
        """
        Initialize the exception.
        
        Args:
            result_message: Raw message reported by the server
            result_code: Raw result code reported by the server
        """
        self.result_code = result_code
        self.result_message = result_message
        super().__init__(result_message, "UNKNOWN_ERROR")
