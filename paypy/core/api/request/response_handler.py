"""
Response classification for PayPay API responses.

Every endpoint answers with the same envelope:

    {"header": {"resultCode": "S0000", "resultMessage": ""},
     "payload": {...}, "error": {...}}

``classify`` turns such an object into exactly one tagged variant so
callers never touch ``payload`` outside the success case.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Union

from ...exceptions import TokenRevoked, UnknownError


class ResultCode:
    """Known result codes."""
    
    SUCCESS = 'S0000'
    GENERIC_ERROR = 'S0001'
    OTP_REQUIRED = 'S1004'


@dataclass(frozen=True)
class Success:
    """Successful response carrying the endpoint payload."""
    payload: Dict[str, Any]
    result_message: str = ''
    result_code: str = ResultCode.SUCCESS


@dataclass(frozen=True)
class OtpChallengeResult:
    """Sign-in needs an SMS one-time password."""
    otp_reference_id: str
    otp_prefix: str
    result_message: str = ''
    result_code: str = ResultCode.OTP_REQUIRED


@dataclass(frozen=True)
class ClassifiedError:
    """Recognized server error, typically a stale or revoked token."""
    error: Dict[str, Any] = field(default_factory=dict)
    result_message: str = ''
    result_code: str = ResultCode.GENERIC_ERROR


@dataclass(frozen=True)
class Unclassified:
    """Any other response shape."""
    result_code: str = ''
    result_message: str = ''


RemoteResult = Union[Success, OtpChallengeResult, ClassifiedError, Unclassified]


def _header(data: Mapping[str, Any]) -> Mapping[str, Any]:
    header = data.get('header')
    return header if isinstance(header, Mapping) else {}


def classify(data: Any) -> RemoteResult:
    """
    Classify a decoded JSON response.
    
    Args:
        data: Decoded response body
        
    Returns:
        One of Success, OtpChallengeResult, ClassifiedError, Unclassified
    """
    if not isinstance(data, Mapping):
        return Unclassified()
    
    header = _header(data)
    code = header.get('resultCode') or ''
    message = header.get('resultMessage') or ''
    
    if code == ResultCode.OTP_REQUIRED:
        error = data.get('error')
        if isinstance(error, Mapping):
            return OtpChallengeResult(
                otp_reference_id=error.get('otpReferenceId', ''),
                otp_prefix=error.get('otpPrefix', ''),
                result_message=message
            )
        return Unclassified(code, message)
    
    error = data.get('error')
    if code == ResultCode.GENERIC_ERROR and isinstance(error, Mapping):
        return ClassifiedError(
            error=dict(error),
            result_message=message
        )
    
    if code == ResultCode.SUCCESS:
        payload = data.get('payload')
        return Success(
            payload=payload if isinstance(payload, dict) else {},
            result_message=message
        )
    
    return Unclassified(code, message)


class ResponseHandler:
    """Handles API responses for authorized calls."""
    
    @staticmethod
    def expect_success(result: RemoteResult) -> Dict[str, Any]:
        """
        Return the payload of a successful result or raise the matching error.
        
        Raises:
            TokenRevoked: For classified server errors
            UnknownError: For any other non-success shape
        """
        if isinstance(result, Success):
            return result.payload
        if isinstance(result, ClassifiedError):
            raise TokenRevoked()
        raise UnknownError(result.result_message, result.result_code)
    
    @staticmethod
    def process_response(data: Any) -> Dict[str, Any]:
        """Classifies a decoded response and returns its payload."""
        return ResponseHandler.expect_success(classify(data))
