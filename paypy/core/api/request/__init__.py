"""Request building and response classification."""
from .request_builder import RequestBuilder, PreparedRequest
from .response_handler import (
    ResponseHandler,
    ResultCode,
    RemoteResult,
    Success,
    OtpChallengeResult,
    ClassifiedError,
    Unclassified,
    classify
)

__all__ = [
    'RequestBuilder',
    'PreparedRequest',
    'ResponseHandler',
    'ResultCode',
    'RemoteResult',
    'Success',
    'OtpChallengeResult',
    'ClassifiedError',
    'Unclassified',
    'classify',
]
