"""PayPay API module: transport, request building and response classification."""
from .config import APIConfig, DeviceProfile, ProxyConfig, SSLConfig, TimeoutConfig, DEFAULT_APP_VERSION
from .async_client import AsyncAPIClient
from .version import AppVersionResolver
from .request import (
    RequestBuilder,
    PreparedRequest,
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
    # Transport
    'AsyncAPIClient',
    'AppVersionResolver',
    
    # Requests
    'RequestBuilder',
    'PreparedRequest',
    
    # Responses
    'ResponseHandler',
    'ResultCode',
    'RemoteResult',
    'Success',
    'OtpChallengeResult',
    'ClassifiedError',
    'Unclassified',
    'classify',
    
    # Configuration
    'APIConfig',
    'DeviceProfile',
    'ProxyConfig',
    'SSLConfig',
    'TimeoutConfig',
    'DEFAULT_APP_VERSION',
]
