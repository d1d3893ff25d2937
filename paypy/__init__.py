"""
paypy - Async Python client for the PayPay mobile API.

Usage:
    >>> from paypy import PayPayClient
    >>> 
    >>> async with PayPayClient() as paypay:
    ...     result = await paypay.login("09012345678", "password")
    ...     if result.otp_required:
    ...         await paypay.login_otp(result.otp_reference_id, "123456")
    ...     balance = await paypay.get_balance()
"""

import aiohttp

from .client import PayPayClient
from .core.logging import setup_logging

# Configuration
from .core.api import (
    APIConfig,
    DeviceProfile,
    ProxyConfig,
    SSLConfig,
    TimeoutConfig,
    AsyncAPIClient,
    ResultCode,
    classify
)

from .core.exceptions import (
    PayPayError,
    SessionNotEstablished,
    InvalidCredentials,
    InvalidOtp,
    TokenRevoked,
    LinkNotPending,
    PasscodeRequired,
    UnknownError
)

from .core.models import (
    Session,
    LoginStatus,
    LoginResult,
    OtpChallenge,
    BalanceInfo,
    OrderType,
    TransactionRecord,
    LinkOrderStatus,
    LinkInfo,
    CreatedLink,
    Profile
)

# Transport failures are raised unwrapped
TransportError = aiohttp.ClientError

__version__ = '1.0.0'


__all__ = [
    'PayPayClient',
    'Session',
    'LoginStatus',
    'LoginResult',
    'OtpChallenge',
    'BalanceInfo',
    'OrderType',
    'TransactionRecord',
    'LinkOrderStatus',
    'LinkInfo',
    'CreatedLink',
    'Profile',
    'PayPayError',
    'SessionNotEstablished',
    'InvalidCredentials',
    'InvalidOtp',
    'TokenRevoked',
    'LinkNotPending',
    'PasscodeRequired',
    'UnknownError',
    'TransportError',
    'APIConfig',
    'DeviceProfile',
    'ProxyConfig',
    'SSLConfig',
    'TimeoutConfig',
    'AsyncAPIClient',
    'ResultCode',
    'classify',
    'setup_logging',
]
