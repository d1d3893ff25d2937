"""Pytest fixtures for paypy tests."""
import pytest
from unittest.mock import Mock, AsyncMock

from paypy import PayPayClient


def envelope(code='S0000', message='', payload=None, error=None):
    """Builds a PayPay response envelope."""
    data = {'header': {'resultCode': code, 'resultMessage': message}}
    if payload is not None:
        data['payload'] = payload
    if error is not None:
        data['error'] = error
    return data


@pytest.fixture
def api():
    """Transport double that records every request."""
    transport = Mock()
    transport.send = AsyncMock()
    transport.get_json = AsyncMock(return_value=[
        {'bundleVersion': '4.10.0'},
        {'bundleVersion': '4.11.0'},
    ])
    transport.close = AsyncMock()
    return transport


@pytest.fixture
def client(api):
    """Anonymous client on the transport double."""
    return PayPayClient(client_uuid='CLIENT-UUID', device_uuid='DEVICE-UUID', api=api)


@pytest.fixture
def logged_client(api):
    """Authenticated client on the transport double."""
    return PayPayClient(
        access_token='T0',
        client_uuid='CLIENT-UUID',
        device_uuid='DEVICE-UUID',
        api=api
    )


@pytest.fixture
def sign_in_success():
    return envelope(payload={'accessToken': 'T1', 'refreshToken': 'R1'})


@pytest.fixture
def sign_in_otp():
    return envelope(
        code='S1004',
        message='OTP required',
        error={'otpPrefix': '090****1234', 'otpReferenceId': 'REF1'}
    )


@pytest.fixture
def token_revoked():
    return envelope(code='S0001', message='Unauthorized', error={})


@pytest.fixture
def balance_payload():
    return envelope(payload={
        'walletSummary': {
            'allTotalBalanceInfo': {'balance': 1500, 'currency': 'JPY'},
            'totalBalanceInfo': {'balance': 1500, 'currency': 'JPY'},
        },
        'walletDetail': {
            'emoneyBalanceInfo': {'balance': 1000, 'currency': 'JPY', 'usable': True},
            'prepaidBalanceInfo': {'balance': 400, 'currency': 'JPY', 'usable': True},
            'cashBackBalanceInfo': None,
        },
    })


def link_info(status='PENDING', passcode=False):
    """Builds a getP2PLinkInfo response."""
    return envelope(payload={
        'orderStatus': status,
        'pendingP2PInfo': {
            'orderId': 'ORDER-1',
            'orderType': 'P2PSEND',
            'amount': 500,
            'isSetPasscode': passcode,
            'link': 'https://pay.paypay.ne.jp/ABCDEF',
        },
        'sender': {'externalId': 'ext-1', 'displayName': 'Taro', 'photoUrl': ''},
        'message': {
            'messageId': 'MSG-1',
            'chatRoomId': 'ROOM-1',
            'data': {'orderId': 'ORDER-1', 'amount': 500},
        },
    })


@pytest.fixture
def pending_link():
    return link_info()


@pytest.fixture
def make_envelope():
    """Factory for arbitrary response envelopes."""
    return envelope


@pytest.fixture
def make_link_info():
    """Factory for link inspection responses."""
    return link_info
