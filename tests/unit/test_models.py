"""Tests for data models and helpers."""
from datetime import datetime, timezone

import pytest

from paypy.core.models import (
    Session,
    BalanceInfo,
    OrderType,
    LinkInfo,
    LinkOrderStatus,
    CreatedLink,
    LoginResult,
    LoginStatus,
    OtpChallenge
)
from paypy.core.utils import generate_uuid, tokyo_timestamp, extract_link_code


class TestSession:
    """Tests for Session model."""
    
    def test_authenticated(self):
        assert Session('c', 'd').authenticated is False
        assert Session('c', 'd', access_token='t').authenticated is True
    
    def test_to_json(self):
        json_str = Session('c', 'd', access_token='t').to_json()
        
        assert '"client_uuid": "c"' in json_str
        assert '"access_token": "t"' in json_str
    
    def test_from_dict_optional_tokens(self):
        session = Session.from_dict({'client_uuid': 'c', 'device_uuid': 'd'})
        
        assert session.access_token is None
        assert session.refresh_token is None


class TestLoginResult:
    """Tests for LoginResult."""
    
    def test_otp_properties(self):
        result = LoginResult(
            status=LoginStatus.OTP_REQUIRED,
            otp=OtpChallenge(otp_reference_id='REF', otp_prefix='090')
        )
        
        assert result.otp_required is True
        assert result.otp_reference_id == 'REF'
        assert result.otp_prefix == '090'
    
    def test_done_has_no_otp(self):
        result = LoginResult(status=LoginStatus.DONE, access_token='T')
        
        assert result.otp_required is False
        assert result.otp_reference_id is None


class TestPayloadModels:
    """Tests for payload parsing."""
    
    def test_balance_from_empty_payload(self):
        balance = BalanceInfo.from_payload({})
        
        assert balance.balance == 0
        assert balance.prepaid is None
    
    def test_order_type_parse(self):
        assert OrderType.parse('TOPUP') is OrderType.TOPUP
        assert OrderType.parse(None) is OrderType.UNKNOWN
    
    def test_link_info_falls_back_to_pending_order_id(self):
        info = LinkInfo.from_payload('CODE', {
            'orderStatus': LinkOrderStatus.EXPIRED.value,
            'pendingP2PInfo': {'orderId': 'P-1', 'amount': 10},
        })
        
        assert info.order_id == 'P-1'
        assert info.amount == 10
        assert info.pending is False
        assert info.is_set_passcode is False
    
    def test_created_link_code(self):
        link = CreatedLink.from_payload({'link': 'https://pay.paypay.ne.jp/AbC123'})
        
        assert link.verification_code == 'AbC123'


class TestUtils:
    """Tests for utility helpers."""
    
    def test_generate_uuid(self):
        value = generate_uuid()
        
        assert value == value.upper()
        assert len(value) == 36
        assert generate_uuid() != value
    
    def test_tokyo_timestamp(self):
        moment = datetime(2024, 1, 31, 20, 30, 15, tzinfo=timezone.utc)
        
        assert tokyo_timestamp(moment) == '2024-02-01T05:30:15+0900'
    
    def test_tokyo_timestamp_naive_is_utc(self):
        assert tokyo_timestamp(datetime(2024, 1, 1, 0, 0, 0)) == '2024-01-01T09:00:00+0900'
    
    def test_tokyo_timestamp_now(self):
        assert tokyo_timestamp().endswith('+0900')
    
    @pytest.mark.parametrize('value,expected', [
        ('ABC123', 'ABC123'),
        (' ABC123 ', 'ABC123'),
        ('https://pay.paypay.ne.jp/ABC123', 'ABC123'),
        ('https://pay.paypay.ne.jp/ABC123/', 'ABC123'),
    ])
    def test_extract_link_code(self, value, expected):
        assert extract_link_code(value) == expected
