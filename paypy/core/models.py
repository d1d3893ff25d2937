"""
PayPay data models.

Dataclasses for session state and for the payloads returned by the
PayPay API. Each payload model keeps the raw dictionary in ``raw`` so
fields not modelled here remain reachable.
"""
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any, Dict, List, Optional
import json


@dataclass
class Session:
    """
    Identity and credentials of one PayPay client.

    Callers persist this themselves if they want to resume later;
    the library never writes it anywhere.

    Attributes:
        client_uuid: Client identifier, stable per installation
        device_uuid: Device identifier, stable per installation
        access_token: Bearer token (absent until login completes)
        refresh_token: Refresh token returned alongside the access token
    """
    client_uuid: str
    device_uuid: str
    access_token: Optional[str] = None
    refresh_token: Optional[str] = None

    @property
    def authenticated(self) -> bool:
        return bool(self.access_token)

    def to_dict(self) -> dict:
        return {
            'client_uuid': self.client_uuid,
            'device_uuid': self.device_uuid,
            'access_token': self.access_token,
            'refresh_token': self.refresh_token,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Session':
        return cls(
            client_uuid=data['client_uuid'],
            device_uuid=data['device_uuid'],
            access_token=data.get('access_token'),
            refresh_token=data.get('refresh_token'),
        )

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, json_str: str) -> 'Session':
        return cls.from_dict(json.loads(json_str))


class LoginStatus(IntEnum):
    """Outcome of a login attempt."""
    DONE = 0
    OTP_REQUIRED = 1


@dataclass(frozen=True)
class OtpChallenge:
    """SMS verification handle returned when sign-in needs an OTP."""
    otp_reference_id: str
    otp_prefix: str


@dataclass(frozen=True)
class LoginResult:
    """
    Result of login() or login_otp().

    ``access_token``/``refresh_token`` are set when status is DONE,
    ``otp`` when status is OTP_REQUIRED.
    """
    status: LoginStatus
    access_token: Optional[str] = None
    refresh_token: Optional[str] = None
    otp: Optional[OtpChallenge] = None

    @property
    def otp_required(self) -> bool:
        return self.status is LoginStatus.OTP_REQUIRED

    @property
    def otp_reference_id(self) -> Optional[str]:
        return self.otp.otp_reference_id if self.otp else None

    @property
    def otp_prefix(self) -> Optional[str]:
        return self.otp.otp_prefix if self.otp else None


def _balance(info: Optional[Dict[str, Any]]) -> Optional[int]:
    if not info:
        return None
    return info.get('balance')


@dataclass
class BalanceInfo:
    """Wallet balance in JPY."""
    balance: int
    prepaid: Optional[int] = None
    cashback: Optional[int] = None
    emoney: Optional[int] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> 'BalanceInfo':
        summary = payload.get('walletSummary') or {}
        detail = payload.get('walletDetail') or {}
        return cls(
            balance=_balance(summary.get('allTotalBalanceInfo')) or 0,
            prepaid=_balance(detail.get('prepaidBalanceInfo')),
            cashback=_balance(detail.get('cashBackBalanceInfo')),
            emoney=_balance(detail.get('emoneyBalanceInfo')),
            raw=payload,
        )


class OrderType(str, Enum):
    """Direction/type of a wallet transaction."""
    P2P_RECEIVE = 'P2PRECEIVE'
    REFUND = 'REFUND'
    TOPUP = 'TOPUP'
    CASHBACK = 'CASHBACK'
    P2P_SEND = 'P2PSEND'
    ACQUIRING = 'ACQUIRING'
    UNKNOWN = 'UNKNOWN'

    @classmethod
    def parse(cls, value: Optional[str]) -> 'OrderType':
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN


@dataclass
class TransactionRecord:
    """One entry of the balance history."""
    order_id: str
    history_id: str
    order_type: OrderType
    order_status: str
    amount: int
    description: str
    date_time: str
    status_label: str = ''
    image_url: str = ''
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_payload(cls, item: Dict[str, Any]) -> 'TransactionRecord':
        return cls(
            order_id=item.get('orderId', ''),
            history_id=item.get('historyId', ''),
            order_type=OrderType.parse(item.get('orderType')),
            order_status=item.get('orderStatus', ''),
            amount=item.get('totalAmount', 0),
            description=item.get('description', ''),
            date_time=item.get('dateTime', ''),
            status_label=item.get('statusLabelString', ''),
            image_url=item.get('imageUrl', ''),
            raw=item,
        )


class LinkOrderStatus(str, Enum):
    """Lifecycle of a peer-to-peer payment link."""
    PENDING = 'PENDING'
    SUCCESS = 'SUCCESS'
    REJECTED = 'REJECTED'
    EXPIRED = 'EXPIRED'


@dataclass
class LinkInfo:
    """Result of inspecting a payment link."""
    verification_code: str
    order_status: str
    order_id: str
    amount: int
    is_set_passcode: bool
    message_id: str
    chat_room_id: str
    sender_name: str = ''
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @property
    def pending(self) -> bool:
        return self.order_status == LinkOrderStatus.PENDING.value

    @classmethod
    def from_payload(cls, code: str, payload: Dict[str, Any]) -> 'LinkInfo':
        pending = payload.get('pendingP2PInfo') or {}
        message = payload.get('message') or {}
        data = message.get('data') or {}
        sender = payload.get('sender') or {}
        return cls(
            verification_code=code,
            order_status=payload.get('orderStatus', ''),
            order_id=data.get('orderId') or pending.get('orderId', ''),
            amount=pending.get('amount', data.get('amount', 0)),
            is_set_passcode=bool(pending.get('isSetPasscode')),
            message_id=message.get('messageId', ''),
            chat_room_id=message.get('chatRoomId', ''),
            sender_name=sender.get('displayName', ''),
            raw=payload,
        )


@dataclass
class CreatedLink:
    """A send-money link created by this account."""
    link: str
    order_id: str
    order_status: str
    request_id: str
    chat_room_id: str = ''
    message_id: str = ''
    expiry: str = ''
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @property
    def verification_code(self) -> str:
        return self.link.rstrip('/').rsplit('/', 1)[-1]

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> 'CreatedLink':
        return cls(
            link=payload.get('link', ''),
            order_id=payload.get('orderId', ''),
            order_status=payload.get('orderStatus', ''),
            request_id=payload.get('requestId', ''),
            chat_room_id=payload.get('chatRoomId', ''),
            message_id=payload.get('messageId', ''),
            expiry=payload.get('expiry', ''),
            raw=payload,
        )


@dataclass
class Profile:
    """Account profile."""
    external_user_id: str
    display_name: Optional[str]
    phone_number: str
    nick_name: Optional[str] = None
    avatar_image_url: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> 'Profile':
        user = payload.get('userProfile') or {}
        return cls(
            external_user_id=user.get('externalUserId', ''),
            display_name=user.get('displayName'),
            phone_number=user.get('phoneNumber', ''),
            nick_name=user.get('nickName'),
            avatar_image_url=user.get('avatarImageUrl'),
            raw=payload,
        )


def parse_history(payload: Dict[str, Any]) -> List[TransactionRecord]:
    """Parse the paymentInfoList of a history payload."""
    return [
        TransactionRecord.from_payload(item)
        for item in payload.get('paymentInfoList') or []
    ]
