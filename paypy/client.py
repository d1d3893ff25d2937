"""
PayPayClient - High-level async client for the PayPay mobile API.

Example:
    >>> async with PayPayClient() as paypay:
    ...     result = await paypay.login("090-1234-5678", "password")
    ...     if result.otp_required:
    ...         await paypay.login_otp(result.otp_reference_id, input("OTP: "))
    ...     print(await paypay.get_balance())
"""
from typing import Any, Dict, List, Optional

from .core.api import (
    AsyncAPIClient,
    APIConfig,
    AppVersionResolver,
    RequestBuilder,
    ResponseHandler,
    RemoteResult,
    Success,
    OtpChallengeResult,
    classify
)
from .core.exceptions import (
    PayPayError,
    SessionNotEstablished,
    InvalidCredentials,
    InvalidOtp,
    LinkNotPending,
    PasscodeRequired
)
from .core.logging import get_logger
from .core.models import (
    Session,
    LoginStatus,
    LoginResult,
    OtpChallenge,
    BalanceInfo,
    TransactionRecord,
    LinkInfo,
    CreatedLink,
    Profile,
    parse_history
)
from .core.utils import generate_uuid, tokyo_timestamp, extract_link_code

logger = get_logger(__name__)

MINIMUM_CLIENT_VERSION = '2.55.0'
SEND_MONEY_THEME = 'default-sendmoney'


class PayPayClient:
    """
    Async client for one PayPay account.

    The client is either anonymous (no access token) or authenticated.
    Only login() and login_otp() may be called while anonymous; every
    other operation raises SessionNotEstablished without touching the
    network.

    A revoked token is reported as TokenRevoked but does not log the
    client out; re-authenticating is left to the caller.

    Fresh session:
        >>> paypay = PayPayClient()
        >>> await paypay.login(phone, password)

    Resumed session:
        >>> paypay = PayPayClient(access_token=token,
        ...                       client_uuid=cu, device_uuid=du)
    """

    def __init__(
        self,
        access_token: Optional[str] = None,
        client_uuid: Optional[str] = None,
        device_uuid: Optional[str] = None,
        refresh_token: Optional[str] = None,
        config: Optional[APIConfig] = None,
        api: Optional[AsyncAPIClient] = None,
        version_resolver: Optional[AppVersionResolver] = None
    ):
        """
        Initialize client.

        Args:
            access_token: Existing bearer token to resume a session
            client_uuid: Client identifier (random if omitted)
            device_uuid: Device identifier (random if omitted)
            refresh_token: Refresh token paired with access_token
            config: API configuration
            api: Transport to use instead of a private AsyncAPIClient
            version_resolver: App version source
        """
        self._config = config or APIConfig.default()
        self._session = Session(
            client_uuid=client_uuid or generate_uuid(),
            device_uuid=device_uuid or generate_uuid(),
            access_token=access_token,
            refresh_token=refresh_token
        )
        self._owns_api = api is None
        self._api = api or AsyncAPIClient(self._config)
        self._builder = RequestBuilder(
            self._config,
            self._session.client_uuid,
            self._session.device_uuid
        )
        self._version = version_resolver or AppVersionResolver(
            self._api,
            self._config.version_lookup_url,
            self._config.fallback_app_version
        )

    @classmethod
    def from_session(cls, session: Session, **kwargs) -> 'PayPayClient':
        """Create a client resuming a previously saved Session."""
        return cls(
            access_token=session.access_token,
            client_uuid=session.client_uuid,
            device_uuid=session.device_uuid,
            refresh_token=session.refresh_token,
            **kwargs
        )

    def to_session(self) -> Session:
        """Snapshot of the current identity and tokens, for persisting."""
        return Session(**self._session.to_dict())

    # Session state

    @property
    def client_uuid(self) -> str:
        return self._session.client_uuid

    @property
    def device_uuid(self) -> str:
        return self._session.device_uuid

    @property
    def access_token(self) -> Optional[str]:
        return self._session.access_token

    @property
    def refresh_token(self) -> Optional[str]:
        return self._session.refresh_token

    @property
    def authenticated(self) -> bool:
        """True once an access token is held."""
        return self._session.authenticated

    # Alias for compatibility
    @property
    def logged(self) -> bool:
        return self._session.authenticated

    @property
    def app_version(self) -> str:
        """App version sent in Client-Version (fallback until resolved)."""
        return self._version.version

    @property
    def config(self) -> APIConfig:
        return self._config

    # Lifecycle

    async def initialize(self) -> str:
        """
        Resolve the app version ahead of the first request.

        Optional: requests resolve it lazily otherwise. Never raises.

        Returns:
            The app version in use
        """
        return await self._version.resolve()

    async def close(self):
        """Close the transport if this client created it."""
        if self._owns_api:
            await self._api.close()

    async def __aenter__(self) -> 'PayPayClient':
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    # Internals

    def _require_session(self) -> str:
        if not self._session.authenticated:
            raise SessionNotEstablished()
        return self._session.access_token

    async def _call(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        body: Optional[Dict[str, Any]] = None,
        access_token: Optional[str] = None
    ) -> RemoteResult:
        """Build, send and classify a single request."""
        version = await self._version.resolve()
        request = self._builder.build(
            method,
            path,
            version,
            access_token=access_token,
            params=params,
            body=body
        )
        data = await self._api.send(request)
        return classify(data)

    async def _authorized(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        body: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """Run an authorized call and return its success payload."""
        token = self._require_session()
        result = await self._call(method, path, params, body, access_token=token)
        return ResponseHandler.expect_success(result)

    def _store_tokens(self, payload: Dict[str, Any], error: PayPayError) -> LoginResult:
        access_token = payload.get('accessToken')
        if not access_token:
            raise error
        self._session.access_token = access_token
        self._session.refresh_token = payload.get('refreshToken')
        logger.info("PayPay login completed")
        return LoginResult(
            status=LoginStatus.DONE,
            access_token=access_token,
            refresh_token=self._session.refresh_token
        )

    @staticmethod
    def _stamp() -> Dict[str, str]:
        return {
            'requestId': generate_uuid(),
            'requestAt': tokyo_timestamp(),
            'iosMinimumVersion': MINIMUM_CLIENT_VERSION,
            'androidMinimumVersion': MINIMUM_CLIENT_VERSION,
        }

    # Authentication

    async def login(self, phone_number: str, password: str) -> LoginResult:
        """
        Sign in with phone number and password.

        Args:
            phone_number: Registered phone number (hyphens allowed)
            password: Account password

        Returns:
            LoginResult with status DONE, or OTP_REQUIRED carrying the
            challenge to pass to login_otp()

        Raises:
            InvalidCredentials: If the server neither accepts nor challenges
        """
        result = await self._call('POST', '/bff/v1/signIn', body={
            'phoneNumber': phone_number.replace('-', ''),
            'password': password,
        })

        if isinstance(result, OtpChallengeResult):
            logger.info(f"SMS verification required ({result.otp_prefix})")
            return LoginResult(
                status=LoginStatus.OTP_REQUIRED,
                otp=OtpChallenge(
                    otp_reference_id=result.otp_reference_id,
                    otp_prefix=result.otp_prefix
                )
            )

        if isinstance(result, Success):
            return self._store_tokens(result.payload, InvalidCredentials())

        logger.debug(f"Sign-in rejected: {result.result_code} {result.result_message}")
        raise InvalidCredentials()

    async def login_otp(self, otp_reference_id: str, otp: str) -> LoginResult:
        """
        Complete an OTP-challenged sign-in.

        Args:
            otp_reference_id: Reference returned by login()
            otp: Code received by SMS

        Returns:
            LoginResult with status DONE

        Raises:
            InvalidOtp: If verification does not succeed
        """
        result = await self._call('POST', '/bff/v1/signInWithSms', body={
            'otp': otp,
            'otpReferenceId': otp_reference_id,
        })

        if isinstance(result, Success):
            return self._store_tokens(result.payload, InvalidOtp())

        logger.debug(f"OTP rejected: {result.result_code} {result.result_message}")
        raise InvalidOtp()

    complete_otp = login_otp

    # Wallet

    async def get_balance(self) -> BalanceInfo:
        """Get wallet balance."""
        payload = await self._authorized('GET', '/bff/v1/getBalanceInfo', params={
            'includeKycInfo': False,
            'includePending': False,
            'includePendingBonusLite': False,
            'noCache': True,
        })
        return BalanceInfo.from_payload(payload)

    async def get_history(self, page_size: int = 40) -> List[TransactionRecord]:
        """
        Get recent balance history.

        Args:
            page_size: Number of entries to request
        """
        payload = await self._authorized('GET', '/bff/v2/getPay2BalanceHistory', params={
            'pageSize': page_size,
        })
        return parse_history(payload)

    async def get_profile(self) -> Profile:
        """Get account profile."""
        payload = await self._authorized('GET', '/bff/v2/getProfileDisplayInfo')
        return Profile.from_payload(payload)

    # Peer-to-peer

    async def create_link(self, amount: int, passcode: Optional[str] = None) -> CreatedLink:
        """
        Create a send-money link.

        Args:
            amount: Amount in JPY
            passcode: Optional 4-digit passcode the receiver must enter
        """
        self._require_session()
        if amount <= 0:
            raise ValueError("amount must be positive")

        body = {
            **self._stamp(),
            'theme': SEND_MONEY_THEME,
            'amount': str(amount),
        }
        if passcode:
            body['passcode'] = passcode

        payload = await self._authorized('POST', '/bff/v2/executeP2PSendMoneyLink', body=body)
        return CreatedLink.from_payload(payload)

    async def get_link_info(self, code: str) -> LinkInfo:
        """
        Inspect a send-money link.

        Args:
            code: Verification code or full pay.paypay.ne.jp link
        """
        code = extract_link_code(code)
        payload = await self._authorized('GET', '/bff/v2/getP2PLinkInfo', params={
            'verificationCode': code,
        })
        return LinkInfo.from_payload(code, payload)

    inspect_link = get_link_info

    async def accept_link(self, code: str, passcode: Optional[str] = None) -> Dict[str, Any]:
        """
        Receive the money of a pending link.

        Args:
            code: Verification code or full link
            passcode: Passcode, when the link has one

        Returns:
            Acceptance payload

        Raises:
            LinkNotPending: If the link is not PENDING
            PasscodeRequired: If the link needs a passcode and none was given
            TokenRevoked: On a classified server error
            UnknownError: On any other failure
        """
        self._require_session()
        link = await self.get_link_info(code)

        if not link.pending:
            raise LinkNotPending(link.order_status)

        body = {'verificationCode': link.verification_code}
        if link.is_set_passcode:
            if not passcode:
                raise PasscodeRequired()
            body['passcode'] = passcode

        body.update(self._stamp())
        body.update({
            'orderId': link.order_id,
            'senderChannelUrl': link.chat_room_id,
            'senderMessageId': link.message_id,
        })

        return await self._authorized('POST', '/bff/v2/acceptP2PSendMoneyLink', body=body)

    async def send_money(self, amount: int, external_receiver_id: str) -> Dict[str, Any]:
        """
        Send money directly to another user.

        Args:
            amount: Amount in JPY
            external_receiver_id: Receiver's external user id
        """
        self._require_session()
        if amount <= 0:
            raise ValueError("amount must be positive")

        body = {
            **self._stamp(),
            'amount': amount,
            'externalReceiverId': external_receiver_id,
            'theme': SEND_MONEY_THEME,
        }
        return await self._authorized('POST', '/bff/v2/executeP2PSendMoney', body=body)
