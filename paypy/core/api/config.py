"""
API configuration module.

Provides configuration for the PayPay API client, including the
simulated mobile device the client presents itself as.
"""
from dataclasses import dataclass, field
from typing import Optional, Dict, Any
import ssl

import aiohttp


DEFAULT_APP_VERSION = '3.41.1'


@dataclass
class ProxyConfig:
    """
    Proxy configuration.
    
    Supports HTTP and HTTPS proxies.
    """
    url: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    
    def to_aiohttp_proxy(self) -> Optional[str]:
        """Convert to aiohttp proxy format."""
        if not self.url:
            return None
        
        url = self.url if '://' in self.url else f"http://{self.url}"
        if self.username and self.password:
            protocol, rest = url.split('://', 1)
            return f"{protocol}://{self.username}:{self.password}@{rest}"
        
        return url


@dataclass
class SSLConfig:
    """SSL/TLS configuration."""
    verify: bool = True
    ca_file: Optional[str] = None
    
    def create_ssl_context(self):
        """Create SSL context from configuration."""
        if not self.verify:
            return False
        
        context = ssl.create_default_context()
        if self.ca_file:
            context.load_verify_locations(self.ca_file)
        return context


@dataclass
class TimeoutConfig:
    """
    Timeout configuration.
    
    The only way to bound a call; the client itself never cancels.
    """
    total: float = 60.0
    connect: float = 15.0
    sock_read: float = 30.0
    
    def to_aiohttp_timeout(self) -> aiohttp.ClientTimeout:
        """Convert to aiohttp ClientTimeout."""
        return aiohttp.ClientTimeout(
            total=self.total,
            connect=self.connect,
            sock_read=self.sock_read
        )


@dataclass
class DeviceProfile:
    """
    Simulated iOS client identity.
    
    Rendered into the header bundle attached to every request.
    """
    user_agent: str = 'PaypayApp/3.41.202205170207 CFNetwork/1126 Darwin/19.5.0'
    device_name: str = 'iPhone9,1'
    os_type: str = 'IOS'
    os_version: str = '13.5.0'
    client_type: str = 'PAYPAYAPP'
    client_mode: str = 'NORMAL'
    network_status: str = 'WIFI'
    system_locale: str = 'ja'
    accept_language: str = 'ja-jp'
    timezone: str = 'Asia/Tokyo'
    
    def to_headers(self, client_uuid: str, device_uuid: str, app_version: str) -> Dict[str, str]:
        """Build the static header bundle for this device."""
        return {
            'User-Agent': self.user_agent,
            'Client-Type': self.client_type,
            'Client-OS-Type': self.os_type,
            'Client-OS-Version': self.os_version,
            'Client-Version': app_version,
            'Client-Mode': self.client_mode,
            'Client-UUID': client_uuid,
            'Device-UUID': device_uuid,
            'Device-Name': self.device_name,
            'Network-Status': self.network_status,
            'System-Locale': self.system_locale,
            'Accept-Language': self.accept_language,
            'Timezone': self.timezone,
            'Accept': '*/*',
            'Content-Type': 'application/json',
        }


@dataclass
class APIConfig:
    """
    Complete API configuration.
    
    Centralizes all configuration options for the PayPay API client.
    """
    # Gateway settings
    host: str = 'app4.paypay.ne.jp'
    language: str = 'ja'
    
    # App version lookup
    version_lookup_url: str = 'https://api.cokepokes.com/v-api/app/1435783608'
    fallback_app_version: str = DEFAULT_APP_VERSION
    
    # Simulated device
    device: DeviceProfile = field(default_factory=DeviceProfile)
    
    # Sub-configurations
    proxy: Optional[ProxyConfig] = None
    ssl: SSLConfig = field(default_factory=SSLConfig)
    timeout: TimeoutConfig = field(default_factory=TimeoutConfig)
    
    # Additional headers
    extra_headers: Dict[str, str] = field(default_factory=dict)
    
    # Logging
    log_level: int = 20  # logging.INFO
    
    @property
    def base_url(self) -> str:
        return f"https://{self.host}"
    
    @classmethod
    def default(cls) -> 'APIConfig':
        """Create default configuration."""
        return cls()
    
    @classmethod
    def with_proxy(cls, proxy_url: str, **kwargs) -> 'APIConfig':
        """Create configuration with proxy."""
        return cls(
            proxy=ProxyConfig(url=proxy_url),
            **kwargs
        )
    
    def get_connector_kwargs(self) -> Dict[str, Any]:
        """Get kwargs for aiohttp TCPConnector."""
        return {
            'ssl': self.ssl.create_ssl_context(),
        }
    
    def get_session_kwargs(self) -> Dict[str, Any]:
        """Get kwargs for aiohttp ClientSession."""
        return {
            'timeout': self.timeout.to_aiohttp_timeout(),
        }
