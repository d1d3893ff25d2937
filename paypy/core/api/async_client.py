"""
Async PayPay API client.

Thin aiohttp transport: one request in, one decoded JSON object out.
"""
import json
import logging
from typing import Any, Dict, Optional

import aiohttp

from .config import APIConfig
from .request import PreparedRequest
from ..logging import get_logger


class AsyncAPIClient:
    """
    Asynchronous HTTP transport for the PayPay API.
    
    Features:
    - Full async/await support
    - Configurable proxy, SSL, timeouts
    - Lazily created, reusable connection pool
    
    Non-2xx responses are not raised; their JSON body is returned so the
    response classifier can decide what it means. Network errors and
    malformed JSON propagate unchanged and nothing is retried.
    
    Example:
        >>> async with AsyncAPIClient(APIConfig.default()) as api:
        ...     data = await api.get_json('https://example.com/v.json')
    """
    
    def __init__(self, config: Optional[APIConfig] = None):
        """
        Initialize async API client.
        
        Args:
            config: API configuration (uses defaults if not provided)
        """
        self._config = config or APIConfig.default()
        self._session: Optional[aiohttp.ClientSession] = None
        self._connector: Optional[aiohttp.TCPConnector] = None
        
        self._logger = get_logger('paypy.api')
        root_logger = logging.getLogger()
        if not root_logger.handlers:
            self._logger.setLevel(self._config.log_level)
    
    @property
    def config(self) -> APIConfig:
        """Get current configuration."""
        return self._config
    
    @property
    def closed(self) -> bool:
        return self._session is None or self._session.closed
    
    async def __aenter__(self) -> 'AsyncAPIClient':
        """Async context manager entry."""
        await self._ensure_session()
        return self
    
    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()
    
    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure session is created and open."""
        if self._session is None or self._session.closed:
            self._connector = aiohttp.TCPConnector(
                **self._config.get_connector_kwargs()
            )
            self._session = aiohttp.ClientSession(
                connector=self._connector,
                **self._config.get_session_kwargs()
            )
        return self._session
    
    async def close(self):
        """Close client and release resources."""
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None
        
        if self._connector and not self._connector.closed:
            await self._connector.close()
        self._connector = None
    
    def _proxy(self) -> Optional[str]:
        return self._config.proxy.to_aiohttp_proxy() if self._config.proxy else None
    
    async def send(self, request: PreparedRequest) -> Any:
        """
        Issue a prepared request and decode its JSON body.
        
        Args:
            request: Request built by RequestBuilder
            
        Returns:
            Decoded JSON response
            
        Raises:
            aiohttp.ClientError: On network failure
            json.JSONDecodeError: If the body is empty or not JSON
        """
        session = await self._ensure_session()
        
        self._logger.debug(f"{request.method} {request.url}")
        
        async with session.request(
            request.method,
            request.url,
            params=request.params or None,
            json=request.body,
            headers=request.headers,
            proxy=self._proxy()
        ) as response:
            response_text = await response.text()
            self._logger.debug(
                f"{request.method} {request.url} -> HTTP {response.status}"
            )
            # An empty body is malformed too: json.loads raises on it
            return json.loads(response_text)
    
    async def get_json(self, url: str, headers: Optional[Dict[str, str]] = None) -> Any:
        """
        Fetch a JSON document from an arbitrary URL.
        
        Used for collaborators outside the PayPay host (version lookup).
        Raises for non-2xx statuses.
        """
        session = await self._ensure_session()
        self._logger.debug(f"GET {url}")
        
        async with session.get(url, headers=headers, proxy=self._proxy()) as response:
            response.raise_for_status()
            return await response.json(content_type=None)
