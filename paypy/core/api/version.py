"""
App version lookup.

The PayPay backend expects a recent iOS app version in Client-Version.
The current one is read from a public app-version directory; any failure
falls back to a hardcoded version.
"""
import asyncio
from typing import Any, Optional

import aiohttp

from .async_client import AsyncAPIClient
from ..logging import get_logger

logger = get_logger('paypy.version')


class AppVersionResolver:
    """
    Resolves and caches the app version for one client.
    
    The lookup runs at most once successfully; the result (or fallback)
    is cached for the lifetime of the resolver.
    """
    
    def __init__(self, api: AsyncAPIClient, url: str, fallback: str):
        """
        Initialize resolver.
        
        Args:
            api: Transport used for the lookup
            url: Version directory URL returning a list of version records
            fallback: Version used when the lookup fails
        """
        self._api = api
        self._url = url
        self._fallback = fallback
        self._version: Optional[str] = None
        self._pending: Optional[asyncio.Future] = None
    
    @property
    def version(self) -> str:
        """Cached version, or the fallback when not resolved yet."""
        return self._version or self._fallback
    
    @property
    def resolved(self) -> bool:
        return self._version is not None
    
    @staticmethod
    def latest_version(records: Any) -> Optional[str]:
        """Pick the bundleVersion of the most recent record."""
        if not isinstance(records, list) or not records:
            return None
        last = records[-1]
        if not isinstance(last, dict):
            return None
        version = last.get('bundleVersion')
        return str(version) if version else None
    
    async def fetch(self) -> Optional[str]:
        """Query the version directory once, without caching."""
        records = await self._api.get_json(self._url)
        return self.latest_version(records)
    
    async def resolve(self) -> str:
        """
        Return the app version, fetching it on first use.
        
        Concurrent callers share one in-flight lookup.
        Never raises: lookup failures yield the fallback version.
        """
        if self._version is not None:
            return self._version
        
        if self._pending is None:
            self._pending = asyncio.ensure_future(self._lookup())
        return await asyncio.shield(self._pending)
    
    async def _lookup(self) -> str:
        try:
            version = await self.fetch()
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            logger.warning(f"App version lookup failed, using {self._fallback}: {e}")
            version = None
        
        if not version:
            self._version = self._fallback
        else:
            self._version = version
            logger.debug(f"Resolved app version {version}")
        return self._version
