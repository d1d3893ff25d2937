"""Tests for app version resolution."""
import asyncio

import pytest
from unittest.mock import Mock, AsyncMock

import aiohttp

from paypy.core.api import AppVersionResolver


@pytest.fixture
def api():
    transport = Mock()
    transport.get_json = AsyncMock()
    return transport


class TestAppVersionResolver:
    """Test suite for AppVersionResolver."""
    
    def test_latest_version(self):
        records = [{'bundleVersion': '3.0.0'}, {'bundleVersion': '4.2.1'}]
        
        assert AppVersionResolver.latest_version(records) == '4.2.1'
    
    @pytest.mark.parametrize('records', [None, [], {}, ['x'], [{'appId': 1}]])
    def test_latest_version_malformed(self, records):
        assert AppVersionResolver.latest_version(records) is None
    
    def test_version_before_resolve(self, api):
        resolver = AppVersionResolver(api, 'https://v.example', '1.0.0')
        
        assert resolver.version == '1.0.0'
        assert resolver.resolved is False
    
    @pytest.mark.asyncio
    async def test_resolve_caches(self, api):
        api.get_json.return_value = [{'bundleVersion': '4.2.1'}]
        resolver = AppVersionResolver(api, 'https://v.example', '1.0.0')
        
        assert await resolver.resolve() == '4.2.1'
        assert await resolver.resolve() == '4.2.1'
        
        api.get_json.assert_awaited_once_with('https://v.example')
    
    @pytest.mark.asyncio
    @pytest.mark.parametrize('error', [
        aiohttp.ClientConnectionError('refused'),
        ValueError('not json'),
    ])
    async def test_resolve_falls_back(self, api, error):
        api.get_json.side_effect = error
        resolver = AppVersionResolver(api, 'https://v.example', '1.0.0')
        
        assert await resolver.resolve() == '1.0.0'
        assert resolver.resolved is True
    
    @pytest.mark.asyncio
    async def test_resolve_empty_directory(self, api):
        api.get_json.return_value = []
        resolver = AppVersionResolver(api, 'https://v.example', '1.0.0')
        
        assert await resolver.resolve() == '1.0.0'
    
    @pytest.mark.asyncio
    async def test_concurrent_resolve_shares_lookup(self, api):
        """Callers arriving during the lookup wait for the same fetch."""
        async def slow_directory(url):
            await asyncio.sleep(0.05)
            return [{'bundleVersion': '4.2.1'}]
        
        api.get_json.side_effect = slow_directory
        resolver = AppVersionResolver(api, 'https://v.example', '1.0.0')
        
        versions = await asyncio.gather(*(resolver.resolve() for _ in range(5)))
        
        assert versions == ['4.2.1'] * 5
        assert api.get_json.await_count == 1
    
    @pytest.mark.asyncio
    async def test_concurrent_resolve_failure_shares_fallback(self, api):
        async def failing_directory(url):
            await asyncio.sleep(0.05)
            raise aiohttp.ClientConnectionError('refused')
        
        api.get_json.side_effect = failing_directory
        resolver = AppVersionResolver(api, 'https://v.example', '1.0.0')
        
        versions = await asyncio.gather(resolver.resolve(), resolver.resolve())
        
        assert versions == ['1.0.0', '1.0.0']
        assert api.get_json.await_count == 1
