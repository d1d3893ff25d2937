"""Request builder for API requests."""
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from ..config import APIConfig


@dataclass
class PreparedRequest:
    """A fully specified request, ready to hand to the transport."""
    method: str
    url: str
    headers: Dict[str, str]
    params: Dict[str, str] = field(default_factory=dict)
    body: Optional[Dict[str, Any]] = None


class RequestBuilder:
    """
    Builds API requests.
    
    Holds the device identity for one session and renders the same
    header bundle for every endpoint; only path, method, query and body
    vary between calls.
    """
    
    def __init__(self, config: APIConfig, client_uuid: str, device_uuid: str):
        """Initializes request builder."""
        self.config = config
        self.client_uuid = client_uuid
        self.device_uuid = device_uuid
    
    def build_url(self, path: str) -> str:
        """Builds request URL."""
        return f"{self.config.base_url}/{path.lstrip('/')}"
    
    def build_params(self, params: Optional[Dict[str, Any]] = None) -> Dict[str, str]:
        """Builds query parameters, always carrying the app language."""
        query = {'payPayLang': self.config.language}
        if params:
            for key, value in params.items():
                if isinstance(value, bool):
                    value = 'true' if value else 'false'
                query[key] = str(value)
        return query
    
    def build_headers(
        self,
        app_version: str,
        access_token: Optional[str] = None
    ) -> Dict[str, str]:
        """Builds request headers."""
        headers = self.config.device.to_headers(
            self.client_uuid,
            self.device_uuid,
            app_version
        )
        headers.update(self.config.extra_headers)
        if access_token:
            headers['Authorization'] = f"Bearer {access_token}"
        return headers
    
    def build(
        self,
        method: str,
        path: str,
        app_version: str,
        access_token: Optional[str] = None,
        params: Optional[Dict[str, Any]] = None,
        body: Optional[Dict[str, Any]] = None
    ) -> PreparedRequest:
        """Builds a complete request for one endpoint call."""
        return PreparedRequest(
            method=method.upper(),
            url=self.build_url(path),
            headers=self.build_headers(app_version, access_token),
            params=self.build_params(params),
            body=body
        )
