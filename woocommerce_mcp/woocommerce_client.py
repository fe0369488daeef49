"""
WooCommerce REST API Client

Thin async wrapper around the WooCommerce v3 REST API
(``{store}/wp-json/wc/v3/{resource}``) authenticated with a consumer
key/secret pair over HTTP Basic auth.
"""

import base64
import json
import shlex
from typing import Any, Dict, Mapping, Optional
from urllib.parse import urlencode

import httpx

from .exceptions import ClientNotInitializedError, WooCommerceAPIError, WooCommerceError
from .models.credentials import Credentials
from .utils.logger import get_logger

logger = get_logger(__name__)

API_PREFIX = "wp-json/wc/v3"


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(_stringify(v) for v in value)
    if isinstance(value, dict):
        return json.dumps(value, separators=(',', ':'))
    return str(value)


def build_query_params(params: Optional[Mapping[str, Any]]) -> Dict[str, str]:
    """Flatten a key/value map into query parameters; ``None`` values are dropped"""
    if not params:
        return {}
    return {str(key): _stringify(value) for key, value in params.items() if value is not None}


class WooCommerceClient:
    """Client for the WooCommerce REST API"""

    def __init__(
        self,
        credentials: Optional[Credentials] = None,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        debug_curl: bool = False
    ):
        """
        Initialize the WooCommerce client

        Args:
            credentials: Store URL and consumer key/secret. When any field is
                missing the client stays uninitialized and every call fails.
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
            debug_curl: Enable CURL command logging for debugging
        """
        self._transport = transport
        self.timeout = httpx.Timeout(timeout)
        self.debug_curl = debug_curl

        if credentials is not None and credentials.is_complete:
            self.base_url = credentials.url.rstrip('/')
            self._consumer_key = credentials.key
            self._consumer_secret = credentials.secret
            self.initialized = True
            logger.info(f"WooCommerceClient initialized for {self.base_url}")
        else:
            self.base_url = ""
            self._consumer_key = ""
            self._consumer_secret = ""
            self.initialized = False
            logger.warning("WooCommerceClient created without complete credentials")

    def _check_initialized(self):
        if not self.initialized:
            raise ClientNotInitializedError()

    def _auth_header(self) -> str:
        token = base64.b64encode(f"{self._consumer_key}:{self._consumer_secret}".encode()).decode()
        return f"Basic {token}"

    def _generate_curl_command(self, method: str, url: str, headers: Dict,
                               params: Optional[Dict], json_data: Any) -> str:
        """Generate curl command for debugging, with credentials masked"""
        curl_parts = ['curl', '-X', method.upper()]

        for key, value in headers.items():
            if key.lower() == 'authorization':
                value = 'Basic ***'
            curl_parts.extend(['-H', shlex.quote(f'{key}: {value}')])

        if json_data is not None:
            curl_parts.extend(['-d', shlex.quote(json.dumps(json_data, separators=(',', ':')))])

        if params:
            url = f"{url}?{urlencode(params)}"

        curl_parts.append(shlex.quote(url))
        return ' '.join(curl_parts)

    async def _make_request(
        self,
        method: str,
        endpoint: str,
        params: Optional[Mapping[str, Any]] = None,
        json_data: Any = None
    ) -> Any:
        """Make HTTP request to the WooCommerce REST API"""
        self._check_initialized()

        url = f"{self.base_url}/{API_PREFIX}/{endpoint.lstrip('/')}"
        query = build_query_params(params)
        headers = {
            "Authorization": self._auth_header(),
            "Content-Type": "application/json",
            "Accept": "application/json"
        }

        if self.debug_curl:
            logger.info(f"CURL: {self._generate_curl_command(method, url, headers, query, json_data)}")

        logger.info(f"[REQUEST] {method.upper()} {url}")
        if query:
            logger.debug(f"[REQUEST] Params: {query}")

        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            response = await client.request(
                method=method.upper(),
                url=url,
                params=query or None,
                json=json_data,
                headers=headers
            )

        logger.debug(f"{method.upper()} {url} -> {response.status_code}")

        if not response.is_success:
            reason = response.reason_phrase
            logger.error(f"HTTP {response.status_code} for {endpoint}: {response.text[:500]}")
            raise WooCommerceAPIError(response.status_code, reason, response.text, endpoint=endpoint)

        try:
            return response.json()
        except ValueError as e:
            raise WooCommerceError(f"WooCommerce API returned invalid JSON for {endpoint}: {e}") from e

    async def get(self, endpoint: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        """GET a resource or collection; params become the query string"""
        return await self._make_request("GET", endpoint, params=params)

    async def post(self, endpoint: str, data: Any) -> Any:
        """Create a resource"""
        return await self._make_request("POST", endpoint, json_data=data)

    async def put(self, endpoint: str, data: Any) -> Any:
        """Update a resource"""
        return await self._make_request("PUT", endpoint, json_data=data)

    async def delete(self, endpoint: str) -> Any:
        """Delete a resource"""
        return await self._make_request("DELETE", endpoint)
