"""HTTP client utility for identity provider communication.

Wraps a lazily created ``httpx.AsyncClient`` bound to the configured identity
URL. Transport failures surface as ``ConnectionError``; non-2xx answers surface
as ``IdentityRejectedError`` when they mean "bad credential" and as
``AuthStoreError`` otherwise.
"""

import asyncio
from typing import Any, Dict, Optional

import httpx

from ..errors import AuthStoreError, ConnectionError, IdentityRejectedError
from ..models.config import AuthStoreConfig
from .data_masker import DataMasker
from .http_error_handler import is_rejection_status, parse_error_response


class IdentityHttpClient:
    """HTTP client for identity provider requests."""

    def __init__(
        self,
        config: AuthStoreConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize identity HTTP client with configuration.

        Args:
            config: auth-store configuration
            transport: Optional httpx transport (used by tests)

        """
        self.config = config
        self.client: Optional[httpx.AsyncClient] = None
        self._transport = transport

    async def _initialize_client(self):
        """Initialize HTTP client if not already initialized."""
        if self.client is None:
            self.client = httpx.AsyncClient(
                base_url=self.config.identity_url.rstrip("/") + "/",
                timeout=self.config.identity_timeout,
                headers={
                    "Content-Type": "application/json",
                    "Accept": "application/json",
                },
                transport=self._transport,
            )

    async def connect(self):
        """Create the underlying HTTP client ahead of the first request."""
        await self._initialize_client()

    async def close(self):
        """Close the HTTP client."""
        if self.client:
            try:
                await self.client.aclose()
            except (RuntimeError, asyncio.CancelledError):
                # Event loop closed or cancelled during teardown
                pass
            finally:
                self.client = None

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    def _create_error_from_http_status(self, error: httpx.HTTPStatusError) -> AuthStoreError:
        """Create AuthStoreError from HTTP status error.

        Args:
            error: The HTTPStatusError from httpx

        Returns:
            IdentityRejectedError for credential rejections, AuthStoreError otherwise

        """
        status_code = error.response.status_code
        fault = parse_error_response(error.response)
        error_body: Optional[Dict[str, Any]] = None
        if fault is not None:
            error_body = DataMasker.mask_sensitive_data(fault.model_dump())
            message = f"HTTP {status_code}: {fault.message or fault.name}"
        else:
            message = f"HTTP {status_code}: {error.response.text}"

        error_class = IdentityRejectedError if is_rejection_status(status_code) else AuthStoreError
        return error_class(message, status_code=status_code, error_body=error_body)

    async def post(self, url: str, data: Optional[Dict[str, Any]] = None, **kwargs) -> Any:
        """Make POST request.

        Args:
            url: Request URL, relative to the identity base URL
            data: Request data (will be JSON encoded)
            **kwargs: Additional httpx request parameters

        Returns:
            Response data (JSON parsed), or None for an empty body

        Raises:
            IdentityRejectedError: If the provider refuses the credential
            ConnectionError: If the provider cannot be reached
            AuthStoreError: For any other failed request

        """
        await self._initialize_client()
        try:
            assert self.client is not None
            response = await self.client.post(url, json=data, **kwargs)
            response.raise_for_status()
            if not response.content:
                return None
            return response.json()
        except httpx.HTTPStatusError as e:
            raise self._create_error_from_http_status(e)
        except httpx.RequestError as e:
            raise ConnectionError(f"Request failed: {str(e)}")
        except ValueError as e:
            raise AuthStoreError(f"Invalid identity response: {str(e)}")
