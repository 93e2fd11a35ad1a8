"""
RegistryClient - Client for communicating with the premint registry service
"""

import logging
from typing import Any

import httpx

from zora_premint.config import PREMINT_API_BASE
from zora_premint.exceptions import RegistryRequestError, RegistrySubmissionError
from zora_premint.types import BackendChainName

logger = logging.getLogger(__name__)


def _decode_json(response: httpx.Response, error: type[RegistryRequestError]) -> Any:
    try:
        return response.json()
    except ValueError as e:
        logger.error(f"Registry returned non-JSON body: {response.text}")
        raise error(
            response.status_code, response.text, message="Registry returned a non-JSON body"
        ) from e


class RegistryClient:
    """
    Client for communicating with the premint registry.

    Handles uid allocation, signature submission and record lookup.
    """

    def __init__(
        self,
        base_url: str = PREMINT_API_BASE,
        headers: dict[str, str] | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize registry client.

        Args:
            base_url: Registry service base URL
            headers: Custom HTTP headers
            http_client: Pre-configured httpx.AsyncClient (optional)
        """
        self._base_url = base_url.rstrip("/") + "/"
        self._headers = {
            "content-type": "application/json",
            "accept": "application/json",
            **(headers or {}),
        }
        self._http_client = http_client
        self._owns_client = http_client is None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client"""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                base_url=self._base_url,
                headers=self._headers,
                timeout=30.0,
            )
        return self._http_client

    async def close(self) -> None:
        """Close HTTP client"""
        if self._http_client and self._owns_client:
            await self._http_client.aclose()
            self._http_client = None

    async def __aenter__(self) -> "RegistryClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    def _url(self, path: str) -> str:
        return f"{self._base_url}{path}"

    async def _get(self, path: str) -> Any:
        client = await self._get_client()
        logger.debug("Registry GET", extra={"path": path})
        response = await client.get(self._url(path), headers=self._headers)
        if response.status_code != 200:
            logger.error(f"Registry error {response.status_code}: {response.text}")
            raise RegistryRequestError(response.status_code, response.text)
        return _decode_json(response, RegistryRequestError)

    async def get_next_uid(self, chain_name: BackendChainName, address: str) -> Any:
        """
        Query the next unused uid for a collection address.

        Args:
            chain_name: Registry backend chain name
            address: Deterministic collection address

        Returns:
            Registry response, expected to hold ``next_uid``
        """
        return await self._get(f"signature/{chain_name.value}/{address.lower()}/next_uid")

    async def get_signature(self, chain_name: BackendChainName, address: str, uid: int) -> Any:
        """
        Fetch a signed premint record.

        Args:
            chain_name: Registry backend chain name
            address: Collection address
            uid: Premint uid

        Returns:
            Wire record with string-encoded integers
        """
        return await self._get(f"signature/{chain_name.value}/{address}/{uid}")

    async def submit_signature(self, payload: dict[str, Any]) -> Any:
        """
        Submit a signed premint record.

        Args:
            payload: Wire record with string-encoded integers

        Returns:
            Registry response body

        Raises:
            RegistrySubmissionError: On any non-200 response
        """
        client = await self._get_client()
        response = await client.post(self._url("signature"), json=payload, headers=self._headers)
        if response.status_code != 200:
            logger.error(f"Registry rejected submission {response.status_code}: {response.text}")
            raise RegistrySubmissionError(response.status_code, response.text)

        logger.info(
            "Premint submitted",
            extra={"chain_name": payload.get("chain_name"), "uid": payload["premint"].get("uid")},
        )
        return _decode_json(response, RegistrySubmissionError)
