"""Horizon backend REST client."""

from dataclasses import dataclass
from typing import Protocol

import httpx


class BackendClient(Protocol):
    """Interface for authenticated reads against the Horizon backend."""

    async def get(
        self, url: str, token: str, params: dict[str, str] | None = None
    ) -> object:
        """Fetch a URL and return the decoded JSON envelope."""


@dataclass
class HttpxBackendClient(BackendClient):
    """HTTPX-backed backend client."""

    http_client: httpx.AsyncClient
    timeout_seconds: float = 10

    @classmethod
    def create(cls, timeout_seconds: float = 10) -> "HttpxBackendClient":
        """Create a backend client with a managed httpx session."""
        return cls(http_client=httpx.AsyncClient(), timeout_seconds=timeout_seconds)

    async def get(
        self, url: str, token: str, params: dict[str, str] | None = None
    ) -> object:
        """Issue a GET with a bearer token when one is available."""
        headers = {"Authorization": f"Bearer {token}"} if token else {}
        response = await self.http_client.get(
            url,
            params=params,
            headers=headers,
            timeout=self.timeout_seconds,
        )
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
