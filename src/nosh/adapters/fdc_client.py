"""USDA FoodData Central API client."""

from dataclasses import dataclass
from typing import Protocol

import httpx


class FdcClient(Protocol):
    """Interface for FoodData Central API interactions."""

    def search_foods(
        self, query: str, page_number: int = 1, page_size: int = 10
    ) -> dict[str, object]:
        """Search foods by query and return raw API data."""


@dataclass
class HttpxFdcClient(FdcClient):
    """HTTPX-backed FDC client."""

    api_key: str
    base_url: str
    http_client: httpx.Client

    @classmethod
    def create(cls, api_key: str, base_url: str) -> "HttpxFdcClient":
        """Create an FDC client with a managed httpx session."""
        return cls(api_key=api_key, base_url=base_url, http_client=httpx.Client())

    def search_foods(
        self, query: str, page_number: int = 1, page_size: int = 10
    ) -> dict[str, object]:
        """Search foods by query, one page at a time."""
        url = f"{self.base_url}/foods/search"
        response = self.http_client.post(
            url,
            params={"api_key": self.api_key},
            json={"query": query, "pageNumber": page_number, "pageSize": page_size},
            timeout=15,
        )
        response.raise_for_status()
        return response.json()

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.http_client.close()
