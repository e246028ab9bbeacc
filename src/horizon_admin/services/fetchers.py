"""Fail-open reads of backend resources."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from horizon_admin.adapters.backend_client import BackendClient
from horizon_admin.config import join_url
from horizon_admin.services.favorites import normalize_favorites, rank

MENU_COUNT_PATH = "/M"
ORDER_COUNT_PATH = "/order/allOrders"
USER_COUNT_PATH = "/user/"
FAVORITE_MENU_PATH = "/report/favorite"

_logger = logging.getLogger(__name__)


@dataclass
class ResourceFetcher:
    """Reads ``{status, data}`` envelopes, degrading every failure to empty."""

    client: BackendClient
    base_url: str

    async def fetch_list(
        self,
        path: str,
        token: str,
        *,
        resource: str,
        params: dict[str, str] | None = None,
    ) -> list[object]:
        """Return the envelope's data array, or ``[]`` on any failure."""
        url = join_url(self.base_url, path)
        try:
            envelope = await self.client.get(url, token, params=params)
        except Exception as exc:
            _logger.warning("Fetching %s failed: %s", resource, exc)
            return []
        if not isinstance(envelope, Mapping) or not envelope.get("status"):
            _logger.warning("Backend rejected %s request", resource)
            return []
        data = envelope.get("data")
        if not isinstance(data, list):
            _logger.warning("Backend returned non-list data for %s", resource)
            return []
        return data

    async def fetch_count(self, path: str, token: str, *, resource: str) -> int:
        """Return the number of items in the envelope's data array, or 0."""
        return len(await self.fetch_list(path, token, resource=resource))


@dataclass
class DashboardFetchers:
    """One fetcher per dashboard resource."""

    fetcher: ResourceFetcher

    async def get_menu_count(self, token: str) -> int:
        """Count motorcycle models."""
        return await self.fetcher.fetch_count(MENU_COUNT_PATH, token, resource="menus")

    async def get_order_count(self, token: str) -> int:
        """Count orders in the sales history."""
        return await self.fetcher.fetch_count(
            ORDER_COUNT_PATH, token, resource="orders"
        )

    async def get_user_count(self, token: str) -> int:
        """Count registered users."""
        return await self.fetcher.fetch_count(USER_COUNT_PATH, token, resource="users")

    async def get_favorite_menus(self, token: str) -> list[Mapping[str, object]]:
        """Return normalized favorite menus, most ordered first."""
        records = await self.fetcher.fetch_list(
            FAVORITE_MENU_PATH, token, resource="favorite menus"
        )
        return rank(normalize_favorites(records))
