"""Motorcycle (menu) listing service."""

from collections.abc import Mapping
from dataclasses import dataclass

from horizon_admin.domain.menus import MenuItem
from horizon_admin.services.favorites import COUNT_KEYS, as_count, read_first_present
from horizon_admin.services.fetchers import ResourceFetcher

MENU_SEARCH_PATH = "/menu"


@dataclass
class MenuService:
    """Service for the manager's motorcycle listing."""

    fetcher: ResourceFetcher

    async def list_menus(self, token: str, search: str = "") -> list[MenuItem]:
        """Return motorcycle models matching ``search``."""
        records = await self.fetcher.fetch_list(
            MENU_SEARCH_PATH,
            token,
            resource="menu listing",
            params={"search": search},
        )
        return [
            _menu_from_payload(record)
            for record in records
            if isinstance(record, Mapping)
        ]


def _menu_from_payload(payload: Mapping[str, object]) -> MenuItem:
    name = payload.get("name")
    category = payload.get("category")
    picture = payload.get("picture")
    return MenuItem(
        id=payload.get("id"),
        name=name if isinstance(name, str) else None,
        price=as_count(payload.get("price")),
        category=category if isinstance(category, str) else None,
        picture=picture if isinstance(picture, str) and picture else None,
        order_count=as_count(read_first_present(payload, COUNT_KEYS, 0)),
    )
