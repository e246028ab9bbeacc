"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from horizon_admin.adapters.backend_client import BackendClient
from horizon_admin.config import Settings
from horizon_admin.containers import AppContainer
from horizon_admin.services.dashboard import DashboardService
from horizon_admin.services.fetchers import DashboardFetchers, ResourceFetcher
from horizon_admin.services.menus import MenuService

BASE_API_URL = "https://backend.test"
BASE_IMAGE_MENU = "https://backend.test/menu-picture"


@dataclass
class FakeBackendClient(BackendClient):
    """Fake backend client serving canned envelopes by path."""

    responses: dict[str, object] = field(default_factory=dict)
    failures: dict[str, Exception] = field(default_factory=dict)
    calls: list[tuple[str, str, dict[str, str] | None]] = field(default_factory=list)

    async def get(
        self, url: str, token: str, params: dict[str, str] | None = None
    ) -> object:
        self.calls.append((url, token, params))
        path = url.removeprefix(BASE_API_URL)
        if path in self.failures:
            raise self.failures[path]
        if path not in self.responses:
            raise LookupError(f"no canned response for {path}")
        return self.responses[path]


def envelope(data: object, status: bool = True) -> dict[str, object]:
    return {"status": status, "data": data}


@pytest.fixture
def settings() -> Settings:
    return Settings(base_api_url=BASE_API_URL, base_image_menu=BASE_IMAGE_MENU)


@pytest.fixture
def backend_client() -> FakeBackendClient:
    return FakeBackendClient(
        responses={
            "/M": envelope([{"id": 1}, {"id": 2}, {"id": 3}, {"id": 4}]),
            "/order/allOrders": envelope([{"id": 10}, {"id": 11}]),
            "/user/": envelope([{"id": 7}]),
            "/report/favorite": envelope(
                [
                    {"name": "Ninja", "count": 12, "price": 45000, "category": "SPORT"},
                    {"name": "Vario", "orderCount": 30, "price": 15000},
                    {
                        "name": "CBR",
                        "count": 30,
                        "category": "SPORT",
                        "picture": "cbr.png",
                    },
                ]
            ),
            "/menu": envelope(
                [
                    {
                        "id": 1,
                        "name": "Beat",
                        "price": 18500000,
                        "category": "MATIC",
                        "picture": "beat.png",
                    },
                    {"id": 2, "name": "Trail", "price": 30000000, "category": "TRAIL"},
                ]
            ),
        }
    )


@pytest.fixture
def fetcher(backend_client: FakeBackendClient) -> ResourceFetcher:
    return ResourceFetcher(client=backend_client, base_url=BASE_API_URL)


@pytest.fixture
def dashboard_service(fetcher: ResourceFetcher) -> DashboardService:
    return DashboardService(
        fetchers=DashboardFetchers(fetcher), image_base=BASE_IMAGE_MENU
    )


@pytest.fixture
def container(
    settings: Settings,
    backend_client: FakeBackendClient,
    fetcher: ResourceFetcher,
    dashboard_service: DashboardService,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        backend_client=backend_client,
        dashboard_service=dashboard_service,
        menu_service=MenuService(fetcher),
        close_resources=close_resources,
    )
