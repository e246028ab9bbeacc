"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from horizon_admin.adapters.backend_client import BackendClient, HttpxBackendClient
from horizon_admin.config import Settings
from horizon_admin.services.dashboard import DashboardService
from horizon_admin.services.fetchers import DashboardFetchers, ResourceFetcher
from horizon_admin.services.menus import MenuService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    backend_client: BackendClient
    dashboard_service: DashboardService
    menu_service: MenuService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    backend_client = HttpxBackendClient.create(
        timeout_seconds=resolved_settings.http_timeout_seconds
    )
    fetcher = ResourceFetcher(
        client=backend_client, base_url=resolved_settings.base_api_url
    )
    dashboard_service = DashboardService(
        fetchers=DashboardFetchers(fetcher),
        image_base=resolved_settings.base_image_menu,
    )
    menu_service = MenuService(fetcher)

    async def close_resources() -> None:
        await backend_client.close()

    return AppContainer(
        settings=resolved_settings,
        backend_client=backend_client,
        dashboard_service=dashboard_service,
        menu_service=menu_service,
        close_resources=close_resources,
    )
