"""Dashboard aggregation service."""

import asyncio
import logging
from dataclasses import dataclass

from horizon_admin.domain.dashboard import (
    ChartView,
    DashboardSnapshot,
    DashboardView,
    StatCard,
    ViewState,
)
from horizon_admin.services.favorites import rank
from horizon_admin.services.fetchers import DashboardFetchers
from horizon_admin.services.presenter import build_chart_view, build_top_list

_logger = logging.getLogger(__name__)


@dataclass
class DashboardService:
    """Loads dashboard data and turns it into a page model."""

    fetchers: DashboardFetchers
    image_base: str

    async def load(self, token: str) -> DashboardSnapshot:
        """Fetch every dashboard resource and assemble a snapshot.

        Each fetcher is fail-open, so the gather never raises and the snapshot
        is built in one step once all four reads have settled.
        """
        menu_count, user_count, order_count, favorites = await asyncio.gather(
            self.fetchers.get_menu_count(token),
            self.fetchers.get_user_count(token),
            self.fetchers.get_order_count(token),
            self.fetchers.get_favorite_menus(token),
        )
        return DashboardSnapshot(
            menu_count=menu_count,
            user_count=user_count,
            order_count=order_count,
            favorites=rank(favorites),
        )

    def initial_view(self) -> DashboardView:
        """Return the empty view shown before any data has been fetched."""
        return DashboardView(
            state=ViewState.LOADING,
            stats=_stat_cards(0, 0, 0),
            chart=ChartView(),
            top_menus=[],
        )

    def build_view(self, snapshot: DashboardSnapshot) -> DashboardView:
        """Derive the ready page model from a snapshot."""
        return DashboardView(
            state=ViewState.READY,
            stats=_stat_cards(
                snapshot.menu_count, snapshot.user_count, snapshot.order_count
            ),
            chart=build_chart_view(snapshot.favorites),
            top_menus=build_top_list(snapshot.favorites, self.image_base),
        )

    async def load_view(self, token: str) -> DashboardView:
        """Fetch and present the dashboard for one page view."""
        snapshot = await self.load(token)
        _logger.info(
            "Dashboard loaded: menus=%s users=%s orders=%s favorites=%s",
            snapshot.menu_count,
            snapshot.user_count,
            snapshot.order_count,
            len(snapshot.favorites),
        )
        return self.build_view(snapshot)


def _stat_cards(menu_count: int, user_count: int, order_count: int) -> list[StatCard]:
    return [
        StatCard(
            key="menus",
            label="Motorcycles",
            value=menu_count,
            link="/manager/menu",
        ),
        StatCard(key="users", label="Users", value=user_count),
        StatCard(key="orders", label="Sales History", value=order_count),
    ]
