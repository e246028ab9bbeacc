"""Domain models for the manager dashboard."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum

from horizon_admin.domain.menus import CategoryBadge


class ViewState(StrEnum):
    """Lifecycle of a single dashboard load."""

    LOADING = "loading"
    READY = "ready"


@dataclass(frozen=True)
class DashboardSnapshot:
    """Counts and ranked favorites gathered for one page view."""

    menu_count: int
    user_count: int
    order_count: int
    favorites: list[Mapping[str, object]]


@dataclass(frozen=True)
class ChartView:
    """Parallel arrays feeding the popularity pie chart."""

    labels: list[str] = field(default_factory=list)
    values: list[int] = field(default_factory=list)
    background_colors: list[str] = field(default_factory=list)
    border_colors: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class TopMenuEntry:
    """One row of the ranked popular-motorcycles list."""

    rank: int
    badge: str
    badge_tone: str
    name: str
    price_label: str
    category_badge: CategoryBadge | None
    units_sold: int
    image_url: str | None


@dataclass(frozen=True)
class StatCard:
    """Headline counter shown at the top of the dashboard."""

    key: str
    label: str
    value: int
    link: str | None = None


@dataclass(frozen=True)
class DashboardView:
    """Everything the dashboard template needs."""

    state: ViewState
    stats: list[StatCard]
    chart: ChartView
    top_menus: list[TopMenuEntry]

    @property
    def is_empty(self) -> bool:
        """Return True when there is no favorites data to show."""
        return not self.top_menus
