"""View builders for the dashboard chart and ranked list."""

from collections.abc import Mapping, Sequence

from horizon_admin.config import join_url
from horizon_admin.domain.dashboard import ChartView, TopMenuEntry
from horizon_admin.domain.menus import CATEGORY_MATIC, CATEGORY_SPORT, CategoryBadge
from horizon_admin.services.favorites import ORDER_COUNT_KEY, as_count, top_n

CHART_LIMIT = 5
LIST_LIMIT = 3
UNKNOWN_LABEL = "Unknown"
UNNAMED_MODEL = "Unnamed model"

CHART_BACKGROUND_COLORS = (
    "rgba(37, 99, 235, 0.7)",
    "rgba(59, 130, 246, 0.7)",
    "rgba(96, 165, 250, 0.7)",
    "rgba(147, 197, 253, 0.7)",
    "rgba(191, 219, 254, 0.7)",
)
CHART_BORDER_COLORS = (
    "rgba(37, 99, 235, 1)",
    "rgba(59, 130, 246, 1)",
    "rgba(96, 165, 250, 1)",
    "rgba(147, 197, 253, 1)",
    "rgba(191, 219, 254, 1)",
)

_CATEGORY_BADGES = {
    CATEGORY_SPORT: CategoryBadge(label="Sport", tone="blue"),
    CATEGORY_MATIC: CategoryBadge(label="Matic", tone="indigo"),
}
_RANK_TONES = ("primary", "secondary")


def format_price(price: object) -> str:
    """Format a price as whole Indonesian Rupiah, e.g. ``Rp 15.000``."""
    amount = as_count(price)
    return f"Rp {amount:,}".replace(",", ".")


def category_badge(category: str) -> CategoryBadge:
    """Map a category tag to its badge, keeping unknown tags verbatim."""
    badge = _CATEGORY_BADGES.get(category)
    if badge is not None:
        return badge
    return CategoryBadge(label=category, tone="gray")


def image_url(base: str, picture: object) -> str | None:
    """Build the public URL of a stored picture, if there is one."""
    if not picture or not isinstance(picture, str):
        return None
    return join_url(base, picture)


def build_chart_view(ranked: Sequence[Mapping[str, object]]) -> ChartView:
    """Build pie chart data from the top five ranked records."""
    items = top_n(ranked, CHART_LIMIT)
    return ChartView(
        labels=[_display_name(item, UNKNOWN_LABEL) for item in items],
        values=[as_count(item.get(ORDER_COUNT_KEY)) for item in items],
        background_colors=list(CHART_BACKGROUND_COLORS[: len(items)]),
        border_colors=list(CHART_BORDER_COLORS[: len(items)]),
    )


def build_top_list(
    ranked: Sequence[Mapping[str, object]], image_base: str
) -> list[TopMenuEntry]:
    """Build the ranked top-three list."""
    entries = []
    for index, item in enumerate(top_n(ranked, LIST_LIMIT)):
        category = item.get("category")
        entries.append(
            TopMenuEntry(
                rank=index + 1,
                badge=f"#{index + 1}",
                badge_tone=_RANK_TONES[index] if index < len(_RANK_TONES) else "gray",
                name=_display_name(item, UNNAMED_MODEL),
                price_label=format_price(item.get("price")),
                category_badge=category_badge(category)
                if isinstance(category, str) and category
                else None,
                units_sold=as_count(item.get(ORDER_COUNT_KEY)),
                image_url=image_url(image_base, item.get("picture")),
            )
        )
    return entries


def _display_name(item: Mapping[str, object], placeholder: str) -> str:
    name = item.get("name")
    if isinstance(name, str) and name:
        return name
    return placeholder
