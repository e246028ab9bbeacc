"""Domain models for motorcycle models (menus)."""

from dataclasses import dataclass

CATEGORY_SPORT = "SPORT"
CATEGORY_MATIC = "MATIC"


@dataclass(frozen=True)
class MenuItem:
    """A motorcycle model as listed by the backend."""

    id: int | str | None
    name: str | None
    price: int
    category: str | None
    picture: str | None
    order_count: int = 0


@dataclass(frozen=True)
class CategoryBadge:
    """Display label and colour tone for a category tag."""

    label: str
    tone: str
