"""Manager pages: dashboard and motorcycle listing."""

from __future__ import annotations

from dataclasses import asdict
from pathlib import Path
from typing import TYPE_CHECKING

from fastapi import APIRouter, Cookie, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from horizon_admin.services.presenter import category_badge, format_price, image_url

if TYPE_CHECKING:
    from horizon_admin.containers import AppContainer

router = APIRouter(prefix="/manager", tags=["manager"])
templates = Jinja2Templates(directory=Path(__file__).parent / "templates")
templates.env.filters["rupiah"] = format_price
templates.env.filters["category_badge"] = category_badge
templates.env.globals["image_url"] = image_url


@router.get("/dashboard", response_class=HTMLResponse)
async def dashboard(
    request: Request, token: str = Cookie(default="")
) -> HTMLResponse:
    """Render the manager dashboard."""
    container: AppContainer = request.app.state.container
    view = await container.dashboard_service.load_view(token)
    return templates.TemplateResponse(
        request,
        "dashboard.html",
        {"view": view, "chart": asdict(view.chart)},
    )


@router.get("/dashboard/data")
async def dashboard_data(
    request: Request, token: str = Cookie(default="")
) -> dict[str, object]:
    """Return the dashboard page model as JSON."""
    container: AppContainer = request.app.state.container
    view = await container.dashboard_service.load_view(token)
    payload = asdict(view)
    payload["is_empty"] = view.is_empty
    return payload


@router.get("/menu", response_class=HTMLResponse)
async def menu_list(
    request: Request, search: str = "", token: str = Cookie(default="")
) -> HTMLResponse:
    """Render the motorcycle listing with an optional search filter."""
    container: AppContainer = request.app.state.container
    menus = await container.menu_service.list_menus(token, search)
    return templates.TemplateResponse(
        request,
        "menu.html",
        {
            "menus": menus,
            "search": search,
            "image_base": container.settings.base_image_menu,
        },
    )
