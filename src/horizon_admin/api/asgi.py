"""ASGI entrypoint for the Horizon admin app."""

from horizon_admin.api.app import create_app
from horizon_admin.containers import build_container

app = create_app(build_container())
