"""ASGI entrypoint for the feeding planner API."""

from feeding_planner.api.app import create_app
from feeding_planner.containers import build_container

app = create_app(build_container())
