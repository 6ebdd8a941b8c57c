"""ASGI entrypoint for the body journey API."""

from body_journey.api.app import create_app
from body_journey.containers import build_container

app = create_app(build_container())
