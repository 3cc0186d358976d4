"""ASGI entrypoint for the nutrition labeling API."""

from nutrition_labeling.api.app import create_app
from nutrition_labeling.containers import build_container

app = create_app(build_container())
