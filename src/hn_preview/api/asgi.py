"""ASGI entrypoint for the preview API."""

from hn_preview.api.app import create_app
from hn_preview.containers import build_container

app = create_app(build_container())
