"""
FastAPI dependencies resolving per-app collaborators from `app.state`.

`create_app()` stores the settings and the playground client there once at
startup. Tests swap them through `app.dependency_overrides`.
"""

from fastapi import Request

from playground_proxy.config import Settings
from playground_proxy.integrations.playground import PlaygroundClient


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_playground_client(request: Request) -> PlaygroundClient:
    return request.app.state.playground
