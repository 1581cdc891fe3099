from __future__ import annotations

from fastapi import FastAPI

from order_desk.adapters.inbound.web.fastapi_app import create_app
from order_desk.bootstrap import build_usecases
from order_desk.config import Settings


def create_asgi_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings.from_env()
    return create_app(build_usecases(settings))
