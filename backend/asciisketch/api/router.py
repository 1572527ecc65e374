"""Master API router: mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from asciisketch.api import examples, export, health, parse, render

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(parse.router)
api_router.include_router(render.router)
api_router.include_router(export.router)
api_router.include_router(examples.router)
