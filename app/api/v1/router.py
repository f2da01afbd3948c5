"""Root API router for v1 endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from app.api.v1 import auth, campaigns, files, health, leads, messages, profile, reports


def get_api_router(prefix: str = "/api/v1") -> APIRouter:
    api_router = APIRouter(prefix=prefix)
    api_router.include_router(health.router)
    api_router.include_router(auth.router)
    api_router.include_router(profile.router)
    api_router.include_router(leads.router)
    api_router.include_router(campaigns.router)
    api_router.include_router(messages.router)
    api_router.include_router(files.router)
    api_router.include_router(reports.router)
    return api_router
