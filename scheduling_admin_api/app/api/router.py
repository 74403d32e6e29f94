"""
Top‑level API router.

This router aggregates the domain routers (profile, services,
availability) plus the health check.  When a new domain is
introduced, include its router here.
"""

from fastapi import APIRouter

from .endpoints import availability, health, profile, services

router = APIRouter()

router.include_router(profile.router, prefix="/profile", tags=["profile"])
router.include_router(services.router, prefix="/services", tags=["services"])
router.include_router(availability.router, prefix="/availability", tags=["availability"])
router.include_router(health.router, prefix="/health", tags=["health"])
