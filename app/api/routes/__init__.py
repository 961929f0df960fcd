from fastapi import APIRouter

from app.api.routes import admin, auth, dashboard, health, referral

web_router = APIRouter()
web_router.include_router(health.router, tags=["health"])
web_router.include_router(auth.router, tags=["auth"])
web_router.include_router(dashboard.router, tags=["dashboard"])
web_router.include_router(referral.router, tags=["referral"])
web_router.include_router(admin.router, tags=["admin"])
