"""API router for v1 endpoints."""

from fastapi import APIRouter

from app.api import assets, search

router = APIRouter()

# Ranked search and manual index maintenance
router.include_router(search.router)

# Creative assets (indexed on save, de-indexed on delete)
router.include_router(assets.router)
