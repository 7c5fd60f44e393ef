"""Endpoint Catalog Route - GET /api describes every available endpoint."""

from fastapi import APIRouter

from ncnews.core.endpoint_catalog import ENDPOINTS

router = APIRouter(prefix="/api", tags=["meta"])


@router.get("")
async def describe_endpoints():
    return ENDPOINTS
