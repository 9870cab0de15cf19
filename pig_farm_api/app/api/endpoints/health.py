"""Liveness endpoint."""

from typing import Dict

from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health", response_model=Dict[str, str])
async def health_check(request: Request) -> Dict[str, str]:
    """Report that the service is up."""
    return {"status": "healthy", "service": request.app.title}
