"""Liveness check, served without an API key."""

from fastapi import APIRouter
from pydantic import BaseModel

from ..lib.scorers import list_scorers

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    status: str
    scorers: int


@router.get("/health", response_model=HealthResponse, status_code=200)
async def healthcheck() -> HealthResponse:
    return HealthResponse(status="ok", scorers=len(list_scorers()))
