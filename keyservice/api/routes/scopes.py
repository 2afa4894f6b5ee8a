"""Scope catalog route."""

from fastapi import APIRouter

from keyservice.core.scopes import SCOPES
from keyservice.models.keys import ScopesResponse

router = APIRouter(prefix="/api", tags=["scopes"])


@router.get("/scopes", response_model=ScopesResponse, summary="List known scopes")
async def list_scopes() -> ScopesResponse:
    return ScopesResponse(scopes=SCOPES)
