"""Credential verification route."""

from fastapi import APIRouter, Depends

from keyservice.api.deps import get_key_manager, get_verify_request
from keyservice.core.key_manager import KeyManager
from keyservice.models.keys import VerifyKeyRequest, VerifyResponse

router = APIRouter(prefix="/api", tags=["verify"])


@router.post(
    "/verify",
    response_model=VerifyResponse,
    summary="Verify a presented key",
    responses={401: {"description": "Unknown or revoked key", "content": {"application/json": {"example": {"valid": False}}}}},
)
async def verify_key(
    body: VerifyKeyRequest = Depends(get_verify_request),
    manager: KeyManager = Depends(get_key_manager),
) -> VerifyResponse:
    """
    Check a raw key against active keys and record the use.

    Returns:
        VerifyResponse with the key's scopes and rate limit
    """
    record = manager.verify_key(body.key)
    return VerifyResponse(scopes=record.scopes, rate_limit=record.rate_limit)
