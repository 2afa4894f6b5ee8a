"""Key management routes.

The raw key is part of every record returned here; there is no caller
authentication on these endpoints.
"""

from fastapi import APIRouter, Depends

from keyservice.api.deps import get_create_request, get_key_manager
from keyservice.core.key_manager import KeyManager
from keyservice.models.keys import (
    CreateKeyRequest,
    KeyDetailResponse,
    KeyListResponse,
    KeyMutationResponse,
    RevokeResponse,
)

router = APIRouter(prefix="/api/keys", tags=["keys"])


@router.get("", response_model=KeyListResponse, summary="List all keys")
async def list_keys(manager: KeyManager = Depends(get_key_manager)) -> KeyListResponse:
    """List every key, active and revoked, in creation order."""
    return KeyListResponse(keys=manager.list_keys())


@router.post("", response_model=KeyMutationResponse, summary="Create a key")
async def create_key(
    body: CreateKeyRequest = Depends(get_create_request),
    manager: KeyManager = Depends(get_key_manager),
) -> KeyMutationResponse:
    """Issue a new key. Missing fields take their defaults."""
    return KeyMutationResponse(key=manager.create_key(body))


@router.get("/{key_id}", response_model=KeyDetailResponse, summary="Fetch a key")
async def get_key(key_id: str, manager: KeyManager = Depends(get_key_manager)) -> KeyDetailResponse:
    return KeyDetailResponse(key=manager.get_key(key_id))


@router.delete("/{key_id}", response_model=RevokeResponse, summary="Revoke a key")
async def revoke_key(key_id: str, manager: KeyManager = Depends(get_key_manager)) -> RevokeResponse:
    """Revoke (soft-delete) a key. Succeeds for unknown ids too, so retries are safe."""
    manager.revoke_key(key_id)
    return RevokeResponse()


@router.post("/{key_id}/rotate", response_model=KeyMutationResponse, summary="Rotate a key")
async def rotate_key(key_id: str, manager: KeyManager = Depends(get_key_manager)) -> KeyMutationResponse:
    """Replace the secret. The old secret stops verifying immediately."""
    return KeyMutationResponse(key=manager.rotate_key(key_id))
