"""FastAPI dependency functions for injecting services from app.state."""

import json
from typing import Any, Dict

from fastapi import Depends, Request

from keyservice.core.exceptions import MalformedRequestError
from keyservice.core.key_manager import KeyManager
from keyservice.models.keys import CreateKeyRequest, VerifyKeyRequest


def get_key_manager(request: Request) -> KeyManager:
    """Inject the key manager built during application startup."""
    return request.app.state.key_manager


async def read_json_object(request: Request) -> Dict[str, Any]:
    """Return the request body as a dict.

    An empty body reads as ``{}``. Anything that is not a JSON object raises
    MalformedRequestError, including JSON the decoder refuses (oversized integer
    literals, nesting deeper than the recursion limit).
    """
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        payload = json.loads(raw)
    except (ValueError, RecursionError) as exc:
        raise MalformedRequestError("Invalid JSON body", details={"reason": str(exc)}) from exc
    if not isinstance(payload, dict):
        raise MalformedRequestError(
            "Request body must be a JSON object",
            details={"received": type(payload).__name__},
        )
    return payload


def get_create_request(payload: Dict[str, Any] = Depends(read_json_object)) -> CreateKeyRequest:
    """Parse the create body, defaulting any unusable field."""
    return CreateKeyRequest.model_validate(payload)


def get_verify_request(payload: Dict[str, Any] = Depends(read_json_object)) -> VerifyKeyRequest:
    """Parse the verify body."""
    return VerifyKeyRequest.model_validate(payload)
