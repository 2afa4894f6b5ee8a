"""Pydantic models for key records and the JSON API."""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_serializer, model_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

DEFAULT_KEY_NAME = "Untitled Key"
DEFAULT_ENVIRONMENT = "live"
DEFAULT_SCOPES = ("read",)
DEFAULT_RATE_LIMIT = 1000

_TIMESTAMP = TypeAdapter(datetime)


def format_timestamp(value: datetime) -> str:
    """Render a timestamp as ISO-8601 UTC with milliseconds and a Z suffix."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class CamelModel(BaseModel):
    """Base model exposing camelCase field names on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class KeyStatus(str, Enum):
    """Lifecycle status of a key record."""

    ACTIVE = "active"
    REVOKED = "revoked"
    EXPIRED = "expired"


class KeyUsage(CamelModel):
    """Usage counters; incremented on every successful verification, never reset."""

    requests: int = 0
    last_hour: int = 0
    last_day: int = 0


class ApiKey(CamelModel):
    """Stored representation of one issued credential."""

    id: str = Field(..., description="Unique key identifier")
    name: str = Field(..., description="Human label for this key")
    key: str = Field(..., description="Full secret value, prefix included")
    prefix: str = Field(..., description="Non-secret leading part of the key")
    created_at: datetime = Field(..., description="Creation timestamp")
    last_used: Optional[datetime] = Field(None, description="Last successful verification")
    expires_at: Optional[datetime] = Field(None, description="Stored, never enforced")
    status: KeyStatus = Field(default=KeyStatus.ACTIVE, description="Lifecycle status")
    scopes: List[str] = Field(default_factory=list, description="Capabilities granted")
    rate_limit: int = Field(default=DEFAULT_RATE_LIMIT, description="Stored, never enforced")
    usage: KeyUsage = Field(default_factory=KeyUsage, description="Usage counters")

    @field_serializer("created_at", "last_used", "expires_at")
    def _serialize_timestamp(self, value: Optional[datetime]) -> Optional[str]:
        return format_timestamp(value) if value is not None else None


class CreateKeyRequest(CamelModel):
    """Body of POST /api/keys.

    Every field is optional. A value that is missing, empty or of the wrong type
    falls back to its default instead of failing validation.
    """

    model_config = ConfigDict(extra="ignore")

    name: str = DEFAULT_KEY_NAME
    environment: str = DEFAULT_ENVIRONMENT
    scopes: List[str] = Field(default_factory=lambda: list(DEFAULT_SCOPES))
    rate_limit: int = DEFAULT_RATE_LIMIT
    expires_at: Optional[datetime] = None

    @model_validator(mode="before")
    @classmethod
    def _drop_unusable_fields(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        cleaned = {}
        for field in ("name", "environment"):
            value = data.get(field)
            if isinstance(value, str) and value:
                cleaned[field] = value
        scopes = data.get("scopes")
        if isinstance(scopes, list) and all(isinstance(scope, str) for scope in scopes):
            cleaned["scopes"] = scopes
        rate_limit = data.get("rateLimit", data.get("rate_limit"))
        if isinstance(rate_limit, int) and not isinstance(rate_limit, bool) and rate_limit > 0:
            cleaned["rate_limit"] = rate_limit
        expires_at = data.get("expiresAt", data.get("expires_at"))
        if isinstance(expires_at, str) and expires_at:
            try:
                cleaned["expires_at"] = _TIMESTAMP.validate_python(expires_at)
            except PydanticValidationError:
                pass
        return cleaned


class VerifyKeyRequest(BaseModel):
    """Body of POST /api/verify."""

    key: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def _ignore_non_string_key(cls, data: Any) -> Any:
        if isinstance(data, dict) and not isinstance(data.get("key"), str):
            return {}
        return data


class KeyListResponse(BaseModel):
    """Response model for listing keys."""

    keys: List[ApiKey]


class KeyDetailResponse(BaseModel):
    """Response model for a single key."""

    key: ApiKey


class KeyMutationResponse(BaseModel):
    """Response model for create and rotate."""

    success: bool = True
    key: ApiKey


class RevokeResponse(BaseModel):
    """Response model for revoke; success is reported whether or not the id existed."""

    success: bool = True


class VerifyResponse(CamelModel):
    """Response model for a successful verification."""

    valid: bool = True
    scopes: List[str]
    rate_limit: int


class Scope(BaseModel):
    """Entry in the static scope catalog."""

    id: str
    name: str
    description: str


class ScopesResponse(BaseModel):
    """Response model for the scope catalog."""

    scopes: List[Scope]


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str = Field(..., description="Health status")
    version: str = Field(..., description="Application version")
