"""Custom exception classes for the key service.

Each exception carries:
  error_code   : machine-readable code, written to the logs
  message      : human-readable description, returned to the caller
  details      : optional structured context (key ids, field names)
  recovery_hint: actionable guidance for the API caller
  status_code  : HTTP status the exception handler answers with
"""

from typing import Any, Dict, Optional


class KeyServiceError(Exception):
    """Base exception for key service errors."""

    status_code = 500

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        recovery_hint: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or "KEY_SERVICE_ERROR"
        self.details = details or {}
        self.recovery_hint = recovery_hint or (
            "An unexpected error occurred. Please retry your request. "
            "If the problem persists, contact support with the request_id."
        )


class KeyNotFoundError(KeyServiceError):
    """Raised when a key id does not resolve to a stored record."""

    status_code = 404

    def __init__(self, key_id: str, recovery_hint: Optional[str] = None):
        super().__init__(
            "Key not found",
            error_code="KEY_NOT_FOUND",
            details={"key_id": key_id},
            recovery_hint=recovery_hint or (
                f"No key with id '{key_id}' exists. "
                "List keys with GET /api/keys and retry with a valid id."
            ),
        )
        self.key_id = key_id


class InvalidCredentialError(KeyServiceError):
    """Raised when a presented secret matches no active key."""

    status_code = 401

    def __init__(self):
        super().__init__(
            "Invalid API key",
            error_code="INVALID_CREDENTIAL",
            recovery_hint=(
                "The key is unknown or has been revoked. "
                "Rotated keys stop working immediately; use the latest secret."
            ),
        )


class MalformedRequestError(KeyServiceError):
    """Raised when a request body is not a JSON object."""

    status_code = 400

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message,
            error_code="MALFORMED_REQUEST",
            details=details,
            recovery_hint=(
                "Send a JSON object body with Content-Type: application/json, "
                "or omit the body to accept the defaults."
            ),
        )
