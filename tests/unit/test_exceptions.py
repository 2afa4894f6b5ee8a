"""Unit tests for keyservice/core/exceptions.py."""

import pytest

from keyservice.core.exceptions import (
    InvalidCredentialError,
    KeyNotFoundError,
    KeyServiceError,
    MalformedRequestError,
)


@pytest.mark.unit
class TestExceptions:
    def test_base_defaults(self):
        exc = KeyServiceError("boom")
        assert exc.message == "boom"
        assert exc.error_code == "KEY_SERVICE_ERROR"
        assert exc.details == {}
        assert exc.status_code == 500
        assert "request_id" in exc.recovery_hint

    def test_key_not_found(self):
        exc = KeyNotFoundError("key_x")
        assert isinstance(exc, KeyServiceError)
        assert exc.message == "Key not found"
        assert exc.status_code == 404
        assert exc.details == {"key_id": "key_x"}
        assert "key_x" in exc.recovery_hint

    def test_invalid_credential(self):
        exc = InvalidCredentialError()
        assert exc.status_code == 401
        assert exc.error_code == "INVALID_CREDENTIAL"

    def test_malformed_request(self):
        exc = MalformedRequestError("Invalid JSON body", details={"reason": "x"})
        assert exc.status_code == 400
        assert exc.error_code == "MALFORMED_REQUEST"
        assert exc.details == {"reason": "x"}
        assert str(exc) == "Invalid JSON body"
