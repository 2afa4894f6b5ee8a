"""Key lifecycle: create, list, fetch, revoke, rotate and verify issued keys.

KeyManager is the only component that touches the KeyStore. Every operation runs
under one re-entrant lock so that read-modify-write sequences (verify-and-count,
rotate) never interleave, and every record handed out is a deep copy: callers can
never mutate stored state behind the manager's back.

Keys are stored in plaintext because GET /api/keys/{id} returns the secret for the
dashboard's copy button. Verification is a linear scan over the store.
"""

import hmac
import logging
import threading
from collections import Counter
from datetime import datetime, timezone
from typing import Iterable, List, Optional

from keyservice.core import metrics
from keyservice.core.exceptions import InvalidCredentialError, KeyNotFoundError
from keyservice.core.key_generator import build_prefix, generate_id, generate_key
from keyservice.core.key_store import KeyStore
from keyservice.models.keys import ApiKey, CreateKeyRequest, KeyStatus, KeyUsage

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _ts(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def demo_keys() -> List[ApiKey]:
    """Illustrative records a fresh process starts with. Secrets are fresh each time."""
    return [
        ApiKey(
            id="key_abc12345",
            name="Production API",
            key=generate_key("br_live_"),
            prefix="br_live_",
            created_at=_ts("2026-01-15T10:00:00Z"),
            last_used=_ts("2026-02-15T04:30:00Z"),
            scopes=["read", "write", "deploy"],
            rate_limit=10000,
            usage=KeyUsage(requests=145632, last_hour=234, last_day=4521),
        ),
        ApiKey(
            id="key_def67890",
            name="Development",
            key=generate_key("br_test_"),
            prefix="br_test_",
            created_at=_ts("2026-02-01T14:30:00Z"),
            last_used=_ts("2026-02-15T03:45:00Z"),
            expires_at=_ts("2026-03-01T00:00:00Z"),
            scopes=["read", "write"],
            rate_limit=1000,
            usage=KeyUsage(requests=8934, last_hour=45, last_day=892),
        ),
        ApiKey(
            id="key_ghi11223",
            name="CI/CD Pipeline",
            key=generate_key("br_ci_"),
            prefix="br_ci_",
            created_at=_ts("2026-02-10T09:00:00Z"),
            last_used=_ts("2026-02-15T05:00:00Z"),
            scopes=["deploy", "read"],
            rate_limit=5000,
            usage=KeyUsage(requests=2341, last_hour=12, last_day=156),
        ),
    ]


class KeyManager:
    """Applies key lifecycle rules on top of a KeyStore."""

    def __init__(self, store: KeyStore):
        self._store = store
        self._lock = threading.RLock()

    def seed(self, records: Optional[Iterable[ApiKey]] = None) -> int:
        """Insert demo records if the store is empty. Returns how many were added."""
        with self._lock:
            if len(self._store):
                return 0
            added = 0
            for record in records if records is not None else demo_keys():
                self._store.put(record)
                added += 1
            self._refresh_gauge()
        logger.info("Seeded key store with %d demo key(s)", added)
        return added

    def list_keys(self) -> List[ApiKey]:
        """Return copies of all records in insertion order."""
        with self._lock:
            records = [record.model_copy(deep=True) for record in self._store.list()]
        metrics.record_key_operation("list")
        return records

    def create_key(self, request: Optional[CreateKeyRequest] = None) -> ApiKey:
        """Issue a new active key. The returned copy is the only time callers see it fresh."""
        request = request or CreateKeyRequest()
        prefix = build_prefix(request.environment)
        record = ApiKey(
            id=generate_id(),
            name=request.name,
            key=generate_key(prefix),
            prefix=prefix,
            created_at=_utcnow(),
            expires_at=request.expires_at,
            status=KeyStatus.ACTIVE,
            scopes=list(request.scopes),
            rate_limit=request.rate_limit,
        )
        with self._lock:
            self._store.put(record)
            self._refresh_gauge()
            created = record.model_copy(deep=True)
        metrics.record_key_operation("create")
        logger.info(
            "Created key %s (%s) with scopes %s",
            created.id,
            created.prefix,
            ",".join(created.scopes) or "-",
        )
        return created

    def get_key(self, key_id: str) -> ApiKey:
        """Return a copy of the record for ``key_id``; raises KeyNotFoundError."""
        with self._lock:
            record = self._store.get(key_id)
            if record is None:
                metrics.record_key_operation("get", found=False)
                raise KeyNotFoundError(key_id)
            found = record.model_copy(deep=True)
        metrics.record_key_operation("get")
        return found

    def revoke_key(self, key_id: str) -> bool:
        """Mark ``key_id`` revoked. Unknown ids are a no-op; returns whether a record changed."""
        with self._lock:
            record = self._store.get(key_id)
            if record is None:
                metrics.record_key_operation("revoke", found=False)
                logger.debug("Revoke for unknown key %s ignored", key_id)
                return False
            record.status = KeyStatus.REVOKED
            self._store.put(record)
            self._refresh_gauge()
        metrics.record_key_operation("revoke")
        logger.info("Revoked key %s", key_id)
        return True

    def rotate_key(self, key_id: str) -> ApiKey:
        """Replace the secret of ``key_id`` under the same prefix; status is left alone."""
        with self._lock:
            record = self._store.get(key_id)
            if record is None:
                metrics.record_key_operation("rotate", found=False)
                raise KeyNotFoundError(key_id)
            record.key = generate_key(record.prefix)
            self._store.put(record)
            rotated = record.model_copy(deep=True)
        metrics.record_key_operation("rotate")
        logger.info("Rotated key %s (%s)", key_id, rotated.prefix)
        return rotated

    def verify_key(self, raw_key: Optional[str]) -> ApiKey:
        """Return a copy of the active record matching ``raw_key`` and count the use.

        Raises InvalidCredentialError when nothing active matches; no record is
        touched in that case.
        """
        if not raw_key:
            metrics.record_verification(False)
            raise InvalidCredentialError()
        with self._lock:
            found = self._find_active(raw_key)
            if found is None:
                metrics.record_verification(False)
                raise InvalidCredentialError()
            found.last_used = _utcnow()
            found.usage.requests += 1
            found.usage.last_hour += 1
            found.usage.last_day += 1
            self._store.put(found)
            verified = found.model_copy(deep=True)
        metrics.record_verification(True)
        logger.debug("Verified key %s", verified.id)
        return verified

    def _find_active(self, raw_key: str) -> Optional[ApiKey]:
        encoded = raw_key.encode()
        for record in self._store.list():
            if record.status is KeyStatus.ACTIVE and hmac.compare_digest(record.key.encode(), encoded):
                return record
        return None

    def _refresh_gauge(self) -> None:
        counts = Counter(record.status.value for record in self._store.list())
        metrics.update_stored_keys({status.value: counts.get(status.value, 0) for status in KeyStatus})
