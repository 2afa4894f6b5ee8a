"""Storage backends for key records.

The store only holds records; locking, copying and business rules live in
KeyManager. A persistent backend needs to implement the four methods of
KeyStore and nothing else.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from keyservice.models.keys import ApiKey


class KeyStore(ABC):
    """Mapping from key id to key record."""

    @abstractmethod
    def list(self) -> List[ApiKey]:
        """Return all records in insertion order."""

    @abstractmethod
    def get(self, key_id: str) -> Optional[ApiKey]:
        """Return the record for ``key_id``, or None."""

    @abstractmethod
    def put(self, record: ApiKey) -> None:
        """Insert or replace the record stored under ``record.id``."""

    @abstractmethod
    def __len__(self) -> int:
        """Number of stored records."""


class InMemoryKeyStore(KeyStore):
    """Process-local store; everything is lost when the process exits."""

    def __init__(self):
        self._records: Dict[str, ApiKey] = {}

    def list(self) -> List[ApiKey]:
        return list(self._records.values())

    def get(self, key_id: str) -> Optional[ApiKey]:
        return self._records.get(key_id)

    def put(self, record: ApiKey) -> None:
        self._records[record.id] = record

    def __len__(self) -> int:
        return len(self._records)
