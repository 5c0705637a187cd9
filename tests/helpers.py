"""
tests/helpers.py

Test doubles for the ports: CEP providers and blob storage.
"""

from __future__ import annotations

from datetime import datetime

from src.core.entities.address import AddressResult
from src.core.interfaces.cep_provider import ICepProvider
from src.core.interfaces.storage_service import IStorageService, StorageRef

FIXED_NOW = datetime(2024, 3, 15, 10, 30, 0)


class FakeCepProvider(ICepProvider):
    """Provider double that records calls and returns a canned result."""

    def __init__(self, name: str, result: AddressResult | None):
        self.name = name
        self._result = result
        self.calls: list[str] = []

    def lookup(self, cep: str) -> AddressResult | None:
        self.calls.append(cep)
        return self._result


class MemoryStorageService(IStorageService):
    """In-memory blob store."""

    def __init__(self, fail: Exception | None = None):
        self.objects: dict[str, bytes] = {}
        self.uploads = 0
        self._fail = fail

    def upload(self, data: bytes, key: str, content_type: str = "application/octet-stream") -> StorageRef:
        self.uploads += 1
        if self._fail is not None:
            raise self._fail
        self.objects[key] = data
        return StorageRef(
            bucket="memory", key=key, size_bytes=len(data),
            sha256="", content_type=content_type,
        )

    def download(self, key: str) -> bytes:
        return self.objects[key]

    def get_url(self, key: str) -> str:
        return f"https://files.example.org/{key}"


