"""
Adapter: Local Filesystem Storage

Implementação do contrato IStorageService gravando em uma pasta
local. A pasta é servida pela API em /files, o que torna a URL
publicamente acessível. Usado em dev e em deploys de máquina única.
"""

import hashlib
import logging
from pathlib import Path
from urllib.parse import quote

from src.core.errors import StorageError
from src.core.interfaces.storage_service import IStorageService, StorageRef

logger = logging.getLogger(__name__)


class LocalStorageService(IStorageService):
    """Storage de anexos em disco."""

    def __init__(self, base_dir: str | Path, public_base_url: str):
        self._base_dir = Path(base_dir)
        self._public_base_url = public_base_url.rstrip("/")

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    def upload(self, data: bytes, key: str, content_type: str = "application/octet-stream") -> StorageRef:
        if not self._base_dir.is_dir():
            raise StorageError(f"Pasta de destino inacessível: {self._base_dir}")

        path = self._base_dir / key
        try:
            path.write_bytes(data)
        except OSError as e:
            raise StorageError(f"Falha ao gravar {key}: {e}") from e

        return StorageRef(
            bucket=str(self._base_dir),
            key=key,
            size_bytes=len(data),
            sha256=hashlib.sha256(data).hexdigest(),
            content_type=content_type,
            url=self.get_url(key),
        )

    def download(self, key: str) -> bytes:
        path = self._base_dir / key
        try:
            return path.read_bytes()
        except OSError as e:
            raise StorageError(f"Arquivo não encontrado: {key}") from e

    def get_url(self, key: str) -> str:
        return f"{self._public_base_url}/{quote(key)}"
