"""
Use Case: Store Attachment

Decodifica o anexo (base64), gera um nome com prefixo de timestamp
e grava no storage. Devolve a referência durável com URL pública.
"""

import base64
import binascii
import logging
import re
import threading
import time

from src.core.entities.attachment import AttachmentPayload
from src.core.errors import StorageError
from src.core.interfaces.storage_service import IStorageService, StorageRef

logger = logging.getLogger(__name__)


class StoreAttachmentUseCase:
    """
    Use Case: AttachmentPayload → StorageRef.

    O prefixo de timestamp é estritamente crescente por instância, mas
    não é único entre processos: duas submissões no mesmo instante em
    workers diferentes podem colidir.
    """

    def __init__(self, storage: IStorageService):
        self._storage = storage
        self._lock = threading.Lock()
        self._last_ns = 0

    def execute(self, payload: AttachmentPayload) -> StorageRef:
        data = self._decode(payload.content_base64)
        key = f"{self._next_timestamp()}_{self._safe_filename(payload.filename)}"

        try:
            ref = self._storage.upload(data, key, content_type=payload.mime_type)
            if not ref.url:
                ref.url = self._storage.get_url(ref.key)
        except StorageError:
            raise
        except Exception as e:
            raise StorageError(f"Falha ao gravar o anexo: {e}") from e

        logger.info(f"Stored attachment {ref.key} ({ref.size_bytes} bytes)")
        return ref

    def _next_timestamp(self) -> int:
        with self._lock:
            now = time.time_ns()
            self._last_ns = now if now > self._last_ns else self._last_ns + 1
            return self._last_ns

    @staticmethod
    def _decode(content: str) -> bytes:
        if not content:
            raise StorageError("Anexo vazio")
        # Aceita data URL ("data:application/pdf;base64,....")
        if content.startswith("data:") and "," in content:
            content = content.split(",", 1)[1]
        try:
            data = base64.b64decode(content, validate=True)
        except (binascii.Error, ValueError) as e:
            raise StorageError(f"Falha ao decodificar o anexo: {e}") from e
        if not data:
            raise StorageError("Anexo vazio")
        return data

    @staticmethod
    def _safe_filename(filename: str) -> str:
        name = re.split(r"[\\/]", filename or "")[-1]
        name = re.sub(r"[^\w.\-]", "_", name).strip("._")
        return name or "documento"
