"""
Adapter: MinIO Storage Service

Implementação concreta do contrato IStorageService
usando MinIO (compatível com API S3).
"""

import hashlib
import io
import logging
from datetime import timedelta

from minio import Minio
from minio.error import S3Error

from src.core.errors import StorageError
from src.core.interfaces.storage_service import IStorageService, StorageRef

logger = logging.getLogger(__name__)


class MinIOStorageService(IStorageService):
    """
    Storage de anexos usando MinIO.

    Em produção, trocar por S3 real sem mudar nenhum
    outro código — só muda as credenciais de conexão.
    Sem public_url configurada, get_url devolve URL pré-assinada.
    """

    PRESIGNED_EXPIRY = timedelta(days=7)   # máximo aceito pela API S3

    def __init__(
        self,
        endpoint: str,
        access_key: str,
        secret_key: str,
        bucket: str,
        secure: bool = False,
        public_url: str = "",
        client: Minio | None = None,
    ):
        self._endpoint = endpoint
        self._bucket = bucket
        self._public_url = public_url.rstrip("/")
        self._client = client or Minio(
            endpoint,
            access_key=access_key,
            secret_key=secret_key,
            secure=secure,
        )

    def upload(self, data: bytes, key: str, content_type: str = "application/octet-stream") -> StorageRef:
        try:
            if not self._client.bucket_exists(self._bucket):
                raise StorageError(f"Bucket inexistente: {self._bucket}")
            self._client.put_object(
                self._bucket,
                key,
                io.BytesIO(data),
                length=len(data),
                content_type=content_type,
            )
        except S3Error as e:
            raise StorageError(f"Falha ao gravar {key} no MinIO: {e}") from e

        logger.debug(f"Uploaded {key} to {self._endpoint}/{self._bucket}")
        return StorageRef(
            bucket=self._bucket,
            key=key,
            size_bytes=len(data),
            sha256=hashlib.sha256(data).hexdigest(),
            content_type=content_type,
            url=self.get_url(key),
        )

    def download(self, key: str) -> bytes:
        response = None
        try:
            response = self._client.get_object(self._bucket, key)
            return response.read()
        except S3Error as e:
            raise StorageError(f"Falha ao baixar {key}: {e}") from e
        finally:
            if response is not None:
                response.close()
                response.release_conn()

    def get_url(self, key: str) -> str:
        if self._public_url:
            return f"{self._public_url}/{self._bucket}/{key}"
        return self._client.presigned_get_object(self._bucket, key, expires=self.PRESIGNED_EXPIRY)
