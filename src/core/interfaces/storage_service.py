"""
Contract: Storage Service

Gerencia upload de anexos de inscrição em object storage
(MinIO/S3/local filesystem).
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class StorageRef:
    """Referência durável a um arquivo armazenado."""
    bucket: str
    key: str
    size_bytes: int
    sha256: str
    content_type: str
    url: str = ""


class IStorageService(ABC):
    """
    Port: Storage Service

    Gerencia persistência de anexos binários.
    Implementação pode ser MinIO, S3, filesystem local, etc.
    Falhas de destino (bucket/pasta inexistente, sem permissão)
    devem ser levantadas como StorageError.
    """

    @abstractmethod
    def upload(self, data: bytes, key: str, content_type: str = "application/octet-stream") -> StorageRef:
        """
        Faz upload de um arquivo.

        Args:
            data: Conteúdo em bytes.
            key: Caminho/chave no storage.
            content_type: MIME type.

        Returns:
            StorageRef com localização, hash e URL pública.
        """
        ...

    @abstractmethod
    def download(self, key: str) -> bytes:
        """Baixa um arquivo do storage."""
        ...

    @abstractmethod
    def get_url(self, key: str) -> str:
        """
        URL publicamente acessível para o arquivo.

        Args:
            key: Caminho/chave no storage.
        """
        ...
