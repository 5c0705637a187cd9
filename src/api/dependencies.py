"""
Factories — montam os use cases com os adapters concretos.

Cada rota recebe o use case via Depends, então os testes trocam
qualquer peça com app.dependency_overrides.
"""

from pathlib import Path

from src.config.settings import get_settings
from src.core.interfaces.storage_service import IStorageService
from src.core.interfaces.tabular_store import ITabularStore
from src.core.use_cases.check_duplicate import CheckDuplicateUseCase
from src.core.use_cases.resolve_address import ResolveAddressUseCase
from src.core.use_cases.store_attachment import StoreAttachmentUseCase
from src.core.use_cases.submit_registration import SubmitRegistrationUseCase
from src.infrastructure.cep import ViaCepProvider, BrasilApiProvider
from src.infrastructure.db.tabular_store import SqlAlchemyTabularStore

# Lazy singleton: o guard de timestamp dos anexos vale para o processo todo
_attachments: StoreAttachmentUseCase | None = None


def build_storage_service() -> IStorageService:
    """Escolhe o backend de storage pela configuração."""
    settings = get_settings()
    if settings.storage_backend == "minio":
        from src.infrastructure.storage.minio_storage import MinIOStorageService
        return MinIOStorageService(
            endpoint=settings.minio_endpoint,
            access_key=settings.minio_access_key,
            secret_key=settings.minio_secret_key,
            bucket=settings.minio_bucket,
            secure=settings.minio_secure,
            public_url=settings.minio_public_url,
        )

    from src.infrastructure.storage.local_storage import LocalStorageService
    Path(settings.storage_local_dir).mkdir(parents=True, exist_ok=True)
    return LocalStorageService(
        base_dir=settings.storage_local_dir,
        public_base_url=settings.storage_public_base_url,
    )


def get_tabular_store() -> ITabularStore:
    return SqlAlchemyTabularStore(get_settings().registrations_table)


def get_attachment_use_case() -> StoreAttachmentUseCase:
    global _attachments
    if _attachments is None:
        _attachments = StoreAttachmentUseCase(build_storage_service())
    return _attachments


def get_duplicate_use_case() -> CheckDuplicateUseCase:
    return CheckDuplicateUseCase(
        store=get_tabular_store(),
        fail_open=get_settings().duplicate_check_fail_open,
    )


def get_address_use_case() -> ResolveAddressUseCase:
    settings = get_settings()
    return ResolveAddressUseCase(providers=[
        ViaCepProvider(settings.cep_primary_url),
        BrasilApiProvider(settings.cep_secondary_url),
    ])


def get_submit_use_case() -> SubmitRegistrationUseCase:
    return SubmitRegistrationUseCase(
        store=get_tabular_store(),
        attachments=get_attachment_use_case(),
    )
