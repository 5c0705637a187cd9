"""
Tests for the FastAPI transport (routes, error mapping, health).

Use cases are swapped through app.dependency_overrides; the SQL store
runs against the temporary SQLite database from the fixtures.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from src.api import dependencies
from src.api.main import create_app
from src.core.entities.address import AddressResult
from src.core.errors import StorageError
from src.core.use_cases.check_duplicate import CheckDuplicateUseCase
from src.core.use_cases.resolve_address import ResolveAddressUseCase
from src.core.use_cases.store_attachment import StoreAttachmentUseCase
from src.core.use_cases.submit_registration import SubmitRegistrationUseCase
from tests.helpers import FIXED_NOW, FakeCepProvider, MemoryStorageService


@pytest.fixture
def client(store, memory_storage):
    app = create_app()
    app.dependency_overrides[dependencies.get_duplicate_use_case] = lambda: CheckDuplicateUseCase(store)
    app.dependency_overrides[dependencies.get_submit_use_case] = lambda: SubmitRegistrationUseCase(
        store=store,
        attachments=StoreAttachmentUseCase(memory_storage),
        clock=lambda: FIXED_NOW,
    )
    with TestClient(app) as c:
        yield c


class TestDuplicateEndpoint:

    def test_not_duplicate_on_empty_store(self, client):
        response = client.get("/api/v1/registrations/duplicate", params={"cpf": "123.456.789-09"})
        assert response.status_code == 200
        assert response.json() == {"cpf": "12345678909", "duplicate": False}

    def test_duplicate_after_submission(self, client, form):
        assert client.post("/api/v1/registrations", json=form).status_code == 201
        response = client.get("/api/v1/registrations/duplicate", params={"cpf": "12345678909"})
        assert response.json()["duplicate"] is True


class TestAddressEndpoint:

    def _override(self, client, *providers):
        client.app.dependency_overrides[dependencies.get_address_use_case] = (
            lambda: ResolveAddressUseCase(list(providers))
        )

    def test_resolved_address(self, client):
        self._override(client, FakeCepProvider("viacep", AddressResult(
            endereco="Avenida Paulista", bairro="Bela Vista", cidade="São Paulo", estado="SP",
        )))
        response = client.get("/api/v1/address/01310100")
        assert response.status_code == 200
        assert set(response.json()) == {"endereco", "bairro", "cidade", "estado"}

    def test_invalid_cep_returns_error_body(self, client):
        provider = FakeCepProvider("viacep", None)
        self._override(client, provider)
        response = client.get("/api/v1/address/123")
        assert response.status_code == 200
        assert "error" in response.json()
        assert provider.calls == []

    @pytest.mark.parametrize("path", ["/api/v1/address/", "/api/v1/address/0131/100"])
    def test_empty_or_slashed_cep_is_invalid_not_404(self, client, path):
        provider = FakeCepProvider("viacep", None)
        self._override(client, provider)
        response = client.get(path)
        assert response.status_code == 200
        assert response.json() == {"error": "CEP inválido"}
        assert provider.calls == []

    def test_unavailable_returns_error_body(self, client):
        self._override(client, FakeCepProvider("viacep", None), FakeCepProvider("brasilapi", None))
        response = client.get("/api/v1/address/01310-100")
        assert response.json() == {"error": "Serviço de consulta de CEP indisponível"}


class TestSubmitEndpoint:

    def test_success_without_attachment(self, client, form, store, memory_storage):
        response = client.post("/api/v1/registrations", json=form)

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["documento_url"] == ""
        assert memory_storage.uploads == 0
        assert store.count_rows() == 1

    def test_success_with_attachment(self, client, form, pdf_attachment, store):
        form["arquivo"] = pdf_attachment
        response = client.post("/api/v1/registrations", json=form)
        assert response.status_code == 201
        assert response.json()["documento_url"].startswith("https://files.example.org/")
        assert store.list_column("documento_url") == [response.json()["documento_url"]]

    def test_storage_failure_maps_to_502_and_no_row(self, client, form, pdf_attachment, store):
        client.app.dependency_overrides[dependencies.get_submit_use_case] = lambda: SubmitRegistrationUseCase(
            store=store,
            attachments=StoreAttachmentUseCase(MemoryStorageService(fail=StorageError("Bucket inexistente: docs"))),
        )
        form["arquivo"] = pdf_attachment

        response = client.post("/api/v1/registrations", json=form)

        assert response.status_code == 502
        assert response.json() == {"detail": "Bucket inexistente: docs", "error": "StorageError"}
        assert store.count_rows() == 0

    def test_missing_table_maps_to_503(self, client, form, missing_store):
        client.app.dependency_overrides[dependencies.get_submit_use_case] = lambda: SubmitRegistrationUseCase(
            store=missing_store,
            attachments=StoreAttachmentUseCase(MemoryStorageService()),
        )
        response = client.post("/api/v1/registrations", json=form)
        assert response.status_code == 503
        assert response.json()["error"] == "PersistenceTargetMissing"

    def test_missing_required_fields_is_422(self, client):
        response = client.post("/api/v1/registrations", json={"cpf": "12345678909"})
        assert response.status_code == 422


def test_health_reports_table(client):
    response = client.get("/health")
    assert response.status_code == 200
    body = response.json()
    assert body["database"] == "SQLite"
    assert body["registrations_table"] == "inscricoes"
    assert body["table_present"] is True
    assert body["storage_backend"] == "local"


def test_health_is_degraded_when_database_unreachable(client):
    broken = MagicMock()
    broken.count_rows.side_effect = OperationalError("SELECT count(*)", {}, Exception("connection refused"))
    client.app.dependency_overrides[dependencies.get_tabular_store] = lambda: broken

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "degraded"
    assert response.json()["table_present"] is False
