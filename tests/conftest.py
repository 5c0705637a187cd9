"""
tests/conftest.py

Shared fixtures. The environment is pointed at throwaway SQLite / upload
directories before anything under src/ is imported, so importing the
FastAPI app never touches the working tree.
"""

from __future__ import annotations

import base64
import os
import tempfile

import pytest

_TMP = tempfile.mkdtemp(prefix="inscricoes-tests-")
os.environ.setdefault("DATABASE_URL", f"sqlite:///{os.path.join(_TMP, 'app.db')}")
os.environ.setdefault("STORAGE_LOCAL_DIR", os.path.join(_TMP, "uploads"))
os.environ.setdefault("STORAGE_BACKEND", "local")

from tests.helpers import MemoryStorageService  # noqa: E402
from src.infrastructure.db.database import create_db_engine, init_db  # noqa: E402
from src.infrastructure.db.tabular_store import SqlAlchemyTabularStore  # noqa: E402

TABLE = "inscricoes"


@pytest.fixture
def engine(tmp_path):
    eng = create_db_engine(f"sqlite:///{tmp_path / 'inscricoes.db'}")
    init_db(engine=eng, table_name=TABLE)
    yield eng
    eng.dispose()


@pytest.fixture
def store(engine) -> SqlAlchemyTabularStore:
    return SqlAlchemyTabularStore(TABLE, engine=engine)


@pytest.fixture
def missing_store(engine) -> SqlAlchemyTabularStore:
    return SqlAlchemyTabularStore("planilha_inexistente", engine=engine)


@pytest.fixture
def memory_storage() -> MemoryStorageService:
    return MemoryStorageService()


@pytest.fixture
def pdf_attachment() -> dict:
    return {
        "content_base64": base64.b64encode(b"%PDF-1.4 fake document").decode(),
        "mime_type": "application/pdf",
        "filename": "rg frente.pdf",
    }


@pytest.fixture
def form() -> dict:
    """A complete form as the web client submits it."""
    return {
        "cpf": "123.456.789-09",
        "data_nascimento": "2006-05-20",
        "nome_completo": "Maria Aparecida da Silva",
        "nome_social": "",
        "rg": "12.345.678-9",
        "rg_uf": "SP",
        "rg_orgao_emissor": "SSP",
        "telefone": "(11) 98765-4321",
        "email": "maria@example.org",
        "possui_deficiencia": False,
        "necessita_atendimento": "não",
        "tipo_deficiencia": "",
        "tea": False,
        "escola_publica": "sim",
        "ensino_medio_concluido": True,
        "cep": "01310-100",
        "endereco": "Avenida Paulista",
        "bairro": "Bela Vista",
        "cidade": "São Paulo",
        "estado": "SP",
        "numero": "1578",
        "complemento": "Apto 12",
        "curso_opcao_1": "Técnico em Informática",
        "curso_opcao_2": "Técnico em Administração",
        "aceite_termos": True,
        "aceite_lgpd": "on",
        "aceite_imagem": False,
        "arquivo": None,
    }
