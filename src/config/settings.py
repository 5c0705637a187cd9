"""
Application Settings.

Centraliza toda configuração via .env / variáveis de ambiente.
Os valores são resolvidos uma vez no start do processo e injetados
nos adapters; nenhum identificador de destino fica embutido no código.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Configurações carregadas de variáveis de ambiente."""

    # --- App ---
    env: str = "development"
    debug: bool = True
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]

    # --- Tabular store ---
    database_url: str = "sqlite:///inscricoes.db"
    registrations_table: str = "inscricoes"

    # --- Duplicate check ---
    # True: falha de leitura não bloqueia a inscrição (pode deixar passar duplicata)
    duplicate_check_fail_open: bool = True

    # --- CEP providers (ordem = prioridade) ---
    cep_primary_url: str = "https://viacep.com.br/ws/{cep}/json/"
    cep_secondary_url: str = "https://brasilapi.com.br/api/cep/v1/{cep}"

    # --- Attachment storage ---
    storage_backend: str = "local"            # "local" | "minio"
    storage_local_dir: str = "uploads"
    storage_public_base_url: str = "http://localhost:8000/files"

    minio_endpoint: str = "localhost:9000"
    minio_access_key: str = ""
    minio_secret_key: str = ""
    minio_bucket: str = "inscricoes-documentos"
    minio_secure: bool = False
    minio_public_url: str = ""                # vazio → URL pré-assinada

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


@lru_cache
def get_settings() -> Settings:
    """Singleton de settings."""
    return Settings()
