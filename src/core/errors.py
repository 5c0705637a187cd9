"""
Domain errors — taxonomia de falhas do pipeline de inscrição.

    IntakeError
     ├── ValidationError          CEP malformado (sem retry)
     ├── LookupUnavailable        todos os provedores de CEP falharam
     └── SubmissionError          inscrição abortada
          ├── StorageError              falha ao gravar o anexo
          ├── PersistenceTargetMissing  tabela de destino ausente
          └── AppendFailure             falha ao gravar a linha
"""


class IntakeError(Exception):
    """Base de todos os erros do pipeline."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(IntakeError):
    """Entrada malformada — o chamador corrige e tenta de novo."""


class LookupUnavailable(IntakeError):
    """Nenhum provedor de CEP respondeu — oferecer preenchimento manual."""


class SubmissionError(IntakeError):
    """Falha terminal de uma submissão."""

    def __init__(self, message: str, state_trail: list[str] | None = None):
        super().__init__(message)
        self.state_trail = state_trail or []


class StorageError(SubmissionError):
    """Anexo não pôde ser decodificado ou gravado."""


class PersistenceTargetMissing(SubmissionError):
    """Tabela de inscrições não encontrada (erro de configuração)."""


class AppendFailure(SubmissionError):
    """Falha ao anexar o registro — o anexo pode ter ficado órfão."""
